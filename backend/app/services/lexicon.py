"""
Subject lexicon: the fixed keyword table the classifier scores against.

A Lexicon is built once (at import for the default, at startup for an
override file) and is read-only afterwards. Subjects keep their declaration
order, which the classifier uses to break ties.
"""
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

GENERAL = "General"


class LexiconError(ValueError):
    """Raised when a lexicon definition is empty or malformed."""


@dataclass(frozen=True, slots=True)
class SubjectEntry:
    name: str
    keywords: frozenset[str]
    patterns: tuple[re.Pattern[str], ...]


def _compile(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(keyword)}\b")


@dataclass(frozen=True, slots=True)
class Lexicon:
    subjects: tuple[SubjectEntry, ...]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> Lexicon:
        entries: list[SubjectEntry] = []
        for name, keywords in mapping.items():
            if not isinstance(name, str) or not name.strip():
                raise LexiconError("Subject names must be non-empty strings")
            if isinstance(keywords, str):
                raise LexiconError(f"Keywords for {name!r} must be a list of strings")
            normalized: list[str] = []
            for kw in keywords:
                if not isinstance(kw, str) or not kw.strip():
                    raise LexiconError(f"Subject {name!r} has an empty or non-string keyword")
                kw = kw.strip().lower()
                if kw not in normalized:
                    normalized.append(kw)
            if not normalized:
                raise LexiconError(f"Subject {name!r} has no keywords")
            entries.append(
                SubjectEntry(
                    name=name.strip(),
                    keywords=frozenset(normalized),
                    patterns=tuple(_compile(kw) for kw in normalized),
                )
            )
        if not entries:
            raise LexiconError("Lexicon must define at least one subject")
        return cls(subjects=tuple(entries))

    @property
    def subject_names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.subjects)


def load_lexicon(path: Path) -> Lexicon:
    """Load a lexicon from a JSON object of ``{subject: [keyword, ...]}``."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise LexiconError(f"Cannot read lexicon file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise LexiconError(f"Lexicon file {path} must contain a JSON object")
    return Lexicon.from_mapping(raw)


# Declaration order is the tie-break order.
SUBJECT_KEYWORDS: dict[str, list[str]] = {
    "Physics": [
        "force", "acceleration", "energy", "gravity", "law", "motion",
        "mass", "velocity", "inertia", "momentum", "speed", "newton",
    ],
    "Biology": [
        "cell", "photosynthesis", "organism", "plant", "animal", "dna",
        "enzyme", "mitosis", "ecology", "evolution",
    ],
    "Chemistry": [
        "atom", "molecule", "reaction", "acid", "base", "compound",
        "element", "periodic", "ph", "stoichiometry", "bond",
    ],
    "Mathematics": [
        "equation", "theorem", "algebra", "geometry", "integration",
        "derivative", "calculus", "matrix", "probability", "statistics",
    ],
    "History": [
        "war", "empire", "king", "revolution", "ancient", "civilization",
        "treaty", "colony", "timeline",
    ],
    "ComputerScience": [
        "algorithm", "data structure", "complexity", "array", "tree", "graph",
        "hash", "database", "sql", "api", "thread", "concurrency",
    ],
}

DEFAULT_LEXICON = Lexicon.from_mapping(SUBJECT_KEYWORDS)

"""
Revision batch sampling.

Builds a bounded, subject-diversified batch from one student's cards:
one card per subject first (in random subject order), then a random fill
from whatever is left, then a final shuffle of the whole batch.
"""
from __future__ import annotations

import logging
import math
import random
import re
from collections.abc import Sequence

from app.models.flashcard import Flashcard, FlashcardOut
from app.services.lexicon import GENERAL

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5
MIN_LIMIT = 1
MAX_LIMIT = 100

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def clamp_limit(raw: object) -> int:
    """Coerce a requested batch size to an int in [MIN_LIMIT, MAX_LIMIT].

    Text is read as a leading integer ("12abc" -> 12, "3.7" -> 3). Missing,
    empty or non-numeric values fall back to DEFAULT_LIMIT before clamping.
    """
    value = DEFAULT_LIMIT
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, float) and math.isfinite(raw):
        value = int(raw)
    elif isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if match:
            value = int(match.group(1))
    return max(MIN_LIMIT, min(MAX_LIMIT, value))


def _group_by_subject(cards: Sequence[Flashcard]) -> dict[str, list[Flashcard]]:
    buckets: dict[str, list[Flashcard]] = {}
    for card in cards:
        buckets.setdefault(card.subject or GENERAL, []).append(card)
    return buckets


def _to_out(card: Flashcard) -> FlashcardOut:
    return FlashcardOut(
        question=card.question,
        answer=card.answer,
        subject=card.subject or GENERAL,
    )


def sample_batch(
    cards: Sequence[Flashcard],
    limit: object = DEFAULT_LIMIT,
    rng: random.Random | None = None,
) -> list[FlashcardOut]:
    """Pick up to ``limit`` cards, preferring one card per subject."""
    limit = clamp_limit(limit)
    if not cards:
        return []

    rng = rng or random.Random()

    buckets = _group_by_subject(cards)
    for bucket in buckets.values():
        rng.shuffle(bucket)

    subjects = list(buckets)
    rng.shuffle(subjects)

    picked: list[Flashcard] = []
    taken: set[str] = set()

    # One per subject
    for subject in subjects:
        if len(picked) >= limit:
            break
        bucket = buckets[subject]
        if not bucket:
            continue
        card = bucket.pop(0)
        if card.id not in taken:
            taken.add(card.id)
            picked.append(card)

    # Fill from the leftovers of every subject
    if len(picked) < limit:
        remaining = [
            card
            for bucket in buckets.values()
            for card in bucket
            if card.id not in taken
        ]
        rng.shuffle(remaining)
        for card in remaining:
            if len(picked) >= limit:
                break
            taken.add(card.id)
            picked.append(card)

    rng.shuffle(picked)
    logger.debug(
        "Sampled %d of %d cards across %d subjects (limit=%d)",
        len(picked), len(cards), len(subjects), limit,
    )
    return [_to_out(card) for card in picked]

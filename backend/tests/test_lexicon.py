import json

import pytest

from app.services.lexicon import (
    DEFAULT_LEXICON,
    SUBJECT_KEYWORDS,
    Lexicon,
    LexiconError,
    load_lexicon,
)


def test_default_lexicon_keeps_declaration_order():
    assert DEFAULT_LEXICON.subject_names == tuple(SUBJECT_KEYWORDS)


def test_keywords_are_normalized_and_deduplicated():
    lexicon = Lexicon.from_mapping({"Biology": ["Cell", "cell ", "DNA"]})
    entry = lexicon.subjects[0]
    assert entry.keywords == frozenset({"cell", "dna"})
    assert len(entry.patterns) == 2


@pytest.mark.parametrize(
    "mapping",
    [
        {},
        {"Physics": []},
        {"Physics": "force"},
        {"Physics": ["force", ""]},
        {"": ["force"]},
    ],
)
def test_rejects_malformed_mapping(mapping):
    with pytest.raises(LexiconError):
        Lexicon.from_mapping(mapping)


def test_load_lexicon_from_file(tmp_path):
    path = tmp_path / "lexicon.json"
    path.write_text(json.dumps({"Music": ["chord", "tempo"], "Art": ["canvas"]}))
    lexicon = load_lexicon(path)
    assert lexicon.subject_names == ("Music", "Art")


def test_load_lexicon_rejects_bad_json(tmp_path):
    path = tmp_path / "lexicon.json"
    path.write_text("[1, 2")
    with pytest.raises(LexiconError, match="Cannot read lexicon file"):
        load_lexicon(path)


def test_load_lexicon_rejects_non_object(tmp_path):
    path = tmp_path / "lexicon.json"
    path.write_text(json.dumps(["force"]))
    with pytest.raises(LexiconError, match="must contain a JSON object"):
        load_lexicon(path)

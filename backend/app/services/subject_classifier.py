from __future__ import annotations

import logging

from app.services.lexicon import DEFAULT_LEXICON, GENERAL, Lexicon

logger = logging.getLogger(__name__)


def score_subjects(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> dict[str, int]:
    """Count whole-word keyword hits per subject. Zero-score subjects are omitted.

    Each keyword counts once no matter how often it appears.
    """
    lowered = text.lower()
    scores: dict[str, int] = {}
    for entry in lexicon.subjects:
        count = sum(1 for pattern in entry.patterns if pattern.search(lowered))
        if count > 0:
            scores[entry.name] = count
    return scores


def classify(text: object, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Infer a subject label for a question; "General" when nothing matches.

    Ties go to the subject declared first in the lexicon.
    """
    if not isinstance(text, str) or not text.strip():
        return GENERAL

    scores = score_subjects(text, lexicon)
    if not scores:
        return GENERAL

    # dicts keep lexicon order and max() returns the first maximal item
    subject = max(scores, key=scores.__getitem__)
    logger.debug("Classified as %s (scores=%s)", subject, scores)
    return subject

"""
Flashcard router.

Endpoints:
  POST /flashcard      — store a card, subject inferred from the question
  GET  /get-subject    — mixed-subject revision batch for one student
"""
from __future__ import annotations

import logging
import random
from typing import Any

import aiosqlite
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request

from app.db.sqlite import find_flashcards_by_student, get_db, insert_flashcard
from app.models.flashcard import FlashcardCreate, FlashcardCreated, FlashcardOut
from app.services.batch_sampler import clamp_limit, sample_batch
from app.services.lexicon import DEFAULT_LEXICON, Lexicon
from app.services.subject_classifier import classify

logger = logging.getLogger(__name__)
router = APIRouter()


CREATE_FIELDS_REQUIRED = "student_id, question and answer are required"


def get_lexicon(request: Request) -> Lexicon:
    return getattr(request.app.state, "lexicon", DEFAULT_LEXICON)


def get_rng() -> random.Random:
    """Fresh random source per request; tests override this with a seeded one."""
    return random.Random()


def _clean(value: Any) -> str:
    """Stripped text for strings and numbers; "" for anything else."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


@router.post("/flashcard", response_model=FlashcardCreated)
async def add_flashcard(
    body: FlashcardCreate | None = Body(default=None),
    db: aiosqlite.Connection = Depends(get_db),
    lexicon: Lexicon = Depends(get_lexicon),
) -> FlashcardCreated:
    """Store a flashcard and report the subject it was filed under."""
    body = body or FlashcardCreate()
    student_id = _clean(body.student_id)
    question = _clean(body.question)
    answer = _clean(body.answer)
    if not student_id or not question or not answer:
        raise HTTPException(status_code=400, detail=CREATE_FIELDS_REQUIRED)

    if isinstance(body.question, str):
        question = body.question
    if isinstance(body.answer, str):
        answer = body.answer

    subject = classify(question, lexicon)
    await insert_flashcard(db, student_id, question, answer, subject)
    logger.info("Stored flashcard for student %s as %s", student_id, subject)
    return FlashcardCreated(message="Flashcard added successfully", subject=subject)


@router.get("/get-subject", response_model=list[FlashcardOut])
async def get_revision_batch(
    student_id: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    db: aiosqlite.Connection = Depends(get_db),
    rng: random.Random = Depends(get_rng),
) -> list[FlashcardOut]:
    """Return up to `limit` cards, one per subject first, in random order."""
    student_id = _clean(student_id)
    if not student_id:
        raise HTTPException(
            status_code=400, detail="student_id is required as query param"
        )

    batch_size = clamp_limit(limit)
    cards = await find_flashcards_by_student(db, student_id)
    if not cards:
        return []
    return sample_batch(cards, batch_size, rng=rng)

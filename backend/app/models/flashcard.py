from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class FlashcardCreate(BaseModel):
    # untyped so presence and type are both checked in the router (400)
    student_id: Any = None
    question: Any = None
    answer: Any = None


class Flashcard(BaseModel):
    id: str
    student_id: str
    question: str
    answer: str
    subject: str    # lexicon subject or "General"; fixed at creation
    created_at: str


class FlashcardCreated(BaseModel):
    message: str
    subject: str


class FlashcardOut(BaseModel):
    question: str
    answer: str
    subject: str

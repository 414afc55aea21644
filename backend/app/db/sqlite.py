import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

from app.config import settings
from app.models.flashcard import Flashcard

_db_path: Path | None = None

SCHEMA_SQL = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS flashcards (
    id          TEXT PRIMARY KEY,
    student_id  TEXT NOT NULL,
    question    TEXT NOT NULL,
    answer      TEXT NOT NULL,
    subject     TEXT NOT NULL,
    created_at  TEXT NOT NULL DEFAULT (datetime('now'))
);
CREATE INDEX IF NOT EXISTS idx_flashcards_student ON flashcards(student_id);
CREATE INDEX IF NOT EXISTS idx_flashcards_subject ON flashcards(subject);

CREATE TABLE IF NOT EXISTS schema_version (
    version    INTEGER PRIMARY KEY,
    applied_at TEXT NOT NULL DEFAULT (datetime('now'))
);
INSERT OR IGNORE INTO schema_version(version) VALUES (1);
"""


class StorageError(Exception):
    """Raised when the flashcard store cannot be read or written."""


async def init_sqlite(data_dir: Path) -> None:
    global _db_path
    _db_path = data_dir / settings.sqlite_filename
    async with aiosqlite.connect(_db_path) as db:
        await db.executescript(SCHEMA_SQL)
        await db.commit()


async def get_db() -> AsyncIterator[aiosqlite.Connection]:
    assert _db_path is not None, "SQLite not initialized"
    try:
        db = await aiosqlite.connect(_db_path)
    except aiosqlite.Error as exc:
        raise StorageError(f"Failed to open database {_db_path}: {exc}") from exc
    try:
        db.row_factory = aiosqlite.Row
        yield db
    finally:
        await db.close()


def _now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def _row_to_flashcard(row: aiosqlite.Row) -> Flashcard:
    return Flashcard(**dict(row))


async def insert_flashcard(
    db: aiosqlite.Connection,
    student_id: str,
    question: str,
    answer: str,
    subject: str,
) -> Flashcard:
    card = Flashcard(
        id=str(uuid.uuid4()),
        student_id=student_id,
        question=question,
        answer=answer,
        subject=subject,
        created_at=_now(),
    )
    try:
        await db.execute(
            """INSERT INTO flashcards
               (id, student_id, question, answer, subject, created_at)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (
                card.id,
                card.student_id,
                card.question,
                card.answer,
                card.subject,
                card.created_at,
            ),
        )
        await db.commit()
    except aiosqlite.Error as exc:
        raise StorageError(f"Failed to insert flashcard: {exc}") from exc
    return card


async def find_flashcards_by_student(
    db: aiosqlite.Connection, student_id: str
) -> list[Flashcard]:
    """Return every card the student owns, oldest first."""
    try:
        cursor = await db.execute(
            "SELECT * FROM flashcards WHERE student_id = ? ORDER BY created_at ASC, rowid ASC",
            (student_id,),
        )
        rows = await cursor.fetchall()
    except aiosqlite.Error as exc:
        raise StorageError(f"Failed to load flashcards: {exc}") from exc
    return [_row_to_flashcard(r) for r in rows]

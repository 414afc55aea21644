from app.models.flashcard import (
    Flashcard,
    FlashcardCreate,
    FlashcardCreated,
    FlashcardOut,
)

__all__ = [
    "Flashcard",
    "FlashcardCreate",
    "FlashcardCreated",
    "FlashcardOut",
]

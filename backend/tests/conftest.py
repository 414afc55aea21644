import pytest
from fastapi.testclient import TestClient

from app import create_app
from app.config import settings
from app.models.flashcard import Flashcard


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "data_dir", tmp_path)
    monkeypatch.setattr(settings, "lexicon_path", None)
    return tmp_path


@pytest.fixture
def client(data_dir):
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def make_card():
    counter = iter(range(1_000_000))

    def _make(subject: str, student_id: str = "stu001") -> Flashcard:
        n = next(counter)
        return Flashcard(
            id=f"card-{n}",
            student_id=student_id,
            question=f"{subject} question {n}",
            answer=f"answer {n}",
            subject=subject,
            created_at="2024-01-01 00:00:00",
        )

    return _make

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / ".flashcards" / "data"
    sqlite_filename: str = "flashcards.db"
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "info"
    lexicon_path: Path | None = None  # JSON {subject: [keywords]}; None = built-in
    cors_origins: list[str] = ["*"]

    model_config = {"env_prefix": "FLASHCARDS_", "env_file": ".env", "extra": "ignore"}


settings = Settings()

# backend/economy/core/config.py
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

SEED_DIR = Path(__file__).resolve().parent.parent / "seeds"
DEFAULT_DATABASE_URL = "postgresql://user:password@db/economy_db"


class Settings(BaseSettings):
    PROJECT_NAME: str = "Game Economy API"
    API_PREFIX: str = ""

    DATABASE_URL: Optional[str] = DEFAULT_DATABASE_URL
    DB_CONNECT_RETRIES: int = 10
    DB_RETRY_DELAY: float = 5.0  # seconds

    # Shared secret every caller must present as `passKey`. CHANGE THIS IN PRODUCTION!
    AUTH_PASS_KEY: str = "change-me"

    # Directory holding rarities.json and types.json
    REFERENCE_DATA_DIR: Path = SEED_DIR

    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()

if settings.DATABASE_URL == DEFAULT_DATABASE_URL:
    # The logger is not configured yet when settings are first imported
    print(f"WARNING: DATABASE_URL not set in the environment or .env, using the default ({settings.DATABASE_URL}).")

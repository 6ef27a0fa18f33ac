# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    APP_TITLE: str = "Stock Ledger API"
    DATABASE_URL: str = "sqlite:///./stock_ledger.db"
    LOG_LEVEL: str = "INFO"

    # Extra origin allowed by CORS (the single-page UI)
    FRONTEND_URL: Optional[str] = None

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()

import os
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables from env/.env and .env, if present
_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(_ROOT / "env" / ".env")
load_dotenv(_ROOT / ".env")

def _csv(value: Optional[str]) -> List[str]:
    """
    Split a comma-separated environment value into a clean list.
    """
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]

def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)

def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    """
    Read an integer environment variable; a malformed value names the variable.
    """
    raw = os.getenv(name)
    try:
        value = _optional_int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    return default if value is None else value

class Settings(BaseModel):
    openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY")
    llm_model: str = os.getenv("LLM_MODEL", "gpt-3.5-turbo")
    mongodb_uri: Optional[str] = os.getenv("MONGODB_URI")
    mongodb_db: str = os.getenv("MONGODB_DB", "guiderbooks")
    cors_origins: List[str] = Field(
        default_factory=lambda: _csv(os.getenv("CORS_ORIGINS", "https://Guiderbooksai.netlify.app"))
    )
    max_content_chars: Optional[int] = _env_int("MAX_CONTENT_CHARS")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    port: int = _env_int("PORT", 5050)
    debug: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")


# Singleton instance for app-wide settings
settings = Settings()

import logging
import sys
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    PROJECT_NAME: str = "Resume Analyzer"
    API_PREFIX: str = "/api"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    LLM_PROVIDER: str = "llama_index.llms.google_genai.GoogleGenAI"
    LL_MODEL: str = "gemini-1.5-flash"
    LLM_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("LLM_API_KEY", "GEMINI_API_KEY"),
    )
    LLM_BASE_URL: Optional[str] = None
    LLM_TEMPERATURE: float = 0.2
    LLM_MAX_TOKENS: int = 4096
    LLM_TIMEOUT_SECONDS: float = 30.0

    MAX_FILE_SIZE: int = 5 * 1024 * 1024
    EXTRACTION_CACHE_SIZE: int = Field(default=50, gt=0)
    ALLOWED_FILE_TYPES: List[str] = [".pdf", ".docx", ".txt"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def ai_enabled(self) -> bool:
        # ollama runs locally and needs no credential
        return bool(self.LLM_API_KEY) or self.LLM_PROVIDER == "ollama"


settings = Settings()


def validate_settings(config: Settings = settings) -> List[str]:
    """Log and return configuration warnings."""
    warnings = []
    if not config.ai_enabled:
        warnings.append("LLM_API_KEY not set - AI analysis will not be available")
    for warning in warnings:
        logger.warning(f"Configuration warning: {warning}")
    return warnings


def setup_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )

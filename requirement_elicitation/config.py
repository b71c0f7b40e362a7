"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.

The generation strategies never read the environment themselves: they are
handed a `GenerationConfig` built from these settings at construction time.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings

_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


class GenerationConfig(BaseModel):
    """Everything the remote generation call needs, frozen at construction."""

    api_key: str = ""
    model: str = "gemini-1.5-flash-latest"
    base_url: str = _GEMINI_BASE_URL
    temperature: float = 0.7
    max_output_tokens: int = 1000
    top_p: float = 0.8
    top_k: int = 40
    timeout_seconds: float = 20.0
    history_window: int = 5
    segmentation: Literal["sentence", "message"] = "sentence"

    model_config = {"frozen": True}

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key.strip())

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.model}:generateContent"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "Requirement Elicitation Assistant"
    debug: bool = False

    # ── Generation ───────────────────────────────────────
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash-latest"
    gemini_base_url: str = _GEMINI_BASE_URL
    generation_temperature: float = 0.7
    generation_max_output_tokens: int = 1000
    generation_top_p: float = 0.8
    generation_top_k: int = 40
    generation_timeout_seconds: float = 20.0
    history_window: int = 5
    segmentation: Literal["sentence", "message"] = "sentence"
    random_seed: Optional[int] = None  # pins the clarifying-question pick

    # ── Integrations ─────────────────────────────────────
    trello_api_key: str = ""
    integration_timeout_seconds: float = 15.0

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    def generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            api_key=self.gemini_api_key,
            model=self.gemini_model,
            base_url=self.gemini_base_url,
            temperature=self.generation_temperature,
            max_output_tokens=self.generation_max_output_tokens,
            top_p=self.generation_top_p,
            top_k=self.generation_top_k,
            timeout_seconds=self.generation_timeout_seconds,
            history_window=self.history_window,
            segmentation=self.segmentation,
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()

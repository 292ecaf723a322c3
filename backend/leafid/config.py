"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

_STATIC_DIR = Path(__file__).parent / "static"


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    leafid_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Vision model
    model_vision: str = "claude-sonnet-4-5-20250929"
    llm_max_tokens: int = 2048
    llm_timeout: float | None = None

    # Upload policy: 20 MiB
    max_upload_bytes: int = 20 * 1024 * 1024

    # Startup content
    default_image_path: Path = _STATIC_DIR / "default-leaf.png"
    bootstrap_on_startup: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()

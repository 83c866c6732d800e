"""Application configuration via pydantic-settings.

Values come from the environment, then from ``.env`` files. The source
checkout's ``.env`` is read first and a ``.env`` in the working directory
overrides it, so an installed package is configured from where it is run.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root of a source checkout (this file lives at backend/speaker_webui/config.py)
_ROOT_DIR = Path(__file__).resolve().parent.parent.parent

# Later files take priority
_ENV_FILES = (str(_ROOT_DIR / ".env"), ".env")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_ENV_FILES, env_file_encoding="utf-8", extra="ignore")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Logging
    LOG_LEVEL: str = "INFO"

    APP_TITLE: str = "Speaker Controller Web UI"


def _build_settings() -> Settings:
    """Build settings, normalising the log level name."""
    s = Settings()
    s.LOG_LEVEL = s.LOG_LEVEL.upper()
    return s


settings = _build_settings()

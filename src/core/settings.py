from __future__ import annotations

import logging
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .dotenv import load_dotenv


logger = logging.getLogger(__name__)


class AppSettings(BaseSettings):
    """
    Central settings for the calculator.
    - Loads from environment variables (optionally from a dotenv file).
    - Shared by the HTTP server and the interactive REPL.
    """

    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    # ---- dotenv ----
    dotenv_path: str = Field(default=".env", validation_alias="CALC_ENV_FILE")

    # ---- server ----
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8080, ge=1, le=65535, validation_alias="PORT")
    cors_origins: str = Field(default="", validation_alias="CORS_ORIGINS")

    # ---- calculation ----
    max_expression_length: int = Field(default=1024, ge=1, validation_alias="MAX_EXPRESSION_LENGTH")

    # ---- logging ----
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: str = Field(default="logs", validation_alias="LOG_DIR")
    log_file: str = Field(default="calc.log", validation_alias="LOG_FILE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, ge=1, validation_alias="LOG_MAX_BYTES")
    log_backup_count: int = Field(default=5, ge=0, validation_alias="LOG_BACKUP_COUNT")
    log_console_output: bool = Field(default=True, validation_alias="LOG_CONSOLE_OUTPUT")

    def bind_address(self) -> str:
        return f"{self.host}:{self.port}"


def load_settings() -> AppSettings:
    dotenv_path = os.getenv("CALC_ENV_FILE", ".env")
    if not load_dotenv(dotenv_path, override=False):
        logger.warning(f"⚠️ [配置] dotenv file not found: {dotenv_path}, using environment only")

    return AppSettings()

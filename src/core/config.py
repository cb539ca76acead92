"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Nada de lo que se configura cambia la semántica read -> mkdir; solo el
  entorno (logging, decodificación de stdin, código de salida).
"""

from __future__ import annotations

import codecs
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "mkdir-stdin"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "mkdir-stdin"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "mkdir-stdin"
    return Path.home() / ".config" / "mkdir-stdin"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="MKDIR_STDIN_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero, luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (stderr).",
    )
    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Codificación usada para decodificar la línea leída de stdin.",
    )
    read_failure_exit_code: int = Field(
        default=101,
        ge=1,
        le=255,
        description="Código de salida cuando no se puede leer stdin.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc

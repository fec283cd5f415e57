"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y la CLI lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "quotecard"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "quotecard"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "quotecard"
    return Path.home() / ".config" / "quotecard"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# quotecard user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUOTECARD_",
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    def __init__(self, **values: Any) -> None:
        # Orden: proyecto primero (dev), luego config global de usuario (gana el último).
        # Se resuelve por instancia, no al importar el módulo.
        values.setdefault("_env_file", (".env", get_user_env_file()))
        super().__init__(**values)

    base_url: str = Field(
        default="https://dummyjson.com",
        min_length=8,
        description="Base URL del servicio de quotes (sirve GET /quotes/{id}).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="quotecard/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )
    default_quote_id: int = Field(
        default=1,
        ge=0,
        description="Quote que se muestra cuando no se pasa un id explícito.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Formato de salida de logs: 'console' (humano) o 'json'.",
    )

"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (red/remotes) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "woo-remote"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "woo-remote"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "woo-remote"
    return Path.home() / ".config" / "woo-remote"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """`KEY=value` por línea; ignora comentarios, líneas vacías y comillas envolventes."""

    parsed: dict[str, str] = {}
    for line in (raw.strip() for raw in text.splitlines()):
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if sep and key.strip():
            parsed[key.strip()] = value.strip().strip("\"'")
    return parsed


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Fusiona `values` en el .env de usuario (un `None` conserva el valor previo)."""

    target = env_path or get_user_env_file()
    current = _parse_env_lines(target.read_text(encoding="utf-8")) if target.exists() else {}
    current.update((key, value) for key, value in values.items() if value is not None)

    body = "".join(f"{key}={current[key]}\n" for key in sorted(current))
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text("# woo-remote user config (.env)\n" + body, encoding="utf-8")
    return target


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Un único contrato de configuración para CLI, red y remotes.
    """

    model_config = SettingsConfigDict(
        env_prefix="WOO_REMOTE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    dotcom_base_url: str = Field(
        default="https://public-api.wordpress.com",
        min_length=8,
        description="Base URL de la API REST de WordPress.com (túnel Jetpack incluido).",
    )
    auth_token: str | None = Field(
        default=None,
        description="Bearer token de WordPress.com usado en todas las peticiones.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="woo-remote/0.1",
        min_length=1,
        description="User-Agent enviado al backend.",
    )
    default_page_size: int = Field(
        default=25,
        ge=1,
        le=100,
        description="Tamaño de página por defecto para listados (productos/pedidos).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs como líneas JSON en lugar del renderer de consola.",
    )

    @property
    def rest_root(self) -> str:
        """Base URL sin barra final, lista para concatenar rutas versionadas."""

        return self.dotcom_base_url.rstrip("/")

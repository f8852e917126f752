"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI ni
los servicios: la ventana promocional, el idioma por defecto, el nivel de log
y el directorio de reportes.
"""

from __future__ import annotations

import os
import sys
from datetime import date
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language
from core.services.discounts import DEFAULT_PROMOTION_WINDOW, PromotionWindow


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "vetdesk"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "vetdesk"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "vetdesk"
    return Path.home() / ".config" / "vetdesk"


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


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# vetdesk user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Orden de carga: variables de entorno `VETDESK_*`, luego `.env` del
    proyecto y por último el `.env` global del usuario.
    """

    model_config = SettingsConfigDict(
        env_prefix="VETDESK_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    promo_start: date = Field(
        default=DEFAULT_PROMOTION_WINDOW.start,
        description="Primer día (inclusive) de la ventana promocional.",
    )
    promo_end: date = Field(
        default=DEFAULT_PROMOTION_WINDOW.end,
        description="Último día (inclusive) de la ventana promocional.",
    )

    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Idioma por defecto para mensajes y reportes (en/es).",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    reports_dir: Path = Field(
        default=Path("reports"),
        description="Directorio por defecto para exportaciones JSON/HTML.",
    )

    @model_validator(mode="after")
    def _check_promo_window(self) -> "AppSettings":
        if self.promo_start > self.promo_end:
            raise ValueError("promo_start must not be after promo_end")
        return self

    def promotion_window(self) -> PromotionWindow:
        return PromotionWindow(start=self.promo_start, end=self.promo_end)

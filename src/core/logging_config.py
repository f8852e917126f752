"""Logging centralizado.

Usage:
    from core.logging_config import setup_logging, get_logger

    setup_logging("DEBUG")          # una vez, desde la CLI
    logger = get_logger(__name__)   # en cualquier módulo
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER_NAME = "vetdesk"
_HANDLER_NAME = "vetdesk-rich"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.WARNING)


def setup_logging(level: int | str = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Configura el logger raíz de la aplicación con un `RichHandler` en stderr.

    Es idempotente: llamadas sucesivas solo ajustan el nivel.
    """

    resolved = _resolve_level(level)
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(resolved)
    root.propagate = False

    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
    handler.setLevel(resolved)
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger hijo de `vetdesk` para el módulo dado."""

    if name == _ROOT_LOGGER_NAME or name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")

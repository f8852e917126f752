"""Normalización de entradas en el borde.

Cada parser es total: ante texto inválido devuelve el valor por defecto
documentado en lugar de lanzar. Así las entidades llegan al Core ya bien
formadas.

Defaults:
- edad -> 0
- peso -> 1.0
- precio -> el default que indique el llamador
- número de mascotas -> 1
- fecha -> None (el llamador sustituye "hoy")
"""

from __future__ import annotations

import re
from datetime import date, datetime

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
DATE_FORMAT = "%d/%m/%Y"
QUANTITY_RANGE = range(1, 101)

DEFAULT_AGE = 0
DEFAULT_WEIGHT = 1.0
DEFAULT_PET_COUNT = 1


def _to_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _to_float(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw.strip().replace(",", "."))
    except ValueError:
        return None
    if value != value or value in (float("inf"), float("-inf")):
        return None
    return value


def text_or_default(raw: str | None, default: str) -> str:
    if raw is None:
        return default
    stripped = raw.strip()
    return stripped or default


def parse_age(raw: str | None) -> int:
    value = _to_int(raw)
    return value if value is not None and value >= 0 else DEFAULT_AGE


def parse_weight(raw: str | None) -> float:
    value = _to_float(raw)
    return value if value is not None and value > 0 else DEFAULT_WEIGHT


def parse_price(raw: str | None, default: float) -> float:
    value = _to_float(raw)
    return value if value is not None and value > 0 else default


def parse_pet_count(raw: str | None) -> int:
    value = _to_int(raw)
    return value if value is not None and value > 0 else DEFAULT_PET_COUNT


def parse_date(raw: str | None) -> date | None:
    """Parsea `DD/MM/YYYY`. Devuelve None si no es una fecha válida."""

    if not raw:
        return None
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))


def is_valid_quantity(quantity: int) -> bool:
    return quantity in QUANTITY_RANGE


def format_phone(phone: str) -> str:
    """Normaliza un teléfono a `+CC (AAA) XXX-XXXX`.

    Con menos de 8 dígitos se devuelve el texto original sin tocar. Los
    números de 8 a 10 dígitos se asumen chilenos (+56).
    """

    digits = "".join(ch for ch in phone if ch.isdigit() and ch.isascii())
    n = len(digits)
    if n < 8:
        return phone
    if n >= 11:
        return f"+{digits[0:2]} ({digits[2:5]}) {digits[5:8]}-{digits[8:12]}"
    if n == 10:
        return f"+56 ({digits[0:3]}) {digits[3:6]}-{digits[6:10]}"
    if n == 9:
        return f"+56 ({digits[0:3]}) {digits[3:6]}-{digits[6:9]}"
    return f"+56 ({digits[0:2]}) {digits[2:5]}-{digits[5:8]}"

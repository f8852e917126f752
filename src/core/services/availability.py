"""Veterinarian availability check.

The decision rule is a single constant: a requested time is available iff
the hour before the first ``:`` parses as an integer within
``BUSINESS_HOURS`` (09 through 17, inclusive). Minutes are ignored, so
``"17:59"`` is still available and ``"18:00"`` is not.

Parsing never raises; anything unparseable is simply "not available".
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from core.domain.language import Language
from core.logging_config import get_logger

logger = get_logger(__name__)

BUSINESS_HOURS = range(9, 18)
SUGGESTED_WINDOWS: tuple[tuple[str, str], ...] = (("09:00", "12:00"), ("14:00", "17:00"))


class OrderStatus(str, Enum):
    CONFIRMED = "confirmed"
    PENDING = "pending"

    def label(self, language: Language = Language.ENGLISH) -> str:
        if self is OrderStatus.CONFIRMED:
            return language.pick("Confirmed", "Confirmada")
        return language.pick("Pending", "Pendiente")


@dataclass(frozen=True)
class AvailabilityResult:
    """Verdict plus a human readable message for the boundary."""

    available: bool
    message: str

    @property
    def status(self) -> OrderStatus:
        return OrderStatus.CONFIRMED if self.available else OrderStatus.PENDING


def parse_hour(time_of_day: str) -> int | None:
    """Extract the hour from an ``HH:MM`` string, or ``None``."""

    if not isinstance(time_of_day, str):
        return None
    head, sep, _ = time_of_day.partition(":")
    if not sep:
        return None
    head = head.strip()
    if not (head.isascii() and head.isdigit()):
        return None
    return int(head)


def is_available(time_of_day: str | int) -> bool:
    if isinstance(time_of_day, int) and not isinstance(time_of_day, bool):
        return time_of_day in BUSINESS_HOURS
    hour = parse_hour(time_of_day)
    return hour is not None and hour in BUSINESS_HOURS


def business_hours_label() -> str:
    return f"{BUSINESS_HOURS.start:02d}:00 - {BUSINESS_HOURS.stop - 1:02d}:00"


def order_status(time_of_day: str | int) -> OrderStatus:
    return OrderStatus.CONFIRMED if is_available(time_of_day) else OrderStatus.PENDING


def _confirmation_message(time_of_day: str, requested_date: str, language: Language) -> str:
    lines = [
        language.pick("✓ CONSULTATION CONFIRMED", "✓ CONSULTA CONFIRMADA"),
        language.pick(f"Date: {requested_date}", f"Fecha: {requested_date}"),
        language.pick(f"Time: {time_of_day}", f"Hora: {time_of_day}"),
        "",
        language.pick(
            "Please arrive 10 minutes before your appointment.",
            "Por favor, llegue 10 minutos antes de su cita.",
        ),
    ]
    return "\n".join(lines)


def _rejection_message(language: Language) -> str:
    morning, afternoon = SUGGESTED_WINDOWS
    lines = [
        language.pick("✗ VETERINARIAN NOT AVAILABLE", "✗ VETERINARIO NO DISPONIBLE"),
        language.pick(
            "Sorry, the veterinarian is not available at the requested time.",
            "Lo sentimos, el veterinario no está disponible en el horario solicitado.",
        ),
        language.pick(
            f"Business hours: {business_hours_label()}",
            f"Horarios disponibles: {business_hours_label()}",
        ),
        "",
        language.pick("Suggested times:", "Horarios sugeridos:"),
        language.pick(f"- Morning: {morning[0]} - {morning[1]}", f"- Mañana: {morning[0]} - {morning[1]}"),
        language.pick(f"- Afternoon: {afternoon[0]} - {afternoon[1]}", f"- Tarde: {afternoon[0]} - {afternoon[1]}"),
        "",
        language.pick(
            "Please contact the front desk to reschedule.",
            "Por favor, contacte con recepción para reagendar.",
        ),
    ]
    return "\n".join(lines)


def check_availability(
    time_of_day: str,
    requested_date: date | str | None = None,
    *,
    language: Language = Language.ENGLISH,
) -> AvailabilityResult:
    """Decide availability for ``time_of_day`` and build the matching message."""

    available = is_available(time_of_day)
    logger.debug("availability for %r: %s", time_of_day, available)

    if not available:
        return AvailabilityResult(available=False, message=_rejection_message(language))

    if isinstance(requested_date, date):
        date_text = requested_date.strftime("%d/%m/%Y")
    else:
        date_text = requested_date or language.pick("not specified", "no especificada")
    return AvailabilityResult(
        available=True,
        message=_confirmation_message(time_of_day, date_text, language),
    )

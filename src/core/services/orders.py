"""Consultation order assembly.

Pricing formula::

    consultation_fee = BASE_FEE * (1 - multi_pet_discount(pet_count))
    total            = consultation_fee + total_with_promotions(medications)

The date promotion is a separate, later step (`apply_date_promotion`) that
reduces the whole total. Combining two orders only adds their totals; no
discount is reapplied.

Ids and timestamps come from a `StampProvider` so every operation here is
deterministic under test.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Sequence

from core.domain.language import Language
from core.domain.models import Client, ConsultationOrder, MedicationItem, Pet
from core.logging_config import get_logger
from core.services.discounts import (
    DEFAULT_PROMOTION_WINDOW,
    PromotionWindow,
    apply_promotional_discount,
    multi_pet_discount,
    total_with_promotions,
)

logger = get_logger(__name__)

BASE_FEE = 30000.0
ORDER_ID_RANGE = (1000, 9999)


def _random_order_id() -> int:
    return random.randint(*ORDER_ID_RANGE)


@dataclass(frozen=True)
class StampProvider:
    """Source of order ids and creation timestamps."""

    next_id: Callable[[], int] = field(default=_random_order_id)
    now: Callable[[], datetime] = field(default=datetime.now)


def default_stamps() -> StampProvider:
    return StampProvider()


def consultation_fee(pet_count: int, base_fee: float = BASE_FEE) -> float:
    return base_fee * (1 - multi_pet_discount(pet_count))


def build_order(
    client: Client,
    pet: Pet,
    medications: Sequence[MedicationItem] = (),
    description: str = "General consultation",
    pet_count: int = 1,
    *,
    base_fee: float = BASE_FEE,
    stamps: StampProvider | None = None,
) -> ConsultationOrder:
    """Price a new consultation order."""

    stamps = stamps or default_stamps()
    fee = consultation_fee(pet_count, base_fee)
    subtotal = total_with_promotions(medications)
    order = ConsultationOrder(
        id=stamps.next_id(),
        client=client,
        pet=pet,
        medications=tuple(medications),
        description=description,
        created_at=stamps.now(),
        total=fee + subtotal,
    )
    logger.debug(
        "built order #%s: fee=%.2f medications=%.2f total=%.2f",
        order.id,
        fee,
        subtotal,
        order.total,
    )
    return order


def apply_date_promotion(
    order: ConsultationOrder,
    on_date: date,
    window: PromotionWindow = DEFAULT_PROMOTION_WINDOW,
    *,
    language: Language = Language.ENGLISH,
) -> ConsultationOrder:
    """Reduce the whole order total when ``on_date`` falls in ``window``.

    Outside the window the very same ``order`` object is returned. Inside it,
    a copy keeps id, client, pet, medications and ``created_at``; only
    ``total`` and ``description`` change.
    """

    total, fraction = apply_promotional_discount(order.total, on_date, window)
    if fraction <= 0:
        return order

    percent = int(round(fraction * 100))
    note = language.pick(f"[Promotional discount: {percent}%]", f"[Descuento promocional: {percent}%]")
    return order.model_copy(update={"total": total, "description": f"{order.description} {note}"})


def combine(
    left: ConsultationOrder,
    right: ConsultationOrder,
    *,
    stamps: StampProvider | None = None,
) -> ConsultationOrder:
    """Merge two priced orders.

    Client and pet come from ``left`` only, so ``combine(a, b)`` and
    ``combine(b, a)`` generally differ.
    """

    stamps = stamps or default_stamps()
    merged = ConsultationOrder(
        id=stamps.next_id(),
        client=left.client,
        pet=left.pet,
        medications=left.medications + right.medications,
        description=f"{left.description} + {right.description}",
        created_at=stamps.now(),
        total=left.total + right.total,
    )
    logger.debug("combined orders #%s + #%s into #%s", left.id, right.id, merged.id)
    return merged

"""Discount engine.

Three independent discount sources, each a fraction in ``[0, 1]``:

- multi-pet: reduces the consultation base fee when more than one pet is
  served in the same order;
- promotional date window: reduces the whole, already-priced order total;
- per-medication promotional tag: reduces a single item's unit price.

A fraction of ``0.0`` means "no discount"; it is never absent.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, NamedTuple, Sequence

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.models import MedicationItem
from core.logging_config import get_logger

logger = get_logger(__name__)

MULTI_PET_DISCOUNT = 0.15
PROMOTIONAL_DISCOUNT = 0.15


class PromotionWindow(BaseModel):
    """Inclusive calendar range during which the date promotion applies."""

    model_config = ConfigDict(frozen=True)

    start: date = Field(..., description="First promotional day (inclusive).")
    end: date = Field(..., description="Last promotional day (inclusive).")

    @model_validator(mode="after")
    def _check_order(self) -> "PromotionWindow":
        if self.start > self.end:
            raise ValueError("promotion window start must not be after its end")
        return self

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


DEFAULT_PROMOTION_WINDOW = PromotionWindow(start=date(2024, 12, 1), end=date(2024, 12, 31))


class PricedItem(NamedTuple):
    """Unit price of a medication after its promotional tag."""

    final_price: float
    discount_fraction: float


def multi_pet_discount(pet_count: int) -> float:
    return MULTI_PET_DISCOUNT if pet_count > 1 else 0.0


def promotional_discount(day: date, window: PromotionWindow = DEFAULT_PROMOTION_WINDOW) -> float:
    return PROMOTIONAL_DISCOUNT if window.contains(day) else 0.0


def apply_promotional_discount(
    amount: float,
    day: date,
    window: PromotionWindow = DEFAULT_PROMOTION_WINDOW,
) -> tuple[float, float]:
    """Apply the date promotion to ``amount``.

    Returns ``(final_amount, fraction)``; ``fraction`` is ``0.0`` outside the
    window, in which case ``final_amount == amount``.
    """

    fraction = promotional_discount(day, window)
    final = amount * (1 - fraction)
    logger.debug("date promotion on %s: %.2f -> %.2f (%.0f%%)", day, amount, final, fraction * 100)
    return final, fraction


def is_promotional(item: MedicationItem) -> bool:
    return item.is_promotional


def promotional_items(items: Iterable[MedicationItem]) -> list[MedicationItem]:
    """Items carrying a promotional tag, in their original order."""

    return [item for item in items if item.is_promotional]


def calculate_discounted_price(item: MedicationItem) -> PricedItem:
    fraction = item.discount_fraction
    return PricedItem(final_price=item.price * (1 - fraction), discount_fraction=fraction)


def total_with_promotions(items: Sequence[MedicationItem]) -> float:
    """Medication subtotal with each item's tag applied to its own unit price."""

    return sum((calculate_discounted_price(item).final_price for item in items), 0.0)

"""Duplicate detection over identity-comparable entities.

`partition` keeps the first occurrence of every identity and routes every
later occurrence to ``duplicates``. Both lists preserve the original
relative order. Membership uses the entities' own ``__eq__``/``__hash__``,
which for `Client` and `MedicationItem` only look at their identity fields.
"""

from __future__ import annotations

from typing import Any, Iterable, NamedTuple, TypeVar

from core.domain.models import Client, MedicationItem
from core.interfaces.identity import IdentityComparable
from core.logging_config import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=IdentityComparable)


class Partition(NamedTuple):
    uniques: list[Any]
    duplicates: list[Any]


def partition(items: Iterable[E]) -> Partition:
    seen: set[E] = set()
    uniques: list[E] = []
    duplicates: list[E] = []
    for item in items:
        if item in seen:
            duplicates.append(item)
            continue
        seen.add(item)
        uniques.append(item)
    logger.debug(
        "partitioned %d items: %d unique, %d duplicate",
        len(uniques) + len(duplicates),
        len(uniques),
        len(duplicates),
    )
    return Partition(uniques=uniques, duplicates=duplicates)


def detect_duplicate_clients(clients: Iterable[Client]) -> Partition:
    return partition(clients)


def detect_duplicate_medications(medications: Iterable[MedicationItem]) -> Partition:
    return partition(medications)

"""Contrato de identidad para la detección de duplicados.

Protocol estructural: cualquier entidad hashable que exponga
`identity_key()` puede pasar por `core.services.duplicates.partition`.
"""

from __future__ import annotations

from typing import Hashable, Protocol, runtime_checkable


@runtime_checkable
class IdentityComparable(Protocol):
    """Entidad cuya igualdad se restringe a un subconjunto de campos.

    Reglas:
    - `__eq__` y `__hash__` deben ser coherentes con `identity_key()`.
    - Campos fuera de la clave no influyen en la igualdad.
    """

    def identity_key(self) -> tuple[Hashable, ...]:
        """Tupla con los campos que definen la identidad."""

        ...

    def __hash__(self) -> int: ...

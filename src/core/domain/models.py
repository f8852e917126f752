"""Modelos del dominio (Pydantic v2).

Reglas:
- Todas las entidades son inmutables (`frozen=True`); cualquier "cambio" sobre
  una consulta produce una instancia nueva.
- `Client` y `MedicationItem` comparan y hashean solo su subconjunto de
  identidad; el resto de campos no participa en la detección de duplicados.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se captura ni
  cómo se presenta.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Client(BaseModel):
    """Dueño de la mascota.

    Identidad: `(name, email)`. El teléfono queda fuera de `==` y `hash`.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Nombre completo del cliente.",
    )
    email: str = Field(
        ...,
        min_length=1,
        max_length=320,
        description="Correo electrónico de contacto.",
    )
    phone: str = Field(
        default="",
        max_length=64,
        description="Teléfono (ya formateado en el borde).",
    )

    def identity_key(self) -> tuple[str, str]:
        return (self.name, self.email)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Client):
            return NotImplemented
        return self.identity_key() == other.identity_key()

    def __hash__(self) -> int:
        return hash(self.identity_key())


class Pet(BaseModel):
    """Mascota atendida. Valor estructural: todos los campos cuentan para `==`."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=128)
    species: str = Field(..., min_length=1, max_length=64)
    age: int = Field(default=0, ge=0, description="Edad en años.")
    weight: float = Field(default=1.0, gt=0, description="Peso en kg.")


class MedicationKind(str, Enum):
    """Variantes canónicas de medicamento."""

    ANTIBIOTIC = "antibiotic"
    ANTIPARASITIC = "antiparasitic"
    VACCINE = "vaccine"
    GENERIC = "generic"


class MedicationItem(BaseModel):
    """Medicamento vendible en una consulta.

    Identidad: `(name, dosage)`. Precio, stock, tipo y etiqueta promocional no
    participan en `==` ni en `hash`.

    `promotion_discount` es la etiqueta promocional fijada al construir el
    ítem. `None` significa "sin etiqueta" (descuento efectivo 0.0); una
    etiqueta de 0.0 tampoco cuenta como promocional.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=128)
    dosage: str = Field(..., min_length=1, max_length=64)
    price: float = Field(..., ge=0, description="Precio unitario sin descuento.")
    stock: int = Field(default=0, ge=0)
    kind: MedicationKind = Field(default=MedicationKind.GENERIC)
    promotion_discount: float | None = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Fracción de descuento promocional (0..1) o None si no aplica.",
    )

    @property
    def is_promotional(self) -> bool:
        return bool(self.promotion_discount)

    @property
    def discount_fraction(self) -> float:
        return self.promotion_discount if self.promotion_discount is not None else 0.0

    def identity_key(self) -> tuple[str, str]:
        return (self.name, self.dosage)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, MedicationItem):
            return NotImplemented
        return self.identity_key() == other.identity_key()

    def __hash__(self) -> int:
        return hash(self.identity_key())


class ConsultationOrder(BaseModel):
    """Consulta veterinaria ya tarificada.

    `total` siempre sale de la fórmula de precios de `core.services.orders`;
    nunca se edita a mano.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1000, le=9999, description="Identificador aleatorio (no único).")
    client: Client
    pet: Pet
    medications: tuple[MedicationItem, ...] = Field(default_factory=tuple)
    description: str = Field(default="")
    created_at: datetime
    total: float = Field(..., ge=0)


def identity_equals(a: Client | MedicationItem, b: Client | MedicationItem) -> bool:
    """Igualdad por identidad, como función con nombre."""

    return type(a) is type(b) and a.identity_key() == b.identity_key()


def antibiotic(
    name: str = "Amoxicilina",
    dosage: str = "500mg",
    price: float = 15000.0,
    stock: int = 50,
) -> MedicationItem:
    return MedicationItem(
        name=name,
        dosage=dosage,
        price=price,
        stock=stock,
        kind=MedicationKind.ANTIBIOTIC,
        promotion_discount=0.20,
    )


def antiparasitic(
    name: str = "Ivermectina",
    dosage: str = "10ml",
    price: float = 12000.0,
    stock: int = 30,
) -> MedicationItem:
    return MedicationItem(
        name=name,
        dosage=dosage,
        price=price,
        stock=stock,
        kind=MedicationKind.ANTIPARASITIC,
        promotion_discount=0.15,
    )


def vaccine(
    name: str = "Vacuna Triple",
    dosage: str = "1 dosis",
    price: float = 25000.0,
    stock: int = 20,
) -> MedicationItem:
    return MedicationItem(
        name=name,
        dosage=dosage,
        price=price,
        stock=stock,
        kind=MedicationKind.VACCINE,
        promotion_discount=0.10,
    )


def generic_medication(name: str, dosage: str, price: float, stock: int = 0) -> MedicationItem:
    """Medicamento sin etiqueta promocional."""

    return MedicationItem(name=name, dosage=dosage, price=price, stock=stock)


def default_catalog() -> list[MedicationItem]:
    """Catálogo de mostrador usado por la CLI interactiva."""

    return [
        antibiotic(),
        antiparasitic(),
        vaccine(),
        generic_medication("Meloxicam", "1.5mg/ml", 8000.0, stock=40),
    ]

"""Carga de listados JSON para la detección de duplicados.

Formato esperado::

    {"clients": [{"name": ..., "email": ..., "phone": ...}],
     "medications": [{"name": ..., "dosage": ..., "price": ...}]}
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field

from core.domain.models import Client, MedicationItem


class Roster(BaseModel):
    clients: list[Client] = Field(default_factory=list)
    medications: list[MedicationItem] = Field(default_factory=list)


def load_roster(path: Path) -> Roster:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    return Roster.model_validate(data)

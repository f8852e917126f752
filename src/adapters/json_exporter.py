"""Exportación JSON de una consulta.

Formato estable (claves ordenadas, UTF-8) para poder archivar o comparar
consultas entre ejecuciones.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ConsultationOrder


def export_order_json(*, order: ConsultationOrder, output_path: Path) -> Path:
    """Exporta `ConsultationOrder` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = order.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path

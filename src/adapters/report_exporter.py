"""Exportación HTML de la consulta (recibo).

Jinja2 renderiza un HTML autocontenido a partir de `ConsultationOrder`; el
Core no sabe nada de plantillas.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.language import Language
from core.domain.models import ConsultationOrder
from core.services.availability import OrderStatus
from core.services.discounts import calculate_discounted_price

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.filters["money"] = lambda value: f"${value:,.2f}"
    return env


def render_order_html(
    *,
    order: ConsultationOrder,
    status: OrderStatus | None = None,
    language: Language = Language.ENGLISH,
) -> str:
    """Renderiza el recibo HTML de una consulta."""

    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    lines = []
    for med in order.medications:
        priced = calculate_discounted_price(med)
        lines.append(
            {
                "item": med,
                "final_price": priced.final_price,
                "discount_percent": int(round(priced.discount_fraction * 100)),
            }
        )

    template = _get_env().get_template("order.html")
    return template.render(
        order=order,
        lines=lines,
        status_label=status.label(language) if status else None,
        generated_at=generated_at,
        lang=language.value,
        t=language.pick,
    )


def export_order_html(
    *,
    order: ConsultationOrder,
    output_path: Path,
    status: OrderStatus | None = None,
    language: Language = Language.ENGLISH,
) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_order_html(order=order, status=status, language=language)
    output_path.write_text(html, encoding="utf-8")
    return output_path

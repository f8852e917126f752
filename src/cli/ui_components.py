"""Componentes de UI para CLI (Rich).

Tablas y paneles reutilizables por varios comandos; no contienen reglas de
negocio, solo formatean lo que devuelven los servicios del Core.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.language import Language
from core.domain.models import Client, ConsultationOrder, MedicationItem
from core.services.availability import AvailabilityResult, OrderStatus
from core.services.discounts import PromotionWindow, calculate_discounted_price, promotional_items
from core.services.duplicates import Partition


def money(value: float) -> str:
    return f"${value:,.2f}"


def print_banner(console: Console, language: Language = Language.ENGLISH) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("VETDESK", style="bold cyan")
    subtitle = Text(
        language.pick(
            "Veterinary clinic • Consultations • Promotions",
            "Gestión veterinaria • Consultas • Promociones",
        ),
        style="dim",
    )
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_order_panel(
    order: ConsultationOrder,
    *,
    status: OrderStatus | None = None,
    language: Language = Language.ENGLISH,
) -> Panel:
    """Resumen de una consulta tarificada."""

    t = language.pick
    body = Text()
    body.append(t("Created: ", "Fecha: "), style="bold")
    body.append(order.created_at.strftime("%d/%m/%Y %H:%M") + "\n")
    if status is not None:
        body.append(t("Status: ", "Estado: "), style="bold")
        body.append(status.label(language) + "\n", style="green" if status is OrderStatus.CONFIRMED else "yellow")

    body.append(t("\nClient\n", "\nCliente\n"), style="bold cyan")
    body.append(f"{order.client.name} <{order.client.email}>  {order.client.phone}\n")

    pet = order.pet
    body.append(t("\nPet\n", "\nMascota\n"), style="bold cyan")
    body.append(f"{pet.name} ({pet.species}), {pet.age} {t('years', 'años')}, {pet.weight:.2f} kg\n")

    body.append(t("\nDescription\n", "\nDescripción\n"), style="bold cyan")
    body.append(order.description + "\n")

    parts: list = [body]
    if order.medications:
        table = Table(title=t("Medications", "Medicamentos"), expand=True)
        table.add_column("#", style="dim", no_wrap=True)
        table.add_column(t("Name", "Nombre"), style="white")
        table.add_column(t("Dosage", "Dosis"), style="white")
        table.add_column(t("Price", "Precio"), justify="right")
        table.add_column(t("Final", "Final"), justify="right", style="green")
        for index, med in enumerate(order.medications, start=1):
            priced = calculate_discounted_price(med)
            table.add_row(str(index), med.name, med.dosage, money(med.price), money(priced.final_price))
        parts.append(table)

    parts.append(Text(f"\nTOTAL: {money(order.total)}", style="bold yellow"))
    title = Text(t(f"Consultation #{order.id}", f"Consulta #{order.id}"), style="bold yellow")
    return Panel(Group(*parts), title=title, border_style="yellow")


def build_availability_panel(result: AvailabilityResult) -> Panel:
    style = "green" if result.available else "red"
    return Panel(Text(result.message), border_style=style)


def build_promotions_table(
    items: Sequence[MedicationItem],
    *,
    language: Language = Language.ENGLISH,
) -> Table:
    """Tabla de medicamentos con etiqueta promocional y su precio final."""

    t = language.pick
    table = Table(title=t("Promotional medications", "Medicamentos promocionales"))
    table.add_column(t("Name", "Nombre"), style="cyan", no_wrap=True)
    table.add_column(t("Dosage", "Dosis"), style="white")
    table.add_column(t("Regular", "Normal"), justify="right")
    table.add_column(t("Discount", "Descuento"), justify="right", style="magenta")
    table.add_column(t("Promo price", "Precio promocional"), justify="right", style="green")
    for med in promotional_items(items):
        priced = calculate_discounted_price(med)
        table.add_row(
            med.name,
            med.dosage,
            money(med.price),
            f"{int(round(priced.discount_fraction * 100))}%",
            money(priced.final_price),
        )
    return table


def build_promotion_window_text(window: PromotionWindow, language: Language = Language.ENGLISH) -> Text:
    start = window.start.strftime("%d/%m/%Y")
    end = window.end.strftime("%d/%m/%Y")
    return Text(
        language.pick(
            f"ℹ Promotional period: {start} - {end}",
            f"ℹ Periodo promocional: {start} - {end}",
        ),
        style="dim",
    )


def _entity_row(entity: Client | MedicationItem) -> tuple[str, str, str]:
    if isinstance(entity, Client):
        return entity.name, entity.email, entity.phone
    return entity.name, entity.dosage, money(entity.price)


def build_duplicates_table(
    title: str,
    result: Partition,
    *,
    language: Language = Language.ENGLISH,
) -> Table:
    """Tabla con únicos y duplicados, marcando cada fila."""

    t = language.pick
    table = Table(title=title)
    table.add_column(t("Kind", "Tipo"), no_wrap=True)
    table.add_column(t("Name", "Nombre"), style="cyan")
    table.add_column(t("Key", "Clave"), style="white")
    table.add_column(t("Detail", "Detalle"), style="dim")
    for entity in result.uniques:
        table.add_row(Text(t("unique", "único"), style="green"), *_entity_row(entity))
    for entity in result.duplicates:
        table.add_row(Text(t("duplicate", "duplicado"), style="red"), *_entity_row(entity))
    return table

"""CLI principal (Typer).

Solo se encarga de pedir datos, normalizarlos con `core.validation` y
presentar lo que devuelven los servicios del Core.
"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import export_order_json
from adapters.report_exporter import export_order_html
from adapters.roster_loader import load_roster
from cli import doctor
from cli.ui_components import (
    build_availability_panel,
    build_duplicates_table,
    build_order_panel,
    build_promotion_window_text,
    build_promotions_table,
    money,
    print_banner,
)
from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import Client, MedicationItem, Pet, default_catalog
from core.logging_config import get_logger, setup_logging
from core.services.availability import check_availability
from core.services.discounts import multi_pet_discount
from core.services.duplicates import detect_duplicate_clients, detect_duplicate_medications
from core.services.orders import BASE_FEE, apply_date_promotion, build_order, consultation_fee
from core.validation import (
    format_phone,
    is_valid_email,
    parse_age,
    parse_date,
    parse_pet_count,
    parse_price,
    parse_weight,
    text_or_default,
)

app = typer.Typer(no_args_is_help=True, help="Veterinary clinic consultations, discounts and availability.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = get_logger(__name__)


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid configuration: {exc}") from exc


def _resolve_language(spanish: bool, settings: AppSettings) -> Language:
    return Language.SPANISH if spanish else settings.default_language


def _ask(label: str) -> str:
    return typer.prompt(label, default="", show_default=False)


def _ask_email(language: Language) -> str:
    while True:
        raw = _ask(language.pick("Email", "Correo electrónico")).strip()
        if not raw:
            return "no-email@example.com"
        if is_valid_email(raw):
            return raw
        _console.print(
            language.pick(
                "[yellow]⚠ Invalid email format (expected name@domain.com).[/yellow]",
                "[yellow]⚠ Formato de email incorrecto (esperado nombre@dominio.com).[/yellow]",
            )
        )


def _pick_medications(catalog: list[MedicationItem], language: Language) -> list[MedicationItem]:
    for index, med in enumerate(catalog, start=1):
        _console.print(f"  {index}. {med.name} ({med.dosage}) - {money(med.price)}")
    raw = _ask(language.pick("Medication numbers (comma separated, empty for none)", "Números de medicamentos (separados por coma, vacío para ninguno)"))

    chosen: list[MedicationItem] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        if token.isdigit() and 1 <= int(token) <= len(catalog):
            chosen.append(catalog[int(token) - 1])
        else:
            _console.print(language.pick(f"[yellow]⚠ Ignoring '{token}'[/yellow]", f"[yellow]⚠ Se ignora '{token}'[/yellow]"))
    return chosen


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR."),
) -> None:
    """Configure logging before any command runs."""

    settings_error: ValidationError | None = None
    if log_level is None:
        try:
            log_level = AppSettings().log_level
        except ValidationError as exc:
            # each command reports broken settings on its own
            log_level = "WARNING"
            settings_error = exc

    setup_logging(log_level)
    if settings_error is not None:
        logger.warning("invalid configuration, falling back to WARNING logging: %s", settings_error)


@app.command()
def consult(
    spanish: bool = typer.Option(False, "--spanish", help="Spanish prompts and output."),
    json_out: Optional[Path] = typer.Option(None, "--json-out", help="Write the order as JSON."),
    html_out: Optional[Path] = typer.Option(None, "--html-out", help="Write an HTML receipt."),
    banner: bool = typer.Option(True, "--banner/--no-banner"),
) -> None:
    """Interactive consultation intake: price, check availability, summarize."""

    settings = _load_settings()
    language = _resolve_language(spanish, settings)
    t = language.pick
    if banner:
        print_banner(_console, language)

    _console.print(t("[bold]--- PET ---[/bold]", "[bold]--- MASCOTA ---[/bold]"))
    pet = Pet(
        name=text_or_default(_ask(t("Pet name", "Nombre de la mascota")), t("Unnamed", "Sin nombre")),
        species=text_or_default(_ask(t("Species (Dog/Cat/Other)", "Especie (Perro/Gato/Otro)")), t("Unspecified", "Sin especificar")),
        age=parse_age(_ask(t("Age (years)", "Edad (años)"))),
        weight=parse_weight(_ask(t("Weight (kg)", "Peso (kg)"))),
    )

    _console.print(t("[bold]--- OWNER ---[/bold]", "[bold]--- DUEÑO ---[/bold]"))
    owner_name = text_or_default(_ask(t("Owner name", "Nombre del dueño")), t("Unnamed", "Sin nombre"))
    phone_raw = _ask(t("Phone", "Teléfono")).strip()
    phone = format_phone(phone_raw) if phone_raw else t("Not provided", "No proporcionado")
    client = Client(name=owner_name, email=_ask_email(language), phone=phone)

    _console.print(t("[bold]--- CONSULTATION ---[/bold]", "[bold]--- CONSULTA ---[/bold]"))
    description = text_or_default(_ask(t("Reason for visit", "Motivo de la consulta")), t("General consultation", "Consulta general"))
    base_fee = parse_price(_ask(t(f"Consultation fee (default {BASE_FEE:.0f})", f"Costo de la consulta (por defecto {BASE_FEE:.0f})")), BASE_FEE)
    pet_count = parse_pet_count(_ask(t("Number of pets in this visit", "Número de mascotas a atender")))
    medications = _pick_medications(default_catalog(), language)

    requested = parse_date(_ask(t("Requested date (DD/MM/YYYY)", "Fecha deseada (DD/MM/YYYY)")))
    if requested is None:
        requested = date.today()
        _console.print(t("[dim]Using today's date.[/dim]", "[dim]Se usa la fecha de hoy.[/dim]"))
    time_of_day = _ask(t("Requested time (HH:MM)", "Hora deseada (HH:MM)")).strip()

    if multi_pet_discount(pet_count) > 0:
        _console.print(
            t(
                f"✓ Multi-pet discount: {multi_pet_discount(pet_count) * 100:.0f}% "
                f"({money(base_fee)} -> {money(consultation_fee(pet_count, base_fee))})",
                f"✓ Descuento por varias mascotas: {multi_pet_discount(pet_count) * 100:.0f}% "
                f"({money(base_fee)} -> {money(consultation_fee(pet_count, base_fee))})",
            )
        )

    availability = check_availability(time_of_day, requested, language=language)
    order = build_order(client, pet, medications, description, pet_count, base_fee=base_fee)
    order = apply_date_promotion(order, requested, settings.promotion_window(), language=language)
    logger.info("order #%s priced at %.2f (%s)", order.id, order.total, availability.status.value)

    _console.print(build_availability_panel(availability))
    _console.print(build_order_panel(order, status=availability.status, language=language))

    if json_out is not None:
        path = export_order_json(order=order, output_path=json_out)
        _console.print(t(f"[green]JSON saved to:[/green] {path}", f"[green]JSON guardado en:[/green] {path}"))
    if html_out is not None:
        path = export_order_html(order=order, output_path=html_out, status=availability.status, language=language)
        _console.print(t(f"[green]HTML saved to:[/green] {path}", f"[green]HTML guardado en:[/green] {path}"))


@app.command()
def availability(
    time_of_day: str = typer.Argument(..., metavar="HH:MM"),
    on_date: Optional[str] = typer.Option(None, "--date", help="Requested date (DD/MM/YYYY)."),
    spanish: bool = typer.Option(False, "--spanish"),
) -> None:
    """Check whether the veterinarian is available at a time of day."""

    language = _resolve_language(spanish, _load_settings())
    requested: date | str | None = None
    if on_date is not None:
        requested = parse_date(on_date)
        if requested is None:
            raise typer.BadParameter("expected DD/MM/YYYY", param_hint="--date")

    result = check_availability(time_of_day, requested, language=language)
    _console.print(build_availability_panel(result))
    if not result.available:
        raise typer.Exit(code=1)


@app.command()
def promotions(spanish: bool = typer.Option(False, "--spanish")) -> None:
    """List promotional medications and the promotional date window."""

    settings = _load_settings()
    language = _resolve_language(spanish, settings)
    _console.print(build_promotions_table(default_catalog(), language=language))
    _console.print(build_promotion_window_text(settings.promotion_window(), language))


@app.command()
def duplicates(
    roster: Path = typer.Argument(..., help="JSON file with 'clients' and 'medications' lists."),
    spanish: bool = typer.Option(False, "--spanish"),
) -> None:
    """Split clients and medications into first-seen uniques and duplicates."""

    language = _resolve_language(spanish, _load_settings())
    try:
        data = load_roster(roster)
    except (OSError, ValueError) as exc:
        _console.print(f"[red]Could not read roster {roster}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    t = language.pick
    clients = detect_duplicate_clients(data.clients)
    meds = detect_duplicate_medications(data.medications)
    _console.print(build_duplicates_table(t("Clients", "Clientes"), clients, language=language))
    _console.print(build_duplicates_table(t("Medications", "Medicamentos"), meds, language=language))
    _console.print(
        t(
            f"{len(clients.duplicates)} duplicate client(s), {len(meds.duplicates)} duplicate medication(s)",
            f"{len(clients.duplicates)} cliente(s) duplicado(s), {len(meds.duplicates)} medicamento(s) duplicado(s)",
        )
    )


def run() -> None:
    # cp1252 Windows terminals choke on the check marks in availability messages.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()


if __name__ == "__main__":
    run()

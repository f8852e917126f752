"""Doctor command for configuration diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.report_exporter import render_order_html
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.models import Client, Pet
from core.services.availability import business_hours_label
from core.services.orders import build_order
from core.validation import parse_date

app = typer.Typer(no_args_is_help=True, help="Configuration checks and promotion window setup.")

_console = Console()


def _check_template() -> tuple[bool, str]:
    """Render a throwaway receipt to detect template problems."""

    try:
        order = build_order(
            Client(name="doctor", email="doctor@example.com"),
            Pet(name="doctor", species="test"),
        )
        render_order_html(order=order)
        return True, "OK"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the effective configuration and run baseline checks."""

    table = Table(title="vetdesk doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        settings = AppSettings()
    except ValidationError as exc:
        table.add_row("Settings", "FAIL", str(exc))
        _console.print(table)
        raise typer.Exit(code=1) from exc

    window = settings.promotion_window()
    table.add_row("Settings", "OK", f"user env: {get_user_env_file()}")
    table.add_row(
        "Promotion window",
        "OK",
        f"{window.start:%d/%m/%Y} - {window.end:%d/%m/%Y} ({(window.end - window.start).days + 1} days)",
    )
    table.add_row("Business hours", "OK", business_hours_label())
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("Log level", "OK", settings.log_level.upper())
    table.add_row("Reports dir", "OK", str(Path(settings.reports_dir).resolve()))

    ok_tpl, detail_tpl = _check_template()
    table.add_row("HTML template", "OK" if ok_tpl else "FAIL", detail_tpl)

    _console.print(table)
    if not ok_tpl:
        raise typer.Exit(code=1)


@app.command(name="setup-promo")
def setup_promo(
    start: str = typer.Option(..., prompt="Promotion start (DD/MM/YYYY)"),
    end: str = typer.Option(..., prompt="Promotion end (DD/MM/YYYY)"),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help="Override the user .env location."),
) -> None:
    """Store the promotional date window in the user config .env."""

    start_date = parse_date(start)
    end_date = parse_date(end)
    if start_date is None:
        raise typer.BadParameter("expected DD/MM/YYYY", param_hint="start")
    if end_date is None:
        raise typer.BadParameter("expected DD/MM/YYYY", param_hint="end")
    if start_date > end_date:
        raise typer.BadParameter("start must not be after end")

    env_path = write_user_env_vars(
        {
            "VETDESK_PROMO_START": start_date.isoformat(),
            "VETDESK_PROMO_END": end_date.isoformat(),
        },
        env_path=env_file,
    )
    _console.print(f"[green]Saved promotion window to:[/green] {env_path}")

from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from arbiter.config import Config
from arbiter.domain import (
    ArbiterError,
    ArbitrationMethod,
    Arbitrator,
    IdType,
    IdVerification,
    format_coin,
    load_or_create,
    parse_coin,
)
from arbiter.infra.key_provider import EcKeyProvider
from arbiter.infra.log_setup import setup_logging
from arbiter.storage.store_factory import build_store

app = typer.Typer()
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="JSON config file (defaults to .arbiter/config.json).",
    ),
):
    """
    Manage the local arbitrator profile.
    """
    ctx.obj = config_path


def _load_config(ctx: typer.Context) -> Config:
    try:
        return Config.load(ctx.obj)
    except (OSError, ValueError) as e:
        _fail(e)


def _open_arbitrator(config: Config) -> Arbitrator:
    """Bootstraps the arbitrator against the configured store."""

    setup_logging(config.log_level)
    return load_or_create(
        build_store(config),
        EcKeyProvider(),
        save_on_every_update=config.save_on_every_update,
    )


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(code=1)


@app.command()
def init(ctx: typer.Context):
    """
    Load the arbitrator profile, creating the default one if none exists.
    """
    config = _load_config(ctx)
    try:
        arbitrator = _open_arbitrator(config)
    except ArbiterError as e:
        _fail(e)
    if arbitrator.restored:
        console.print(
            f"[yellow]Arbitrator profile '{arbitrator.id}' already exists.[/yellow]"
        )
        return
    console.print(
        f"[green]Initialized arbitrator profile '{arbitrator.id}' at "
        f"{config.get_store_path()}.[/green]"
    )


@app.command()
def show(ctx: typer.Context):
    """
    Print every field of the arbitrator profile.
    """
    config = _load_config(ctx)
    try:
        arbitrator = _open_arbitrator(config)
    except ArbiterError as e:
        _fail(e)

    table = Table(title="Arbitrator")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("id", arbitrator.id)
    table.add_row("name", arbitrator.name)
    table.add_row("pub_key", arbitrator.pub_key.hex())
    table.add_row("signing_pub_key", arbitrator.signing_pub_key.hex())
    table.add_row("id_type", arbitrator.id_type.value)
    table.add_row("languages", ", ".join(arbitrator.languages))
    table.add_row("fee", f"{format_coin(arbitrator.fee)} BTC")
    table.add_row(
        "arbitration_methods",
        ", ".join(method.value for method in arbitrator.arbitration_methods),
    )
    table.add_row(
        "id_verifications",
        ", ".join(item.value for item in arbitrator.id_verifications),
    )
    table.add_row("web_url", arbitrator.web_url)
    table.add_row("description", arbitrator.description)
    console.print(table)


@app.command()
def update(
    ctx: typer.Context,
    id_type: Optional[IdType] = typer.Option(
        None, "--id-type", case_sensitive=False, help="Identity type."
    ),
    languages: Optional[List[str]] = typer.Option(
        None, "--language", "-l", help="Spoken language code (repeatable)."
    ),
    fee: Optional[str] = typer.Option(
        None, "--fee", help="Arbitration fee in BTC, e.g. 0.05."
    ),
    methods: Optional[List[ArbitrationMethod]] = typer.Option(
        None, "--method", "-m", case_sensitive=False, help="Arbitration method."
    ),
    verifications: Optional[List[IdVerification]] = typer.Option(
        None,
        "--verification",
        "-v",
        case_sensitive=False,
        help="Identity verification method.",
    ),
    web_url: Optional[str] = typer.Option(None, "--web-url", help="Web page."),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="Profile description."
    ),
):
    """
    Update editable fields. Each changed field is written immediately.
    """
    config = _load_config(ctx)
    changed: List[str] = []
    try:
        arbitrator = _open_arbitrator(config)
        if id_type is not None:
            arbitrator.id_type = id_type
            changed.append("id_type")
        if languages:
            arbitrator.languages = languages
            changed.append("languages")
        if fee is not None:
            arbitrator.fee = parse_coin(fee)
            changed.append("fee")
        if methods:
            arbitrator.arbitration_methods = methods
            changed.append("arbitration_methods")
        if verifications:
            arbitrator.id_verifications = verifications
            changed.append("id_verifications")
        if web_url is not None:
            arbitrator.web_url = web_url
            changed.append("web_url")
        if description is not None:
            arbitrator.description = description
            changed.append("description")
    except (ArbiterError, ValueError) as e:
        _fail(e)

    if not changed:
        console.print("[yellow]Nothing to update.[/yellow]")
        return
    console.print(f"[green]Updated {', '.join(changed)}.[/green]")


@app.command()
def save(ctx: typer.Context):
    """
    Request a write; honoured only when save_on_every_update is enabled.
    """
    config = _load_config(ctx)
    try:
        arbitrator = _open_arbitrator(config)
        written = arbitrator.save()
    except ArbiterError as e:
        _fail(e)
    if written:
        console.print("[green]Arbitrator profile saved.[/green]")
    else:
        console.print(
            "[yellow]Save skipped: save_on_every_update is disabled.[/yellow]"
        )


if __name__ == "__main__":
    app()

from __future__ import annotations

from pathlib import Path

import click

from sarisari.domain.exceptions import DomainException
from sarisari.infrastructure.bootstrap import build_store, catalog_repository
from sarisari.infrastructure.cli.console import ClickConsole
from sarisari.infrastructure.cli.session import StoreSession
from sarisari.infrastructure.config import ENV_PREFIX, LOG_LEVELS, StoreConfig
from sarisari.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar=f"{ENV_PREFIX}_CATALOG",
    default=None,
    help="JSON file with the products to stock (defaults to the built-in catalog).",
)
@click.option(
    "--currency",
    envvar=f"{ENV_PREFIX}_CURRENCY",
    default="PHP",
    show_default=True,
    help="Currency code for catalog prices.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar=f"{ENV_PREFIX}_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    help="Logging threshold.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=f"{ENV_PREFIX}_LOG_FILE",
    default=None,
    help="Write logs to this file instead of stderr.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    catalog_path: Path | None,
    currency: str,
    log_level: str,
    log_file: Path | None,
) -> None:
    """Sari-Sari Store ordering simulation."""
    config = StoreConfig(
        catalog_path=catalog_path,
        currency=currency.upper(),
        log_level=log_level.upper(),
        log_file=log_file,
    )
    configure_logging(config.log_level_number, config.log_file)
    ctx.obj = config


@cli.command("shop")
@click.pass_obj
def shop(config: StoreConfig) -> None:
    """Start an interactive shopping session."""
    console = ClickConsole()
    try:
        store = build_store(config, console)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    StoreSession(store, console).run()


@cli.command("products")
@click.pass_obj
def products(config: StoreConfig) -> None:
    """List all products in the catalog."""
    try:
        items = catalog_repository(config).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for item in items:
        click.echo(f"{item.id:<6} {item.name:<20} {str(item.unit_price):>10}")

"""
CLI entry point for prism-migrate.
"""

import logging
from functools import wraps
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from prism_migrate.config import DEFAULT_CONFIG_FILE, load_config, write_default_config
from prism_migrate.exceptions import PrismMigrateError, format_error_for_cli
from prism_migrate.inventory import get_inventory
from prism_migrate.migrate import (
    build_account_infos,
    filter_accounts,
    generate_documents,
    group_vpcs_by_account,
    write_documents,
)
from prism_migrate.select import select_primary_vpc
from prism_migrate.util.templates import TemplateLoader

app = typer.Typer(
    name="prism-migrate",
    help="Generate AWS account setup modules from the Prism inventory",
    add_completion=False,
)
# Generated modules go to stdout, everything else to stderr
console = Console(stderr=True)
output_console = Console()
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to stderr."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("prism_migrate").setLevel(level)


def handle_errors(func):
    """Decorator to handle exceptions in CLI commands with nice formatting."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PrismMigrateError as e:
            console.print(format_error_for_cli(e))
            raise typer.Exit(1)
        except Exception as e:
            logger.debug("Unexpected error", exc_info=True)
            console.print(f"[red]Unexpected error:[/red] {str(e)}")
            raise typer.Exit(1)

    return wrapper


@handle_errors
def run_generate(
    config_path: Path | None = None,
    accounts: list[str] | None = None,
    output_dir: Path | None = None,
) -> None:
    """Fetch the inventory and emit one module per allow-listed account."""
    config = load_config(config_path)
    if accounts:
        config = config.with_accounts(accounts)

    inventory = get_inventory(config)
    logger.debug("Using inventory %s", inventory.describe())

    documents = generate_documents(inventory, config)

    if output_dir is None:
        for _, text in documents:
            typer.echo(text)
    else:
        for path in write_documents(documents, output_dir):
            console.print(f"[green]✓ Wrote {path}[/green]")

    if not documents:
        console.print("[yellow]No matching accounts found in the inventory.[/yellow]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Generate AWS account setup modules from the Prism inventory.

    Without a command, runs `generate` with the default configuration.
    """
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        run_generate()


@app.command()
def generate(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Configuration file (default: built-in defaults)"
    ),
    account: list[str] | None = typer.Option(
        None, "--account", "-a", help="Account name to generate (repeatable, replaces allow-list)"
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Write <Name>Account.ts files here instead of stdout"
    ),
):
    """Render account setup modules for the allow-listed accounts."""
    run_generate(config, account, output_dir)


@app.command()
@handle_errors
def accounts(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Configuration file (default: built-in defaults)"
    ),
    show_all: bool = typer.Option(
        False, "--all", help="List every inventory account, not only the allow-listed ones"
    ),
):
    """Show accounts and the VPC that would be selected for each."""
    cfg = load_config(config)
    inventory = get_inventory(cfg)

    all_accounts = inventory.fetch_accounts()
    vpcs = inventory.fetch_vpcs()

    if show_all:
        vpcs_by_account = group_vpcs_by_account(vpcs)
        rows = [
            (
                account.account_name,
                account.account_number,
                vpcs_by_account.get(account.account_number, []),
            )
            for account in all_accounts
        ]
    else:
        rows = [
            (info.account_name, info.account_number, info.vpcs)
            for info in build_account_infos(all_accounts, vpcs, cfg)
        ]

    allowed = {a.account_name for a in filter_accounts(all_accounts, cfg.accounts_to_migrate)}

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Account")
    table.add_column("Number")
    table.add_column("VPCs", justify="right")
    table.add_column("Primary VPC")
    table.add_column("Migrate", justify="center")

    for name, number, account_vpcs in rows:
        primary = select_primary_vpc(account_vpcs)
        table.add_row(
            name,
            number,
            str(len(account_vpcs)),
            primary.vpc_id if primary else "[yellow]-[/yellow]",
            "[green]yes[/green]" if name in allowed else "[dim]no[/dim]",
        )

    output_console.print(table)


@app.command()
@handle_errors
def init(
    path: Path = typer.Argument(Path(DEFAULT_CONFIG_FILE), help="Configuration file to create"),
    with_templates: bool = typer.Option(
        False, "--with-templates", help="Copy default templates for customization"
    ),
):
    """Write a default configuration file."""
    write_default_config(path, templates_dir="templates" if with_templates else None)
    console.print(f"[green]✓ Wrote configuration to {path}[/green]")

    if with_templates:
        templates_dir = path.parent / "templates"
        TemplateLoader().copy_default_templates(templates_dir)
        console.print(f"[green]✓ Copied default templates to {templates_dir}[/green]")
        console.print("[dim]  You can now customize templates for your accounts[/dim]")

    console.print("\n[dim]Next steps:[/dim]")
    console.print(f"  # Edit accounts_to_migrate in {path}")
    console.print(f"  prism-migrate generate --config {path}")


if __name__ == "__main__":
    app()

"""Account management commands for gview."""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..utils.exceptions import AccountStoreError
from ..utils.models import AccountRecord, parse_regions
from .common import (
    config_option,
    configure_logging,
    console,
    handle_store_error,
    open_account_store,
    verbose_option,
)

DEFAULT_REGIONS = "us-east-1"

app = typer.Typer(help="Manage the AWS accounts searched by gview.")


@app.command("list")
def list_accounts(
    config: Optional[str] = config_option(),
    verbose: bool = verbose_option(),
):
    """List all configured AWS accounts."""
    configure_logging(verbose)
    store = open_account_store(config)
    try:
        accounts = store.load()
    except AccountStoreError as e:
        handle_store_error(e)

    if not accounts:
        console.print("No accounts configured. Use 'gview account add' to add an account.")
        return

    table = Table(title="AWS Accounts")
    table.add_column("Name", style="cyan")
    table.add_column("Access Key", style="yellow")
    table.add_column("Regions", style="green")

    for account in accounts:
        table.add_row(
            escape(account.name), account.masked_access_key, escape(", ".join(account.regions))
        )

    console.print(table)


@app.command("add")
def add_account(
    name: str = typer.Argument(..., help="AWS account name to add"),
    access_key: str = typer.Option(..., "--access-key", "-a", help="AWS access key to add"),
    secret_key: str = typer.Option(..., "--secret-key", "-s", help="AWS secret key to add"),
    regions: str = typer.Option(
        DEFAULT_REGIONS, "--regions", "-r", help="Comma-separated AWS regions to add"
    ),
    config: Optional[str] = config_option(),
    verbose: bool = verbose_option(),
):
    """Add a new AWS account."""
    configure_logging(verbose)
    region_list = parse_regions(regions)
    if not region_list:
        console.print("[red]Error: At least one region must be provided.[/red]")
        raise typer.Exit(1)

    store = open_account_store(config)
    try:
        account = AccountRecord(
            name=name, access_key=access_key, secret_key=secret_key, regions=region_list
        )
        store.add_account(account)
    except AccountStoreError as e:
        handle_store_error(e)

    console.print(f"[green]Account {escape(name)} added successfully[/green]")


@app.command("remove")
def remove_account(
    name: str = typer.Argument(..., help="AWS account name to remove"),
    config: Optional[str] = config_option(),
    verbose: bool = verbose_option(),
):
    """Remove an AWS account."""
    configure_logging(verbose)
    store = open_account_store(config)
    try:
        store.remove_account(name)
    except AccountStoreError as e:
        handle_store_error(e)

    console.print(f"[green]Account {escape(name)} removed successfully[/green]")

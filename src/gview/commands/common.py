"""Common command infrastructure for gview CLI commands.

This module provides shared functionality for all CLI commands including:
- The --config and --verbose options
- Logging setup from command options
- Opening the account store with consistent error handling
"""

import logging
from typing import Any, Optional

import typer
from rich.console import Console

from ..utils.config import CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE, AccountStore
from ..utils.exceptions import AccountStoreError
from ..utils.logging_config import LoggingConfig, setup_logging

# Shared instances
console = Console()
logger = logging.getLogger(__name__)


def config_option() -> Any:
    """
    Create a standardized --config option for commands.

    Returns:
        Typer option for the account configuration file
    """
    return typer.Option(
        DEFAULT_CONFIG_FILE,
        "--config",
        "-c",
        envvar=CONFIG_ENV_VAR,
        help="Path to YAML file with AWS credentials",
    )


def verbose_option() -> Any:
    """Create a verbose option for CLI commands."""
    return typer.Option(False, "--verbose", "-v", help="Show detailed output")


def configure_logging(verbose: bool = False) -> None:
    """Set up logging for a command invocation."""
    setup_logging(LoggingConfig.from_verbosity(verbose))


def open_account_store(config_path: Optional[str]) -> AccountStore:
    """
    Open the account store, creating an empty configuration file if needed.

    Raises:
        typer.Exit: If the configuration file cannot be created
    """
    store = AccountStore(config_path)
    try:
        if store.ensure_exists():
            console.print(f"Created configuration file: {store.path}")
    except AccountStoreError as e:
        handle_store_error(e)
    return store


def handle_store_error(error: AccountStoreError) -> None:
    """
    Report an account store error and exit.

    Raises:
        typer.Exit: Always, with status 1
    """
    logger.debug(f"Account store error: {error}", exc_info=True)
    console.print(f"[red]Error: {error}[/red]")
    raise typer.Exit(1)

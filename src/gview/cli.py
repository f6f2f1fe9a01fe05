#!/usr/bin/env python3
"""
gview - multi-account AWS lookup

A CLI tool for finding EC2 instances and IAM access keys across many AWS accounts.
"""
import typer
from rich.console import Console

try:
    from . import __version__
    from .commands import account
    from .commands.find import find
except ImportError:
    # Handle direct script execution
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).parent.parent))
    from gview import __version__
    from gview.commands import account
    from gview.commands.find import find

app = typer.Typer(
    help="gview - Find EC2 instances and IAM users across multiple AWS accounts and regions.",
    add_completion=True,
    no_args_is_help=True,
)
console = Console()

# Add subcommands
app.add_typer(account.app, name="account")
app.command("find")(find)


@app.command()
def version():
    """Show the application version and exit."""
    console.print(f"gview version: {__version__}")
    raise typer.Exit()


if __name__ == "__main__":
    app()

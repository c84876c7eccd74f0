"""Rich console configuration for CLI output."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom theme for brmask
THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "success": "green",
        "muted": "dim",
        "header": "bold blue",
        "value": "bold",
        "currency": "green",
    }
)

# Global console instance
console = Console(theme=THEME)


def setup_logging(verbose: bool) -> None:
    """Send library logs to the console; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[error]Erro:[/error] {message}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]{message}[/success]")

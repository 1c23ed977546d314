"""Rich console output utilities."""

from rich.console import Console
from rich.markup import escape


console = Console()
error_console = Console(stderr=True)


def print_step(message: str) -> None:
    """Print the heading of a setup step."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {escape(message)}", style="red")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {message}")

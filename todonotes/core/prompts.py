"""
Confirmation Prompts.

Yes/no prompts the note store calls before changing a note that
requires confirmation. Any callable taking a message and returning
a bool can be used instead.
"""

from rich.console import Console
from rich.prompt import Confirm

console = Console()


def console_confirm(message: str) -> bool:
    """Ask the user on the terminal. Defaults to "no" on empty input."""
    return Confirm.ask(f"[bold yellow]{message}[/bold yellow]", console=console, default=False)


def always_confirm(message: str) -> bool:
    """Accept every change without asking."""
    return True


def never_confirm(message: str) -> bool:
    """Refuse every change without asking."""
    return False


PROMPTS = {
    "console": console_confirm,
    "always": always_confirm,
    "never": never_confirm,
}

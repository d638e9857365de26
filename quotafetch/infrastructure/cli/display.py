import json
import logging
from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel
from rich.box import ROUNDED
from rich.json import JSON
from rich.markup import escape

from quotafetch.domain.interfaces.user_interface import UserInterface
from quotafetch.domain.models.common import JSONValue

logger = logging.getLogger(__name__)


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output."""

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        """Initializes the rich consoles (documents on stdout, messages on stderr)."""
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def display_json(self, document: JSONValue, **kwargs: Any) -> None:
        """Pretty-prints a JSON document.

        Args:
            document: The decoded document.
            **kwargs: Additional arguments including:
                - title: Panel title, usually the URL (default: none, no panel)
                - raw: Print compact JSON without styling (default: False)
        """
        title = kwargs.get("title")
        if kwargs.get("raw", False):
            self.console.print(json.dumps(document), markup=False, highlight=False, soft_wrap=True)
            return

        rendered = JSON.from_data(document, indent=2)
        if title:
            self.console.print(Panel(rendered, title=f"[bold cyan]{escape(title)}[/bold cyan]", box=ROUNDED, title_align="left"))
        else:
            self.console.print(rendered)

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        self.err_console.print(f"[bold red]Error:[/bold red] {escape(error_message)}")

    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        self.err_console.print(f"[yellow]Warning:[/yellow] {escape(warning_message)}")

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        self.err_console.print(f"[blue]Info:[/blue] {escape(info_message)}")

"""Main entry point for the quotafetch application.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines CLI commands, and delegates execution to the CommandHandler.
"""

import logging
from typing import List, Optional

import typer
from typing_extensions import Annotated

from quotafetch.core.command_handler import CommandHandler
from quotafetch.domain.interfaces.rest_getter import RESTGetter
from quotafetch.domain.interfaces.user_interface import UserInterface
from quotafetch.infrastructure.cli.display import ConsoleDisplay
from quotafetch.infrastructure.config.settings import (
    load_configuration,
    get_config,
    get_rate_limit,
    get_rate_window,
    get_http_timeout,
)
from quotafetch.infrastructure.http.simple_getter import SimpleRESTGetter
from quotafetch.infrastructure.monitoring.logger_setup import setup_logging, resolve_level, DEFAULT_LOG_FORMAT
from quotafetch.infrastructure.resilience.rate_limited_getter import RateLimitedRESTGetter

logger = logging.getLogger(__name__)


def configure(verbose: bool = False) -> None:
    """Loads configuration, then sets up logging from it."""
    load_configuration()
    log_level = logging.DEBUG if verbose else resolve_level(get_config('logging.level', 'WARNING'))
    setup_logging(
        log_level=log_level,
        log_format=get_config('logging.format', DEFAULT_LOG_FORMAT),
        log_file=get_config('logging.file'),
    )


def create_getter(
    limit: Optional[int] = None,
    window: Optional[float] = None,
    timeout: Optional[float] = None,
    rate_limited: bool = True,
) -> RESTGetter:
    """Builds the getter stack. Unset values come from configuration."""
    getter: RESTGetter = SimpleRESTGetter(timeout=timeout if timeout is not None else get_http_timeout())
    if not rate_limited:
        logger.warning("Rate limiting disabled; requests are sent as fast as they come.")
        return getter
    return RateLimitedRESTGetter(
        limit=limit if limit is not None else get_rate_limit(),
        window=window if window is not None else get_rate_window(),
        delegate=getter,
    )


def create_command_handler(getter: RESTGetter, ui: Optional[UserInterface] = None) -> CommandHandler:
    return CommandHandler(getter=getter, ui=ui or ConsoleDisplay())


# --- Typer App Definition ---
app = typer.Typer(
    name="quotafetch",
    help="Fetch JSON documents from a quota-limited REST API without exceeding its rate limit.",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug information to stderr.")] = False,
):
    """Loads configuration and logging before any command runs."""
    configure(verbose=verbose)


@app.command()
def get(
    urls: Annotated[List[str], typer.Argument(help="Absolute URLs to fetch (API key included if needed).")],
    limit: Annotated[Optional[int], typer.Option("--limit", "-l", help="Requests allowed per window.")] = None,
    window: Annotated[Optional[float], typer.Option("--window", "-w", help="Window length in seconds.")] = None,
    timeout: Annotated[Optional[float], typer.Option("--timeout", "-t", help="Transport timeout in seconds.")] = None,
    workers: Annotated[int, typer.Option("--workers", help="Concurrent fetches sharing the rate limit.")] = 1,
    no_limit: Annotated[bool, typer.Option("--no-limit", help="Disable client-side rate limiting.")] = False,
    raw: Annotated[bool, typer.Option("--raw", help="Print compact, unstyled JSON.")] = False,
):
    """GET each URL and print the decoded JSON document."""
    if limit is not None and limit <= 0:
        raise typer.BadParameter("must be positive", param_hint="--limit")
    if window is not None and window <= 0:
        raise typer.BadParameter("must be positive", param_hint="--window")
    if timeout is not None and timeout <= 0:
        raise typer.BadParameter("must be positive", param_hint="--timeout")
    if workers <= 0:
        raise typer.BadParameter("must be positive", param_hint="--workers")

    getter = create_getter(limit=limit, window=window, timeout=timeout, rate_limited=not no_limit)
    handler = create_command_handler(getter)
    try:
        failures = handler.handle_get(urls, workers=workers, raw=raw)
    finally:
        getter.close()
    if failures:
        raise typer.Exit(code=1)


def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()


if __name__ == "__main__":
    cli_entry_point()

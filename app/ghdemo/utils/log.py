"""Logging setup for the CLI."""

import logging

from rich.logging import RichHandler

from ghdemo.utils.formatting import err_console


def configure_logging(debug: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        debug: Log at DEBUG level instead of INFO.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=debug, rich_tracebacks=True)],
        force=True,
    )

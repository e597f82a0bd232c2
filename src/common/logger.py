"""Logging utilities with rich output for the interactive guide.

The interview is written to stderr, so the shared console writes there too and
stdout stays free for anything a caller wants to pipe.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Reading repository...")
    logger.debug("No remote URL for 'upstream'")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from .env import env

# Styles shared by log helpers and wizard output
GUIDE_THEME = Theme(
    {
        "prompt.choices": "cyan",
        "guide.path": "blue",
        "guide.vcs": "green",
        "guide.error": "bold red",
        "guide.notice": "red",
    }
)

# Global console instance for consistent output
console = Console(stderr=True, theme=GUIDE_THEME)

# Level chosen by setup_logging(), if it has run
_configured_level: str | None = None


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses the LOG_LEVEL setting (default INFO).
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel((level or _configured_level or env.log_level()).upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Keep propagation so pytest caplog sees records
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging once, at the CLI entry point.

    Loggers already handed out by get_logger() are moved to the new level, and
    later ones pick it up as their default.

    Args:
        level: Logging level for all guide modules
        log_file: Optional file path to also log to a file
    """
    global _configured_level

    _configured_level = level.upper()

    for existing in logging.Logger.manager.loggerDict.values():
        if isinstance(existing, logging.Logger) and existing.handlers:
            existing.setLevel(_configured_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(_configured_level)
    root_logger.handlers.clear()

    # Optionally add file handler; module loggers propagate into it
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def progress(message: str) -> None:
    """Print a progress message without the logger prefix."""
    console.print(message)


def success(message: str) -> None:
    """Print a success message with a green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    """Print a warning message with a yellow warning icon."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    """Print an error message with a red X icon."""
    console.print(f"[red]✗[/red] {message}")

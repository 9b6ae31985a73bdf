"""Error handling utilities and decorators for consistent error patterns.

This module provides:
- Custom exception classes for winzoom-specific errors
- The ``attempt`` combinator used for best-effort host calls
- A decorator for CLI command error handling
"""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar

import typer
from rich.console import Console

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


# =============================================================================
# Custom Exception Classes
# =============================================================================


class WinzoomError(Exception):
    """Base exception for all winzoom-specific errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigError(WinzoomError):
    """Exception for invalid user configuration."""

    pass


class HostError(WinzoomError):
    """Exception a host adapter raises when a window or tab call fails."""

    pass


# =============================================================================
# Best-effort host calls
# =============================================================================


def attempt(
    func: Callable[..., Any],
    *args: Any,
    operation: Optional[str] = None,
    **kwargs: Any,
) -> bool:
    """Call ``func`` once and report whether it succeeded.

    Any exception is logged at debug level and discarded, so a loop over
    windows keeps going after one of them fails.

    Args:
        func: Host call to run
        *args: Positional arguments for the call
        operation: Description used in the log message
        **kwargs: Keyword arguments for the call

    Returns:
        True if the call returned normally, False if it raised
    """
    try:
        func(*args, **kwargs)
        return True
    except Exception as e:
        name = operation or getattr(func, "__name__", repr(func))
        logger.debug(f"Host call '{name}' failed: {e}")
        return False


def attempt_value(
    func: Callable[..., Any],
    *args: Any,
    default: Any = None,
    operation: Optional[str] = None,
    **kwargs: Any,
) -> Any:
    """Like ``attempt`` but returns the call's result, or ``default`` on failure."""
    try:
        return func(*args, **kwargs)
    except Exception as e:
        name = operation or getattr(func, "__name__", repr(func))
        logger.debug(f"Host query '{name}' failed: {e}")
        return default


# =============================================================================
# CLI Error Handling Decorator
# =============================================================================


def handle_cli_error(
    operation: str,
    console: Optional[Console] = None,
    exit_code: int = 1,
) -> Callable[[F], F]:
    """Decorator for consistent CLI command error handling.

    Usage:
        @app.command()
        @handle_cli_error("loading config")
        def show():
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            _console = console or Console()
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except ConfigError as e:
                _console.print(f"[red]Config error: {e.message}[/red]")
                if e.details:
                    _console.print(f"[dim]{e.details}[/dim]")
                raise typer.Exit(exit_code) from e
            except WinzoomError as e:
                _console.print(f"[red]Error {operation}: {e.message}[/red]")
                logger.error(f"Error during {operation}: {e}", exc_info=True)
                raise typer.Exit(exit_code) from e
            except Exception as e:
                _console.print(f"[red]Error {operation}: {e}[/red]")
                logger.error(f"Unexpected error during {operation}: {e}", exc_info=True)
                raise typer.Exit(exit_code) from e

        return wrapper  # type: ignore[return-value]

    return decorator

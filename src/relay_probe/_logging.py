"""Centralized logging for relay-probe.

Library logging conventions (Python docs, PEP 282):
- Attach NullHandler to library root logger
- Never add other handlers -- that's the application's job
- Provide configure_logging() for CLI entry points

CLI output format (httpx convention):
    WARNING [2026-02-25 10:02:54] relay_probe.relay - message

Diagnostics always go to stderr. Stdout carries relayed bytes only, so a
record written there would corrupt the output the harness compares.

The handler emits synchronously on the caller's thread; the probe runs a
single thread of control and starts no listener thread.
"""

import logging

import click

LIBRARY_LOGGER_NAME: str = "relay_probe"

# NullHandler per Python library best practice -- prevents
# "No handler found" warnings when consumers don't configure logging
logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())

_FMT = "%(levelname)s [%(asctime)s] %(name)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ClickHandler(logging.Handler):
    """Writes records to stderr via click.echo with dim styling.

    Using click.echo() ensures ANSI codes are automatically stripped when
    stderr is not a TTY.
    """

    def __init__(self) -> None:
        super().__init__()
        self.formatter = logging.Formatter(fmt=_FMT, datefmt=_DATEFMT)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            click.echo(click.style(msg, dim=True), err=True)
        except Exception:  # noqa: BLE001
            self.handleError(record)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    All relay_probe modules should use this instead of logging.getLogger()
    directly for consistent logger hierarchy.
    """
    return logging.getLogger(name)


def configure_logging(
    *,
    level: int | str | None = None,
    quiet: bool = False,
) -> None:
    """Configure library logging for CLI / application entry points.

    Adds a _ClickHandler if none exists (idempotent), then sets the log
    level.  Library consumers who configure their own handlers are
    unaffected -- the guard ensures we never stack duplicate handlers.

    Args:
        level: Log level (e.g. logging.DEBUG, "WARNING"). None keeps the
               current level (WARNING via the root logger by default).
        quiet: If True, set level to ERROR (suppress WARNING/INFO).
               Takes precedence over level.
    """
    lib_logger = logging.getLogger(LIBRARY_LOGGER_NAME)

    if not any(isinstance(h, _ClickHandler) for h in lib_logger.handlers):
        lib_logger.addHandler(_ClickHandler())

    if quiet:
        lib_logger.setLevel(logging.ERROR)
    elif level is not None:
        # setLevel() accepts both int and str; for str it validates
        # internally and raises ValueError on unknown names
        lib_logger.setLevel(level)

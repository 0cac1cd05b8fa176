"""Command-line interface for relay-probe.

Usage:
    relay-probe            # Copy /sandbox/input.txt to stdout

Stdout carries the input bytes and nothing else. Diagnostics go to stderr.
The exit status is 0 when the whole resource was copied and non-zero on
any failure.
"""

from __future__ import annotations

import contextlib
import errno
import os
import sys
from typing import NoReturn

import click

from relay_probe import (
    ByteRelay,
    OpenFailure,
    ReadFailure,
    RelayConfig,
    RelayError,
    WriteFailure,
    __version__,
    constants,
)
from relay_probe._logging import configure_logging, get_logger
from relay_probe.relay import Sink
from relay_probe.settings import Settings

logger = get_logger(__name__)


def format_error(title: str, message: str, suggestions: list[str] | None = None) -> str:
    """Format an error message following What → Why → Fix pattern.

    Args:
        title: Short error title
        message: Detailed explanation
        suggestions: Optional list of suggestions to fix the issue

    Returns:
        Formatted error string
    """
    lines = [
        click.style(f"Error: {title}", fg="red", bold=True),
        "",
        f"  {message}",
    ]

    if suggestions:
        lines.extend(["", "  Suggestions:"])
        lines.extend(f"    • {suggestion}" for suggestion in suggestions)

    return "\n".join(lines)


def exit_code_for(error: RelayError) -> int:
    """Map a relay failure to the process exit status."""
    if isinstance(error, OpenFailure):
        return constants.EXIT_OPEN_FAILURE
    return constants.EXIT_IO_FAILURE


def describe_failure(error: RelayError) -> str:
    """Render the stderr diagnostic for a relay failure."""
    if isinstance(error, OpenFailure):
        return format_error(
            "Cannot open input",
            error.message,
            [
                f"Check that the host maps {constants.SANDBOX_INPUT_PATH.parent} into the sandbox",
                f"Check that the fixture was placed at {constants.SANDBOX_INPUT_PATH}",
            ],
        )
    if isinstance(error, ReadFailure):
        return format_error("Reading input failed", error.message)
    return format_error("Writing output failed", error.message, ["Check that stdout is still open"])


def _detach_stdout() -> None:
    """Point stdout's descriptor at /dev/null after the sink failed.

    Interpreter shutdown flushes sys.stdout; without this a second error
    about the broken sink would follow the diagnostic.
    """
    if sys.stdout is None:
        return
    with contextlib.suppress(OSError, ValueError):
        fd = sys.stdout.fileno()
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, fd)
        os.close(devnull)


class _ClosedStdout:
    """Sink standing in for stdout when the process started with fd 1 closed.

    Has no flush(); nothing is buffered, so only an actual write fails.
    """

    def write(self, data: bytes, /) -> int:
        raise OSError(errno.EBADF, "stdout is closed")


def stdout_sink() -> Sink:
    """Binary stdout, or a sink that rejects every write when stdout is closed."""
    if sys.stdout is None:
        return _ClosedStdout()
    return sys.stdout.buffer


def run_relay() -> int:
    """Copy the fixed input resource to stdout and return the exit code."""
    config = RelayConfig(input_path=constants.SANDBOX_INPUT_PATH)
    byte_relay = ByteRelay(config, stdout_sink())

    try:
        byte_relay.run()
    except RelayError as e:
        logger.debug("Relay stopped after %d bytes", byte_relay.units_relayed, exc_info=e)
        if isinstance(e, WriteFailure):
            _detach_stdout()
        click.echo(describe_failure(e), err=True)
        return exit_code_for(e)

    return constants.EXIT_SUCCESS


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="relay-probe")
def main() -> NoReturn:
    """Copy the sandboxed input file to stdout, byte for byte.

    Reads /sandbox/input.txt through the host's sandbox mapping and writes
    every byte unchanged to stdout. Any failure to open, read or write
    aborts with a non-zero exit status.

    \b
    Exit codes:
      0   input copied completely
      66  input could not be opened
      74  reading input or writing output failed

    Set RELAY_PROBE_LOG_LEVEL=DEBUG for diagnostics on stderr.
    """
    settings = Settings()
    configure_logging(level=settings.log_level)

    sys.exit(run_relay())


if __name__ == "__main__":
    main()

"""Byte relay: copy the sandboxed input resource to the output sink.

The relay opens one input resource, reads it a single byte unit at a time
and writes each unit unchanged to the sink. Every open, read, write and
flush is checked; the first failure raises a RelayError subclass and the
relay stops. Nothing here retries or recovers, because a silently degraded
copy would hide a sandbox defect from the harness comparing the output.

Usage:
    ```python
    from relay_probe import ByteRelay, RelayConfig

    report = ByteRelay(RelayConfig(input_path=path), sink).run()
    ```
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, BinaryIO, Protocol, cast

from relay_probe import constants
from relay_probe._logging import get_logger
from relay_probe.config import RelayConfig
from relay_probe.exceptions import OpenFailure, ReadFailure, WriteFailure
from relay_probe.models import ReadResult, RelayReport

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


class Sink(Protocol):
    """Append-only byte destination (``sys.stdout.buffer`` in production).

    A ``flush()`` method is optional; sinks without one are unbuffered.
    """

    def write(self, data: bytes, /) -> int | None: ...


def open_resource(path: Path) -> BinaryIO:
    """Open the input resource for binary reading.

    Args:
        path: Path inside the sandbox

    Returns:
        Readable binary handle, owned by the caller

    Raises:
        OpenFailure: Path is missing, not readable, or rejected by the host
    """
    try:
        return path.open("rb")
    except OSError as e:
        raise OpenFailure(
            f"Cannot open {path}: {e.strerror or e}",
            context={"path": str(path), "errno": e.errno},
        ) from e


def read_unit(handle: BinaryIO) -> ReadResult:
    """Read the next byte unit from the handle.

    Returns:
        ReadResult with the unit and has_more=True, or has_more=False once
        the resource is exhausted

    Raises:
        ReadFailure: The read reported an error or returned no data at all
    """
    try:
        data = handle.read(constants.UNIT_SIZE)
    except OSError as e:
        raise ReadFailure(
            f"Read failed: {e.strerror or e}",
            context={"errno": e.errno},
        ) from e

    # Non-blocking handles return None instead of blocking
    if data is None:
        raise ReadFailure("Read returned no data (resource not ready)")
    if not data:
        return ReadResult.exhausted()
    return ReadResult(unit=data[0], has_more=True)


def write_unit(sink: Sink, unit: int) -> None:
    """Write exactly one unit to the sink.

    Raises:
        WriteFailure: Sink is closed or rejects the write, or accepted a
            byte count other than one. Short writes are never retried.
    """
    try:
        written = sink.write(bytes((unit,)))
    except (OSError, ValueError) as e:
        # ValueError: write to a closed file object
        raise WriteFailure(f"Write to output failed: {e}", context={"unit": unit}) from e

    if written != constants.UNIT_SIZE:
        raise WriteFailure(
            f"Short write: output accepted {written} of {constants.UNIT_SIZE} byte",
            context={"unit": unit, "written": written},
        )


def flush_sink(sink: Sink) -> None:
    """Flush buffered units to the sink.

    Sinks without a flush() method are left alone.

    Raises:
        WriteFailure: A buffered sink reported the failure at flush time
            (e.g. the reader closed the pipe)
    """
    flush = getattr(sink, "flush", None)
    if flush is None:
        return
    try:
        flush()
    except (OSError, ValueError) as e:
        raise WriteFailure(f"Flushing output failed: {e}") from e


class ByteRelay:
    """Sequential copy loop from the input resource to the sink.

    Attributes:
        config: Input path and flush policy
        sink: Output destination
        units_relayed: Units written by the current (or last) run, including
            a run that ended in a failure
    """

    def __init__(self, config: RelayConfig | None = None, sink: Sink | None = None) -> None:
        self.config = config or RelayConfig()
        self.sink: Sink = sink if sink is not None else sys.stdout.buffer
        self.units_relayed = 0

    def run(self) -> RelayReport:
        """Relay the whole resource.

        Returns:
            RelayReport once end-of-resource is reached and the sink flushed

        Raises:
            OpenFailure: Input could not be opened (nothing was written)
            ReadFailure: Input errored mid-copy
            WriteFailure: Sink rejected a unit or the final flush
        """
        path = self.config.input_path
        self.units_relayed = 0

        with open_resource(path) as handle:
            logger.debug("Opened input resource %s", path)
            result = read_unit(handle)
            while result.has_more:
                write_unit(self.sink, cast(int, result.unit))
                self.units_relayed += 1
                if self.config.flush_each_unit:
                    flush_sink(self.sink)
                result = read_unit(handle)

        flush_sink(self.sink)
        logger.debug("Relayed %d bytes from %s", self.units_relayed, path)
        return RelayReport(path=path, units_relayed=self.units_relayed)


def relay(config: RelayConfig | None = None, sink: Sink | None = None) -> RelayReport:
    """Relay the configured input resource to the sink (stdout by default)."""
    return ByteRelay(config, sink).run()

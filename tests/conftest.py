"""Shared pytest fixtures for relay-probe tests."""

import io
import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from relay_probe import constants
from relay_probe._logging import LIBRARY_LOGGER_NAME

# ============================================================================
# Sinks
# ============================================================================


class RecordingSink(io.BytesIO):
    """In-memory sink that counts write and flush calls."""

    def __init__(self) -> None:
        super().__init__()
        self.writes = 0
        self.flushes = 0

    def write(self, data: bytes, /) -> int:  # type: ignore[override]
        self.writes += 1
        return super().write(data)

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


class FailingSink(RecordingSink):
    """Sink that raises once `fail_after` units were accepted."""

    def __init__(self, fail_after: int, error: Exception | None = None) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.error = error or BrokenPipeError(32, "Broken pipe")

    def write(self, data: bytes, /) -> int:  # type: ignore[override]
        if self.writes >= self.fail_after:
            raise self.error
        return super().write(data)


class ShortWriteSink(RecordingSink):
    """Sink that accepts nothing and reports zero bytes written."""

    def write(self, data: bytes, /) -> int:  # type: ignore[override]
        self.writes += 1
        return 0


class FlushFailingSink(RecordingSink):
    """Sink whose buffered writes succeed but whose flush reports a closed pipe."""

    def flush(self) -> None:
        if self.closed:
            return
        self.flushes += 1
        raise BrokenPipeError(32, "Broken pipe")


class CountingReader(io.BytesIO):
    """In-memory resource that counts read calls."""

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.reads = 0

    def read(self, size: int | None = -1, /) -> bytes:
        self.reads += 1
        return super().read(size)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def make_input(tmp_path: Path) -> Callable[[bytes], Path]:
    """Factory placing a fixture at <tmp>/sandbox/input.txt."""

    def _make(data: bytes) -> Path:
        path = tmp_path / "sandbox" / "input.txt"
        path.parent.mkdir(exist_ok=True)
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def sandbox_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the fixed input path into tmp_path (file not created)."""
    path = tmp_path / "sandbox" / "input.txt"
    path.parent.mkdir(exist_ok=True)
    monkeypatch.setattr(constants, "SANDBOX_INPUT_PATH", path)
    return path


@pytest.fixture(autouse=True)
def _reset_library_logger() -> Iterator[None]:
    """Restore relay_probe logger level and handlers after each test."""
    lib_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    level = lib_logger.level
    handlers = list(lib_logger.handlers)
    yield
    lib_logger.setLevel(level)
    lib_logger.handlers[:] = handlers

"""Constants for relay-probe paths, byte range and exit codes."""

from pathlib import Path
from typing import Final

# ============================================================================
# Input Resource
# ============================================================================

SANDBOX_INPUT_PATH: Final[Path] = Path("/sandbox/input.txt")
"""Fixed input path, resolved by the host through its sandbox mapping."""

# ============================================================================
# Byte Units
# ============================================================================

MIN_UNIT: Final[int] = 0
"""Smallest valid byte unit."""

MAX_UNIT: Final[int] = 255
"""Largest valid byte unit."""

UNIT_SIZE: Final[int] = 1
"""Bytes read from the resource and written to the sink per step."""

# ============================================================================
# Exit Codes (sysexits.h)
# ============================================================================

EXIT_SUCCESS: Final[int] = 0
EXIT_OPEN_FAILURE: Final[int] = 66  # EX_NOINPUT
EXIT_IO_FAILURE: Final[int] = 74  # EX_IOERR

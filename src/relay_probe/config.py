"""Relay configuration for relay-probe.

RelayConfig describes what the relay reads and how it treats the sink.
The CLI always runs with the defaults; the library API accepts other
values so the relay can be driven in-process.

Example:
    ```python
    import sys

    from relay_probe import RelayConfig, relay

    report = relay(RelayConfig(), sys.stdout.buffer)
    ```
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from relay_probe import constants


class RelayConfig(BaseModel):
    """Configuration for a single relay run.

    Attributes:
        input_path: Resource to copy. Default: /sandbox/input.txt, the path
            the host exposes through its sandbox mapping.
        flush_each_unit: Flush the sink after every unit so bytes already
            relayed reach the reader before a later failure. Default: False
            (flush once at end-of-resource).
    """

    model_config = ConfigDict(
        frozen=True,  # Immutable after creation
        extra="forbid",  # Reject unknown fields
    )

    input_path: Path = Field(
        default=constants.SANDBOX_INPUT_PATH,
        description="Input resource inside the sandbox",
    )
    flush_each_unit: bool = Field(
        default=False,
        description="Flush the sink after every unit",
    )

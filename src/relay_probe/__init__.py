"""relay-probe: byte relay guest for sandboxed filesystem conformance.

Opens the fixed sandbox path /sandbox/input.txt, copies its bytes verbatim
to stdout and exits non-zero at the first failed open, read or write. An
outer harness compares stdout with the fixture it placed in the sandbox.

Quick Start:
    ```console
    $ relay-probe > output.bin
    ```

In-process:
    ```python
    import io

    from relay_probe import RelayConfig, relay

    sink = io.BytesIO()
    report = relay(RelayConfig(input_path=path), sink)
    assert sink.getvalue() == path.read_bytes()
    ```
"""

from relay_probe.config import RelayConfig
from relay_probe.exceptions import OpenFailure, ReadFailure, RelayError, WriteFailure
from relay_probe.models import ReadResult, RelayReport
from relay_probe.relay import ByteRelay, open_resource, read_unit, relay, write_unit

__all__ = [
    "ByteRelay",
    "OpenFailure",
    "ReadFailure",
    "ReadResult",
    "RelayConfig",
    "RelayError",
    "RelayReport",
    "WriteFailure",
    "open_resource",
    "read_unit",
    "relay",
    "write_unit",
]

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("relay-probe")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

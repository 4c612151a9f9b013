"""Hand-off to the Casdoor server process."""

from __future__ import annotations

import logging
import os
from pathlib import Path

SERVER_BINARY = Path("/server")


def exec_server(path: Path | str = SERVER_BINARY) -> None:
    """Replace the current process with the server binary.

    Does not return on success; raises ``OSError`` if the exec fails.
    """

    binary = str(path)
    # Buffered log output would be lost once the process image is replaced.
    for handler in logging.getLogger().handlers:
        handler.flush()
    os.execv(binary, [binary])


__all__ = ["SERVER_BINARY", "exec_server"]

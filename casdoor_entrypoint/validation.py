"""Checks run against the environment before anything is written."""

from __future__ import annotations

import re
from typing import Mapping

from .errors import InvalidPortError, MissingVariableError

HTTP_PORT_VAR = "CASDOOR_HTTPPORT"
DRIVER_VAR = "CASDOOR_DRIVERNAME"
MANDATORY_VARS = (HTTP_PORT_VAR, DRIVER_VAR)

_DIGITS = re.compile(r"[0-9]+")


def validate_environ(environ: Mapping[str, str]) -> None:
    """Raise if a mandatory variable is missing or the HTTP port is not numeric."""

    for name in MANDATORY_VARS:
        if not environ.get(name):
            raise MissingVariableError(name)

    port = environ[HTTP_PORT_VAR]
    if _DIGITS.fullmatch(port) is None:
        raise InvalidPortError(HTTP_PORT_VAR, port)


__all__ = ["DRIVER_VAR", "HTTP_PORT_VAR", "MANDATORY_VARS", "validate_environ"]

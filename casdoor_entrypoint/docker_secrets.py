"""Secret lookup backends consulted before environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable

SECRETS_DIR = Path("/run/secrets")


@runtime_checkable
class SecretStore(Protocol):
    """Protocol implemented by secret lookup backends."""

    def read(self, name: str) -> str | None:
        """Return the secret value, or ``None`` when the secret is absent."""


class DockerSecretStore:
    """Reads docker secrets mounted as files under a directory."""

    def __init__(self, root: Path | str = SECRETS_DIR) -> None:
        self._root = Path(root)

    def read(self, name: str) -> str | None:
        path = self._root / name
        if not path.is_file():
            return None
        # Trailing newlines are not part of the secret. Undecodable bytes are kept
        # as surrogates so they reach app.conf unchanged.
        return path.read_bytes().decode("utf-8", errors="surrogateescape").rstrip("\n")


class StaticSecretStore:
    """In-memory secret store (testing and dry-run helper)."""

    def __init__(self, secrets: Mapping[str, str] | None = None) -> None:
        self._secrets = dict(secrets or {})

    def read(self, name: str) -> str | None:
        return self._secrets.get(name)


def resolve_secret(store: SecretStore, name: str, fallback: str) -> str:
    """Return the named secret if the store has it, otherwise ``fallback``."""

    value = store.read(name)
    if value is None:
        return fallback
    return value


__all__ = ["DockerSecretStore", "SECRETS_DIR", "SecretStore", "StaticSecretStore", "resolve_secret"]

"""The config generation pipeline run before the server starts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from .datasource import build_data_source_name
from .docker_secrets import DockerSecretStore, SecretStore
from .render import CONFIG_FILE, render_config, write_config
from .settings import EntrypointSettings
from .validation import validate_environ

LOG = logging.getLogger(__name__)


def prepare(
    environ: Mapping[str, str],
    *,
    store: SecretStore | None = None,
    output: Path = CONFIG_FILE,
) -> Path:
    """Validate ``environ`` and write app.conf to ``output``.

    Every check runs before the file is opened, so a failed run leaves any
    previous file untouched.
    """

    LOG.info("Validating environment variables...")
    validate_environ(environ)

    LOG.info("Generating configuration file...")
    settings = EntrypointSettings.from_environ(environ).with_secrets(store or DockerSecretStore())
    data_source_name = build_data_source_name(settings.database)
    write_config(render_config(settings, data_source_name), output)
    LOG.info("Configuration file generated.")
    return output


__all__ = ["prepare"]

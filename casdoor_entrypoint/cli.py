"""Container entrypoint: write app.conf from the environment, then exec the server."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import __version__
from .docker_secrets import SECRETS_DIR, DockerSecretStore
from .entrypoint import prepare
from .errors import EntrypointError
from .launcher import SERVER_BINARY, exec_server
from .logging_config import setup_logging
from .render import CONFIG_FILE

LOG = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="casdoor-entrypoint", description=__doc__)
    parser.add_argument("--output", type=Path, default=CONFIG_FILE, help="Config file to (over)write")
    parser.add_argument("--secrets-dir", type=Path, default=SECRETS_DIR, help="Directory holding docker secrets")
    parser.add_argument("--server", type=Path, default=SERVER_BINARY, help="Server binary to exec afterwards")
    parser.add_argument("--no-exec", action="store_true", help="Write the config file and exit instead of starting the server")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level)

    LOG.info("Starting the entrypoint script...")
    try:
        prepare(os.environ, store=DockerSecretStore(args.secrets_dir), output=args.output)
    except EntrypointError as exc:
        LOG.error(str(exc))
        return 1

    if args.no_exec:
        return 0
    LOG.info("Starting the server...")
    exec_server(args.server)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

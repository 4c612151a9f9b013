"""Driver-specific connection strings."""

from __future__ import annotations

from .errors import UnsupportedDriverError
from .settings import DatabaseSettings

MYSQL_DRIVERS = frozenset({"mysql", "mariadb"})
POSTGRES_DRIVERS = frozenset({"postgres", "cockroachdb"})
SQLITE_DRIVER = "sqlite"
SUPPORTED_DRIVERS = MYSQL_DRIVERS | POSTGRES_DRIVERS | {SQLITE_DRIVER}

_POSTGRES_PARAMS = "?sslmode=disable"
_COCKROACH_PARAMS = "?sslmode=disable&serial_normalization=virtual_sequence"


def build_data_source_name(database: DatabaseSettings) -> str:
    """Return the ``dataSourceName`` value for the configured driver."""

    driver = database.driver
    if driver in MYSQL_DRIVERS:
        return f"{database.user}:{database.password}@tcp({database.host}:{database.port})/{database.name}"
    if driver in POSTGRES_DRIVERS:
        params = _COCKROACH_PARAMS if driver == "cockroachdb" else _POSTGRES_PARAMS
        return (
            f"user={database.user} password={database.password} host={database.host} "
            f"port={database.port} dbname={database.name}{params}"
        )
    if driver == SQLITE_DRIVER:
        return f"file:{database.name}.db?cache=shared"
    raise UnsupportedDriverError(driver)


__all__ = ["SUPPORTED_DRIVERS", "build_data_source_name"]

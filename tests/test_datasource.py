"""Tests for connection string construction."""

from __future__ import annotations

import pytest

from casdoor_entrypoint.datasource import SUPPORTED_DRIVERS, build_data_source_name
from casdoor_entrypoint.errors import UnsupportedDriverError
from casdoor_entrypoint.settings import DatabaseSettings


def _database(driver: str, **overrides: str) -> DatabaseSettings:
    values = {"driver": driver, "host": "h", "port": "3306", "name": "db", "user": "u", "password": "p"}
    values.update(overrides)
    return DatabaseSettings(**values)


@pytest.mark.parametrize("driver", ["mysql", "mariadb"])
def test_mysql_family(driver: str) -> None:
    assert build_data_source_name(_database(driver)) == "u:p@tcp(h:3306)/db"


def test_postgres() -> None:
    result = build_data_source_name(_database("postgres", port="5432"))

    assert result == "user=u password=p host=h port=5432 dbname=db?sslmode=disable"


def test_cockroachdb_adds_serial_normalization() -> None:
    result = build_data_source_name(_database("cockroachdb", port="26257"))

    assert result == (
        "user=u password=p host=h port=26257 dbname=db"
        "?sslmode=disable&serial_normalization=virtual_sequence"
    )


def test_sqlite_ignores_network_and_credentials() -> None:
    assert build_data_source_name(_database("sqlite", name="casdoor")) == "file:casdoor.db?cache=shared"


def test_defaults_produce_mysql_string_with_empty_password() -> None:
    assert build_data_source_name(DatabaseSettings()) == "casdoor:@tcp(localhost:3306)/casdoor"


@pytest.mark.parametrize("driver", ["foo", "MySQL", "postgresql", ""])
def test_unsupported_driver(driver: str) -> None:
    with pytest.raises(UnsupportedDriverError) as excinfo:
        build_data_source_name(_database(driver))

    assert str(excinfo.value) == f"Unsupported database driver: {driver}"


@pytest.mark.parametrize("driver", sorted(SUPPORTED_DRIVERS))
def test_every_supported_driver_builds_a_connection_string(driver: str) -> None:
    assert build_data_source_name(_database(driver))

"""Shared fixtures for the entrypoint tests."""

from __future__ import annotations

import pytest

DEFAULT_LINES = [
    "appname = casdoor",
    "httpport = 8000",
    "runmode = dev",
    "copyrequestbody = true",
    "driverName = mysql",
    "dataSourceName = casdoor:@tcp(localhost:3306)/casdoor",
    "dbName = casdoor",
    "tableNamePrefix = ",
    "showSql = false",
    "redisEndpoint = ",
    "defaultStorageProvider = ",
    "isCloudIntranet = false",
    'authState = "casdoor"',
    'socks5Proxy = "127.0.0.1:10808"',
    "verificationCodeTimeout = 10",
    "initScore = 0",
    "logPostOnly = true",
    "isUsernameLowered = false",
    "origin = ",
    "originFrontend = ",
    'staticBaseUrl = "https://cdn.casbin.org"',
    "isDemoMode = false",
    "batchSize = 100",
    "enableGzip = true",
    "ldapServerPort = 389",
    "radiusServerPort = 1812",
    'radiusSecret = "secret"',
    'quota = {"organization": 1, "user": 1, "application": 1, "provider": 1}',
    'logConfig = {"filename": "logs/casdoor.log", "maxdays":99999, "perm":"0770"}',
    'initDataFile = "./init_data.json"',
    'frontendBaseDir = "../casdoor"',
]


@pytest.fixture
def default_config() -> str:
    """app.conf as rendered with only the mandatory variables set."""

    return "\n".join(DEFAULT_LINES) + "\n"

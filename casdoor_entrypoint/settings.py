"""Settings models populated from the container environment.

Every field is aliased to the ``CASDOOR_*`` variable it is read from. A
variable that is unset or empty falls back to the field default, and values
are kept as the raw strings found in the environment.
"""

from __future__ import annotations

from typing import Mapping, Self

from pydantic import BaseModel, ConfigDict, Field

from .docker_secrets import SecretStore, resolve_secret

DB_USER_SECRET = "casdoor_db_user"
DB_PASSWORD_SECRET = "casdoor_db_password"


class _EnvModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> Self:
        """Build the model from an environment snapshot, skipping empty values.

        Only the ``CASDOOR_*`` aliases are read; bare field names are ignored.
        """

        aliases = {field.alias for field in cls.model_fields.values()}
        return cls.model_validate({key: value for key, value in environ.items() if key in aliases and value})


class DatabaseSettings(_EnvModel):
    """Inputs for the connection string."""

    driver: str = Field("mysql", alias="CASDOOR_DRIVERNAME")
    host: str = Field("localhost", alias="CASDOOR_DBHOST")
    port: str = Field("3306", alias="CASDOOR_DBPORT")
    name: str = Field("casdoor", alias="CASDOOR_DBNAME")
    user: str = Field("casdoor", alias="CASDOOR_DBUSER")
    password: str = Field("", alias="CASDOOR_DBPASSWORD")

    def with_secrets(self, store: SecretStore) -> DatabaseSettings:
        """Return a copy with credentials taken from secrets where they exist."""

        return self.model_copy(
            update={
                "user": resolve_secret(store, DB_USER_SECRET, self.user),
                "password": resolve_secret(store, DB_PASSWORD_SECRET, self.password),
            }
        )


class LogSettings(_EnvModel):
    filename: str = Field("logs/casdoor.log", alias="CASDOOR_LOGFILENAME")
    maxdays: str = Field("99999", alias="CASDOOR_LOGMAXDAYS")
    perm: str = Field("0770", alias="CASDOOR_LOGPERM")


class QuotaSettings(_EnvModel):
    organization: str = Field("1", alias="CASDOOR_QUOTA_ORGANIZATION")
    user: str = Field("1", alias="CASDOOR_QUOTA_USER")
    application: str = Field("1", alias="CASDOOR_QUOTA_APPLICATION")
    provider: str = Field("1", alias="CASDOOR_QUOTA_PROVIDER")


class ServerSettings(_EnvModel):
    """Plain server keys written to app.conf."""

    app_name: str = Field("casdoor", alias="CASDOOR_APPNAME")
    http_port: str = Field("8000", alias="CASDOOR_HTTPPORT")
    run_mode: str = Field("dev", alias="CASDOOR_RUNMODE")
    copy_request_body: str = Field("true", alias="CASDOOR_COPYREQUESTBODY")
    table_name_prefix: str = Field("", alias="CASDOOR_TABLENAMEPREFIX")
    show_sql: str = Field("false", alias="CASDOOR_SHOWSQL")
    redis_endpoint: str = Field("", alias="CASDOOR_REDISENDPOINT")
    default_storage_provider: str = Field("", alias="CASDOOR_DEFAULTSTORAGEPROVIDER")
    is_cloud_intranet: str = Field("false", alias="CASDOOR_ISCLOUDINTRANET")
    auth_state: str = Field("casdoor", alias="CASDOOR_AUTHSTATE")
    socks5_proxy: str = Field("127.0.0.1:10808", alias="CASDOOR_SOCKS5PROXY")
    verification_code_timeout: str = Field("10", alias="CASDOOR_VERIFICATIONCODETIMEOUT")
    init_score: str = Field("0", alias="CASDOOR_INITSCORE")
    log_post_only: str = Field("true", alias="CASDOOR_LOGPOSTONLY")
    is_username_lowered: str = Field("false", alias="CASDOOR_ISUSERNAMELOWERED")
    origin: str = Field("", alias="CASDOOR_ORIGIN")
    origin_frontend: str = Field("", alias="CASDOOR_ORIGINFRONTEND")
    static_base_url: str = Field("https://cdn.casbin.org", alias="CASDOOR_STATICBASEURL")
    is_demo_mode: str = Field("false", alias="CASDOOR_ISDEMOMODE")
    batch_size: str = Field("100", alias="CASDOOR_BATCHSIZE")
    enable_gzip: str = Field("true", alias="CASDOOR_ENABLEGZIP")
    ldap_server_port: str = Field("389", alias="CASDOOR_LDAPSERVERPORT")
    radius_server_port: str = Field("1812", alias="CASDOOR_RADIUSSERVERPORT")
    radius_secret: str = Field("secret", alias="CASDOOR_RADIUSSECRET")
    init_data_file: str = Field("./init_data.json", alias="CASDOOR_INITDATAFILE")
    frontend_base_dir: str = Field("../casdoor", alias="CASDOOR_FRONTENDBASEDIR")


class EntrypointSettings(BaseModel):
    """Everything needed to render app.conf, read from one environment snapshot."""

    model_config = ConfigDict(frozen=True)

    server: ServerSettings = Field(default_factory=ServerSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    log: LogSettings = Field(default_factory=LogSettings)
    quota: QuotaSettings = Field(default_factory=QuotaSettings)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> EntrypointSettings:
        return cls(
            server=ServerSettings.from_environ(environ),
            database=DatabaseSettings.from_environ(environ),
            log=LogSettings.from_environ(environ),
            quota=QuotaSettings.from_environ(environ),
        )

    def with_secrets(self, store: SecretStore) -> EntrypointSettings:
        """Return a copy with database credentials resolved against ``store``."""

        return self.model_copy(update={"database": self.database.with_secrets(store)})


__all__ = [
    "DB_PASSWORD_SECRET",
    "DB_USER_SECRET",
    "DatabaseSettings",
    "EntrypointSettings",
    "LogSettings",
    "QuotaSettings",
    "ServerSettings",
]

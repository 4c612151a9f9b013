"""Rendering and writing of the flat app.conf file."""

from __future__ import annotations

from pathlib import Path

from .fragments import log_config_fragment, quota_fragment
from .settings import EntrypointSettings

CONFIG_FILE = Path("/web/conf/app.conf")


def render_config(settings: EntrypointSettings, data_source_name: str) -> str:
    """Return the full contents of app.conf."""

    server = settings.server
    database = settings.database
    lines: list[str] = [
        f"appname = {server.app_name}",
        f"httpport = {server.http_port}",
        f"runmode = {server.run_mode}",
        f"copyrequestbody = {server.copy_request_body}",
        f"driverName = {database.driver}",
        f"dataSourceName = {data_source_name}",
        f"dbName = {database.name}",
        f"tableNamePrefix = {server.table_name_prefix}",
        f"showSql = {server.show_sql}",
        f"redisEndpoint = {server.redis_endpoint}",
        f"defaultStorageProvider = {server.default_storage_provider}",
        f"isCloudIntranet = {server.is_cloud_intranet}",
        f'authState = "{server.auth_state}"',
        f'socks5Proxy = "{server.socks5_proxy}"',
        f"verificationCodeTimeout = {server.verification_code_timeout}",
        f"initScore = {server.init_score}",
        f"logPostOnly = {server.log_post_only}",
        f"isUsernameLowered = {server.is_username_lowered}",
        f"origin = {server.origin}",
        f"originFrontend = {server.origin_frontend}",
        f'staticBaseUrl = "{server.static_base_url}"',
        f"isDemoMode = {server.is_demo_mode}",
        f"batchSize = {server.batch_size}",
        f"enableGzip = {server.enable_gzip}",
        f"ldapServerPort = {server.ldap_server_port}",
        f"radiusServerPort = {server.radius_server_port}",
        f'radiusSecret = "{server.radius_secret}"',
        f"quota = {quota_fragment(settings.quota)}",
        f"logConfig = {log_config_fragment(settings.log)}",
        f'initDataFile = "{server.init_data_file}"',
        f'frontendBaseDir = "{server.frontend_base_dir}"',
    ]
    return "\n".join(lines) + "\n"


def write_config(content: str, path: Path = CONFIG_FILE) -> Path:
    """Overwrite ``path`` with ``content``, creating parent directories."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", errors="surrogateescape")
    return path


__all__ = ["CONFIG_FILE", "render_config", "write_config"]

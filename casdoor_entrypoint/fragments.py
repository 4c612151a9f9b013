"""Single-line JSON values embedded in app.conf.

Values are interpolated as-is so numeric settings stay unquoted; the server
parses these fragments itself.
"""

from __future__ import annotations

from .settings import LogSettings, QuotaSettings


def log_config_fragment(log: LogSettings) -> str:
    return f'{{"filename": "{log.filename}", "maxdays":{log.maxdays}, "perm":"{log.perm}"}}'


def quota_fragment(quota: QuotaSettings) -> str:
    return (
        f'{{"organization": {quota.organization}, "user": {quota.user}, '
        f'"application": {quota.application}, "provider": {quota.provider}}}'
    )


__all__ = ["log_config_fragment", "quota_fragment"]

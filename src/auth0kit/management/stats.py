"""Stats, tenant settings and token blacklist endpoints."""

from datetime import date
from typing import Any

from ..core.exceptions import ValidationError
from ..models.base import to_payload
from ..models.management import BlacklistedToken, DailyStats, TenantSettings
from .base import ManagementResource, fields_params


def _format_day(value: date | str | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, date):
        return value.strftime("%Y%m%d")
    return value


class Stats(ManagementResource):
    path = "/stats"

    def get_active_users(self) -> int:
        """Users that logged in during the last 30 days."""
        return int(self.rest.get(f"{self.path}/active-users") or 0)

    def get_daily_stats(
        self, from_: date | str | None = None, to: date | str | None = None
    ) -> list[DailyStats]:
        """Daily login/signup counts; dates as ``date`` or ``YYYYMMDD``."""
        params = {"from": _format_day(from_), "to": _format_day(to)}
        payload = self.rest.get(f"{self.path}/daily", params=params)
        return [DailyStats.from_dict(item) for item in payload or []]


class TenantSettingsResource(ManagementResource):
    path = "/tenants/settings"

    def get(
        self, fields: list[str] | None = None, include_fields: bool | None = None
    ) -> TenantSettings:
        return self._get(
            self.path, TenantSettings.from_dict, fields_params(fields, include_fields)
        )

    def update(self, request: TenantSettings | dict[str, Any]) -> TenantSettings:
        return self._patch(self.path, TenantSettings.from_dict, to_payload(request))


class Blacklists(ManagementResource):
    path = "/blacklists/tokens"

    def get_all(self, aud: str | None = None) -> list[BlacklistedToken]:
        payload = self.rest.get(self.path, params={"aud": aud})
        return [BlacklistedToken.from_dict(item) for item in payload or []]

    def create(self, jti: str, aud: str | None = None) -> None:
        """Blacklist a token by its ``jti`` claim."""
        if not jti:
            raise ValidationError("jti cannot be empty", field="jti")
        body = {"jti": jti}
        if aud:
            body["aud"] = aud
        self.rest.post(self.path, json_data=body)

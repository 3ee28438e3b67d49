"""Timbrado validity checks.

Everything here is pure: callers pass in ``today`` and the authorization
record, nothing reads the clock or the database.
"""
from dataclasses import dataclass
from datetime import date, datetime

from ..errors import ConfigurationError

WARNING_DAYS = 30


@dataclass(frozen=True)
class FiscalAuthorization:
    number: str
    valid_from: date
    valid_until: date
    establishment: str
    point_of_sale: str


@dataclass(frozen=True)
class ValidityVerdict:
    is_valid: bool
    blocks_invoicing: bool
    days_left: int | None = None
    error_message: str | None = None
    warning_days: int = WARNING_DAYS

    @property
    def level(self) -> str:
        if self.days_left is None:
            return "missing"
        if self.days_left < 0:
            return "expired"
        if self.days_left <= self.warning_days:
            return "expiring"
        return "valid"

    @property
    def message(self) -> str:
        if self.error_message:
            return self.error_message
        if self.level == "expiring":
            return f"expires in {self.days_left} days"
        return f"valid for {self.days_left} days"


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def days_left(valid_until: date | datetime, today: date | datetime) -> int:
    return (_as_date(valid_until) - _as_date(today)).days


def check_validity(
    authorization: FiscalAuthorization | None,
    today: date | datetime,
    warning_days: int = WARNING_DAYS,
) -> ValidityVerdict:
    if authorization is None:
        return ValidityVerdict(
            is_valid=False,
            blocks_invoicing=True,
            error_message="no fiscal authorization configured",
            warning_days=warning_days,
        )

    remaining = days_left(authorization.valid_until, today)
    if remaining < 0:
        return ValidityVerdict(
            is_valid=False,
            blocks_invoicing=True,
            days_left=remaining,
            error_message=f"expired {abs(remaining)} days ago",
            warning_days=warning_days,
        )
    return ValidityVerdict(
        is_valid=True,
        blocks_invoicing=False,
        days_left=remaining,
        warning_days=warning_days,
    )


def validate_timbrado_dates(valid_from: date, valid_until: date) -> None:
    if valid_until <= valid_from:
        raise ConfigurationError(
            "Invalid timbrado dates",
            details="valid_until must be after valid_from",
        )

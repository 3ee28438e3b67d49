from datetime import date, datetime, timedelta

import pytest

from carwash_pos.errors import ConfigurationError
from carwash_pos.services.fiscal import (
    FiscalAuthorization,
    check_validity,
    validate_timbrado_dates,
)

TODAY = date(2026, 3, 15)


def _authorization(valid_until: date) -> FiscalAuthorization:
    return FiscalAuthorization(
        number="12345678",
        valid_from=date(2025, 3, 15),
        valid_until=valid_until,
        establishment="001",
        point_of_sale="001",
    )


def test_missing_authorization_blocks():
    verdict = check_validity(None, TODAY)

    assert verdict.is_valid is False
    assert verdict.blocks_invoicing is True
    assert verdict.days_left is None
    assert verdict.error_message == "no fiscal authorization configured"
    assert verdict.level == "missing"


@pytest.mark.parametrize(
    "offset, blocks",
    [(-365, True), (-1, True), (0, False), (1, False), (400, False)],
)
def test_blocks_only_after_valid_until(offset, blocks):
    verdict = check_validity(_authorization(TODAY + timedelta(days=offset)), TODAY)

    assert verdict.blocks_invoicing is blocks
    assert verdict.is_valid is not blocks
    assert verdict.days_left == offset


def test_expired_message_counts_days():
    verdict = check_validity(_authorization(TODAY - timedelta(days=3)), TODAY)

    assert verdict.error_message == "expired 3 days ago"
    assert verdict.level == "expired"


@pytest.mark.parametrize(
    "offset, level",
    [(-1, "expired"), (0, "expiring"), (30, "expiring"), (31, "valid")],
)
def test_warning_zone_boundaries(offset, level):
    verdict = check_validity(_authorization(TODAY + timedelta(days=offset)), TODAY)

    assert verdict.level == level
    if level != "expired":
        assert verdict.blocks_invoicing is False
        assert verdict.error_message is None


def test_expiring_message_is_not_an_error():
    verdict = check_validity(_authorization(TODAY + timedelta(days=12)), TODAY)

    assert verdict.message == "expires in 12 days"
    assert verdict.error_message is None


def test_time_of_day_is_ignored():
    authorization = _authorization(TODAY)
    late = datetime(2026, 3, 15, 23, 59, 59)

    verdict = check_validity(authorization, late)

    assert verdict.days_left == 0
    assert verdict.blocks_invoicing is False


def test_same_inputs_same_verdict():
    authorization = _authorization(TODAY + timedelta(days=10))

    assert check_validity(authorization, TODAY) == check_validity(authorization, TODAY)


def test_valid_until_must_follow_valid_from():
    with pytest.raises(ConfigurationError):
        validate_timbrado_dates(TODAY, TODAY)
    with pytest.raises(ConfigurationError):
        validate_timbrado_dates(TODAY, TODAY - timedelta(days=1))

    validate_timbrado_dates(TODAY, TODAY + timedelta(days=1))

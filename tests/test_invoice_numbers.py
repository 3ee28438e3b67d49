import pytest

from carwash_pos.errors import InvoiceSequenceExhaustedError
from carwash_pos.services.invoice_numbers import next_invoice_number, parse_sequence


def test_first_invoice_number():
    assert next_invoice_number(None, "001", "001") == "001-001-0000001"


def test_next_follows_last_issued():
    assert next_invoice_number("001-001-0000041", "001", "001") == "001-001-0000042"


@pytest.mark.parametrize("last_issued", ["001-001-notanumber", "", "garbage", "001-001-"])
def test_unreadable_last_number_restarts_at_one(last_issued):
    assert next_invoice_number(last_issued, "001", "001") == "001-001-0000001"


def test_codes_come_from_arguments():
    assert next_invoice_number("001-001-0000009", "002", "003") == "002-003-0000010"


def test_sequence_overflow_is_reported():
    with pytest.raises(InvoiceSequenceExhaustedError):
        next_invoice_number("001-001-9999999", "001", "001")

    assert next_invoice_number("001-001-9999998", "001", "001") == "001-001-9999999"


def test_parse_sequence():
    assert parse_sequence("001-001-0000123") == 123
    assert parse_sequence(None) == 0
    assert parse_sequence("001-001-12a") == 12
    assert parse_sequence("001-001- 0000007") == 7
    assert parse_sequence("001-001-a12") == 0


def test_trailing_garbage_keeps_leading_digits():
    assert next_invoice_number("001-001-0000012a", "001", "001") == "001-001-0000013"

from datetime import date, timedelta

import pytest

from carwash_pos.errors import TimbradoInvalidError
from carwash_pos.services.billing_gate import guard
from carwash_pos.services.fiscal import FiscalAuthorization

TODAY = date(2026, 3, 15)


def _authorization(days: int) -> FiscalAuthorization:
    return FiscalAuthorization(
        number="4455667",
        valid_from=date(2025, 1, 1),
        valid_until=TODAY + timedelta(days=days),
        establishment="002",
        point_of_sale="005",
    )


def test_guard_passes_authorization_to_operation():
    authorization = _authorization(10)

    result = guard(authorization, TODAY, lambda auth: (auth.establishment, auth.number))

    assert result == ("002", "4455667")


@pytest.mark.parametrize("authorization", [None, _authorization(-2)])
def test_guard_rejects_without_running_operation(authorization):
    calls = []

    with pytest.raises(TimbradoInvalidError) as excinfo:
        guard(authorization, TODAY, calls.append)

    assert calls == []
    assert excinfo.value.code == "TIMBRADO_INVALID"
    assert excinfo.value.status_code == 403


def test_rejection_payload_carries_days_left():
    with pytest.raises(TimbradoInvalidError) as excinfo:
        guard(_authorization(-2), TODAY, lambda auth: auth)

    payload = excinfo.value.to_payload()
    assert payload["code"] == "TIMBRADO_INVALID"
    assert payload["days_left"] == -2
    assert payload["details"] == "expired 2 days ago"
    assert "renew timbrado" in payload["error"]


def test_receipt_route_is_gated(client, db_session, company_config):
    company_config.timbrado_valid_until = date.today() - timedelta(days=1)
    db_session.commit()

    response = client.post("/api/sales/1/receipt")

    assert response.status_code == 403
    assert response.json()["code"] == "TIMBRADO_INVALID"
    assert response.json()["days_left"] == -1


def test_receipt_route_without_configuration(client):
    response = client.post("/api/sales/1/receipt")

    assert response.status_code == 403
    body = response.json()
    assert body["details"] == "no fiscal authorization configured"
    assert body["days_left"] is None


def test_receipt_keeps_the_timbrado_the_sale_was_issued_under(client, db_session, company_config, basic_wash):
    sale = client.post(
        "/api/sales",
        json={
            "payment_method": "efectivo",
            "items": [{"kind": "service", "service_id": basic_wash.id}],
        },
    ).json()
    company_config.timbrado_number = "99999999"
    company_config.point_of_sale = "002"
    db_session.commit()

    response = client.post(f"/api/sales/{sale['id']}/receipt")

    assert response.status_code == 200
    body = response.json()
    assert body["invoice_no"] == "001-001-0000001"
    assert body["total"] == "38500"
    assert body["timbrado"] == {
        "number": "12345678",
        "establishment": "001",
        "point_of_sale": "001",
    }

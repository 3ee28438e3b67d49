from datetime import date, timedelta


def _config_payload(**overrides):
    today = date.today()
    payload = {
        "ruc": "80012345-6",
        "legal_name": "Lavadero Central S.A.",
        "trade_name": "Lavadero Central",
        "timbrado_number": "12345678",
        "timbrado_valid_from": (today - timedelta(days=10)).isoformat(),
        "timbrado_valid_until": (today + timedelta(days=355)).isoformat(),
        "address": "Av. Mariscal López 1234",
    }
    payload.update(overrides)
    return payload


def test_config_is_empty_until_saved(client):
    response = client.get("/api/company-config")

    assert response.status_code == 200
    assert response.json() is None


def test_save_creates_then_updates_single_row(client):
    created = client.put("/api/company-config", json=_config_payload())
    updated = client.put(
        "/api/company-config", json=_config_payload(point_of_sale="002")
    )

    assert created.status_code == 200
    assert created.json()["establishment"] == "001"
    assert created.json()["city"] == "Asunción"
    assert updated.json()["id"] == created.json()["id"]
    assert client.get("/api/company-config").json()["point_of_sale"] == "002"


def test_invalid_date_range_is_rejected(client):
    today = date.today()
    response = client.put(
        "/api/company-config",
        json=_config_payload(
            timbrado_valid_from=today.isoformat(),
            timbrado_valid_until=today.isoformat(),
        ),
    )

    assert response.status_code == 400
    assert response.json()["code"] == "CONFIGURATION_INVALID"
    assert client.get("/api/company-config").json() is None


def test_codes_must_be_three_digits(client):
    response = client.put("/api/company-config", json=_config_payload(establishment="1"))

    assert response.status_code == 422


def test_blank_ruc_is_rejected(client):
    response = client.put("/api/company-config", json=_config_payload(ruc="   "))

    assert response.status_code == 422


def test_status_without_config(client):
    body = client.get("/api/timbrado/status").json()

    assert body["level"] == "missing"
    assert body["blocks_invoicing"] is True
    assert body["days_left"] is None


def test_status_levels(client, db_session, company_config):
    assert client.get("/api/timbrado/status").json()["level"] == "valid"

    company_config.timbrado_valid_until = date.today() + timedelta(days=12)
    db_session.commit()
    expiring = client.get("/api/timbrado/status").json()
    assert expiring["level"] == "expiring"
    assert expiring["days_left"] == 12
    assert expiring["blocks_invoicing"] is False

    company_config.timbrado_valid_until = date.today() - timedelta(days=1)
    db_session.commit()
    expired = client.get("/api/timbrado/status").json()
    assert expired["level"] == "expired"
    assert expired["error_message"] == "expired 1 days ago"

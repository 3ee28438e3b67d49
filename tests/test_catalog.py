def _service(client, name, price, category="basico"):
    return client.post(
        "/api/services",
        json={"name": name, "price": price, "duration_min": 30, "category": category},
    ).json()


def test_create_and_list_services(client):
    created = _service(client, "Lavado Básico", 35000)

    assert created["price"] == "35000"
    assert created["active"] is True
    assert [s["name"] for s in client.get("/api/services").json()] == ["Lavado Básico"]


def test_duration_bounds(client):
    response = client.post(
        "/api/services",
        json={"name": "Rápido", "price": 10000, "duration_min": 2, "category": "basico"},
    )

    assert response.status_code == 422


def test_fractional_price_is_rejected(client):
    response = client.post(
        "/api/services",
        json={"name": "Rápido", "price": "100.50", "category": "basico"},
    )

    assert response.status_code == 422


def test_delete_deactivates_service(client):
    service = _service(client, "Encerado", 45000, category="encerado")

    response = client.delete(f"/api/services/{service['id']}")

    assert response.status_code == 200
    assert client.get(f"/api/services/{service['id']}").json()["active"] is False
    assert client.get("/api/services/active").json() == []


def test_combo_needs_two_services(client):
    wash = _service(client, "Lavado Básico", 35000)

    response = client.post(
        "/api/service-combos",
        json={"name": "Solo", "total_price": 30000, "service_ids": [wash["id"]]},
    )

    assert response.status_code == 422


def test_combo_rejects_unknown_services(client):
    wash = _service(client, "Lavado Básico", 35000)

    response = client.post(
        "/api/service-combos",
        json={"name": "Combo", "total_price": 60000, "service_ids": [wash["id"], 999]},
    )

    assert response.status_code == 400


def test_combo_lists_its_services(client):
    wash = _service(client, "Lavado Básico", 35000)
    wax = _service(client, "Encerado", 45000, category="encerado")

    combo = client.post(
        "/api/service-combos",
        json={
            "name": "Lavado + Encerado",
            "total_price": 70000,
            "service_ids": [wash["id"], wax["id"]],
        },
    )

    assert combo.status_code == 201
    body = combo.json()
    assert body["total_price"] == "70000"
    assert [s["name"] for s in body["services"]] == ["Lavado Básico", "Encerado"]


def test_combo_update_replaces_services(client):
    wash = _service(client, "Lavado Básico", 35000)
    wax = _service(client, "Encerado", 45000, category="encerado")
    motor = _service(client, "Limpieza Motor", 25000, category="motor")
    combo = client.post(
        "/api/service-combos",
        json={"name": "Combo", "total_price": 70000, "service_ids": [wash["id"], wax["id"]]},
    ).json()

    updated = client.put(
        f"/api/service-combos/{combo['id']}",
        json={"service_ids": [wash["id"], motor["id"]], "total_price": 55000},
    ).json()

    assert updated["total_price"] == "55000"
    assert [s["name"] for s in updated["services"]] == ["Lavado Básico", "Limpieza Motor"]


def test_combo_sold_at_combo_price(client, company_config):
    wash = _service(client, "Lavado Básico", 35000)
    wax = _service(client, "Encerado", 45000, category="encerado")
    combo = client.post(
        "/api/service-combos",
        json={"name": "Combo", "total_price": 70000, "service_ids": [wash["id"], wax["id"]]},
    ).json()

    sale = client.post(
        "/api/sales",
        json={
            "payment_method": "efectivo",
            "items": [{"kind": "combo", "combo_id": combo["id"]}],
        },
    ).json()

    assert sale["subtotal"] == "70000"
    assert sale["items"][0]["name"] == "Combo"
    assert sale["items"][0]["service_id"] is None

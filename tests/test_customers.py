def test_create_and_search_customers(client):
    client.post("/api/customers", json={"name": "Juan Pérez", "doc_number": "1234567"})
    client.post(
        "/api/customers",
        json={
            "name": "John Smith",
            "doc_type": "PASS",
            "doc_number": "X998877",
            "tourism_regime": True,
            "country": "US",
        },
    )

    found = client.get("/api/customers", params={"q": "X998"}).json()

    assert [c["name"] for c in found] == ["John Smith"]
    assert found[0]["tourism_regime"] is True


def test_country_is_two_letters(client):
    response = client.post(
        "/api/customers",
        json={"name": "John", "doc_number": "1", "country": "USA"},
    )

    assert response.status_code == 422


def test_customer_vehicles(client, local_customer, vehicle):
    response = client.get(f"/api/customers/{local_customer.id}/vehicles")

    assert [v["plate"] for v in response.json()] == ["ABC123"]


def test_vehicle_needs_existing_customer(client):
    response = client.post(
        "/api/vehicles",
        json={
            "customer_id": 404,
            "plate": "XYZ987",
            "make": "Kia",
            "model": "Rio",
            "color": "Rojo",
        },
    )

    assert response.status_code == 404


def test_delete_customer_without_history(client, local_customer, vehicle):
    response = client.delete(f"/api/customers/{local_customer.id}")

    assert response.status_code == 204
    assert client.get("/api/vehicles").json() == []


def test_customer_with_sales_cannot_be_deleted(client, company_config, local_customer, basic_wash):
    client.post(
        "/api/sales",
        json={
            "customer_id": local_customer.id,
            "payment_method": "cuenta",
            "items": [{"kind": "service", "service_id": basic_wash.id}],
        },
    )

    response = client.delete(f"/api/customers/{local_customer.id}")

    assert response.status_code == 409

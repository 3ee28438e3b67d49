import pytest
from fastapi import HTTPException

from carwash_pos.schemas import WorkOrderIn
from carwash_pos.services.work_orders import create_work_order


def _order(client, customer, vehicle, items=None):
    return client.post(
        "/api/work-orders",
        json={
            "customer_id": customer.id,
            "vehicle_id": vehicle.id,
            "items": items or [],
        },
    )


def test_numbers_are_sequential(client, local_customer, vehicle):
    first = _order(client, local_customer, vehicle).json()
    second = _order(client, local_customer, vehicle).json()

    assert (first["number"], second["number"]) == (1, 2)
    assert first["status"] == "recibido"


def test_total_uses_catalog_prices(client, local_customer, vehicle, basic_wash, premium_wash):
    response = _order(
        client,
        local_customer,
        vehicle,
        items=[
            {"service_id": basic_wash.id, "quantity": 2},
            {"service_id": premium_wash.id},
            {"name": "Aspirado extra", "price": 10000},
        ],
    )

    body = response.json()
    assert response.status_code == 201
    assert body["total"] == "145000"
    assert [item["name"] for item in body["items"]] == [
        "Lavado Básico",
        "Lavado Premium",
        "Aspirado extra",
    ]


def test_free_text_item_needs_price(client, local_customer, vehicle):
    response = _order(client, local_customer, vehicle, items=[{"name": "Aspirado"}])

    assert response.status_code == 422


def test_vehicle_must_belong_to_customer(db_session, tourist_customer, vehicle):
    payload = WorkOrderIn(customer_id=tourist_customer.id, vehicle_id=vehicle.id)

    with pytest.raises(HTTPException) as excinfo:
        create_work_order(db_session, payload)

    assert excinfo.value.status_code == 400


def test_status_moves_forward_and_stamps_times(client, local_customer, vehicle):
    order = _order(client, local_customer, vehicle).json()

    started = client.post(
        f"/api/work-orders/{order['id']}/status", json={"status": "en-proceso"}
    ).json()
    ready = client.post(
        f"/api/work-orders/{order['id']}/status", json={"status": "listo"}
    ).json()

    assert started["started_at"] is not None
    assert started["finished_at"] is None
    assert ready["status"] == "listo"
    assert ready["finished_at"] is not None


def test_status_cannot_go_back(client, local_customer, vehicle):
    order = _order(client, local_customer, vehicle).json()
    client.post(f"/api/work-orders/{order['id']}/status", json={"status": "listo"})

    response = client.post(
        f"/api/work-orders/{order['id']}/status", json={"status": "recibido"}
    )

    assert response.status_code == 409


def test_list_filters_by_status(client, local_customer, vehicle):
    first = _order(client, local_customer, vehicle).json()
    _order(client, local_customer, vehicle)
    client.post(f"/api/work-orders/{first['id']}/status", json={"status": "listo"})

    ready = client.get("/api/work-orders", params={"status": "listo"}).json()

    assert [order["id"] for order in ready] == [first["id"]]


def test_unknown_work_order_is_404(client):
    assert client.get("/api/work-orders/7").status_code == 404


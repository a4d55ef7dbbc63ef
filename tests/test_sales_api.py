from datetime import date, timedelta

import pytest


@pytest.fixture()
def personnel(create_profile, create_personnel):
    profile = create_profile()
    return create_personnel(profile["id"])


def test_create_and_get_sale(client, create_sale, personnel):
    sale = create_sale(personnel["id"], "2025-07-15T14:30:00", 980.5)

    assert sale["personnelId"] == personnel["id"]
    assert sale["salesAmount"] == 980.5
    assert sale["reportDate"] == "2025-07-15T14:30:00"

    r = client.get(f"/api/sales/{sale['id']}")
    assert r.status_code == 200
    assert r.json()["data"] == sale


def test_sale_dated_today_accepted(create_sale, personnel):
    today = date.today().isoformat()
    assert create_sale(personnel["id"], f"{today}T23:59:00", 10)["salesAmount"] == 10.0


def test_future_sale_rejected(client, personnel):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    r = client.post("/api/sales", json={
        "personnelId": personnel["id"],
        "reportDate": f"{tomorrow}T00:00:00",
        "salesAmount": 100,
    })
    assert r.status_code == 400
    assert r.json()["message"] == "Report date cannot be in the future"


def test_negative_amount_rejected(client, personnel):
    r = client.post("/api/sales", json={
        "personnelId": personnel["id"],
        "reportDate": "2025-07-01T00:00:00",
        "salesAmount": -5,
    })
    assert r.status_code == 400
    assert r.json()["errors"] == ["Sales amount must be non-negative"]


def test_unknown_personnel_rejected(client):
    r = client.post("/api/sales", json={
        "personnelId": 999,
        "reportDate": "2025-07-01T00:00:00",
        "salesAmount": 5,
    })
    assert r.status_code == 400
    assert r.json()["message"] == "Personnel with ID 999 does not exist"


def test_list_sales_filters(client, create_profile, create_personnel, create_sale):
    profile = create_profile()
    john = create_personnel(profile["id"], name="John Smith")
    sarah = create_personnel(profile["id"], name="Sarah Johnson")
    create_sale(john["id"], "2025-06-30T12:00:00", 10)
    create_sale(john["id"], "2025-07-15T12:00:00", 20)
    create_sale(sarah["id"], "2025-07-31T18:45:00", 30)
    create_sale(sarah["id"], "2025-08-01T00:00:00", 40)

    everything = client.get("/api/sales").json()["data"]
    assert [s["salesAmount"] for s in everything] == [40.0, 30.0, 20.0, 10.0]

    johns = client.get(f"/api/sales?personnelId={john['id']}").json()["data"]
    assert [s["salesAmount"] for s in johns] == [20.0, 10.0]

    # the to date includes the whole day
    july = client.get("/api/sales?from=2025-07-01&to=2025-07-31").json()["data"]
    assert [s["salesAmount"] for s in july] == [30.0, 20.0]


def test_delete_sale(client, create_sale, personnel):
    sale = create_sale(personnel["id"], "2025-07-15T00:00:00", 1)

    r = client.delete(f"/api/sales/{sale['id']}")
    assert r.status_code == 200
    assert r.json()["message"] == f"Sales record with ID {sale['id']} deleted successfully"
    assert client.get(f"/api/sales/{sale['id']}").status_code == 404
    assert client.delete(f"/api/sales/{sale['id']}").status_code == 404

"""
API endpoint tests for vendor, admin, product, payment and notification routes.
Uses in-memory SQLite + dependency-overridden FastAPI test client.
"""
from datetime import date, timedelta

from sqlmodel import select

from app.core.auth import create_access_token
from app.models.notification import Notification
from app.models.order import Order

API = "/api/v1"
DAY = "2024-01-10"

REGISTRATION = {
    "name": "Ravi Chaat Corner",
    "phone": "+91 98765-43210",
    "address": "Stall 7, FC Road",
    "city": "Pune",
    "state": "MH",
    "pincode": "411004",
    "vendor_type": "chaat",
}


# ===================== HEALTH =====================


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


# ===================== VENDOR AUTH =====================


def test_register_and_login_vendor(client):
    r = client.post(f"{API}/vendors/register", json=REGISTRATION)
    assert r.status_code == 201
    body = r.json()
    assert body["vendor"]["phone"] == "+919876543210"
    assert body["vendor"]["language"] == "en"
    assert body["token"]

    r = client.post(f"{API}/vendors/login", json={"phone": "+919876543210"})
    assert r.status_code == 200
    token = r.json()["token"]

    r = client.get(f"{API}/vendors/profile", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["name"] == "Ravi Chaat Corner"


def test_register_duplicate_phone(client):
    assert client.post(f"{API}/vendors/register", json=REGISTRATION).status_code == 201
    r = client.post(f"{API}/vendors/register", json=REGISTRATION)
    assert r.status_code == 409


def test_register_rejects_bad_phone(client):
    r = client.post(f"{API}/vendors/register", json={**REGISTRATION, "phone": "abc"})
    assert r.status_code == 422


def test_login_inactive_vendor(client, make_vendor):
    vendor = make_vendor(is_active=False)
    r = client.post(f"{API}/vendors/login", json={"phone": vendor.phone})
    assert r.status_code == 401


def test_vendor_route_requires_token(client):
    r = client.get(f"{API}/vendors/profile")
    assert r.status_code == 401
    assert r.json()["detail"] == "Access denied. No token provided."


def test_vendor_route_rejects_garbage_token(client):
    r = client.get(f"{API}/vendors/profile", headers={"Authorization": "Bearer nope"})
    assert r.status_code == 401


def test_deactivated_vendor_token_rejected(client, session, make_vendor, vendor_headers):
    vendor = make_vendor()
    headers = vendor_headers(vendor)
    vendor.is_active = False
    session.add(vendor)
    session.commit()

    assert client.get(f"{API}/vendors/profile", headers=headers).status_code == 401


def test_update_profile(client, make_vendor, vendor_headers):
    vendor = make_vendor()
    r = client.put(
        f"{API}/vendors/profile",
        json={"address": "Stall 9, JM Road", "language": "mr"},
        headers=vendor_headers(vendor),
    )
    assert r.status_code == 200
    assert r.json()["address"] == "Stall 9, JM Road"
    assert r.json()["language"] == "mr"


def test_update_profile_cannot_change_phone(client, make_vendor, vendor_headers):
    vendor = make_vendor()
    r = client.put(
        f"{API}/vendors/profile",
        json={"phone": "9999999999"},
        headers=vendor_headers(vendor),
    )
    assert r.status_code == 422


# ===================== DAILY NEEDS / EXTRAS / CANCELLATIONS =====================


def test_set_and_get_daily_needs(client, make_vendor, make_product, vendor_headers):
    vendor = make_vendor()
    headers = vendor_headers(vendor)
    onion = make_product("Onion", 30)
    potato = make_product("Potato", 20)

    r = client.post(
        f"{API}/vendors/daily-needs",
        json={"daily_needs": [
            {"product_id": potato.id, "quantity": 2},
            {"product_id": onion.id, "quantity": 1.5},
        ]},
        headers=headers,
    )
    assert r.status_code == 200
    assert [n["product_name"] for n in r.json()] == ["Onion", "Potato"]

    # Full replace
    r = client.post(
        f"{API}/vendors/daily-needs",
        json={"daily_needs": [{"product_id": onion.id, "quantity": 4}]},
        headers=headers,
    )
    assert r.status_code == 200

    r = client.get(f"{API}/vendors/daily-needs", headers=headers)
    assert [(n["product_id"], n["quantity"]) for n in r.json()] == [(onion.id, 4)]


def test_set_daily_needs_rejects_unknown_product(client, make_vendor, make_product, vendor_headers):
    vendor = make_vendor()
    headers = vendor_headers(vendor)
    onion = make_product("Onion", 30)
    client.post(
        f"{API}/vendors/daily-needs",
        json={"daily_needs": [{"product_id": onion.id, "quantity": 1}]},
        headers=headers,
    )

    r = client.post(
        f"{API}/vendors/daily-needs",
        json={"daily_needs": [{"product_id": 999, "quantity": 1}]},
        headers=headers,
    )
    assert r.status_code == 400
    assert r.json()["detail"]["product_ids"] == [999]

    # Existing needs untouched
    r = client.get(f"{API}/vendors/daily-needs", headers=headers)
    assert len(r.json()) == 1


def test_set_daily_needs_validation(client, make_vendor, make_product, vendor_headers):
    vendor = make_vendor()
    onion = make_product("Onion", 30)
    headers = vendor_headers(vendor)

    r = client.post(
        f"{API}/vendors/daily-needs",
        json={"daily_needs": [{"product_id": onion.id, "quantity": 0}]},
        headers=headers,
    )
    assert r.status_code == 422

    r = client.post(
        f"{API}/vendors/daily-needs",
        json={"daily_needs": [
            {"product_id": onion.id, "quantity": 1},
            {"product_id": onion.id, "quantity": 2},
        ]},
        headers=headers,
    )
    assert r.status_code == 422


def test_extra_orders(client, make_vendor, make_product, vendor_headers):
    vendor = make_vendor()
    headers = vendor_headers(vendor)
    paneer = make_product("Paneer", 300)

    r = client.post(
        f"{API}/vendors/extra-orders",
        json={"product_id": paneer.id, "quantity": 1, "order_date": DAY, "notes": "  wedding  "},
        headers=headers,
    )
    assert r.status_code == 201
    assert r.json()["notes"] == "wedding"

    r = client.get(f"{API}/vendors/extra-orders", params={"order_date": DAY}, headers=headers)
    assert len(r.json()) == 1

    r = client.post(
        f"{API}/vendors/extra-orders",
        json={"product_id": 999, "quantity": 1, "order_date": DAY},
        headers=headers,
    )
    assert r.status_code == 404


def test_cancel_order_twice_conflicts(client, make_vendor, vendor_headers):
    vendor = make_vendor()
    headers = vendor_headers(vendor)

    r = client.post(
        f"{API}/vendors/cancel-order",
        json={"cancel_date": DAY, "reason": "Shop closed"},
        headers=headers,
    )
    assert r.status_code == 201

    r = client.post(f"{API}/vendors/cancel-order", json={"cancel_date": DAY}, headers=headers)
    assert r.status_code == 409

    r = client.get(f"{API}/vendors/cancellations", headers=headers)
    assert [c["reason"] for c in r.json()] == ["Shop closed"]


# ===================== ADMIN AUTH =====================


def test_admin_register_and_login(client):
    payload = {"name": "Asha", "email": "Asha@Example.com", "password": "s3cretpass"}
    r = client.post(f"{API}/admin/register", json=payload)
    assert r.status_code == 201
    assert r.json()["staff"]["email"] == "asha@example.com"

    assert client.post(f"{API}/admin/register", json=payload).status_code == 409

    r = client.post(f"{API}/admin/login", json={"email": "asha@example.com", "password": "s3cretpass"})
    assert r.status_code == 200
    assert r.json()["token"]

    r = client.post(f"{API}/admin/login", json={"email": "asha@example.com", "password": "wrong"})
    assert r.status_code == 400


def test_admin_route_rejects_vendor_token(client, make_vendor, vendor_headers):
    vendor = make_vendor()
    r = client.get(f"{API}/admin/daily-packing", headers=vendor_headers(vendor))
    assert r.status_code == 403


def test_admin_route_requires_token(client):
    assert client.post(f"{API}/admin/orders/generate-daily").status_code == 401


def test_vendor_route_rejects_staff_token(client, admin_headers):
    assert client.get(f"{API}/vendors/profile", headers=admin_headers).status_code == 401


# ===================== GENERATION / PACKING =====================


def test_generate_daily_and_vendor_views(
    client, make_vendor, make_product, add_need, add_extra, cancel, admin_headers, vendor_headers
):
    a = make_vendor(name="A")
    b = make_vendor(name="B")
    x = make_product("ProductX", 10)
    add_need(a, x, 5)
    add_extra(a, x, 1, date(2024, 1, 10))
    add_need(b, x, 3)
    cancel(b, date(2024, 1, 10))

    r = client.post(
        f"{API}/admin/orders/generate-daily",
        json={"target_date": DAY},
        headers=admin_headers,
    )
    assert r.status_code == 200
    body = r.json()
    assert body["date"] == DAY
    assert body["generated_count"] == 1
    assert body["generated_orders"][0]["total_amount"] == 60
    assert body["skipped"] == [{"vendor_id": b.id, "vendor_name": "B", "reason": "cancelled"}]

    r = client.post(
        f"{API}/admin/orders/generate-daily",
        json={"target_date": DAY},
        headers=admin_headers,
    )
    assert r.json()["generated_count"] == 0
    assert {s["reason"] for s in r.json()["skipped"]} == {"cancelled", "already_generated"}

    headers = vendor_headers(a)
    r = client.get(f"{API}/vendors/orders", headers=headers)
    assert r.status_code == 200
    (listed,) = r.json()
    assert listed["item_count"] == 2

    r = client.get(f"{API}/vendors/orders/{listed['id']}", headers=headers)
    assert r.status_code == 200
    assert [i["total_price"] for i in r.json()["items"]] == [50, 10]
    assert r.json()["items"][0]["product_name"] == "ProductX"

    # Another vendor cannot see it
    r = client.get(f"{API}/vendors/orders/{listed['id']}", headers=vendor_headers(b))
    assert r.status_code == 404


def test_generate_daily_without_body_uses_today(
    client, session, make_vendor, make_product, add_need, admin_headers
):
    vendor = make_vendor()
    add_need(vendor, make_product("Tea", 400), 0.25)

    r = client.post(f"{API}/admin/orders/generate-daily", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["date"] == date.today().isoformat()

    order = session.exec(select(Order).where(Order.vendor_id == vendor.id)).one()
    assert order.order_date == date.today()


def test_daily_packing_endpoint(
    client, make_vendor, make_product, add_need, add_extra, cancel, admin_headers
):
    a = make_vendor(name="A")
    d = make_vendor(name="D")
    c = make_vendor(name="C")
    x = make_product("ProductX", 10)
    add_need(a, x, 5)
    add_extra(d, x, 2, date(2024, 1, 10))
    add_need(c, x, 9)
    cancel(c, date(2024, 1, 10), reason="Sick")

    r = client.get(f"{API}/admin/daily-packing", params={"date": DAY}, headers=admin_headers)
    assert r.status_code == 200
    body = r.json()
    (item,) = body["packing_list"]
    assert item["product_name"] == "ProductX"
    assert (item["daily_quantity"], item["extra_quantity"], item["total_quantity"]) == (5, 2, 7)
    assert item["vendor_count"] == 2
    assert body["cancelled_orders"] == [{"vendor_id": c.id, "vendor_name": "C", "reason": "Sick"}]
    assert body["summary"] == {"total_products": 1, "total_vendors": 2, "cancelled_vendors": 1}


# ===================== ADMIN ORDERS =====================


def _generate(client, admin_headers):
    r = client.post(
        f"{API}/admin/orders/generate-daily",
        json={"target_date": DAY},
        headers=admin_headers,
    )
    return r.json()["generated_orders"][0]["order_id"]


def test_admin_order_listing_and_status(
    client, make_vendor, make_product, add_need, admin_headers
):
    vendor = make_vendor(name="A")
    add_need(vendor, make_product("ProductX", 10), 5)
    order_id = _generate(client, admin_headers)

    r = client.get(f"{API}/admin/orders", params={"date": DAY}, headers=admin_headers)
    (row,) = r.json()
    assert row["vendor_name"] == "A"
    assert row["vendor_phone"] == vendor.phone
    assert row["status"] == "pending"

    r = client.get(f"{API}/admin/orders/{order_id}", headers=admin_headers)
    assert r.json()["delivery_address"] == "12 Market Road"

    for new_status in ("processing", "out_for_delivery", "delivered"):
        r = client.patch(
            f"{API}/admin/orders/{order_id}/status",
            json={"status": new_status},
            headers=admin_headers,
        )
        assert r.status_code == 200
        assert r.json()["status"] == new_status

    r = client.patch(
        f"{API}/admin/orders/{order_id}/status",
        json={"status": "cancelled"},
        headers=admin_headers,
    )
    assert r.status_code == 400

    r = client.get(f"{API}/admin/orders", params={"status": "delivered"}, headers=admin_headers)
    assert len(r.json()) == 1


def test_admin_order_invalid_jump(client, make_vendor, make_product, add_need, admin_headers):
    add_need(make_vendor(), make_product("ProductX", 10), 5)
    order_id = _generate(client, admin_headers)

    r = client.patch(
        f"{API}/admin/orders/{order_id}/status",
        json={"status": "delivered"},
        headers=admin_headers,
    )
    assert r.status_code == 400

    r = client.patch(
        f"{API}/admin/orders/{order_id}/status",
        json={"status": "cancelled", "notes": "Vendor unreachable"},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["notes"] == "Vendor unreachable"


def test_admin_order_not_found(client, admin_headers):
    assert client.get(f"{API}/admin/orders/404", headers=admin_headers).status_code == 404


# ===================== ADMIN VENDORS =====================


def test_admin_vendor_management(
    client, make_vendor, make_product, add_need, admin_headers
):
    a = make_vendor(name="Sharma Snacks")
    make_vendor(name="Patil Juice")
    add_need(a, make_product("Besan", 90), 2)

    r = client.get(f"{API}/admin/vendors", params={"search": "sharma"}, headers=admin_headers)
    assert [v["name"] for v in r.json()] == ["Sharma Snacks"]

    r = client.get(f"{API}/admin/vendors/{a.id}", headers=admin_headers)
    assert r.json()["daily_needs_count"] == 1
    assert r.json()["total_orders"] == 0
    assert r.json()["total_payments"] == 0

    r = client.put(
        f"{API}/admin/vendors/{a.id}/status",
        json={"is_active": False},
        headers=admin_headers,
    )
    assert r.json()["is_active"] is False

    r = client.get(f"{API}/admin/vendors", params={"status": "false"}, headers=admin_headers)
    assert [v["id"] for v in r.json()] == [a.id]

    # Deactivated vendors are not picked up by generation.
    r = client.post(
        f"{API}/admin/orders/generate-daily",
        json={"target_date": DAY},
        headers=admin_headers,
    )
    assert r.json()["generated_count"] == 0


# ===================== RETURNS =====================


def test_return_flow(client, make_vendor, make_product, add_need, admin_headers, vendor_headers):
    vendor = make_vendor()
    x = make_product("ProductX", 10)
    other = make_product("Other", 10)
    add_need(vendor, x, 5)
    order_id = _generate(client, admin_headers)
    headers = vendor_headers(vendor)

    r = client.post(
        f"{API}/vendors/orders/{order_id}/return",
        json={"items": [{"product_id": other.id, "quantity": 1}], "return_date": DAY},
        headers=headers,
    )
    assert r.status_code == 400

    r = client.post(
        f"{API}/vendors/orders/{order_id}/return",
        json={"items": [{"product_id": x.id, "quantity": 6}], "return_date": DAY},
        headers=headers,
    )
    assert r.status_code == 400

    r = client.post(
        f"{API}/vendors/orders/{order_id}/return",
        json={"items": [{"product_id": x.id, "quantity": 2}], "return_date": DAY, "reason": "Spoiled"},
        headers=headers,
    )
    assert r.status_code == 201
    (created,) = r.json()
    assert created["status"] == "pending"

    r = client.get(f"{API}/admin/returns", params={"status": "pending"}, headers=admin_headers)
    (row,) = r.json()
    assert row["product_name"] == "ProductX"

    r = client.put(
        f"{API}/admin/returns/{created['id']}/process",
        json={"status": "approved", "notes": "Credit next order"},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["status"] == "approved"

    r = client.put(
        f"{API}/admin/returns/{created['id']}/process",
        json={"status": "rejected"},
        headers=admin_headers,
    )
    assert r.status_code == 400


# ===================== PRODUCTS =====================


def test_product_catalogue(client, admin_headers):
    payload = {
        "name": "Basmati Rice",
        "unit": "kg",
        "price": 120,
        "stock_quantity": 5,
        "min_stock_level": 10,
        "category": "grains",
    }
    r = client.post(f"{API}/products", json=payload, headers=admin_headers)
    assert r.status_code == 201
    product_id = r.json()["id"]

    assert client.post(f"{API}/products", json=payload).status_code == 401

    r = client.get(f"{API}/products", params={"search": "basmati"})
    assert [p["id"] for p in r.json()] == [product_id]

    r = client.get(f"{API}/products/categories/list")
    assert r.json() == ["grains"]

    r = client.get(f"{API}/products/admin/low-stock", headers=admin_headers)
    assert [p["id"] for p in r.json()] == [product_id]

    r = client.put(
        f"{API}/products/{product_id}/stock",
        json={"stock_quantity": 50},
        headers=admin_headers,
    )
    assert r.json()["stock_quantity"] == 50

    r = client.put(
        f"{API}/products/{product_id}",
        json={"price": 125.5, "is_active": False},
        headers=admin_headers,
    )
    assert r.json()["price"] == 125.5

    # Inactive products are hidden from the public catalogue.
    assert client.get(f"{API}/products/{product_id}").status_code == 404
    assert client.get(f"{API}/products").json() == []


def test_delete_product_in_use(client, make_vendor, make_product, add_need, admin_headers):
    used = make_product("Used", 10)
    unused = make_product("Unused", 10)
    add_need(make_vendor(), used, 1)

    r = client.delete(f"{API}/products/{used.id}", headers=admin_headers)
    assert r.status_code == 400

    r = client.delete(f"{API}/products/{unused.id}", headers=admin_headers)
    assert r.status_code == 200
    assert client.get(f"{API}/products/{unused.id}").status_code == 404


# ===================== PAYMENTS =====================


def test_payments(client, make_vendor, make_product, add_need, admin_headers, vendor_headers):
    vendor = make_vendor()
    add_need(vendor, make_product("ProductX", 10), 5)
    order_id = _generate(client, admin_headers)

    r = client.post(
        f"{API}/payments",
        json={"vendor_id": vendor.id, "order_id": order_id, "amount": 50, "payment_method": "upi"},
        headers=admin_headers,
    )
    assert r.status_code == 201
    payment_id = r.json()["id"]
    assert r.json()["payment_status"] == "pending"

    r = client.post(
        f"{API}/payments",
        json={"vendor_id": vendor.id, "amount": 20},
        headers=admin_headers,
    )
    assert r.status_code == 201

    headers = vendor_headers(vendor)
    r = client.get(f"{API}/payments/summary", headers=headers)
    assert r.json() == {
        "pending_amount": 70,
        "completed_amount": 0,
        "pending_count": 2,
        "completed_count": 0,
    }

    r = client.put(
        f"{API}/payments/admin/{payment_id}/status",
        json={"payment_status": "completed"},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["payment_date"] is not None

    r = client.get(f"{API}/payments/summary", headers=headers)
    assert r.json()["completed_amount"] == 50
    assert r.json()["pending_count"] == 1

    r = client.get(f"{API}/payments/history", params={"status": "completed"}, headers=headers)
    (row,) = r.json()
    assert row["order_date"] == DAY
    assert row["order_amount"] == 50

    r = client.get(f"{API}/payments/admin/all", headers=admin_headers)
    assert len(r.json()) == 2
    assert r.json()[0]["vendor_name"] == vendor.name


def test_payment_for_foreign_order(client, make_vendor, make_product, add_need, admin_headers):
    owner = make_vendor()
    stranger = make_vendor()
    add_need(owner, make_product("ProductX", 10), 5)
    order_id = _generate(client, admin_headers)

    r = client.post(
        f"{API}/payments",
        json={"vendor_id": stranger.id, "order_id": order_id, "amount": 50},
        headers=admin_headers,
    )
    assert r.status_code == 404


# ===================== NOTIFICATIONS =====================


def test_notifications(client, session, make_vendor, admin_headers, vendor_headers):
    vendor = make_vendor()
    headers = vendor_headers(vendor)

    for title in ("Price update", "Holiday notice"):
        r = client.post(
            f"{API}/notifications/admin/send",
            json={
                "vendor_id": vendor.id,
                "type": "info",
                "title": title,
                "message": "Details inside",
                "sent_via": "sms",
            },
            headers=admin_headers,
        )
        assert r.status_code == 201

    r = client.get(f"{API}/notifications/vendor/unread-count", headers=headers)
    assert r.json() == {"unread_count": 2}

    first_id = session.exec(select(Notification.id).order_by(Notification.id)).first()
    r = client.put(f"{API}/notifications/vendor/{first_id}/read", headers=headers)
    assert r.json()["is_read"] is True

    r = client.get(f"{API}/notifications/vendor", params={"unread_only": True}, headers=headers)
    assert [n["title"] for n in r.json()] == ["Holiday notice"]

    r = client.put(f"{API}/notifications/vendor/read-all", headers=headers)
    assert r.json() == {"updated_count": 1}

    r = client.get(f"{API}/notifications/vendor/unread-count", headers=headers)
    assert r.json() == {"unread_count": 0}


def test_notification_to_inactive_vendor(client, make_vendor, admin_headers):
    vendor = make_vendor(is_active=False)
    r = client.post(
        f"{API}/notifications/admin/send",
        json={"vendor_id": vendor.id, "type": "info", "title": "Hi", "message": "Hello"},
        headers=admin_headers,
    )
    assert r.status_code == 404


def test_bulk_notification_skips_unknown_and_inactive(
    client, session, make_vendor, admin_headers
):
    a = make_vendor(name="A")
    b = make_vendor(name="B")
    dormant = make_vendor(name="Dormant", is_active=False)

    r = client.post(
        f"{API}/notifications/admin/send-bulk",
        json={
            "vendor_ids": [a.id, dormant.id, 9999, b.id],
            "type": "holiday",
            "title": "Market closed",
            "message": "No delivery on Sunday",
            "sent_via": "whatsapp",
        },
        headers=admin_headers,
    )
    assert r.status_code == 201
    body = r.json()
    assert sorted(n["vendor_id"] for n in body) == [a.id, b.id]
    assert {n["sent_via"] for n in body} == {"whatsapp"}
    assert all(n["is_read"] is False for n in body)

    stored = session.exec(select(Notification.vendor_id)).all()
    assert sorted(stored) == [a.id, b.id]


def test_bulk_notification_requires_vendor_ids(client, admin_headers):
    r = client.post(
        f"{API}/notifications/admin/send-bulk",
        json={"vendor_ids": [], "type": "info", "title": "Hi", "message": "Hello"},
        headers=admin_headers,
    )
    assert r.status_code == 422


def test_admin_lists_all_notifications(client, session, make_vendor, admin_headers):
    a = make_vendor(name="Asha", phone="9000000001")
    b = make_vendor(name="Ravi", phone="9000000002")
    session.add(Notification(vendor_id=a.id, type="info", title="One", message="m"))
    session.add(Notification(vendor_id=a.id, type="payment", title="Two", message="m", is_read=True))
    session.add(Notification(vendor_id=b.id, type="info", title="Three", message="m"))
    session.commit()

    r = client.get(f"{API}/notifications/admin/all", headers=admin_headers)
    assert r.status_code == 200
    assert sorted(n["title"] for n in r.json()) == ["One", "Three", "Two"]

    r = client.get(
        f"{API}/notifications/admin/all", params={"vendor_id": a.id}, headers=admin_headers
    )
    rows = r.json()
    assert sorted(n["title"] for n in rows) == ["One", "Two"]
    assert {(n["vendor_name"], n["vendor_phone"]) for n in rows} == {("Asha", "9000000001")}

    r = client.get(
        f"{API}/notifications/admin/all",
        params={"type": "info", "is_read": False},
        headers=admin_headers,
    )
    assert sorted(n["title"] for n in r.json()) == ["One", "Three"]

    r = client.get(
        f"{API}/notifications/admin/all", params={"limit": 1}, headers=admin_headers
    )
    assert len(r.json()) == 1


def test_admin_notification_routes_reject_vendor_token(client, make_vendor, vendor_headers):
    vendor = make_vendor()
    r = client.get(f"{API}/notifications/admin/all", headers=vendor_headers(vendor))
    assert r.status_code == 403


def test_notification_of_other_vendor(client, session, make_vendor, vendor_headers):
    owner = make_vendor()
    other = make_vendor()
    n = Notification(vendor_id=owner.id, type="info", title="Hi", message="Hello")
    session.add(n)
    session.commit()

    r = client.put(f"{API}/notifications/vendor/{n.id}/read", headers=vendor_headers(other))
    assert r.status_code == 404


# ===================== ANALYTICS =====================


def test_analytics(client, make_vendor, make_product, add_need, admin_headers):
    a = make_vendor(name="Big Buyer")
    b = make_vendor(name="Small Buyer")
    rice = make_product("Rice", 50)
    add_need(a, rice, 10)
    add_need(b, rice, 1)
    client.post(
        f"{API}/admin/orders/generate-daily",
        json={"target_date": DAY},
        headers=admin_headers,
    )

    r = client.get(f"{API}/admin/analytics", params={"period": "week"}, headers=admin_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["summary"] == {"total_vendors": 2, "total_orders": 2, "total_revenue": 550}
    assert body["top_products"][0]["name"] == "Rice"
    assert body["top_products"][0]["total_quantity"] == 11
    assert [v["name"] for v in body["top_vendors"]] == ["Big Buyer", "Small Buyer"]

    r = client.get(f"{API}/admin/analytics", params={"period": "decade"}, headers=admin_headers)
    assert r.status_code == 422


def test_expired_admin_token(client, staff):
    token = create_access_token({"staff_id": staff.id}, expires_delta=timedelta(minutes=-1))
    r = client.get(f"{API}/admin/analytics", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401

import pytest

from database_init import db
from helpers import make_product, make_user
from models.order import Order
from models.order_item import OrderItem
from models.product import Product
from util.until import to_price


def make_order(app, buyer_id, product_id, price="10.00", quantity=1):
    with app.app_context():
        product = db.session.get(Product, product_id)
        order = Order(buyer_id=buyer_id, payment={"success": True})
        order.order_items.append(
            OrderItem(
                product_id=product.id,
                name=product.name,
                price=to_price(price),
                quantity=quantity,
            )
        )
        db.session.add(order)
        db.session.commit()
        return order.id


class TestBuyerOrders:
    def test_only_own_orders(self, app, client, user_id, user_headers, category_id):
        pid = make_product(app, category_id)
        other = make_user(app, email="other@test.com")
        mine = make_order(app, user_id, pid, price="12.50", quantity=2)
        make_order(app, other, pid)

        res = client.get("/api/v1/auth/orders", headers=user_headers)

        assert res.status_code == 200
        orders = res.get_json()["orders"]
        assert [o["_id"] for o in orders] == [mine]
        order = orders[0]
        assert order["status"] == "Not Processed"
        assert order["buyer"] == {"_id": user_id, "name": "Test User"}
        assert order["products"][0]["name"] == "Laptop"
        assert order["products"][0]["price"] == 12.5
        assert order["products"][0]["quantity"] == 2
        assert "photo_data" not in order["products"][0]

    def test_requires_login(self, client):
        res = client.get("/api/v1/auth/orders")

        assert res.status_code == 401

    def test_deleted_product_keeps_snapshot(self, app, client, user_id, user_headers, category_id):
        pid = make_product(app, category_id, name="Old Phone")
        make_order(app, user_id, pid, price="99.90")
        with app.app_context():
            db.session.delete(db.session.get(Product, pid))
            db.session.commit()

        res = client.get("/api/v1/auth/orders", headers=user_headers)

        line = res.get_json()["orders"][0]["products"][0]
        assert line == {"_id": None, "name": "Old Phone", "price": 99.9, "quantity": 1}


class TestAllOrders:
    def test_admin_sees_every_order(self, app, client, admin_headers, user_id, category_id):
        pid = make_product(app, category_id)
        first = make_order(app, user_id, pid)
        second = make_order(app, make_user(app, email="b@test.com"), pid)

        res = client.get("/api/v1/auth/all-orders", headers=admin_headers)

        assert res.status_code == 200
        assert [o["_id"] for o in res.get_json()["orders"]] == [second, first]

    def test_customer_is_rejected(self, client, user_headers):
        res = client.get("/api/v1/auth/all-orders", headers=user_headers)

        assert res.status_code == 401
        assert res.get_json()["message"] == "Unauthorized Access"


class TestOrderStatus:
    @pytest.fixture
    def order_id(self, app, user_id, category_id):
        return make_order(app, user_id, make_product(app, category_id))

    @pytest.mark.parametrize("status", ["Processing", "Delivered", "Cancelled"])
    def test_update_status(self, app, client, admin_headers, order_id, status):
        res = client.put(
            f"/api/v1/auth/order-status/{order_id}",
            json={"status": status},
            headers=admin_headers,
        )

        assert res.status_code == 200
        body = res.get_json()
        assert body["message"] == "Order status updated"
        assert body["order"]["status"] == status
        with app.app_context():
            assert db.session.get(Order, order_id).status == status

    def test_any_status_can_follow_any_other(self, client, admin_headers, order_id):
        for status in ["Delivered", "Not Processed"]:
            res = client.put(
                f"/api/v1/auth/order-status/{order_id}",
                json={"status": status},
                headers=admin_headers,
            )
            assert res.status_code == 200

    @pytest.mark.parametrize("payload", [{}, {"status": "Lost"}, {"status": "delivered"}])
    def test_invalid_status(self, client, admin_headers, order_id, payload):
        res = client.put(
            f"/api/v1/auth/order-status/{order_id}", json=payload, headers=admin_headers
        )

        assert res.status_code == 400
        assert res.get_json()["message"] == "Invalid order status is provided"

    @pytest.mark.parametrize("order_ref", ["999", "abc", "99999999999999999999"])
    def test_unknown_order(self, client, admin_headers, order_ref):
        res = client.put(
            f"/api/v1/auth/order-status/{order_ref}",
            json={"status": "Shipped"},
            headers=admin_headers,
        )

        assert res.status_code == 400
        assert (
            res.get_json()["message"]
            == "Invalid order id was provided and order cannot be found"
        )

    def test_customer_is_rejected(self, client, user_headers, order_id):
        res = client.put(
            f"/api/v1/auth/order-status/{order_id}",
            json={"status": "Shipped"},
            headers=user_headers,
        )

        assert res.status_code == 401

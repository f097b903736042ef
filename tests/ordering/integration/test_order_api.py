"""Integration tests for Order API endpoints via TestClient."""

import json

from ordering.gateway import get_gateway
from ordering.order.order import Order
from protean import current_domain

CUSTOMER = {"X-Customer-Id": "cust-api-002"}
ADDRESS = {"details": "12 Nile St", "phone": "01000000000", "city": "Cairo", "postal_code": "11511"}


def _fill_cart(client, list_product):
    """Helper: put 2 × 10.0 + 1 × 5.0 in the customer's cart and return the cart id."""
    shirt = list_product()
    socks = list_product(title="Wool Socks", price=5.0, colors=())
    for product_id, color in ((shirt, "black"), (shirt, "black"), (socks, None)):
        response = client.post("/cart", json={"product_id": product_id, "color": color}, headers=CUSTOMER)
        assert response.status_code == 200
    return response.json()["data"]["id"]


def _place_order(client, cart_id, shipping_address=ADDRESS):
    response = client.post(f"/orders/{cart_id}", json={"shipping_address": shipping_address}, headers=CUSTOMER)
    assert response.status_code == 201
    return response.json()["data"]


class TestPlaceOrderEndpoint:
    def test_place_cash_order(self, client, list_product):
        cart_id = _fill_cart(client, list_product)
        order = _place_order(client, cart_id)

        assert order["customer_id"] == "cust-api-002"
        assert order["total_order_price"] == 25.0
        assert order["payment_method_type"] == "cash"
        assert order["shipping_address"]["city"] == "Cairo"
        assert len(order["cart_items"]) == 2
        assert order["is_paid"] is False

    def test_cart_gone_after_order(self, client, list_product):
        cart_id = _fill_cart(client, list_product)
        _place_order(client, cart_id)

        assert client.get("/cart", headers=CUSTOMER).status_code == 404

    def test_stock_updated(self, client, list_product):
        cart_id = _fill_cart(client, list_product)
        order = _place_order(client, cart_id)
        shirt_id = next(item["product_id"] for item in order["cart_items"] if item["color"] == "black")

        product = client.get(f"/products/{shirt_id}").json()["data"]
        assert product["quantity"] == 3
        assert product["sold"] == 2

    def test_without_body(self, client, list_product):
        cart_id = _fill_cart(client, list_product)
        response = client.post(f"/orders/{cart_id}", headers=CUSTOMER)
        assert response.status_code == 201
        assert response.json()["data"]["shipping_address"] is None

    def test_unknown_cart_returns_404(self, client):
        response = client.post("/orders/no-such-cart", json={}, headers=CUSTOMER)
        assert response.status_code == 404


class TestOrderStatusEndpoints:
    def test_get_order(self, client, list_product):
        order = _place_order(client, _fill_cart(client, list_product))

        response = client.get(f"/orders/{order['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["id"] == order["id"]

    def test_get_unknown_order_returns_404(self, client):
        assert client.get("/orders/no-such-order").status_code == 404

    def test_pay_order(self, client, list_product):
        order = _place_order(client, _fill_cart(client, list_product))

        response = client.put(f"/orders/{order['id']}/pay")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["is_paid"] is True
        assert data["paid_at"] is not None

    def test_deliver_order(self, client, list_product):
        order = _place_order(client, _fill_cart(client, list_product))

        response = client.put(f"/orders/{order['id']}/deliver")
        assert response.status_code == 200
        assert response.json()["data"]["is_delivered"] is True

        stored = current_domain.repository_for(Order).get(order["id"])
        assert stored.delivered_at is not None

    def test_pay_unknown_order_returns_404(self, client):
        assert client.put("/orders/no-such-order/pay").status_code == 404


class TestCheckoutSessionEndpoint:
    def _headers(self):
        return {**CUSTOMER, "X-Customer-Email": "buyer@example.com"}

    def test_create_checkout_session(self, client, list_product):
        cart_id = _fill_cart(client, list_product)

        response = client.post(
            f"/orders/checkout-session/{cart_id}",
            json={"shipping_address": ADDRESS},
            headers=self._headers(),
        )
        assert response.status_code == 200
        session = response.json()["session"]
        assert session["amount"] == 2500
        assert session["client_reference_id"] == cart_id
        assert session["success_url"] == "http://testserver/orders"
        assert session["cancel_url"] == "http://testserver/cart"
        assert json.loads(session["metadata"]["shipping_address"]) == ADDRESS

    def test_cart_kept_after_checkout_session(self, client, list_product):
        cart_id = _fill_cart(client, list_product)
        client.post(f"/orders/checkout-session/{cart_id}", json={}, headers=self._headers())

        assert client.get("/cart", headers=CUSTOMER).json()["num_of_cart_items"] == 2

    def test_gateway_failure_returns_502(self, client, list_product):
        cart_id = _fill_cart(client, list_product)
        get_gateway().configure(should_succeed=False, failure_reason="Provider down")

        response = client.post(f"/orders/checkout-session/{cart_id}", json={}, headers=self._headers())
        assert response.status_code == 502
        assert response.json()["message"] == "Provider down"

    def test_missing_email_header_rejected(self, client, list_product):
        cart_id = _fill_cart(client, list_product)
        response = client.post(f"/orders/checkout-session/{cart_id}", json={}, headers=CUSTOMER)
        assert response.status_code == 422

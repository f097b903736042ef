"""Integration tests for Coupon and Product administration endpoints via TestClient."""

from datetime import UTC, datetime, timedelta

import pytest


def _expire(days=7):
    return (datetime.now(UTC) + timedelta(days=days)).isoformat()


def _create_coupon(client, name="SAVE10", discount=10.0):
    response = client.post("/coupons", json={"name": name, "discount": discount, "expire": _expire()})
    assert response.status_code == 201
    return response.json()["data"]


class TestCouponEndpoints:
    def test_create_coupon(self, client):
        coupon = _create_coupon(client)
        assert coupon["name"] == "SAVE10"
        assert coupon["discount"] == 10.0

    def test_duplicate_name_returns_400(self, client):
        _create_coupon(client)
        response = client.post("/coupons", json={"name": "SAVE10", "discount": 5.0, "expire": _expire()})
        assert response.status_code == 400
        assert response.json()["status"] == "fail"

    @pytest.mark.parametrize("discount", [-5, 101])
    def test_out_of_range_discount_rejected(self, client, discount):
        response = client.post("/coupons", json={"name": "BAD", "discount": discount, "expire": _expire()})
        assert response.status_code == 422

    def test_list_coupons_default_limit(self, client):
        for index in range(6):
            _create_coupon(client, name=f"CODE{index}")

        response = client.get("/coupons")
        assert response.status_code == 200
        body = response.json()
        assert body["page"] == 1
        assert body["results"] == 5

    def test_list_coupons_second_page(self, client):
        for index in range(6):
            _create_coupon(client, name=f"CODE{index}")

        body = client.get("/coupons", params={"page": 2, "limit": 5}).json()
        assert body["page"] == 2
        assert body["results"] == 1

    def test_get_coupon(self, client):
        coupon = _create_coupon(client)
        response = client.get(f"/coupons/{coupon['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "SAVE10"

    def test_get_unknown_coupon_returns_404(self, client):
        assert client.get("/coupons/missing").status_code == 404

    def test_update_coupon(self, client):
        coupon = _create_coupon(client)
        response = client.put(f"/coupons/{coupon['id']}", json={"discount": 35.0})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["discount"] == 35.0
        assert data["name"] == "SAVE10"

    def test_delete_coupon(self, client):
        coupon = _create_coupon(client)
        assert client.delete(f"/coupons/{coupon['id']}").status_code == 204
        assert client.get(f"/coupons/{coupon['id']}").status_code == 404

    def test_delete_unknown_coupon_returns_404(self, client):
        assert client.delete("/coupons/missing").status_code == 404


class TestProductEndpoints:
    def test_list_product(self, client, list_product):
        product_id = list_product(colors=("black", "white"))
        product = client.get(f"/products/{product_id}").json()["data"]
        assert product["title"] == "Linen Shirt"
        assert product["colors"] == ["black", "white"]
        assert product["sold"] == 0

    def test_short_title_returns_400(self, client):
        response = client.post("/products", json={"title": "ab", "price": 1.0, "quantity": 1})
        assert response.status_code == 400
        assert "title" in response.json()["errors"]

    def test_change_price_does_not_touch_cart_lines(self, client, list_product):
        product_id = list_product()
        headers = {"X-Customer-Id": "cust-api-003"}
        client.post("/cart", json={"product_id": product_id, "color": "black"}, headers=headers)

        response = client.put(f"/products/{product_id}/price", json={"price": 99.0})
        assert response.status_code == 200
        assert response.json()["data"]["price"] == 99.0

        cart = client.get("/cart", headers=headers).json()["data"]
        assert cart["cart_items"][0]["price"] == 10.0
        assert cart["total_cart_price"] == 10.0

    def test_restock(self, client, list_product):
        product_id = list_product(quantity=2)
        response = client.put(f"/products/{product_id}/restock", json={"quantity": 3})
        assert response.status_code == 200
        assert response.json()["data"]["quantity"] == 5

    def test_get_unknown_product_returns_404(self, client):
        assert client.get("/products/missing").status_code == 404

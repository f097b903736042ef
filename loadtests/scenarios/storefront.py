"""Storefront load test scenarios.

Two stateful SequentialTaskSet journeys: a shopper who fills a cart, applies
a coupon and pays cash on delivery, and a shopper who opens a card checkout
session instead.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    cart_item_data,
    coupon_data,
    customer_email,
    product_data,
    quantity_data,
    shipping_address_data,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class _ShopperJourney(SequentialTaskSet):
    """Shared steps: list products, then add each one to the cart."""

    def on_start(self):
        self.state = ShopperState()

    def _fail(self, resp, action):
        resp.failure(f"{action} failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def list_products(self):
        for _ in range(2):
            with self.client.post(
                "/products",
                json=product_data(),
                catch_response=True,
                name="POST /products",
            ) as resp:
                if resp.status_code == 201:
                    self.state.product_ids.append(resp.json()["data"]["id"])
                else:
                    self._fail(resp, "List product")
                    self.interrupt()

    @task
    def add_items(self):
        for product_id in self.state.product_ids:
            with self.client.post(
                "/cart",
                json=cart_item_data(product_id),
                headers=self.state.headers,
                catch_response=True,
                name="POST /cart",
            ) as resp:
                if resp.status_code == 200:
                    cart = resp.json()["data"]
                    self.state.cart_id = cart["id"]
                    self.state.item_ids = [item["id"] for item in cart["cart_items"]]
                else:
                    self._fail(resp, "Add to cart")
                    self.interrupt()


class CashOrderJourney(_ShopperJourney):
    """List Products -> Add Items -> Update Quantity -> Apply Coupon ->
    Place Cash Order -> Pay -> Deliver.
    """

    @task
    def update_quantity(self):
        with self.client.put(
            f"/cart/{self.state.item_ids[0]}",
            json=quantity_data(),
            headers=self.state.headers,
            catch_response=True,
            name="PUT /cart/{item_id}",
        ) as resp:
            if resp.status_code != 200:
                self._fail(resp, "Update quantity")

    @task
    def apply_coupon(self):
        payload = coupon_data()
        with self.client.post("/coupons", json=payload, catch_response=True, name="POST /coupons") as resp:
            if resp.status_code != 201:
                self._fail(resp, "Create coupon")
                return
        with self.client.put(
            "/cart/apply-coupon",
            json={"coupon": payload["name"]},
            headers=self.state.headers,
            catch_response=True,
            name="PUT /cart/apply-coupon",
        ) as resp:
            if resp.status_code == 200:
                self.state.coupon_name = payload["name"]
            else:
                self._fail(resp, "Apply coupon")

    @task
    def place_order(self):
        with self.client.post(
            f"/orders/{self.state.cart_id}",
            json=shipping_address_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /orders/{cart_id}",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["data"]["id"]
            else:
                self._fail(resp, "Place order")
                self.interrupt()

    @task
    def pay(self):
        with self.client.put(
            f"/orders/{self.state.order_id}/pay",
            catch_response=True,
            name="PUT /orders/{id}/pay",
        ) as resp:
            if resp.status_code != 200:
                self._fail(resp, "Mark paid")

    @task
    def deliver(self):
        with self.client.put(
            f"/orders/{self.state.order_id}/deliver",
            catch_response=True,
            name="PUT /orders/{id}/deliver",
        ) as resp:
            if resp.status_code != 200:
                self._fail(resp, "Mark delivered")

    @task
    def done(self):
        self.interrupt()


class CardCheckoutJourney(_ShopperJourney):
    """List Products -> Add Items -> Open Checkout Session -> Clear Cart."""

    @task
    def checkout_session(self):
        with self.client.post(
            f"/orders/checkout-session/{self.state.cart_id}",
            json=shipping_address_data(),
            headers={**self.state.headers, "X-Customer-Email": customer_email()},
            catch_response=True,
            name="POST /orders/checkout-session/{cart_id}",
        ) as resp:
            if resp.status_code != 200:
                self._fail(resp, "Checkout session")

    @task
    def clear_cart(self):
        with self.client.delete(
            "/cart",
            headers=self.state.headers,
            catch_response=True,
            name="DELETE /cart",
        ) as resp:
            if resp.status_code != 204:
                self._fail(resp, "Clear cart")

    @task
    def done(self):
        self.interrupt()


class CashShopperUser(HttpUser):
    """Shoppers who always pay cash on delivery."""

    tasks = [CashOrderJourney]
    wait_time = between(1, 3)


class StorefrontUser(HttpUser):
    """Mixed shopper traffic: most shoppers pay cash, some use card checkout."""

    tasks = {CashOrderJourney: 3, CardCheckoutJourney: 1}
    wait_time = between(1, 5)

"""Tests for the Order aggregate and order pricing."""

import json
from datetime import UTC, datetime, timedelta

import pytest
from ordering.cart.cart import ShoppingCart
from ordering.coupon.coupon import Coupon
from ordering.order.events import OrderDelivered, OrderPaid, OrderPlaced
from ordering.order.order import Order, PaymentMethodType
from ordering.order.pricing import OrderPricing, price_cart
from ordering.utils import settings


@pytest.fixture()
def cart():
    cart = ShoppingCart.create(customer_id="cust-001")
    cart.add_item("prod-A", "black", 10.0)
    cart.add_item("prod-A", "black", 10.0)
    cart.add_item("prod-B", None, 5.0)
    return cart


def _place(cart, shipping_address=None, tax_price=0.0, shipping_price=0.0):
    pricing = OrderPricing(cart_price=cart.effective_price, tax_price=tax_price, shipping_price=shipping_price)
    return Order.place(customer_id="cust-001", cart=cart, shipping_address=shipping_address, pricing=pricing)


class TestOrderPricing:
    def test_total_adds_tax_and_shipping(self):
        pricing = OrderPricing(cart_price=20.0, tax_price=2.5, shipping_price=7.5)
        assert pricing.total_order_price == 30.0

    def test_minor_units(self):
        pricing = OrderPricing(cart_price=19.99, tax_price=0.0, shipping_price=0.0)
        assert pricing.total_in_minor_units == 1999

    def test_price_cart_uses_raw_total_without_coupon(self, cart):
        assert price_cart(cart).cart_price == 25.0

    def test_price_cart_uses_discount(self, cart):
        cart.apply_coupon(Coupon.create(name="SAVE20", discount=20.0, expire=datetime.now(UTC) + timedelta(days=1)))
        assert price_cart(cart).cart_price == 20.0

    def test_price_cart_reads_configured_charges(self, cart, monkeypatch):
        monkeypatch.setattr(settings, "TAX_PRICE", 3.0)
        monkeypatch.setattr(settings, "SHIPPING_PRICE", 2.0)
        assert price_cart(cart).total_order_price == 30.0


class TestPlaceOrder:
    def test_snapshot_of_cart_lines(self, cart):
        order = _place(cart)
        assert len(order.items) == 2
        lines = {item.product_id: (item.quantity, item.price) for item in order.items}
        assert lines == {"prod-A": (2, 10.0), "prod-B": (1, 5.0)}

    def test_total_and_defaults(self, cart):
        order = _place(cart, tax_price=1.0, shipping_price=4.0)
        assert order.total_order_price == 30.0
        assert order.payment_method_type == PaymentMethodType.CASH.value
        assert order.is_paid is False
        assert order.is_delivered is False

    def test_shipping_address_captured(self, cart):
        order = _place(cart, shipping_address={"details": "12 Nile St", "city": "Cairo"})
        assert order.shipping_address.details == "12 Nile St"
        assert order.shipping_address.city == "Cairo"

    def test_no_shipping_address(self, cart):
        order = _place(cart)
        assert order.shipping_address is None

    def test_place_raises_event(self, cart):
        order = _place(cart)
        event = order._events[-1]
        assert isinstance(event, OrderPlaced)
        assert event.cart_id == str(cart.id)
        assert len(json.loads(event.items)) == 2
        assert event.total_order_price == 25.0


class TestPaymentAndDelivery:
    def test_mark_paid(self, cart):
        order = _place(cart)
        order.mark_paid()
        assert order.is_paid is True
        assert order.paid_at is not None
        assert isinstance(order._events[-1], OrderPaid)

    def test_mark_paid_twice_restamps(self, cart):
        order = _place(cart)
        order.mark_paid()
        first = order.paid_at
        order.mark_paid()
        assert order.is_paid is True
        assert order.paid_at >= first

    def test_mark_delivered(self, cart):
        order = _place(cart)
        order.mark_delivered()
        assert order.is_delivered is True
        assert order.delivered_at is not None
        assert isinstance(order._events[-1], OrderDelivered)

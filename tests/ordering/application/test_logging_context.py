"""Cart and order identifiers are bound to the log context while handlers run."""

import json

import structlog
from ordering.cart.items import AddProductToCart
from ordering.gateway import set_gateway
from ordering.gateway.fake_adapter import FakeGateway
from ordering.order.checkout import CreateCheckoutSession
from ordering.product.management import ListProduct
from ordering.utils.logging import order_context
from protean import current_domain


class ContextRecordingGateway(FakeGateway):
    def __init__(self):
        super().__init__()
        self.seen_context = None

    def create_checkout_session(self, **kwargs):
        self.seen_context = structlog.contextvars.get_contextvars()
        return super().create_checkout_session(**kwargs)


class TestOrderContext:
    def test_binds_stringified_ids_and_restores(self):
        with order_context(cart_id=42, order_id="ord-1"):
            bound = structlog.contextvars.get_contextvars()
            assert (bound["cart_id"], bound["order_id"]) == ("42", "ord-1")

        assert "cart_id" not in structlog.contextvars.get_contextvars()
        assert "order_id" not in structlog.contextvars.get_contextvars()

    def test_skips_missing_ids(self):
        with order_context(cart_id="cart-1", order_id=None):
            assert "order_id" not in structlog.contextvars.get_contextvars()


class TestHandlerContext:
    def test_checkout_runs_with_cart_and_customer_bound(self):
        product_id = current_domain.process(
            ListProduct(title="Linen Shirt", price=10.0, quantity=5, colors=json.dumps([])),
            asynchronous=False,
        )
        cart_id = current_domain.process(
            AddProductToCart(customer_id="cust-001", product_id=product_id),
            asynchronous=False,
        )
        gateway = ContextRecordingGateway()
        set_gateway(gateway)

        current_domain.process(
            CreateCheckoutSession(customer_id="cust-001", customer_email="buyer@example.com", cart_id=cart_id),
            asynchronous=False,
        )

        assert gateway.seen_context["cart_id"] == str(cart_id)
        assert gateway.seen_context["customer_id"] == "cust-001"
        assert "cart_id" not in structlog.contextvars.get_contextvars()

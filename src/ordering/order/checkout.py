"""Card checkout: open a payment-provider session for a cart.

No order is materialised here and the cart is left untouched. The provider
reports the completed payment to a webhook, which carries the cart id and
the shipping address back through `client_reference_id` and `metadata`.
"""

import json

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering
from ordering.gateway import get_gateway
from ordering.order.order import Order
from ordering.order.pricing import price_cart
from ordering.utils import settings
from ordering.utils.logging import order_context

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class CreateCheckoutSession:
    customer_id = Identifier(required=True)
    customer_email = String(required=True, max_length=255)
    cart_id = Identifier(required=True)
    shipping_address = Text()  # JSON: {details, phone, city, postal_code}
    success_url = String(max_length=500)
    cancel_url = String(max_length=500)


@ordering.command_handler(part_of=Order)
class CreateCheckoutSessionHandler:
    @handle(CreateCheckoutSession)
    def create_checkout_session(self, command):
        cart = current_domain.repository_for(ShoppingCart).get(command.cart_id)
        pricing = price_cart(cart)

        # A missing address leaves the metadata key out entirely
        metadata = {}
        if command.shipping_address is not None:
            metadata["shipping_address"] = (
                command.shipping_address
                if isinstance(command.shipping_address, str)
                else json.dumps(command.shipping_address)
            )

        with order_context(cart_id=cart.id, customer_id=command.customer_id):
            session = get_gateway().create_checkout_session(
                amount=pricing.total_in_minor_units,
                currency=settings.CHECKOUT_CURRENCY,
                description=f"Order from {command.customer_id}",
                customer_email=command.customer_email,
                client_reference_id=str(cart.id),
                success_url=command.success_url or settings.CHECKOUT_SUCCESS_URL,
                cancel_url=command.cancel_url or settings.CHECKOUT_CANCEL_URL,
                metadata=metadata,
            )

            logger.info(
                "Checkout session created",
                session_id=session.session_id,
                amount=session.amount,
                currency=session.currency,
            )
            return session

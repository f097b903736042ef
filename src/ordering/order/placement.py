"""Cash order placement: command and handler.

Order creation, stock deduction and cart removal all happen inside the
handler's unit of work, so they commit together or not at all.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering
from ordering.order.order import Order
from ordering.order.pricing import price_cart
from ordering.product.product import Product
from ordering.utils.logging import order_context

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class PlaceCashOrder:
    customer_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    shipping_address = Text()  # JSON: {details, phone, city, postal_code}


def parse_shipping_address(raw):
    """Decode the address JSON carried on the command into a dict (or None)."""
    if raw is None or isinstance(raw, dict):
        return raw
    try:
        address = json.loads(raw)
    except (TypeError, ValueError):
        raise ValidationError({"shipping_address": ["Shipping address is not valid JSON"]}) from None
    if address is not None and not isinstance(address, dict):
        raise ValidationError({"shipping_address": ["Shipping address must be an object"]})
    return address


@ordering.command_handler(part_of=Order)
class PlaceCashOrderHandler:
    @handle(PlaceCashOrder)
    def place_cash_order(self, command):
        with order_context(cart_id=command.cart_id, customer_id=command.customer_id):
            cart_repo = current_domain.repository_for(ShoppingCart)
            cart = cart_repo.get(command.cart_id)

            shipping_address = parse_shipping_address(command.shipping_address)
            pricing = price_cart(cart)

            # One product can back several lines (one per color)
            sold_quantities = {}
            for item in cart.items:
                sold_quantities[str(item.product_id)] = sold_quantities.get(str(item.product_id), 0) + item.quantity

            # Every product must exist before anything is written
            product_repo = current_domain.repository_for(Product)
            sales = [(product_repo.get(product_id), quantity) for product_id, quantity in sold_quantities.items()]

            order = Order.place(
                customer_id=command.customer_id,
                cart=cart,
                shipping_address=shipping_address,
                pricing=pricing,
            )
            current_domain.repository_for(Order).add(order)

            for product, quantity in sales:
                product.record_sale(quantity)
                product_repo.add(product)

            cart_repo._dao.delete(cart)

            logger.info("Order placed", order_id=str(order.id), total_order_price=order.total_order_price)
            return str(order.id)

"""Order aggregate (CQRS): an immutable snapshot of a cart at checkout.

Line items, shipping address and prices are copied from the cart when the
order is placed and never change afterwards. The only mutable state is the
pair of paid/delivered flags, each stamped with the time it was last set.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.fields import (
    Boolean,
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    ValueObject,
)

from ordering.domain import ordering
from ordering.order.events import OrderDelivered, OrderPaid, OrderPlaced


class PaymentMethodType(Enum):
    CASH = "cash"
    CARD = "card"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class ShippingAddress:
    """Where the order goes, captured at checkout time.

    Later edits to the customer's saved addresses do not touch placed orders.
    """

    details = String(required=True, max_length=255)
    phone = String(max_length=30)
    city = String(max_length=100)
    postal_code = String(max_length=20)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    color = String(max_length=50)
    quantity = Integer(required=True)
    price = Float(required=True, min_value=0.0)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    customer_id = Identifier(required=True)
    items = HasMany(OrderItem)
    shipping_address = ValueObject(ShippingAddress)
    payment_method_type = String(
        choices=PaymentMethodType,
        default=PaymentMethodType.CASH.value,
    )
    tax_price = Float(default=0.0)
    shipping_price = Float(default=0.0)
    total_order_price = Float(required=True)
    is_paid = Boolean(default=False)
    paid_at = DateTime()
    is_delivered = Boolean(default=False)
    delivered_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, customer_id, cart, shipping_address, pricing):
        """Snapshot `cart` into a new order.

        `pricing` carries the cart price (discounted when a coupon has been
        applied) plus the flat tax and shipping charges.
        """
        now = datetime.now(UTC)
        total_order_price = pricing.total_order_price

        order = cls(
            customer_id=customer_id,
            shipping_address=ShippingAddress(**shipping_address) if shipping_address else None,
            payment_method_type=PaymentMethodType.CASH.value,
            tax_price=pricing.tax_price,
            shipping_price=pricing.shipping_price,
            total_order_price=total_order_price,
            created_at=now,
            updated_at=now,
        )
        items_snapshot = []
        for cart_item in cart.items:
            order.add_items(
                OrderItem(
                    product_id=cart_item.product_id,
                    color=cart_item.color,
                    quantity=cart_item.quantity,
                    price=cart_item.price,
                )
            )
            items_snapshot.append(
                {
                    "product_id": str(cart_item.product_id),
                    "color": cart_item.color,
                    "quantity": cart_item.quantity,
                    "price": cart_item.price,
                }
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                cart_id=str(cart.id),
                items=json.dumps(items_snapshot),
                total_order_price=total_order_price,
                placed_at=now,
            )
        )
        return order

    def mark_paid(self):
        """Flag the order as paid. Repeating the call re-stamps `paid_at`."""
        now = datetime.now(UTC)
        self.is_paid = True
        self.paid_at = now
        self.updated_at = now

        self.raise_(OrderPaid(order_id=str(self.id), paid_at=now))

    def mark_delivered(self):
        """Flag the order as delivered. Repeating the call re-stamps `delivered_at`."""
        now = datetime.now(UTC)
        self.is_delivered = True
        self.delivered_at = now
        self.updated_at = now

        self.raise_(OrderDelivered(order_id=str(self.id), delivered_at=now))

"""Shopping Cart aggregate (CQRS): one mutable cart per customer.

Each line snapshots the product price at the moment it is first added; later
price changes never reach existing lines. Every item mutation goes through
`_recalculate_totals`, which rewrites `total_cart_price` and drops any coupon
discount, so a discount has to be re-applied after the cart changes.
"""

import math
from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from ordering.cart.events import (
    CartCouponApplied,
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
)
from ordering.domain import ordering


def _items_total(items):
    return sum(item.quantity * item.price for item in items)


@ordering.entity(part_of="ShoppingCart")
class CartItem:
    product_id = Identifier(required=True)
    color = String(max_length=50)
    quantity = Integer(default=1)
    price = Float(required=True, min_value=0.0)


@ordering.aggregate
class ShoppingCart:
    customer_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    total_cart_price = Float(default=0.0)
    total_price_after_discount = Float()
    coupon_name = String(max_length=100)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_must_equal_sum_of_items(self):
        if not math.isclose(self.total_cart_price or 0.0, _items_total(self.items), abs_tol=1e-6):
            raise ValidationError({"total_cart_price": ["Cart total does not match its items"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        return cls(
            customer_id=customer_id,
            total_cart_price=0.0,
            created_at=now,
            updated_at=now,
        )

    @property
    def effective_price(self):
        """Discounted total when a coupon is applied, otherwise the raw total."""
        if self.total_price_after_discount is not None:
            return self.total_price_after_discount
        return self.total_cart_price

    def _recalculate_totals(self):
        self.total_cart_price = _items_total(self.items)
        self.total_price_after_discount = None
        self.coupon_name = None
        self.updated_at = datetime.now(UTC)

    def _find_item(self, item_id):
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, color, price):
        """Add one unit of (product, color). An existing line keeps its captured price."""
        existing = next(
            (i for i in self.items if str(i.product_id) == str(product_id) and i.color == color),
            None,
        )

        with atomic_change(self):
            if existing:
                existing.quantity += 1
                item = existing
            else:
                item = CartItem(product_id=product_id, color=color, quantity=1, price=price)
                self.add_items(item)
            self._recalculate_totals()

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                item_id=str(item.id),
                product_id=str(product_id),
                color=color,
                quantity=item.quantity,
                price=item.price,
                total_cart_price=self.total_cart_price,
            )
        )
        return item

    def update_item_quantity(self, item_id, quantity):
        """Overwrite the quantity of a line. The value is taken as given."""
        item = self._find_item(item_id)
        if item is None:
            raise ObjectNotFoundError({"_entity": f"There is no item for this id: {item_id}"})

        previous_quantity = item.quantity
        with atomic_change(self):
            item.quantity = quantity
            self._recalculate_totals()

        self.raise_(
            CartItemQuantityUpdated(
                cart_id=str(self.id),
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
                total_cart_price=self.total_cart_price,
            )
        )

    def remove_item(self, item_id):
        """Remove a line if present. Totals are recomputed either way."""
        item = self._find_item(item_id)

        with atomic_change(self):
            if item is not None:
                self.remove_items(item)
            self._recalculate_totals()

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                item_id=str(item_id),
                removed=item is not None,
                total_cart_price=self.total_cart_price,
            )
        )

    # -------------------------------------------------------------------
    # Coupon
    # -------------------------------------------------------------------
    def apply_coupon(self, coupon):
        """Record the coupon's discounted total next to the undiscounted one."""
        self.total_price_after_discount = coupon.discounted_total(self.total_cart_price)
        self.coupon_name = coupon.name
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCouponApplied(
                cart_id=str(self.id),
                coupon_name=coupon.name,
                discount=coupon.discount,
                total_cart_price=self.total_cart_price,
                total_price_after_discount=self.total_price_after_discount,
            )
        )

"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Boolean, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product line was added to the cart, or an existing line was bumped by one."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    color = String()
    quantity = Integer(required=True)
    price = Float(required=True)
    total_cart_price = Float(required=True)


@ordering.event(part_of="ShoppingCart")
class CartItemQuantityUpdated:
    """The quantity of a cart line was overwritten."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    total_cart_price = Float(required=True)


@ordering.event(part_of="ShoppingCart")
class CartItemRemoved:
    """A cart line was removed. `removed` is false when no line matched."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    removed = Boolean(default=False)
    total_cart_price = Float(required=True)


@ordering.event(part_of="ShoppingCart")
class CartCouponApplied:
    """A coupon discount was applied to the cart total."""

    __version__ = 1

    cart_id = Identifier(required=True)
    coupon_name = String(required=True)
    discount = Float(required=True)
    total_cart_price = Float(required=True)
    total_price_after_discount = Float(required=True)

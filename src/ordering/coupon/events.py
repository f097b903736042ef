"""Domain events for the Coupon aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from ordering.domain import ordering


@ordering.event(part_of="Coupon")
class CouponCreated:
    __version__ = 1

    coupon_id = Identifier(required=True)
    name = String(required=True)
    discount = Float(required=True)
    expire = DateTime(required=True)


@ordering.event(part_of="Coupon")
class CouponUpdated:
    __version__ = 1

    coupon_id = Identifier(required=True)
    name = String(required=True)
    discount = Float(required=True)
    expire = DateTime(required=True)

"""Coupon aggregate: a named, time-bounded percentage discount.

Carts never hold a reference to a coupon; applying one only copies the
discounted total onto the cart.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, String

from ordering.coupon.events import CouponCreated, CouponUpdated
from ordering.domain import ordering


def _as_utc(moment):
    """Treat naive timestamps as UTC so they compare with aware ones."""
    if moment is not None and moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


@ordering.aggregate
class Coupon:
    name = String(required=True, max_length=100, unique=True)
    discount = Float(required=True, min_value=0.0, max_value=100.0)
    expire = DateTime(required=True)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, name, discount, expire):
        now = datetime.now(UTC)
        coupon = cls(
            name=name,
            discount=discount,
            expire=_as_utc(expire),
            created_at=now,
            updated_at=now,
        )
        coupon.raise_(
            CouponCreated(
                coupon_id=str(coupon.id),
                name=coupon.name,
                discount=coupon.discount,
                expire=coupon.expire,
            )
        )
        return coupon

    def update(self, name=None, discount=None, expire=None):
        """Overwrite whichever of name, discount and expiry are given."""
        if name is not None:
            self.name = name
        if discount is not None:
            self.discount = discount
        if expire is not None:
            self.expire = _as_utc(expire)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CouponUpdated(
                coupon_id=str(self.id),
                name=self.name,
                discount=self.discount,
                expire=self.expire,
            )
        )

    def is_valid_at(self, moment):
        return _as_utc(self.expire) > _as_utc(moment)

    def discounted_total(self, total):
        """Apply the percentage discount to `total`, rounded to two decimals."""
        return round(total - (total * self.discount) / 100, 2)

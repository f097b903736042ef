"""Repository for the Coupon aggregate."""

from ordering.coupon.coupon import Coupon
from ordering.domain import ordering


@ordering.repository(part_of=Coupon)
class CouponRepository:
    def find_valid(self, name, moment):
        """Return the coupon called `name` if it is still valid at `moment`, else None."""
        candidates = self._dao.query.filter(name=name).all().items
        return next((c for c in candidates if c.is_valid_at(moment)), None)

    def newest_first(self, page=1, limit=5):
        """Return one page of coupons, most recently created first."""
        offset = (page - 1) * limit
        return self._dao.query.order_by("-created_at").offset(offset).limit(limit).all().items

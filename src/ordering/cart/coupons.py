"""Cart coupon application: command and handler."""

from datetime import UTC, datetime

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.coupon.coupon import Coupon
from ordering.domain import ordering
from ordering.shared.errors import CouponInvalidOrExpiredError

logger = structlog.get_logger(__name__)


@ordering.command(part_of="ShoppingCart")
class ApplyCouponToCart:
    """Apply a named coupon to the customer's cart total."""

    customer_id = Identifier(required=True)
    coupon_name = String(required=True, max_length=100)


@ordering.command_handler(part_of=ShoppingCart)
class ApplyCouponHandler:
    @handle(ApplyCouponToCart)
    def apply_coupon(self, command):
        coupon = current_domain.repository_for(Coupon).find_valid(command.coupon_name, datetime.now(UTC))
        if coupon is None:
            # Unknown and expired coupons raise the same error
            raise CouponInvalidOrExpiredError({"coupon": ["Coupon is invalid or expired"]})

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get_for_customer(command.customer_id)
        cart.apply_coupon(coupon)
        repo.add(cart)

        logger.info(
            "Coupon applied to cart",
            cart_id=str(cart.id),
            coupon=coupon.name,
            total_price_after_discount=cart.total_price_after_discount,
        )

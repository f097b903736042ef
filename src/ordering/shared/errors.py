"""Error kinds raised by the ordering domain beyond Protean's own."""

from protean.exceptions import ValidationError


class CouponInvalidOrExpiredError(ValidationError):
    """No coupon matches the given name, or the matching coupon has expired."""


class CheckoutSessionError(Exception):
    """The payment gateway refused to open a checkout session."""

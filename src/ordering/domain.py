"""Ordering bounded context: Shopping Cart, Coupons and Orders.

Handles the per-customer shopping cart (CQRS), coupon discounts, product
stock adjustments and the checkout flow that turns a cart into an order.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)

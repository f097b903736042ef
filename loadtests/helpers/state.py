"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state. State tracks ids returned
by creation endpoints so follow-up requests can reference them.
"""

import uuid
from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks one simulated shopper from first cart line to delivered order."""

    customer_id: str = field(default_factory=lambda: f"cust-lt-{uuid.uuid4().hex[:8]}")
    product_ids: list[str] = field(default_factory=list)
    cart_id: str | None = None
    item_ids: list[str] = field(default_factory=list)
    coupon_name: str | None = None
    order_id: str | None = None

    @property
    def headers(self) -> dict:
        return {"X-Customer-Id": self.customer_id}

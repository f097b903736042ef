"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules and
match the field names expected by the API's Pydantic request schemas.
"""

import random
import uuid
from datetime import UTC, datetime, timedelta

from faker import Faker

fake = Faker()

COLORS = ["black", "white", "navy", "olive", "sand"]


# ---------- Products ----------


def product_data() -> dict:
    """A product with a 3-100 character title and a handful of colors."""
    return {
        "title": f"{fake.color_name()} {fake.word().title()} {uuid.uuid4().hex[:4]}",
        "price": round(random.uniform(5, 500), 2),
        "quantity": random.randint(50, 500),
        "colors": random.sample(COLORS, k=random.randint(1, 3)),
    }


# ---------- Cart ----------


def cart_item_data(product_id: str) -> dict:
    return {"product_id": product_id, "color": random.choice(COLORS)}


def quantity_data() -> dict:
    return {"quantity": random.randint(1, 5)}


# ---------- Coupons ----------


def coupon_data() -> dict:
    """A coupon valid for the next few days with a 5-50% discount."""
    return {
        "name": f"LT-{uuid.uuid4().hex[:8].upper()}",
        "discount": random.choice([5, 10, 15, 20, 25, 50]),
        "expire": (datetime.now(UTC) + timedelta(days=random.randint(1, 30))).isoformat(),
    }


# ---------- Orders ----------


def shipping_address_data() -> dict:
    return {
        "shipping_address": {
            "details": fake.street_address(),
            "phone": fake.msisdn()[:15],
            "city": fake.city(),
            "postal_code": fake.postcode(),
        }
    }


def customer_email() -> str:
    return f"{fake.user_name()[:20]}.{uuid.uuid4().hex[:4]}@{fake.free_email_domain()}"

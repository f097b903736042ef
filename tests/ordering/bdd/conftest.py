"""Shared BDD fixtures and step definitions for the Ordering domain."""

import json
from datetime import UTC, datetime, timedelta

import pytest
from ordering.coupon.management import CreateCoupon
from ordering.product.management import ListProduct
from protean import current_domain
from pytest_bdd import given, parsers


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def customer_id():
    return "cust-bdd-001"


@pytest.fixture()
def products():
    """Product ids keyed by title."""
    return {}


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{title}" priced at {price:f} with {quantity:d} in stock'))
def a_product(products, title, price, quantity):
    products[title] = current_domain.process(
        ListProduct(title=title, price=price, quantity=quantity, colors=json.dumps([])),
        asynchronous=False,
    )


@given(parsers.cfparse('a coupon "{name}" worth {discount:d} percent that is still valid'))
def a_valid_coupon(name, discount):
    current_domain.process(
        CreateCoupon(name=name, discount=discount, expire=datetime.now(UTC) + timedelta(days=1)),
        asynchronous=False,
    )


@given(parsers.cfparse('a coupon "{name}" worth {discount:d} percent that has expired'))
def an_expired_coupon(name, discount):
    current_domain.process(
        CreateCoupon(name=name, discount=discount, expire=datetime.now(UTC) - timedelta(days=1)),
        asynchronous=False,
    )

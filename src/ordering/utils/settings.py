"""Runtime settings for the ordering domain, read from the environment."""

import os

# Flat charges added to every order total
TAX_PRICE = float(os.getenv("ORDER_TAX_PRICE", "0"))
SHIPPING_PRICE = float(os.getenv("ORDER_SHIPPING_PRICE", "0"))

CHECKOUT_CURRENCY = os.getenv("CHECKOUT_CURRENCY", "egp")
CHECKOUT_SUCCESS_URL = os.getenv("CHECKOUT_SUCCESS_URL", "http://localhost:8000/orders")
CHECKOUT_CANCEL_URL = os.getenv("CHECKOUT_CANCEL_URL", "http://localhost:8000/cart")

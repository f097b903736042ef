import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.api.errors import register_exception_handlers
from ordering.api.routes import cart_router, coupon_router, order_router, product_router


@pytest.fixture()
def client():
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(cart_router)
    app.include_router(order_router)
    app.include_router(coupon_router)
    app.include_router(product_router)
    return TestClient(app)


@pytest.fixture()
def list_product(client):
    """Helper: POST /products and return the product id."""

    def _list(title="Linen Shirt", price=10.0, quantity=5, colors=("black",)):
        response = client.post(
            "/products",
            json={"title": title, "price": price, "quantity": quantity, "colors": list(colors)},
        )
        assert response.status_code == 201
        return response.json()["data"]["id"]

    return _list

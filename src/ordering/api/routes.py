"""FastAPI routes for the Ordering domain: carts, orders, coupons and products."""

import json

from fastapi import APIRouter, Header, Query, Request, Response
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddToCartRequest,
    ApplyCouponRequest,
    CartResponse,
    ChangePriceRequest,
    CheckoutSessionResponse,
    CheckoutSessionSchema,
    CouponListResponse,
    CouponResponse,
    CouponSchema,
    CreateCouponRequest,
    ListProductRequest,
    OrderResponse,
    OrderSchema,
    PlaceOrderRequest,
    ProductResponse,
    ProductSchema,
    RestockRequest,
    UpdateCartItemRequest,
    UpdateCouponRequest,
    address_json,
)
from ordering.cart.cart import ShoppingCart
from ordering.cart.coupons import ApplyCouponToCart
from ordering.cart.items import AddProductToCart, RemoveCartItem, UpdateCartItemQuantity
from ordering.cart.management import ClearCart
from ordering.coupon.coupon import Coupon
from ordering.coupon.management import CreateCoupon, DeleteCoupon, UpdateCoupon
from ordering.order.checkout import CreateCheckoutSession
from ordering.order.delivery import MarkOrderDelivered
from ordering.order.order import Order
from ordering.order.payment import MarkOrderPaid
from ordering.order.placement import PlaceCashOrder
from ordering.product.management import ChangeProductPrice, ListProduct, RestockProduct
from ordering.product.product import Product


def _cart_of(customer_id: str):
    return current_domain.repository_for(ShoppingCart).get_for_customer(customer_id)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.post("", response_model=CartResponse)
async def add_product_to_cart(body: AddToCartRequest, x_customer_id: str = Header()) -> CartResponse:
    command = AddProductToCart(
        customer_id=x_customer_id,
        product_id=body.product_id,
        color=body.color,
    )
    current_domain.process(command, asynchronous=False)
    return CartResponse.for_cart(_cart_of(x_customer_id), message="Product added to cart successfully")


@cart_router.get("", response_model=CartResponse)
async def get_cart(x_customer_id: str = Header()) -> CartResponse:
    return CartResponse.for_cart(_cart_of(x_customer_id))


@cart_router.delete("", status_code=204)
async def clear_cart(x_customer_id: str = Header()) -> Response:
    current_domain.process(ClearCart(customer_id=x_customer_id), asynchronous=False)
    return Response(status_code=204)


@cart_router.put("/apply-coupon", response_model=CartResponse)
async def apply_coupon(body: ApplyCouponRequest, x_customer_id: str = Header()) -> CartResponse:
    command = ApplyCouponToCart(customer_id=x_customer_id, coupon_name=body.coupon)
    current_domain.process(command, asynchronous=False)
    return CartResponse.for_cart(_cart_of(x_customer_id))


@cart_router.put("/{item_id}", response_model=CartResponse)
async def update_cart_item_quantity(
    item_id: str, body: UpdateCartItemRequest, x_customer_id: str = Header()
) -> CartResponse:
    command = UpdateCartItemQuantity(
        customer_id=x_customer_id,
        item_id=item_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return CartResponse.for_cart(_cart_of(x_customer_id))


@cart_router.delete("/{item_id}", response_model=CartResponse)
async def remove_cart_item(item_id: str, x_customer_id: str = Header()) -> CartResponse:
    command = RemoveCartItem(customer_id=x_customer_id, item_id=item_id)
    current_domain.process(command, asynchronous=False)
    return CartResponse.for_cart(_cart_of(x_customer_id))


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _order_response(order_id: str) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse(data=OrderSchema.from_order(order))


@order_router.post("/checkout-session/{cart_id}", response_model=CheckoutSessionResponse)
async def create_checkout_session(
    cart_id: str,
    request: Request,
    body: PlaceOrderRequest | None = None,
    x_customer_id: str = Header(),
    x_customer_email: str = Header(),
) -> CheckoutSessionResponse:
    base_url = str(request.base_url).rstrip("/")
    command = CreateCheckoutSession(
        customer_id=x_customer_id,
        customer_email=x_customer_email,
        cart_id=cart_id,
        shipping_address=address_json(body.shipping_address if body else None),
        success_url=f"{base_url}/orders",
        cancel_url=f"{base_url}/cart",
    )
    session = current_domain.process(command, asynchronous=False)
    return CheckoutSessionResponse(
        session=CheckoutSessionSchema(
            session_id=session.session_id,
            url=session.url,
            amount=session.amount,
            currency=session.currency,
            customer_email=session.customer_email,
            client_reference_id=session.client_reference_id,
            success_url=session.success_url,
            cancel_url=session.cancel_url,
            metadata=session.metadata,
        )
    )


@order_router.post("/{cart_id}", status_code=201, response_model=OrderResponse)
async def place_cash_order(
    cart_id: str, body: PlaceOrderRequest | None = None, x_customer_id: str = Header()
) -> OrderResponse:
    command = PlaceCashOrder(
        customer_id=x_customer_id,
        cart_id=cart_id,
        shipping_address=address_json(body.shipping_address if body else None),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return _order_response(order_id)


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return _order_response(order_id)


@order_router.put("/{order_id}/pay", response_model=OrderResponse)
async def mark_order_paid(order_id: str) -> OrderResponse:
    current_domain.process(MarkOrderPaid(order_id=order_id), asynchronous=False)
    return _order_response(order_id)


@order_router.put("/{order_id}/deliver", response_model=OrderResponse)
async def mark_order_delivered(order_id: str) -> OrderResponse:
    current_domain.process(MarkOrderDelivered(order_id=order_id), asynchronous=False)
    return _order_response(order_id)


# ---------------------------------------------------------------------------
# Coupon Router
# ---------------------------------------------------------------------------
coupon_router = APIRouter(prefix="/coupons", tags=["coupons"])


def _coupon_schema(coupon_id: str) -> CouponSchema:
    return CouponSchema.from_coupon(current_domain.repository_for(Coupon).get(coupon_id))


@coupon_router.post("", status_code=201, response_model=CouponResponse)
async def create_coupon(body: CreateCouponRequest) -> CouponResponse:
    command = CreateCoupon(name=body.name, discount=body.discount, expire=body.expire)
    coupon_id = current_domain.process(command, asynchronous=False)
    return CouponResponse(message="Coupon created successfully", data=_coupon_schema(coupon_id))


@coupon_router.get("", response_model=CouponListResponse)
async def list_coupons(page: int = Query(1, ge=1), limit: int = Query(5, ge=1)) -> CouponListResponse:
    coupons = current_domain.repository_for(Coupon).newest_first(page=page, limit=limit)
    return CouponListResponse(
        results=len(coupons),
        page=page,
        data=[CouponSchema.from_coupon(coupon) for coupon in coupons],
    )


@coupon_router.get("/{coupon_id}", response_model=CouponResponse)
async def get_coupon(coupon_id: str) -> CouponResponse:
    return CouponResponse(data=_coupon_schema(coupon_id))


@coupon_router.put("/{coupon_id}", response_model=CouponResponse)
async def update_coupon(coupon_id: str, body: UpdateCouponRequest) -> CouponResponse:
    command = UpdateCoupon(coupon_id=coupon_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return CouponResponse(message="Coupon updated successfully", data=_coupon_schema(coupon_id))


@coupon_router.delete("/{coupon_id}", status_code=204)
async def delete_coupon(coupon_id: str) -> Response:
    current_domain.process(DeleteCoupon(coupon_id=coupon_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


def _product_response(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse(data=ProductSchema.from_product(product))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def list_product(body: ListProductRequest) -> ProductResponse:
    command = ListProduct(
        title=body.title,
        price=body.price,
        quantity=body.quantity,
        colors=json.dumps(body.colors),
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _product_response(product_id)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(product_id)


@product_router.put("/{product_id}/price", response_model=ProductResponse)
async def change_product_price(product_id: str, body: ChangePriceRequest) -> ProductResponse:
    command = ChangeProductPrice(product_id=product_id, price=body.price)
    current_domain.process(command, asynchronous=False)
    return _product_response(product_id)


@product_router.put("/{product_id}/restock", response_model=ProductResponse)
async def restock_product(product_id: str, body: RestockRequest) -> ProductResponse:
    command = RestockProduct(product_id=product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return _product_response(product_id)

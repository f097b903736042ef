"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands and aggregates.
"""

import json
from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class ShippingAddressSchema(BaseModel):
    details: str
    phone: str | None = None
    city: str | None = None
    postal_code: str | None = None


class LineItemSchema(BaseModel):
    id: str
    product_id: str
    color: str | None = None
    quantity: int
    price: float

    @classmethod
    def from_entity(cls, item) -> "LineItemSchema":
        return cls(
            id=str(item.id),
            product_id=str(item.product_id),
            color=item.color,
            quantity=item.quantity,
            price=item.price,
        )


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    color: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-001",
                    "color": "black",
                }
            ]
        }
    }


class UpdateCartItemRequest(BaseModel):
    quantity: int


class ApplyCouponRequest(BaseModel):
    coupon: str


class CartSchema(BaseModel):
    id: str
    customer_id: str
    cart_items: list[LineItemSchema]
    total_cart_price: float
    total_price_after_discount: float | None = None
    coupon: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_cart(cls, cart) -> "CartSchema":
        return cls(
            id=str(cart.id),
            customer_id=str(cart.customer_id),
            cart_items=[LineItemSchema.from_entity(item) for item in cart.items],
            total_cart_price=cart.total_cart_price,
            total_price_after_discount=cart.total_price_after_discount,
            coupon=cart.coupon_name,
            created_at=cart.created_at,
            updated_at=cart.updated_at,
        )


class CartResponse(BaseModel):
    status: str = "success"
    message: str | None = None
    num_of_cart_items: int
    data: CartSchema

    @classmethod
    def for_cart(cls, cart, message=None) -> "CartResponse":
        return cls(message=message, num_of_cart_items=len(cart.items), data=CartSchema.from_cart(cart))


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    shipping_address: ShippingAddressSchema | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shipping_address": {
                        "details": "12 Nile St, Apt 4",
                        "phone": "01000000000",
                        "city": "Cairo",
                        "postal_code": "11511",
                    }
                }
            ]
        }
    }


class OrderSchema(BaseModel):
    id: str
    customer_id: str
    cart_items: list[LineItemSchema]
    shipping_address: ShippingAddressSchema | None = None
    payment_method_type: str
    tax_price: float
    shipping_price: float
    total_order_price: float
    is_paid: bool
    paid_at: datetime | None = None
    is_delivered: bool
    delivered_at: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> "OrderSchema":
        address = order.shipping_address
        return cls(
            id=str(order.id),
            customer_id=str(order.customer_id),
            cart_items=[LineItemSchema.from_entity(item) for item in order.items],
            shipping_address=(
                ShippingAddressSchema(
                    details=address.details,
                    phone=address.phone,
                    city=address.city,
                    postal_code=address.postal_code,
                )
                if address
                else None
            ),
            payment_method_type=order.payment_method_type,
            tax_price=order.tax_price,
            shipping_price=order.shipping_price,
            total_order_price=order.total_order_price,
            is_paid=bool(order.is_paid),
            paid_at=order.paid_at,
            is_delivered=bool(order.is_delivered),
            delivered_at=order.delivered_at,
            created_at=order.created_at,
        )


class OrderResponse(BaseModel):
    status: str = "success"
    data: OrderSchema


class CheckoutSessionSchema(BaseModel):
    session_id: str
    url: str
    amount: int
    currency: str
    customer_email: str
    client_reference_id: str
    success_url: str
    cancel_url: str
    metadata: dict


class CheckoutSessionResponse(BaseModel):
    status: str = "success"
    session: CheckoutSessionSchema


# ---------------------------------------------------------------------------
# Coupons
# ---------------------------------------------------------------------------
class CreateCouponRequest(BaseModel):
    name: str
    discount: float = Field(ge=0, le=100)
    expire: datetime


class UpdateCouponRequest(BaseModel):
    name: str | None = None
    discount: float | None = Field(default=None, ge=0, le=100)
    expire: datetime | None = None


class CouponSchema(BaseModel):
    id: str
    name: str
    discount: float
    expire: datetime

    @classmethod
    def from_coupon(cls, coupon) -> "CouponSchema":
        return cls(id=str(coupon.id), name=coupon.name, discount=coupon.discount, expire=coupon.expire)


class CouponResponse(BaseModel):
    message: str | None = None
    data: CouponSchema


class CouponListResponse(BaseModel):
    results: int
    page: int
    data: list[CouponSchema]


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class ListProductRequest(BaseModel):
    title: str
    price: float = Field(ge=0)
    quantity: int
    colors: list[str] = []


class ChangePriceRequest(BaseModel):
    price: float = Field(ge=0)


class RestockRequest(BaseModel):
    quantity: int = Field(ge=1)


class ProductSchema(BaseModel):
    id: str
    title: str
    price: float
    quantity: int
    sold: int
    colors: list[str]

    @classmethod
    def from_product(cls, product) -> "ProductSchema":
        return cls(
            id=str(product.id),
            title=product.title,
            price=product.price,
            quantity=product.quantity,
            sold=product.sold or 0,
            colors=product.color_options,
        )


class ProductResponse(BaseModel):
    status: str = "success"
    data: ProductSchema


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def address_json(address: ShippingAddressSchema | None) -> str | None:
    return json.dumps(address.model_dump()) if address else None

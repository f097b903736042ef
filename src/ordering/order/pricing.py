"""Order price computation shared by cash orders and checkout sessions."""

from dataclasses import dataclass

from ordering.utils import settings


@dataclass(frozen=True)
class OrderPricing:
    cart_price: float
    tax_price: float
    shipping_price: float

    @property
    def total_order_price(self) -> float:
        return self.cart_price + self.tax_price + self.shipping_price

    @property
    def total_in_minor_units(self) -> int:
        return int(round(self.total_order_price * 100))


def price_cart(cart) -> OrderPricing:
    """Price a cart for checkout, honouring an applied coupon."""
    return OrderPricing(
        cart_price=cart.effective_price,
        tax_price=settings.TAX_PRICE,
        shipping_price=settings.SHIPPING_PRICE,
    )

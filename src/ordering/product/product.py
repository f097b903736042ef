"""Product aggregate: the price and stock record the ordering pipeline relies on.

Carts read the live `price` when a line is first added; placing an order moves
units from `quantity` to `sold`. Stock is not validated here, so `quantity`
can go negative when more units are sold than were on hand.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from ordering.domain import ordering
from ordering.product.events import (
    ProductListed,
    ProductPriceChanged,
    ProductRestocked,
    ProductStockSold,
)


@ordering.aggregate
class Product:
    title = String(required=True, min_length=3, max_length=100)
    price = Float(required=True, min_value=0.0, max_value=20_000_000.0)
    quantity = Integer(required=True)
    sold = Integer(default=0)
    colors = Text()  # JSON array of color names
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, title, price, quantity, colors=None):
        now = datetime.now(UTC)
        product = cls(
            title=title,
            price=price,
            quantity=quantity,
            sold=0,
            colors=json.dumps(colors or []),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductListed(
                product_id=str(product.id),
                title=title,
                price=price,
                quantity=quantity,
            )
        )
        return product

    @property
    def color_options(self):
        return json.loads(self.colors) if self.colors else []

    def change_price(self, new_price):
        previous_price = self.price
        self.price = new_price
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductPriceChanged(
                product_id=str(self.id),
                previous_price=previous_price,
                new_price=new_price,
            )
        )

    def restock(self, quantity):
        if quantity < 1:
            raise ValidationError({"quantity": ["Restock quantity must be at least 1"]})

        self.quantity += quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductRestocked(
                product_id=str(self.id),
                quantity_added=quantity,
                new_quantity=self.quantity,
            )
        )

    def record_sale(self, quantity):
        """Move `quantity` units from stock to sold."""
        self.quantity -= quantity
        self.sold = (self.sold or 0) + quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductStockSold(
                product_id=str(self.id),
                quantity_sold=quantity,
                remaining_quantity=self.quantity,
                total_sold=self.sold,
            )
        )

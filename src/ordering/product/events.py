"""Domain events for the Product aggregate."""

from protean.fields import Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Product")
class ProductListed:
    """A product was made available for carts and orders."""

    __version__ = 1

    product_id = Identifier(required=True)
    title = String(required=True)
    price = Float(required=True)
    quantity = Integer(required=True)


@ordering.event(part_of="Product")
class ProductPriceChanged:
    """The live price of a product changed. Existing cart lines keep their snapshot."""

    __version__ = 1

    product_id = Identifier(required=True)
    previous_price = Float(required=True)
    new_price = Float(required=True)


@ordering.event(part_of="Product")
class ProductRestocked:
    __version__ = 1

    product_id = Identifier(required=True)
    quantity_added = Integer(required=True)
    new_quantity = Integer(required=True)


@ordering.event(part_of="Product")
class ProductStockSold:
    """Stock was deducted for a placed order."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity_sold = Integer(required=True)
    remaining_quantity = Integer(required=True)
    total_sold = Integer(required=True)

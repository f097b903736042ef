"""Cart item management: commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering
from ordering.product.product import Product

logger = structlog.get_logger(__name__)


@ordering.command(part_of="ShoppingCart")
class AddProductToCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    color = String(max_length=50)


@ordering.command(part_of="ShoppingCart")
class UpdateCartItemQuantity:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True)


@ordering.command(part_of="ShoppingCart")
class RemoveCartItem:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddProductToCart)
    def add_product_to_cart(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.find_for_customer(command.customer_id)
        if cart is None:
            cart = ShoppingCart.create(customer_id=command.customer_id)
            logger.info("Cart created", customer_id=str(command.customer_id))

        cart.add_item(
            product_id=command.product_id,
            color=command.color,
            price=product.price,
        )
        repo.add(cart)
        return str(cart.id)

    @handle(UpdateCartItemQuantity)
    def update_cart_item_quantity(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get_for_customer(command.customer_id)
        cart.update_item_quantity(item_id=command.item_id, quantity=command.quantity)
        repo.add(cart)

    @handle(RemoveCartItem)
    def remove_cart_item(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get_for_customer(command.customer_id)
        cart.remove_item(item_id=command.item_id)
        repo.add(cart)

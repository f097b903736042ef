"""Repository for the ShoppingCart aggregate, keyed by owning customer."""

from protean.exceptions import ObjectNotFoundError

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering


@ordering.repository(part_of=ShoppingCart)
class ShoppingCartRepository:
    def find_for_customer(self, customer_id):
        """Return the customer's cart, or None when they have none."""
        carts = self._dao.query.filter(customer_id=str(customer_id)).all().items
        return carts[0] if carts else None

    def get_for_customer(self, customer_id):
        cart = self.find_for_customer(customer_id)
        if cart is None:
            raise ObjectNotFoundError({"_entity": f"There is no cart for this customer: {customer_id}"})
        return cart

"""Payment gateway port (abstract interface).

Defines what the ordering domain needs from a payment provider: opening a
hosted checkout session for a cart. Reconciling the completed payment is the
provider webhook's job and is not part of this port.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CheckoutSession:
    """Handle returned by the provider for a newly opened checkout session."""

    session_id: str
    url: str
    amount: int  # minor currency units
    currency: str
    customer_email: str
    client_reference_id: str
    success_url: str
    cancel_url: str
    metadata: dict = field(default_factory=dict)


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def create_checkout_session(
        self,
        amount: int,
        currency: str,
        description: str,
        customer_email: str,
        client_reference_id: str,
        success_url: str,
        cancel_url: str,
        metadata: dict,
    ) -> CheckoutSession:
        """Open a single-line-item card checkout session for `amount` minor units."""
        ...

"""Configurable fake payment gateway for development and testing.

Simulates a hosted checkout provider without any external calls. It can be
switched to refuse sessions, which is how tests exercise gateway failures.
"""

from uuid import uuid4

from ordering.gateway.port import CheckoutSession, PaymentGateway
from ordering.shared.errors import CheckoutSessionError


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Checkout unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Checkout unavailable") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

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
        call = {
            "method": "create_checkout_session",
            "amount": amount,
            "currency": currency,
            "description": description,
            "customer_email": customer_email,
            "client_reference_id": client_reference_id,
            "success_url": success_url,
            "cancel_url": cancel_url,
            "metadata": metadata,
        }
        self.calls.append(call)

        if not self.should_succeed:
            raise CheckoutSessionError(self.failure_reason)

        session_id = f"cs_fake_{uuid4().hex[:16]}"
        return CheckoutSession(
            session_id=session_id,
            url=f"https://checkout.fake/pay/{session_id}",
            amount=amount,
            currency=currency,
            customer_email=customer_email,
            client_reference_id=client_reference_id,
            success_url=success_url,
            cancel_url=cancel_url,
            metadata=dict(metadata),
        )

"""Stripe billing client - checkout sessions and webhook events."""

import logging

import stripe

from ..exceptions import WebhookError

logger = logging.getLogger(__name__)


class BillingClient:
    """Client for Stripe Checkout."""

    def __init__(self, api_key: str, webhook_secret: str | None = None):
        self.api_key = api_key
        self.webhook_secret = webhook_secret

    def create_checkout_session(self, price_id: str, user_id: str, email: str | None, origin: str) -> str:
        """
        Create a hosted checkout session for a single price.

        Recurring prices start a subscription, anything else is a one-time
        payment. The user id travels in the session metadata so the webhook
        can credit the right account.

        Returns:
            Checkout session id
        """
        price = stripe.Price.retrieve(price_id, api_key=self.api_key)
        mode = "subscription" if price.type == "recurring" else "payment"

        session = stripe.checkout.Session.create(
            api_key=self.api_key,
            payment_method_types=["card"],
            line_items=[{"price": price_id, "quantity": 1}],
            mode=mode,
            success_url=f"{origin}?payment=success&session_id={{CHECKOUT_SESSION_ID}}",
            cancel_url=f"{origin}?payment=cancelled",
            customer_email=email,
            metadata={"userId": user_id},
        )
        logger.info("Created %s checkout session %s for user %s", mode, session.id, user_id)
        return session.id

    def construct_event(self, payload: bytes, signature: str | None):
        """Verify and parse a webhook payload. Raises WebhookError."""
        if not self.webhook_secret:
            raise WebhookError("Webhook secret not configured")
        if not signature:
            raise WebhookError("Missing Stripe-Signature header")

        try:
            return stripe.Webhook.construct_event(payload, signature, self.webhook_secret)
        except (ValueError, stripe.SignatureVerificationError) as e:
            raise WebhookError(str(e)) from e

    def first_price_id(self, session_id: str) -> str | None:
        """Price id of the first line item in a checkout session."""
        line_items = stripe.checkout.Session.list_line_items(session_id, limit=1, api_key=self.api_key)
        if not line_items.data:
            return None
        return line_items.data[0].price.id

"""Credit grants for completed checkouts."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from .. import config
from ..clients.billing import BillingClient
from ..exceptions import WebhookError

logger = logging.getLogger(__name__)

CHECKOUT_COMPLETED = "checkout.session.completed"


@dataclass(frozen=True)
class CreditGrant:
    user_id: str
    price_id: str
    credits: int
    status: str | None = None  # None keeps the current subscription status


class CreditLedger(Protocol):
    def grant(self, user_id: str, credits: int, status: str | None = None): ...


def credits_for_price(price_id: str) -> tuple[int, str | None]:
    """(credits, new subscription status) for a purchased price."""
    if config.STRIPE_SUB_PRICE_ID and price_id == config.STRIPE_SUB_PRICE_ID:
        return config.SUBSCRIPTION_CREDITS, config.SUBSCRIPTION_STATUS
    if config.STRIPE_CREDITS_PRICE_ID and price_id == config.STRIPE_CREDITS_PRICE_ID:
        return config.CREDIT_PACK_CREDITS, None
    return 0, None


def _get(obj: Any, key: str) -> Any:
    """Item access that tolerates missing keys on dicts and Stripe objects."""
    if obj is None:
        return None
    try:
        return obj[key]
    except (KeyError, TypeError):
        return None


class CreditService:
    """Turn verified billing events into ledger updates."""

    def __init__(self, billing: BillingClient, ledger: CreditLedger):
        self.billing = billing
        self.ledger = ledger

    def process(self, event) -> CreditGrant | None:
        """
        Handle a verified webhook event.

        Returns:
            The grant applied, or None for events that don't add credits

        Raises:
            WebhookError: completed session without user or price
        """
        if _get(event, "type") != CHECKOUT_COMPLETED:
            return None

        session = _get(_get(event, "data"), "object")
        user_id = _get(_get(session, "metadata"), "userId")
        session_id = _get(session, "id")
        price_id = self.billing.first_price_id(session_id) if session_id else None

        if not user_id or not price_id:
            raise WebhookError("Checkout session without a userId or priceId")

        credits, status = credits_for_price(price_id)
        if credits <= 0:
            logger.info("Price %s grants no credits; ignoring session %s", price_id, session_id)
            return None

        grant = CreditGrant(user_id=user_id, price_id=price_id, credits=credits, status=status)
        self.ledger.grant(grant.user_id, grant.credits, grant.status)
        return grant

"""AWS Lambda handler for Stripe webhooks."""

import logging

from .. import config
from ..clients.billing import BillingClient
from ..clients.firebase import FirestoreCreditLedger
from ..exceptions import WebhookError
from ..services.credits import CreditService
from .events import get_header, get_method, get_raw_body, json_response, text_response

logger = logging.getLogger(__name__)


def handler(event, context):
    """
    Verify a Stripe event and credit the paying user.

    Verified events are always acknowledged with 200; ledger failures are
    logged, not returned.
    """
    if get_method(event) not in (None, "POST"):
        return text_response(405, "Method Not Allowed")

    billing = BillingClient(config.STRIPE_SECRET_KEY, config.STRIPE_WEBHOOK_SECRET)
    payload = get_raw_body(event)

    try:
        stripe_event = billing.construct_event(payload, get_header(event, "Stripe-Signature"))
    except WebhookError as e:
        logger.error("Webhook signature verification failed: %s", e)
        return text_response(400, f"Webhook Error: {e}")

    try:
        grant = CreditService(billing, FirestoreCreditLedger()).process(stripe_event)
    except WebhookError as e:
        logger.error("Webhook payload rejected: %s", e)
        return text_response(400, "Missing metadata.")
    except Exception:
        logger.exception("Error applying credits from webhook event")
    else:
        if grant:
            print(f"Added {grant.credits} credits to user {grant.user_id}. Status: {grant.status or 'unchanged'}", flush=True)

    return json_response(200, {"received": True})

"""AWS Lambda handler creating a Stripe Checkout session."""

import logging

from .. import config
from ..clients.billing import BillingClient
from ..clients.firebase import verify_id_token
from ..exceptions import AuthenticationError
from .events import get_header, get_method, json_response, method_not_allowed, parse_json_body

logger = logging.getLogger(__name__)


def _bearer_token(event: dict) -> str | None:
    header = get_header(event, "Authorization") or ""
    if not header.startswith("Bearer "):
        return None
    return header[len("Bearer "):].strip() or None


def handler(event, context):
    """
    Headers: Authorization: Bearer <Firebase ID token>
    Input payload: {"priceId": "price_..."}

    Output: {"id": "<checkout session id>"}
    """
    if get_method(event) not in (None, "POST"):
        return method_not_allowed()

    token = _bearer_token(event)
    if not token:
        return json_response(401, {"error": "Unauthorized: No token provided."})

    try:
        user = verify_id_token(token)
        body = parse_json_body(event)
        price_id = body.get("priceId")
        if not price_id:
            return json_response(400, {"error": "Price ID is required."})

        origin = get_header(event, "Origin") or config.APP_BASE_URL
        billing = BillingClient(config.STRIPE_SECRET_KEY)
        session_id = billing.create_checkout_session(price_id, user.uid, user.email, origin)
    except AuthenticationError as e:
        logger.warning("Rejected ID token: %s", e)
        return json_response(401, {"error": "Unauthorized: Invalid token."})
    except ValueError:
        return json_response(400, {"error": "Invalid JSON body."})
    except Exception as e:
        logger.exception("Error creating checkout session")
        return json_response(500, {"error": f"Internal Server Error: {e}"})

    return json_response(200, {"id": session_id})

"""Firebase client - ID token auth and the Firestore credit ledger."""

import logging
from dataclasses import dataclass

import firebase_admin
from firebase_admin import auth, credentials, firestore

from .. import config
from ..exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthUser:
    uid: str
    email: str | None = None


def get_app() -> firebase_admin.App:
    """Return the default Firebase app, initializing it from env on first use."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    if not (config.FIREBASE_PROJECT_ID and config.FIREBASE_CLIENT_EMAIL and config.FIREBASE_PRIVATE_KEY):
        raise RuntimeError("FIREBASE_PROJECT_ID, FIREBASE_CLIENT_EMAIL and FIREBASE_PRIVATE_KEY must be set")

    cred = credentials.Certificate({
        "type": "service_account",
        "project_id": config.FIREBASE_PROJECT_ID,
        "client_email": config.FIREBASE_CLIENT_EMAIL,
        # Keys stored in env vars carry escaped newlines
        "private_key": config.FIREBASE_PRIVATE_KEY.replace("\\n", "\n"),
        "token_uri": "https://oauth2.googleapis.com/token",
    })
    return firebase_admin.initialize_app(cred)


def verify_id_token(token: str) -> AuthUser:
    """Verify a Firebase ID token. Raises AuthenticationError."""
    try:
        decoded = auth.verify_id_token(token, app=get_app())
    except (auth.InvalidIdTokenError, ValueError) as e:
        raise AuthenticationError(str(e)) from e
    return AuthUser(uid=decoded["uid"], email=decoded.get("email"))


class FirestoreCreditLedger:
    """Adds credits to user documents."""

    def __init__(self, db=None):
        self._db = db

    @property
    def db(self):
        # Connect on first write
        if self._db is None:
            self._db = firestore.client(app=get_app())
        return self._db

    def grant(self, user_id: str, credits: int, status: str | None = None):
        """Increment a user's credits; set subscription status when given."""
        updates = {config.FIRESTORE_CREDITS_FIELD: firestore.Increment(credits)}
        if status is not None:
            updates[config.FIRESTORE_STATUS_FIELD] = status

        doc_ref = self.db.collection(config.FIRESTORE_USERS_COLLECTION).document(user_id)
        doc_ref.update(updates)
        logger.info("Added %s credits to user %s (status=%s)", credits, user_id, status)

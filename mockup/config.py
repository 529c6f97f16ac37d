import os
from dotenv import load_dotenv

load_dotenv()

# API Keys and Config - loaded from .env
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_IMAGE_MODEL = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image-preview")
STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY")
STRIPE_WEBHOOK_SECRET = os.getenv("STRIPE_WEBHOOK_SECRET")
STRIPE_SUB_PRICE_ID = os.getenv("STRIPE_SUB_PRICE_ID")
STRIPE_CREDITS_PRICE_ID = os.getenv("STRIPE_CREDITS_PRICE_ID")
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")
FIREBASE_CLIENT_EMAIL = os.getenv("FIREBASE_CLIENT_EMAIL")
FIREBASE_PRIVATE_KEY = os.getenv("FIREBASE_PRIVATE_KEY")
APP_BASE_URL = os.getenv("APP_BASE_URL", "http://localhost:3000")

# AI generation falls back to placeholder images when set (or when no Gemini key)
PLACEHOLDER_MODE = os.getenv("PLACEHOLDER_MODE", "true").lower() in ("1", "true", "yes")
PLACEHOLDER_DELAY_MIN = float(os.getenv("PLACEHOLDER_DELAY_MIN", "0.5"))  # seconds
PLACEHOLDER_DELAY_MAX = float(os.getenv("PLACEHOLDER_DELAY_MAX", "1.0"))

# Base image fetch timeout (seconds)
BASE_IMAGE_TIMEOUT = float(os.getenv("BASE_IMAGE_TIMEOUT", "15"))

# Credits granted per completed checkout
SUBSCRIPTION_CREDITS = 400
SUBSCRIPTION_STATUS = "active"
CREDIT_PACK_CREDITS = 40

# Firestore layout
FIRESTORE_USERS_COLLECTION = "users"
FIRESTORE_CREDITS_FIELD = "credits"
FIRESTORE_STATUS_FIELD = "stripeSubscriptionStatus"

"""API clients for external services."""

from .billing import BillingClient
from .gemini import GeminiClient
from .placeholder import PlaceholderImageProvider

__all__ = ["BillingClient", "GeminiClient", "PlaceholderImageProvider"]

"""Domain exceptions."""


class MockupError(Exception):
    """Base class for mockup errors."""

    pass


class TemplateNotFound(MockupError):
    """No placement template exists for the requested product type."""

    def __init__(self, product_type: str):
        self.product_type = product_type
        super().__init__(f"No template available for {product_type!r}")


class AssetLoadError(MockupError):
    """A base image or artwork image could not be fetched or decoded."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load {source}: {reason}")


class InvalidPlacementError(MockupError):
    """Placement geometry is unusable (configuration defect)."""

    pass


class GenerationError(MockupError):
    """Generative image API call failed."""

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)


class WebhookError(MockupError):
    """Webhook payload could not be verified or is missing data."""

    pass


class AuthenticationError(MockupError):
    """ID token missing, invalid, expired, or revoked."""

    pass

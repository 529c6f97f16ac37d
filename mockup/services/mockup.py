"""Mockup service - template lookup + compositing."""

import logging

from ..models.artwork import ArtworkAsset, CompositeResult
from ..models.product import ProductType
from ..templates import get_template
from .compositor import Compositor

logger = logging.getLogger(__name__)


class MockupService:
    """Render artwork onto the template for a product type."""

    def __init__(self, compositor: Compositor | None = None):
        self.compositor = compositor or Compositor()

    def render(self, product_type: ProductType | str, artwork_bytes: bytes, mime_type: str) -> CompositeResult:
        """
        Composite artwork onto a product template.

        Args:
            product_type: ProductType or its wire value
            artwork_bytes: Uploaded image bytes
            mime_type: Declared MIME type of the upload

        Returns:
            CompositeResult with PNG bytes

        Raises:
            TemplateNotFound: no template for this product type
            AssetLoadError: base image or artwork failed to load
        """
        template = get_template(product_type)
        logger.info("Compositing artwork (%s, %s bytes) onto %s", mime_type, len(artwork_bytes), template.product_type.value)

        result = self.compositor.composite(template, ArtworkAsset(data=artwork_bytes, mime_type=mime_type))
        logger.info("Composite ready: %sx%s, %s bytes", result.width, result.height, len(result.data))
        return result

"""AI mockup generation - prompt building + image provider."""

import logging
from typing import Protocol

from .. import config
from ..clients.gemini import GeminiClient
from ..clients.placeholder import PlaceholderImageProvider
from ..models.artwork import ArtworkAsset
from ..models.options import SceneRequest
from ..utils import to_data_url
from .prompt import build_prompt

logger = logging.getLogger(__name__)


class ImageProvider(Protocol):
    def generate(self, prompt: str, image_bytes: bytes, mime_type: str) -> str:
        """Return a displayable image reference (URL or data URL)."""
        ...


class GeminiImageProvider:
    """Generates mockups with Gemini and returns them as data URLs."""

    def __init__(self, client: GeminiClient):
        self.client = client

    def generate(self, prompt: str, image_bytes: bytes, mime_type: str) -> str:
        data, out_mime = self.client.generate_mockup(prompt, image_bytes, mime_type)
        return to_data_url(data, out_mime)


def get_default_provider() -> ImageProvider:
    """Gemini when configured, placeholder images otherwise."""
    if config.PLACEHOLDER_MODE or not config.GEMINI_API_KEY:
        return PlaceholderImageProvider()
    return GeminiImageProvider(GeminiClient(api_key=config.GEMINI_API_KEY))


class GenerationService:
    """Generate AI mockup scenes from uploaded artwork."""

    def __init__(self, provider: ImageProvider | None = None):
        self.provider = provider or get_default_provider()

    def generate(self, scene: SceneRequest, artwork: ArtworkAsset) -> list[str]:
        """Generate one mockup. Returns a single-element list of image references."""
        prompt = build_prompt(scene)
        logger.info("Generating mockup for %r via %s", scene.product_type, type(self.provider).__name__)
        image = self.provider.generate(prompt, artwork.data, artwork.mime_type)
        return [image]

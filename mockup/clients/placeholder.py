"""Placeholder image provider for degraded AI generation."""

import logging
import random
import time

from .. import config

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGES = [
    "https://images.pexels.com/photos/126271/pexels-photo-126271.jpeg?auto=compress&cs=tinysrgb&w=600",
    "https://images.pexels.com/photos/991509/pexels-photo-991509.jpeg?auto=compress&cs=tinysrgb&w=600",
    "https://images.pexels.com/photos/1648377/pexels-photo-1648377.jpeg?auto=compress&cs=tinysrgb&w=600",
]


class PlaceholderImageProvider:
    """Returns sample images instead of calling the model."""

    def __init__(
        self,
        delay_range: tuple[float, float] | None = None,
        rng: random.Random | None = None,
    ):
        self.delay_range = delay_range or (config.PLACEHOLDER_DELAY_MIN, config.PLACEHOLDER_DELAY_MAX)
        self.rng = rng or random.Random()

    def generate(self, prompt: str, image_bytes: bytes, mime_type: str) -> str:
        logger.warning("AI generation is in placeholder mode; returning a mock image")
        time.sleep(self.rng.uniform(*self.delay_range))
        return self.rng.choice(PLACEHOLDER_IMAGES)

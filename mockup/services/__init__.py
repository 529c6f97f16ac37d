"""Business logic services."""

from .assets import ImageLoader
from .compositor import Compositor, placement_corners
from .generation import GenerationService
from .mockup import MockupService
from .prompt import build_prompt

__all__ = [
    "Compositor",
    "GenerationService",
    "ImageLoader",
    "MockupService",
    "build_prompt",
    "placement_corners",
]

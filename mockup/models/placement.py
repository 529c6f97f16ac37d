"""Placement geometry for template compositing."""

import math
import numbers
from dataclasses import dataclass, field

from ..exceptions import InvalidPlacementError
from .product import ProductType


@dataclass(frozen=True)
class Placement:
    """Target rectangle in base-image pixel space.

    Rotation is in radians about the rectangle center. Positive values turn
    the artwork clockwise on screen (image y axis points down).
    """

    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0

    def __post_init__(self):
        for name in ("x", "y", "width", "height", "rotation"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise InvalidPlacementError(f"Placement {name} must be a finite number, got {value!r}")
        if self.width <= 0 or self.height <= 0:
            raise InvalidPlacementError(
                f"Placement size must be positive, got {self.width}x{self.height}"
            )

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def size(self) -> tuple[int, int]:
        """Artwork size in whole pixels (at least 1x1)."""
        return max(1, round(self.width)), max(1, round(self.height))


@dataclass(frozen=True)
class PlacementTemplate:
    """A product photo and where artwork goes on it."""

    product_type: ProductType
    base_image: str | bytes = field(repr=False)  # URL, local path, or raw bytes
    placement: Placement

"""Template compositor - renders artwork onto a product photo.

Pipeline: decode base -> decode artwork -> transform -> flatten -> encode.
The output keeps the base image's native size; the artwork is force-fit to
the placement rectangle (aspect ratio is not preserved) and rotated about the
rectangle center. Positive rotation turns the artwork clockwise on screen.
"""

import logging
from io import BytesIO

import numpy as np
from PIL import Image

from ..models.artwork import ArtworkAsset, CompositeResult
from ..models.placement import Placement, PlacementTemplate
from .assets import ImageLoader

logger = logging.getLogger(__name__)

_TRANSPARENT = (0, 0, 0, 0)


def rotation_matrix(theta: float) -> np.ndarray:
    """2D rotation in image space (y down): positive theta is clockwise on screen."""
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s], [s, c]])


def placement_corners(placement: Placement) -> np.ndarray:
    """Rendered artwork corners: top-left, top-right, bottom-right, bottom-left.

    Returns a (4, 2) array of (x, y) in base-image pixel space.
    """
    hw, hh = placement.width / 2, placement.height / 2
    local = np.array([[-hw, -hh], [hw, -hh], [hw, hh], [-hw, hh]])
    return local @ rotation_matrix(placement.rotation).T + np.array(placement.center)


def _has_alpha(image: Image.Image) -> bool:
    return "A" in image.getbands() or "transparency" in image.info


class Compositor:
    """Composite artwork onto template base images."""

    def __init__(
        self,
        loader: ImageLoader | None = None,
        resample: Image.Resampling = Image.Resampling.BICUBIC,
    ):
        self.loader = loader or ImageLoader()
        self.resample = resample

    def composite(self, template: PlacementTemplate, artwork: ArtworkAsset) -> CompositeResult:
        """Load both images and render the mockup.

        Raises AssetLoadError if either image can't be loaded. No output is
        produced unless every stage succeeds.
        """
        base = self.loader.load_base(template.base_image)
        art = self.loader.load_artwork(artwork)
        return self.render(base, art, template.placement)

    def render(self, base: Image.Image, artwork: Image.Image, placement: Placement) -> CompositeResult:
        """Render decoded images. Pure: no I/O."""
        canvas = base.convert("RGBA")
        layer = self._transform(artwork, placement, canvas.size)
        flat = self._flatten(canvas, layer, keep_alpha=_has_alpha(base))
        return self._encode(flat)

    def _transform(self, artwork: Image.Image, placement: Placement, canvas_size: tuple[int, int]) -> Image.Image:
        """Draw the artwork into a transparent layer the size of the canvas."""
        scaled = artwork.convert("RGBA").resize(placement.size, self.resample)
        layer = Image.new("RGBA", canvas_size, _TRANSPARENT)

        if placement.rotation == 0:
            # Axis-aligned: exact pixel placement
            layer.paste(scaled, (round(placement.x), round(placement.y)))
            return layer

        return scaled.transform(
            canvas_size,
            Image.Transform.AFFINE,
            data=self._inverse_affine(placement, scaled.size),
            resample=self.resample,
            fillcolor=_TRANSPARENT,
        )

    def _inverse_affine(self, placement: Placement, scaled_size: tuple[int, int]) -> tuple[float, ...]:
        """Coefficients mapping canvas pixels back into the scaled artwork.

        Forward: p = center + R @ (D^-1 @ q - half), with D the rounding scale
        between the placement size and the scaled artwork size.
        """
        sw, sh = scaled_size
        scale = np.diag([sw / placement.width, sh / placement.height])
        m = scale @ rotation_matrix(placement.rotation).T
        offset = np.array([sw / 2, sh / 2]) - m @ np.array(placement.center)
        return tuple(float(v) for v in (m[0, 0], m[0, 1], offset[0], m[1, 0], m[1, 1], offset[1]))

    def _flatten(self, canvas: Image.Image, layer: Image.Image, keep_alpha: bool) -> Image.Image:
        """Background first, artwork on top."""
        flat = Image.alpha_composite(canvas, layer)
        return flat if keep_alpha else flat.convert("RGB")

    def _encode(self, image: Image.Image) -> CompositeResult:
        output = BytesIO()
        image.save(output, format="PNG")
        data = output.getvalue()
        logger.debug("Encoded composite %sx%s (%s bytes)", image.width, image.height, len(data))
        return CompositeResult(data=data, width=image.width, height=image.height)

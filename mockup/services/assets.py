"""Image loading for compositing - fetch and decode with defined failures."""

import logging
from io import BytesIO
from pathlib import Path

import requests
from PIL import Image, ImageOps

from .. import config
from ..exceptions import AssetLoadError
from ..models.artwork import ArtworkAsset

logger = logging.getLogger(__name__)

# Declared upload type -> Pillow format
ARTWORK_MIME_TYPES: dict[str, str] = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/jpg": "JPEG",
    "image/webp": "WEBP",
}

BASE_IMAGE_FORMATS = ["PNG", "JPEG", "WEBP"]

_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Accept": "image/avif,image/webp,image/apng,image/*,*/*;q=0.8",
}


class ImageLoader:
    """Fetch and decode base images and artwork.

    Every failure (network, HTTP status, timeout, missing file, unsupported or
    corrupt data) surfaces as AssetLoadError. Images are fully decoded before
    returning so nothing fails later in the draw step.
    """

    def __init__(self, timeout: float | None = None):
        self.timeout = config.BASE_IMAGE_TIMEOUT if timeout is None else timeout

    def load_base(self, source: str | bytes) -> Image.Image:
        """Load a template's base image from a URL, a local path, or bytes."""
        if isinstance(source, (bytes, bytearray)):
            return self._decode(bytes(source), "base image bytes", BASE_IMAGE_FORMATS)

        if source.startswith(("http://", "https://")):
            data = self._fetch(source)
        else:
            data = self._read(source)
        return self._decode(data, source, BASE_IMAGE_FORMATS)

    def load_artwork(self, asset: ArtworkAsset) -> Image.Image:
        """Decode uploaded artwork, honoring EXIF orientation."""
        mime_type = (asset.mime_type or "").lower().split(";")[0].strip()
        if mime_type not in ARTWORK_MIME_TYPES:
            raise AssetLoadError("artwork", f"unsupported type {asset.mime_type!r}")
        if not asset.data:
            raise AssetLoadError("artwork", "empty upload")

        image = self._decode(asset.data, "artwork", sorted(set(ARTWORK_MIME_TYPES.values())))
        return ImageOps.exif_transpose(image)

    def _fetch(self, url: str) -> bytes:
        logger.info("Fetching base image %s", url)
        try:
            response = requests.get(url, headers=_HEADERS, timeout=self.timeout)
            response.raise_for_status()
        except requests.Timeout as e:
            raise AssetLoadError(url, f"timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise AssetLoadError(url, str(e)) from e
        return response.content

    def _read(self, path: str) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise AssetLoadError(path, str(e)) from e

    def _decode(self, data: bytes, source: str, formats: list[str]) -> Image.Image:
        try:
            image = Image.open(BytesIO(data), formats=formats)
            image.load()
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
            raise AssetLoadError(source, f"cannot decode image: {e}") from e
        logger.debug("Decoded %s: %s %sx%s", source, image.format, image.width, image.height)
        return image

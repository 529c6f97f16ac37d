"""Shared fixtures - images are built in memory, nothing touches the network."""

from io import BytesIO

import numpy as np
import pytest
from PIL import Image

RED = (255, 0, 0)
GREEN = (0, 255, 0)


def encode(image: Image.Image, fmt: str = "PNG") -> bytes:
    output = BytesIO()
    image.save(output, format=fmt)
    return output.getvalue()


def decode(data: bytes) -> np.ndarray:
    return np.array(Image.open(BytesIO(data)))


def gradient(width: int, height: int) -> Image.Image:
    """Non-uniform RGB background so misplaced pixels are detectable."""
    xs = np.linspace(0, 200, width, dtype=np.float64)
    ys = np.linspace(0, 200, height, dtype=np.float64)
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    arr[:, :, 1] = (ys[:, None] * 0.5 + 20).astype(np.uint8)
    arr[:, :, 2] = ((xs[None, :] + ys[:, None]) / 2 + 50).astype(np.uint8)
    return Image.fromarray(arr, "RGB")


@pytest.fixture
def base_image() -> Image.Image:
    return gradient(1260, 750)


@pytest.fixture
def base_png(base_image) -> bytes:
    return encode(base_image)


@pytest.fixture
def artwork_png() -> bytes:
    """500x500 opaque red artwork."""
    return encode(Image.new("RGBA", (500, 500), RED + (255,)))


@pytest.fixture
def truncated_png() -> bytes:
    noisy = Image.fromarray(np.random.default_rng(0).integers(0, 255, (200, 200, 3), dtype=np.uint8), "RGB")
    data = encode(noisy)
    return data[: len(data) // 2]

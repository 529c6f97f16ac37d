"""Artwork input and composite output."""

from dataclasses import dataclass, field

from ..utils import to_data_url


@dataclass(frozen=True)
class ArtworkAsset:
    """User-uploaded artwork."""

    data: bytes = field(repr=False)
    mime_type: str


@dataclass(frozen=True)
class CompositeResult:
    """Flattened mockup, encoded."""

    data: bytes = field(repr=False)
    width: int
    height: int
    mime_type: str = "image/png"

    def to_data_url(self) -> str:
        return to_data_url(self.data, self.mime_type)

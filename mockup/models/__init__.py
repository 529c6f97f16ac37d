"""Data models."""

from .artwork import ArtworkAsset, CompositeResult
from .options import SceneRequest
from .placement import Placement, PlacementTemplate
from .product import ProductType, parse_product_type

__all__ = [
    "ArtworkAsset",
    "CompositeResult",
    "Placement",
    "PlacementTemplate",
    "ProductType",
    "SceneRequest",
    "parse_product_type",
]

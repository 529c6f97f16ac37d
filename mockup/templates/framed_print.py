"""Framed print template."""

from ..models.placement import Placement, PlacementTemplate
from ..models.product import ProductType

FRAMED_PRINT_TEMPLATE = PlacementTemplate(
    product_type=ProductType.FRAMED_PRINT,
    base_image="https://images.pexels.com/photos/1040499/pexels-photo-1040499.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1",
    placement=Placement(x=305, y=260, width=200, height=280),
)

"""Tote bag template."""

from ..models.placement import Placement, PlacementTemplate
from ..models.product import ProductType

TOTE_BAG_TEMPLATE = PlacementTemplate(
    product_type=ProductType.TOTE_BAG,
    base_image="https://images.pexels.com/photos/6813036/pexels-photo-6813036.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1",
    placement=Placement(x=250, y=200, width=300, height=300, rotation=0.02),
)

"""Water bottle template."""

from ..models.placement import Placement, PlacementTemplate
from ..models.product import ProductType

WATER_BOTTLE_TEMPLATE = PlacementTemplate(
    product_type=ProductType.WATER_BOTTLE,
    base_image="https://images.pexels.com/photos/7845123/pexels-photo-7845123.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1",
    placement=Placement(x=450, y=200, width=220, height=350),
)

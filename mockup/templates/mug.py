"""Coffee mug template."""

from ..models.placement import Placement, PlacementTemplate
from ..models.product import ProductType

MUG_TEMPLATE = PlacementTemplate(
    product_type=ProductType.MUG,
    base_image="https://images.pexels.com/photos/1579926/pexels-photo-1579926.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1",
    # Slight counter-clockwise tilt to follow the mug's curvature
    placement=Placement(x=320, y=310, width=180, height=180, rotation=-0.05),
)

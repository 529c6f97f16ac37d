"""Product types offered for mockups."""

from enum import Enum


class ProductType(Enum):
    MUG = "White ceramic coffee mug"
    TSHIRT = "Black cotton t-shirt on a hanger"
    FRAMED_PRINT = "Framed art print on a gallery wall"
    TOTE_BAG = "Canvas tote bag resting on a chair"
    PHONE_CASE = "Modern smartphone case on a desk"
    JOURNAL = "Hardcover journal with a pen"
    THROW_PILLOW = "Throw pillow on a minimalist sofa"
    CAP = "Baseball cap on a wooden surface"
    WATER_BOTTLE = "Stainless steel water bottle"
    GREETING_CARD = "Greeting card with envelope"


def parse_product_type(value: "ProductType | str") -> ProductType | None:
    """Resolve a wire value to a ProductType. Returns None if unknown."""
    if isinstance(value, ProductType):
        return value
    try:
        return ProductType(value)
    except ValueError:
        return None

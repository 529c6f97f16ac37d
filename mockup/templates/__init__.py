"""Placement template registry."""

from collections.abc import Mapping
from types import MappingProxyType

from ..exceptions import InvalidPlacementError, TemplateNotFound
from ..models.placement import PlacementTemplate
from ..models.product import ProductType, parse_product_type
from .framed_print import FRAMED_PRINT_TEMPLATE
from .mug import MUG_TEMPLATE
from .tote_bag import TOTE_BAG_TEMPLATE
from .water_bottle import WATER_BOTTLE_TEMPLATE

TEMPLATES: Mapping[ProductType, PlacementTemplate] = MappingProxyType({
    ProductType.MUG: MUG_TEMPLATE,
    ProductType.TOTE_BAG: TOTE_BAG_TEMPLATE,
    ProductType.FRAMED_PRINT: FRAMED_PRINT_TEMPLATE,
    ProductType.WATER_BOTTLE: WATER_BOTTLE_TEMPLATE,
})


def lookup(product_type: ProductType | str) -> PlacementTemplate | None:
    """Get template for a product type, or None if there is none."""
    key = parse_product_type(product_type)
    if key is None:
        return None
    return TEMPLATES.get(key)


def get_template(product_type: ProductType | str) -> PlacementTemplate:
    """Get template for a product type. Raises TemplateNotFound."""
    template = lookup(product_type)
    if template is None:
        name = product_type.value if isinstance(product_type, ProductType) else str(product_type)
        raise TemplateNotFound(name)
    return template


def has_template(product_type: ProductType | str) -> bool:
    return lookup(product_type) is not None


def list_templates() -> list[ProductType]:
    """List product types that have a template."""
    return list(TEMPLATES.keys())


def validate_templates(templates: Mapping[ProductType, PlacementTemplate] = TEMPLATES):
    """Check registry consistency. Raises InvalidPlacementError."""
    for key, template in templates.items():
        if template.product_type is not key:
            raise InvalidPlacementError(
                f"Template registered as {key.value!r} is for {template.product_type.value!r}"
            )
        if not template.base_image:
            raise InvalidPlacementError(f"Template {key.value!r} has no base image")


validate_templates()


__all__ = [
    "TEMPLATES",
    "lookup",
    "get_template",
    "has_template",
    "list_templates",
    "validate_templates",
]

"""AWS Lambda handler listing scene options and template availability."""

from ..models.options import AESTHETICS, PHOTO_STYLES, PROPS, TECH
from ..models.product import ProductType
from ..templates import has_template
from .events import get_method, json_response, method_not_allowed


def serialize_options() -> dict:
    """Serialize the option lists for the UI."""
    return {
        "productTypes": [
            {"name": product_type.value, "hasTemplate": has_template(product_type)}
            for product_type in ProductType
        ],
        "aesthetics": AESTHETICS,
        "photoStyles": PHOTO_STYLES,
        "props": PROPS,
        "tech": TECH,
    }


def handler(event, context):
    if get_method(event) not in (None, "GET"):
        return method_not_allowed("GET")
    return json_response(200, serialize_options())

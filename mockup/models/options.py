"""Scene options offered for AI generation."""

from dataclasses import dataclass, field

from .product import ProductType

PRODUCT_TYPES: list[str] = [p.value for p in ProductType]

AESTHETICS: list[str] = [
    "Clean minimalist studio with neutral tones",
    "Cozy bohemian living room with plants",
    "Sleek modern office with metallic accents",
    "Earthy rustic cabin with natural wood",
    "Playful pastel-colored kids room",
    "Dark and moody academic library",
    "Bright and airy Scandinavian kitchen",
    "Luxurious art deco setting",
]

PHOTO_STYLES: list[str] = [
    "Soft, diffused natural light from a window",
    "Bright, even studio lighting with a seamless backdrop",
    "Candid lifestyle shot with a person interacting",
    "Organized flat lay from a top-down angle",
    "Detailed macro shot focusing on texture",
    "Dramatic high-contrast lighting with deep shadows",
    "Warm golden hour outdoor lighting",
]

PROPS: list[str] = [
    "Simple & clean with minimal props",
    "Thematic (e.g., coffee beans for a mug)",
    "Nature-inspired with plants, wood, and stones",
    "Office-themed with notebooks and a laptop",
    "Lush & maximalist with rich textures and fabrics",
    "Geometric composition with abstract shapes",
    "Food-related props for kitchen items",
]

TECH: list[str] = [
    "4:3 aspect ratio, high resolution",
    "Square 1:1 for social media",
    "Vertical 9:16 for stories",
    "Ultra-sharp focus on the artwork",
    "Slightly desaturated, vintage color palette",
    "Vibrant, high-saturation colors",
]

DEFAULT_OVERLAY_DESCRIPTION = "user-provided art"


@dataclass
class SceneRequest:
    """Scene controls for an AI-generated mockup."""

    product_type: str = PRODUCT_TYPES[0]
    aesthetic: str = AESTHETICS[0]
    photo_style: str = PHOTO_STYLES[0]
    props: str = PROPS[0]
    tech: list[str] = field(default_factory=list)
    freestyle: str = ""
    overlay_description: str = DEFAULT_OVERLAY_DESCRIPTION

"""Prompt builder for AI mockup scenes."""

from ..models.options import SceneRequest


def build_prompt(scene: SceneRequest) -> str:
    """Build the user-content prompt for a mockup scene.

    The system prompt belongs to the model client; this is only the
    per-request part.
    """
    tech_line = f"Technical specs: {', '.join(scene.tech)}." if scene.tech else ""
    free = f"Freestyle modifiers: {scene.freestyle}." if scene.freestyle else ""

    return f"""
Generate a photoreal product mockup scene.

Goal:
- Show a {scene.product_type}.
- The user's uploaded artwork must appear as the product's printed design. Respect proportions, center alignment, and natural perspective/curvature; no warping artifacts.

Scene controls:
- Aesthetic & Environment: {scene.aesthetic}.
- Photography style: {scene.photo_style}.
- Props & Composition: {scene.props}.{tech_line}{free}

Design to apply (overlay): {scene.overlay_description}

Output:
- Return a single finished mockup image (PNG or JPEG), high resolution, no text overlays, no watermarks, clean edges.
- Make it realistic: correct reflections, shadows, and lighting consistent with the scene.
"""

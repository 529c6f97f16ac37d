"""AWS Lambda handler for AI mockup generation."""

import json
import logging

from ..models.artwork import ArtworkAsset
from ..models.options import DEFAULT_OVERLAY_DESCRIPTION, SceneRequest
from ..services.generation import GenerationService
from ..utils import decode_base64
from .events import get_method, json_response, method_not_allowed, parse_json_body

logger = logging.getLogger(__name__)


def _scene_from_body(body: dict) -> SceneRequest:
    defaults = SceneRequest()
    tech = body.get("tech") or []
    if isinstance(tech, str):
        tech = [tech]
    return SceneRequest(
        product_type=body.get("productType") or defaults.product_type,
        aesthetic=body.get("aesthetic") or defaults.aesthetic,
        photo_style=body.get("photoStyle") or defaults.photo_style,
        props=body.get("props") or defaults.props,
        tech=[str(t) for t in tech],
        freestyle=body.get("freestyle") or "",
        overlay_description=body.get("overlayDescription") or DEFAULT_OVERLAY_DESCRIPTION,
    )


def handler(event, context):
    """
    Generate an AI mockup scene for uploaded artwork.

    Input payload:
    {
        "fileData": "<base64 image>",
        "fileType": "image/png",
        "productType": "White ceramic coffee mug",
        "aesthetic": "...",
        "photoStyle": "...",
        "props": "...",
        "tech": ["..."],
        "freestyle": "...",
        "overlayDescription": "..."
    }

    Output: {"images": ["<url or data URL>"]}
    """
    if get_method(event) not in (None, "POST"):
        return method_not_allowed()

    try:
        body = parse_json_body(event)
    except ValueError:
        return json_response(400, {"error": "Invalid JSON body."})

    if not body.get("fileData"):
        return json_response(400, {"error": "No file uploaded."})

    try:
        artwork = ArtworkAsset(
            data=decode_base64(body["fileData"]),
            mime_type=body.get("fileType") or "image/png",
        )
        scene = _scene_from_body(body)
        print(f"Generating AI mockup: {scene.product_type}", flush=True)
        images = GenerationService().generate(scene, artwork)
    except Exception:
        logger.exception("Error in generate handler")
        return json_response(500, {"error": "Failed to generate images."})

    return json_response(200, {"images": images})


# Local testing
if __name__ == "__main__":
    import base64
    import sys
    from pathlib import Path

    if len(sys.argv) < 2:
        print("Usage: python -m mockup.handlers.generate <artwork_path> [product_type]")
        sys.exit(1)

    payload = {
        "fileData": base64.b64encode(Path(sys.argv[1]).read_bytes()).decode("ascii"),
        "fileType": "image/png",
    }
    if len(sys.argv) > 2:
        payload["productType"] = sys.argv[2]

    result = handler({"body": json.dumps(payload)}, None)
    print(f"Status: {result['statusCode']}")
    print(json.dumps(json.loads(result["body"]), indent=2)[:2000])

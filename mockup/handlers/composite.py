"""AWS Lambda handler for template compositing."""

import json
import logging

from ..exceptions import AssetLoadError, TemplateNotFound
from ..services.mockup import MockupService
from ..utils import decode_base64
from .events import get_method, json_response, method_not_allowed, parse_json_body

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("productType", "fileData", "fileType")


def handler(event, context):
    """
    Render uploaded artwork onto a product template.

    Input payload:
    {
        "productType": "White ceramic coffee mug",
        "fileData": "<base64 image, data URL prefix allowed>",
        "fileType": "image/png"
    }

    Output: {"images": ["data:image/png;base64,..."]}
    """
    if get_method(event) not in (None, "POST"):
        return method_not_allowed()

    try:
        body = parse_json_body(event)
    except ValueError:
        return json_response(400, {"error": "Invalid JSON body."})

    missing = [name for name in REQUIRED_FIELDS if not body.get(name)]
    if missing:
        return json_response(400, {"error": f"Missing required fields: {', '.join(missing)}"})

    product_type = body["productType"]
    try:
        artwork_bytes = decode_base64(body["fileData"])
    except ValueError:
        return json_response(400, {"error": "fileData must be base64 encoded."})

    print(f"Compositing artwork onto: {product_type}", flush=True)

    try:
        result = MockupService().render(product_type, artwork_bytes, body["fileType"])
    except TemplateNotFound as e:
        return json_response(404, {
            "error": f'Sorry, no template available for "{e.product_type}". Try AI Generation instead.',
            "fallback": "generate",
        })
    except AssetLoadError as e:
        logger.warning("Asset load failed: %s", e)
        return json_response(422, {
            "error": "Could not load the image. Please try again with a PNG or JPEG file.",
            "detail": str(e),
        })
    except Exception:
        logger.exception("Compositing failed for %s", product_type)
        return json_response(500, {"error": "Failed to render mockup."})

    print(f"  Rendered {result.width}x{result.height} ({len(result.data)} bytes)", flush=True)
    return json_response(200, {"images": [result.to_data_url()]})


# Local testing
if __name__ == "__main__":
    import base64
    import sys
    from pathlib import Path

    if len(sys.argv) < 3:
        print("Usage: python -m mockup.handlers.composite <product_type> <artwork_path> [output_path]")
        print()
        print('Example: python -m mockup.handlers.composite "White ceramic coffee mug" art.png mockup.png')
        sys.exit(1)

    artwork_path = Path(sys.argv[2])
    mime_type = "image/png" if artwork_path.suffix.lower() == ".png" else "image/jpeg"
    payload = {
        "productType": sys.argv[1],
        "fileData": base64.b64encode(artwork_path.read_bytes()).decode("ascii"),
        "fileType": mime_type,
    }

    result = handler({"body": json.dumps(payload)}, None)
    body = json.loads(result["body"])
    print(f"Status: {result['statusCode']}")

    if result["statusCode"] != 200:
        print(json.dumps(body, indent=2))
        sys.exit(1)

    output_path = Path(sys.argv[3] if len(sys.argv) > 3 else "mockup.png")
    output_path.write_bytes(decode_base64(body["images"][0]))
    print(f"Saved: {output_path}")

"""AWS Lambda handler proxying a prompt + image to the Gemini API.

Keeps the API key server-side; the browser only ever talks to this endpoint.
"""

import logging

from .. import config
from ..clients.gemini import GeminiClient
from ..exceptions import GenerationError
from ..utils import decode_base64
from .events import get_method, json_response, parse_json_body

logger = logging.getLogger(__name__)


def handler(event, context):
    """
    Input payload: {"prompt": "...", "fileData": "<base64>", "fileType": "image/png"}

    Output: the model's raw generateContent response.
    """
    if get_method(event) not in (None, "POST"):
        return json_response(405, {"message": "Method Not Allowed"})

    try:
        body = parse_json_body(event)
    except ValueError:
        return json_response(400, {"message": "Invalid JSON body."})

    prompt = body.get("prompt")
    file_data = body.get("fileData")
    file_type = body.get("fileType")
    if not prompt or not file_data or not file_type:
        return json_response(400, {"message": "Missing required fields: prompt, fileData, fileType"})

    if not config.GEMINI_API_KEY:
        logger.error("GEMINI_API_KEY is not set in environment variables.")
        return json_response(500, {"message": "Server configuration error."})

    try:
        image_bytes = decode_base64(file_data)
    except ValueError:
        return json_response(400, {"message": "fileData must be base64 encoded."})

    try:
        data = GeminiClient(api_key=config.GEMINI_API_KEY).generate_content(prompt, image_bytes, file_type)
    except GenerationError as e:
        logger.error("Gemini API error: %s", e)
        return json_response(502, {"message": "Error from AI service."})
    except Exception:
        logger.exception("Internal Server Error")
        return json_response(500, {"message": "An unexpected error occurred."})

    return json_response(200, data)

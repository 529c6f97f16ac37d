"""Helpers for API Gateway / Lambda function URL events."""

import base64
import json
from typing import Any


def get_method(event: dict) -> str | None:
    """HTTP method, or None for direct invocations."""
    method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method")
    return method.upper() if method else None


def get_header(event: dict, name: str) -> str | None:
    """Case-insensitive header lookup."""
    headers = event.get("headers") or {}
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def get_raw_body(event: dict) -> bytes:
    """Request body as bytes, undoing API Gateway base64 encoding."""
    body = event.get("body") or ""
    if isinstance(body, dict):
        return json.dumps(body).encode("utf-8")
    if event.get("isBase64Encoded"):
        return base64.b64decode(body)
    return body.encode("utf-8")


def parse_json_body(event: dict) -> dict[str, Any]:
    """Request body as a JSON object. Raises ValueError."""
    body = event.get("body")
    if isinstance(body, dict):
        return body
    raw = get_raw_body(event)
    if not raw:
        return {}
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("JSON body must be an object")
    return data


def json_response(status_code: int, body: Any) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def text_response(status_code: int, text: str) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "text/plain"},
        "body": text,
    }


def method_not_allowed(allowed: str = "POST") -> dict:
    response = json_response(405, {"error": "Method Not Allowed"})
    response["headers"]["Allow"] = allowed
    return response

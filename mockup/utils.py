import base64
import binascii


def to_data_url(data: bytes, mime_type: str) -> str:
    """Encode bytes as a data URL.

    Example: (b"...", "image/png") -> "data:image/png;base64,..."
    """
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def decode_base64(data: str) -> bytes:
    """Decode base64 payload, accepting a data URL prefix.

    Raises ValueError on malformed or non-string input.
    """
    if not isinstance(data, str):
        raise ValueError(f"Expected base64 string, got {type(data).__name__}")
    if data.startswith("data:") and "," in data:
        data = data.split(",", 1)[1]
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 data: {e}") from e

"""Gemini image generation client."""

import logging
import time

from google import genai
from google.genai import errors, types

from .. import config
from ..exceptions import GenerationError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Client for generating mockup images via Gemini image models."""

    def __init__(self, api_key: str, model: str | None = None):
        self.client = genai.Client(api_key=api_key)
        self.model = model or config.GEMINI_IMAGE_MODEL

    def _call_with_retry(self, func, max_retries=3, retry_codes=(503, 429)):
        """Retry API calls on transient errors with exponential backoff."""
        for attempt in range(max_retries):
            try:
                return func()
            except errors.APIError as e:
                if e.code not in retry_codes or attempt == max_retries - 1:
                    raise GenerationError(f"Gemini API error: {e.code} {e.message}", status=e.code) from e

                wait_time = 2 ** attempt  # 1s, 2s, 4s
                logger.warning(
                    "Gemini API error (attempt %s/%s), retrying in %ss: %s",
                    attempt + 1, max_retries, wait_time, e,
                )
                time.sleep(wait_time)

    def _generate(self, prompt: str, image_bytes: bytes, mime_type: str) -> types.GenerateContentResponse:
        contents = [
            types.Part.from_text(text=prompt),
            types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
        ]
        return self._call_with_retry(
            lambda: self.client.models.generate_content(
                model=self.model,
                contents=contents,
                config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
            )
        )

    def generate_content(self, prompt: str, image_bytes: bytes, mime_type: str) -> dict:
        """
        Forward a prompt and image to the model.

        Returns:
            The raw model response as a JSON-serializable dict (REST field names)
        """
        response = self._generate(prompt, image_bytes, mime_type)
        return response.model_dump(mode="json", by_alias=True, exclude_none=True)

    def generate_mockup(self, prompt: str, image_bytes: bytes, mime_type: str) -> tuple[bytes, str]:
        """
        Generate a mockup image.

        Returns:
            (image bytes, image MIME type) of the first generated image
        """
        response = self._generate(prompt, image_bytes, mime_type)

        # Extract generated image from response
        if response.candidates:
            for part in response.candidates[0].content.parts or []:
                if part.inline_data and part.inline_data.mime_type.startswith("image/"):
                    return part.inline_data.data, part.inline_data.mime_type

        raise GenerationError("No image generated by Gemini")

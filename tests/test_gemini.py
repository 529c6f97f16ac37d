from unittest.mock import MagicMock, patch

import pytest
from google.genai import errors

from mockup.clients.gemini import GeminiClient
from mockup.exceptions import GenerationError


def _api_error(code: int) -> errors.APIError:
    return errors.APIError(code, {"error": {"code": code, "message": "upstream failure", "status": "UNAVAILABLE"}})


def _image_response(data: bytes = b"img", mime_type: str = "image/png") -> MagicMock:
    part = MagicMock()
    part.inline_data.data = data
    part.inline_data.mime_type = mime_type
    response = MagicMock()
    response.candidates = [MagicMock()]
    response.candidates[0].content.parts = [part]
    return response


@pytest.fixture
def sdk():
    with patch("mockup.clients.gemini.genai.Client") as mock_client_cls:
        yield mock_client_cls.return_value


class TestGeminiClient:
    def test_uses_configured_model(self, sdk):
        sdk.models.generate_content.return_value = _image_response()
        GeminiClient(api_key="key", model="some-image-model").generate_mockup("prompt", b"art", "image/png")
        assert sdk.models.generate_content.call_args.kwargs["model"] == "some-image-model"

    def test_generate_mockup_extracts_image(self, sdk):
        sdk.models.generate_content.return_value = _image_response(b"png-bytes", "image/png")
        assert GeminiClient(api_key="key").generate_mockup("prompt", b"art", "image/png") == (b"png-bytes", "image/png")

    def test_no_image_raises(self, sdk):
        response = MagicMock()
        response.candidates = []
        sdk.models.generate_content.return_value = response
        with pytest.raises(GenerationError, match="No image"):
            GeminiClient(api_key="key").generate_mockup("prompt", b"art", "image/png")

    def test_generate_content_returns_raw_response(self, sdk):
        response = MagicMock()
        response.model_dump.return_value = {"candidates": []}
        sdk.models.generate_content.return_value = response

        assert GeminiClient(api_key="key").generate_content("prompt", b"art", "image/png") == {"candidates": []}
        response.model_dump.assert_called_once_with(mode="json", by_alias=True, exclude_none=True)

    def test_retries_transient_errors(self, sdk):
        sdk.models.generate_content.side_effect = [_api_error(503), _api_error(429), _image_response()]
        with patch("mockup.clients.gemini.time.sleep") as mock_sleep:
            GeminiClient(api_key="key").generate_mockup("prompt", b"art", "image/png")
        assert [c.args[0] for c in mock_sleep.call_args_list] == [1, 2]

    def test_gives_up_after_max_retries(self, sdk):
        sdk.models.generate_content.side_effect = _api_error(503)
        with patch("mockup.clients.gemini.time.sleep"):
            with pytest.raises(GenerationError) as exc_info:
                GeminiClient(api_key="key").generate_mockup("prompt", b"art", "image/png")
        assert exc_info.value.status == 503
        assert sdk.models.generate_content.call_count == 3

    def test_non_transient_error_not_retried(self, sdk):
        sdk.models.generate_content.side_effect = _api_error(403)
        with pytest.raises(GenerationError) as exc_info:
            GeminiClient(api_key="key").generate_mockup("prompt", b"art", "image/png")
        assert exc_info.value.status == 403
        assert sdk.models.generate_content.call_count == 1

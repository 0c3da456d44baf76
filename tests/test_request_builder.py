import pytest

from src.config import Config
from src.constants import RECEIPT_PROMPT
from src.errors import FailedPrecondition, InvalidArgument
from src.models import ReceiptImage
from src.request_builder import RequestBuilder


def make_config(*, api_key: str | None = "test-key", model: str = "gemini-flash-latest") -> Config:
    return Config(
        gemini_api_key=api_key,
        gemini_model=model,
        gemini_api_base="https://generativelanguage.googleapis.com/v1beta",
        inference_timeout=60,
        require_auth=False,
        log_level="INFO",
        host="127.0.0.1",
        port=8080,
    )


def make_image() -> ReceiptImage:
    return ReceiptImage(data="aGVsbG8=", mime_type="image/png")


def test_build_targets_generate_content_endpoint():
    request = RequestBuilder(make_config(model="gemini-2.5-flash")).build(make_image())

    assert request.url == (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"
    )


def test_build_passes_credential_as_query_param():
    request = RequestBuilder(make_config(api_key="abc123")).build(make_image())

    assert request.params == {"key": "abc123"}
    assert "abc123" not in repr(request)


def test_build_embeds_prompt_then_inline_image():
    request = RequestBuilder(make_config()).build(make_image())

    contents = request.body["contents"]
    assert len(contents) == 1
    text_part, image_part = contents[0]["parts"]
    assert text_part == {"text": RECEIPT_PROMPT}
    assert image_part == {"inline_data": {"mime_type": "image/png", "data": "aGVsbG8="}}


def test_build_sets_generation_config():
    request = RequestBuilder(make_config()).build(make_image())

    assert request.body["generationConfig"] == {
        "temperature": 0.4,
        "topK": 32,
        "topP": 1,
        "maxOutputTokens": 2048,
    }


def test_prompt_names_every_category_and_output_shape():
    for category in ("grocery", "utensil", "clothing", "miscellaneous"):
        assert category in RECEIPT_PROMPT
    for field in ('"items"', '"total"', '"date"', "YYYY-MM-DD"):
        assert field in RECEIPT_PROMPT


@pytest.mark.parametrize("api_key", [None, ""])
def test_build_without_credential_fails_precondition(api_key):
    with pytest.raises(FailedPrecondition, match="Gemini API key not configured"):
        RequestBuilder(make_config(api_key=api_key)).build(make_image())


@pytest.mark.parametrize("image", [
    ReceiptImage(data="", mime_type="image/png"),
    ReceiptImage(data="aGVsbG8=", mime_type=""),
])
def test_build_with_empty_image_fields_fails(image):
    with pytest.raises(InvalidArgument):
        RequestBuilder(make_config()).build(image)


def test_build_checks_input_before_credential():
    with pytest.raises(InvalidArgument):
        RequestBuilder(make_config(api_key=None)).build(ReceiptImage(data="", mime_type=""))


# ── ReceiptImage.from_payload ─────────────────────────────────────────────────


def test_from_payload_reads_call_fields():
    image = ReceiptImage.from_payload({"imageData": "Zm9v", "mimeType": "image/jpeg"})

    assert image == ReceiptImage(data="Zm9v", mime_type="image/jpeg")


@pytest.mark.parametrize("payload", [
    {},
    {"imageData": "Zm9v"},
    {"mimeType": "image/jpeg"},
    {"imageData": "", "mimeType": "image/jpeg"},
    {"imageData": "Zm9v", "mimeType": None},
    {"imageData": 42, "mimeType": "image/jpeg"},
])
def test_from_payload_missing_fields_is_invalid_argument(payload):
    with pytest.raises(InvalidArgument, match="Missing image data or mime type"):
        ReceiptImage.from_payload(payload)

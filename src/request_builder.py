"""RequestBuilder — assembles the Gemini generateContent payload for a receipt."""
from src.config import Config
from src.constants import (
    GEMINI_GENERATE_PATH,
    GEMINI_KEY_PARAM,
    GENERATION_CONFIG,
    MSG_MISSING_IMAGE,
    MSG_NO_API_KEY,
    RECEIPT_PROMPT,
)
from src.errors import FailedPrecondition, InvalidArgument
from src.models import InferenceRequest, ReceiptImage


class RequestBuilder:

    def __init__(self, config: Config) -> None:
        self._config = config

    def build(self, image: ReceiptImage) -> InferenceRequest:
        """Input is checked before the credential. Raises InvalidArgument / FailedPrecondition."""
        if not image.data or not image.mime_type:
            raise InvalidArgument(MSG_MISSING_IMAGE)

        match self._config.gemini_api_key:
            case None | "":
                raise FailedPrecondition(MSG_NO_API_KEY)
            case api_key:
                pass

        url = GEMINI_GENERATE_PATH.format(
            base=self._config.gemini_api_base,
            model=self._config.gemini_model,
        )
        body = {
            "contents": [
                {
                    "parts": [
                        {"text": RECEIPT_PROMPT},
                        {
                            "inline_data": {
                                "mime_type": image.mime_type,
                                "data": image.data,
                            }
                        },
                    ]
                }
            ],
            "generationConfig": dict(GENERATION_CONFIG),
        }
        return InferenceRequest(url=url, body=body, params={GEMINI_KEY_PARAM: api_key})

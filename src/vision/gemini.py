"""GeminiVisionClient — Gemini generateContent backend over HTTPS."""
import logging
from typing import Optional

import httpx

from src.constants import (
    MSG_GEMINI_ERROR_LOG,
    MSG_GEMINI_STATUS,
    MSG_NO_MODEL_TEXT,
    MSG_NO_MODEL_TEXT_LOG,
)
from src.errors import InternalError
from src.models import InferenceRequest
from src.vision.client import VisionClient

logger = logging.getLogger(__name__)


def _first_text(payload: object) -> str | None:
    match payload:
        case {"candidates": [{"content": {"parts": [{"text": str() as text}, *_]}}, *_]}:
            return text
        case _:
            return None


class GeminiVisionClient(VisionClient):

    def __init__(
        self,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def generate(self, request: InferenceRequest) -> str:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(request.url, params=request.params, json=request.body)

        if not response.is_success:
            logger.error(MSG_GEMINI_ERROR_LOG, response.status_code, response.text)
            raise InternalError(MSG_GEMINI_STATUS % response.status_code)

        match _first_text(response.json()):
            case None | "":
                logger.error(MSG_NO_MODEL_TEXT_LOG)
                raise InternalError(MSG_NO_MODEL_TEXT)
            case text:
                return text

"""ReceiptAnalyzer — auth policy → validate → build → infer → normalize."""
import logging
import time
from typing import Any, Optional

from src.config import Config
from src.constants import (
    MSG_ANALYZE_FAILED,
    MSG_ANALYZE_FAILED_LOG,
    MSG_ANALYZED,
    MSG_CALLER_IDENTITY,
    MSG_UNAUTHENTICATED,
)
from src.errors import InternalError, ReceiptError, Unauthenticated
from src.models import ReceiptImage, ReceiptResult
from src.normalizer import normalize
from src.request_builder import RequestBuilder
from src.vision.client import VisionClient

logger = logging.getLogger(__name__)


def unwrap_payload(body: dict[str, Any]) -> dict[str, Any]:
    """Callable bodies arrive as {"data": {...}}; bare objects are accepted too."""
    match body:
        case {"data": dict() as inner}:
            return inner
        case _:
            return body


class ReceiptAnalyzer:
    """Stateless per call; safe to share across concurrent requests."""

    def __init__(self, config: Config, vision_client: VisionClient) -> None:
        self._require_auth = config.require_auth
        self._builder = RequestBuilder(config)
        self._vision_client = vision_client

    def _check_caller(self, caller: Optional[str]) -> None:
        match (self._require_auth, bool(caller)):
            case (True, False):
                raise Unauthenticated(MSG_UNAUTHENTICATED)
            case (_, present):
                logger.debug(MSG_CALLER_IDENTITY, present)

    async def analyze(self, body: dict[str, Any], caller: Optional[str] = None) -> ReceiptResult:
        start = time.monotonic()
        self._check_caller(caller)
        image = ReceiptImage.from_payload(unwrap_payload(body))
        request = self._builder.build(image)
        try:
            raw_text = await self._vision_client.generate(request)
            result = normalize(raw_text)
        except ReceiptError:
            raise
        except Exception:
            logger.exception(MSG_ANALYZE_FAILED_LOG)
            raise InternalError(MSG_ANALYZE_FAILED)
        logger.info(MSG_ANALYZED, len(result.items), time.monotonic() - start)
        return result

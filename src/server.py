"""FastAPI surface — callable-protocol endpoint for receipt analysis."""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.analyzer import ReceiptAnalyzer
from src.config import Config
from src.constants import BEARER_PREFIX, MSG_INVALID_BODY, ROUTE_ANALYZE, ROUTE_HEALTH
from src.errors import InvalidArgument, ReceiptError
from src.vision.client import VisionClient
from src.vision.gemini import GeminiVisionClient

logger = logging.getLogger(__name__)


def _caller_identity(request: Request) -> Optional[str]:
    header = request.headers.get("authorization", "")
    match header.lower().startswith(BEARER_PREFIX):
        case True:
            return header[len(BEARER_PREFIX):].strip() or None
        case False:
            return None


def receipt_error_handler(request: Request, exc: ReceiptError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


def create_app(config: Config, vision_client: Optional[VisionClient] = None) -> FastAPI:
    analyzer = ReceiptAnalyzer(
        config,
        vision_client or GeminiVisionClient(timeout=config.inference_timeout),
    )

    app = FastAPI(title="receipt-lens")
    app.add_exception_handler(ReceiptError, receipt_error_handler)

    @app.get(ROUTE_HEALTH)
    def health() -> Dict[str, Any]:
        return {"status": "ok"}

    @app.post(ROUTE_ANALYZE)
    async def analyze_receipt(request: Request) -> Dict[str, Any]:
        try:
            body = await request.json()
        except ValueError:
            raise InvalidArgument(MSG_INVALID_BODY) from None
        if not isinstance(body, dict):
            raise InvalidArgument(MSG_INVALID_BODY)

        result = await analyzer.analyze(body, caller=_caller_identity(request))
        return {"result": result.to_dict()}

    return app

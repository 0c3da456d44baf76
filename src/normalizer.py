"""Response normalizer — model free text → ReceiptResult.

The model is asked for bare JSON but routinely wraps it in markdown fences
or surrounds it with prose. Cleaning happens in three steps:

1. strip fence markers (```json, ```, `json, `),
2. take the greedy ``{...}`` span, which tolerates leading/trailing prose,
3. coerce each top-level field on its own, so one bad field never sinks
   the others.

Only text with no parseable JSON object is a hard failure.
"""
import json
import logging
import math
import re
from datetime import datetime, timezone
from typing import Any

from src.constants import MSG_PARSE_FAILED, MSG_PARSE_FAILED_LOG
from src.errors import InternalError
from src.models import ReceiptResult

logger = logging.getLogger(__name__)

_JSON_FENCE_OPEN = re.compile(r"```json\n?")
_FENCE = re.compile(r"```\n?")
_FENCE_CLOSE = re.compile(r"```\n?$")
_TICK_JSON_OPEN = re.compile(r"`json\n?")
_TICK_CLOSE = re.compile(r"`\n?$")
_OBJECT_SPAN = re.compile(r"\{.*\}", re.DOTALL)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def strip_fences(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = _FENCE_CLOSE.sub("", _JSON_FENCE_OPEN.sub("", cleaned))
    elif cleaned.startswith("```"):
        cleaned = _FENCE.sub("", cleaned)

    if cleaned.startswith("`json"):
        cleaned = _TICK_CLOSE.sub("", _TICK_JSON_OPEN.sub("", cleaned))
    elif cleaned.startswith("`"):
        cleaned = cleaned.replace("`", "")

    return cleaned.strip()


def _reject_constant(token: str) -> None:
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {token}")


def extract_object(text: str) -> dict[str, Any]:
    """Parse the first-to-last brace span. Raises InternalError when there is none."""
    match _OBJECT_SPAN.search(text):
        case None:
            logger.error(MSG_PARSE_FAILED_LOG, text)
            raise InternalError(MSG_PARSE_FAILED)
        case span:
            try:
                return json.loads(span.group(0), parse_constant=_reject_constant)
            except (ValueError, RecursionError):
                logger.error(MSG_PARSE_FAILED_LOG, text)
                raise InternalError(MSG_PARSE_FAILED) from None


def _coerce_items(value: Any) -> tuple:
    return tuple(value) if isinstance(value, list) else ()


def _coerce_total(value: Any) -> float:
    match value:
        case bool():
            return 0
        case int():
            return value
        case float() if math.isfinite(value):
            return value
        case _:
            return 0


def _coerce_date(value: Any) -> str:
    match value:
        case str() as d if d.strip():
            return d
        case _:
            return today_iso()


def normalize(raw_text: str) -> ReceiptResult:
    parsed = extract_object(strip_fences(raw_text))
    return ReceiptResult(
        items=_coerce_items(parsed.get("items")),
        total=_coerce_total(parsed.get("total")),
        date=_coerce_date(parsed.get("date")),
    )

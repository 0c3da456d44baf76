from dataclasses import dataclass, field
from typing import Any, Literal, TypedDict

from src.constants import MSG_MISSING_IMAGE
from src.errors import InvalidArgument

Category = Literal["grocery", "utensil", "clothing", "miscellaneous"]


class LineItem(TypedDict):
    name: str
    category: Category
    amount: float


@dataclass(frozen=True)
class ReceiptImage:
    data: str
    mime_type: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ReceiptImage":
        """Build from the inbound {imageData, mimeType} call body."""
        match (payload.get("imageData"), payload.get("mimeType")):
            case (str() as data, str() as mime_type) if data and mime_type:
                return cls(data=data, mime_type=mime_type)
            case _:
                raise InvalidArgument(MSG_MISSING_IMAGE)


@dataclass(frozen=True)
class ReceiptResult:
    items: tuple[LineItem, ...]
    total: float
    date: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "items": [dict(i) if isinstance(i, dict) else i for i in self.items],
            "total": self.total,
            "date": self.date,
        }


@dataclass(frozen=True)
class InferenceRequest:
    url: str
    body: dict[str, Any]
    # carries the credential; kept out of repr so it never reaches the logs
    params: dict[str, str] = field(repr=False)

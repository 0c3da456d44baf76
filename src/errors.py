"""Error taxonomy surfaced to callers as a kind + human-readable message."""
from src.constants import (
    KIND_FAILED_PRECONDITION,
    KIND_HTTP_STATUS,
    KIND_INTERNAL,
    KIND_INVALID_ARGUMENT,
    KIND_UNAUTHENTICATED,
)


class ReceiptError(Exception):
    kind: str = KIND_INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def http_status(self) -> int:
        return KIND_HTTP_STATUS[self.kind]

    @property
    def status(self) -> str:
        """Upper-snake form of the kind, e.g. INVALID_ARGUMENT."""
        return self.kind.upper().replace("-", "_")

    def to_dict(self) -> dict:
        return {"error": {"status": self.status, "message": self.message}}


class InvalidArgument(ReceiptError):
    kind = KIND_INVALID_ARGUMENT


class FailedPrecondition(ReceiptError):
    kind = KIND_FAILED_PRECONDITION


class Unauthenticated(ReceiptError):
    kind = KIND_UNAUTHENTICATED


class InternalError(ReceiptError):
    kind = KIND_INTERNAL

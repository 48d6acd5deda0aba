from enum import Enum
from typing import List, Optional

from projectetl.extract._raw import ErrorDetail, QueryPayload


class FetchErrorKind(Enum):
    MAX_RETRIES_EXCEEDED = "max_retries_exceeded"
    INVALID_RESPONSE = "invalid_response"


class FetchError(Exception):
    """Raised when a full search fetch has to be abandoned.

    ``errors`` holds the GraphQL error details seen most recently (if any) and
    ``query`` the payload of the request that triggered the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: FetchErrorKind,
        errors: Optional[List[ErrorDetail]] = None,
        query: Optional[QueryPayload] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.errors = errors
        self.query = query

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        first = self.errors[0].get("message", str(self.errors[0]))
        return f"{self.message} ({len(self.errors)} GraphQL error(s), first: {first})"


class UpstreamError(Exception):
    def __init__(self, message: str, *, status: Optional[int], url: str):
        super().__init__(message)
        self.status = status
        self.url = url


class BadGatewayError(UpstreamError):
    def __init__(self, message: str, *, url: str):
        super().__init__(message, status=502, url=url)

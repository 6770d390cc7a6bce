from typing import Optional


class FetchError(Exception):
    """Base class for everything that can make a recipe fetch come back empty."""

    kind = "fetch"

    def __str__(self) -> str:
        return f"{self.kind}: {super().__str__()}"


class MalformedRequestError(FetchError):
    kind = "malformed_request"


class TransportError(FetchError):
    kind = "transport"


class HttpStatusError(FetchError):
    kind = "http_status"

    def __init__(self, status_code: int, reason: Optional[str] = None) -> None:
        self.status_code = status_code
        message = f"Error response code: {status_code}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class ParseError(FetchError):
    kind = "parse"

from typing import Optional


class FetchError(Exception):
    """A fetch that produced no usable records.

    ``kind`` is one of ``http_status``, ``network``, ``invalid_body`` or ``empty``.
    """

    HTTP_STATUS = "http_status"
    NETWORK = "network"
    INVALID_BODY = "invalid_body"
    EMPTY = "empty"

    def __init__(self, kind: str, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code

    @classmethod
    def http_status(cls, status_code: int) -> "FetchError":
        return cls(cls.HTTP_STATUS, f"HTTP error! status: {status_code}", status_code=status_code)

    @classmethod
    def network(cls, exc: Exception) -> "FetchError":
        return cls(cls.NETWORK, str(exc) or exc.__class__.__name__)

    @classmethod
    def empty(cls, message: str) -> "FetchError":
        return cls(cls.EMPTY, message)

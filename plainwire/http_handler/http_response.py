import copy
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Union

HTTP_VERSION = "HTTP/1.1"
DEFAULT_STATUS_CODE = "200"
DEFAULT_CONTENT_TYPE = "text/html"
FALLBACK_STATUS_TEXT = "Not Found"
STATUS_TEXTS: Dict[str, str] = {
    "200": "OK",
    "400": "Bad Request",
    "404": "Not Found",
    "500": "Internal Server Error",
}


def status_text_for(status_code: str) -> str:
    return STATUS_TEXTS.get(str(status_code), FALLBACK_STATUS_TEXT)


def default_headers() -> Dict[str, str]:
    return {"Content-Type": DEFAULT_CONTENT_TYPE}


class ResponseHeaders(dict):
    """Insertion-ordered header mapping that rejects changes after creation."""

    def _readonly(self, *args, **kwargs):
        raise TypeError("response headers are read-only")

    __setitem__ = _readonly
    __delitem__ = _readonly
    __ior__ = _readonly
    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly

    def __reduce__(self):
        return (ResponseHeaders, (dict(self),))

    def __deepcopy__(self, memo):
        return ResponseHeaders(copy.deepcopy(dict(self), memo))


@dataclass(frozen=True)
class HTTPResponse:
    status_code: Union[str, int] = DEFAULT_STATUS_CODE
    headers: Optional[Mapping[str, str]] = field(
        default_factory=default_headers, hash=False
    )
    body: Optional[str] = None
    version: str = HTTP_VERSION

    def __post_init__(self):
        headers = self.headers
        if headers is None:
            headers = default_headers()

        # frozen, so normalized values have to be set through object
        object.__setattr__(self, "status_code", str(self.status_code))
        object.__setattr__(self, "headers", ResponseHeaders(headers))

    @property
    def status_text(self) -> str:
        return status_text_for(self.status_code)

    @property
    def body_text(self) -> str:
        if self.body is None:
            return ""
        return self.body

    def to_dict(self):
        return {
            "version": self.version,
            "status_code": self.status_code,
            "status_text": self.status_text,
            "headers": dict(self.headers),
            "body": self.body,
        }


def build_response(
    status_code: Union[str, int] = DEFAULT_STATUS_CODE,
    headers: Optional[Mapping[str, str]] = None,
    body: Optional[str] = None,
) -> HTTPResponse:
    """Build an immutable response.

    Missing headers become a single ``Content-Type: text/html`` entry. Supplied
    headers are kept as given, they are never merged with the default. Status
    codes outside the known table are accepted and get the "Not Found" text.
    """
    return HTTPResponse(status_code=status_code, headers=headers, body=body)

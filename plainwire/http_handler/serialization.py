from plainwire.http_handler.http_response import HTTPResponse
from plainwire.http_handler.wire_settings import WireSettings


class ResponseSerializer:
    def __init__(self, wire_settings: WireSettings = None):
        if wire_settings is None:
            wire_settings = WireSettings()
        self.wire_settings = wire_settings

    def _serialize_status_line(self, response: HTTPResponse) -> str:
        return f"{response.version} {response.status_code} {response.status_text}\r\n"

    def _serialize_headers(self, response: HTTPResponse) -> str:
        return "".join(
            f"{name}:{value}\r\n" for name, value in response.headers.items()
        )

    def _serialize_content_length(self, body: str) -> str:
        content_length = len(body.encode(self.wire_settings.encoding))
        return (
            f"Content-Length: {content_length}"
            f"{self.wire_settings.content_length_terminator}"
        )

    def serialize(self, response: HTTPResponse) -> str:
        # a response without a body goes out as an empty one
        body = response.body_text
        return (
            self._serialize_status_line(response)
            + self._serialize_headers(response)
            + self._serialize_content_length(body)
            + "\r\n"
            + body
        )

    def serialize_bytes(self, response: HTTPResponse) -> bytes:
        return self.serialize(response).encode(self.wire_settings.encoding)

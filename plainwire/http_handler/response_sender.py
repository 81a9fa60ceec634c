import io
import logging

from plainwire.exceptions import ResponseWriteError
from plainwire.http_handler.http_response import HTTPResponse
from plainwire.http_handler.serialization import ResponseSerializer

LOGGER = logging.getLogger(__name__)


class ResponseSender:
    def __init__(self, serializer: ResponseSerializer = None):
        if serializer is None:
            serializer = ResponseSerializer()
        self.serializer = serializer

    def _write_all(self, sink, response_bytes: bytes):
        remaining = response_bytes
        while remaining:
            written = sink.write(remaining)
            # sinks that do not report a count are taken to write everything
            if written is None:
                return
            if written <= 0:
                raise ResponseWriteError(
                    sink,
                    f"Sink accepted {written} of {len(remaining)} remaining bytes",
                )
            remaining = remaining[written:]

    def _write(self, sink, response: HTTPResponse) -> int:
        if isinstance(sink, io.TextIOBase):
            buffer = getattr(sink, "buffer", None)
            if buffer is None:
                # pure text sinks such as StringIO never encode
                response_text = self.serializer.serialize(response)
                sink.write(response_text)
                return len(response_text)
            # Content-Length is counted in the wire encoding, not the stream's
            sink.flush()
            sink = buffer

        response_bytes = self.serializer.serialize_bytes(response)
        if hasattr(sink, "sendall"):
            sink.sendall(response_bytes)
        else:
            self._write_all(sink, response_bytes)
        return len(response_bytes)

    def send_response(self, sink, response: HTTPResponse):
        try:
            written = self._write(sink, response)
            if hasattr(sink, "flush"):
                sink.flush()
        except OSError as e:
            LOGGER.exception(f"Failed to write {response.status_code} response")
            raise ResponseWriteError(sink, str(e)) from e
        except ResponseWriteError:
            LOGGER.exception(f"Failed to write {response.status_code} response")
            raise

        LOGGER.debug(f"Sent {response.status_code} response ({written} bytes)")

    async def send_response_async(self, writer, response: HTTPResponse):
        response_bytes = self.serializer.serialize_bytes(response)
        try:
            writer.write(response_bytes)
            await writer.drain()
        except OSError as e:
            LOGGER.exception(f"Failed to write {response.status_code} response")
            raise ResponseWriteError(writer, str(e)) from e

        LOGGER.debug(
            f"Sent {response.status_code} response ({len(response_bytes)} bytes)"
        )

from plainwire.exceptions import PlainwireError, ResponseWriteError
from plainwire.http_handler.http_response import HTTPResponse, build_response
from plainwire.http_handler.json_response import build_json_response
from plainwire.http_handler.response_sender import ResponseSender
from plainwire.http_handler.serialization import ResponseSerializer
from plainwire.http_handler.wire_settings import WireSettings

__version__ = "0.1.0"

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Union

import orjson

from plainwire.http_handler.http_response import HTTPResponse, build_response

JSON_CONTENT_TYPE = "application/json"


class JSONSerializer(ABC):
    @abstractmethod
    def dumps(self, obj) -> bytes:
        """Serialize an object to a json byte string."""


def build_json_response(
    status_code: Union[str, int],
    payload: Union[dict, list],
    headers: Optional[Mapping[str, str]] = None,
    json_serializer: JSONSerializer = orjson,
) -> HTTPResponse:
    if headers is None:
        headers = {"Content-Type": JSON_CONTENT_TYPE}

    body = json_serializer.dumps(payload).decode("utf-8")
    return build_response(status_code, headers=headers, body=body)

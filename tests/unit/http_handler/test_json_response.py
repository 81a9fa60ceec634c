import orjson

from plainwire.http_handler.json_response import build_json_response
from plainwire.http_handler.serialization import ResponseSerializer


class FakeJSONSerializer:
    def __init__(self):
        self.calls = []

    def dumps(self, obj):
        self.calls.append(obj)
        return b"fake"


def test__build_json_response__when_payload_is_dict__serializes_body_with_orjson():
    # ARRANGE
    payload = {"detail": "Not Found"}

    # ACT
    response = build_json_response("404", payload)

    # ASSERT
    assert response.body == orjson.dumps(payload).decode("utf-8")
    assert response.status_text == "Not Found"


def test__build_json_response__when_payload_is_list__serializes_body_with_orjson():
    # ACT
    response = build_json_response("200", ["value"])

    # ASSERT
    assert response.body == '["value"]'


def test__build_json_response__when_headers_is_none__sets_json_content_type():
    # ACT
    response = build_json_response("200", {"key": "value"})

    # ASSERT
    assert dict(response.headers) == {"Content-Type": "application/json"}


def test__build_json_response__when_headers_supplied__keeps_them():
    # ACT
    response = build_json_response("200", {"key": "value"}, headers={"X-A": "b"})

    # ASSERT
    assert dict(response.headers) == {"X-A": "b"}


def test__build_json_response__uses_injected_json_serializer():
    # ARRANGE
    json_serializer = FakeJSONSerializer()

    # ACT
    response = build_json_response(
        "200", {"key": "value"}, json_serializer=json_serializer
    )

    # ASSERT
    assert json_serializer.calls == [{"key": "value"}]
    assert response.body == "fake"


def test__build_json_response__serializes_to_wire_format():
    # ARRANGE
    serializer = ResponseSerializer()

    # ACT
    result = serializer.serialize(build_json_response("500", {"detail": "boom"}))

    # ASSERT
    assert result == (
        "HTTP/1.1 500 Internal Server Error\r\n"
        "Content-Type:application/json\r\n"
        "Content-Length: 17;\r\n"
        "\r\n"
        '{"detail":"boom"}'
    )

# tests/domain/test_http_message.py
import io

import pytest
from domain.http_message import (
    EMPTY_BODY,
    BufferBody,
    EmptyBody,
    HttpRequestView,
    HttpResponseView,
    StreamBody,
)


class TestHttpRequestView:
    def test_defaults(self):
        request = HttpRequestView(method="GET", url="https://example.com")
        assert request.headers == {}
        assert request.body == EMPTY_BODY
        assert isinstance(request.body, EmptyBody)

    def test_missing_url_is_allowed(self):
        request = HttpRequestView(method="GET", url=None)
        assert request.url is None

    def test_buffer_body(self):
        request = HttpRequestView(method="POST", url="https://example.com", body=BufferBody(data=b"abc"))
        assert request.body.data == b"abc"

    def test_stream_body(self):
        stream = io.BytesIO(b"abc")
        request = HttpRequestView(method="POST", url="https://example.com", body=StreamBody(stream=stream))
        assert request.body.stream is stream

    def test_raw_bytes_body_is_rejected(self):
        with pytest.raises(TypeError):
            HttpRequestView(method="POST", url="https://example.com", body=b"abc")

    def test_frozen(self):
        request = HttpRequestView(method="GET", url="https://example.com")
        with pytest.raises(Exception):  # FrozenInstanceError
            request.url = "https://other.example.com"


class TestHttpResponseView:
    def test_has_metadata(self):
        assert HttpResponseView(status=200, url="https://example.com").has_metadata is True

    def test_without_metadata(self):
        response = HttpResponseView(status=200, content=b"body")
        assert response.has_metadata is False
        assert response.headers == {}

"""
Tests unitarios para los transportes HTTP.

Usa httpx.MockTransport: no hay red real.

Valida:
- POST form-encoded
- Redirects (direct_http los sigue con límite, legacy no)
- Status no-2xx y errores de red
- Factory build_transport

python -m pytest tests/test_transport.py
"""

from urllib.parse import parse_qs

import httpx
import pytest

from config.constants import TransportMode
from sendy.errors import SendyTransportError
from sendy.http import Transport, HttpxTransport, CurlLikeTransport, build_transport
from sendy.models import RawResponse

URL = "https://newsletter.example.com/subscribe"
FIELDS = {"api_key": "k", "email": "joe+news@example.com", "list": "L1", "boolean": "true"}


def recording_handler(responses):
    """Handler que registra requests y responde en orden."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return responses[min(len(seen), len(responses)) - 1]

    return handler, seen


class TestHttpxTransport:
    """Tests de HttpxTransport (direct_http)."""

    def test_defaults(self):
        transport = HttpxTransport()

        assert transport.timeout == 45.0
        assert transport.max_redirects == 5

    def test_posts_form_fields(self):
        handler, seen = recording_handler([httpx.Response(200, text="1")])
        transport = HttpxTransport(httpx_transport=httpx.MockTransport(handler))

        response = transport.post(URL, FIELDS)

        assert response == RawResponse(status_code=200, body="1")
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == URL
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert request.headers["user-agent"] == "sendy-api-client/0.1"
        body = parse_qs(request.content.decode())
        assert body == {k: [v] for k, v in FIELDS.items()}

    def test_follows_redirect(self):
        handler, seen = recording_handler([
            httpx.Response(301, headers={"Location": "https://newsletter.example.com/new/subscribe"}),
            httpx.Response(200, text="true"),
        ])
        transport = HttpxTransport(httpx_transport=httpx.MockTransport(handler))

        response = transport.post(URL, FIELDS)

        assert response.body == "true"
        assert len(seen) == 2

    def test_too_many_redirects(self):
        handler, seen = recording_handler([
            httpx.Response(302, headers={"Location": "https://newsletter.example.com/loop"}),
        ])
        transport = HttpxTransport(max_redirects=2, httpx_transport=httpx.MockTransport(handler))

        with pytest.raises(SendyTransportError) as exc:
            transport.post(URL, FIELDS)

        assert "TooManyRedirects" in exc.value.message
        assert len(seen) == 3

    def test_server_error_is_transport_error(self):
        handler, _ = recording_handler([httpx.Response(500, text="Internal Server Error")])
        transport = HttpxTransport(httpx_transport=httpx.MockTransport(handler))

        with pytest.raises(SendyTransportError) as exc:
            transport.post(URL, FIELDS)

        assert exc.value.status_code == 500
        assert exc.value.error_code == "TRANSPORT_ERROR"

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        transport = HttpxTransport(httpx_transport=httpx.MockTransport(handler))

        with pytest.raises(SendyTransportError) as exc:
            transport.post(URL, FIELDS)

        assert "Connection refused" in exc.value.message
        assert exc.value.status_code is None


class TestCurlLikeTransport:
    """Tests de CurlLikeTransport (legacy_curl_like)."""

    def test_posts_encoded_query_string(self):
        handler, seen = recording_handler([httpx.Response(200, text="1")])
        transport = CurlLikeTransport(httpx_transport=httpx.MockTransport(handler))

        transport.post(URL, FIELDS)

        request = seen[0]
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert request.content.decode() == "api_key=k&email=joe%2Bnews%40example.com&list=L1&boolean=true"

    def test_does_not_follow_redirects(self):
        handler, seen = recording_handler([
            httpx.Response(302, headers={"Location": "https://newsletter.example.com/elsewhere"}, text=""),
        ])
        transport = CurlLikeTransport(httpx_transport=httpx.MockTransport(handler))

        response = transport.post(URL, FIELDS)

        assert response.status_code == 302
        assert len(seen) == 1

    def test_error_status_returns_body(self):
        handler, _ = recording_handler([httpx.Response(500, text="Error: database down")])
        transport = CurlLikeTransport(httpx_transport=httpx.MockTransport(handler))

        response = transport.post(URL, FIELDS)

        assert response == RawResponse(status_code=500, body="Error: database down")
        assert response.is_success is False

    def test_network_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        transport = CurlLikeTransport(httpx_transport=httpx.MockTransport(handler))

        with pytest.raises(SendyTransportError):
            transport.post(URL, FIELDS)


class TestBuildTransport:
    """Tests de build_transport."""

    def test_direct_http(self):
        transport = build_transport(TransportMode.DIRECT_HTTP, timeout=10, max_redirects=3)

        assert isinstance(transport, HttpxTransport)
        assert transport.timeout == 10
        assert transport.max_redirects == 3

    def test_legacy(self):
        assert isinstance(build_transport("legacy_curl_like"), CurlLikeTransport)

    def test_both_satisfy_protocol(self):
        assert isinstance(HttpxTransport(), Transport)
        assert isinstance(CurlLikeTransport(), Transport)

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            build_transport("carrier_pigeon")

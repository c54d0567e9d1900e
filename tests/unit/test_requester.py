"""Unit tests for StrapiRequester."""

import json

import httpx
import pytest
import respx

from strapi_migrate import JsonBody, StrapiConnectionError, StrapiRequester, TextBody

BASE_URL = "http://localhost:1337"


@pytest.fixture
async def requester():
    """Requester bound to a local test instance."""
    async with StrapiRequester(BASE_URL, "test-token") as client:
        yield client


class TestUrlBuilding:
    """Endpoint resolution."""

    def test_build_url_adds_api_prefix(self) -> None:
        """Test bare endpoint names resolve under /api."""
        client = StrapiRequester(f"{BASE_URL}/", "token")
        assert client._build_url("articles") == f"{BASE_URL}/api/articles"
        assert client._build_url("/api/articles/") == f"{BASE_URL}/api/articles"

    def test_build_url_keeps_absolute_urls(self) -> None:
        """Test absolute URLs are used as given."""
        client = StrapiRequester(BASE_URL, "token")
        url = "https://cdn.example.com/uploads/file.json"
        assert client._build_url(url) == url


class TestHeaders:
    """Request headers."""

    def test_default_headers(self) -> None:
        """Test bearer auth and JSON content type are always present."""
        client = StrapiRequester(BASE_URL, "abc")
        headers = client._get_headers()
        assert headers["Authorization"] == "Bearer abc"
        assert headers["Content-Type"] == "application/json"

    def test_extra_headers_extend_and_override(self) -> None:
        """Test extra headers are merged over the defaults."""
        client = StrapiRequester(BASE_URL, "abc")
        headers = client._get_headers({"X-Trace": "1", "Content-Type": "text/plain"})
        assert headers["X-Trace"] == "1"
        assert headers["Content-Type"] == "text/plain"
        assert headers["Authorization"] == "Bearer abc"


class TestRequest:
    """Request execution and response parsing."""

    @respx.mock
    async def test_get_parses_json(self, requester: StrapiRequester) -> None:
        """Test a JSON body is returned as the parsed value."""
        route = respx.get(f"{BASE_URL}/api/articles").mock(
            return_value=httpx.Response(200, json={"data": [{"id": 1}]})
        )

        response = await requester.get("articles", params={"populate": "*"})

        assert response.status == 200
        assert isinstance(response.body, JsonBody)
        assert response.data == {"data": [{"id": 1}]}
        sent = route.calls.last.request
        assert sent.headers["Authorization"] == "Bearer test-token"
        assert sent.headers["Content-Type"] == "application/json"
        assert sent.url.params["populate"] == "*"

    @respx.mock
    async def test_non_json_body_falls_back_to_text(self, requester: StrapiRequester) -> None:
        """Test an unparseable body is kept as raw text."""
        respx.get(f"{BASE_URL}/api/articles").mock(
            return_value=httpx.Response(502, text="<html>Bad Gateway</html>")
        )

        response = await requester.get("articles")

        assert response.status == 502
        assert isinstance(response.body, TextBody)
        assert response.data == "<html>Bad Gateway</html>"

    @respx.mock
    async def test_error_status_is_returned_not_raised(
        self, requester: StrapiRequester
    ) -> None:
        """Test non-2xx statuses come back as data."""
        error = {"data": None, "error": {"status": 403, "name": "ForbiddenError"}}
        respx.get(f"{BASE_URL}/api/articles").mock(
            return_value=httpx.Response(403, json=error)
        )

        response = await requester.get("articles")

        assert response.status == 403
        assert response.data == error

    @respx.mock
    async def test_post_serializes_body(self, requester: StrapiRequester) -> None:
        """Test the body is sent as JSON bytes."""
        route = respx.post(f"{BASE_URL}/api/articles").mock(
            return_value=httpx.Response(201, json={"data": {"id": 9}})
        )

        response = await requester.post("articles", body={"data": {"title": "Hi"}})

        assert response.status == 201
        assert json.loads(route.calls.last.request.content) == {"data": {"title": "Hi"}}

    @respx.mock
    async def test_get_sends_no_body(self, requester: StrapiRequester) -> None:
        """Test requests without a body send empty content."""
        route = respx.get(f"{BASE_URL}/api/articles").mock(
            return_value=httpx.Response(200, json={})
        )

        await requester.get("articles")

        assert route.calls.last.request.content == b""

    @respx.mock
    async def test_transport_error_raises(self, requester: StrapiRequester) -> None:
        """Test connection failures raise StrapiConnectionError."""
        respx.get(f"{BASE_URL}/api/articles").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        with pytest.raises(StrapiConnectionError, match="Connection refused"):
            await requester.get("articles")

    @respx.mock
    async def test_decoding_error_raises(self, requester: StrapiRequester) -> None:
        """Test a body that cannot be decompressed raises StrapiConnectionError."""
        respx.get(f"{BASE_URL}/api/articles").mock(
            return_value=httpx.Response(
                200,
                stream=httpx.ByteStream(b"not gzip"),
                headers={"content-encoding": "gzip"},
            )
        )

        with pytest.raises(StrapiConnectionError):
            await requester.get("articles")

    @respx.mock
    async def test_unknown_charset_is_read_as_utf8(self, requester: StrapiRequester) -> None:
        respx.get(f"{BASE_URL}/api/articles").mock(
            return_value=httpx.Response(
                400,
                content=b'{"error": {"status": 400}}',
                headers={"content-type": "application/json; charset=bogus"},
            )
        )

        response = await requester.get("articles")

        assert response.status == 400
        assert response.data == {"error": {"status": 400}}


class TestClientOwnership:
    """Closing behaviour with injected clients."""

    async def test_injected_client_is_not_closed(self) -> None:
        """Test an injected httpx client stays open after the requester closes."""
        http_client = httpx.AsyncClient()

        async with StrapiRequester(BASE_URL, "token", http_client=http_client):
            pass

        assert not http_client.is_closed
        await http_client.aclose()

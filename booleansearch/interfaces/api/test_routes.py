"""Tests for API Routes."""

from collections.abc import Generator
from unittest.mock import AsyncMock
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
from fastapi.testclient import TestClient

from booleansearch.config import Settings
from booleansearch.config.errors import UpstreamHTTPError, UpstreamUnavailableError

from .deps import get_fetcher
from .main import create_app

RESULTS_HTML = """
<div class="g">
  <a href="/url?q=https://example.com/page&amp;sa=U" data-ved="1">
    <h3 class="LC20lb MBeuO">Example Page Result</h3></a>
  <div class="VwiC3b yXK7lf">A snippet about examples.</div>
</div>
<div class="g">
  <a href="/url?q=https://example.com/other&amp;sa=U" data-ved="2">
    <h3 class="LC20lb MBeuO">Another page entirely</h3></a>
  <div class="VwiC3b yXK7lf">Something unrelated to the query.</div>
</div>
<footer><a href="https://policies.google.com/terms">Terms</a></footer>
"""


@pytest.fixture
def settings() -> Settings:
    return Settings(scraperapi_key="test-key")


@pytest.fixture
def mock_fetcher() -> AsyncMock:
    """Create a mock scraping proxy client."""
    mock = AsyncMock()
    mock.fetch.return_value = RESULTS_HTML
    return mock


@pytest.fixture
def client(settings: Settings, mock_fetcher: AsyncMock) -> Generator[TestClient, None, None]:
    """Create a test client with mocked dependencies."""
    app = create_app(settings)

    # Override dependencies with mocks
    app.dependency_overrides[get_fetcher] = lambda: mock_fetcher

    yield TestClient(app)

    # Cleanup
    app.dependency_overrides.clear()


def test_root_reports_api_key(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "ok"
    assert data["hasApiKey"] is True


def test_root_reports_missing_api_key() -> None:
    client = TestClient(create_app(Settings(scraperapi_key="")))
    assert client.get("/").json()["hasApiKey"] is False


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert "service" in data


def test_search_returns_best_match(client: TestClient, mock_fetcher: AsyncMock) -> None:
    response = client.post(
        "/api/search",
        json={"domain": "example.com", "query": "Example Page Result"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "url": "https://example.com/page",
        "title": "Example Page Result",
        "description": "A snippet about examples.",
        "error": None,
    }

    fetched_url = mock_fetcher.fetch.call_args.args[0]
    query = parse_qs(urlsplit(fetched_url).query)
    assert query["q"] == ['site:example.com "Example Page Result"']


def test_search_cleans_wildcard_domain(client: TestClient, mock_fetcher: AsyncMock) -> None:
    client.post("/api/search", json={"domain": "example.*", "query": "Example"})

    fetched_url = mock_fetcher.fetch.call_args.args[0]
    assert parse_qs(urlsplit(fetched_url).query)["q"] == ['site:example "Example"']


def test_search_no_results(client: TestClient, mock_fetcher: AsyncMock) -> None:
    mock_fetcher.fetch.return_value = "<html><body>No results</body></html>"

    response = client.post("/api/search", json={"domain": "example.com", "query": "x"})

    assert response.status_code == 200
    assert response.json() == {
        "url": "",
        "title": "",
        "description": "",
        "error": "Nessun risultato trovato",
    }


@pytest.mark.parametrize(
    "body",
    [{}, {"domain": "example.com"}, {"query": "x"}, {"domain": "", "query": "x"}],
)
def test_search_missing_fields(
    client: TestClient, mock_fetcher: AsyncMock, body: dict[str, str]
) -> None:
    response = client.post("/api/search", json=body)

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Dominio e query sono richiesti"
    assert data["code"] == "VALIDATION_ERROR"
    mock_fetcher.fetch.assert_not_called()


def test_search_without_body(client: TestClient, mock_fetcher: AsyncMock) -> None:
    response = client.post("/api/search")

    assert response.status_code == 400
    data = response.json()
    assert {k: data[k] for k in ("url", "title", "description", "error")} == {
        "url": "",
        "title": "",
        "description": "",
        "error": "Dominio e query sono richiesti",
    }
    assert data["code"] == "VALIDATION_ERROR"
    mock_fetcher.fetch.assert_not_called()


@pytest.mark.parametrize(
    "body",
    [{"domain": 123, "query": "x"}, {"domain": "example.com", "query": ["x"]}],
)
def test_search_rejects_non_string_fields(
    client: TestClient, mock_fetcher: AsyncMock, body: dict[str, object]
) -> None:
    response = client.post("/api/search", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "Dominio e query sono richiesti"
    mock_fetcher.fetch.assert_not_called()


def test_candidates_without_body(client: TestClient) -> None:
    response = client.post("/api/search/candidates")

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_search_missing_api_key() -> None:
    """Without overrides the real proxy client refuses to run keyless."""
    client = TestClient(create_app(Settings(scraperapi_key="")))

    response = client.post("/api/search", json={"domain": "example.com", "query": "x"})

    assert response.status_code == 500
    assert response.json()["error"] == "ScraperAPI key non configurata"


def test_search_upstream_http_error(client: TestClient, mock_fetcher: AsyncMock) -> None:
    mock_fetcher.fetch.side_effect = UpstreamHTTPError(403)

    response = client.post("/api/search", json={"domain": "example.com", "query": "x"})

    assert response.status_code == 500
    data = response.json()
    assert data["url"] == ""
    assert data["error"] == "Errore ScraperAPI: HTTP 403"
    assert data["code"] == "UPSTREAM_HTTP_ERROR"


def test_search_upstream_unavailable(client: TestClient, mock_fetcher: AsyncMock) -> None:
    mock_fetcher.fetch.side_effect = UpstreamUnavailableError("timed out")

    response = client.post("/api/search", json={"domain": "example.com", "query": "x"})

    assert response.status_code == 500
    assert response.json()["error"] == "Errore: timed out"


def test_search_unexpected_error(client: TestClient, mock_fetcher: AsyncMock) -> None:
    mock_fetcher.fetch.side_effect = RuntimeError("boom")

    response = client.post("/api/search", json={"domain": "example.com", "query": "x"})

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Errore: boom"
    assert data["code"] == "INTERNAL_ERROR"


def test_search_end_to_end_through_proxy_client(monkeypatch: pytest.MonkeyPatch) -> None:
    """Real ScraperAPIClient with httpx transport mocked out."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=RESULTS_HTML)

    real_async_client = httpx.AsyncClient
    monkeypatch.setattr(
        "booleansearch.adapters.scraperapi.client.httpx.AsyncClient",
        lambda **kwargs: real_async_client(transport=httpx.MockTransport(handler), **kwargs),
    )
    client = TestClient(create_app(Settings(scraperapi_key="live-key")))

    response = client.post(
        "/api/search", json={"domain": "example.com", "query": "Example Page Result"}
    )

    assert response.status_code == 200
    assert response.json()["url"] == "https://example.com/page"
    assert seen[0].url.params["api_key"] == "live-key"
    assert seen[0].url.params["url"].startswith("https://www.google.com/search?q=")


def test_search_candidates(client: TestClient) -> None:
    response = client.post(
        "/api/search/candidates",
        json={"domain": "example.com", "query": "Example Page Result"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "Example Page Result"
    assert data["scoped_query"] == 'site:example.com "Example Page Result"'
    assert data["total"] == 2
    assert [c["url"] for c in data["candidates"]] == [
        "https://example.com/page",
        "https://example.com/other",
    ]
    assert data["candidates"][0]["score"] == 1.0
    assert data["candidates"][0]["description"] == "A snippet about examples."


def test_cors_headers(client: TestClient) -> None:
    """Test CORS preflight is answered."""
    response = client.options(
        "/api/search",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_request_id_header(client: TestClient) -> None:
    """Test that responses include request ID."""
    response = client.get("/health")
    assert "x-request-id" in response.headers
    assert "x-response-time-ms" in response.headers


def test_request_id_is_propagated(client: TestClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


def test_404_for_unknown_routes(client: TestClient) -> None:
    """Test 404 for non-existent routes."""
    response = client.get("/api/nonexistent")
    assert response.status_code == 404

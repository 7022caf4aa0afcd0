"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from booleansearch import __version__
from booleansearch.config.errors import UpstreamHTTPError

from .main import app

runner = CliRunner()

RESULTS_HTML = (
    '<a href="/url?q=https://example.com/page&sa=U"><h3>Example Page Result</h3></a>'
    '<div class="VwiC3b">A snippet about examples.</div>'
    '<a href="/url?q=https://example.com/other&sa=U"><h3>Completely different</h3></a>'
)


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_parse_saved_page(tmp_path: Path) -> None:
    page = tmp_path / "results.html"
    page.write_text(RESULTS_HTML, encoding="utf-8")

    result = runner.invoke(app, ["parse", str(page), "Example Page Result"])

    assert result.exit_code == 0
    assert "https://example.com/page" in result.stdout
    assert "https://example.com/other" in result.stdout
    assert result.stdout.index("example.com/page") < result.stdout.index("example.com/other")


def test_parse_page_without_results(tmp_path: Path) -> None:
    page = tmp_path / "blocked.html"
    page.write_text("<html>unusual traffic</html>", encoding="utf-8")

    result = runner.invoke(app, ["parse", str(page), "anything"])

    assert result.exit_code == 0
    assert "Nessun risultato trovato" in result.stdout


def test_parse_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["parse", str(tmp_path / "nope.html"), "x"])
    assert result.exit_code == 1


def test_search_prints_best_match() -> None:
    with patch("booleansearch.adapters.ScraperAPIClient.fetch", new_callable=AsyncMock) as fetch:
        fetch.return_value = RESULTS_HTML
        result = runner.invoke(app, ["search", "example.com", "Example Page Result"])

    assert result.exit_code == 0
    assert "https://example.com/page" in result.stdout
    assert "https://example.com/other" not in result.stdout


def test_search_reports_upstream_error() -> None:
    with patch("booleansearch.adapters.ScraperAPIClient.fetch", new_callable=AsyncMock) as fetch:
        fetch.side_effect = UpstreamHTTPError(500)
        result = runner.invoke(app, ["search", "example.com", "x"])

    assert result.exit_code == 1
    assert "Errore ScraperAPI: HTTP 500" in result.stdout

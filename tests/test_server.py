"""Tests for the FastAPI web service."""

from __future__ import annotations

from pathlib import Path

import pytest

try:
    from httpx import AsyncClient, ASGITransport
    _HAS_HTTPX = True
except ImportError:
    _HAS_HTTPX = False

from md2wiki.server import _content_disposition, app

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_MD = FIXTURE_DIR / "sample.md"

pytestmark = pytest.mark.skipif(not _HAS_HTTPX, reason="httpx not installed")


@pytest.fixture
def client():
    """Create an async test client."""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
class TestHealthEndpoint:

    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert "version" in data


@pytest.mark.asyncio
class TestThemesEndpoint:

    async def test_list_themes(self, client):
        resp = await client.get("/themes")
        assert resp.status_code == 200
        data = resp.json()
        assert data["default"] == "neutral"
        names = [t["name"] for t in data["themes"]]
        assert names == ["neutral", "tieto", "dark"]
        assert all(t["description"] for t in data["themes"])


@pytest.mark.asyncio
class TestConvertFileEndpoint:

    async def test_convert_file_upload(self, client):
        resp = await client.post(
            "/convert",
            files={"file": ("test.md", b"# Hello\n\nWorld", "text/markdown")},
            data={"theme": "neutral"},
        )
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text == "=Hello=\n\nWorld"

    async def test_convert_with_theme(self, client):
        resp = await client.post(
            "/convert",
            files={"file": ("test.md", b"# Hello", "text/markdown")},
            data={"theme": "tieto"},
        )
        assert resp.status_code == 200
        assert resp.text == '=<span style="color:#021e57;">Hello</span>='

    async def test_content_disposition_header(self, client):
        resp = await client.post(
            "/convert",
            files={"file": ("myfile.md", b"# Hello", "text/markdown")},
        )
        assert resp.status_code == 200
        assert "myfile.wiki" in resp.headers.get("content-disposition", "")

    async def test_undecodable_upload(self, client):
        resp = await client.post(
            "/convert",
            files={"file": ("bad.md", b"\xff\xfe\xfa", "text/markdown")},
        )
        assert resp.status_code == 400

    async def test_convert_sample_fixture(self, client):
        if not SAMPLE_MD.exists():
            pytest.skip("sample.md fixture not found")
        resp = await client.post(
            "/convert",
            files={"file": ("sample.md", SAMPLE_MD.read_bytes(), "text/markdown")},
        )
        assert resp.status_code == 200
        assert '{| class="wikitable"' in resp.text


@pytest.mark.asyncio
class TestConvertTextEndpoint:

    async def test_convert_text(self, client):
        resp = await client.post(
            "/convert/text",
            data={"markdown": "# Hello\n\nParagraph."},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["wikitext"] == "=Hello=\n\nParagraph."
        assert data["theme"] == "neutral"

    async def test_unknown_theme_falls_back(self, client):
        resp = await client.post(
            "/convert/text",
            data={"markdown": "# Hello", "theme": "purple"},
        )
        assert resp.status_code == 200
        assert resp.json()["theme"] == "neutral"

    async def test_css_option(self, client):
        resp = await client.post(
            "/convert/text",
            data={"markdown": "text", "theme": "dark", "add_css": "true"},
        )
        assert resp.status_code == 200
        assert "<style>" in resp.json()["wikitext"]

    async def test_table_conversion(self, client):
        md = "| A | B |\n|---|---|\n| 1 | 2 |"
        resp = await client.post("/convert/text", data={"markdown": md})
        assert resp.status_code == 200
        assert resp.json()["wikitext"].endswith("|}")


@pytest.mark.asyncio
class TestWebUI:

    async def test_index_returns_html(self, client):
        resp = await client.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers.get("content-type", "")

    async def test_index_contains_key_elements(self, client):
        resp = await client.get("/")
        html = resp.text
        assert "<textarea" in html
        assert "<select" in html
        assert "<button" in html

    async def test_index_contains_fetch_call(self, client):
        resp = await client.get("/")
        assert "fetch(" in resp.text


class TestContentDisposition:

    def test_ascii_name(self):
        assert _content_disposition("doc.wiki") == 'attachment; filename="doc.wiki"'

    def test_non_ascii_name(self):
        header = _content_disposition("café.wiki")
        assert header == "attachment; filename*=UTF-8''caf%C3%A9.wiki"

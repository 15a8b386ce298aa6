"""FastAPI web service for Markdown to MediaWiki conversion.

Endpoints::

    GET  /              Web UI (single-page HTML).
    POST /convert       Upload a .md file and receive .wiki markup back.
    POST /convert/text  Send raw Markdown text, receive JSON with the markup.
    GET  /health        Health check.
    GET  /themes        List available themes.

Run::

    uvicorn md2wiki.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import quote

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, Response

from md2wiki import __version__
from md2wiki.converter import ConversionConfig, Converter
from md2wiki.theme_manager import DEFAULT_THEME, list_themes

app = FastAPI(
    title="md2wiki",
    description="Markdown to MediaWiki conversion service",
    version=__version__,
)

WIKI_MEDIA_TYPE = "text/plain; charset=utf-8"


def _content_disposition(filename: str) -> str:
    """Build Content-Disposition header, RFC 5987 for non-ASCII names."""
    try:
        filename.encode("ascii")
        return f'attachment; filename="{filename}"'
    except UnicodeEncodeError:
        encoded = quote(filename)
        return f"attachment; filename*=UTF-8''{encoded}"


_STATIC_DIR = Path(__file__).parent / "static"
try:
    _INDEX_HTML = (_STATIC_DIR / "index.html").read_text(encoding="utf-8")
except FileNotFoundError:
    _INDEX_HTML = "<html><body><h1>md2wiki</h1><p>Web UI not found.</p></body></html>"


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the web UI."""
    return HTMLResponse(content=_INDEX_HTML)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/themes")
async def themes() -> dict[str, Any]:
    """List available themes."""
    return {
        "themes": [{"name": t.name, "description": t.description} for t in list_themes()],
        "default": DEFAULT_THEME,
    }


@app.post("/convert")
async def convert_file(
    file: UploadFile = File(...),
    theme: str = Form(DEFAULT_THEME),
    add_css: bool = Form(False),
    reverse_changelog: bool = Form(True),
    prettify_checks: bool = Form(True),
    encoding: str = Form("utf-8"),
) -> Response:
    """Upload a Markdown file and receive MediaWiki markup back.

    - **file**: Markdown file (.md)
    - **theme**: Theme name (neutral, tieto, dark); unknown names use neutral
    - **encoding**: Source file encoding
    """
    raw = await file.read()
    try:
        md_text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise HTTPException(status_code=400, detail=f"Cannot decode upload: {exc}") from exc

    config = ConversionConfig(
        theme=theme,
        add_css=add_css,
        reverse_changelog=reverse_changelog,
        prettify_checks=prettify_checks,
    )
    wikitext = Converter(config).convert_text(md_text)

    filename = (file.filename or "document.md").rsplit(".", 1)[0] + ".wiki"

    return Response(
        content=wikitext,
        media_type=WIKI_MEDIA_TYPE,
        headers={"Content-Disposition": _content_disposition(filename)},
    )


@app.post("/convert/text")
async def convert_text(
    markdown: str = Form(...),
    theme: str = Form(DEFAULT_THEME),
    add_css: bool = Form(False),
    reverse_changelog: bool = Form(True),
    prettify_checks: bool = Form(True),
) -> dict[str, str]:
    """Send raw Markdown text and receive the MediaWiki markup as JSON.

    - **markdown**: Markdown source text
    - **theme**: Theme name
    """
    config = ConversionConfig(
        theme=theme,
        add_css=add_css,
        reverse_changelog=reverse_changelog,
        prettify_checks=prettify_checks,
    )
    converter = Converter(config)
    return {"wikitext": converter.convert_text(markdown), "theme": converter.theme.name}

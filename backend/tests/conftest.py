"""Shared fixtures: an in-memory asset bundle and an HTTP client bound to it."""

import pytest
from httpx import AsyncClient, ASGITransport

from speaker_webui.assets import get_bundle
from speaker_webui.main import app
from tests.helpers import INDEX_HTML, SCRIPT_JS, STYLE_CSS, MemoryBundle


@pytest.fixture
def bundle():
    return MemoryBundle(
        {
            "static/index.html": INDEX_HTML.encode("utf-8"),
            "static/style.css": STYLE_CSS.encode("utf-8"),
            "static/script.js": SCRIPT_JS.encode("utf-8"),
        }
    )


@pytest.fixture
async def client(bundle):
    app.dependency_overrides[get_bundle] = lambda: bundle
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def packaged_client():
    """Client served from the real bundle shipped in the package."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

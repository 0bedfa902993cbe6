"""
Integration tests for OG image generation over an async HTTP client.
"""

import pytest
import httpx

from worldmonitor_og.main import app

BASE_URL = "http://testserver"


def _client():
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=BASE_URL, timeout=30.0)


@pytest.mark.asyncio
async def test_story_og_image():
    """Test GET /api/og-story endpoint."""
    async with _client() as client:
        response = await client.get(
            "/api/og-story",
            params={"c": "IR", "t": "marketfocus", "s": "64", "l": "elevated"},
        )

        assert response.status_code == 200, f"Expected 200, got {response.status_code}: {response.text}"
        assert response.headers["content-type"] == "image/svg+xml"
        assert len(response.content) > 0

        # Verify it's actually an SVG document
        assert response.content.startswith(b'<svg xmlns="http://www.w3.org/2000/svg"')
        assert response.content.rstrip().endswith(b"</svg>")
        assert "IRAN" in response.text
        assert "MARKET FOCUS" in response.text


@pytest.mark.asyncio
async def test_story_og_image_accepts_anything():
    """Test that the OG image endpoint never rejects parameters."""
    async with _client() as client:
        response = await client.get(
            "/api/og-story",
            params={"s": "not-a-number", "l": "???", "t": "nope"},
        )

        assert response.status_code == 200, "Bad parameters must fall back, not fail"


@pytest.mark.asyncio
async def test_story_og_image_cache_headers():
    """Test that OG images have proper cache headers."""
    async with _client() as client:
        response = await client.get("/api/og-story", params={"c": "TW", "s": "55"})

        assert response.status_code == 200
        assert "Cache-Control" in response.headers
        assert "max-age=3600" in response.headers["Cache-Control"]
        assert "s-maxage=3600" in response.headers["Cache-Control"]
        assert response.headers["Cache-Control"].startswith("public")

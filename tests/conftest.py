"""
Pytest configuration and fixtures for OG Image Service tests.
Follows Single Responsibility Principle - handles only test configuration.
"""
import xml.etree.ElementTree as ET
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from worldmonitor_og.main import app
from worldmonitor_og.services.og_service import OGService

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def client():
    """Test client for FastAPI application."""
    return TestClient(app)


@pytest.fixture
def og_service():
    """Fresh OG service instance."""
    return OGService()


@pytest.fixture
def fixed_now():
    """Fixed moment for footer dates."""
    return datetime(2026, 3, 5, 14, 30, tzinfo=timezone.utc)


@pytest.fixture
def parse_svg():
    """Parse SVG text, failing the test if it is not well-formed XML."""
    def _parse(svg_text):
        return ET.fromstring(svg_text.encode("utf-8"))
    return _parse


@pytest.fixture
def svg_texts():
    """Collect the text content of every <text> element in a parsed SVG."""
    def _texts(root):
        return [(element.text or "").strip() for element in root.iter(f"{SVG_NS}text")]
    return _texts

"""
Open Graph (OG) Image Generation Routes.
Generates dynamic social media preview images.
"""
from typing import List, Optional

from fastapi import APIRouter, Query
from fastapi.responses import Response

from ..core.config import settings
from ..services.og_service import OGService
from ..utils.debug import print_step

router = APIRouter(prefix="/api", tags=["og"])


def _first(values: Optional[List[str]]) -> Optional[str]:
    # A repeated parameter resolves to its first occurrence
    return values[0] if values else None


@router.get("/og-story")
def generate_story_og_image(
    c: Optional[List[str]] = Query(None, description="Country code, any case"),
    t: Optional[List[str]] = Query(None, description="Content type: ciianalysis, crisisalert, dailybrief or marketfocus"),
    s: Optional[List[str]] = Query(None, description="Country instability score, 0-100"),
    l: Optional[List[str]] = Query(None, description="Severity level: critical, high, elevated, normal or low"),
):
    """
    Generate a dynamic Open Graph image for story shares.

    Returns an SVG image (1200x630) for Twitter Cards and other link previews.
    Every parameter is optional and unknown values fall back to defaults,
    so this endpoint always answers 200.

    Returns:
        SVG image with Cache-Control headers for browser and CDN caching
    """
    c, t, s, l = _first(c), _first(t), _first(s), _first(l)
    print_step("OG Story Image Request", {"c": c, "t": t, "s": s, "l": l}, "input")

    svg = OGService().render_story_svg(
        country_code=c,
        content_type=t,
        score=s,
        level=l,
    )

    return Response(
        content=svg,
        media_type="image/svg+xml",
        headers={
            "Cache-Control": settings.OG_CACHE_CONTROL,
            "Content-Disposition": "inline; filename=og-story.svg"
        }
    )

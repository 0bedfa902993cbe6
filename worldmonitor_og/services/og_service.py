"""
Open Graph (OG) Image Generation Service.
Fills SVG templates to produce story preview images for social sharing.
"""
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.constants import (
    BADGE_CHAR_WIDTH,
    BADGE_PADDING,
    BADGE_X,
    BAR_TRACK_WIDTH,
    BAR_UNIT_WIDTH,
    COUNTRY_NAMES,
    DEFAULT_COUNTRY_NAME,
    DEFAULT_LEVEL,
    DEFAULT_LEVEL_COLOR,
    DEFAULT_TYPE,
    DEFAULT_TYPE_LABEL,
    LEVEL_COLORS,
    OG_HEIGHT,
    OG_WIDTH,
    SCORE_DIGIT_WIDTH,
    SCORE_MAX,
    SCORE_X,
    TYPE_LABELS,
)
from ..utils.debug import print_step
from ..utils.security import (
    escape_xml,
    normalize_country_code,
    parse_score,
    strip_invalid_xml_chars,
)

_PLACEHOLDER = re.compile(r"\{\{ (\w+) \}\}")

# en-US short month names, independent of the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_number(value: float) -> str:
    """Render a layout number with at most two decimals and no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_date(now: datetime) -> str:
    """Format a date the way en-US short dates read, e.g. "Oct 17, 2026"."""
    return f"{MONTH_ABBREVIATIONS[now.month - 1]} {now.day}, {now.year}"


def fill_template(template: str, values: Dict[str, Any]) -> str:
    """
    Substitute every {{ name }} placeholder in a single pass.

    Substituted text is never scanned again, so values containing
    placeholder syntax are inserted literally.
    """
    return _PLACEHOLDER.sub(lambda match: str(values[match.group(1)]), template)


class OGService:
    """Service for generating Open Graph story images for social media sharing."""

    def __init__(self):
        """Initialize the OG service with template paths."""
        self.templates_dir = Path(__file__).parent.parent / "templates"
        self.story_template_path = self.templates_dir / "story_og_template.svg"
        self.score_template_path = self.templates_dir / "story_og_score.svg"
        self.summary_template_path = self.templates_dir / "story_og_summary.svg"

    def _load(self, path: Path) -> str:
        if not path.exists():
            raise FileNotFoundError(f"Template not found: {path}")
        return path.read_text(encoding='utf-8')

    def resolve_story(
        self,
        country_code: Optional[str] = None,
        content_type: Optional[str] = None,
        score: Optional[str] = None,
        level: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Resolve raw query values into display values and layout numbers.

        Every value falls back to a default, so this never raises for bad input.

        Args:
            country_code: Two-letter country code, any case
            content_type: Content type key such as "crisisalert"
            score: Score as a string, parsed by its leading integer
            level: Severity level key such as "high"

        Returns:
            Dict of unescaped display values and computed layout numbers
        """
        code = normalize_country_code(country_code)
        content_type = content_type or DEFAULT_TYPE
        level = strip_invalid_xml_chars(level or "") or DEFAULT_LEVEL
        score_num = parse_score(score)

        badge_width = len(level) * BADGE_CHAR_WIDTH + BADGE_PADDING
        resolved = {
            "country_code": code,
            "country_name": COUNTRY_NAMES.get(code) or code or DEFAULT_COUNTRY_NAME,
            "type_label": TYPE_LABELS.get(content_type, DEFAULT_TYPE_LABEL),
            "level": level,
            "level_color": LEVEL_COLORS.get(level, DEFAULT_LEVEL_COLOR),
            "score": score_num,
            "badge_width": badge_width,
            "badge_center_x": BADGE_X + badge_width // 2,
            "score_offset_x": None,
            "bar_width": 0,
        }

        if score_num is not None:
            resolved["score_offset_x"] = SCORE_X + len(str(score_num)) * SCORE_DIGIT_WIDTH
            resolved["bar_width"] = min(score_num, SCORE_MAX) * BAR_UNIT_WIDTH

        return resolved

    def render_story_svg(
        self,
        country_code: Optional[str] = None,
        content_type: Optional[str] = None,
        score: Optional[str] = None,
        level: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Generate an Open Graph SVG image for a story share.

        Args:
            country_code: Two-letter country code (query "c")
            content_type: Content type key (query "t")
            score: Country instability score (query "s")
            level: Severity level key (query "l")
            now: Moment used for the footer date, defaults to the current UTC time

        Returns:
            SVG document text (1200x630)
        """
        story = self.resolve_story(country_code, content_type, score, level)
        now = now or datetime.now(timezone.utc)

        print_step("OG Story Image Generation", {
            "country_code": story["country_code"],
            "type_label": story["type_label"],
            "score": story["score"],
            "level": story["level"],
        }, "input")

        values = {
            "width": OG_WIDTH,
            "height": OG_HEIGHT,
            "level_color": story["level_color"],
            "type_label": escape_xml(story["type_label"].upper()),
            "country_name": escape_xml(story["country_name"].upper()),
            "country_code": escape_xml(story["country_code"]),
            "date": escape_xml(format_date(now)),
        }

        if story["score"] is not None:
            body = fill_template(self._load(self.score_template_path), {
                "level_color": story["level_color"],
                "score": story["score"],
                "score_offset_x": story["score_offset_x"],
                "badge_x": BADGE_X,
                "badge_width": story["badge_width"],
                "badge_center_x": story["badge_center_x"],
                "level_label": escape_xml(story["level"].upper()),
                "bar_track_width": BAR_TRACK_WIDTH,
                "bar_width": format_number(story["bar_width"]),
            })
        else:
            body = self._load(self.summary_template_path)

        values["body"] = body
        svg = fill_template(self._load(self.story_template_path), values)

        print_step("OG Story Image Generated", {
            "svg_size_bytes": len(svg.encode("utf-8"))
        }, "output")

        return svg

"""
Debug helpers for tracing request handling steps.
"""
import json
from datetime import datetime
from typing import Any

from ..core.config import settings

STEP_MARKERS = {
    "input": "📥 INPUT",
    "output": "📤 OUTPUT",
    "error": "❌ ERROR",
    "info": "ℹ️  INFO",
}


def _format_data(data: Any) -> str:
    if isinstance(data, str):
        return data
    try:
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(data)


def print_step(step: str, data: Any = None, kind: str = "info") -> None:
    """
    Print a tagged, timestamped trace line for a processing step.

    Args:
        step: Short name of the step
        data: Payload to show (strings are printed as-is, anything else as JSON)
        kind: One of "input", "output", "error" or "info"

    Errors are always printed; other kinds only when DEBUG is enabled.
    """
    if kind != "error" and not settings.DEBUG:
        return

    marker = STEP_MARKERS.get(kind, STEP_MARKERS["info"])
    timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    print(f"[{timestamp}] {marker} | {step}")
    if data is not None:
        print(f"    {_format_data(data)}")

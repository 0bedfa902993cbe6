"""
Static lookup tables for story preview images.
"""

COUNTRY_NAMES = {
    "UA": "Ukraine", "RU": "Russia", "CN": "China", "US": "United States",
    "IR": "Iran", "IL": "Israel", "TW": "Taiwan", "KP": "North Korea",
    "SA": "Saudi Arabia", "TR": "Turkey", "PL": "Poland", "DE": "Germany",
    "FR": "France", "GB": "United Kingdom", "IN": "India", "PK": "Pakistan",
    "SY": "Syria", "YE": "Yemen", "MM": "Myanmar", "VE": "Venezuela",
}

LEVEL_COLORS = {
    "critical": "#ef4444",
    "high": "#f97316",
    "elevated": "#eab308",
    "normal": "#22c55e",
    "low": "#3b82f6",
}

TYPE_LABELS = {
    "ciianalysis": "Intelligence Brief",
    "crisisalert": "Crisis Alert",
    "dailybrief": "Daily Brief",
    "marketfocus": "Market Focus",
}

DEFAULT_COUNTRY_NAME = "Global"
DEFAULT_TYPE = "ciianalysis"
DEFAULT_TYPE_LABEL = "Intelligence Brief"
DEFAULT_LEVEL = "elevated"
DEFAULT_LEVEL_COLOR = "#eab308"

# Canvas and layout
OG_WIDTH = 1200
OG_HEIGHT = 630
SCORE_X = 80
SCORE_DIGIT_WIDTH = 56
BADGE_X = 900
BADGE_CHAR_WIDTH = 20
BADGE_PADDING = 36
BAR_TRACK_WIDTH = 500
BAR_UNIT_WIDTH = 4.6
SCORE_MAX = 100

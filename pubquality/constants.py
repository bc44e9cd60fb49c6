from __future__ import annotations

# ---------------------------------------------------------------------------
# Quality taxonomy, best to worst. Matching is exact and case-sensitive.
# Anything outside this list still counts in the pie and the average
# (scored as FALLBACK_SCORE) but never lands in a detail section.
# ---------------------------------------------------------------------------
QUALITY_LABELS = [
    "MUY BIEN",
    "BIEN",
    "REGULAR",
    "MALA",
    "MUY MALA",
]

QUALITY_SCORES = {
    "MUY BIEN": 5,
    "BIEN": 4,
    "REGULAR": 3,
    "MALA": 2,
    "MUY MALA": 1,
}

FALLBACK_SCORE = 1
MAX_SCORE = max(QUALITY_SCORES.values())

QUALITY_COLORS = {
    "MUY BIEN": "#1b5e20",  # dark green
    "BIEN": "#4caf50",  # light green
    "REGULAR": "#ffc107",  # yellow
    "MALA": "#ef5350",  # light red
    "MUY MALA": "#d32f2f",  # strong red
}
UNKNOWN_COLOR = "#e5e7eb"

# Labels whose section header reads better with white text.
LIGHT_TEXT_LABELS = {"MUY BIEN", "BIEN", "MUY MALA"}
LIGHT_TEXT_COLOR = "#FFFFFF"
DARK_TEXT_COLOR = "#111827"

CSV_HEADER = "link,quality"
EMPTY_AVERAGE_DISPLAY = "0"

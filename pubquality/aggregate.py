"""Quality aggregation over the loaded publications.

``aggregate`` is a pure single pass: counts per label (first-seen order),
the exact average score and the per-label partition the detail list reads.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from pubquality.constants import (
    EMPTY_AVERAGE_DISPLAY,
    FALLBACK_SCORE,
    QUALITY_COLORS,
    QUALITY_LABELS,
    QUALITY_SCORES,
    UNKNOWN_COLOR,
)
from pubquality.storage import Record


@dataclass(frozen=True)
class QualityView:
    counts: Dict[str, int] = field(default_factory=dict)
    average: Optional[Fraction] = None
    groups: Dict[str, Tuple[Record, ...]] = field(default_factory=dict)
    total: int = 0

    def group(self, label: str) -> Tuple[Record, ...]:
        return self.groups.get(label, ())

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def score(quality: str) -> int:
    # Unrecognised labels share the bottom score with "MUY MALA".
    return QUALITY_SCORES.get(quality, FALLBACK_SCORE)


def quality_color(quality: str) -> str:
    return QUALITY_COLORS.get(quality, UNKNOWN_COLOR)


def aggregate(records: Sequence[Record]) -> QualityView:
    counts: Dict[str, int] = {}
    buckets: Dict[str, List[Record]] = {label: [] for label in QUALITY_LABELS}
    total_score = 0
    for rec in records:
        counts[rec.quality] = counts.get(rec.quality, 0) + 1
        total_score += score(rec.quality)
        if rec.quality in buckets:
            buckets[rec.quality].append(rec)

    total = len(records)
    average = Fraction(total_score, total) if total else None
    groups = {label: tuple(items) for label, items in buckets.items()}
    return QualityView(counts=counts, average=average, groups=groups, total=total)


def format_average(view: QualityView) -> str:
    if view.average is None:
        return EMPTY_AVERAGE_DISPLAY
    # Ties round up, e.g. 33/8 -> "4.13".
    exact = Decimal(view.average.numerator) / Decimal(view.average.denominator)
    return str(exact.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def counts_frame(view: QualityView) -> pd.DataFrame:
    """Chart input: one row per label present, in first-seen order."""
    rows = [
        {"quality": label, "count": count, "order": idx, "color": quality_color(label)}
        for idx, (label, count) in enumerate(view.counts.items())
    ]
    return pd.DataFrame(rows, columns=["quality", "count", "order", "color"])

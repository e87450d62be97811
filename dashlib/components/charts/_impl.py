"""
Revenue chart y-axis label generation.

Key behaviors:
- Top label is the highest revenue rounded up to the next multiple of step
- Labels descend from the top label to 0, formatted as "$<value/1000>K"
- Empty revenue series fail fast
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from dashlib.core.entities import Revenue

DEFAULT_STEP = 1000


@dataclass(frozen=True)
class YAxis:
    """Y-axis labels (top first) and the numeric ceiling they start from."""

    labels: list[str] = field(default_factory=list)
    top_label: int = 0


def revenue_value(record: Revenue | Mapping[str, Any] | Any) -> float:
    """Read the revenue figure from a Revenue, a mapping, or any object with .revenue."""
    if isinstance(record, Mapping):
        return record["revenue"]
    return record.revenue


def format_axis_label(value: int) -> str:
    """Format a value in thousands, e.g. 5000 -> "$5K", 1500 -> "$1.5K"."""
    thousands, remainder = divmod(value, 1000)
    if remainder == 0:
        return f"${thousands}K"
    return f"${value / 1000}K"


def generate_y_axis(
    revenue: Sequence[Revenue | Mapping[str, Any]],
    *,
    step: int = DEFAULT_STEP,
) -> YAxis:
    """
    Calculate the y-axis labels for a revenue chart.

    Args:
        revenue: Monthly revenue records; must not be empty.
        step: Distance between labels (default 1000).

    Returns:
        YAxis with labels from top_label down to 0.

    Raises:
        ValueError: If revenue is empty, holds a NaN/infinite value, or step
            is not positive.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if not revenue:
        raise ValueError("revenue must not be empty")

    values = [revenue_value(r) for r in revenue]
    if not all(math.isfinite(v) for v in values):
        raise ValueError("revenue values must be finite numbers")

    highest_record = max(values)
    top_label = math.ceil(highest_record / step) * step

    labels = [format_axis_label(value) for value in range(top_label, -1, -step)]
    return YAxis(labels=labels, top_label=top_label)

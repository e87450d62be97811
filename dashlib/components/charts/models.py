"""
Charts component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from dashlib.core.entities import Revenue


@dataclass(frozen=True)
class ChartValidationError:
    """Chart validation error."""

    code: str
    message: str
    field_name: str | None = None


@dataclass(frozen=True)
class GenerateYAxisInput:
    """Input for generating revenue chart y-axis labels."""

    revenue: tuple[Revenue | Mapping[str, Any], ...]


@dataclass(frozen=True)
class YAxisOutput:
    """Output for y-axis generation."""

    labels: tuple[str, ...] = ()
    top_label: int | None = None
    errors: list[ChartValidationError] = field(default_factory=list)
    success: bool = True

"""
Domain entities for dashlib.

- Revenue: one month of revenue, as plotted on the dashboard revenue chart.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["Revenue"]


class Revenue(BaseModel):
    """Monthly revenue record consumed by the chart y-axis generator."""

    model_config = ConfigDict(frozen=True)

    month: str
    revenue: float

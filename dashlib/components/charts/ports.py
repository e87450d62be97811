"""
Charts component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for chart rules configuration."""

    def get_y_axis_step(self) -> int:
        """Get the distance between y-axis labels."""
        ...

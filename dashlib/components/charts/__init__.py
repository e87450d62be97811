"""
Charts component - Revenue chart y-axis labels.
"""

from ._impl import (
    DEFAULT_STEP,
    YAxis,
    format_axis_label,
    generate_y_axis,
    revenue_value,
)
from .component import run, run_generate_y_axis
from .models import ChartValidationError, GenerateYAxisInput, YAxisOutput
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_generate_y_axis",
    # Models
    "ChartValidationError",
    "GenerateYAxisInput",
    "YAxisOutput",
    # Ports
    "RulesPort",
    # Pure helpers
    "DEFAULT_STEP",
    "YAxis",
    "format_axis_label",
    "generate_y_axis",
    "revenue_value",
]

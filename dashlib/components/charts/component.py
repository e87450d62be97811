"""
Charts component - Revenue chart axis generation.

Invariants:
- I1: Labels are ordered from top_label down to 0
- I2: top_label is a multiple of the configured step and >= every revenue value
- I3: Empty or malformed revenue series are reported, never plotted
"""

from __future__ import annotations

import logging

from ._impl import DEFAULT_STEP, generate_y_axis
from .models import ChartValidationError, GenerateYAxisInput, YAxisOutput
from .ports import RulesPort

logger = logging.getLogger(__name__)


def _reject(error: ChartValidationError) -> YAxisOutput:
    logger.warning("Y-axis generation rejected (%s): %s", error.code, error.message)
    return YAxisOutput(errors=[error], success=False)


def run_generate_y_axis(
    inp: GenerateYAxisInput,
    *,
    rules: RulesPort | None = None,
) -> YAxisOutput:
    """
    Generate y-axis labels for a revenue chart.

    Args:
        inp: Input containing the revenue series.
        rules: Optional rules port supplying the label step.

    Returns:
        YAxisOutput with labels and top label, or validation errors.
    """
    step = rules.get_y_axis_step() if rules is not None else DEFAULT_STEP

    if not inp.revenue:
        return _reject(
            ChartValidationError(
                code="empty_revenue",
                message="Revenue series must contain at least one record",
                field_name="revenue",
            )
        )

    try:
        axis = generate_y_axis(inp.revenue, step=step)
    except (KeyError, AttributeError, TypeError, ValueError, OverflowError) as e:
        return _reject(
            ChartValidationError(
                code="invalid_revenue",
                message=f"Revenue records must carry a numeric revenue value: {e}",
                field_name="revenue",
            )
        )

    return YAxisOutput(labels=tuple(axis.labels), top_label=axis.top_label)


def run(
    inp: GenerateYAxisInput,
    *,
    rules: RulesPort | None = None,
) -> YAxisOutput:
    """Main entry point for the charts component."""
    if isinstance(inp, GenerateYAxisInput):
        return run_generate_y_axis(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

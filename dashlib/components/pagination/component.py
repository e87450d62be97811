"""
Pagination component - Page marker generation for paged tables.

Invariants:
- I0: current_page and total_pages must be integers (bool rejected)
- I1: total_pages must be at least 1
- I2: current_page must lie within 1..total_pages
- I3: Page numbers in the output are strictly increasing
"""

from __future__ import annotations

import logging

from ._impl import generate_pagination
from .models import (
    GeneratePaginationInput,
    PaginationOutput,
    PaginationValidationError,
)

logger = logging.getLogger(__name__)


def validate_pagination_input(
    inp: GeneratePaginationInput,
) -> list[PaginationValidationError]:
    """Validate page types and bounds. Returns an empty list when valid."""
    errors: list[PaginationValidationError] = []

    for field_name in ("current_page", "total_pages"):
        value = getattr(inp, field_name)
        # bool is an int subclass but never a page number
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(
                PaginationValidationError(
                    code="invalid_page",
                    message=f"{field_name} must be an integer, got {value!r}",
                    field_name=field_name,
                )
            )
    if errors:
        return errors

    if inp.total_pages < 1:
        errors.append(
            PaginationValidationError(
                code="invalid_total_pages",
                message=f"total_pages must be at least 1, got {inp.total_pages}",
                field_name="total_pages",
            )
        )
        return errors

    if not 1 <= inp.current_page <= inp.total_pages:
        errors.append(
            PaginationValidationError(
                code="page_out_of_range",
                message=(
                    f"current_page {inp.current_page} is outside 1..{inp.total_pages}"
                ),
                field_name="current_page",
            )
        )

    return errors


def run_generate_pagination(inp: GeneratePaginationInput) -> PaginationOutput:
    """
    Generate pagination markers for a validated page position.

    Args:
        inp: Input containing current page and total pages.

    Returns:
        PaginationOutput with page markers, or validation errors.
    """
    errors = validate_pagination_input(inp)
    if errors:
        logger.warning(
            "Pagination rejected: %s", "; ".join(e.message for e in errors)
        )
        return PaginationOutput(errors=errors, success=False)

    items = generate_pagination(inp.current_page, inp.total_pages)
    return PaginationOutput(items=tuple(items))


def run(inp: GeneratePaginationInput) -> PaginationOutput:
    """Main entry point for the pagination component."""
    if isinstance(inp, GeneratePaginationInput):
        return run_generate_pagination(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

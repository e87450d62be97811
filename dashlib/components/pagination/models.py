"""
Pagination component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ._impl import PageItem


@dataclass(frozen=True)
class PaginationValidationError:
    """Pagination validation error."""

    code: str
    message: str
    field_name: str | None = None


@dataclass(frozen=True)
class GeneratePaginationInput:
    """Input for generating pagination markers."""

    current_page: int
    total_pages: int


@dataclass(frozen=True)
class PaginationOutput:
    """Output for pagination generation."""

    items: tuple[PageItem, ...] = ()
    errors: list[PaginationValidationError] = field(default_factory=list)
    success: bool = True

"""
Pagination component - Page markers with ellipsis elision.
"""

from ._impl import (
    ELLIPSIS,
    MAX_PAGES_WITHOUT_ELLIPSIS,
    PageItem,
    generate_pagination,
    page_numbers,
)
from .component import run, run_generate_pagination, validate_pagination_input
from .models import (
    GeneratePaginationInput,
    PaginationOutput,
    PaginationValidationError,
)

__all__ = [
    # Entry points
    "run",
    "run_generate_pagination",
    "validate_pagination_input",
    # Models
    "GeneratePaginationInput",
    "PaginationOutput",
    "PaginationValidationError",
    # Pure helpers
    "ELLIPSIS",
    "MAX_PAGES_WITHOUT_ELLIPSIS",
    "PageItem",
    "generate_pagination",
    "page_numbers",
]

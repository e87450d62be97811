"""
dashlib - Dashboard display helpers.

Flat re-exports of the component helpers so callers can import everything
from the package root.
"""

from dashlib.components.charts import YAxis, generate_y_axis
from dashlib.components.debounce import Debouncer, debounce
from dashlib.components.formatting import (
    INVALID_DATE,
    capitalize_first_letter,
    format_currency,
    format_date_to_local,
    format_number_with_commas,
    to_ordinal,
)
from dashlib.components.helpers import (
    factorial,
    generate_random_color,
    is_empty_object,
    most_frequent,
    shuffle_array,
)
from dashlib.components.pagination import ELLIPSIS, generate_pagination
from dashlib.core.entities import Revenue

__version__ = "0.1.0"

__all__ = [
    "Debouncer",
    "ELLIPSIS",
    "INVALID_DATE",
    "Revenue",
    "YAxis",
    "capitalize_first_letter",
    "debounce",
    "factorial",
    "format_currency",
    "format_date_to_local",
    "format_number_with_commas",
    "generate_pagination",
    "generate_random_color",
    "generate_y_axis",
    "is_empty_object",
    "most_frequent",
    "shuffle_array",
    "to_ordinal",
]

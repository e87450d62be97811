"""
Helpers component: Collection, number and color utilities.

Pure functional core only; there is no imperative shell.
"""

from dashlib.components.helpers.fc import (
    MAX_COLOR,
    factorial,
    generate_random_color,
    is_empty_object,
    most_frequent,
    shuffle_array,
)

__all__ = [
    "MAX_COLOR",
    "factorial",
    "generate_random_color",
    "is_empty_object",
    "most_frequent",
    "shuffle_array",
]

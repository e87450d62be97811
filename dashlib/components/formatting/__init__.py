"""
Formatting component - Currency, date, number and string rendering.
"""

from ._impl import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    INVALID_DATE,
    capitalize_first_letter,
    format_currency,
    format_date_to_local,
    format_money,
    format_number_with_commas,
    ordinal_suffix,
    parse_date,
    render_date,
    resolve_locale,
    to_ordinal,
)
from .component import (
    FormattingConfig,
    run,
    run_format_currency,
    run_format_date,
)
from .models import (
    FormatCurrencyInput,
    FormatDateInput,
    FormatOutput,
    FormattingValidationError,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_format_currency",
    "run_format_date",
    # Models
    "FormatCurrencyInput",
    "FormatDateInput",
    "FormatOutput",
    "FormattingConfig",
    "FormattingValidationError",
    # Ports
    "RulesPort",
    # Pure helpers
    "DEFAULT_CURRENCY",
    "DEFAULT_LOCALE",
    "INVALID_DATE",
    "capitalize_first_letter",
    "format_currency",
    "format_date_to_local",
    "format_money",
    "format_number_with_commas",
    "ordinal_suffix",
    "parse_date",
    "render_date",
    "resolve_locale",
    "to_ordinal",
]

"""
Formatting component - Currency and date rendering for dashboard tables.

Renders invoice amounts and dates with locale settings taken from rules.

Invariants:
- I1: Amounts are integer minor units (cents)
- I2: Unparseable dates are reported, never rendered as INVALID_DATE
- I3: Unknown locales are reported as validation errors
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ._impl import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    format_money,
    parse_date,
    render_date,
    resolve_locale,
)
from .models import (
    FormatCurrencyInput,
    FormatDateInput,
    FormatOutput,
    FormattingValidationError,
)
from .ports import RulesPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormattingConfig:
    """Formatting configuration from rules."""

    locale: str = DEFAULT_LOCALE
    currency: str = DEFAULT_CURRENCY


def _build_config(rules: RulesPort | None) -> FormattingConfig:
    """Build formatting config from rules port."""
    if rules is None:
        return FormattingConfig()

    return FormattingConfig(
        locale=rules.get_locale(),
        currency=rules.get_currency(),
    )


def _reject(error: FormattingValidationError) -> FormatOutput:
    logger.warning("Formatting rejected (%s): %s", error.code, error.message)
    return FormatOutput(text=None, errors=[error], success=False)


# --- Component Entry Points ---


def run_format_currency(
    inp: FormatCurrencyInput,
    *,
    rules: RulesPort | None = None,
) -> FormatOutput:
    """
    Format an amount in cents using the configured currency and locale.

    Args:
        inp: Input containing the amount in minor units.
        rules: Optional rules port for configuration.

    Returns:
        FormatOutput with the rendered amount or validation errors.
    """
    config = _build_config(rules)

    # bool is an int subclass but never a valid amount
    if isinstance(inp.amount, bool) or not isinstance(inp.amount, int):
        return _reject(
            FormattingValidationError(
                code="invalid_amount",
                message=f"Amount must be an integer number of cents, got {inp.amount!r}",
                field_name="amount",
            )
        )

    try:
        text = format_money(inp.amount, currency=config.currency, locale=config.locale)
    except ValueError as e:
        return _reject(
            FormattingValidationError(
                code="unknown_locale",
                message=str(e),
                field_name="locale",
            )
        )

    return FormatOutput(text=text)


def run_format_date(
    inp: FormatDateInput,
    *,
    rules: RulesPort | None = None,
) -> FormatOutput:
    """
    Format a date as a short localized date.

    Args:
        inp: Input containing the date value and optional locale override.
        rules: Optional rules port supplying the default locale.

    Returns:
        FormatOutput with the rendered date or validation errors.
    """
    config = _build_config(rules)
    locale = inp.locale or config.locale

    try:
        babel_locale = resolve_locale(locale)
    except ValueError as e:
        return _reject(
            FormattingValidationError(
                code="unknown_locale",
                message=str(e),
                field_name="locale",
            )
        )

    parsed = parse_date(inp.value)
    if parsed is None:
        return _reject(
            FormattingValidationError(
                code="invalid_date",
                message=f"Cannot parse date: {inp.value!r}",
                field_name="value",
            )
        )

    return FormatOutput(text=render_date(parsed, babel_locale))


def run(
    inp: FormatCurrencyInput | FormatDateInput,
    *,
    rules: RulesPort | None = None,
) -> FormatOutput:
    """
    Main entry point for the formatting component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, FormatCurrencyInput):
        return run_format_currency(inp, rules=rules)
    elif isinstance(inp, FormatDateInput):
        return run_format_date(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

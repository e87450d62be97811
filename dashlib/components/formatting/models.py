"""
Formatting component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

# --- Validation Error ---


@dataclass(frozen=True)
class FormattingValidationError:
    """Formatting validation error."""

    code: str
    message: str
    field_name: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class FormatCurrencyInput:
    """Input for formatting an amount in minor units (cents)."""

    amount: int


@dataclass(frozen=True)
class FormatDateInput:
    """Input for formatting a date; locale falls back to rules."""

    value: str | date
    locale: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class FormatOutput:
    """Output for a formatting operation."""

    text: str | None
    errors: list[FormattingValidationError] = field(default_factory=list)
    success: bool = True

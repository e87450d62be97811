"""
Formatting component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for formatting rules configuration."""

    def get_locale(self) -> str:
        """Get the display locale tag (e.g. "en-US")."""
        ...

    def get_currency(self) -> str:
        """Get the ISO 4217 currency code (e.g. "USD")."""
        ...

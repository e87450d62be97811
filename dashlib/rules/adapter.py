"""
Rules adapter - exposes DashRules through the component RulesPorts.
"""

from __future__ import annotations

from dashlib.rules.models import DashRules


class RulesAdapter:
    """Implements the formatting, charts and debounce RulesPort protocols."""

    def __init__(self, rules: DashRules) -> None:
        self._rules = rules

    # formatting
    def get_locale(self) -> str:
        return self._rules.formatting.locale

    def get_currency(self) -> str:
        return self._rules.formatting.currency

    # charts
    def get_y_axis_step(self) -> int:
        return self._rules.charts.y_axis_step

    # debounce
    def get_default_delay_ms(self) -> int:
        return self._rules.debounce.default_delay_ms

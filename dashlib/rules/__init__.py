from dashlib.rules.adapter import RulesAdapter
from dashlib.rules.loader import get_default_rules, load_rules
from dashlib.rules.models import ChartRules, DashRules, DebounceRules, FormattingRules

__all__ = [
    "ChartRules",
    "DashRules",
    "DebounceRules",
    "FormattingRules",
    "RulesAdapter",
    "get_default_rules",
    "load_rules",
]

import random
from pathlib import Path

import pytest

from dashlib.adapters.timer import ManualTimerAdapter
from dashlib.rules import DashRules, RulesAdapter, load_rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> DashRules:
    """Load the REAL rules file from the project root."""
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def rules_port(rules: DashRules) -> RulesAdapter:
    return RulesAdapter(rules)


@pytest.fixture
def manual_timer() -> ManualTimerAdapter:
    """Timer that only fires when advanced."""
    return ManualTimerAdapter()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)

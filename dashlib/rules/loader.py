import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from dashlib.rules.models import DashRules

logger = logging.getLogger(__name__)


def get_default_rules() -> DashRules:
    """Built-in defaults, used when no rules file is configured."""
    return DashRules()


def load_rules(path: Path) -> DashRules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        rules = DashRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.debug("Loaded rules from %s", path)
    return rules

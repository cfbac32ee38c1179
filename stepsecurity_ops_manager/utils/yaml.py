"""Contains utility functions for working with YAML files."""

from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML

from stepsecurity_ops_manager.schemas.policy_driven_prs import PolicyDrivenPRPolicy

yaml = YAML(typ="safe")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Loads a YAML file and returns a dictionary."""
    with open(path, encoding="utf-8") as f:
        return yaml.load(f)  # type: ignore[no-any-return]


def load_policy_driven_pr_policy(path: Path) -> PolicyDrivenPRPolicy:
    """Load a policy-driven PR policy from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or its content is not a valid policy
    """
    if not path.exists():
        raise FileNotFoundError(f"Policy file not found: {path.absolute()}")
    content = load_yaml_file(path)
    if not content:
        raise ValueError(f"Policy file is empty: {path.absolute()}")
    try:
        return PolicyDrivenPRPolicy.model_validate(content)
    except ValidationError as e:
        raise ValueError(f"Error processing policy file '{path.name}': {str(e)}") from e

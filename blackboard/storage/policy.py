"""
Blackboard Protection Policy

Declarative protected-key configuration loaded from YAML or a dict.

    policy_version: pol_2026_10_01
    defaults: [system.id]
    operations:
      add: [config]
      clear: [config, history]

Keys under ``defaults`` are protected for every operation; keys under an
operation name are protected for that operation only.
"""
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

import yaml

from blackboard.config import Settings, settings as default_settings
from blackboard.errors import PolicyError
from blackboard.logging_config import get_logger
from blackboard.storage.operations import (
    AddOperation,
    ClearOperation,
    ExistsOperation,
    RemoveOperation,
    StorageOperation,
)
from blackboard.storage.resolver import ExplicitKeys, KeyResolver, NoProtection

logger = get_logger(__name__)


OPERATION_TYPES: Dict[str, Type[StorageOperation]] = {
    "add": AddOperation,
    "remove": RemoveOperation,
    "clear": ClearOperation,
    "exists": ExistsOperation,
}


class ProtectionPolicy:
    """
    Versioned protected-key policy.

    The document is validated on construction; any structural problem
    raises PolicyError.
    """

    def __init__(self, policy_yaml: Optional[str] = None, policy_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize protection policy.

        Args:
            policy_yaml: YAML string of policy
            policy_dict: Pre-parsed policy dictionary
        """
        if policy_yaml is not None:
            try:
                self.policy = yaml.safe_load(policy_yaml)
            except yaml.YAMLError as e:
                raise PolicyError(f"Policy is not valid YAML: {e}") from e
        elif policy_dict is not None:
            self.policy = deepcopy(policy_dict)
        else:
            self.policy = self._default_policy()

        self._validate_policy()

    @classmethod
    def from_file(cls, path: str) -> "ProtectionPolicy":
        """Load a policy from a YAML file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise PolicyError(f"Cannot read policy file {path}: {e}") from e
        return cls(policy_yaml=text)

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "ProtectionPolicy":
        """Load the policy named by ``policy_file``, or the empty default policy."""
        config = config or default_settings
        if config.policy_file:
            logger.info(f"Loading protection policy from {config.policy_file}")
            return cls.from_file(config.policy_file)
        return cls()

    def _default_policy(self) -> Dict[str, Any]:
        """Default policy: nothing protected."""
        return {
            "policy_version": "pol_default",
            "defaults": [],
            "operations": {},
        }

    def _validate_policy(self):
        """Validate policy structure."""
        if not isinstance(self.policy, dict):
            raise PolicyError("Policy must be a mapping")

        if "policy_version" not in self.policy:
            raise PolicyError("Policy missing required key: policy_version")

        self.policy.setdefault("defaults", [])
        self.policy.setdefault("operations", {})
        self._validate_keys("defaults", self.policy["defaults"])

        operations = self.policy["operations"]
        if not isinstance(operations, dict):
            raise PolicyError("Policy 'operations' must be a mapping")
        for name, keys in operations.items():
            if name not in OPERATION_TYPES:
                raise PolicyError(
                    f"Unknown operation: {name}",
                    details={"allowed": sorted(OPERATION_TYPES)},
                )
            self._validate_keys(f"operations.{name}", keys)

    def _validate_keys(self, location: str, keys: Any):
        if not isinstance(keys, list) or not all(isinstance(key, str) for key in keys):
            raise PolicyError(f"Policy '{location}' must be a list of strings")

    def protected_keys(self, operation: str) -> List[str]:
        """Protected keys for an operation, defaults first."""
        if operation not in OPERATION_TYPES:
            raise PolicyError(f"Unknown operation: {operation}")
        keys = list(self.policy["defaults"])
        keys.extend(self.policy["operations"].get(operation) or [])
        return keys

    def resolver_for(self, operation: str) -> KeyResolver:
        keys = self.protected_keys(operation)
        if not keys:
            return NoProtection()
        return ExplicitKeys(keys)

    def build_operations(self) -> Dict[str, StorageOperation]:
        """One configured operation per name."""
        return {
            name: operation_type(self.resolver_for(name))
            for name, operation_type in OPERATION_TYPES.items()
        }

    def get_policy_version(self) -> str:
        """Get policy version."""
        return self.policy["policy_version"]

"""
Blackboard Storage Package

Per-agent key/value store and its protected-key operations.
"""
from blackboard.storage.core_types import (
    ExecutionResult,
    Key,
    KeyPredicate,
    Value,
    generate_agent_id,
)
from blackboard.storage.store import Storage
from blackboard.storage.resolver import (
    ExplicitKeys,
    KeyResolver,
    NoProtection,
    PredicateResolver,
    build_resolver,
)
from blackboard.storage.operations import (
    AddOperation,
    ClearOperation,
    ExistsOperation,
    RemoveOperation,
    StorageOperation,
    storage_of,
)
from blackboard.storage.policy import ProtectionPolicy

__all__ = [
    "ExecutionResult",
    "Key",
    "KeyPredicate",
    "Value",
    "generate_agent_id",
    "Storage",
    "ExplicitKeys",
    "KeyResolver",
    "NoProtection",
    "PredicateResolver",
    "build_resolver",
    "AddOperation",
    "ClearOperation",
    "ExistsOperation",
    "RemoveOperation",
    "StorageOperation",
    "storage_of",
    "ProtectionPolicy",
]

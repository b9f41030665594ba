"""
Blackboard Storage Operations

Add, Remove, Clear and Exists over an agent's Storage. Every operation is
gated by a KeyResolver, but each one reads the protection differently:

- Add / Remove: protected keys are left untouched
- Clear: protected keys are the ones that survive
- Exists: protected keys are reported as absent

Protection never raises; it only shows up as a missing effect.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from blackboard.config import settings
from blackboard.errors import MalformedArgumentsError
from blackboard.logging_config import get_logger
from blackboard.storage.core_types import ExecutionResult
from blackboard.storage.resolver import KeyResolver, build_resolver
from blackboard.storage.store import Storage

logger = get_logger(__name__)


def storage_of(context: Any) -> Storage:
    """Resolve the Storage from a Storage or any object exposing ``storage``."""
    if isinstance(context, Storage):
        return context
    storage = getattr(context, "storage", None)
    if not isinstance(storage, Storage):
        raise TypeError(f"{type(context).__name__} does not provide a Storage")
    return storage


class StorageOperation(ABC):
    """
    Base class for storage operations.

    Constructed from no arguments (no protection), literal keys, one
    iterable of keys, a predicate callable or a ready KeyResolver.
    """

    name: str = "storage"
    # Minimum number of argument units, checked by the invoker
    minimal_argument_number: int = 1
    # Raw arguments per unit
    argument_arity: int = 1

    def __init__(self, *keys):
        self._resolver = build_resolver(*keys)

    @property
    def resolver(self) -> KeyResolver:
        return self._resolver

    def forbidden_keys(self, *keys) -> List[bool]:
        """Protection flags for the given keys, in input order."""
        return self._resolver.forbidden_keys(*keys)

    def execute(self, context: Any, arguments: Sequence[Any], output: List[Any]) -> ExecutionResult:
        """
        Run the operation against the context's Storage.

        Args:
            context: Storage, or an object with a ``storage`` attribute
            arguments: Ordered input arguments
            output: Caller-owned list that results are appended to

        Returns:
            ExecutionResult.SUCCESS
        """
        self._run(storage_of(context), list(arguments), output)
        return ExecutionResult.SUCCESS

    @abstractmethod
    def _run(self, storage: Storage, arguments: List[Any], output: List[Any]) -> None:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._resolver!r})"


class AddOperation(StorageOperation):
    """Insert or replace (key, value) pairs, skipping protected keys."""

    name = "storage/add"
    argument_arity = 2

    def __init__(self, *keys, strict: Optional[bool] = None):
        super().__init__(*keys)
        self._strict = strict

    @property
    def strict(self) -> bool:
        return settings.strict_pairs if self._strict is None else self._strict

    def _run(self, storage: Storage, arguments: List[Any], output: List[Any]) -> None:
        if len(arguments) % 2:
            if self.strict:
                raise MalformedArgumentsError(
                    "Add expects (key, value) pairs but received an odd number of arguments",
                    details={"received": len(arguments), "dangling": repr(arguments[-1])},
                )
            logger.warning(
                f"Ignoring unpaired trailing argument {arguments[-1]!r}",
                extra={"operation": self.name},
            )
            arguments = arguments[:-1]

        stored = 0
        for key, value in zip(arguments[::2], arguments[1::2]):
            if self._resolver.classify(key):
                logger.debug(f"Skipping protected key {key!r}", extra={"operation": self.name})
                continue
            storage.put(key, value)
            stored += 1

        logger.debug(f"Stored {stored} of {len(arguments) // 2} pair(s)", extra={"operation": self.name})


class RemoveOperation(StorageOperation):
    """Remove keys and emit the removed values, skipping protected keys."""

    name = "storage/remove"

    def _run(self, storage: Storage, arguments: List[Any], output: List[Any]) -> None:
        for key in arguments:
            if self._resolver.classify(key):
                logger.debug(f"Skipping protected key {key!r}", extra={"operation": self.name})
                continue
            present, value = storage.pop(key)
            if present:
                output.append(value)


class ClearOperation(StorageOperation):
    """Remove every key except the protected ones."""

    name = "storage/clear"
    minimal_argument_number = 0

    def _run(self, storage: Storage, arguments: List[Any], output: List[Any]) -> None:
        removed = 0
        for key in storage.keys():
            if self._resolver.classify(key):
                continue
            storage.remove(key)
            removed += 1

        logger.debug(
            f"Cleared {removed} key(s), kept {storage.size()}",
            extra={"operation": self.name},
        )


class ExistsOperation(StorageOperation):
    """Report key presence; protected keys are reported as absent."""

    name = "storage/exists"

    def _run(self, storage: Storage, arguments: List[Any], output: List[Any]) -> None:
        output.extend(
            storage.contains_key(key) and not self._resolver.classify(key)
            for key in arguments
        )

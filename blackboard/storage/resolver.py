"""
Blackboard Key Resolver

Decides, per key, whether an operation must treat the key as protected.
Three strategies are provided:

- ``NoProtection``: nothing is protected
- ``ExplicitKeys``: membership in a fixed set of literal keys
- ``PredicateResolver``: delegates to a caller-supplied callable

``build_resolver`` maps the construction forms accepted by the storage
operations onto one of these.
"""
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import FrozenSet, List

from blackboard.errors import PolicyError
from blackboard.storage.core_types import Key, KeyPredicate


class KeyResolver(ABC):
    """Classification of keys into protected / unprotected."""

    @abstractmethod
    def classify(self, key: Key) -> bool:
        """Return True if the key is protected."""

    def forbidden_keys(self, *keys) -> List[bool]:
        """
        Classify a batch of keys.

        Accepts keys variadically or a single iterable of keys. The result
        has the same length and order as the input.
        """
        return [self.classify(key) for key in _flatten_keys(keys)]


class NoProtection(KeyResolver):
    """Resolver that protects nothing."""

    def classify(self, key: Key) -> bool:
        return False

    def __repr__(self) -> str:
        return "NoProtection()"


class ExplicitKeys(KeyResolver):
    """Resolver protecting a fixed set of literal keys."""

    def __init__(self, keys: Iterable):
        if isinstance(keys, str):
            keys = [keys]
        self._keys: FrozenSet[Key] = frozenset(_require_strings(list(keys)))

    @property
    def keys(self) -> FrozenSet[Key]:
        return self._keys

    def classify(self, key: Key) -> bool:
        return key in self._keys

    def __repr__(self) -> str:
        return f"ExplicitKeys({sorted(self._keys)!r})"


class PredicateResolver(KeyResolver):
    """
    Resolver delegating to a callable.

    The callable is evaluated on every ``classify`` call; results are never
    cached, so a predicate over live state sees its current value.
    """

    def __init__(self, predicate: KeyPredicate):
        if not callable(predicate):
            raise PolicyError(f"Predicate must be callable, got {type(predicate).__name__}")
        self._predicate = predicate

    def classify(self, key: Key) -> bool:
        return bool(self._predicate(key))

    def __repr__(self) -> str:
        return f"PredicateResolver({self._predicate!r})"


def build_resolver(*keys) -> KeyResolver:
    """
    Build a resolver from operation constructor arguments.

    Supported forms:
        build_resolver()                  -> NoProtection
        build_resolver("a", "b")          -> ExplicitKeys({"a", "b"})
        build_resolver(["a", "b"])        -> ExplicitKeys({"a", "b"})
        build_resolver(some_set.__contains__) -> PredicateResolver
        build_resolver(resolver)          -> resolver, unchanged
    """
    if not keys:
        return NoProtection()

    if len(keys) == 1:
        single = keys[0]
        if isinstance(single, KeyResolver):
            return single
        if callable(single):
            return PredicateResolver(single)
        if isinstance(single, Iterable):
            return ExplicitKeys(single)
        raise PolicyError(
            f"Cannot build a resolver from {type(single).__name__}",
            details={"argument": repr(single)},
        )

    return ExplicitKeys(keys)


def _require_strings(keys: List) -> List[Key]:
    invalid = [key for key in keys if not isinstance(key, str)]
    if invalid:
        raise PolicyError(
            "Protected keys must be strings",
            details={"invalid": [repr(key) for key in invalid]},
        )
    return keys


def _flatten_keys(keys: tuple) -> List[Key]:
    if len(keys) == 1 and isinstance(keys[0], Iterable) and not isinstance(keys[0], str):
        return list(keys[0])
    return list(keys)

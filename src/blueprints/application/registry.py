"""Immutable keyed registry with an explicit unknown-key policy.

A registry maps keys to zero-argument constructors. It is built once and
passed to whoever needs it, so tests can substitute their own tables. The
lookup policy is fixed per instance:

- strict: an unknown key raises UnknownKeyError (or a subclass).
- lenient: an unknown key yields a freshly built fallback object.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, TypeVar, cast

from blueprints.domain.exceptions import UnknownKeyError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Constructor = Callable[[], T]


class LookupPolicy(str, Enum):
    """What a registry does with a key it does not know."""

    STRICT = "strict"
    LENIENT = "lenient"


def normalize_key(key: Any) -> str:
    """Reduce a lookup key to the string the table is keyed by.

    Enum members use their value; anything else is converted with str().
    """
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


class KeyedRegistry(Generic[T]):
    """Registry mapping keys to constructors of one kind of object.

    Example:
        ```python
        registry = KeyedRegistry(
            "product",
            {"p1": Product1, "p2": Product2},
            policy=LookupPolicy.LENIENT,
            fallback=RefusalProduct,
        )
        registry.create("p1").operation1()
        registry.create("").operation1()  # refusal text, no exception
        ```
    """

    def __init__(
        self,
        name: str,
        entries: Mapping[Any, Constructor[T]],
        policy: LookupPolicy = LookupPolicy.STRICT,
        fallback: Constructor[T] | None = None,
        error_cls: type[UnknownKeyError] = UnknownKeyError,
    ) -> None:
        """Initialize the registry.

        Args:
            name: Human-readable name used in log messages.
            entries: Key to constructor mapping. Copied; later changes to
                the passed mapping have no effect.
            policy: Unknown-key policy for this instance.
            fallback: Constructor used for unknown keys under the lenient
                policy.
            error_cls: Exception raised for unknown keys under the strict
                policy.

        Raises:
            ValueError: If the lenient policy is requested without a fallback.
        """
        policy = LookupPolicy(policy)
        if policy is LookupPolicy.LENIENT and fallback is None:
            raise ValueError(f"Lenient registry '{name}' requires a fallback")
        self._name = name
        self._entries: Mapping[str, Constructor[T]] = MappingProxyType(
            {normalize_key(k): v for k, v in entries.items()}
        )
        self._policy = policy
        self._fallback = fallback
        self._error_cls = error_cls
        logger.debug(
            f"Built {policy.value} registry '{name}' with keys {self.available()}"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def policy(self) -> LookupPolicy:
        return self._policy

    @property
    def fallback(self) -> Constructor[T] | None:
        return self._fallback

    @property
    def entries(self) -> Mapping[str, Constructor[T]]:
        """Read-only view of the key to constructor table."""
        return self._entries

    def create(self, key: Any) -> T:
        """Build the object registered under ``key``.

        Args:
            key: String or enum member identifying the implementation.

        Returns:
            A new instance from the matching constructor, or from the
            fallback when the key is unknown and the policy is lenient.

        Raises:
            UnknownKeyError: If the key is unknown and the policy is strict.
        """
        normalized = normalize_key(key)
        constructor = self._entries.get(normalized)
        if constructor is not None:
            logger.debug(f"Registry '{self._name}' resolved {normalized!r}")
            return constructor()

        if self._policy is LookupPolicy.LENIENT:
            fallback = cast(Constructor[T], self._fallback)
            logger.info(
                f"Registry '{self._name}' has no entry for {normalized!r}; "
                f"using fallback {getattr(fallback, '__name__', fallback)}"
            )
            return fallback()

        raise self._error_cls(normalized, self.available())

    def available(self) -> list[str]:
        """Sorted list of registered keys."""
        return sorted(self._entries.keys())

    def is_registered(self, key: Any) -> bool:
        return normalize_key(key) in self._entries

    def with_entry(self, key: Any, constructor: Constructor[T]) -> KeyedRegistry[T]:
        """Return a copy of this registry with one entry added or replaced."""
        normalized = normalize_key(key)
        if normalized in self._entries:
            logger.warning(
                f"Overwriting entry {normalized!r} in registry '{self._name}'"
            )
        entries = dict(self._entries)
        entries[normalized] = constructor
        return KeyedRegistry(
            self._name, entries, self._policy, self._fallback, self._error_cls
        )

    def with_policy(
        self, policy: LookupPolicy, fallback: Constructor[T] | None = None
    ) -> KeyedRegistry[T]:
        """Return a copy of this registry using another lookup policy.

        Args:
            policy: Policy for the copy.
            fallback: Fallback for the copy; defaults to this registry's.
        """
        return KeyedRegistry(
            self._name,
            self._entries,
            policy,
            fallback if fallback is not None else self._fallback,
            self._error_cls,
        )

    def __contains__(self, key: object) -> bool:
        return self.is_registered(key)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"KeyedRegistry(name={self._name!r}, policy={self._policy.value!r}, "
            f"keys={self.available()!r})"
        )


__all__ = [
    "Constructor",
    "KeyedRegistry",
    "LookupPolicy",
    "normalize_key",
]

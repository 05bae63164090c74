"""
Ordered fallback chains for reference-table lookups.

Estimators never fail on a missing table entry. Instead each lookup is
expressed as a chain of named resolvers tried in order; the first one that
returns a value wins and its name is reported alongside the value.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Resolver = Callable[..., Optional[T]]


class Resolution(Generic[T]):
    """Value produced by a fallback chain and the resolver that produced it."""

    __slots__ = ("value", "source")

    def __init__(self, value: T, source: str):
        self.value = value
        self.source = source

    def __repr__(self) -> str:
        return f"Resolution(source={self.source!r}, value={self.value!r})"


class FallbackChain(Generic[T]):
    """
    Explicit ordered list of resolvers.

    Each resolver receives the same arguments and returns either a value or
    None. The last resolver of a chain is expected to be total.
    """

    def __init__(self, name: str, resolvers: Sequence[Tuple[str, Resolver]]):
        if not resolvers:
            raise ValueError(f"Fallback chain '{name}' needs at least one resolver")
        self.name = name
        self._resolvers: List[Tuple[str, Resolver]] = list(resolvers)

    @property
    def resolver_names(self) -> List[str]:
        return [name for name, _ in self._resolvers]

    def resolve(self, *args: Any, **kwargs: Any) -> Resolution[T]:
        """
        Run the resolvers in order.

        Returns:
            Resolution holding the first non-None value

        Raises:
            LookupError: If every resolver returned None
        """
        for resolver_name, resolver in self._resolvers:
            value = resolver(*args, **kwargs)
            if value is not None:
                logger.debug(f"{self.name}: resolved by '{resolver_name}'")
                return Resolution(value, resolver_name)
            logger.debug(f"{self.name}: '{resolver_name}' had no entry, falling back")

        raise LookupError(f"Fallback chain '{self.name}' exhausted without a value")

"""Keyspaces the guardrail must leave alone.

The store's own keyspaces carry replication settings managed by the store
itself, so they are always exempt.  Operators can add further names or
regular expressions through ``KeyspaceExemptions``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = [
    "LOCAL_SYSTEM_KEYSPACES",
    "REPLICATED_SYSTEM_KEYSPACES",
    "VIRTUAL_SYSTEM_KEYSPACES",
    "KeyspaceExemptions",
    "is_system_keyspace",
]


LOCAL_SYSTEM_KEYSPACES: frozenset[str] = frozenset({"system", "system_schema"})
REPLICATED_SYSTEM_KEYSPACES: frozenset[str] = frozenset(
    {"system_auth", "system_distributed", "system_traces"}
)
VIRTUAL_SYSTEM_KEYSPACES: frozenset[str] = frozenset(
    {"system_views", "system_virtual_schema"}
)

_SYSTEM_KEYSPACES = (
    LOCAL_SYSTEM_KEYSPACES | REPLICATED_SYSTEM_KEYSPACES | VIRTUAL_SYSTEM_KEYSPACES
)


def is_system_keyspace(keyspace_name: str) -> bool:
    """Whether *keyspace_name* is one of the store's internal keyspaces.

    Examples
    --------
    >>> is_system_keyspace("system_auth")
    True
    >>> is_system_keyspace("orders")
    False
    """
    return keyspace_name.lower() in _SYSTEM_KEYSPACES


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    if re.fullmatch(r"\w+", pattern):
        return re.compile(re.escape(pattern), re.IGNORECASE)
    return re.compile(pattern, re.IGNORECASE)


class KeyspaceExemptions:
    """Exemption classifier usable as the tuner's ``is_exempt`` callable.

    System keyspaces are always exempt.  Each extra pattern is matched
    against the whole keyspace name; a plain identifier is an exact,
    case-insensitive match.

    Parameters
    ----------
    patterns : Iterable[str | re.Pattern[str]]
        Additional keyspace names or regular expressions.

    Examples
    --------
    >>> exempt = KeyspaceExemptions(["audit_.*", "scratch"])
    >>> exempt("audit_2024"), exempt("scratch"), exempt("scratchpad")
    (True, True, False)
    >>> exempt("system")
    True
    """

    def __init__(self, patterns: Iterable[str | re.Pattern[str]] = ()) -> None:
        self._patterns: tuple[re.Pattern[str], ...] = tuple(
            _compile(p) for p in patterns
        )

    @property
    def patterns(self) -> tuple[re.Pattern[str], ...]:
        return self._patterns

    def __call__(self, keyspace_name: str) -> bool:
        if is_system_keyspace(keyspace_name):
            return True
        return any(p.fullmatch(keyspace_name) for p in self._patterns)

    def __repr__(self) -> str:
        return f"KeyspaceExemptions({[p.pattern for p in self._patterns]!r})"

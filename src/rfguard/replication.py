"""Replication parameter vocabulary and the ``ReplicaCount`` value type.

Holds the reserved keys of a keyspace replication map, the strategy
identifiers the guardrail knows about, strict integer parsing and the
tagged parse result used for per-datacenter replica counts (``"3"`` or
``"3/1"``).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import TypeAlias

__all__ = [
    "CLASS",
    "InvalidReplicaCount",
    "LOCAL_STRATEGY",
    "MINIMUM_FULL_REPLICAS",
    "NETWORK_TOPOLOGY_STRATEGY",
    "REPLICATION_FACTOR",
    "ReplicaCount",
    "ReplicaCountFormat",
    "ReplicationParams",
    "SIMPLE_STRATEGY",
    "parse_int",
    "strategy_name",
]


ReplicationParams: TypeAlias = Mapping[str, str]

CLASS = "class"
REPLICATION_FACTOR = "replication_factor"

SIMPLE_STRATEGY = "SimpleStrategy"
NETWORK_TOPOLOGY_STRATEGY = "NetworkTopologyStrategy"
LOCAL_STRATEGY = "LocalStrategy"

MINIMUM_FULL_REPLICAS = 2

_STRATEGY_PACKAGE = "org.apache.cassandra.locator."
_INTEGER = re.compile(r"([+-]?)0*([0-9]{1,10})")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class InvalidReplicaCount(ValueError):
    """Raised when a datacenter replica count cannot be parsed."""


def parse_int(raw: object) -> int | None:
    """Parse a strict decimal integer, returning ``None`` on anything else.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace and ``_`` separators are rejected, and so is anything outside
    the signed 32-bit range.

    Examples
    --------
    >>> parse_int("-1")
    -1
    >>> parse_int(" 3") is None
    True
    >>> parse_int("2147483648") is None
    True
    """
    if not isinstance(raw, str):
        return None
    match = _INTEGER.fullmatch(raw)
    if match is None:
        return None
    value = int(match[1] + match[2])
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def strategy_name(raw: object) -> str | None:
    """Short strategy name for a ``class`` value.

    Accepts both ``"SimpleStrategy"`` and the fully-qualified
    ``"org.apache.cassandra.locator.SimpleStrategy"``.

    Examples
    --------
    >>> strategy_name("org.apache.cassandra.locator.NetworkTopologyStrategy")
    'NetworkTopologyStrategy'
    >>> strategy_name(None) is None
    True
    """
    if not isinstance(raw, str):
        return None
    return raw.removeprefix(_STRATEGY_PACKAGE)


class ReplicaCountFormat(Enum):
    """Textual form a replica count was written in."""

    bare = auto()
    full_transient = auto()


@dataclass(frozen=True)
class ReplicaCount:
    """Parsed replica count for a single datacenter.

    Only ``full_replicas`` counts toward the safety minimum; transient
    replicas cannot serve full reads.

    Parameters
    ----------
    full_replicas : int
        Number of full replicas.
    transient_replicas : int
        Number of transient replicas, strictly less than ``full_replicas``
        when non-zero.
    format : ReplicaCountFormat
        Form used by ``str()`` when the count is written back.

    Examples
    --------
    >>> rc = ReplicaCount.parse("3/1")
    >>> rc.full_replicas, rc.transient_replicas
    (3, 1)
    >>> str(rc.with_full_replicas(4))
    '4/1'
    >>> str(ReplicaCount.parse("0").with_full_replicas(2))
    '2'
    """

    full_replicas: int
    transient_replicas: int = 0
    format: ReplicaCountFormat = ReplicaCountFormat.bare

    def __post_init__(self) -> None:
        if self.full_replicas < 0:
            msg = f"Replication factor must be non-negative, found {self.full_replicas}"
            raise InvalidReplicaCount(msg)
        if self.transient_replicas < 0:
            msg = (
                "Amount of transient nodes needs to be non-negative, "
                f"found {self.transient_replicas}"
            )
            raise InvalidReplicaCount(msg)
        if 0 < self.transient_replicas >= self.full_replicas:
            msg = (
                "Transient replicas must be zero, or less than full replicas, "
                f"found {self.full_replicas}/{self.transient_replicas}"
            )
            raise InvalidReplicaCount(msg)

    @classmethod
    def parse(cls, raw: object) -> ReplicaCount:
        """Parse ``"<full>"`` or ``"<full>/<transient>"``.

        Raises
        ------
        InvalidReplicaCount
            If *raw* is not one of the two accepted forms or violates the
            replica count invariants.
        """
        if not isinstance(raw, str):
            msg = f"Replication factor must be a string, found {type(raw).__name__}"
            raise InvalidReplicaCount(msg)

        if "/" not in raw:
            full = parse_int(raw)
            if full is None:
                msg = f"Replication factor format is <replicas> or <replicas>/<transient>, found {raw!r}"
                raise InvalidReplicaCount(msg)
            return cls(full_replicas=full)

        parts = raw.split("/")
        if len(parts) != 2:
            msg = f"Replication factor format is <replicas> or <replicas>/<transient>, found {raw!r}"
            raise InvalidReplicaCount(msg)
        full, transient = parse_int(parts[0]), parse_int(parts[1])
        if full is None or transient is None:
            msg = f"Replication factor format is <replicas> or <replicas>/<transient>, found {raw!r}"
            raise InvalidReplicaCount(msg)
        return cls(
            full_replicas=full,
            transient_replicas=transient,
            format=ReplicaCountFormat.full_transient,
        )

    def with_full_replicas(self, full_replicas: int) -> ReplicaCount:
        """Copy with a new full count, keeping transient count and format."""
        return replace(self, full_replicas=full_replicas)

    def __str__(self) -> str:
        match self.format:
            case ReplicaCountFormat.bare:
                return str(self.full_replicas)
            case ReplicaCountFormat.full_transient:
                return f"{self.full_replicas}/{self.transient_replicas}"

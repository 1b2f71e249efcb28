"""Per-strategy replication factor tune-up.

``tune_simple`` enforces a single global replication factor and
``tune_network_topology`` enforces an aggregate minimum of full replicas
summed across datacenters.  Both return a fresh parameter map; the input
mapping is never modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rfguard.replication import (
    CLASS,
    MINIMUM_FULL_REPLICAS,
    REPLICATION_FACTOR,
    InvalidReplicaCount,
    ReplicaCount,
    ReplicationParams,
    parse_int,
)

__all__ = ["TuneResult", "tune_network_topology", "tune_simple"]


@dataclass(frozen=True)
class TuneResult:
    """Outcome of a tune-up pass.

    Parameters
    ----------
    params : dict[str, str]
        Replication parameters to persist.  Always a copy of the input.
    warnings : frozenset[str]
        One message per adjustment made, for the operational log and the
        client that issued the schema change.

    Examples
    --------
    >>> result = tune_simple({"class": "SimpleStrategy", "replication_factor": "1"}, "ks")
    >>> result.params["replication_factor"]
    '2'
    >>> result.tuned_up
    True
    """

    params: dict[str, str]
    warnings: frozenset[str] = field(default_factory=frozenset)

    @property
    def tuned_up(self) -> bool:
        return bool(self.warnings)


def tune_simple(
    params: ReplicationParams,
    keyspace_name: str,
    *,
    logger: logging.Logger | None = None,
) -> TuneResult:
    """Raise a ``SimpleStrategy`` replication factor below 2 to exactly 2.

    A missing or non-integer ``replication_factor`` is left alone.

    Parameters
    ----------
    params : ReplicationParams
        Replication map of the keyspace.
    keyspace_name : str
        Keyspace being created or altered, used in the warning.
    logger : logging.Logger | None
        Defaults to the ``rfguard.strategies`` logger.

    Returns
    -------
    TuneResult
    """
    log = logger or logging.getLogger("rfguard.strategies")
    tuned = dict(params)

    current = parse_int(tuned.get(REPLICATION_FACTOR))
    if current is None or current >= MINIMUM_FULL_REPLICAS:
        return TuneResult(params=tuned)

    msg = (
        f"Trying to use an insufficient replication factor for keyspace {keyspace_name}, "
        f"will be automatically tuned up to {MINIMUM_FULL_REPLICAS}"
    )
    log.warning("%s", msg)
    tuned[REPLICATION_FACTOR] = str(MINIMUM_FULL_REPLICAS)
    return TuneResult(params=tuned, warnings=frozenset({msg}))


def tune_network_topology(
    params: ReplicationParams,
    keyspace_name: str,
    *,
    logger: logging.Logger | None = None,
) -> TuneResult:
    """Raise the total of full replicas across datacenters to at least 2.

    Every key other than ``class`` is a datacenter.  Only the sum of full
    replicas matters, so ``{"dc1": "1", "dc2": "1"}`` is already safe.
    When the sum falls short, the lexicographically first datacenter with a
    parseable count absorbs the whole difference; no other entry changes.
    Unparseable counts add nothing to the sum, are logged and kept as-is.

    Parameters
    ----------
    params : ReplicationParams
        Replication map of the keyspace.
    keyspace_name : str
        Keyspace being created or altered, used in the warning.
    logger : logging.Logger | None
        Defaults to the ``rfguard.strategies`` logger.

    Returns
    -------
    TuneResult

    Examples
    --------
    >>> result = tune_network_topology({"first": "1/0", "second": "0/0"}, "ks")
    >>> result.params
    {'first': '2/0', 'second': '0/0'}
    """
    log = logger or logging.getLogger("rfguard.strategies")
    tuned = dict(params)

    counts: dict[str, ReplicaCount] = {}
    for datacenter, raw in tuned.items():
        if datacenter == CLASS:
            continue
        try:
            counts[datacenter] = ReplicaCount.parse(raw)
        except InvalidReplicaCount:
            log.warning(
                "Found unparseable replication factor %s for DC %s in keyspace %s",
                raw,
                datacenter,
                keyspace_name,
            )

    total_full_replicas = sum(rc.full_replicas for rc in counts.values())
    if total_full_replicas >= MINIMUM_FULL_REPLICAS or not counts:
        return TuneResult(params=tuned)

    # lexicographically first parseable DC, independent of map order
    datacenter = min(counts)
    current = counts[datacenter]
    target = current.full_replicas + (MINIMUM_FULL_REPLICAS - total_full_replicas)
    tuned[datacenter] = str(current.with_full_replicas(target))

    msg = (
        f"Trying to use an insufficient replication factor for keyspace {keyspace_name}, "
        f"DC '{datacenter}' will be automatically tuned up to {target}"
    )
    log.warning("%s", msg)
    return TuneResult(params=tuned, warnings=frozenset({msg}))

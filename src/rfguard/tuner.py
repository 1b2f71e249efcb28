"""Entry point of the replication factor guardrail.

``tune_up`` decides whether a keyspace's replication parameters are
subject to the guardrail at all and dispatches to the handler for its
strategy.  ``ReplicationTuner`` binds the enable switch and the exemption
classifier once so schema code only passes the keyspace and its map.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rfguard.keyspaces import is_system_keyspace
from rfguard.replication import (
    CLASS,
    LOCAL_STRATEGY,
    NETWORK_TOPOLOGY_STRATEGY,
    SIMPLE_STRATEGY,
    ReplicationParams,
    strategy_name,
)
from rfguard.strategies import TuneResult, tune_network_topology, tune_simple

__all__ = ["ReplicationTuner", "UptuningSwitch", "tune_up"]


class UptuningSwitch:
    """Runtime toggle for the guardrail.

    Callable, so it can be handed to ``tune_up`` as ``is_enabled``.  The
    flag is a single attribute: reads and writes are atomic, and a toggle
    from another thread is seen by the next tune-up.

    Examples
    --------
    >>> switch = UptuningSwitch()
    >>> switch()
    True
    >>> switch.disable()
    >>> switch.enabled
    False
    """

    def __init__(self, enabled: bool = True) -> None:
        self._enabled = bool(enabled)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set(self, enabled: bool) -> None:
        self._enabled = bool(enabled)

    def enable(self) -> None:
        self.set(True)

    def disable(self) -> None:
        self.set(False)

    def __call__(self) -> bool:
        return self._enabled

    def __repr__(self) -> str:
        return f"UptuningSwitch(enabled={self._enabled})"


def tune_up(
    keyspace_name: str,
    params: ReplicationParams,
    is_enabled: Callable[[], bool],
    is_exempt: Callable[[str], bool] = is_system_keyspace,
    *,
    logger: logging.Logger | None = None,
) -> TuneResult:
    """Apply the replication factor guardrail to one keyspace.

    Parameters
    ----------
    keyspace_name : str
        Keyspace being created or altered.
    params : ReplicationParams
        Its replication map, including the ``class`` key.  Never modified.
    is_enabled : Callable[[], bool]
        Read once per call; when it returns ``False`` nothing is tuned.
    is_exempt : Callable[[str], bool]
        Keyspaces it accepts are returned untouched without parsing.
    logger : logging.Logger | None
        Used by the tuner and the strategy handlers instead of their
        module loggers.

    Returns
    -------
    TuneResult
        A copy of *params*, adjusted when its strategy is ``SimpleStrategy``
        or ``NetworkTopologyStrategy`` and the replication factor is below
        the minimum, plus the warnings describing each adjustment.

    Examples
    --------
    >>> result = tune_up(
    ...     "orders",
    ...     {"class": "SimpleStrategy", "replication_factor": "1"},
    ...     is_enabled=lambda: True,
    ... )
    >>> result.params["replication_factor"]
    '2'
    >>> tune_up("system", {"class": "SimpleStrategy"}, lambda: True).tuned_up
    False
    """
    log = logger or logging.getLogger("rfguard.tuner")

    if not is_enabled():
        log.debug("Replication tune-up disabled, leaving keyspace %s as-is", keyspace_name)
        return TuneResult(params=dict(params))

    if is_exempt(keyspace_name):
        log.debug("Keyspace %s is exempt from replication tune-up", keyspace_name)
        return TuneResult(params=dict(params))

    strategy = strategy_name(params.get(CLASS))
    if strategy == SIMPLE_STRATEGY:
        return tune_simple(params, keyspace_name, logger=logger)
    if strategy == NETWORK_TOPOLOGY_STRATEGY:
        return tune_network_topology(params, keyspace_name, logger=logger)

    if strategy == LOCAL_STRATEGY:
        log.debug("Keyspace %s uses %s, no replication tune-up", keyspace_name, LOCAL_STRATEGY)
    else:
        log.debug("No replication tune-up for strategy %s of keyspace %s", strategy, keyspace_name)
    return TuneResult(params=dict(params))


class ReplicationTuner:
    """``tune_up`` with its collaborators bound.

    Parameters
    ----------
    enabled : Callable[[], bool] | None
        Enable flag, read on every ``apply``.  Defaults to a fresh
        ``UptuningSwitch`` that starts enabled.
    is_exempt : Callable[[str], bool]
        Exemption classifier, ``is_system_keyspace`` by default.
    logger : logging.Logger | None
        Logger override passed through to ``tune_up``.

    Examples
    --------
    >>> tuner = ReplicationTuner()
    >>> tuner.apply("orders", {"class": "NetworkTopologyStrategy", "dc1": "1"}).params
    {'class': 'NetworkTopologyStrategy', 'dc1': '2'}
    >>> tuner.enabled.disable()
    >>> tuner.apply("orders", {"class": "NetworkTopologyStrategy", "dc1": "1"}).params
    {'class': 'NetworkTopologyStrategy', 'dc1': '1'}
    """

    def __init__(
        self,
        *,
        enabled: Callable[[], bool] | None = None,
        is_exempt: Callable[[str], bool] = is_system_keyspace,
        logger: logging.Logger | None = None,
    ) -> None:
        self._enabled = enabled if enabled is not None else UptuningSwitch()
        self._is_exempt = is_exempt
        self._logger = logger

    @property
    def enabled(self) -> Callable[[], bool]:
        return self._enabled

    @property
    def is_exempt(self) -> Callable[[str], bool]:
        return self._is_exempt

    def apply(self, keyspace_name: str, params: ReplicationParams) -> TuneResult:
        return tune_up(
            keyspace_name,
            params,
            self._enabled,
            self._is_exempt,
            logger=self._logger,
        )

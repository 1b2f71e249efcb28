"""Shared fixtures and replication maps for rfguard tests."""

from __future__ import annotations

import pytest

from rfguard import ReplicationTuner, UptuningSwitch

SIMPLE = "org.apache.cassandra.locator.SimpleStrategy"
NETWORK_TOPOLOGY = "org.apache.cassandra.locator.NetworkTopologyStrategy"
LOCAL = "org.apache.cassandra.locator.LocalStrategy"


def simple(replication_factor: str) -> dict[str, str]:
    """Replication map for a ``SimpleStrategy`` keyspace."""
    return {"class": SIMPLE, "replication_factor": replication_factor}


def network_topology(**datacenters: str) -> dict[str, str]:
    """Replication map for a ``NetworkTopologyStrategy`` keyspace."""
    return {"class": NETWORK_TOPOLOGY, **datacenters}


# Fixtures


@pytest.fixture
def switch() -> UptuningSwitch:
    return UptuningSwitch()


@pytest.fixture
def tuner(switch: UptuningSwitch) -> ReplicationTuner:
    return ReplicationTuner(enabled=switch)

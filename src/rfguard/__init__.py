from rfguard.config import CONFIG_FILE_NAME, GuardrailConfig, discover_config, load_config
from rfguard.keyspaces import (
    LOCAL_SYSTEM_KEYSPACES,
    REPLICATED_SYSTEM_KEYSPACES,
    VIRTUAL_SYSTEM_KEYSPACES,
    KeyspaceExemptions,
    is_system_keyspace,
)
from rfguard.replication import (
    CLASS,
    LOCAL_STRATEGY,
    MINIMUM_FULL_REPLICAS,
    NETWORK_TOPOLOGY_STRATEGY,
    REPLICATION_FACTOR,
    SIMPLE_STRATEGY,
    InvalidReplicaCount,
    ReplicaCount,
    ReplicaCountFormat,
    ReplicationParams,
)
from rfguard.strategies import TuneResult, tune_network_topology, tune_simple
from rfguard.tuner import ReplicationTuner, UptuningSwitch, tune_up

__all__ = [
    # Tuner
    "ReplicationTuner",
    "TuneResult",
    "UptuningSwitch",
    "tune_up",
    # Strategy handlers
    "tune_network_topology",
    "tune_simple",
    # Replication parameters
    "CLASS",
    "LOCAL_STRATEGY",
    "MINIMUM_FULL_REPLICAS",
    "NETWORK_TOPOLOGY_STRATEGY",
    "REPLICATION_FACTOR",
    "SIMPLE_STRATEGY",
    "InvalidReplicaCount",
    "ReplicaCount",
    "ReplicaCountFormat",
    "ReplicationParams",
    # Keyspaces
    "LOCAL_SYSTEM_KEYSPACES",
    "REPLICATED_SYSTEM_KEYSPACES",
    "VIRTUAL_SYSTEM_KEYSPACES",
    "KeyspaceExemptions",
    "is_system_keyspace",
    # Config
    "CONFIG_FILE_NAME",
    "GuardrailConfig",
    "discover_config",
    "load_config",
]

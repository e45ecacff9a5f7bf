"""
Models package for autoscaling data structures
"""

from .capacity import (
    ResourceAmounts,
    Capacity,
    UnknownCapacity,
    CurrentCapacity,
    ZERO_RESOURCES,
    ZERO_CAPACITY,
    UNKNOWN_CAPACITY,
)
from .cluster import (
    TopologyNode,
    ClusterTopology,
    DiskUsage,
    ClusterTelemetry,
)
from .deciders import (
    FixedDeciderConfiguration,
    ReactiveStorageDeciderConfiguration,
    DeciderConfiguration,
)
from .policy import AutoscalingPolicy, policies_by_name
from .decision import DecisionReason, Decision, AutoscalingDecisions

__all__ = [
    "ResourceAmounts",
    "Capacity",
    "UnknownCapacity",
    "CurrentCapacity",
    "ZERO_RESOURCES",
    "ZERO_CAPACITY",
    "UNKNOWN_CAPACITY",
    "TopologyNode",
    "ClusterTopology",
    "DiskUsage",
    "ClusterTelemetry",
    "FixedDeciderConfiguration",
    "ReactiveStorageDeciderConfiguration",
    "DeciderConfiguration",
    "AutoscalingPolicy",
    "policies_by_name",
    "DecisionReason",
    "Decision",
    "AutoscalingDecisions",
]

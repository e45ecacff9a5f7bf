#!/usr/bin/env python3
"""
Read-only context handed to deciders
"""

from dataclasses import dataclass
from typing import List

from ..models import ClusterTelemetry, ClusterTopology, CurrentCapacity, TopologyNode
from .capacity import CapacityEstimate, estimate_current_capacity, tier_nodes


@dataclass(frozen=True)
class DeciderContext:
    """Snapshots and estimated current capacity of the tier under evaluation"""
    tier: str
    topology: ClusterTopology
    telemetry: ClusterTelemetry
    estimate: CapacityEstimate

    @classmethod
    def build(cls, tier: str, topology: ClusterTopology, telemetry: ClusterTelemetry) -> "DeciderContext":
        """Create a context, estimating the current capacity of the tier"""
        return cls(
            tier=tier,
            topology=topology,
            telemetry=telemetry,
            estimate=estimate_current_capacity(tier, topology, telemetry)
        )

    @property
    def current_capacity(self) -> CurrentCapacity:
        return self.estimate.current_capacity

    @property
    def current_capacity_accurate(self) -> bool:
        return self.estimate.accurate

    def tier_nodes(self) -> List[TopologyNode]:
        return tier_nodes(self.tier, self.topology)

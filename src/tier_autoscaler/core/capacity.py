#!/usr/bin/env python3
"""
Current capacity estimation for a tier
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..models import (
    Capacity,
    ClusterTelemetry,
    ClusterTopology,
    CurrentCapacity,
    ResourceAmounts,
    TopologyNode,
    UNKNOWN_CAPACITY,
    ZERO_CAPACITY,
)
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CapacityEstimate:
    """Estimated capacity of a tier and whether telemetry was complete for it"""
    capacity: Capacity
    accurate: bool

    @property
    def current_capacity(self) -> CurrentCapacity:
        """The capacity if it can be trusted, UNKNOWN_CAPACITY otherwise"""
        if self.accurate:
            return self.capacity
        return UNKNOWN_CAPACITY


def is_tier_node(node: TopologyNode, tier: str) -> bool:
    """
    Informal tier membership test

    A node belongs to the tier if one of its roles is named after the tier,
    or if its `data` attribute equals the tier name.
    """
    return tier in node.roles or node.attributes.get("data") == tier


def tier_nodes(tier: str, topology: ClusterTopology) -> List[TopologyNode]:
    """Nodes of the topology that belong to the tier, in topology order"""
    return [node for node in topology.nodes if is_tier_node(node, tier)]


def _known_or_missing(total: Optional[int]) -> int:
    return total if total is not None else -1


def node_storage(node: TopologyNode, telemetry: ClusterTelemetry) -> Tuple[int, bool]:
    """
    Storage estimate of a single node

    Args:
        node: Node to estimate
        telemetry: Disk telemetry snapshot

    Returns:
        Tuple of the storage estimate in bytes and whether both telemetry
        views reported the node
    """
    least = telemetry.least_available_total(node.node_id)
    most = telemetry.most_available_total(node.node_id)

    storage = max(_known_or_missing(least), _known_or_missing(most))
    accurate = least is not None and most is not None
    return (storage if storage >= 0 else 0), accurate


def estimate_current_capacity(
    tier: str,
    topology: ClusterTopology,
    telemetry: ClusterTelemetry
) -> CapacityEstimate:
    """
    Estimate the current capacity of a tier

    Tier storage is the sum of the node estimates and node storage their
    maximum. Memory is not collected and stays 0. The estimate is accurate
    only if every node of the tier is present in both telemetry views; an
    empty tier is accurate with zero capacity.

    Args:
        tier: Tier name
        topology: Cluster topology snapshot
        telemetry: Disk telemetry snapshot

    Returns:
        CapacityEstimate for the tier
    """
    capacity = None
    accurate = True
    missing = []

    for node in tier_nodes(tier, topology):
        storage, node_accurate = node_storage(node, telemetry)
        if not node_accurate:
            accurate = False
            missing.append(node.node_id)

        resources = ResourceAmounts(storage=storage, memory=0)
        node_capacity = Capacity(tier=resources, node=resources)
        capacity = node_capacity if capacity is None else Capacity.merge(capacity, node_capacity)

    if capacity is None:
        logger.debug(f"Tier '{tier}' has no nodes, current capacity is zero")
        return CapacityEstimate(capacity=ZERO_CAPACITY, accurate=True)

    if missing:
        logger.debug(f"Tier '{tier}' current capacity unknown, incomplete telemetry for nodes: {missing}")

    return CapacityEstimate(capacity=capacity, accurate=accurate)

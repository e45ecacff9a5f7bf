#!/usr/bin/env python3
"""
Pydantic models for cluster topology and disk telemetry snapshots
"""

from typing import Dict, FrozenSet, Optional, Tuple
from pydantic import BaseModel, Field, field_validator


class TopologyNode(BaseModel):
    """A node as seen in the cluster topology"""
    node_id: str = Field(..., min_length=1, description="Stable node identity")
    name: str = Field("", description="Human readable node name")
    roles: FrozenSet[str] = Field(default_factory=frozenset, description="Declared role names")
    attributes: Dict[str, str] = Field(default_factory=dict, description="Node attributes")

    class Config:
        frozen = True
        extra = "forbid"


class ClusterTopology(BaseModel):
    """Point-in-time view of the nodes in the cluster"""
    nodes: Tuple[TopologyNode, ...] = Field(default_factory=tuple, description="Nodes in the cluster")

    class Config:
        frozen = True
        extra = "forbid"

    @field_validator("nodes")
    @classmethod
    def _unique_node_ids(cls, nodes: Tuple[TopologyNode, ...]) -> Tuple[TopologyNode, ...]:
        seen = set()
        for node in nodes:
            if node.node_id in seen:
                raise ValueError(f"duplicate node id '{node.node_id}' in topology")
            seen.add(node.node_id)
        return nodes


class DiskUsage(BaseModel):
    """Disk usage reported for one node"""
    node_id: str = Field(..., description="Node identity")
    node_name: str = Field("", description="Node name")
    path: str = Field("", description="Data path the usage was read from")
    total_bytes: int = Field(..., ge=0, description="Total storage in bytes")
    free_bytes: int = Field(0, ge=0, description="Free storage in bytes")

    class Config:
        frozen = True
        extra = "forbid"

    @property
    def used_bytes(self) -> int:
        return max(self.total_bytes - self.free_bytes, 0)

    @property
    def free_disk_percentage(self) -> float:
        if self.total_bytes == 0:
            return 100.0
        return 100.0 * self.free_bytes / self.total_bytes


class ClusterTelemetry(BaseModel):
    """
    Disk telemetry keyed by node id

    Two independent views are kept: the data path with the least available
    space and the one with the most available space. A node missing from a
    view has an unknown reading for that view.
    """
    least_available: Dict[str, DiskUsage] = Field(
        default_factory=dict, description="Least available disk usage per node id"
    )
    most_available: Dict[str, DiskUsage] = Field(
        default_factory=dict, description="Most available disk usage per node id"
    )

    class Config:
        frozen = True
        extra = "forbid"

    def least_available_total(self, node_id: str) -> Optional[int]:
        """Total bytes of the least available view, None if unknown"""
        usage = self.least_available.get(node_id)
        return usage.total_bytes if usage is not None else None

    def most_available_total(self, node_id: str) -> Optional[int]:
        """Total bytes of the most available view, None if unknown"""
        usage = self.most_available.get(node_id)
        return usage.total_bytes if usage is not None else None

#!/usr/bin/env python3
"""
Pydantic models for resource amounts and tier capacity
"""

from typing import Any, Dict, Union
from pydantic import BaseModel, Field


class ResourceAmounts(BaseModel):
    """A pair of resource measurements in bytes"""
    storage: int = Field(0, ge=0, description="Storage in bytes")
    # Memory is not captured across the cluster yet, estimates always report 0.
    memory: int = Field(0, ge=0, description="Memory in bytes")

    class Config:
        frozen = True
        extra = "forbid"

    @classmethod
    def sum(cls, first: "ResourceAmounts", second: "ResourceAmounts") -> "ResourceAmounts":
        """Component-wise sum of two resource amounts"""
        return cls(storage=first.storage + second.storage, memory=first.memory + second.memory)

    @classmethod
    def max(cls, first: "ResourceAmounts", second: "ResourceAmounts") -> "ResourceAmounts":
        """Component-wise maximum of two resource amounts"""
        return cls(
            storage=max(first.storage, second.storage),
            memory=max(first.memory, second.memory)
        )


class Capacity(BaseModel):
    """
    Capacity of a tier

    `tier` is the aggregate across every node of the tier, `node` is the
    largest amount that has to fit on a single node.
    """
    tier: ResourceAmounts = Field(..., description="Aggregate resources across the tier")
    node: ResourceAmounts = Field(..., description="Maximum resources on any single node")

    class Config:
        frozen = True
        extra = "forbid"

    @property
    def is_known(self) -> bool:
        return True

    @classmethod
    def merge(cls, first: "Capacity", second: "Capacity") -> "Capacity":
        """Combine two capacities: tiers are summed, nodes take the maximum"""
        return cls(
            tier=ResourceAmounts.sum(first.tier, second.tier),
            node=ResourceAmounts.max(first.node, second.node)
        )

    @classmethod
    def upper_bound(cls, first: "Capacity", second: "Capacity") -> "Capacity":
        """Component-wise maximum of two capacities"""
        return cls(
            tier=ResourceAmounts.max(first.tier, second.tier),
            node=ResourceAmounts.max(first.node, second.node)
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class UnknownCapacity(BaseModel):
    """Current capacity that could not be trusted because telemetry was incomplete"""

    class Config:
        frozen = True
        extra = "forbid"

    @property
    def is_known(self) -> bool:
        return False

    def to_dict(self) -> None:
        return None


ZERO_RESOURCES = ResourceAmounts(storage=0, memory=0)
ZERO_CAPACITY = Capacity(tier=ZERO_RESOURCES, node=ZERO_RESOURCES)
UNKNOWN_CAPACITY = UnknownCapacity()

CurrentCapacity = Union[Capacity, UnknownCapacity]

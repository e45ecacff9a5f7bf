#!/usr/bin/env python3
"""
Pydantic models for decider results
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
from pydantic import BaseModel, Field, field_validator

from .capacity import Capacity, CurrentCapacity
from .frozen import FrozenMapping, empty_mapping


class DecisionReason(BaseModel):
    """Why a decider arrived at its decision"""
    summary: str = Field(..., description="Short human readable reason")
    details: FrozenMapping[str, Any] = Field(default_factory=empty_mapping, description="Decider specific details")

    class Config:
        frozen = True


class Decision(BaseModel):
    """Capacity proposed by a single decider"""
    required_capacity: Optional[Capacity] = Field(
        None, description="Required capacity, None when the decider cannot tell"
    )
    reason: DecisionReason

    class Config:
        frozen = True


class AutoscalingDecisions(BaseModel):
    """Decisions of every decider of one policy, sorted by decider name"""
    tier: str = Field(..., description="Tier the decisions apply to")
    current_capacity: CurrentCapacity = Field(..., description="Current capacity or unknown")
    decisions: FrozenMapping[str, Decision] = Field(..., description="Decision per decider name")

    class Config:
        frozen = True

    @field_validator("decisions")
    @classmethod
    def _sort_decisions(cls, decisions: Mapping[str, Decision]) -> Mapping[str, Decision]:
        return MappingProxyType(dict(sorted(decisions.items())))

    def required_capacity(self) -> Optional[Capacity]:
        """
        Combined required capacity of all deciders

        Returns:
            Component-wise maximum of the deciders' required capacities, or
            None if no decider produced one
        """
        required = None
        for decision in self.decisions.values():
            if decision.required_capacity is None:
                continue
            if required is None:
                required = decision.required_capacity
            else:
                required = Capacity.upper_bound(required, decision.required_capacity)
        return required

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON ready dictionary, unknown capacity becomes None"""
        required = self.required_capacity()
        return {
            "tier": self.tier,
            "current_capacity": self.current_capacity.to_dict(),
            "required_capacity": required.to_dict() if required is not None else None,
            "decisions": {
                name: decision.model_dump() for name, decision in self.decisions.items()
            }
        }

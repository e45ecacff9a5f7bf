#!/usr/bin/env python3
"""
Loading of decision snapshots (topology, telemetry and policies) from YAML or JSON files
"""

from typing import Any, Dict, Mapping

import yaml
from pydantic import BaseModel, Field, field_validator

from .core.logging_config import get_logger
from .models import AutoscalingPolicy, ClusterTelemetry, ClusterTopology, policies_by_name

logger = get_logger(__name__)


class DecisionSnapshot(BaseModel):
    """Everything `decide()` needs, as read from a snapshot file"""
    topology: ClusterTopology = Field(default_factory=ClusterTopology)
    telemetry: ClusterTelemetry = Field(default_factory=ClusterTelemetry)
    policies: Dict[str, AutoscalingPolicy] = Field(default_factory=dict)

    class Config:
        frozen = True
        extra = "forbid"

    @field_validator("policies", mode="before")
    @classmethod
    def _index_policies(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, (list, tuple)):
            return policies_by_name(
                item if isinstance(item, AutoscalingPolicy) else AutoscalingPolicy.model_validate(item)
                for item in value
            )
        if isinstance(value, Mapping):
            indexed = {}
            for name, policy in value.items():
                if isinstance(policy, Mapping):
                    # Policy names may be given only as mapping keys
                    policy_name = policy.get("name", name)
                    policy = {**policy, "name": policy_name}
                else:
                    policy_name = getattr(policy, "name", name)
                if policy_name != name:
                    raise ValueError(f"policy '{name}' is named '{policy_name}'")
                indexed[name] = policy
            return indexed
        return value


def load_snapshot(path: str) -> DecisionSnapshot:
    """
    Load a decision snapshot

    Args:
        path: Path to a YAML or JSON document

    Returns:
        DecisionSnapshot parsed from the document
    """
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    snapshot = DecisionSnapshot.model_validate(data)
    logger.info(
        f"Loaded snapshot from {path}: {len(snapshot.topology.nodes)} nodes, "
        f"{len(snapshot.policies)} policies"
    )
    return snapshot

#!/usr/bin/env python3
"""
Autoscaling policy model
"""

from typing import Any, Dict, Iterable, Mapping
from pydantic import BaseModel, Field, field_validator, model_validator

from .deciders import DeciderConfiguration
from .frozen import FrozenMapping


def _decider_name(configuration: Any) -> Any:
    if isinstance(configuration, Mapping):
        return configuration.get("decider")
    return getattr(configuration, "decider", None)


class AutoscalingPolicy(BaseModel):
    """
    A named capacity policy binding a tier to its deciders

    Deciders may be given either as a mapping of decider name to
    configuration, or as a list of configurations keyed by their `decider`
    field. Decider names are unique within a policy.
    """
    name: str = Field(..., min_length=1, description="Policy name")
    tier: str = Field(..., min_length=1, description="Tier the policy targets, defaults to the policy name")
    deciders: FrozenMapping[str, DeciderConfiguration] = Field(..., description="Decider configurations by decider name")

    class Config:
        frozen = True
        extra = "forbid"

    @model_validator(mode="before")
    @classmethod
    def _default_tier(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and not data.get("tier"):
            data = {**data, "tier": data.get("name")}
        return data

    @field_validator("deciders", mode="before")
    @classmethod
    def _index_deciders(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            indexed = {}
            for name, configuration in value.items():
                if configuration is None:
                    configuration = {"decider": name}
                elif isinstance(configuration, Mapping) and "decider" not in configuration:
                    configuration = {**configuration, "decider": name}
                indexed[name] = configuration
            return indexed

        if isinstance(value, (list, tuple)):
            indexed = {}
            for configuration in value:
                name = _decider_name(configuration)
                if not name:
                    raise ValueError("decider configuration is missing its decider name")
                if name in indexed:
                    raise ValueError(f"duplicate decider '{name}' in policy")
                indexed[name] = configuration
            return indexed

        return value

    @field_validator("deciders")
    @classmethod
    def _check_deciders(cls, deciders: Mapping[str, Any]) -> Mapping[str, Any]:
        if not deciders:
            raise ValueError("a policy requires at least one decider")
        for name, configuration in deciders.items():
            if configuration.decider != name:
                raise ValueError(
                    f"decider '{name}' is bound to a '{configuration.decider}' configuration"
                )
        return deciders


def policies_by_name(policies: Iterable[AutoscalingPolicy]) -> Dict[str, AutoscalingPolicy]:
    """
    Index policies by name

    Args:
        policies: Policies to index

    Returns:
        Dict of policy name to policy

    Raises:
        ValueError: If two policies share a name
    """
    indexed: Dict[str, AutoscalingPolicy] = {}
    for policy in policies:
        if policy.name in indexed:
            raise ValueError(f"duplicate policy '{policy.name}'")
        indexed[policy.name] = policy
    return indexed

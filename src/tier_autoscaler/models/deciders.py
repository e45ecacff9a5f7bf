#!/usr/bin/env python3
"""
Decider configuration variants

Each decider kind owns exactly one configuration model. The models form a
closed union discriminated by the `decider` field, so a configuration always
carries the name of the decider that accepts it.
"""

from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field


class FixedDeciderConfiguration(BaseModel):
    """Configuration of the fixed decider"""
    decider: Literal["fixed"] = "fixed"
    storage: Optional[int] = Field(None, ge=0, description="Storage required per node in bytes")
    memory: Optional[int] = Field(None, ge=0, description="Memory required per node in bytes")
    nodes: int = Field(1, ge=1, description="Number of nodes required")

    class Config:
        frozen = True
        extra = "forbid"


class ReactiveStorageDeciderConfiguration(BaseModel):
    """Configuration of the reactive storage decider"""
    decider: Literal["reactive_storage"] = "reactive_storage"
    used_storage_threshold: float = Field(
        85.0, gt=0, le=100, description="Used storage percentage that triggers a scale up"
    )
    headroom_percent: float = Field(
        0.0, ge=0, description="Extra storage to request on top of the threshold target"
    )

    class Config:
        frozen = True
        extra = "forbid"


DeciderConfiguration = Annotated[
    Union[FixedDeciderConfiguration, ReactiveStorageDeciderConfiguration],
    Field(discriminator="decider")
]

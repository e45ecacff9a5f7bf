"""
Core decision engine modules
"""

from .capacity import CapacityEstimate, estimate_current_capacity, is_tier_node
from .context import DeciderContext
from .registry import DeciderService, DeciderRegistry
from .decision import AutoscalingDecisionService, DecisionServiceHolder
from .exceptions import (
    AutoscalingConfigurationError,
    EmptyDeciderRegistryError,
    DuplicateDeciderError,
    UnknownDeciderError,
    DeciderConfigurationMismatchError,
)

__all__ = [
    "CapacityEstimate",
    "estimate_current_capacity",
    "is_tier_node",
    "DeciderContext",
    "DeciderService",
    "DeciderRegistry",
    "AutoscalingDecisionService",
    "DecisionServiceHolder",
    "AutoscalingConfigurationError",
    "EmptyDeciderRegistryError",
    "DuplicateDeciderError",
    "UnknownDeciderError",
    "DeciderConfigurationMismatchError",
]

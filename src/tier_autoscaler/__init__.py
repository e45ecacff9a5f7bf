"""
Tier autoscaler decision engine

Computes required capacity per decider and the current capacity of each
tier targeted by an autoscaling policy.
"""

from .core import (
    AutoscalingDecisionService,
    DecisionServiceHolder,
    DeciderContext,
    DeciderRegistry,
    DeciderService,
)
from .deciders import default_decider_services

__version__ = "1.0.0"

__all__ = [
    "AutoscalingDecisionService",
    "DecisionServiceHolder",
    "DeciderContext",
    "DeciderRegistry",
    "DeciderService",
    "default_decider_services",
]

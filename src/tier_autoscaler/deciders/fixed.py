#!/usr/bin/env python3
"""
Fixed decider: requires a configured amount of capacity regardless of load
"""

from ..core.context import DeciderContext
from ..core.registry import DeciderService
from ..models import Capacity, Decision, DecisionReason, FixedDeciderConfiguration, ResourceAmounts


class FixedDeciderService(DeciderService[FixedDeciderConfiguration]):
    """Requires `nodes` nodes of the configured storage and memory"""

    name = "fixed"
    configuration_type = FixedDeciderConfiguration

    def scale(self, configuration: FixedDeciderConfiguration, context: DeciderContext) -> Decision:
        if configuration.storage is None and configuration.memory is None:
            return Decision(
                required_capacity=None,
                reason=DecisionReason(summary="no fixed capacity configured")
            )

        node = ResourceAmounts(storage=configuration.storage or 0, memory=configuration.memory or 0)
        tier = ResourceAmounts(
            storage=node.storage * configuration.nodes,
            memory=node.memory * configuration.nodes
        )
        return Decision(
            required_capacity=Capacity(tier=tier, node=node),
            reason=DecisionReason(
                summary=f"fixed capacity of {configuration.nodes} node(s)",
                details={"nodes": configuration.nodes}
            )
        )

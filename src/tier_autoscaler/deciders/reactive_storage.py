#!/usr/bin/env python3
"""
Reactive storage decider: scales storage up once used space crosses a threshold
"""

import logging
import math

from ..core.context import DeciderContext
from ..core.registry import DeciderService
from ..models import (
    Capacity,
    Decision,
    DecisionReason,
    ReactiveStorageDeciderConfiguration,
    ResourceAmounts,
)

logger = logging.getLogger(__name__)


class ReactiveStorageDeciderService(DeciderService[ReactiveStorageDeciderConfiguration]):
    """
    Compares used storage of the tier with a threshold

    Used bytes come from the least available view of each tier node. Below
    the threshold the current capacity is required as is. At or above it, the
    tier storage is raised so that current usage plus headroom sits exactly
    at the threshold; the per-node requirement is left unchanged.
    """

    name = "reactive_storage"
    configuration_type = ReactiveStorageDeciderConfiguration

    def scale(self, configuration: ReactiveStorageDeciderConfiguration, context: DeciderContext) -> Decision:
        current = context.current_capacity
        if not current.is_known:
            return Decision(
                required_capacity=None,
                reason=DecisionReason(summary="current capacity unknown", details={"tier": context.tier})
            )

        total = current.tier.storage
        if total == 0:
            return Decision(
                required_capacity=current,
                reason=DecisionReason(summary="no storage in tier", details={"tier": context.tier})
            )

        used = 0
        for node in context.tier_nodes():
            usage = context.telemetry.least_available.get(node.node_id)
            if usage is not None:
                used += usage.used_bytes

        used_percent = 100.0 * used / total
        details = {
            "used_bytes": used,
            "total_bytes": total,
            "used_percent": round(used_percent, 2),
            "threshold": configuration.used_storage_threshold
        }

        if used_percent < configuration.used_storage_threshold:
            return Decision(
                required_capacity=current,
                reason=DecisionReason(
                    summary=f"storage {used_percent:.1f}% < {configuration.used_storage_threshold}%",
                    details=details
                )
            )

        required_storage = math.ceil(
            used * (100.0 + configuration.headroom_percent) / configuration.used_storage_threshold
        )
        logger.debug(f"Tier '{context.tier}' storage {used_percent:.1f}% used, requiring {required_storage} bytes")
        return Decision(
            required_capacity=Capacity(
                tier=ResourceAmounts(storage=required_storage, memory=current.tier.memory),
                node=current.node
            ),
            reason=DecisionReason(
                summary=f"storage {used_percent:.1f}% >= {configuration.used_storage_threshold}%",
                details=details
            )
        )

#!/usr/bin/env python3
"""
Decision service evaluating every autoscaling policy against cluster snapshots
"""

import threading
from typing import Callable, Dict, Iterable, Mapping, Optional

from ..models import (
    AutoscalingDecisions,
    AutoscalingPolicy,
    ClusterTelemetry,
    ClusterTopology,
    Decision,
)
from .context import DeciderContext
from .exceptions import DuplicateDeciderError, UnknownDeciderError
from .logging_config import get_logger
from .registry import DeciderRegistry, DeciderService

logger = get_logger(__name__)


class AutoscalingDecisionService:
    """
    Computes the decisions of every policy

    The service holds no state besides its registry, `decide()` can be
    called concurrently.
    """

    def __init__(self, registry: DeciderRegistry):
        self.registry = registry

    @classmethod
    def from_services(cls, services: Iterable[DeciderService]) -> "AutoscalingDecisionService":
        return cls(DeciderRegistry(services))

    def decide(
        self,
        topology: ClusterTopology,
        telemetry: ClusterTelemetry,
        policies: Optional[Mapping[str, AutoscalingPolicy]]
    ) -> Dict[str, AutoscalingDecisions]:
        """
        Evaluate all policies

        Args:
            topology: Cluster topology snapshot
            telemetry: Disk telemetry snapshot
            policies: Policies by name, None or empty when none are configured

        Returns:
            Dict of policy name to decisions, sorted by policy name

        Raises:
            UnknownDeciderError: If a policy references an unregistered decider
        """
        if not policies:
            return {}

        results = {
            name: self._decide_policy(policy, topology, telemetry)
            for name, policy in policies.items()
        }
        return dict(sorted(results.items()))

    def validate_policies(self, policies: Optional[Mapping[str, AutoscalingPolicy]]) -> None:
        """
        Check that every decider referenced by the policies is registered

        Raises:
            UnknownDeciderError: Listing every unregistered decider name
        """
        unknown = {
            name
            for policy in (policies or {}).values()
            for name in policy.deciders
            if name not in self.registry
        }
        if unknown:
            raise UnknownDeciderError(unknown)

    def _decide_policy(
        self,
        policy: AutoscalingPolicy,
        topology: ClusterTopology,
        telemetry: ClusterTelemetry
    ) -> AutoscalingDecisions:
        """Evaluate the deciders of a single policy"""
        context = DeciderContext.build(policy.tier, topology, telemetry)

        decisions: Dict[str, Decision] = {}
        for decider_name, configuration in policy.deciders.items():
            if decider_name in decisions:
                raise DuplicateDeciderError(f"Decider '{decider_name}' appears twice in policy '{policy.name}'")
            decisions[decider_name] = self.registry.scale(configuration, context)

        logger.debug(
            f"Policy '{policy.name}' evaluated for tier '{policy.tier}': "
            f"{len(decisions)} decisions, current capacity known={context.current_capacity.is_known}"
        )
        return AutoscalingDecisions(
            tier=policy.tier,
            current_capacity=context.current_capacity,
            decisions=decisions
        )


class DecisionServiceHolder:
    """Builds the decision service on first use, exactly once"""

    def __init__(self, factory: Callable[[], AutoscalingDecisionService]):
        self._factory = factory
        self._service: Optional[AutoscalingDecisionService] = None
        self._lock = threading.Lock()

    def get(self) -> AutoscalingDecisionService:
        service = self._service
        if service is None:
            with self._lock:
                if self._service is None:
                    self._service = self._factory()
                service = self._service
        return service

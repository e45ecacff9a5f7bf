#!/usr/bin/env python3
"""
Prometheus metrics for decision runs

Recorded by the runner around `decide()`, the engine itself never touches them.
"""

import logging
from typing import Dict, Optional
from prometheus_client import CollectorRegistry, Counter, Histogram, REGISTRY, write_to_textfile

from ..models import AutoscalingDecisions

logger = logging.getLogger(__name__)


DECISION_RUNS_TOTAL = Counter(
    'autoscaler_decision_runs_total',
    'Total decision runs',
    ['status']
)

DECIDER_DECISIONS_TOTAL = Counter(
    'autoscaler_decider_decisions_total',
    'Decisions produced per policy and decider',
    ['policy', 'decider']
)

CURRENT_CAPACITY_UNKNOWN_TOTAL = Counter(
    'autoscaler_current_capacity_unknown_total',
    'Policies evaluated with an unknown current capacity',
    ['policy']
)

DECISION_DURATION = Histogram(
    'autoscaler_decision_duration_seconds',
    'Time taken to evaluate all policies',
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)


def record_decision_run(results: Dict[str, AutoscalingDecisions], duration_seconds: float) -> None:
    """
    Record the outcome of a successful decision run

    Args:
        results: Decisions by policy name
        duration_seconds: Wall time of the run
    """
    DECISION_RUNS_TOTAL.labels(status='success').inc()
    DECISION_DURATION.observe(duration_seconds)

    for policy_name, decisions in results.items():
        for decider_name in decisions.decisions:
            DECIDER_DECISIONS_TOTAL.labels(policy=policy_name, decider=decider_name).inc()
        if not decisions.current_capacity.is_known:
            CURRENT_CAPACITY_UNKNOWN_TOTAL.labels(policy=policy_name).inc()


def record_decision_failure() -> None:
    DECISION_RUNS_TOTAL.labels(status='error').inc()


def export_metrics(path: str, registry: Optional[CollectorRegistry] = None) -> None:
    """Write metrics in the Prometheus text format for a textfile collector"""
    write_to_textfile(path, registry or REGISTRY)
    logger.debug(f"Metrics written to {path}")

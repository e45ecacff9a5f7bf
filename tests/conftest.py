"""
Shared fixtures for decision engine tests
"""

from typing import Dict, Iterable, Optional

import pytest

from tier_autoscaler.models import ClusterTelemetry, ClusterTopology, DiskUsage, TopologyNode


def make_node(node_id: str, roles: Iterable[str] = (), data: Optional[str] = None) -> TopologyNode:
    """Helper to build a topology node"""
    attributes = {"data": data} if data is not None else {}
    return TopologyNode(node_id=node_id, name=f"node-{node_id}", roles=frozenset(roles), attributes=attributes)


def make_telemetry(
    least: Optional[Dict[str, int]] = None,
    most: Optional[Dict[str, int]] = None,
    free: Optional[Dict[str, int]] = None
) -> ClusterTelemetry:
    """Helper to build telemetry from total bytes per node id"""
    free = free or {}

    def view(totals):
        return {
            node_id: DiskUsage(node_id=node_id, total_bytes=total, free_bytes=free.get(node_id, total))
            for node_id, total in (totals or {}).items()
        }

    return ClusterTelemetry(least_available=view(least), most_available=view(most))


@pytest.fixture
def hot_topology():
    """Three nodes, two of them in the 'hot' tier"""
    return ClusterTopology(nodes=(
        make_node("a", roles=["hot", "ingest"]),
        make_node("b", data="hot"),
        make_node("c", roles=["warm"]),
    ))


@pytest.fixture
def empty_telemetry():
    return ClusterTelemetry()


def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )

#!/usr/bin/env python3
"""
Tests for tier membership and current capacity estimation
"""

from conftest import make_node, make_telemetry

from tier_autoscaler.core.capacity import (
    estimate_current_capacity,
    is_tier_node,
    node_storage,
    tier_nodes,
)
from tier_autoscaler.models import ClusterTopology, TopologyNode, UNKNOWN_CAPACITY, ZERO_CAPACITY


class TestTierMembership:
    """Test the informal tier filter"""

    def test_role_name_matches(self):
        assert is_tier_node(make_node("a", roles=["hot"]), "hot")

    def test_data_attribute_matches(self):
        assert is_tier_node(make_node("a", data="hot"), "hot")

    def test_other_attributes_do_not_match(self):
        node = TopologyNode(node_id="a", attributes={"zone": "hot"})
        assert not is_tier_node(node, "hot")

    def test_unrelated_node_does_not_match(self):
        assert not is_tier_node(make_node("a", roles=["warm"], data="warm"), "hot")

    def test_node_matching_both_ways_is_included_once(self):
        topology = ClusterTopology(nodes=(
            make_node("a", roles=["hot"], data="hot"),
            make_node("b", roles=["cold"]),
        ))
        assert [node.node_id for node in tier_nodes("hot", topology)] == ["a"]


class TestNodeStorage:
    """Test the per-node storage estimate"""

    def test_takes_max_of_both_views(self):
        telemetry = make_telemetry(least={"a": 100}, most={"a": 150})
        assert node_storage(make_node("a"), telemetry) == (150, True)

    def test_one_view_missing(self):
        telemetry = make_telemetry(least={"a": 100})
        assert node_storage(make_node("a"), telemetry) == (100, False)

    def test_both_views_missing(self):
        assert node_storage(make_node("a"), make_telemetry()) == (0, False)


class TestEstimateCurrentCapacity:
    """Test tier capacity aggregation and trust"""

    def test_empty_tier_is_zero_and_trusted(self, hot_topology, empty_telemetry):
        estimate = estimate_current_capacity("frozen", hot_topology, empty_telemetry)

        assert estimate.accurate is True
        assert estimate.capacity == ZERO_CAPACITY
        assert estimate.current_capacity == ZERO_CAPACITY
        assert estimate.current_capacity.is_known

    def test_single_node(self):
        topology = ClusterTopology(nodes=(make_node("a", roles=["hot"]),))
        telemetry = make_telemetry(least={"a": 100}, most={"a": 150})

        estimate = estimate_current_capacity("hot", topology, telemetry)

        assert estimate.accurate is True
        assert estimate.capacity.tier.storage == 150
        assert estimate.capacity.node.storage == 150
        assert estimate.capacity.tier.memory == 0
        assert estimate.capacity.node.memory == 0

    def test_tier_sums_and_node_takes_max(self, hot_topology):
        telemetry = make_telemetry(least={"a": 50, "b": 200}, most={"a": 50, "b": 180})

        estimate = estimate_current_capacity("hot", hot_topology, telemetry)

        assert estimate.accurate is True
        assert estimate.capacity.tier.storage == 250
        assert estimate.capacity.node.storage == 200

    def test_missing_telemetry_makes_capacity_unknown(self, hot_topology):
        telemetry = make_telemetry(least={"a": 100}, most={"a": 120})

        estimate = estimate_current_capacity("hot", hot_topology, telemetry)

        assert estimate.accurate is False
        assert estimate.capacity.tier.storage == 120
        assert estimate.capacity.node.storage == 120
        assert estimate.current_capacity is UNKNOWN_CAPACITY
        assert not estimate.current_capacity.is_known

    def test_nodes_outside_tier_are_ignored(self, hot_topology):
        telemetry = make_telemetry(
            least={"a": 10, "b": 20, "c": 1000},
            most={"a": 10, "b": 20, "c": 1000}
        )

        estimate = estimate_current_capacity("hot", hot_topology, telemetry)

        assert estimate.capacity.tier.storage == 30
        assert estimate.capacity.node.storage == 20

    def test_missing_telemetry_outside_tier_does_not_matter(self, hot_topology):
        telemetry = make_telemetry(least={"a": 10, "b": 20}, most={"a": 10, "b": 20})

        estimate = estimate_current_capacity("hot", hot_topology, telemetry)

        assert estimate.accurate is True

#!/usr/bin/env python3
"""
Tests for the capacity, policy and decision models
"""

import pytest
from pydantic import ValidationError

from tier_autoscaler.models import (
    AutoscalingDecisions,
    AutoscalingPolicy,
    Capacity,
    ClusterTopology,
    Decision,
    DecisionReason,
    DiskUsage,
    FixedDeciderConfiguration,
    ReactiveStorageDeciderConfiguration,
    ResourceAmounts,
    TopologyNode,
    UNKNOWN_CAPACITY,
    ZERO_CAPACITY,
    policies_by_name,
)


def capacity(tier_storage: int, node_storage: int) -> Capacity:
    return Capacity(tier=ResourceAmounts(storage=tier_storage), node=ResourceAmounts(storage=node_storage))


class TestCapacity:
    """Test resource arithmetic"""

    def test_zero(self):
        assert ZERO_CAPACITY.tier == ResourceAmounts(storage=0, memory=0)
        assert ZERO_CAPACITY.node == ResourceAmounts(storage=0, memory=0)

    def test_sum_and_max(self):
        first = ResourceAmounts(storage=10, memory=5)
        second = ResourceAmounts(storage=3, memory=9)

        assert ResourceAmounts.sum(first, second) == ResourceAmounts(storage=13, memory=14)
        assert ResourceAmounts.max(first, second) == ResourceAmounts(storage=10, memory=9)

    def test_merge(self):
        merged = Capacity.merge(capacity(50, 50), capacity(200, 200))
        assert merged == capacity(250, 200)

    def test_negative_amounts_rejected(self):
        with pytest.raises(ValidationError):
            ResourceAmounts(storage=-1)

    def test_unknown_is_not_known(self):
        assert ZERO_CAPACITY.is_known is True
        assert UNKNOWN_CAPACITY.is_known is False
        assert UNKNOWN_CAPACITY.to_dict() is None

    def test_models_are_immutable(self):
        with pytest.raises(ValidationError):
            ZERO_CAPACITY.tier = ResourceAmounts(storage=1)

        reason = DecisionReason(summary="a", details={"nodes": 1})
        decisions = AutoscalingDecisions(
            tier="hot",
            current_capacity=ZERO_CAPACITY,
            decisions={"a": Decision(reason=reason)}
        )
        with pytest.raises(TypeError):
            decisions.decisions["x"] = Decision(reason=reason)
        with pytest.raises(TypeError):
            reason.details["nodes"] = 2

        policy = AutoscalingPolicy(name="hot", deciders=[FixedDeciderConfiguration()])
        with pytest.raises(AttributeError):
            policy.deciders.clear()
        with pytest.raises(TypeError):
            policy.deciders["reactive_storage"] = ReactiveStorageDeciderConfiguration()

        assert list(decisions.decisions) == ["a"]
        assert list(policy.deciders) == ["fixed"]

    def test_read_only_mappings_dump_as_dicts(self):
        policy = AutoscalingPolicy(name="hot", deciders=[FixedDeciderConfiguration(storage=5)])

        dumped = policy.model_dump()

        assert type(dumped["deciders"]) is dict
        assert dumped["deciders"]["fixed"]["storage"] == 5
        assert AutoscalingPolicy.model_validate(dumped) == policy


class TestCluster:
    """Test topology and telemetry models"""

    def test_duplicate_node_ids_rejected(self):
        with pytest.raises(ValidationError):
            ClusterTopology(nodes=(TopologyNode(node_id="a"), TopologyNode(node_id="a")))

    def test_roles_accept_lists(self):
        node = TopologyNode(node_id="a", roles=["hot", "hot", "ingest"])
        assert node.roles == frozenset({"hot", "ingest"})

    def test_disk_usage(self):
        usage = DiskUsage(node_id="a", total_bytes=200, free_bytes=50)
        assert usage.used_bytes == 150
        assert usage.free_disk_percentage == 25.0
        assert DiskUsage(node_id="b", total_bytes=0).free_disk_percentage == 100.0


class TestAutoscalingPolicy:
    """Test policy construction"""

    def test_tier_defaults_to_name(self):
        policy = AutoscalingPolicy(name="hot", deciders=[FixedDeciderConfiguration()])
        assert policy.tier == "hot"

    def test_deciders_from_list(self):
        policy = AutoscalingPolicy(
            name="hot",
            tier="data_hot",
            deciders=[FixedDeciderConfiguration(storage=1), ReactiveStorageDeciderConfiguration()]
        )
        assert policy.tier == "data_hot"
        assert list(policy.deciders) == ["fixed", "reactive_storage"]

    def test_deciders_from_mapping_without_decider_field(self):
        policy = AutoscalingPolicy.model_validate({
            "name": "hot",
            "deciders": {"fixed": {"storage": 10}, "reactive_storage": None}
        })

        assert isinstance(policy.deciders["fixed"], FixedDeciderConfiguration)
        assert policy.deciders["fixed"].storage == 10
        assert isinstance(policy.deciders["reactive_storage"], ReactiveStorageDeciderConfiguration)

    def test_duplicate_deciders_rejected(self):
        with pytest.raises(ValidationError, match="duplicate decider 'fixed'"):
            AutoscalingPolicy(
                name="hot",
                deciders=[FixedDeciderConfiguration(storage=1), FixedDeciderConfiguration(storage=2)]
            )

    def test_mapping_key_must_match_configuration(self):
        with pytest.raises(ValidationError):
            AutoscalingPolicy(name="hot", deciders={"reactive_storage": FixedDeciderConfiguration()})

    def test_unknown_decider_kind_rejected(self):
        with pytest.raises(ValidationError):
            AutoscalingPolicy.model_validate({"name": "hot", "deciders": [{"decider": "proactive"}]})

    def test_at_least_one_decider(self):
        with pytest.raises(ValidationError):
            AutoscalingPolicy(name="hot", deciders=[])

    def test_policies_by_name(self):
        hot = AutoscalingPolicy(name="hot", deciders=[FixedDeciderConfiguration()])
        warm = AutoscalingPolicy(name="warm", deciders=[FixedDeciderConfiguration()])

        assert policies_by_name([hot, warm]) == {"hot": hot, "warm": warm}
        with pytest.raises(ValueError):
            policies_by_name([hot, hot])


class TestAutoscalingDecisions:
    """Test the per-policy decision record"""

    def test_decisions_sorted_by_name(self):
        reason = DecisionReason(summary="test")
        decisions = AutoscalingDecisions(
            tier="hot",
            current_capacity=UNKNOWN_CAPACITY,
            decisions={"zeta": Decision(reason=reason), "alpha": Decision(reason=reason)}
        )
        assert list(decisions.decisions) == ["alpha", "zeta"]
        assert decisions.current_capacity is UNKNOWN_CAPACITY

    def test_required_capacity_is_upper_bound(self):
        decisions = AutoscalingDecisions(
            tier="hot",
            current_capacity=ZERO_CAPACITY,
            decisions={
                "a": Decision(required_capacity=capacity(300, 50), reason=DecisionReason(summary="a")),
                "b": Decision(required_capacity=capacity(100, 80), reason=DecisionReason(summary="b")),
                "c": Decision(reason=DecisionReason(summary="c")),
            }
        )
        assert decisions.required_capacity() == capacity(300, 80)

    def test_required_capacity_none_without_requirements(self):
        decisions = AutoscalingDecisions(
            tier="hot",
            current_capacity=ZERO_CAPACITY,
            decisions={"a": Decision(reason=DecisionReason(summary="a"))}
        )
        assert decisions.required_capacity() is None

    def test_to_dict(self):
        decisions = AutoscalingDecisions(
            tier="hot",
            current_capacity=UNKNOWN_CAPACITY,
            decisions={"a": Decision(required_capacity=capacity(10, 10), reason=DecisionReason(summary="a"))}
        )

        data = decisions.to_dict()

        assert data["tier"] == "hot"
        assert data["current_capacity"] is None
        assert data["required_capacity"] == {
            "tier": {"storage": 10, "memory": 0},
            "node": {"storage": 10, "memory": 0}
        }
        assert data["decisions"]["a"]["reason"] == {"summary": "a", "details": {}}

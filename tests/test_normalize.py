"""Tests for normalize module."""

import json

import pytest

from discovery_mcp.engine import generate_discovery_insights
from discovery_mcp.utils.normalize import (
    SNAPSHOT_VERSION,
    build_insights_snapshot,
    canonical_dumps,
    normalize_insights_for_diff,
)

from conftest import NOW


class TestCanonicalDumps:
    """Tests for canonical_dumps function."""

    def test_sorted_keys_minimal_separators(self):
        assert canonical_dumps({"z": 1, "a": {"y": [1, 2], "b": None}}) == '{"a":{"b":null,"y":[1,2]},"z":1}'

    def test_unicode_preserved(self):
        assert "Zoë" in canonical_dumps({"name": "Zoë"})

    def test_rejects_nan(self):
        with pytest.raises(ValueError, match="Out of range float values"):
            canonical_dumps({"score": float("nan")})


class TestNormalizeInsightsForDiff:
    """Tests for normalize_insights_for_diff function."""

    def test_removes_runtime_fields(self):
        raw = {"meta": {"duration_ms": 3.2, "tool": "generate_insights"}, "generatedAt": "2026-06-01T12:00:00Z"}
        result = normalize_insights_for_diff(raw)
        assert result == {"meta": {"tool": "generate_insights"}}

    def test_connection_lists_sorted(self):
        raw = {
            "focusAreas": {
                "areas": [
                    {"domain": "RETIREMENT_INCOME", "valueConnections": ["qol_hobbies", "security_stable_income"]},
                    {"domain": "INSURANCE_RISK", "goalConnections": ["g2", "g1"], "riskFactors": ["b", "a"]},
                ]
            }
        }
        areas = normalize_insights_for_diff(raw)["focusAreas"]["areas"]
        assert areas[0]["valueConnections"] == ["qol_hobbies", "security_stable_income"]
        assert areas[1]["goalConnections"] == ["g1", "g2"]
        assert areas[1]["riskFactors"] == ["a", "b"]

    def test_ranked_order_preserved(self):
        raw = {"actions": {"recommendations": [{"id": "z"}, {"id": "a"}], "topActions": ["z", "a"]}}
        result = normalize_insights_for_diff(raw)
        assert [r["id"] for r in result["actions"]["recommendations"]] == ["z", "a"]
        assert result["actions"]["topActions"] == ["z", "a"]

    def test_null_connections_become_empty(self):
        raw = {"actions": {"recommendations": [{"id": "a", "valueConnections": None, "dependencies": None}]}}
        item = normalize_insights_for_diff(raw)["actions"]["recommendations"][0]
        assert item["valueConnections"] == []
        assert item["dependencies"] is None

    def test_nan_and_inf_replaced(self):
        raw = {"focusAreas": {"areas": [{"score": float("inf")}]}, "x": float("nan"), "flag": True}
        result = normalize_insights_for_diff(raw)
        assert result["focusAreas"]["areas"][0]["score"] is None
        assert result["x"] is None
        assert result["flag"] is True

    def test_input_not_mutated(self):
        raw = {"meta": {"duration_ms": 1.0}}
        normalize_insights_for_diff(raw)
        assert raw == {"meta": {"duration_ms": 1.0}}

    def test_idempotence(self, settings, full_profile):
        raw = generate_discovery_insights(full_profile, now=NOW, settings=settings).to_dict()
        once = normalize_insights_for_diff(raw)
        twice = normalize_insights_for_diff(once)
        assert canonical_dumps(once) == canonical_dumps(twice)


class TestBuildInsightsSnapshot:
    """Tests for build_insights_snapshot function."""

    def test_extracts_decision_fields(self, settings, near_retirement_profile):
        raw = generate_discovery_insights(near_retirement_profile, now=NOW, settings=settings).to_dict()
        snapshot = build_insights_snapshot(raw)
        assert snapshot["snapshot_version"] == SNAPSHOT_VERSION
        assert snapshot["income_strategy"] == "STABILITY_FOCUSED"
        assert snapshot["domain_ranking"][0] == "RETIREMENT_INCOME"
        assert len(snapshot["domain_ranking"]) == 9
        assert snapshot["action_ids"][0] == "retirement-income-sources"
        assert snapshot["completion_percentage"] == 75
        assert len(snapshot["snapshot_hash"]) == 16

    def test_handles_missing_fields(self):
        snapshot = build_insights_snapshot({})
        assert snapshot["income_strategy"] is None
        assert snapshot["domain_ranking"] == []
        assert snapshot["top_priorities"] == []

    def test_hash_ignores_generation_time(self, settings, minimal_profile):
        first = generate_discovery_insights(minimal_profile, now=NOW, settings=settings).to_dict()
        later = dict(first, generatedAt="2026-06-02T09:30:00+00:00")
        assert build_insights_snapshot(first)["snapshot_hash"] == build_insights_snapshot(later)["snapshot_hash"]

    def test_hash_changes_with_ranking(self, settings, minimal_profile, federal_profile):
        a = build_insights_snapshot(generate_discovery_insights(minimal_profile, now=NOW, settings=settings).to_dict())
        b = build_insights_snapshot(generate_discovery_insights(federal_profile, now=NOW, settings=settings).to_dict())
        assert a["snapshot_hash"] != b["snapshot_hash"]

    def test_snapshot_is_json_safe(self, settings, full_profile):
        raw = generate_discovery_insights(full_profile, now=NOW, settings=settings).to_dict()
        json.loads(canonical_dumps(build_insights_snapshot(raw)))

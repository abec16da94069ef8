"""Tests for the insights tool envelopes."""

import asyncio
from datetime import datetime, timezone

import pytest

from discovery_mcp.tools import check_insights_readiness, generate_insights


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("DISCOVERY_RETIREMENT_AGE", raising=False)
    monkeypatch.delenv("DISCOVERY_STRICT_INVARIANTS", raising=False)


class TestGenerateInsights:
    """Tests for generate_insights tool responses."""

    def test_empty_profile_is_insufficient(self) -> None:
        result = asyncio.run(generate_insights({}))
        assert result["error"] is True
        assert result["error_type"] == "insufficient_data"
        assert result["completion_percentage"] == 0
        assert len(result["suggestions"]) == 4
        assert result["message"] == "Complete more discovery sections to generate planning insights."

    def test_none_profile_is_insufficient(self) -> None:
        result = asyncio.run(generate_insights(None))
        assert result["error_type"] == "insufficient_data"

    def test_non_object_profile_rejected(self) -> None:
        result = asyncio.run(generate_insights(["basicContext"]))
        assert result["error_type"] == "invalid_profile"
        assert "list" in result["message"]

    def test_bad_configuration(self, monkeypatch, minimal_profile) -> None:
        monkeypatch.setenv("DISCOVERY_RETIREMENT_AGE", "abc")
        result = asyncio.run(generate_insights(minimal_profile))
        assert result["error_type"] == "invalid_configuration"
        assert "DISCOVERY_RETIREMENT_AGE" in result["message"]

    def test_success_envelope(self, full_profile) -> None:
        result = asyncio.run(generate_insights(full_profile))
        assert "error" not in result
        assert result["meta"]["tool"] == "generate_insights"
        assert "duration_ms" in result["meta"]
        assert set(result["insights"]) == {"strategyProfile", "focusAreas", "actions", "inputSummary", "generatedAt"}
        assert len(result["insights"]["focusAreas"]["areas"]) == 9
        assert result["snapshot"]["domain_ranking"] == [a["domain"] for a in result["insights"]["focusAreas"]["areas"]]
        assert "conflictFlags" in result["values_profile"]

    def test_provenance(self, minimal_profile) -> None:
        result = asyncio.run(generate_insights(minimal_profile))
        intake = result["data_provenance"]["intake"]
        rules = result["data_provenance"]["rules"]
        assert intake["source"] == "intake_record"
        assert intake["completion_percentage"] == 50
        assert rules["retirement_age"] == 65
        assert rules["ruleset_version"] == result["meta"]["ruleset_version"]

    def test_suggestions_for_missing_sections(self, minimal_profile) -> None:
        result = asyncio.run(generate_insights(minimal_profile))
        assert result["suggestions"] == [
            "Add financial goals",
            "Complete your Statement of Financial Purpose",
        ]

    def test_retirement_age_from_environment(self, monkeypatch, minimal_profile) -> None:
        monkeypatch.setenv("DISCOVERY_RETIREMENT_AGE", "62")
        result = asyncio.run(generate_insights(minimal_profile))
        assert result["data_provenance"]["rules"]["retirement_age"] == 62

    def test_snapshot_stable_across_calls(self, near_retirement_profile) -> None:
        first = asyncio.run(generate_insights(near_retirement_profile))
        second = asyncio.run(generate_insights(near_retirement_profile))
        assert first["snapshot"]["snapshot_hash"] == second["snapshot"]["snapshot_hash"]


class TestCheckInsightsReadiness:
    """Tests for check_insights_readiness tool responses."""

    def test_empty_profile(self) -> None:
        result = asyncio.run(check_insights_readiness({}))
        assert result["ready"] is False
        assert result["input_summary"]["completionPercentage"] == 0
        assert result["meta"]["tool"] == "check_insights_readiness"

    def test_minimal_profile_ready(self, minimal_profile) -> None:
        result = asyncio.run(check_insights_readiness(minimal_profile))
        assert result["ready"] is True
        assert result["input_summary"]["hasValues"] is True
        assert result["input_summary"]["hasGoals"] is False
        assert result["status_message"].startswith("Good foundation")

    def test_invalid_profile(self) -> None:
        result = asyncio.run(check_insights_readiness("Dana"))
        assert result["error_type"] == "invalid_profile"


class TestSharedReferenceDate:
    """Readiness and insights agree when they run at the same instant."""

    PROFILE = {
        "basicContext": {"firstName": "Ana", "birthDate": "2026-06-02"},
        "valuesDiscovery": {"top5": ["qol_hobbies"]},
    }

    @pytest.fixture
    def frozen_now(self, monkeypatch):
        def _freeze(moment: datetime) -> None:
            monkeypatch.setattr("discovery_mcp.tools.insights._utc_now", lambda: moment)

        return _freeze

    def test_before_birth_date(self, frozen_now) -> None:
        """23:30 UTC on June 1 is still June 1, whatever the host time zone."""
        frozen_now(datetime(2026, 6, 1, 23, 30, tzinfo=timezone.utc))
        readiness = asyncio.run(check_insights_readiness(self.PROFILE))
        result = asyncio.run(generate_insights(self.PROFILE))
        assert readiness["ready"] is False
        assert result["error_type"] == "insufficient_data"
        assert result["suggestions"] == readiness["suggestions"]
        assert result["suggestions"][0].startswith("Add your birth date")

    def test_on_birth_date(self, frozen_now) -> None:
        frozen_now(datetime(2026, 6, 2, 0, 30, tzinfo=timezone.utc))
        readiness = asyncio.run(check_insights_readiness(self.PROFILE))
        result = asyncio.run(generate_insights(self.PROFILE))
        assert readiness["ready"] is True
        assert "error" not in result
        assert result["insights"]["generatedAt"] == "2026-06-02T00:30:00+00:00"
        assert result["status_message"] == readiness["status_message"]

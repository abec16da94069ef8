"""Pytest configuration and fixtures."""

from datetime import date, datetime, timezone
from typing import Any

import pytest

from discovery_mcp.engine.context import PlanningContext, build_planning_context
from discovery_mcp.models import IntakeRecord
from discovery_mcp.utils.validators import EngineSettings

TODAY = date(2026, 6, 1)
NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> EngineSettings:
    """Default engine settings, independent of the environment."""
    return EngineSettings()


@pytest.fixture
def make_context():
    """Build a PlanningContext for a camelCase profile as of TODAY."""

    def _make(profile: dict[str, Any]) -> PlanningContext:
        return build_planning_context(IntakeRecord.from_mapping(profile), TODAY)

    return _make


@pytest.fixture
def near_retirement_profile() -> dict[str, Any]:
    """Married, 63, security-minded, retiring within two years."""
    return {
        "basicContext": {
            "firstName": "Dana",
            "lastName": "Reyes",
            "birthDate": "1963-03-15",
            "maritalStatus": "married",
        },
        "valuesDiscovery": {
            "top10": [
                "security_financial_security",
                "security_stable_income",
                "qol_peaceful_retirement",
                "health_access_healthcare",
                "family_supporting_spouse",
                "control_clear_plan",
            ],
            "top5": [
                "security_financial_security",
                "security_stable_income",
                "qol_peaceful_retirement",
                "health_access_healthcare",
                "family_supporting_spouse",
            ],
            "nonNegotiables": ["security_stable_income"],
        },
        "financialGoals": {
            "allGoals": [
                {
                    "id": "g-retire",
                    "label": "Retire at 65",
                    "category": "RETIREMENT",
                    "priority": "HIGH",
                    "timeHorizon": "SHORT",
                    "flexibility": "FIXED",
                },
            ],
        },
    }


@pytest.fixture
def dependents_profile() -> dict[str, Any]:
    """Mid-career parent with one financially dependent child."""
    return {
        "basicContext": {
            "firstName": "Sam",
            "birthDate": "1985-01-10",
            "maritalStatus": "single",
            "dependents": [
                {"relationship": "child", "birthDate": "2015-09-01", "financiallyDependent": True},
                {"relationship": "parent", "financiallyDependent": False},
            ],
        },
        "valuesDiscovery": {
            "top5": [
                "family_providing_for_children",
                "family_college_funding",
                "security_protection_for_dependents",
                "growth_building_wealth",
                "qol_time_with_loved_ones",
            ],
        },
    }


@pytest.fixture
def federal_profile() -> dict[str, Any]:
    """Federal employee under FERS, 14 years from retirement, no goals."""
    return {
        "basicContext": {
            "firstName": "Lee",
            "birthDate": "1975-05-20",
            "federalEmployee": {
                "agency": "Department of the Interior",
                "yearsOfService": 20,
                "retirementSystem": "FERS",
                "payGrade": "GS-13",
            },
        },
        "valuesDiscovery": {
            "top5": [
                "control_clear_plan",
                "control_tax_management",
                "security_stable_income",
                "security_financial_security",
                "growth_building_wealth",
            ],
        },
    }


@pytest.fixture
def minimal_profile() -> dict[str, Any]:
    """Basic context and values only."""
    return {
        "basicContext": {"firstName": "Ana", "birthDate": "1980-07-04"},
        "valuesDiscovery": {"top5": ["freedom_flexible_schedule", "qol_hobbies"]},
    }


@pytest.fixture
def full_profile() -> dict[str, Any]:
    """All four scored sections plus risk comfort and planning preferences."""
    return {
        "basicContext": {
            "firstName": "Morgan",
            "birthDate": "1968-11-30",
            "maritalStatus": "married",
            "federalEmployee": {"agency": "VA", "retirementSystem": "FERS_RAE"},
            "dependents": [{"relationship": "child", "financiallyDependent": True}],
        },
        "valuesDiscovery": {
            "top10": [
                "growth_building_wealth",
                "freedom_financial_independence",
                "contribution_charitable_giving",
                "purpose_legacy_building",
                "health_access_healthcare",
            ],
            "top5": [
                "growth_building_wealth",
                "freedom_financial_independence",
                "contribution_charitable_giving",
                "purpose_legacy_building",
                "health_access_healthcare",
            ],
            "nonNegotiables": ["freedom_financial_independence", "purpose_legacy_building"],
        },
        "financialGoals": {
            "allGoals": [
                {
                    "id": "g-retire",
                    "label": "Retire by 62",
                    "category": "RETIREMENT",
                    "priority": "HIGH",
                    "timeHorizon": "MID",
                    "flexibility": "FLEXIBLE",
                },
                {
                    "id": "g-college",
                    "label": "College fund",
                    "category": "FAMILY_LEGACY",
                    "priority": "MEDIUM",
                    "timeHorizon": "MID",
                    "flexibility": "FIXED",
                },
            ],
            "coreGoals": [
                {
                    "id": "g-cabin",
                    "label": "Lake cabin",
                    "category": "MAJOR_PURCHASES",
                    "priority": "LOW",
                    "timeHorizon": "LONG",
                    "flexibility": "DEFERRABLE",
                    "isCorePlanningGoal": True,
                },
            ],
        },
        "financialPurpose": {
            "primaryDriver": "PROTECT_FAMILY",
            "tradeoffAnchors": [
                {"axis": "SECURITY_VS_GROWTH", "lean": "B", "strength": 4},
                {"axis": "CONTROL_STRUCTURE_VS_FLEXIBILITY", "lean": "NEUTRAL"},
            ],
            "finalText": "Money is a tool to keep my family secure and free to choose.",
        },
        "riskComfort": {
            "investmentRiskTolerance": 4,
            "incomeStabilityPreference": "prefer_growth",
            "guaranteedIncomeImportance": "somewhat_important",
        },
        "planningPreferences": {
            "complexityTolerance": 4,
            "advisorInvolvementDesire": "collaborative",
            "decisionMakingStyle": "analytical",
        },
    }


@pytest.fixture
def all_profiles(near_retirement_profile, dependents_profile, federal_profile, minimal_profile, full_profile):
    """Every profile that passes the completion gate."""
    return [
        near_retirement_profile,
        dependents_profile,
        federal_profile,
        minimal_profile,
        full_profile,
    ]

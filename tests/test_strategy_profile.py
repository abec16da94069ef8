"""Tests for the strategy profile generator."""

from discovery_mcp.engine.context import build_planning_context
from discovery_mcp.engine.strategy_profile import (
    calculate_complexity_tolerance,
    calculate_guidance_level,
    calculate_income_strategy,
    calculate_planning_flexibility,
    calculate_timing_sensitivity,
    generate_strategy_profile,
)
from discovery_mcp.models import (
    ComplexityTolerance,
    Confidence,
    GuidanceLevel,
    IncomeStrategyOrientation,
    IntakeRecord,
    PlanningFlexibility,
    TimingSensitivity,
)

from conftest import TODAY

MID_CAREER = {"firstName": "Ana", "birthDate": "1985-01-10"}


def _goal(goal_id: str, **kwargs) -> dict:
    return {"id": goal_id, "label": goal_id.title(), "priority": "MEDIUM", **kwargs}


class TestIncomeStrategy:
    """Tests for calculate_income_strategy."""

    def test_no_signals_is_balanced_low(self) -> None:
        context = build_planning_context(IntakeRecord(), TODAY)
        result = calculate_income_strategy(context)
        assert result.value is IncomeStrategyOrientation.BALANCED
        assert result.confidence is Confidence.LOW
        assert result.rationale == "No risk or income signals; balanced by default"

    def test_near_retirement_security_is_stability_focused(self, make_context, near_retirement_profile) -> None:
        result = calculate_income_strategy(make_context(near_retirement_profile))
        assert result.value is IncomeStrategyOrientation.STABILITY_FOCUSED
        assert result.confidence is Confidence.HIGH
        assert "Retirement within 5 years" in result.rationale

    def test_growth_values_and_long_horizon(self, make_context) -> None:
        profile = {
            "basicContext": MID_CAREER,
            "valuesDiscovery": {
                "top5": ["growth_building_wealth", "growth_new_ventures", "growth_reinvention"],
            },
        }
        result = calculate_income_strategy(make_context(profile))
        assert result.value is IncomeStrategyOrientation.GROWTH_FOCUSED
        assert result.confidence is Confidence.HIGH

    def test_mixed_signals_lower_confidence(self, make_context) -> None:
        """Growth values against a strong stability preference."""
        profile = {
            "basicContext": MID_CAREER,
            "valuesDiscovery": {"top5": ["growth_building_wealth", "growth_new_ventures"]},
            "riskComfort": {"incomeStabilityPreference": "strong_stability"},
        }
        result = calculate_income_strategy(make_context(profile))
        assert result.confidence is Confidence.MEDIUM

    def test_risk_tolerance_counts(self, make_context) -> None:
        profile = {
            "basicContext": MID_CAREER,
            "riskComfort": {"investmentRiskTolerance": 5, "incomeStabilityPreference": "prefer_growth"},
        }
        result = calculate_income_strategy(make_context(profile))
        assert result.value is IncomeStrategyOrientation.GROWTH_FOCUSED
        assert "High investment risk tolerance" in result.rationale


class TestTimingSensitivity:
    """Tests for calculate_timing_sensitivity."""

    def test_no_data(self) -> None:
        result = calculate_timing_sensitivity(build_planning_context(IntakeRecord(), TODAY))
        assert result.value is TimingSensitivity.MEDIUM
        assert result.confidence is Confidence.LOW
        assert result.rationale == "Limited timing data available"

    def test_short_high_goal_is_high(self, make_context, near_retirement_profile) -> None:
        result = calculate_timing_sensitivity(make_context(near_retirement_profile))
        assert result.value is TimingSensitivity.HIGH
        assert result.confidence is Confidence.HIGH
        assert "Retire at 65" in result.rationale

    def test_long_flexible_goals_are_low(self, make_context) -> None:
        profile = {
            "basicContext": MID_CAREER,
            "financialGoals": {
                "allGoals": [
                    _goal("travel", timeHorizon="LONG", flexibility="FLEXIBLE"),
                    _goal("boat", timeHorizon="ONGOING", flexibility="DEFERABLE"),
                ],
            },
        }
        result = calculate_timing_sensitivity(make_context(profile))
        assert result.value is TimingSensitivity.LOW
        assert result.confidence is Confidence.HIGH

    def test_long_flexible_without_birth_date_is_medium_confidence(self, make_context) -> None:
        profile = {
            "financialGoals": {"allGoals": [_goal("travel", timeHorizon="LONG", flexibility="FLEXIBLE")]},
        }
        result = calculate_timing_sensitivity(make_context(profile))
        assert result.value is TimingSensitivity.LOW
        assert result.confidence is Confidence.MEDIUM

    def test_na_goals_are_ignored(self, make_context) -> None:
        """Goals marked NA do not drive timing."""
        profile = {
            "financialGoals": {
                "allGoals": [{"id": "g1", "priority": "NA", "timeHorizon": "SHORT", "flexibility": "FIXED"}],
            },
        }
        result = calculate_timing_sensitivity(make_context(profile))
        assert result.value is TimingSensitivity.MEDIUM
        assert result.confidence is Confidence.LOW


class TestPlanningFlexibility:
    """Tests for calculate_planning_flexibility."""

    def test_flexible_goals_are_high(self, make_context) -> None:
        profile = {
            "financialGoals": {
                "allGoals": [
                    _goal("a", flexibility="FLEXIBLE"),
                    _goal("b", flexibility="DEFERRABLE"),
                    _goal("c", flexibility="FLEXIBLE"),
                ],
            },
        }
        result = calculate_planning_flexibility(make_context(profile))
        assert result.value is PlanningFlexibility.HIGH
        assert result.confidence is Confidence.HIGH

    def test_fixed_goals_and_dependents_are_low(self, make_context) -> None:
        profile = {
            "basicContext": {"dependents": [{"financiallyDependent": True}]},
            "financialGoals": {
                "allGoals": [
                    _goal("a", flexibility="FIXED"),
                    _goal("b", flexibility="FIXED"),
                    _goal("c", flexibility="FIXED"),
                ],
            },
        }
        result = calculate_planning_flexibility(make_context(profile))
        assert result.value is PlanningFlexibility.LOW
        assert "Financially dependent family members" in result.rationale

    def test_no_data_is_moderate_low(self) -> None:
        result = calculate_planning_flexibility(build_planning_context(IntakeRecord(), TODAY))
        assert result.value is PlanningFlexibility.MODERATE
        assert result.confidence is Confidence.LOW
        assert result.rationale == "Based on available data"

    def test_structure_anchor_pulls_low(self, make_context) -> None:
        profile = {
            "financialPurpose": {
                "tradeoffAnchors": [{"axis": "CONTROL_STRUCTURE_VS_FLEXIBILITY", "lean": "A", "strength": 5}],
            },
        }
        result = calculate_planning_flexibility(make_context(profile))
        assert result.value is PlanningFlexibility.LOW


class TestComplexityTolerance:
    """Tests for calculate_complexity_tolerance."""

    def test_direct_rating_wins(self, make_context) -> None:
        result = calculate_complexity_tolerance(make_context({"planningPreferences": {"complexityTolerance": 5}}))
        assert result.value is ComplexityTolerance.ADVANCED
        assert result.confidence is Confidence.HIGH

    def test_direct_rating_against_signals_is_medium(self, make_context) -> None:
        profile = {
            "valuesDiscovery": {"top5": ["security_stable_income", "security_debt_reduction"]},
            "planningPreferences": {"complexityTolerance": 5},
        }
        result = calculate_complexity_tolerance(make_context(profile))
        assert result.value is ComplexityTolerance.ADVANCED
        assert result.confidence is Confidence.MEDIUM

    def test_inferred_from_control_values(self, make_context) -> None:
        profile = {"valuesDiscovery": {"top5": ["control_clear_plan", "control_tax_management"]}}
        result = calculate_complexity_tolerance(make_context(profile))
        assert result.value is ComplexityTolerance.ADVANCED
        assert result.confidence is Confidence.MEDIUM

    def test_default(self) -> None:
        result = calculate_complexity_tolerance(build_planning_context(IntakeRecord(), TODAY))
        assert result.value is ComplexityTolerance.MODERATE
        assert result.confidence is Confidence.LOW

    def test_low_rating_is_simple(self, make_context) -> None:
        result = calculate_complexity_tolerance(make_context({"planningPreferences": {"complexityTolerance": 1}}))
        assert result.value is ComplexityTolerance.SIMPLE


class TestGuidanceLevel:
    """Tests for calculate_guidance_level."""

    def test_delegated_is_high(self, make_context) -> None:
        profile = {"planningPreferences": {"advisorInvolvementDesire": "delegated"}}
        assert calculate_guidance_level(make_context(profile)).value is GuidanceLevel.HIGH

    def test_diy_analytical_is_low(self, make_context) -> None:
        profile = {"planningPreferences": {"advisorInvolvementDesire": "diy", "decisionMakingStyle": "analytical"}}
        result = calculate_guidance_level(make_context(profile))
        assert result.value is GuidanceLevel.LOW
        assert "Analytical decision style" in result.rationale

    def test_guidance_shifted_by_consultative_style(self, make_context) -> None:
        profile = {
            "planningPreferences": {"advisorInvolvementDesire": "guidance", "decisionMakingStyle": "consultative"},
        }
        assert calculate_guidance_level(make_context(profile)).value is GuidanceLevel.HIGH

    def test_inferred_low_from_control_and_non_negotiables(self, make_context) -> None:
        profile = {
            "valuesDiscovery": {
                "top5": ["control_clear_plan", "control_organized_finances"],
                "nonNegotiables": ["control_clear_plan", "control_organized_finances"],
            },
            "financialPurpose": {"finalText": "Own every decision."},
        }
        result = calculate_guidance_level(make_context(profile))
        assert result.value is GuidanceLevel.LOW
        assert result.confidence is Confidence.MEDIUM

    def test_missing_purpose_alone_stays_moderate(self) -> None:
        result = calculate_guidance_level(build_planning_context(IntakeRecord(), TODAY))
        assert result.value is GuidanceLevel.MODERATE
        assert result.confidence is Confidence.LOW


class TestGenerateStrategyProfile:
    """Tests for generate_strategy_profile and the summary."""

    def test_all_dimensions_present(self, make_context, full_profile) -> None:
        result = generate_strategy_profile(make_context(full_profile)).to_dict()
        for key in (
            "incomeStrategy",
            "timingSensitivity",
            "planningFlexibility",
            "complexityTolerance",
            "guidanceLevel",
        ):
            assert set(result[key]) == {"value", "confidence", "rationale"}
            assert result[key]["rationale"]
        assert result["summary"]

    def test_summary_mentions_limited_flexibility(self, make_context) -> None:
        profile = {
            "basicContext": {"dependents": [{"financiallyDependent": True}]},
            "financialGoals": {
                "allGoals": [
                    _goal("a", flexibility="FIXED"),
                    _goal("b", flexibility="FIXED"),
                    _goal("c", flexibility="FIXED"),
                ],
            },
        }
        summary = generate_strategy_profile(make_context(profile)).summary
        assert "and limited flexibility for major changes." in summary

    def test_stability_summary(self, make_context, near_retirement_profile) -> None:
        summary = generate_strategy_profile(make_context(near_retirement_profile)).summary
        assert summary.startswith("Planning should prioritize income stability over growth")

    def test_deterministic(self, make_context, full_profile) -> None:
        first = generate_strategy_profile(make_context(full_profile))
        second = generate_strategy_profile(make_context(full_profile))
        assert first == second

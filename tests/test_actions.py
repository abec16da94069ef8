"""Tests for the action recommendation generator."""

from collections import Counter

from discovery_mcp.data.action_templates import ACTION_TEMPLATES, ActionConditions
from discovery_mcp.engine.actions import (
    DEFAULT_GOAL_NAME,
    DEFAULT_VALUE_NAME,
    URGENCY_ORDER,
    generate_action_recommendations,
    meets_conditions,
    primary_goal_name,
    primary_value_name,
    resolve_guidance,
)
from discovery_mcp.engine.planning_focus import generate_focus_area_ranking
from discovery_mcp.models import (
    ActionGuidance,
    ActionType,
    ActionUrgency,
    GoalCategory,
    PlanningDomain,
    ValueCategory,
)


def _actions(context):
    return generate_action_recommendations(context, generate_focus_area_ranking(context))


class TestGuidance:
    """Tests for resolve_guidance."""

    def test_professional_review_never_self_guided(self) -> None:
        for template in ACTION_TEMPLATES.values():
            if template.type is ActionType.PROFESSIONAL_REVIEW:
                assert resolve_guidance(template) is not ActionGuidance.SELF_GUIDED

    def test_specialist_templates(self) -> None:
        assert resolve_guidance(ACTION_TEMPLATES["estate-documents-review"]) is ActionGuidance.SPECIALIST_GUIDED
        assert resolve_guidance(ACTION_TEMPLATES["tax-strategy-review"]) is ActionGuidance.SPECIALIST_GUIDED

    def test_type_defaults(self) -> None:
        assert resolve_guidance(ACTION_TEMPLATES["emergency-fund-target"]) is ActionGuidance.SELF_GUIDED
        assert resolve_guidance(ACTION_TEMPLATES["retirement-income-sources"]) is ActionGuidance.SELF_GUIDED
        assert resolve_guidance(ACTION_TEMPLATES["insurance-coverage-review"]) is ActionGuidance.ADVISOR_GUIDED
        assert resolve_guidance(ACTION_TEMPLATES["life-insurance-needs"]) is ActionGuidance.ADVISOR_GUIDED


class TestConditions:
    """Tests for meets_conditions."""

    def test_no_conditions_always_eligible(self, make_context) -> None:
        assert meets_conditions(ActionConditions(), make_context({})) is True

    def test_married_required(self, make_context) -> None:
        conditions = ActionConditions(married=True)
        assert meets_conditions(conditions, make_context({"basicContext": {"maritalStatus": "single"}})) is False
        assert meets_conditions(conditions, make_context({"basicContext": {"maritalStatus": "Married"}})) is True

    def test_dependents_must_be_financially_dependent(self, make_context) -> None:
        conditions = ActionConditions(dependents=True)
        not_dependent = {"basicContext": {"dependents": [{"financiallyDependent": False}]}}
        assert meets_conditions(conditions, make_context(not_dependent)) is False

    def test_value_category_in_top5(self, make_context) -> None:
        conditions = ActionConditions(value_category=ValueCategory.HEALTH)
        top10_only = {"valuesDiscovery": {"top10": ["health_preventive_care"], "top5": ["qol_hobbies"]}}
        top5 = {"valuesDiscovery": {"top5": ["health_preventive_care"]}}
        assert meets_conditions(conditions, make_context(top10_only)) is False
        assert meets_conditions(conditions, make_context(top5)) is True

    def test_high_priority_goal_category(self, make_context) -> None:
        conditions = ActionConditions(high_priority_goal_category=GoalCategory.CAREER_GROWTH)
        medium = {"financialGoals": {"allGoals": [{"id": "g", "category": "CAREER_GROWTH", "priority": "MEDIUM"}]}}
        high = {"financialGoals": {"allGoals": [{"id": "g", "category": "CAREER_GROWTH", "priority": "HIGH"}]}}
        assert meets_conditions(conditions, make_context(medium)) is False
        assert meets_conditions(conditions, make_context(high)) is True

    def test_near_retirement_uses_ten_year_window(self, make_context) -> None:
        conditions = ActionConditions(near_retirement=True)
        # 57 on the reference date: 8 years to retirement
        assert meets_conditions(conditions, make_context({"basicContext": {"birthDate": "1969-01-01"}})) is True
        assert meets_conditions(conditions, make_context({"basicContext": {"birthDate": "1980-01-01"}})) is False


class TestRationale:
    """Rationale interpolation of the client's value and goal."""

    def test_defaults(self, make_context) -> None:
        context = make_context({})
        assert primary_value_name(context) == DEFAULT_VALUE_NAME
        assert primary_goal_name(context) == DEFAULT_GOAL_NAME

    def test_unknown_top_card_skipped(self, make_context) -> None:
        context = make_context({"valuesDiscovery": {"top5": ["mystery_card", "qol_hobbies"]}})
        assert primary_value_name(context) == "enjoyment of hobbies"

    def test_interpolated(self, make_context, near_retirement_profile) -> None:
        result = _actions(make_context(near_retirement_profile))
        sources = next(a for a in result.recommendations if a.id == "retirement-income-sources")
        assert "financial security" in sources.rationale
        assert "Retire at 65" in sources.rationale
        assert "{" not in sources.rationale


class TestGenerateActions:
    """Tests for generate_action_recommendations."""

    def test_near_retirement(self, make_context, near_retirement_profile) -> None:
        result = _actions(make_context(near_retirement_profile))
        ids = [a.id for a in result.recommendations]
        assert ids[:2] == ["retirement-income-sources", "retirement-income-strategy"]
        assert result.recommendations[0].urgency is ActionUrgency.IMMEDIATE
        strategy = result.recommendations[1]
        assert strategy.dependencies == ("retirement-income-sources",)
        assert strategy.goal_connections == ("g-retire",)

    def test_spousal_action_for_married_client(self, make_context, near_retirement_profile) -> None:
        """Two slots per domain: the spousal review is not reached under retirement income."""
        ids = [a.id for a in _actions(make_context(near_retirement_profile)).recommendations]
        assert ids.count("retirement-income-sources") == 1
        assert "spousal-survivor-benefits" not in ids

    def test_dependents_get_life_insurance(self, make_context, dependents_profile) -> None:
        ids = [a.id for a in _actions(make_context(dependents_profile)).recommendations]
        assert "insurance-coverage-review" in ids
        assert "life-insurance-needs" in ids

    def test_federal_benefits_first(self, make_context, federal_profile) -> None:
        result = _actions(make_context(federal_profile))
        first = result.recommendations[0]
        assert first.id == "federal-benefits-analysis"
        assert first.domain is PlanningDomain.BENEFITS_OPTIMIZATION
        assert first.guidance is ActionGuidance.SPECIALIST_GUIDED
        assert first.urgency is ActionUrgency.IMMEDIATE

    def test_caps_and_uniqueness(self, make_context, all_profiles) -> None:
        for profile in all_profiles:
            result = _actions(make_context(profile))
            ids = [a.id for a in result.recommendations]
            assert len(ids) <= 7
            assert len(ids) == len(set(ids))
            assert max(Counter(a.domain for a in result.recommendations).values()) <= 2
            assert list(result.top_actions) == ids[:5]

    def test_sorted_by_urgency(self, make_context, all_profiles) -> None:
        for profile in all_profiles:
            result = _actions(make_context(profile))
            order = [URGENCY_ORDER[a.urgency] for a in result.recommendations]
            assert order == sorted(order)

    def test_connections_copied_from_focus_area(self, make_context, full_profile) -> None:
        context = make_context(full_profile)
        ranking = generate_focus_area_ranking(context)
        result = generate_action_recommendations(context, ranking)
        for action in result.recommendations:
            area = ranking.area_for(action.domain)
            assert action.value_connections == area.value_connections
            assert action.goal_connections == area.goal_connections

    def test_to_dict_shape(self, make_context, near_retirement_profile) -> None:
        result = _actions(make_context(near_retirement_profile)).to_dict()
        assert set(result) == {"recommendations", "topActions"}
        first = result["recommendations"][0]
        assert first["dependencies"] is None
        assert first["type"] == "EDUCATION"
        assert first["domain"] == "RETIREMENT_INCOME"

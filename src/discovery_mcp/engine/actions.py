"""Action recommendation generator.

Walks the focus ranking from the top, pulling at most two eligible templates
per domain until the action cap is reached. Urgency follows the domain's
importance; connections are copied from the domain's focus area.
"""

from discovery_mcp.data.action_templates import (
    ACTION_TEMPLATES,
    DOMAIN_ACTION_TABLE,
    ActionConditions,
    ActionTemplate,
)
from discovery_mcp.data.value_cards import get_card
from discovery_mcp.engine.context import PlanningContext
from discovery_mcp.models import (
    ActionGuidance,
    ActionRecommendation,
    ActionRecommendations,
    ActionType,
    ActionUrgency,
    FocusArea,
    FocusRanking,
    Importance,
)

MAX_ACTIONS = 7
MAX_ACTIONS_PER_DOMAIN = 2
MAX_TOP_ACTIONS = 5

DEFAULT_VALUE_NAME = "financial security"
DEFAULT_GOAL_NAME = "your financial goals"

URGENCY_BY_IMPORTANCE = {
    Importance.CRITICAL: ActionUrgency.IMMEDIATE,
    Importance.HIGH: ActionUrgency.NEAR_TERM,
    Importance.MODERATE: ActionUrgency.MEDIUM_TERM,
    Importance.LOW: ActionUrgency.ONGOING,
}

URGENCY_ORDER = {
    ActionUrgency.IMMEDIATE: 0,
    ActionUrgency.NEAR_TERM: 1,
    ActionUrgency.MEDIUM_TERM: 2,
    ActionUrgency.ONGOING: 3,
}

GUIDANCE_BY_TYPE = {
    ActionType.EDUCATION: ActionGuidance.SELF_GUIDED,
    ActionType.STRUCTURAL: ActionGuidance.SELF_GUIDED,
    ActionType.DECISION_PREP: ActionGuidance.ADVISOR_GUIDED,
    ActionType.OPTIMIZATION: ActionGuidance.ADVISOR_GUIDED,
    ActionType.PROFESSIONAL_REVIEW: ActionGuidance.ADVISOR_GUIDED,
}


def meets_conditions(conditions: ActionConditions, context: PlanningContext) -> bool:
    """Check every requirement a template sets."""
    if conditions.near_retirement and not context.near_retirement:
        return False
    if conditions.federal_employee and not context.is_federal_employee:
        return False
    if conditions.dependents and context.financially_dependent_count == 0:
        return False
    if conditions.married and not context.record.is_married:
        return False
    if conditions.value_category is not None and not context.has_top5_category(conditions.value_category):
        return False
    if conditions.high_priority_goal_category is not None and not context.has_high_priority_goal_category(
        conditions.high_priority_goal_category
    ):
        return False
    return True


def resolve_guidance(template: ActionTemplate) -> ActionGuidance:
    if template.specialist:
        return ActionGuidance.SPECIALIST_GUIDED
    guidance = GUIDANCE_BY_TYPE[template.type]
    if template.type is ActionType.PROFESSIONAL_REVIEW and guidance is ActionGuidance.SELF_GUIDED:
        return ActionGuidance.ADVISOR_GUIDED
    return guidance


def primary_value_name(context: PlanningContext) -> str:
    """Lowercased title of the client's first recognised top value."""
    for card_id in context.record.top5:
        card = get_card(card_id)
        if card is not None:
            return card.title.lower()
    return DEFAULT_VALUE_NAME


def primary_goal_name(context: PlanningContext) -> str:
    for goal in context.high_priority_goals:
        if goal.label:
            return goal.label
    return DEFAULT_GOAL_NAME


def _build_action(
    template: ActionTemplate,
    area: FocusArea,
    value_name: str,
    goal_name: str,
) -> ActionRecommendation:
    rationale = template.rationale_template.replace("{value}", value_name).replace("{goal}", goal_name)
    return ActionRecommendation(
        id=template.id,
        title=template.title,
        description=template.description,
        rationale=rationale,
        outcome=template.outcome,
        type=template.type,
        guidance=resolve_guidance(template),
        urgency=URGENCY_BY_IMPORTANCE[area.importance],
        domain=area.domain,
        value_connections=area.value_connections,
        goal_connections=area.goal_connections,
        dependencies=template.dependencies,
    )


def collect_candidates(context: PlanningContext, focus: FocusRanking) -> list[tuple[ActionRecommendation, int]]:
    """Eligible actions paired with their domain priority, in walk order."""
    value_name = primary_value_name(context)
    goal_name = primary_goal_name(context)

    candidates: list[tuple[ActionRecommendation, int]] = []
    seen: set[str] = set()

    for area in sorted(focus.areas, key=lambda a: a.priority):
        taken = 0
        for listing in DOMAIN_ACTION_TABLE[area.domain]:
            if taken == MAX_ACTIONS_PER_DOMAIN or len(candidates) == MAX_ACTIONS:
                break
            if listing.template_id in seen or area.priority > listing.max_priority:
                continue
            template = ACTION_TEMPLATES[listing.template_id]
            if not meets_conditions(template.conditions, context):
                continue
            candidates.append((_build_action(template, area, value_name, goal_name), area.priority))
            seen.add(template.id)
            taken += 1
        if len(candidates) == MAX_ACTIONS:
            break

    return candidates


def generate_action_recommendations(context: PlanningContext, focus: FocusRanking) -> ActionRecommendations:
    """
    Build up to seven next steps from the focus ranking.

    Args:
        context: Planning context for the intake record
        focus: Focus ranking produced for the same record

    Returns:
        ActionRecommendations ordered by urgency then domain priority
    """
    candidates = collect_candidates(context, focus)
    candidates.sort(key=lambda c: (URGENCY_ORDER[c[0].urgency], c[1]))
    recommendations = tuple(action for action, _ in candidates[:MAX_ACTIONS])

    return ActionRecommendations(
        recommendations=recommendations,
        top_actions=tuple(action.id for action in recommendations[:MAX_TOP_ACTIONS]),
    )

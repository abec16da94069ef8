"""Planning Focus ranker.

Scores the nine planning domains from values, goals and life context, then
ranks them. Equal scores fall back to DOMAIN_ORDER so identical input always
yields the same ranking.
"""

from dataclasses import dataclass, field

from discovery_mcp.data.domains import (
    DOMAIN_ORDER,
    GOAL_DOMAIN_MAP,
    SHORT_HORIZON_GOAL_DOMAIN_OVERRIDES,
    VALUE_DOMAIN_MAP,
    domain_rank,
)
from discovery_mcp.data.value_cards import get_card_category
from discovery_mcp.engine.context import (
    APPROACHING_RETIREMENT_YEARS,
    NEAR_RETIREMENT_YEARS,
    PlanningContext,
)
from discovery_mcp.engine.values import CATEGORY_ORDER
from discovery_mcp.models import (
    FocusArea,
    FocusRanking,
    GoalPriority,
    GoalTimeHorizon,
    Importance,
    PlanningDomain,
    ValueCategory,
)

# Value weights
TOP5_CATEGORY_POINTS = 3
TOP10_CATEGORY_POINTS = 1
NON_NEGOTIABLE_BONUS = 1
VALUE_POINTS_CAP = 6

# Goal weights
PRIORITY_POINTS = {GoalPriority.HIGH: 3, GoalPriority.MEDIUM: 2, GoalPriority.LOW: 1}
HORIZON_BONUS = {GoalTimeHorizon.SHORT: 2, GoalTimeHorizon.MID: 1}
CORE_GOAL_BONUS = 1
GOAL_POINTS_CAP = 8

# Context boosts
IMMINENT_RETIREMENT_BOOST = 14
PRE_RETIREMENT_HEALTHCARE_BOOST = 3
PRE_RETIREMENT_TAX_BOOST = 2
APPROACHING_RETIREMENT_BOOST = 4
DEPENDENTS_ESTATE_BOOST = 3
MARRIED_ESTATE_BOOST = 1

# Strictly above any domain that has no boost of this size: capped value and
# goal points plus the largest sum of minor boosts (estate: dependents + married).
# Only retirement income and the other protected domain can outrank it, so a
# protected domain never falls below priority 3.
PROTECTED_DOMAIN_BOOST = (
    VALUE_POINTS_CAP + GOAL_POINTS_CAP + DEPENDENTS_ESTATE_BOOST + MARRIED_ESTATE_BOOST + 1
)
DEPENDENTS_INSURANCE_BOOST = PROTECTED_DOMAIN_BOOST
FEDERAL_BENEFITS_BOOST = PROTECTED_DOMAIN_BOOST

# Importance bands
CRITICAL_MIN_SCORE = 12
CRITICAL_MAX_PRIORITY = 3
HIGH_MIN_SCORE = 7
MODERATE_MIN_SCORE = 3

TOP_PRIORITY_CUTOFF = 3
MAX_RATIONALE_FACTORS = 3
NO_SIGNAL_RATIONALE = "No strong signal; default consideration."

# Domains that carry a warning while their score stays below the threshold
LOW_SCORE_RISKS: tuple[tuple[PlanningDomain, int, str], ...] = (
    (PlanningDomain.INSURANCE_RISK, 3, "Underinsurance poses significant financial risk"),
    (PlanningDomain.ESTATE_LEGACY, 3, "Lack of estate documents can cause complications"),
    (PlanningDomain.CASH_FLOW_DEBT, 2, "Cash flow management is foundational to all planning"),
)


@dataclass
class _DomainScore:
    domain: PlanningDomain
    score: int = 0
    value_points: int = 0
    goal_points: int = 0
    value_connections: list[str] = field(default_factory=list)
    goal_connections: list[str] = field(default_factory=list)
    factors: list[tuple[int, str]] = field(default_factory=list)
    risk_factors: list[str] = field(default_factory=list)

    def boost(self, points: int, reason: str) -> None:
        if points <= 0:
            return
        self.score += points
        self.factors.append((points, reason))

    def add_value_points(self, points: int, reason: str) -> None:
        applied = min(points, VALUE_POINTS_CAP - self.value_points)
        self.value_points += max(applied, 0)
        self.boost(applied, reason)

    def add_goal_points(self, points: int, reason: str) -> None:
        applied = min(points, GOAL_POINTS_CAP - self.goal_points)
        self.goal_points += max(applied, 0)
        self.boost(applied, reason)

    def connect_value(self, card_id: str) -> None:
        if card_id not in self.value_connections:
            self.value_connections.append(card_id)

    def connect_goal(self, goal_id: str) -> None:
        if goal_id not in self.goal_connections:
            self.goal_connections.append(goal_id)

    def rationale(self) -> str:
        """Strongest factor first, then up to two more, without repeats."""
        if self.score == 0:
            return NO_SIGNAL_RATIONALE
        ordered = sorted(self.factors, key=lambda f: -f[0])
        reasons: list[str] = []
        for _, reason in ordered:
            if reason not in reasons:
                reasons.append(reason)
            if len(reasons) == MAX_RATIONALE_FACTORS:
                break
        return "; ".join(reasons)


def _category_label(category: ValueCategory) -> str:
    return category.value.replace("_", " ").capitalize()


def _score_values(scores: dict[PlanningDomain, _DomainScore], context: PlanningContext) -> None:
    values_discovery = context.record.values_discovery
    if values_discovery is None:
        return
    profile = context.values

    for category in CATEGORY_ORDER:
        in_top5 = profile.top5_counts[category] > 0
        in_top10 = profile.top10_counts[category] > 0
        in_non_negotiables = profile.non_negotiable_counts[category] > 0

        if in_top5:
            points = TOP5_CATEGORY_POINTS
        elif in_top10:
            points = TOP10_CATEGORY_POINTS
        else:
            points = 0
        if in_non_negotiables:
            points += NON_NEGOTIABLE_BONUS
        if points == 0:
            continue

        card_ids = [
            card_id
            for card_id in dict.fromkeys(
                values_discovery.top5 + values_discovery.top10 + values_discovery.non_negotiables
            )
            if get_card_category(card_id) is category
        ]
        reason = f"{_category_label(category)} values emphasize this area"
        for domain in VALUE_DOMAIN_MAP[category]:
            entry = scores[domain]
            entry.add_value_points(points, reason)
            for card_id in card_ids:
                entry.connect_value(card_id)


def _score_goals(scores: dict[PlanningDomain, _DomainScore], context: PlanningContext) -> None:
    for goal in context.prioritized_goals:
        if goal.category is None:
            continue
        points = PRIORITY_POINTS[goal.priority] + HORIZON_BONUS.get(goal.time_horizon, 0)
        if goal.is_core_planning_goal:
            points += CORE_GOAL_BONUS

        domains = GOAL_DOMAIN_MAP[goal.category]
        if goal.time_horizon is GoalTimeHorizon.SHORT:
            domains = SHORT_HORIZON_GOAL_DOMAIN_OVERRIDES.get(goal.category, domains)
            reason = f"Near-term goal: {goal.label or goal.id}"
        else:
            reason = f"Supports goal: {goal.label or goal.id}"

        for domain in domains:
            entry = scores[domain]
            entry.add_goal_points(points, reason)
            entry.connect_goal(goal.id)


def _score_context(scores: dict[PlanningDomain, _DomainScore], context: PlanningContext) -> None:
    retirement = scores[PlanningDomain.RETIREMENT_INCOME]
    age_based = context.retirement_within(NEAR_RETIREMENT_YEARS)

    if age_based or context.has_short_retirement_goal:
        reason = "Retirement within 5 years" if age_based else "Near-term retirement goal"
        retirement.boost(IMMINENT_RETIREMENT_BOOST, reason)
        retirement.risk_factors.append("Critical timing - income strategy decisions are imminent")
        if age_based:
            scores[PlanningDomain.HEALTHCARE_LTC].boost(
                PRE_RETIREMENT_HEALTHCARE_BOOST, "Healthcare planning critical before retirement"
            )
            scores[PlanningDomain.TAX_OPTIMIZATION].boost(
                PRE_RETIREMENT_TAX_BOOST, "Tax strategy important during retirement transition"
            )
    elif context.retirement_within(APPROACHING_RETIREMENT_YEARS):
        retirement.boost(APPROACHING_RETIREMENT_BOOST, "Retirement within 10 years")

    dependents = context.financially_dependent_count
    if dependents > 0:
        noun = "dependent" if dependents == 1 else "dependents"
        insurance = scores[PlanningDomain.INSURANCE_RISK]
        insurance.boost(DEPENDENTS_INSURANCE_BOOST, f"{dependents} financially dependent {noun} to protect")
        insurance.risk_factors.append("Dependents require adequate protection")
        scores[PlanningDomain.ESTATE_LEGACY].boost(
            DEPENDENTS_ESTATE_BOOST, "Estate planning important with dependents"
        )

    if context.is_federal_employee:
        benefits = scores[PlanningDomain.BENEFITS_OPTIMIZATION]
        benefits.boost(FEDERAL_BENEFITS_BOOST, "Federal employee with complex benefit structure")
        benefits.risk_factors.append("Federal benefits require specialized optimization")

    if context.record.is_married:
        scores[PlanningDomain.ESTATE_LEGACY].boost(
            MARRIED_ESTATE_BOOST, "Married - coordinated estate planning beneficial"
        )


def _add_low_score_risks(scores: dict[PlanningDomain, _DomainScore]) -> None:
    for domain, threshold, risk in LOW_SCORE_RISKS:
        if scores[domain].score < threshold:
            scores[domain].risk_factors.append(risk)


def score_to_importance(score: int, priority: int) -> Importance:
    """Band a score. Only top-ranked domains with a high absolute score are CRITICAL."""
    if score >= CRITICAL_MIN_SCORE and priority <= CRITICAL_MAX_PRIORITY:
        return Importance.CRITICAL
    if score >= HIGH_MIN_SCORE:
        return Importance.HIGH
    if score >= MODERATE_MIN_SCORE:
        return Importance.MODERATE
    return Importance.LOW


def score_domains(context: PlanningContext) -> dict[PlanningDomain, _DomainScore]:
    scores = {domain: _DomainScore(domain) for domain in DOMAIN_ORDER}
    _score_values(scores, context)
    _score_goals(scores, context)
    _score_context(scores, context)
    _add_low_score_risks(scores)
    return scores


def generate_focus_area_ranking(context: PlanningContext) -> FocusRanking:
    """
    Rank all nine planning domains.

    Returns:
        FocusRanking with priorities 1..9 and the domains ranked 1-3 as top priorities
    """
    scores = score_domains(context)
    ordered = sorted(scores.values(), key=lambda s: (-s.score, domain_rank(s.domain)))

    areas = []
    for priority, entry in enumerate(ordered, start=1):
        areas.append(
            FocusArea(
                domain=entry.domain,
                priority=priority,
                importance=score_to_importance(entry.score, priority),
                rationale=entry.rationale(),
                value_connections=tuple(entry.value_connections),
                goal_connections=tuple(entry.goal_connections),
                risk_factors=tuple(entry.risk_factors) if entry.risk_factors else None,
                score=entry.score,
            )
        )

    top_priorities = tuple(area.domain for area in areas if area.priority <= TOP_PRIORITY_CUTOFF)
    return FocusRanking(areas=tuple(areas), top_priorities=top_priorities)

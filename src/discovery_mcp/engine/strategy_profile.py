"""Strategy Profile generator.

Maps intake signals onto five planning-posture dimensions. Every dimension is
scored from a fixed set of weighted signals; the rationale lists the signals
that fired, in the order they were evaluated.

Confidence:
    HIGH   - signals are present and point the same way (or a direct answer
             is corroborated by inferred signals)
    MEDIUM - value is partially inferred, or signals disagree
    LOW    - no usable signal; the default value is reported
"""

import operator
from dataclasses import dataclass, field

from discovery_mcp.engine.context import (
    APPROACHING_RETIREMENT_YEARS,
    LONG_HORIZON_YEARS,
    NEAR_RETIREMENT_YEARS,
    PlanningContext,
)
from discovery_mcp.models import (
    ComplexityTolerance,
    Confidence,
    DecisionStyle,
    GoalFlexibility,
    GoalTimeHorizon,
    GuidanceLevel,
    ImportanceLevel,
    IncomeStrategyOrientation,
    InvolvementLevel,
    PlanningFlexibility,
    StabilityPreference,
    StrategyDimension,
    StrategyProfile,
    TimingSensitivity,
    TradeoffAxis,
    TradeoffLean,
    ValueCategory,
)
from discovery_mcp.utils.validators import check_rule

# Net score needed to leave the middle value
INCOME_NET_THRESHOLD = 3
FLEXIBILITY_THRESHOLD = 2

_FLEXIBLE = (GoalFlexibility.FLEXIBLE, GoalFlexibility.DEFERABLE)
_LONG_HORIZONS = (GoalTimeHorizon.LONG, GoalTimeHorizon.ONGOING)

_STABILITY_PREFERENCE_POINTS = {
    StabilityPreference.STRONG_STABILITY: -3,
    StabilityPreference.PREFER_STABILITY: -2,
    StabilityPreference.BALANCED: 0,
    StabilityPreference.PREFER_GROWTH: 2,
    StabilityPreference.STRONG_GROWTH: 3,
}

_GUARANTEED_INCOME_POINTS = {
    ImportanceLevel.CRITICAL: 2,
    ImportanceLevel.VERY_IMPORTANT: 1,
}

# Advisor involvement -> guidance index (0 LOW, 1 MODERATE, >=2 HIGH)
_INVOLVEMENT_INDEX = {
    InvolvementLevel.DIY: 0,
    InvolvementLevel.GUIDANCE: 1,
    InvolvementLevel.COLLABORATIVE: 2,
    InvolvementLevel.DELEGATED: 3,
}

_DECISION_STYLE_SHIFT = {
    DecisionStyle.CONSULTATIVE: 1,
    DecisionStyle.DELIBERATE: 1,
    DecisionStyle.ANALYTICAL: -1,
    DecisionStyle.INTUITIVE: -1,
}

_INCOME_PHRASES = {
    IncomeStrategyOrientation.STABILITY_FOCUSED: "Planning should prioritize income stability over growth",
    IncomeStrategyOrientation.GROWTH_FOCUSED: "Planning can emphasize growth and optionality",
    IncomeStrategyOrientation.BALANCED: "Planning should balance income stability with growth opportunities",
}

_TIMING_PHRASES = {
    TimingSensitivity.HIGH: "with high sensitivity to timing and market conditions",
    TimingSensitivity.MEDIUM: "with moderate sensitivity to timing",
    TimingSensitivity.LOW: "with flexibility around timing",
}

_FLEXIBILITY_PHRASES = {
    PlanningFlexibility.HIGH: "The plan can be highly adaptable to changing conditions.",
    PlanningFlexibility.MODERATE: "The plan should maintain some structure while allowing adjustments.",
}

_COMPLEXITY_PHRASES = {
    ComplexityTolerance.SIMPLE: "Simple, predictable strategies are preferred.",
    ComplexityTolerance.MODERATE: "Moderate complexity in strategies is acceptable.",
    ComplexityTolerance.ADVANCED: "Advanced strategies can be considered.",
}

_GUIDANCE_PHRASES = {
    GuidanceLevel.HIGH: "Clear structure and ongoing guidance will be beneficial.",
    GuidanceLevel.MODERATE: "Some guidance on key decisions will be helpful.",
    GuidanceLevel.LOW: "Self-directed decision-making is comfortable.",
}


@dataclass
class _Signals:
    """Accumulates signed points and the reasons behind them."""

    score: int = 0
    positive: bool = False
    negative: bool = False
    reasons: list[str] = field(default_factory=list)

    def add(self, points: int, reason: str) -> None:
        if points == 0:
            return
        self.score += points
        if points > 0:
            self.positive = True
        else:
            self.negative = True
        self.reasons.append(reason)

    @property
    def fired(self) -> bool:
        return bool(self.reasons)

    @property
    def mixed(self) -> bool:
        return self.positive and self.negative

    def confidence(self, decisive_at: int) -> Confidence:
        if not self.fired:
            return Confidence.LOW
        if not self.mixed and abs(self.score) >= decisive_at:
            return Confidence.HIGH
        return Confidence.MEDIUM

    def rationale(self, default: str) -> str:
        return "; ".join(self.reasons) if self.reasons else default


def _anchor_lean(context: PlanningContext, axis: TradeoffAxis) -> int:
    """Signed lean for a tradeoff axis: negative toward option A, positive toward B."""
    purpose = context.record.financial_purpose
    anchor = purpose.anchor(axis) if purpose else None
    return anchor.signed_strength if anchor else 0


# ============================================================================
# DIMENSIONS
# ============================================================================


def calculate_income_strategy(context: PlanningContext) -> StrategyDimension:
    """Stability points count negative, growth points positive."""
    signals = _Signals()
    values = context.values
    risk = context.record.risk_comfort

    if values.is_leading(ValueCategory.SECURITY):
        signals.add(-3, "Security is a leading value")
    if values.is_leading(ValueCategory.GROWTH):
        signals.add(3, "Growth is a leading value")
    if values.is_leading(ValueCategory.FREEDOM):
        signals.add(2, "Freedom is a leading value")

    years = context.years_to_retirement
    if years is not None:
        if years <= NEAR_RETIREMENT_YEARS:
            signals.add(-3, "Retirement within 5 years")
        elif years <= APPROACHING_RETIREMENT_YEARS:
            signals.add(-1, "Retirement within 10 years")
        elif years > LONG_HORIZON_YEARS:
            signals.add(2, "Long time horizon (20+ years)")

    lean = _anchor_lean(context, TradeoffAxis.SECURITY_VS_GROWTH)
    if lean < 0:
        signals.add(-2, "Prefers certainty over upside")
    elif lean > 0:
        signals.add(2, "Accepts uncertainty for potential upside")

    if risk is not None:
        if risk.income_stability_preference is not None:
            points = _STABILITY_PREFERENCE_POINTS[risk.income_stability_preference]
            direction = "stable" if points < 0 else "growth-oriented"
            signals.add(points, f"Prefers {direction} income")
        if risk.guaranteed_income_importance in _GUARANTEED_INCOME_POINTS:
            signals.add(
                -_GUARANTEED_INCOME_POINTS[risk.guaranteed_income_importance],
                "Guaranteed income is important",
            )
        if check_rule(risk.investment_risk_tolerance, 4, operator.ge):
            signals.add(1, "High investment risk tolerance")

    goals = context.prioritized_goals
    if goals:
        short_or_fixed = sum(
            1 for g in goals
            if g.time_horizon is GoalTimeHorizon.SHORT or g.flexibility is GoalFlexibility.FIXED
        )
        long_and_flexible = sum(
            1 for g in goals if g.time_horizon in _LONG_HORIZONS and g.flexibility in _FLEXIBLE
        )
        if short_or_fixed * 2 > len(goals):
            signals.add(-1, "Most goals are near-term or fixed")
        elif long_and_flexible * 2 > len(goals):
            signals.add(2, "Goals skew long-term and flexible")

    if signals.score >= INCOME_NET_THRESHOLD:
        value = IncomeStrategyOrientation.GROWTH_FOCUSED
    elif signals.score <= -INCOME_NET_THRESHOLD:
        value = IncomeStrategyOrientation.STABILITY_FOCUSED
    else:
        value = IncomeStrategyOrientation.BALANCED

    return StrategyDimension(
        value=value,
        confidence=signals.confidence(decisive_at=INCOME_NET_THRESHOLD),
        rationale=signals.rationale("No risk or income signals; balanced by default"),
    )


def calculate_timing_sensitivity(context: PlanningContext) -> StrategyDimension:
    reasons = []

    for goal in context.high_priority_goals:
        if goal.time_horizon is GoalTimeHorizon.SHORT:
            reasons.append(f"High-priority goal is near-term: {goal.label or goal.id}")
        elif goal.flexibility is GoalFlexibility.FIXED:
            reasons.append(f"High-priority goal has fixed timing: {goal.label or goal.id}")
    if context.retirement_within(NEAR_RETIREMENT_YEARS):
        reasons.append("Retirement within 5 years")

    if reasons:
        return StrategyDimension(
            value=TimingSensitivity.HIGH,
            confidence=Confidence.HIGH,
            rationale="; ".join(reasons[:3]),
        )

    goals = context.prioritized_goals
    years = context.years_to_retirement
    all_long_and_flexible = bool(goals) and all(
        g.time_horizon in _LONG_HORIZONS and g.flexibility in _FLEXIBLE for g in goals
    )
    if all_long_and_flexible and (years is None or years > APPROACHING_RETIREMENT_YEARS):
        return StrategyDimension(
            value=TimingSensitivity.LOW,
            confidence=Confidence.HIGH if years is not None else Confidence.MEDIUM,
            rationale="All prioritized goals are long-term and flexible",
        )

    if context.retirement_within(APPROACHING_RETIREMENT_YEARS):
        rationale = "Retirement within 10 years"
    elif goals:
        rationale = "Mix of goal horizons and flexibility"
    else:
        return StrategyDimension(
            value=TimingSensitivity.MEDIUM,
            confidence=Confidence.LOW,
            rationale="Limited timing data available",
        )
    return StrategyDimension(value=TimingSensitivity.MEDIUM, confidence=Confidence.MEDIUM, rationale=rationale)


def calculate_planning_flexibility(context: PlanningContext) -> StrategyDimension:
    signals = _Signals()
    values = context.values

    rated = [g for g in context.goals if g.flexibility is not None]
    if rated:
        flexible = sum(1 for g in rated if g.flexibility in _FLEXIBLE)
        ratio = flexible / len(rated)
        magnitude = 2 if len(rated) >= 3 else 1
        if ratio >= 2 / 3:
            signals.add(magnitude, "Most goals are flexible or deferable")
        elif ratio <= 1 / 3:
            signals.add(-magnitude, "Most goals have fixed timing")

    dependents = context.financially_dependent_count
    if dependents >= 3:
        signals.add(-2, f"{dependents} financially dependent dependents")
    elif dependents >= 1:
        signals.add(-1, "Financially dependent family members")

    if values.is_leading(ValueCategory.CONTROL):
        signals.add(-1, "Control is a leading value")
    if values.is_leading(ValueCategory.FREEDOM):
        signals.add(1, "Freedom is a leading value")

    non_negotiables = context.record.values_discovery.non_negotiables if context.record.values_discovery else ()
    if len(non_negotiables) >= 3:
        signals.add(-1, "3 non-negotiable values")

    lean = _anchor_lean(context, TradeoffAxis.CONTROL_STRUCTURE_VS_FLEXIBILITY)
    if lean < 0:
        signals.add(lean, "Prefers structure over flexibility")
    elif lean > 0:
        signals.add(lean, "Prefers flexibility over structure")

    if signals.score >= FLEXIBILITY_THRESHOLD:
        value = PlanningFlexibility.HIGH
    elif signals.score <= -FLEXIBILITY_THRESHOLD:
        value = PlanningFlexibility.LOW
    else:
        value = PlanningFlexibility.MODERATE

    return StrategyDimension(
        value=value,
        confidence=signals.confidence(decisive_at=FLEXIBILITY_THRESHOLD),
        rationale=signals.rationale("Based on available data"),
    )


def _complexity_from_rating(rating: int) -> ComplexityTolerance:
    if rating <= 2:
        return ComplexityTolerance.SIMPLE
    if rating == 3:
        return ComplexityTolerance.MODERATE
    return ComplexityTolerance.ADVANCED


def calculate_complexity_tolerance(context: PlanningContext) -> StrategyDimension:
    signals = _Signals()
    values = context.values

    if values.is_leading(ValueCategory.CONTROL):
        signals.add(2, "Values having control over finances")
    if values.is_leading(ValueCategory.SECURITY):
        signals.add(-1, "Security-focused (simpler may be preferred)")
    if values.top5_counts[ValueCategory.GROWTH] >= 2:
        signals.add(1, "Growth-oriented mindset")
    if context.has_federal_retirement_system:
        signals.add(1, "Familiar with complex benefit systems")

    if signals.score >= 2:
        inferred = ComplexityTolerance.ADVANCED
    elif signals.score <= -1:
        inferred = ComplexityTolerance.SIMPLE
    else:
        inferred = ComplexityTolerance.MODERATE

    prefs = context.record.planning_preferences
    rating = prefs.complexity_tolerance if prefs else None
    if rating is not None:
        direct = _complexity_from_rating(rating)
        corroborated = not signals.fired or inferred is direct
        reasons = [f"Self-rated complexity tolerance {rating} of 5", *signals.reasons[:2]]
        return StrategyDimension(
            value=direct,
            confidence=Confidence.HIGH if corroborated else Confidence.MEDIUM,
            rationale="; ".join(reasons),
        )

    if signals.fired and inferred is not ComplexityTolerance.MODERATE:
        return StrategyDimension(value=inferred, confidence=Confidence.MEDIUM, rationale=signals.rationale(""))
    return StrategyDimension(
        value=ComplexityTolerance.MODERATE,
        confidence=Confidence.LOW,
        rationale=signals.rationale("Default moderate complexity"),
    )


def _guidance_from_index(index: int) -> GuidanceLevel:
    if index <= 0:
        return GuidanceLevel.LOW
    if index == 1:
        return GuidanceLevel.MODERATE
    return GuidanceLevel.HIGH


def calculate_guidance_level(context: PlanningContext) -> StrategyDimension:
    """Higher score means more guidance is needed."""
    signals = _Signals()
    values = context.values
    record = context.record

    if values.is_leading(ValueCategory.CONTROL):
        signals.add(-2, "Values control and self-direction")
    non_negotiables = record.values_discovery.non_negotiables if record.values_discovery else ()
    if len(non_negotiables) >= 2:
        signals.add(-1, "Clear non-negotiable priorities")
    if len(context.high_priority_goals) >= 3:
        signals.add(-1, "Clear goal priorities")
    if values.is_leading(ValueCategory.SECURITY):
        signals.add(1, "Security-focused (may value reassurance)")
    if not record.has_purpose_statement:
        signals.add(1, "Still clarifying financial purpose")
    anchors = record.financial_purpose.tradeoff_anchors if record.financial_purpose else ()
    if sum(1 for a in anchors if a.lean is TradeoffLean.NEUTRAL) >= 2:
        signals.add(1, "Several uncertain tradeoff preferences")

    if signals.score >= 2:
        inferred = GuidanceLevel.HIGH
    elif signals.score <= -2:
        inferred = GuidanceLevel.LOW
    else:
        inferred = GuidanceLevel.MODERATE

    prefs = record.planning_preferences
    involvement = prefs.advisor_involvement_desire if prefs else None
    if involvement is not None:
        style = prefs.decision_making_style
        index = _INVOLVEMENT_INDEX[involvement] + _DECISION_STYLE_SHIFT.get(style, 0)
        direct = _guidance_from_index(index)
        reasons = [f"Prefers {involvement.value} advisor involvement"]
        if style is not None:
            reasons.append(f"{style.value.capitalize()} decision style")
        corroborated = not signals.fired or inferred is direct
        return StrategyDimension(
            value=direct,
            confidence=Confidence.HIGH if corroborated else Confidence.MEDIUM,
            rationale="; ".join(reasons + signals.reasons[:1]),
        )

    if signals.fired and inferred is not GuidanceLevel.MODERATE:
        return StrategyDimension(value=inferred, confidence=Confidence.MEDIUM, rationale=signals.rationale(""))
    return StrategyDimension(
        value=GuidanceLevel.MODERATE,
        confidence=Confidence.LOW,
        rationale=signals.rationale("Default moderate guidance"),
    )


# ============================================================================
# SUMMARY
# ============================================================================


def build_summary(
    income_strategy: StrategyDimension,
    timing_sensitivity: StrategyDimension,
    planning_flexibility: StrategyDimension,
    complexity_tolerance: StrategyDimension,
    guidance_level: StrategyDimension,
) -> str:
    """Assemble the one-paragraph posture summary from per-value phrases."""
    opening = f"{_INCOME_PHRASES[income_strategy.value]}, {_TIMING_PHRASES[timing_sensitivity.value]}"
    if planning_flexibility.value is PlanningFlexibility.LOW:
        sentences = [f"{opening} and limited flexibility for major changes."]
    else:
        sentences = [f"{opening}.", _FLEXIBILITY_PHRASES[planning_flexibility.value]]
    sentences.append(_COMPLEXITY_PHRASES[complexity_tolerance.value])
    sentences.append(_GUIDANCE_PHRASES[guidance_level.value])
    return " ".join(sentences)


def generate_strategy_profile(context: PlanningContext) -> StrategyProfile:
    """Compute all five dimensions and the summary."""
    income_strategy = calculate_income_strategy(context)
    timing_sensitivity = calculate_timing_sensitivity(context)
    planning_flexibility = calculate_planning_flexibility(context)
    complexity_tolerance = calculate_complexity_tolerance(context)
    guidance_level = calculate_guidance_level(context)

    return StrategyProfile(
        income_strategy=income_strategy,
        timing_sensitivity=timing_sensitivity,
        planning_flexibility=planning_flexibility,
        complexity_tolerance=complexity_tolerance,
        guidance_level=guidance_level,
        summary=build_summary(
            income_strategy,
            timing_sensitivity,
            planning_flexibility,
            complexity_tolerance,
            guidance_level,
        ),
    )

"""Intake record and derived insight models.

Input sections are parsed leniently: unknown enum strings, unparseable dates
and wrong types become None (or are dropped from lists) instead of raising.
Derived entities are frozen and serialize to the camelCase output shape via
``to_dict()``.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

from discovery_mcp.utils.sanitize import sanitize_text
from discovery_mcp.utils.validators import parse_date, parse_enum, parse_int

MAX_TOP5 = 5
MAX_TOP10 = 10
MAX_NON_NEGOTIABLES = 3
NAME_MAX_LENGTH = 100
LABEL_MAX_LENGTH = 200
STATEMENT_MAX_LENGTH = 2000


# ============================================================================
# INPUT ENUMS
# ============================================================================


class MaritalStatus(str, Enum):
    SINGLE = "single"
    MARRIED = "married"
    DIVORCED = "divorced"
    WIDOWED = "widowed"
    DOMESTIC_PARTNERSHIP = "domestic_partnership"


class RetirementSystem(str, Enum):
    FERS = "FERS"
    CSRS = "CSRS"
    FERS_RAE = "FERS_RAE"
    FERS_FRAE = "FERS_FRAE"


class ValueCategory(str, Enum):
    SECURITY = "SECURITY"
    FREEDOM = "FREEDOM"
    FAMILY = "FAMILY"
    GROWTH = "GROWTH"
    CONTRIBUTION = "CONTRIBUTION"
    PURPOSE = "PURPOSE"
    CONTROL = "CONTROL"
    HEALTH = "HEALTH"
    QUALITY_OF_LIFE = "QUALITY_OF_LIFE"


class ValuePile(str, Enum):
    IMPORTANT = "IMPORTANT"
    UNSURE = "UNSURE"
    NOT_IMPORTANT = "NOT_IMPORTANT"


class GoalCategory(str, Enum):
    LIFESTYLE = "LIFESTYLE"
    SECURITY_PROTECTION = "SECURITY_PROTECTION"
    FAMILY_LEGACY = "FAMILY_LEGACY"
    CAREER_GROWTH = "CAREER_GROWTH"
    RETIREMENT = "RETIREMENT"
    HEALTH = "HEALTH"
    MAJOR_PURCHASES = "MAJOR_PURCHASES"
    GIVING = "GIVING"


class GoalPriority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    NA = "NA"


class GoalTimeHorizon(str, Enum):
    SHORT = "SHORT"
    MID = "MID"
    LONG = "LONG"
    ONGOING = "ONGOING"


class GoalFlexibility(str, Enum):
    FIXED = "FIXED"
    FLEXIBLE = "FLEXIBLE"
    DEFERABLE = "DEFERABLE"


# Both spellings show up in stored records
_FLEXIBILITY_ALIASES = {"DEFERRABLE": GoalFlexibility.DEFERABLE}


class PurposeDriver(str, Enum):
    PROTECT_FAMILY = "PROTECT_FAMILY"
    FREEDOM_OPTIONS = "FREEDOM_OPTIONS"
    STABILITY_PEACE = "STABILITY_PEACE"
    HEALTH_QUALITY = "HEALTH_QUALITY"
    IMPACT_GIVING = "IMPACT_GIVING"
    MEANING_PURPOSE = "MEANING_PURPOSE"
    CONTROL_CONFIDENCE = "CONTROL_CONFIDENCE"
    GROWTH_OPPORTUNITY = "GROWTH_OPPORTUNITY"


class TradeoffAxis(str, Enum):
    SECURITY_VS_GROWTH = "SECURITY_VS_GROWTH"
    FREEDOM_SOONER_VS_CERTAINTY_LATER = "FREEDOM_SOONER_VS_CERTAINTY_LATER"
    LIFESTYLE_NOW_VS_BUFFER_FIRST = "LIFESTYLE_NOW_VS_BUFFER_FIRST"
    CONTROL_STRUCTURE_VS_FLEXIBILITY = "CONTROL_STRUCTURE_VS_FLEXIBILITY"


class TradeoffLean(str, Enum):
    A = "A"
    B = "B"
    NEUTRAL = "NEUTRAL"


class StabilityPreference(str, Enum):
    STRONG_STABILITY = "strong_stability"
    PREFER_STABILITY = "prefer_stability"
    BALANCED = "balanced"
    PREFER_GROWTH = "prefer_growth"
    STRONG_GROWTH = "strong_growth"


class ImportanceLevel(str, Enum):
    CRITICAL = "critical"
    VERY_IMPORTANT = "very_important"
    SOMEWHAT_IMPORTANT = "somewhat_important"
    NOT_IMPORTANT = "not_important"


class InvolvementLevel(str, Enum):
    DIY = "diy"
    GUIDANCE = "guidance"
    COLLABORATIVE = "collaborative"
    DELEGATED = "delegated"


class DecisionStyle(str, Enum):
    ANALYTICAL = "analytical"
    INTUITIVE = "intuitive"
    CONSULTATIVE = "consultative"
    DELIBERATE = "deliberate"


# ============================================================================
# OUTPUT ENUMS
# ============================================================================


class Confidence(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class IncomeStrategyOrientation(str, Enum):
    STABILITY_FOCUSED = "STABILITY_FOCUSED"
    BALANCED = "BALANCED"
    GROWTH_FOCUSED = "GROWTH_FOCUSED"


class TimingSensitivity(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class PlanningFlexibility(str, Enum):
    HIGH = "HIGH"
    MODERATE = "MODERATE"
    LOW = "LOW"


class ComplexityTolerance(str, Enum):
    SIMPLE = "SIMPLE"
    MODERATE = "MODERATE"
    ADVANCED = "ADVANCED"


class GuidanceLevel(str, Enum):
    HIGH = "HIGH"
    MODERATE = "MODERATE"
    LOW = "LOW"


class PlanningDomain(str, Enum):
    RETIREMENT_INCOME = "RETIREMENT_INCOME"
    INVESTMENT_STRATEGY = "INVESTMENT_STRATEGY"
    TAX_OPTIMIZATION = "TAX_OPTIMIZATION"
    INSURANCE_RISK = "INSURANCE_RISK"
    ESTATE_LEGACY = "ESTATE_LEGACY"
    CASH_FLOW_DEBT = "CASH_FLOW_DEBT"
    BENEFITS_OPTIMIZATION = "BENEFITS_OPTIMIZATION"
    BUSINESS_CAREER = "BUSINESS_CAREER"
    HEALTHCARE_LTC = "HEALTHCARE_LTC"


class Importance(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MODERATE = "MODERATE"
    LOW = "LOW"


class ActionType(str, Enum):
    EDUCATION = "EDUCATION"
    DECISION_PREP = "DECISION_PREP"
    STRUCTURAL = "STRUCTURAL"
    PROFESSIONAL_REVIEW = "PROFESSIONAL_REVIEW"
    OPTIMIZATION = "OPTIMIZATION"


class ActionGuidance(str, Enum):
    SELF_GUIDED = "SELF_GUIDED"
    ADVISOR_GUIDED = "ADVISOR_GUIDED"
    SPECIALIST_GUIDED = "SPECIALIST_GUIDED"


class ActionUrgency(str, Enum):
    IMMEDIATE = "IMMEDIATE"
    NEAR_TERM = "NEAR_TERM"
    MEDIUM_TERM = "MEDIUM_TERM"
    ONGOING = "ONGOING"


# ============================================================================
# PARSING HELPERS
# ============================================================================


def _field(data: Mapping[str, Any], camel: str, snake: str | None = None) -> Any:
    """Read a camelCase key, falling back to its snake_case spelling."""
    if camel in data:
        return data[camel]
    if snake is not None:
        return data.get(snake)
    return None


def _as_mapping(value: Any) -> Mapping[str, Any] | None:
    return value if isinstance(value, Mapping) else None


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _text(value: Any, max_length: int) -> str | None:
    if not isinstance(value, str):
        return None
    return sanitize_text(value, max_length=max_length) or None


def _id_list(value: Any, limit: int | None = None) -> tuple[str, ...]:
    """Ordered, de-duplicated string ids; non-strings dropped."""
    seen: list[str] = []
    for item in _as_list(value):
        if isinstance(item, str) and item.strip() and item.strip() not in seen:
            seen.append(item.strip())
    if limit is not None:
        seen = seen[:limit]
    return tuple(seen)


def _bool(value: Any) -> bool:
    return value is True


# ============================================================================
# INPUT SECTIONS
# ============================================================================


@dataclass(frozen=True)
class FederalEmployee:
    agency: str | None = None
    years_of_service: int | None = None
    retirement_system: RetirementSystem | None = None
    pay_grade: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FederalEmployee":
        return cls(
            agency=_text(data.get("agency"), NAME_MAX_LENGTH),
            years_of_service=parse_int(_field(data, "yearsOfService", "years_of_service"), low=0, high=60),
            retirement_system=parse_enum(RetirementSystem, _field(data, "retirementSystem", "retirement_system")),
            pay_grade=_text(_field(data, "payGrade", "pay_grade"), NAME_MAX_LENGTH),
        )


@dataclass(frozen=True)
class Dependent:
    relationship: str | None = None
    birth_date: date | None = None
    financially_dependent: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Dependent":
        return cls(
            relationship=_text(data.get("relationship"), NAME_MAX_LENGTH),
            birth_date=parse_date(_field(data, "birthDate", "birth_date")),
            financially_dependent=_bool(_field(data, "financiallyDependent", "financially_dependent")),
        )


@dataclass(frozen=True)
class BasicContext:
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    marital_status: MaritalStatus | None = None
    occupation: str | None = None
    federal_employee: FederalEmployee | None = None
    dependents: tuple[Dependent, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BasicContext":
        federal = _as_mapping(_field(data, "federalEmployee", "federal_employee"))
        return cls(
            first_name=_text(_field(data, "firstName", "first_name"), NAME_MAX_LENGTH),
            last_name=_text(_field(data, "lastName", "last_name"), NAME_MAX_LENGTH),
            birth_date=parse_date(_field(data, "birthDate", "birth_date")),
            marital_status=parse_enum(MaritalStatus, _field(data, "maritalStatus", "marital_status")),
            occupation=_text(data.get("occupation"), LABEL_MAX_LENGTH),
            federal_employee=FederalEmployee.from_mapping(federal) if federal is not None else None,
            dependents=tuple(
                Dependent.from_mapping(d) for d in _as_list(data.get("dependents")) if isinstance(d, Mapping)
            ),
        )

    @property
    def financially_dependent_count(self) -> int:
        return sum(1 for d in self.dependents if d.financially_dependent)


@dataclass(frozen=True)
class ValuesDiscovery:
    piles: Mapping[str, ValuePile] = field(default_factory=lambda: MappingProxyType({}))
    top10: tuple[str, ...] = ()
    top5: tuple[str, ...] = ()
    non_negotiables: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ValuesDiscovery":
        raw_piles = _as_mapping(data.get("piles")) or {}
        piles = {}
        for card_id, pile in raw_piles.items():
            parsed = parse_enum(ValuePile, pile)
            if isinstance(card_id, str) and parsed is not None:
                piles[card_id] = parsed
        return cls(
            piles=MappingProxyType(piles),
            top10=_id_list(data.get("top10"), MAX_TOP10),
            top5=_id_list(data.get("top5"), MAX_TOP5),
            # Only the first three count
            non_negotiables=_id_list(_field(data, "nonNegotiables", "non_negotiables"), MAX_NON_NEGOTIABLES),
        )


@dataclass(frozen=True)
class FinancialGoal:
    id: str
    label: str | None = None
    category: GoalCategory | None = None
    priority: GoalPriority | None = None
    time_horizon: GoalTimeHorizon | None = None
    flexibility: GoalFlexibility | None = None
    is_core_planning_goal: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FinancialGoal | None":
        """Parse a goal; goals without a usable id are dropped."""
        goal_id = data.get("id")
        if not isinstance(goal_id, str) or not goal_id.strip():
            return None
        return cls(
            id=goal_id.strip(),
            label=_text(data.get("label"), LABEL_MAX_LENGTH),
            category=parse_enum(GoalCategory, data.get("category")),
            priority=parse_enum(GoalPriority, data.get("priority")),
            time_horizon=parse_enum(GoalTimeHorizon, _field(data, "timeHorizon", "time_horizon")),
            flexibility=parse_enum(GoalFlexibility, data.get("flexibility"), aliases=_FLEXIBILITY_ALIASES),
            is_core_planning_goal=_bool(_field(data, "isCorePlanningGoal", "is_core_planning_goal")),
        )

    @property
    def is_prioritized(self) -> bool:
        """True for goals with a real priority (not NA and not missing)."""
        return self.priority is not None and self.priority is not GoalPriority.NA


def _goal_list(value: Any) -> tuple[FinancialGoal, ...]:
    goals = []
    for item in _as_list(value):
        if isinstance(item, Mapping):
            goal = FinancialGoal.from_mapping(item)
            if goal is not None:
                goals.append(goal)
    return tuple(goals)


@dataclass(frozen=True)
class FinancialGoals:
    all_goals: tuple[FinancialGoal, ...] = ()
    user_generated_goals: tuple[FinancialGoal, ...] = ()
    system_selected_goals: tuple[FinancialGoal, ...] = ()
    core_goals: tuple[FinancialGoal, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FinancialGoals":
        return cls(
            all_goals=_goal_list(_field(data, "allGoals", "all_goals")),
            user_generated_goals=_goal_list(_field(data, "userGeneratedGoals", "user_generated_goals")),
            system_selected_goals=_goal_list(_field(data, "systemSelectedGoals", "system_selected_goals")),
            core_goals=_goal_list(_field(data, "coreGoals", "core_goals")),
        )

    @property
    def combined_goals(self) -> tuple[FinancialGoal, ...]:
        """Union of every goal list, de-duplicated by id. First occurrence wins."""
        seen: set[str] = set()
        combined = []
        for goal_list in (
            self.all_goals,
            self.user_generated_goals,
            self.system_selected_goals,
            self.core_goals,
        ):
            for goal in goal_list:
                if goal.id not in seen:
                    seen.add(goal.id)
                    combined.append(goal)
        return tuple(combined)


@dataclass(frozen=True)
class TradeoffAnchor:
    axis: TradeoffAxis
    lean: TradeoffLean
    strength: int = 3

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TradeoffAnchor | None":
        axis = parse_enum(TradeoffAxis, data.get("axis"))
        lean = parse_enum(TradeoffLean, data.get("lean"))
        if axis is None or lean is None:
            return None
        strength = parse_int(data.get("strength"), low=1, high=5)
        return cls(axis=axis, lean=lean, strength=strength if strength is not None else 3)

    @property
    def signed_strength(self) -> int:
        """Lean as a signed score: A strength 5 -> -2, B strength 5 -> +2, NEUTRAL -> 0."""
        if self.lean is TradeoffLean.NEUTRAL:
            return 0
        magnitude = 2 if self.strength >= 4 else 1
        return -magnitude if self.lean is TradeoffLean.A else magnitude


@dataclass(frozen=True)
class FinancialPurpose:
    primary_driver: PurposeDriver | None = None
    secondary_driver: PurposeDriver | None = None
    tradeoff_anchors: tuple[TradeoffAnchor, ...] = ()
    final_text: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FinancialPurpose":
        anchors = []
        for item in _as_list(_field(data, "tradeoffAnchors", "tradeoff_anchors")):
            if isinstance(item, Mapping):
                anchor = TradeoffAnchor.from_mapping(item)
                if anchor is not None:
                    anchors.append(anchor)
        return cls(
            primary_driver=parse_enum(PurposeDriver, _field(data, "primaryDriver", "primary_driver")),
            secondary_driver=parse_enum(PurposeDriver, _field(data, "secondaryDriver", "secondary_driver")),
            tradeoff_anchors=tuple(anchors),
            final_text=_text(_field(data, "finalText", "final_text"), STATEMENT_MAX_LENGTH),
        )

    def anchor(self, axis: TradeoffAxis) -> TradeoffAnchor | None:
        for anchor in self.tradeoff_anchors:
            if anchor.axis is axis:
                return anchor
        return None


@dataclass(frozen=True)
class RiskComfort:
    investment_risk_tolerance: int | None = None
    income_stability_preference: StabilityPreference | None = None
    guaranteed_income_importance: ImportanceLevel | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RiskComfort":
        return cls(
            investment_risk_tolerance=parse_int(
                _field(data, "investmentRiskTolerance", "investment_risk_tolerance"), low=1, high=5
            ),
            income_stability_preference=parse_enum(
                StabilityPreference, _field(data, "incomeStabilityPreference", "income_stability_preference")
            ),
            guaranteed_income_importance=parse_enum(
                ImportanceLevel, _field(data, "guaranteedIncomeImportance", "guaranteed_income_importance")
            ),
        )


@dataclass(frozen=True)
class PlanningPreferences:
    complexity_tolerance: int | None = None
    advisor_involvement_desire: InvolvementLevel | None = None
    decision_making_style: DecisionStyle | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PlanningPreferences":
        return cls(
            complexity_tolerance=parse_int(_field(data, "complexityTolerance", "complexity_tolerance"), low=1, high=5),
            advisor_involvement_desire=parse_enum(
                InvolvementLevel, _field(data, "advisorInvolvementDesire", "advisor_involvement_desire")
            ),
            decision_making_style=parse_enum(DecisionStyle, _field(data, "decisionMakingStyle", "decision_making_style")),
        )


_SECTIONS: tuple[tuple[str, str, str, type], ...] = (
    ("basic_context", "basicContext", "basic_context", BasicContext),
    ("values_discovery", "valuesDiscovery", "values_discovery", ValuesDiscovery),
    ("financial_goals", "financialGoals", "financial_goals", FinancialGoals),
    ("financial_purpose", "financialPurpose", "financial_purpose", FinancialPurpose),
    ("risk_comfort", "riskComfort", "risk_comfort", RiskComfort),
    ("planning_preferences", "planningPreferences", "planning_preferences", PlanningPreferences),
)


@dataclass(frozen=True)
class IntakeRecord:
    """A partially completed client intake. Every section is optional."""

    basic_context: BasicContext | None = None
    values_discovery: ValuesDiscovery | None = None
    financial_goals: FinancialGoals | None = None
    financial_purpose: FinancialPurpose | None = None
    risk_comfort: RiskComfort | None = None
    planning_preferences: PlanningPreferences | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "IntakeRecord":
        """Build a record from camelCase (or snake_case) keyed data. Never raises on bad sections."""
        sections: dict[str, Any] = {}
        for attr, camel, snake, section_cls in _SECTIONS:
            raw = _as_mapping(_field(data, camel, snake))
            sections[attr] = section_cls.from_mapping(raw) if raw is not None else None
        return cls(**sections)

    @classmethod
    def coerce(cls, profile: "IntakeRecord | Mapping[str, Any] | None") -> "IntakeRecord":
        if isinstance(profile, IntakeRecord):
            return profile
        if isinstance(profile, Mapping):
            return cls.from_mapping(profile)
        return cls()

    @property
    def goals(self) -> tuple[FinancialGoal, ...]:
        return self.financial_goals.combined_goals if self.financial_goals else ()

    @property
    def top5(self) -> tuple[str, ...]:
        return self.values_discovery.top5 if self.values_discovery else ()

    @property
    def dependents(self) -> tuple[Dependent, ...]:
        return self.basic_context.dependents if self.basic_context else ()

    @property
    def financially_dependent_count(self) -> int:
        return self.basic_context.financially_dependent_count if self.basic_context else 0

    @property
    def federal_employee(self) -> FederalEmployee | None:
        return self.basic_context.federal_employee if self.basic_context else None

    @property
    def is_married(self) -> bool:
        return bool(self.basic_context and self.basic_context.marital_status is MaritalStatus.MARRIED)

    @property
    def has_purpose_statement(self) -> bool:
        return bool(self.financial_purpose and self.financial_purpose.final_text)


# ============================================================================
# DERIVED ENTITIES
# ============================================================================


def _optional_list(values: Iterable[str] | None) -> list[str] | None:
    return list(values) if values is not None else None


@dataclass(frozen=True)
class StrategyDimension:
    value: Enum
    confidence: Confidence
    rationale: str

    def to_dict(self) -> dict[str, str]:
        return {
            "value": self.value.value,
            "confidence": self.confidence.value,
            "rationale": self.rationale,
        }


@dataclass(frozen=True)
class StrategyProfile:
    income_strategy: StrategyDimension
    timing_sensitivity: StrategyDimension
    planning_flexibility: StrategyDimension
    complexity_tolerance: StrategyDimension
    guidance_level: StrategyDimension
    summary: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "incomeStrategy": self.income_strategy.to_dict(),
            "timingSensitivity": self.timing_sensitivity.to_dict(),
            "planningFlexibility": self.planning_flexibility.to_dict(),
            "complexityTolerance": self.complexity_tolerance.to_dict(),
            "guidanceLevel": self.guidance_level.to_dict(),
            "summary": self.summary,
        }


@dataclass(frozen=True)
class FocusArea:
    domain: PlanningDomain
    priority: int
    importance: Importance
    rationale: str
    value_connections: tuple[str, ...] = ()
    goal_connections: tuple[str, ...] = ()
    risk_factors: tuple[str, ...] | None = None
    score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain.value,
            "priority": self.priority,
            "importance": self.importance.value,
            "rationale": self.rationale,
            "valueConnections": list(self.value_connections),
            "goalConnections": list(self.goal_connections),
            "riskFactors": _optional_list(self.risk_factors),
            "score": self.score,
        }


@dataclass(frozen=True)
class FocusRanking:
    areas: tuple[FocusArea, ...]
    top_priorities: tuple[PlanningDomain, ...]

    def area_for(self, domain: PlanningDomain) -> FocusArea | None:
        for area in self.areas:
            if area.domain is domain:
                return area
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "areas": [area.to_dict() for area in self.areas],
            "topPriorities": [domain.value for domain in self.top_priorities],
        }


@dataclass(frozen=True)
class ActionRecommendation:
    id: str
    title: str
    description: str
    rationale: str
    outcome: str
    type: ActionType
    guidance: ActionGuidance
    urgency: ActionUrgency
    domain: PlanningDomain
    value_connections: tuple[str, ...] = ()
    goal_connections: tuple[str, ...] = ()
    dependencies: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "rationale": self.rationale,
            "outcome": self.outcome,
            "type": self.type.value,
            "guidance": self.guidance.value,
            "urgency": self.urgency.value,
            "domain": self.domain.value,
            "valueConnections": list(self.value_connections),
            "goalConnections": list(self.goal_connections),
            "dependencies": _optional_list(self.dependencies),
        }


@dataclass(frozen=True)
class ActionRecommendations:
    recommendations: tuple[ActionRecommendation, ...]
    top_actions: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "topActions": list(self.top_actions),
        }


@dataclass(frozen=True)
class InputSummary:
    has_basic_context: bool
    has_values: bool
    has_goals: bool
    has_purpose: bool
    completion_percentage: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "hasBasicContext": self.has_basic_context,
            "hasValues": self.has_values,
            "hasGoals": self.has_goals,
            "hasPurpose": self.has_purpose,
            "completionPercentage": self.completion_percentage,
        }


@dataclass(frozen=True)
class DiscoveryInsights:
    strategy_profile: StrategyProfile
    focus_areas: FocusRanking
    actions: ActionRecommendations
    input_summary: InputSummary
    generated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategyProfile": self.strategy_profile.to_dict(),
            "focusAreas": self.focus_areas.to_dict(),
            "actions": self.actions.to_dict(),
            "inputSummary": self.input_summary.to_dict(),
            "generatedAt": self.generated_at.isoformat(),
        }

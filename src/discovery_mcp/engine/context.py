"""Per-call planning context shared by the insight generators."""

from dataclasses import dataclass
from datetime import date

from discovery_mcp.engine.values import ValuesProfile, derive_values_profile
from discovery_mcp.models import (
    FinancialGoal,
    GoalCategory,
    GoalPriority,
    GoalTimeHorizon,
    IntakeRecord,
    ValueCategory,
)
from discovery_mcp.utils.validators import calculate_age

DEFAULT_RETIREMENT_AGE = 65
NEAR_RETIREMENT_YEARS = 5
APPROACHING_RETIREMENT_YEARS = 10
LONG_HORIZON_YEARS = 20


@dataclass(frozen=True)
class PlanningContext:
    """Everything derived once from the intake record before scoring."""

    record: IntakeRecord
    values: ValuesProfile
    goals: tuple[FinancialGoal, ...]
    age: int | None
    years_to_retirement: int | None
    retirement_age: int = DEFAULT_RETIREMENT_AGE

    @property
    def prioritized_goals(self) -> tuple[FinancialGoal, ...]:
        """Goals with a real priority (NA and missing are excluded)."""
        return tuple(g for g in self.goals if g.is_prioritized)

    @property
    def high_priority_goals(self) -> tuple[FinancialGoal, ...]:
        return tuple(g for g in self.goals if g.priority is GoalPriority.HIGH)

    def retirement_within(self, years: int) -> bool:
        return self.years_to_retirement is not None and self.years_to_retirement <= years

    @property
    def near_retirement(self) -> bool:
        """Within the action-eligibility window (10 years)."""
        return self.retirement_within(APPROACHING_RETIREMENT_YEARS)

    @property
    def has_short_retirement_goal(self) -> bool:
        return any(
            g.category is GoalCategory.RETIREMENT
            and g.time_horizon is GoalTimeHorizon.SHORT
            and g.is_prioritized
            for g in self.goals
        )

    @property
    def is_federal_employee(self) -> bool:
        return self.record.federal_employee is not None

    @property
    def has_federal_retirement_system(self) -> bool:
        federal = self.record.federal_employee
        return federal is not None and federal.retirement_system is not None

    @property
    def financially_dependent_count(self) -> int:
        return self.record.financially_dependent_count

    def has_top5_category(self, category: ValueCategory) -> bool:
        return category in self.values.top5_categories

    def has_high_priority_goal_category(self, category: GoalCategory) -> bool:
        return any(g.category is category for g in self.high_priority_goals)


def build_planning_context(
    record: IntakeRecord,
    today: date,
    retirement_age: int = DEFAULT_RETIREMENT_AGE,
) -> PlanningContext:
    birth_date = record.basic_context.birth_date if record.basic_context else None
    age = calculate_age(birth_date, today)
    years_to_retirement = max(0, retirement_age - age) if age is not None else None
    return PlanningContext(
        record=record,
        values=derive_values_profile(record.values_discovery),
        goals=record.goals,
        age=age,
        years_to_retirement=years_to_retirement,
        retirement_age=retirement_age,
    )

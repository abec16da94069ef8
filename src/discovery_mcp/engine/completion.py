"""Completion gate: decides whether an intake record supports insights."""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any

from discovery_mcp.models import InputSummary, IntakeRecord

logger = logging.getLogger(__name__)

SECTION_WEIGHT = 25
MIN_COMPLETION = 25
COMPREHENSIVE_COMPLETION = 75
GOOD_FOUNDATION_COMPLETION = 50

STATUS_INCOMPLETE = "Complete more discovery sections to generate planning insights."
STATUS_BASIC = "Basic insights available. Complete more sections for deeper analysis."
STATUS_GOOD = "Good foundation for insights. Additional sections will refine recommendations."
STATUS_COMPREHENSIVE = "Comprehensive data available for detailed planning insights."


@dataclass(frozen=True)
class SectionPresence:
    """Which of the four scored intake sections are usable."""

    basic_context: bool
    values: bool
    goals: bool
    purpose: bool

    @property
    def present_count(self) -> int:
        return sum((self.basic_context, self.values, self.goals, self.purpose))

    @property
    def completion_percentage(self) -> int:
        return SECTION_WEIGHT * self.present_count

    @property
    def is_sufficient(self) -> bool:
        """Basic context plus at least one other section."""
        return (
            self.completion_percentage >= MIN_COMPLETION
            and self.basic_context
            and self.present_count >= 2
        )

    def to_input_summary(self) -> InputSummary:
        return InputSummary(
            has_basic_context=self.basic_context,
            has_values=self.values,
            has_goals=self.goals,
            has_purpose=self.purpose,
            completion_percentage=self.completion_percentage,
        )


def utc_today() -> date:
    """Reference date shared with insight generation, which stamps results in UTC."""
    return datetime.now(timezone.utc).date()


def assess_sections(record: IntakeRecord, today: date | None = None) -> SectionPresence:
    """Evaluate each section-present check. A birth date in the future does not count."""
    today = today or utc_today()
    basic = record.basic_context
    has_basic = bool(
        basic is not None
        and basic.first_name
        and basic.birth_date is not None
        and basic.birth_date <= today
    )
    return SectionPresence(
        basic_context=has_basic,
        values=bool(record.top5),
        goals=bool(record.goals),
        purpose=record.has_purpose_statement,
    )


def has_enough_data_for_insights(
    profile: IntakeRecord | Mapping[str, Any] | None,
    *,
    today: date | None = None,
) -> bool:
    """
    Check whether the intake record passes the completion gate.

    Args:
        profile: IntakeRecord or camelCase mapping (may be empty)
        today: Reference date for birth-date checks (default: today)

    Returns:
        True when basic context and at least one other section are present
    """
    record = IntakeRecord.coerce(profile)
    presence = assess_sections(record, today)
    logger.debug(
        "Completion gate: %d%% (basic=%s values=%s goals=%s purpose=%s) -> %s",
        presence.completion_percentage,
        presence.basic_context,
        presence.values,
        presence.goals,
        presence.purpose,
        presence.is_sufficient,
    )
    return presence.is_sufficient


def get_insights_status_message(
    profile: IntakeRecord | Mapping[str, Any] | None,
    *,
    today: date | None = None,
) -> str:
    """Return readiness guidance keyed by completion percentage."""
    completion = assess_sections(IntakeRecord.coerce(profile), today).completion_percentage
    if completion < MIN_COMPLETION:
        return STATUS_INCOMPLETE
    if completion < GOOD_FOUNDATION_COMPLETION:
        return STATUS_BASIC
    if completion < COMPREHENSIVE_COMPLETION:
        return STATUS_GOOD
    return STATUS_COMPREHENSIVE


def _iter_missing_data_suggestions(record: IntakeRecord, today: date) -> Iterator[str]:
    presence = assess_sections(record, today)

    if not presence.basic_context:
        basic = record.basic_context
        has_name = bool(basic and basic.first_name)
        has_birth_date = bool(basic and basic.birth_date is not None and basic.birth_date <= today)
        if has_name:
            yield "Add your birth date so planning can account for your time to retirement"
        elif has_birth_date:
            yield "Add your first name to complete Basic Context"
        else:
            yield "Add your name and birth date in Basic Context"

    if not presence.values:
        yield "Complete Values Discovery to identify your core values"

    if not presence.goals:
        yield "Add financial goals"

    if not presence.purpose:
        yield "Complete your Statement of Financial Purpose"


def get_missing_data_suggestions(
    profile: IntakeRecord | Mapping[str, Any] | None,
    *,
    today: date | None = None,
) -> list[str]:
    """
    List short next steps, one per absent section.

    Order is fixed (basic info, values, goals, purpose) and does not depend
    on whether the gate passes.
    """
    record = IntakeRecord.coerce(profile)
    return list(_iter_missing_data_suggestions(record, today or utc_today()))

"""Discovery insights orchestrator.

Runs the completion gate, then the strategy profile, focus ranking and action
generators over one planning context, and checks the assembled result.
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from discovery_mcp.data.domains import DOMAIN_ORDER
from discovery_mcp.engine.actions import MAX_ACTIONS, MAX_TOP_ACTIONS, generate_action_recommendations
from discovery_mcp.engine.completion import assess_sections
from discovery_mcp.engine.context import build_planning_context
from discovery_mcp.engine.planning_focus import TOP_PRIORITY_CUTOFF, generate_focus_area_ranking
from discovery_mcp.engine.strategy_profile import generate_strategy_profile
from discovery_mcp.models import DiscoveryInsights, IntakeRecord
from discovery_mcp.utils.validators import EngineSettings

logger = logging.getLogger(__name__)


class InsightsInvariantError(AssertionError):
    """Raised when an assembled result breaks one of its structural guarantees."""

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__("; ".join(violations))


def find_invariant_violations(insights: DiscoveryInsights) -> list[str]:
    """Return a description of every structural problem in the result."""
    violations: list[str] = []
    areas = insights.focus_areas.areas

    priorities = sorted(area.priority for area in areas)
    if priorities != list(range(1, len(DOMAIN_ORDER) + 1)):
        violations.append(f"Focus priorities are not a permutation of 1..{len(DOMAIN_ORDER)}: {priorities}")

    domains = [area.domain for area in areas]
    if set(domains) != set(DOMAIN_ORDER) or len(domains) != len(DOMAIN_ORDER):
        violations.append("Focus areas do not cover each planning domain exactly once")

    expected_top = {area.domain for area in areas if area.priority <= TOP_PRIORITY_CUTOFF}
    top = insights.focus_areas.top_priorities
    if len(top) > TOP_PRIORITY_CUTOFF or set(top) != expected_top:
        violations.append(f"topPriorities {[d.value for d in top]} do not match the top-ranked domains")

    recommendations = insights.actions.recommendations
    if len(recommendations) > MAX_ACTIONS:
        violations.append(f"{len(recommendations)} actions exceed the limit of {MAX_ACTIONS}")

    action_ids = [action.id for action in recommendations]
    if len(set(action_ids)) != len(action_ids):
        violations.append("Duplicate action ids in recommendations")

    known_domains = set(domains)
    for action in recommendations:
        if action.domain not in known_domains:
            violations.append(f"Action '{action.id}' references missing domain {action.domain.value}")

    top_actions = insights.actions.top_actions
    if len(top_actions) > MAX_TOP_ACTIONS or not set(top_actions) <= set(action_ids):
        violations.append("topActions is not a subset of the recommended action ids")

    return violations


def _validate_insights_invariants(insights: DiscoveryInsights, strict: bool) -> None:
    violations = find_invariant_violations(insights)
    if not violations:
        return
    for violation in violations:
        logger.error("Insights invariant violated: %s", violation)
    if strict:
        raise InsightsInvariantError(violations)


def generate_discovery_insights(
    profile: IntakeRecord | Mapping[str, Any] | None,
    *,
    now: datetime | None = None,
    settings: EngineSettings | None = None,
) -> DiscoveryInsights | None:
    """
    Derive strategy profile, focus ranking and actions for an intake record.

    Args:
        profile: IntakeRecord or camelCase mapping (may be partial or empty)
        now: Generation timestamp (default: current UTC time)
        settings: Engine settings (default: read from the environment)

    Returns:
        DiscoveryInsights, or None when the record does not pass the completion gate

    Raises:
        InsightsInvariantError: If the result is structurally inconsistent and
            strict invariants are enabled
    """
    settings = settings or EngineSettings.from_env()
    now = now or datetime.now(timezone.utc)
    today = now.date()

    record = IntakeRecord.coerce(profile)
    presence = assess_sections(record, today)
    if not presence.is_sufficient:
        logger.info("Insufficient discovery data (%d%% complete)", presence.completion_percentage)
        return None

    context = build_planning_context(record, today, settings.retirement_age)
    strategy_profile = generate_strategy_profile(context)
    focus_areas = generate_focus_area_ranking(context)
    actions = generate_action_recommendations(context, focus_areas)

    insights = DiscoveryInsights(
        strategy_profile=strategy_profile,
        focus_areas=focus_areas,
        actions=actions,
        input_summary=presence.to_input_summary(),
        generated_at=now,
    )
    _validate_insights_invariants(insights, settings.strict_invariants)

    logger.debug(
        "Generated insights: top=%s actions=%d",
        [d.value for d in focus_areas.top_priorities],
        len(actions.recommendations),
    )
    return insights

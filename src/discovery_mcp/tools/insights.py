"""Discovery insights tools."""

import logging
from datetime import datetime, timezone
from time import perf_counter
from typing import Any

from discovery_mcp.engine import (
    InsightsInvariantError,
    generate_discovery_insights,
    get_insights_status_message,
    get_missing_data_suggestions,
)
from discovery_mcp.engine.completion import assess_sections
from discovery_mcp.engine.values import derive_values_profile
from discovery_mcp.models import IntakeRecord
from discovery_mcp.utils.normalize import build_insights_snapshot
from discovery_mcp.utils.provenance import RULESET_VERSION, build_error_response, build_meta, build_provenance
from discovery_mcp.utils.validators import EngineSettings

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_profile(profile: Any) -> IntakeRecord:
    if profile is None:
        return IntakeRecord()
    if not isinstance(profile, dict):
        raise ValueError(f"Profile must be a JSON object, got {type(profile).__name__}")
    return IntakeRecord.from_mapping(profile)


async def generate_insights(profile: dict[str, Any] | None) -> dict[str, Any]:
    """
    Generate strategy profile, focus ranking and action recommendations.

    Args:
        profile: Client intake record (camelCase sections, any may be missing)

    Returns:
        Dict with insights, provenance and a diff-stable snapshot, or an
        insufficient_data error carrying the missing-data suggestions
    """
    start_time = perf_counter()

    try:
        record = _parse_profile(profile)
    except ValueError as e:
        return build_error_response(error_type="invalid_profile", message=str(e))

    try:
        settings = EngineSettings.from_env()
    except ValueError as e:
        return build_error_response(error_type="invalid_configuration", message=str(e))

    now = _utc_now()
    today = now.date()

    try:
        insights = generate_discovery_insights(record, now=now, settings=settings)
    except InsightsInvariantError as e:
        return build_error_response(
            error_type="invariant_violation",
            message="Generated insights failed consistency checks",
            violations=e.violations,
        )
    except Exception as e:
        logger.exception("Insights generation failed")
        return build_error_response(
            error_type="internal_error",
            message=f"Failed to generate insights: {e}",
        )

    if insights is None:
        return build_error_response(
            error_type="insufficient_data",
            message=get_insights_status_message(record, today=today),
            completion_percentage=assess_sections(record, today).completion_percentage,
            suggestions=get_missing_data_suggestions(record, today=today),
        )

    payload = insights.to_dict()
    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("generate_insights", duration_ms),
        "data_provenance": {
            "intake": build_provenance(
                source="intake_record",
                as_of=now,
                completion_percentage=insights.input_summary.completion_percentage,
            ),
            "rules": build_provenance(
                source="ruleset",
                ruleset_version=RULESET_VERSION,
                retirement_age=settings.retirement_age,
            ),
        },
        "insights": payload,
        "values_profile": derive_values_profile(record.values_discovery).to_dict(),
        "status_message": get_insights_status_message(record, today=today),
        "suggestions": get_missing_data_suggestions(record, today=today),
        "snapshot": build_insights_snapshot(payload),
    }


async def check_insights_readiness(profile: dict[str, Any] | None) -> dict[str, Any]:
    """
    Report which discovery sections are complete without generating insights.

    Args:
        profile: Client intake record (camelCase sections, any may be missing)

    Returns:
        Dict with completion breakdown, gate result, status message and suggestions
    """
    start_time = perf_counter()

    try:
        record = _parse_profile(profile)
    except ValueError as e:
        return build_error_response(error_type="invalid_profile", message=str(e))

    today = _utc_now().date()
    presence = assess_sections(record, today)
    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("check_insights_readiness", duration_ms),
        "ready": presence.is_sufficient,
        "input_summary": presence.to_input_summary().to_dict(),
        "status_message": get_insights_status_message(record, today=today),
        "suggestions": get_missing_data_suggestions(record, today=today),
    }

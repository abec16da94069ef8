"""Response metadata and provenance utilities."""

from datetime import datetime
from typing import Any

from discovery_mcp import SCHEMA_VERSION, SERVER_VERSION

# Bump when any weight, threshold or template in the rule tables changes
RULESET_VERSION = "2024.1"


def build_meta(tool: str, duration_ms: float | None = None) -> dict[str, Any]:
    """
    Build standard metadata block for responses.

    Args:
        tool: Name of the tool producing this response
        duration_ms: Execution time in milliseconds (optional)

    Returns:
        Metadata dict with version info
    """
    meta: dict[str, Any] = {
        "server_version": SERVER_VERSION,
        "schema_version": SCHEMA_VERSION,
        "ruleset_version": RULESET_VERSION,
        "tool": tool,
    }
    if duration_ms is not None:
        meta["duration_ms"] = round(duration_ms, 1)
    return meta


def build_provenance(
    source: str,
    as_of: datetime | str | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Build provenance block describing where an output section came from.

    Args:
        source: Input source name (e.g., "intake_record", "ruleset")
        as_of: Timestamp the section was derived at
        **kwargs: Additional provenance fields

    Returns:
        Provenance dict for this source
    """
    prov: dict[str, Any] = {"source": source}

    if as_of is not None:
        if isinstance(as_of, datetime):
            prov["as_of"] = as_of.isoformat()
        else:
            prov["as_of"] = as_of

    prov.update(kwargs)

    if "warnings" not in prov:
        prov["warnings"] = []

    return prov


def build_error_response(
    error_type: str,
    message: str,
    **details: Any,
) -> dict[str, Any]:
    """
    Build standardized error response.

    Args:
        error_type: Type of error (invalid_profile, insufficient_data, internal_error)
        message: Human-readable error message
        **details: Extra fields merged into the response (e.g. suggestions)

    Returns:
        Error response dict
    """
    response: dict[str, Any] = {
        "error": True,
        "error_type": error_type,
        "message": message,
        "meta": build_meta("error"),
    }
    for key, value in details.items():
        if value is not None:
            response[key] = value

    return response

"""Utility modules."""

from discovery_mcp.utils.normalize import build_insights_snapshot, canonical_dumps
from discovery_mcp.utils.provenance import build_error_response, build_meta, build_provenance
from discovery_mcp.utils.sanitize import sanitize_text
from discovery_mcp.utils.validators import EngineSettings, check_rule

__all__ = [
    "build_insights_snapshot",
    "canonical_dumps",
    "build_error_response",
    "build_meta",
    "build_provenance",
    "sanitize_text",
    "EngineSettings",
    "check_rule",
]

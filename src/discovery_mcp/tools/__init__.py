"""Discovery insights tools."""

from discovery_mcp.tools.catalog import get_planning_catalog
from discovery_mcp.tools.insights import check_insights_readiness, generate_insights

__all__ = [
    "check_insights_readiness",
    "generate_insights",
    "get_planning_catalog",
]

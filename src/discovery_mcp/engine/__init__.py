"""Discovery insights rule engine."""

from discovery_mcp.engine.actions import generate_action_recommendations
from discovery_mcp.engine.completion import (
    get_insights_status_message,
    get_missing_data_suggestions,
    has_enough_data_for_insights,
)
from discovery_mcp.engine.context import PlanningContext, build_planning_context
from discovery_mcp.engine.insights import InsightsInvariantError, generate_discovery_insights
from discovery_mcp.engine.planning_focus import generate_focus_area_ranking
from discovery_mcp.engine.strategy_profile import generate_strategy_profile

__all__ = [
    "generate_discovery_insights",
    "has_enough_data_for_insights",
    "get_insights_status_message",
    "get_missing_data_suggestions",
    "generate_strategy_profile",
    "generate_focus_area_ranking",
    "generate_action_recommendations",
    "build_planning_context",
    "PlanningContext",
    "InsightsInvariantError",
]

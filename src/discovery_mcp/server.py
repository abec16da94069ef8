"""Discovery Insights MCP Server using FastMCP."""

import json
import logging
import os
from typing import Any

from fastmcp import FastMCP

from discovery_mcp import SCHEMA_VERSION, SERVER_VERSION
from discovery_mcp.prompts.templates import get_prompt
from discovery_mcp.resources.value_cards_resource import (
    URI_PREFIX,
    ResourceNotFoundError,
    read_value_cards_resource,
)
from discovery_mcp.tools import (
    check_insights_readiness,
    generate_insights,
    get_planning_catalog,
)

# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
logger = logging.getLogger(__name__)

# Create FastMCP server instance
mcp = FastMCP(
    name="discovery-insights",
)


# ============================================================================
# TOOLS
# ============================================================================


@mcp.tool
async def get_discovery_insights(profile: dict[str, Any]) -> str:
    """
    Generate planning insights from a client's discovery intake record.

    The record uses camelCase sections, each optional:
    basicContext, valuesDiscovery, financialGoals, financialPurpose,
    riskComfort, planningPreferences. Basic context plus one other
    section is required.

    Args:
        profile: Client intake record

    Returns:
        JSON with strategy profile, ranked focus areas, action
        recommendations, input summary and a diff-stable snapshot
    """
    result = await generate_insights(profile=profile)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def check_readiness(profile: dict[str, Any]) -> str:
    """
    Check whether a discovery intake record is complete enough for insights.

    Args:
        profile: Client intake record

    Returns:
        JSON with readiness flag, completion breakdown, status message
        and suggestions for missing sections
    """
    result = await check_insights_readiness(profile=profile)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def planning_catalog() -> str:
    """
    Describe the planning domains, value categories and action templates.

    Returns:
        JSON with domains (in tie-break order) and their candidate actions
    """
    result = await get_planning_catalog()
    return json.dumps(result, indent=2, default=str)


# ============================================================================
# RESOURCES
# ============================================================================


@mcp.resource(URI_PREFIX)
def get_value_cards() -> str:
    """
    Get the full value card catalog as JSON.

    Returns:
        JSON list of cards with id, title, description and category
    """
    text, _ = read_value_cards_resource(URI_PREFIX)
    return text


@mcp.resource(URI_PREFIX + "/{category}")
def get_value_cards_by_category(category: str) -> str:
    """
    Get the value cards in one category as JSON.

    Args:
        category: Value category (e.g. SECURITY, FREEDOM, QUALITY_OF_LIFE)

    Returns:
        JSON list of cards in that category
    """
    try:
        text, _ = read_value_cards_resource(f"{URI_PREFIX}/{category}")
        return text
    except ResourceNotFoundError as e:
        return f"Error: {e}"


# ============================================================================
# PROMPTS
# ============================================================================


@mcp.prompt
def advisor_briefing(client_name: str) -> str:
    """Pre-meeting briefing for the advisor from a client's discovery record."""
    result = get_prompt("advisor_briefing", {"client_name": client_name})
    if result:
        return result["messages"][0]["content"]
    return f"Summarize discovery insights for {client_name} using get_discovery_insights."


@mcp.prompt
def client_next_steps(client_name: str, max_actions: str = "5") -> str:
    """Plain-language next steps for the client."""
    result = get_prompt("client_next_steps", {"client_name": client_name, "max_actions": max_actions})
    if result:
        return result["messages"][0]["content"]
    return f"List next steps for {client_name} using get_discovery_insights."


# ============================================================================
# ENTRY POINT
# ============================================================================


def main() -> None:
    """Run the MCP server."""
    logger.info(f"Starting Discovery Insights MCP Server v{SERVER_VERSION} (schema v{SCHEMA_VERSION})")
    mcp.run()


if __name__ == "__main__":
    main()

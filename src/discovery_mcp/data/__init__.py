"""Static reference data: value cards, planning domains and action templates."""

from discovery_mcp.data.action_templates import ACTION_TEMPLATES, DOMAIN_ACTION_TABLE
from discovery_mcp.data.domains import (
    DOMAIN_LABELS,
    DOMAIN_ORDER,
    GOAL_DOMAIN_MAP,
    VALUE_DOMAIN_MAP,
)
from discovery_mcp.data.value_cards import VALUE_CARDS, get_card, get_card_category

__all__ = [
    "ACTION_TEMPLATES",
    "DOMAIN_ACTION_TABLE",
    "DOMAIN_LABELS",
    "DOMAIN_ORDER",
    "GOAL_DOMAIN_MAP",
    "VALUE_DOMAIN_MAP",
    "VALUE_CARDS",
    "get_card",
    "get_card_category",
]

"""Planning catalog tool."""

from time import perf_counter
from typing import Any

from discovery_mcp.data.action_templates import ACTION_TEMPLATES, DOMAIN_ACTION_TABLE
from discovery_mcp.data.domains import DOMAIN_DESCRIPTIONS, DOMAIN_LABELS, DOMAIN_ORDER, VALUE_DOMAIN_MAP
from discovery_mcp.data.value_cards import VALUE_CARDS, get_cards_by_category
from discovery_mcp.engine.actions import resolve_guidance
from discovery_mcp.engine.values import CATEGORY_ORDER
from discovery_mcp.utils.provenance import RULESET_VERSION, build_meta


def _template_entry(template_id: str) -> dict[str, Any]:
    template = ACTION_TEMPLATES[template_id]
    conditions = template.conditions
    requires = [
        name
        for name, flag in (
            ("near_retirement", conditions.near_retirement),
            ("federal_employee", conditions.federal_employee),
            ("dependents", conditions.dependents),
            ("married", conditions.married),
        )
        if flag
    ]
    if conditions.value_category is not None:
        requires.append(f"top5_value:{conditions.value_category.value}")
    if conditions.high_priority_goal_category is not None:
        requires.append(f"high_priority_goal:{conditions.high_priority_goal_category.value}")

    return {
        "id": template.id,
        "title": template.title,
        "type": template.type.value,
        "guidance": resolve_guidance(template).value,
        "requires": requires,
    }


async def get_planning_catalog() -> dict[str, Any]:
    """
    Describe the planning domains, value categories and action templates.

    Returns:
        Dict with one entry per domain (in tie-break order), value categories
        with their card counts, and the total template count
    """
    start_time = perf_counter()

    domains = [
        {
            "domain": domain.value,
            "label": DOMAIN_LABELS[domain],
            "description": DOMAIN_DESCRIPTIONS[domain],
            "actions": [_template_entry(listing.template_id) for listing in DOMAIN_ACTION_TABLE[domain]],
        }
        for domain in DOMAIN_ORDER
    ]

    value_categories = [
        {
            "category": category.value,
            "card_count": len(get_cards_by_category(category)),
            "domains": [domain.value for domain in VALUE_DOMAIN_MAP[category]],
        }
        for category in CATEGORY_ORDER
    ]

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("get_planning_catalog", duration_ms),
        "ruleset_version": RULESET_VERSION,
        "domains": domains,
        "value_categories": value_categories,
        "value_card_count": len(VALUE_CARDS),
        "action_template_count": len(ACTION_TEMPLATES),
    }

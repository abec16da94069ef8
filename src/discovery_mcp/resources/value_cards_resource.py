"""Value card catalog resource handler."""

import json

from discovery_mcp.data.value_cards import VALUE_CARDS, get_cards_by_category
from discovery_mcp.models import ValueCategory
from discovery_mcp.utils.validators import parse_enum

URI_PREFIX = "catalog://value-cards"


class ResourceNotFoundError(Exception):
    """Unknown value-card resource."""

    pass


def read_value_cards_resource(uri: str) -> tuple[str, str]:
    """
    Serve the value card catalog, whole or for one category.

    Args:
        uri: Resource URI (catalog://value-cards or catalog://value-cards/SECURITY)

    Returns:
        Tuple of (json_text, mime_type)

    Raises:
        ResourceNotFoundError: If the URI or category is not recognised
    """
    if uri == URI_PREFIX:
        cards = list(VALUE_CARDS.values())
    elif uri.startswith(URI_PREFIX + "/"):
        raw_category = uri[len(URI_PREFIX) + 1 :]
        category = parse_enum(ValueCategory, raw_category)
        if category is None:
            raise ResourceNotFoundError(f"Unknown value category: {raw_category}")
        cards = get_cards_by_category(category)
    else:
        raise ResourceNotFoundError(f"Unknown resource: {uri}")

    return json.dumps([card.to_dict() for card in cards], indent=2), "application/json"

"""Value-category derivation from sorted value cards."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from discovery_mcp.data.value_cards import get_card_category
from discovery_mcp.models import ValueCategory, ValuePile, ValuesDiscovery

CATEGORY_ORDER: tuple[ValueCategory, ...] = tuple(ValueCategory)

# Pairs of categories that pull a plan in opposite directions
CONFLICT_PAIRS: tuple[tuple[ValueCategory, ValueCategory], ...] = (
    (ValueCategory.SECURITY, ValueCategory.FREEDOM),
    (ValueCategory.SECURITY, ValueCategory.GROWTH),
    (ValueCategory.CONTROL, ValueCategory.FREEDOM),
    (ValueCategory.FAMILY, ValueCategory.FREEDOM),
    (ValueCategory.QUALITY_OF_LIFE, ValueCategory.SECURITY),
)


@dataclass(frozen=True)
class ValuesProfile:
    """Category-level view of a client's value cards."""

    top5_counts: Counter = field(default_factory=Counter)
    top10_counts: Counter = field(default_factory=Counter)
    non_negotiable_counts: Counter = field(default_factory=Counter)
    important_counts: Counter = field(default_factory=Counter)
    dominant: ValueCategory | None = None
    secondary: ValueCategory | None = None
    conflict_flags: tuple[str, ...] = ()

    @property
    def top5_categories(self) -> set[ValueCategory]:
        return {c for c, n in self.top5_counts.items() if n > 0}

    @property
    def top10_categories(self) -> set[ValueCategory]:
        return {c for c, n in self.top10_counts.items() if n > 0}

    @property
    def non_negotiable_categories(self) -> set[ValueCategory]:
        return {c for c, n in self.non_negotiable_counts.items() if n > 0}

    def is_leading(self, category: ValueCategory) -> bool:
        """True when category is the dominant or secondary category."""
        return category in (self.dominant, self.secondary)

    def to_dict(self) -> dict[str, Any]:
        return {
            "dominantCategory": self.dominant.value if self.dominant else None,
            "secondaryCategory": self.secondary.value if self.secondary else None,
            "top5Counts": _counts_dict(self.top5_counts),
            "top10Counts": _counts_dict(self.top10_counts),
            "nonNegotiableCounts": _counts_dict(self.non_negotiable_counts),
            "importantCounts": _counts_dict(self.important_counts),
            "conflictFlags": list(self.conflict_flags),
        }


def _counts_dict(counts: Counter) -> dict[str, int]:
    return {c.value: counts[c] for c in CATEGORY_ORDER if counts[c] > 0}


def count_categories(card_ids: tuple[str, ...] | list[str]) -> Counter:
    """Count cards per category. Unknown card ids are ignored."""
    counts: Counter = Counter()
    for card_id in card_ids:
        category = get_card_category(card_id)
        if category is not None:
            counts[category] += 1
    return counts


def _break_tie(
    tied: list[ValueCategory],
    non_negotiable_counts: Counter,
    top10_counts: Counter,
) -> ValueCategory:
    """Non-negotiables first, then top 10, then the fixed category order."""
    return min(
        tied,
        key=lambda c: (-non_negotiable_counts[c], -top10_counts[c], CATEGORY_ORDER.index(c)),
    )


def find_dominant_categories(
    top5_counts: Counter,
    non_negotiable_counts: Counter,
    top10_counts: Counter,
) -> tuple[ValueCategory | None, ValueCategory | None]:
    """Return (dominant, secondary) categories by top-5 count."""
    if not any(top5_counts[c] > 0 for c in CATEGORY_ORDER):
        return None, None

    max_count = max(top5_counts[c] for c in CATEGORY_ORDER)
    tied_first = [c for c in CATEGORY_ORDER if top5_counts[c] == max_count]
    dominant = _break_tie(tied_first, non_negotiable_counts, top10_counts)

    remaining = [c for c in CATEGORY_ORDER if c is not dominant and top5_counts[c] > 0]
    if not remaining:
        return dominant, None

    second_count = max(top5_counts[c] for c in remaining)
    tied_second = [c for c in remaining if top5_counts[c] == second_count]
    return dominant, _break_tie(tied_second, non_negotiable_counts, top10_counts)


def detect_conflict_flags(
    top5_categories: set[ValueCategory],
    non_negotiable_categories: set[ValueCategory],
    dominant: ValueCategory | None,
) -> list[str]:
    """
    Flag value tensions.

    A pair is flagged when both categories are in the top 5, or when one is
    dominant and the other shows up among the non-negotiables.
    """
    flags = []
    for cat_a, cat_b in CONFLICT_PAIRS:
        both_in_top5 = cat_a in top5_categories and cat_b in top5_categories
        dominant_vs_non_negotiable = (dominant is cat_a and cat_b in non_negotiable_categories) or (
            dominant is cat_b and cat_a in non_negotiable_categories
        )
        if both_in_top5 or dominant_vs_non_negotiable:
            flags.append(f"{cat_a.value}_vs_{cat_b.value}")
    return flags


def derive_values_profile(values: ValuesDiscovery | None) -> ValuesProfile:
    """Compute category counts, leading categories and conflict flags."""
    if values is None:
        return ValuesProfile()

    important_ids = [card_id for card_id, pile in values.piles.items() if pile is ValuePile.IMPORTANT]
    top5_counts = count_categories(values.top5)
    top10_counts = count_categories(values.top10)
    non_negotiable_counts = count_categories(values.non_negotiables)

    dominant, secondary = find_dominant_categories(top5_counts, non_negotiable_counts, top10_counts)
    top5_categories = {c for c, n in top5_counts.items() if n > 0}
    non_negotiable_categories = {c for c, n in non_negotiable_counts.items() if n > 0}

    return ValuesProfile(
        top5_counts=top5_counts,
        top10_counts=top10_counts,
        non_negotiable_counts=non_negotiable_counts,
        important_counts=count_categories(important_ids),
        dominant=dominant,
        secondary=secondary,
        conflict_flags=tuple(detect_conflict_flags(top5_categories, non_negotiable_categories, dominant)),
    )

"""Normalization utilities for diff-stable insights snapshots.

Raw insights output contains high-churn fields (generation timestamp, tool
duration) that create spurious diffs when the same intake record is analyzed
twice. This module strips them and produces a deterministic view.

The normalization contract:
1. Key ordering: sorted at every level
2. Null vs empty: connection lists always [], scalars null
3. Arrays: set-like lists sorted, ranked lists preserve order
4. Timestamps: removed (generatedAt, meta.duration_ms)
5. NaN/inf sanitization: replaced with null for JSON safety
"""

from __future__ import annotations

import copy
import hashlib
import json
import math
from typing import Any

# Snapshot format version - bump when normalization logic changes
SNAPSHOT_VERSION = "1.0.0"

# Per-item list fields whose order carries no meaning
_SET_LIKE_ITEM_FIELDS = ("valueConnections", "goalConnections", "riskFactors", "dependencies")


def canonical_dumps(obj: Any) -> str:
    """Produce canonical JSON string with sorted keys and minimal separators.

    Uses allow_nan=False to fail fast if NaN/inf values slip through
    sanitization.
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def normalize_insights_for_diff(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize raw insights output for diff-stable comparisons.

    Areas and recommendations keep their ranked order; the connection
    lists inside each item are sorted.

    Args:
        raw: Raw generate_insights output (or DiscoveryInsights.to_dict())

    Returns:
        Normalized dict suitable for canonical JSON serialization
    """
    data = copy.deepcopy(raw)

    data = _sanitize_nan_inf(data)

    # Remove high-churn runtime fields
    _delete_path(data, ("meta", "duration_ms"))
    _delete_path(data, ("generatedAt",))

    for path in (("focusAreas", "areas"), ("actions", "recommendations")):
        items = _get_path(data, path)
        if not isinstance(items, list):
            continue
        for item in items:
            if isinstance(item, dict):
                _normalize_item_lists(item)

    return data


def build_insights_snapshot(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Build a compact snapshot of the decision-relevant insight fields.

    The snapshot includes:
    - snapshot_version: Format version for compatibility checking
    - snapshot_hash: SHA-256 hash of canonical JSON for change detection

    Args:
        raw: Raw generate_insights output

    Returns:
        Compact snapshot dict with version and hash
    """
    normalized = normalize_insights_for_diff(raw)

    profile = normalized.get("strategyProfile") or {}
    areas = _get_path(normalized, ("focusAreas", "areas")) or []
    recommendations = _get_path(normalized, ("actions", "recommendations")) or []
    summary = normalized.get("inputSummary") or {}

    snapshot_data = {
        "snapshot_version": SNAPSHOT_VERSION,
        "completion_percentage": summary.get("completionPercentage"),
        "income_strategy": _dimension_value(profile, "incomeStrategy"),
        "timing_sensitivity": _dimension_value(profile, "timingSensitivity"),
        "planning_flexibility": _dimension_value(profile, "planningFlexibility"),
        "complexity_tolerance": _dimension_value(profile, "complexityTolerance"),
        "guidance_level": _dimension_value(profile, "guidanceLevel"),
        "domain_ranking": [a.get("domain") for a in areas if isinstance(a, dict)],
        "top_priorities": _get_path(normalized, ("focusAreas", "topPriorities")) or [],
        "action_ids": [r.get("id") for r in recommendations if isinstance(r, dict)],
    }

    # Hash includes snapshot_version so version bumps change the hash
    canonical_json = canonical_dumps(snapshot_data)
    snapshot_hash = hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()[:16]

    return {
        **snapshot_data,
        "snapshot_hash": snapshot_hash,
    }


# ---------------- Path helpers ----------------

def _delete_path(root: dict[str, Any], path: tuple[str, ...]) -> None:
    """Delete a nested key if it exists."""
    parent = root
    for k in path[:-1]:
        if not isinstance(parent, dict) or k not in parent:
            return
        parent = parent[k]
    if isinstance(parent, dict):
        parent.pop(path[-1], None)


def _get_path(root: dict[str, Any], path: tuple[str, ...]) -> Any:
    """Get value at nested path, or None if not found."""
    cur: Any = root
    for k in path:
        if not isinstance(cur, dict) or k not in cur:
            return None
        cur = cur[k]
    return cur


# ---------------- Normalization helpers ----------------

def _dimension_value(profile: dict[str, Any], key: str) -> str | None:
    dimension = profile.get(key)
    if isinstance(dimension, dict):
        return dimension.get("value")
    return None


def _normalize_item_lists(item: dict[str, Any]) -> None:
    """Sort set-like lists on an area or recommendation; null connections become []."""
    for key in _SET_LIKE_ITEM_FIELDS:
        if key not in item:
            continue
        value = item[key]
        if value is None:
            if key in ("valueConnections", "goalConnections"):
                item[key] = []
            continue
        if isinstance(value, list):
            item[key] = sorted(value, key=str)


def _is_nan_or_inf(x: Any) -> bool:
    """Check if value is NaN or inf."""
    try:
        return math.isnan(x) or math.isinf(x)
    except (TypeError, ValueError):
        return False


def _sanitize_nan_inf(obj: Any) -> Any:
    """Recursively replace NaN, inf, -inf with None."""
    if isinstance(obj, dict):
        return {k: _sanitize_nan_inf(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_sanitize_nan_inf(item) for item in obj]
    elif isinstance(obj, bool):
        return obj
    elif _is_nan_or_inf(obj):
        return None
    return obj

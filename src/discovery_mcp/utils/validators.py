"""Validation utilities and parameter classes."""

import operator
import os
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, TypeVar

E = TypeVar("E", bound=Enum)

# Plausible bounds for a target retirement age
MIN_RETIREMENT_AGE = 50
MAX_RETIREMENT_AGE = 80

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class EngineSettings:
    """Immutable engine settings. Read once per call from the environment."""

    retirement_age: int = 65
    strict_invariants: bool = True

    def __post_init__(self) -> None:
        if not MIN_RETIREMENT_AGE <= self.retirement_age <= MAX_RETIREMENT_AGE:
            raise ValueError(
                f"Invalid retirement_age '{self.retirement_age}'. "
                f"Must be between {MIN_RETIREMENT_AGE} and {MAX_RETIREMENT_AGE}"
            )

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from DISCOVERY_* environment variables."""
        raw_age = os.environ.get("DISCOVERY_RETIREMENT_AGE", "65").strip()
        try:
            retirement_age = int(raw_age)
        except ValueError:
            raise ValueError(f"Invalid DISCOVERY_RETIREMENT_AGE '{raw_age}'") from None

        raw_strict = os.environ.get("DISCOVERY_STRICT_INVARIANTS", "1").strip().lower()
        if raw_strict in _TRUTHY:
            strict = True
        elif raw_strict in _FALSY:
            strict = False
        else:
            raise ValueError(f"Invalid DISCOVERY_STRICT_INVARIANTS '{raw_strict}'")

        return cls(retirement_age=retirement_age, strict_invariants=strict)


def check_rule(
    value: float | None,
    threshold: float,
    comparator: Callable[[float, float], bool] = operator.gt,
) -> bool | None:
    """
    Check a rule with nullable boolean semantics.

    If value is None, returns None (not False).

    Args:
        value: The value to check (may be None)
        threshold: The threshold to compare against
        comparator: Comparison function (default: operator.gt)

    Returns:
        True/False if value is not None, None otherwise
    """
    if value is None:
        return None
    return comparator(value, threshold)


def parse_enum(enum_cls: type[E], value: Any, aliases: dict[str, E] | None = None) -> E | None:
    """
    Coerce a raw value to an enum member, or None if it is not one.

    Matching is case-insensitive on the member value. Unknown values are
    treated as absent rather than raising.
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    key = value.strip()
    if aliases and key.upper() in aliases:
        return aliases[key.upper()]
    for member in enum_cls:
        if str(member.value).lower() == key.lower():
            return member
    return None


def parse_date(value: Any) -> date | None:
    """Parse an ISO date or datetime (string, date or datetime) to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def parse_int(value: Any, low: int | None = None, high: int | None = None) -> int | None:
    """Parse an integer, returning None when missing, malformed or out of range."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    if not isinstance(value, int):
        return None
    if low is not None and value < low:
        return None
    if high is not None and value > high:
        return None
    return value


def calculate_age(birth_date: date | None, today: date) -> int | None:
    """Whole years between birth_date and today, or None if unknown or in the future."""
    if birth_date is None:
        return None
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    if age < 0:
        return None
    return age

"""Group-by-category sums shared by the comparison and distribution strategies."""

from typing import Any

from insightflow.insights import format_plain
from insightflow.models import Dataset
from insightflow.normalize import finite_or_zero


def category_key(value: Any, unknown_label: str) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return unknown_label
    return value if isinstance(value, str) else format_plain(value)


def sum_by_category(
    dataset: Dataset, category_col: str, value_col: str, unknown_label: str = "Unknown"
) -> list[dict[str, Any]]:
    """`[{"name", "value"}]` per distinct category, in first-seen order."""
    totals: dict[str, float | int] = {}
    for row in dataset.records:
        key = category_key(row.get(category_col), unknown_label)
        totals[key] = totals.get(key, 0) + finite_or_zero(row.get(value_col))
    return [{"name": name, "value": value} for name, value in totals.items()]


def top_groups(groups: list[dict[str, Any]], n: int) -> list[dict[str, Any]]:
    """Largest `n` groups by value; ties keep first-seen order."""
    return sorted(groups, key=lambda g: g["value"], reverse=True)[:n]

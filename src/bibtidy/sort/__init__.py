"""Entry ordering by configurable sort keys."""

from bibtidy.sort.planner import SortKey, entry_sort_value, parse_sort_keys, plan_order, sort_items

__all__ = [
    "SortKey",
    "entry_sort_value",
    "parse_sort_keys",
    "plan_order",
    "sort_items",
]

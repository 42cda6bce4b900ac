"""
Question bank distribution analytics: how the bank spreads over Bloom levels
and topics. Deleted and unreadable rows are excluded.
"""

from typing import Dict, Iterable, List

from analysis.inventory import InventoryLike, InventoryRow, live_rows
from analysis.schemas import LevelShare
from classification.normalizer import normalize_level, normalize_topic
from classification.taxonomy import COGNITIVE_LEVELS

UNKNOWN = "unknown"


def _percentage(count: int, total: int) -> int:
    # int(x + 0.5) rounds half up; round() would round half to even
    return int(count / total * 100 + 0.5) if total else 0


def bloom_distribution(inventory: Iterable[InventoryLike]) -> List[LevelShare]:
    """
    Count items per cognitive level.

    Bloom levels come first in taxonomy order (only those present), then any
    unrecognised labels in first-seen order. Percentages are rounded half up.
    """
    items: List[InventoryRow] = list(live_rows(inventory))
    counts: Dict[str, int] = {}
    for item in items:
        level = normalize_level(item.cognitive_level) or UNKNOWN
        counts[level] = counts.get(level, 0) + 1

    total = len(items)
    ordered = [lvl for lvl in COGNITIVE_LEVELS if lvl in counts]
    ordered += [lvl for lvl in counts if lvl not in COGNITIVE_LEVELS]
    return [
        LevelShare(level=lvl, count=counts[lvl], percentage=_percentage(counts[lvl], total))
        for lvl in ordered
    ]


def coverage_by_topic(inventory: Iterable[InventoryLike]) -> Dict[str, Dict[str, int]]:
    """Normalised topic → {level: count}."""
    coverage: Dict[str, Dict[str, int]] = {}
    for item in live_rows(inventory):
        topic = normalize_topic(item.topic) or UNKNOWN
        level = normalize_level(item.cognitive_level) or UNKNOWN
        row = coverage.setdefault(topic, {})
        row[level] = row.get(level, 0) + 1
    return coverage

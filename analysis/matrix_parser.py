"""
Requirement Matrix Parser

Converts a raw TOS payload into a RequirementMatrix. Several TOS producers
have existed, each storing per-level counts differently; all of them are
accepted:

  A. flat level keys        {"topic_name": "Algebra", "remembering_items": 5, ...}
  B. level → count mapping  {"topic_name": "Algebra", "counts": {"remembering": 5}}
                            ("bloom_counts" is accepted as the key too)
  C. distribution array     {"topic_name": "Algebra",
                             "distribution": [{"bloom_level": "remembering", "count": 5}]}
  D. nested matrix          {"topics": [...], "matrix": {"Algebra": {"remembering": {"count": 5}}}}

Within a topic, later forms overwrite earlier ones (A < B < C) and a nested
matrix (D) overwrites a topic's cells entirely. Topics named only in the
nested matrix are appended after the listed topics.

A structurally invalid matrix is the one loud failure of the analysis: it
raises InvalidInput instead of producing meaningless totals.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from analysis.schemas import RequirementMatrix, RequirementTopic
from classification.normalizer import normalize_level, normalize_topic
from classification.taxonomy import COGNITIVE_LEVELS

log = logging.getLogger(__name__)

ITEMS_SUFFIX = "_items"
COUNT_MAP_KEYS = ("counts", "bloom_counts")


class InvalidInput(ValueError):
    """Requirement matrix is malformed (e.g. missing its topics array)."""


def _coerce_count(value: Any, where: str) -> int:
    """Validate one required count. None counts as 0."""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise InvalidInput(f"{where}: count must be an integer, got {value!r}")
    if isinstance(value, int):
        count = value
    elif isinstance(value, float) and value.is_integer():
        count = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        count = int(value.strip())
    else:
        raise InvalidInput(f"{where}: count must be an integer, got {value!r}")
    if count < 0:
        raise InvalidInput(f"{where}: count must be >= 0, got {count}")
    return count


def _level_key(raw: Any) -> Optional[str]:
    """Resolve a level label to a canonical Bloom level, or None if unknown."""
    level = normalize_level(raw)
    return level if level in COGNITIVE_LEVELS else None


def _topic_name(raw: Mapping[str, Any], index: int) -> str:
    name = raw.get("topic_name") or raw.get("topic")
    if not isinstance(name, str) or not name.strip():
        raise InvalidInput(f"topics[{index}]: missing topic_name")
    return name


def _cells_from_topic(raw: Mapping[str, Any], where: str) -> Dict[str, int]:
    cells: Dict[str, int] = {}

    # A. flat "<level>_items" keys
    for key, value in raw.items():
        if isinstance(key, str) and key.endswith(ITEMS_SUFFIX):
            level = _level_key(key[: -len(ITEMS_SUFFIX)])
            if level:
                cells[level] = _coerce_count(value, f"{where}.{key}")

    # B. level → count mapping
    for map_key in COUNT_MAP_KEYS:
        counts = raw.get(map_key)
        if counts is None:
            continue
        if not isinstance(counts, Mapping):
            raise InvalidInput(f"{where}.{map_key}: expected an object")
        for key, value in counts.items():
            level = _level_key(key)
            if level:
                cells[level] = _coerce_count(value, f"{where}.{map_key}.{key}")

    # C. distribution array
    distribution = raw.get("distribution")
    if distribution is not None:
        if not isinstance(distribution, list):
            raise InvalidInput(f"{where}.distribution: expected an array")
        # Repeated levels inside one distribution add up
        spread: Dict[str, int] = {}
        for idx, entry in enumerate(distribution):
            if not isinstance(entry, Mapping):
                raise InvalidInput(f"{where}.distribution[{idx}]: expected an object")
            level = _level_key(entry.get("bloom_level") or entry.get("level"))
            if level:
                spread[level] = spread.get(level, 0) + _coerce_count(
                    entry.get("count"), f"{where}.distribution[{idx}].count"
                )
        cells.update(spread)

    return cells


def _cells_from_nested(raw: Any, where: str) -> Dict[str, int]:
    if not isinstance(raw, Mapping):
        raise InvalidInput(f"{where}: expected an object")
    cells: Dict[str, int] = {}
    for key, value in raw.items():
        level = _level_key(key)
        if not level:
            continue
        if isinstance(value, Mapping):
            value = value.get("count")
        cells[level] = _coerce_count(value, f"{where}.{key}")
    return cells


def _revalidate(matrix: RequirementMatrix) -> RequirementMatrix:
    """Canonicalise level keys and counts of an already-typed matrix."""
    topics: List[RequirementTopic] = []
    for index, topic in enumerate(matrix.topics):
        where = f"topics[{index}]"
        if not topic.topic_name.strip():
            raise InvalidInput(f"{where}: missing topic_name")
        cells: Dict[str, int] = {}
        for key, value in topic.cells.items():
            level = _level_key(key)
            if not level:
                raise InvalidInput(f"{where}.cells: unknown cognitive level {key!r}")
            cells[level] = _coerce_count(value, f"{where}.cells.{key}")
        topics.append(RequirementTopic(topic_name=topic.topic_name, cells=cells))
    return RequirementMatrix(topics=topics)


def parse_requirement_matrix(raw: Any) -> RequirementMatrix:
    """
    Parse a raw TOS payload into a RequirementMatrix.

    Args:
        raw: RequirementMatrix (re-checked) or a mapping with a `topics` array

    Returns:
        RequirementMatrix with canonical level keys

    Raises:
        InvalidInput: the payload is not a mapping, `topics` is missing or not
            an array, a topic has no name, a typed matrix uses an unknown level,
            or a count is not a non-negative integer
    """
    if isinstance(raw, RequirementMatrix):
        return _revalidate(raw)
    if not isinstance(raw, Mapping):
        raise InvalidInput("Requirement matrix must be an object")

    topics_raw = raw.get("topics")
    if not isinstance(topics_raw, list):
        raise InvalidInput("Requirement matrix is missing its 'topics' array")

    topics: List[RequirementTopic] = []
    for index, entry in enumerate(topics_raw):
        if not isinstance(entry, Mapping):
            raise InvalidInput(f"topics[{index}]: expected an object")
        name = _topic_name(entry, index)
        topics.append(RequirementTopic(topic_name=name, cells=_cells_from_topic(entry, f"topics[{index}]")))

    nested = raw.get("matrix")
    if nested is not None:
        if not isinstance(nested, Mapping):
            raise InvalidInput("'matrix' must be an object keyed by topic")
        by_name = {normalize_topic(t.topic_name): t for t in topics}
        for name, levels in nested.items():
            cells = _cells_from_nested(levels, f"matrix[{name!r}]")
            existing = by_name.get(normalize_topic(name))
            if existing is not None:
                existing.cells = cells
            else:
                topic = RequirementTopic(topic_name=str(name), cells=cells)
                topics.append(topic)
                by_name[normalize_topic(name)] = topic

    log.debug("Parsed requirement matrix: %s topic(s)", len(topics))
    return RequirementMatrix(topics=topics)

"""
TOS Sufficiency Analyzer

Checks whether the question bank holds enough classified items to satisfy a
Table of Specification, cell by cell (topic × cognitive level).

Steps:
1. Parse + normalise the requirement matrix (topics and level labels)
2. Normalise the inventory (non-deleted items only; topics and levels)
3. Per cell with required > 0: count items with the same level whose topic
   matches by substring containment in either direction
4. Totals, overall score and status
5. Recommendations + structured generation requests for the gaps

Topic matching is permissive ("algebra" ≈ "algebra basics"). Short names
over-match ("math" ≈ "mathematics") and two TOS topics sharing a substring
both count the same item; such overlaps are logged at DEBUG.

The inventory is never mutated and nothing is cached: every call reflects the
inventory it is handed.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Set, Tuple, Union

from analysis.matrix_parser import parse_requirement_matrix
from analysis.inventory import InventoryLike, as_row
from analysis.schemas import (
    GenerationRequest,
    RequirementMatrix,
    SufficiencyAnalysis,
    SufficiencyResult,
)
from classification.normalizer import normalize_level, normalize_topic
from classification.taxonomy import COGNITIVE_LEVELS

log = logging.getLogger("analysis.pipeline")

WARNING_RATIO = 0.7
PASS_SCORE = 100.0
WARNING_SCORE = 70.0

# Itemised recommendation lines
MAX_FAIL_LINES = 3
MAX_WARNING_LINES = 2


def topics_match(t1: str, t2: str) -> bool:
    """
    Fuzzy topic match on normalised names: either contains the other.

    Empty names never match (an unlabelled item is not evidence for every topic).
    """
    if not t1 or not t2:
        return False
    return t1 in t2 or t2 in t1


def cell_status(required: int, available: int) -> str:
    """pass if available ≥ required, warning if ≥ 70 % of required, else fail."""
    if available >= required:
        return "pass"
    if available >= required * WARNING_RATIO:
        return "warning"
    return "fail"


def overall_status(score: float) -> str:
    if score >= PASS_SCORE:
        return "pass"
    if score >= WARNING_SCORE:
        return "warning"
    return "fail"


def _normalise_inventory(inventory: Iterable[InventoryLike], approved_only: bool) -> List[Tuple[str, str, str]]:
    """Return (id, topic, level) for every countable item."""
    rows = []
    skipped = 0
    for index, raw in enumerate(inventory):
        item = as_row(raw, index)
        if item is None or item.deleted or (approved_only and not item.approved):
            skipped += 1
            continue
        rows.append((item.id, normalize_topic(item.topic), normalize_level(item.cognitive_level)))
    log.info(f"[SUFFICIENCY] Inventory: {len(rows)} countable item(s), {skipped} skipped")
    return rows


def _recommendations(results: List[SufficiencyResult]) -> List[str]:
    missing = [r for r in results if r.gap > 0]
    if not missing:
        return ["All required questions exist in the bank."]

    total_gap = sum(r.gap for r in missing)
    # sorted() is stable: equal gaps keep matrix order
    worst = sorted(missing, key=lambda r: r.gap, reverse=True)
    fails = [r for r in worst if r.status == "fail"][:MAX_FAIL_LINES]
    warnings = [r for r in worst if r.status == "warning"][:MAX_WARNING_LINES]

    lines = [f"Generate {total_gap} additional questions to fill the gaps."]
    for r in fails + warnings:
        lines.append(
            f"• {r.topic} ({r.cognitive_level}) requires {r.required}, but only {r.available} exist."
        )
    remaining = len(missing) - len(fails) - len(warnings)
    if remaining > 0:
        lines.append(f"... and {remaining} more cells with gaps.")
    return lines


def analyze_sufficiency(
    matrix: Union[RequirementMatrix, Dict[str, Any]],
    inventory: Iterable[InventoryLike],
    approved_only: bool = False,
) -> SufficiencyAnalysis:
    """
    Reconcile a requirement matrix against the question bank.

    Args:
        matrix: RequirementMatrix or raw TOS payload (see matrix_parser)
        inventory: Classified bank items; deleted and unreadable rows are skipped
        approved_only: Count only approved items

    Returns:
        SufficiencyAnalysis with one result per cell with required > 0

    Raises:
        InvalidInput: structurally invalid matrix
    """
    requirements = parse_requirement_matrix(matrix)
    items = _normalise_inventory(inventory, approved_only)

    results: List[SufficiencyResult] = []
    total_required = 0
    total_available = 0
    matched_topics: Dict[str, Set[str]] = defaultdict(set)

    for cell in requirements.iter_cells(list(COGNITIVE_LEVELS)):
        required = cell.required_count
        if required == 0:
            continue

        topic = normalize_topic(cell.topic_name)
        level = cell.cognitive_level

        available = 0
        for item_id, item_topic, item_level in items:
            if item_level == level and topics_match(item_topic, topic):
                available += 1
                matched_topics[item_id].add(topic)

        gap = max(0, required - available)
        total_required += required
        total_available += available
        results.append(SufficiencyResult(
            topic=topic,
            cognitive_level=level,
            required=required,
            available=available,
            gap=gap,
            status=cell_status(required, available),
        ))

    overlapping = {item_id: t for item_id, t in matched_topics.items() if len(t) > 1}
    if overlapping:
        log.debug("[SUFFICIENCY] %s item(s) counted under several topics: %s", len(overlapping), overlapping)

    score = (total_available / total_required) * 100 if total_required > 0 else 100.0
    analysis = SufficiencyAnalysis(
        overall_status=overall_status(score),
        overall_score=score,
        total_required=total_required,
        total_available=total_available,
        results=results,
        recommendations=_recommendations(results),
        generation_requests=[
            GenerationRequest(topic=r.topic, cognitive_level=r.cognitive_level, count=r.gap, status=r.status)
            for r in sorted(results, key=lambda r: r.gap, reverse=True)
            if r.gap > 0
        ],
    )
    log.info(
        f"[SUFFICIENCY] {len(results)} cell(s): required={total_required} "
        f"available={total_available} score={score:.1f} status={analysis.overall_status}"
    )
    return analysis

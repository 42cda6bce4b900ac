"""
Classification Review Workflow

Pure helpers behind the human-in-the-loop correction step:
  - triage a batch: auto-validate high-confidence items, queue the rest
  - apply a validator's override to a classification

Persisting the outcome (validation_status, validated_by, audit rows) is the
storage layer's job; these functions only compute it.
"""

import logging
from typing import Iterable, Union

from classification.schemas import Classification, InventoryItem, ReviewTriage

log = logging.getLogger(__name__)

DEFAULT_AUTO_APPROVE_THRESHOLD = 0.9

OVERRIDABLE_FIELDS = {"cognitive_level", "knowledge_dimension", "difficulty"}


def triage_for_review(
    items: Iterable[Union[InventoryItem, dict]],
    auto_approve_threshold: float = DEFAULT_AUTO_APPROVE_THRESHOLD,
) -> ReviewTriage:
    """
    Split questions into auto-validated and needs-review buckets.

    Items with no recorded confidence always need review. Deleted items are
    ignored.
    """
    triage = ReviewTriage(auto_approve_threshold=auto_approve_threshold)
    for raw in items:
        item = raw if isinstance(raw, InventoryItem) else InventoryItem.model_validate(raw)
        if item.deleted:
            continue
        if item.confidence is not None and item.confidence >= auto_approve_threshold:
            triage.validated.append(item.id)
        else:
            triage.needs_review.append(item.id)

    log.info(
        f"[REVIEW] Triage: {len(triage.validated)} validated, "
        f"{len(triage.needs_review)} need review (threshold={auto_approve_threshold})"
    )
    return triage


def apply_override(classification: Classification, confidence: float = 1.0, **fields) -> Classification:
    """
    Return a copy of `classification` with a validator's corrections applied.

    Only the label fields can be overridden. The validator's confidence
    replaces the heuristic one and the record leaves the review queue.

    Raises:
        ValueError: unknown field name
        pydantic.ValidationError: invalid label value
    """
    unknown = set(fields) - OVERRIDABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot override field(s): {', '.join(sorted(unknown))}")

    data = classification.model_dump(exclude={"bloom_level"})
    data.update(fields)
    data["confidence"] = confidence
    data["needs_review"] = False
    return Classification.model_validate(data)

import pytest
from pydantic import ValidationError

from classification.classifier import classify
from classification.review import apply_override, triage_for_review


def test_triage_splits_on_threshold() -> None:
    items = [
        {"id": "high", "confidence": 0.95},
        {"id": "edge", "confidence": 0.9},
        {"id": "low", "confidence": 0.5},
        {"id": "unscored"},
        {"id": "gone", "confidence": 1.0, "deleted": True},
    ]

    triage = triage_for_review(items, auto_approve_threshold=0.9)

    assert triage.validated == ["high", "edge"]
    assert triage.needs_review == ["low", "unscored"]


def test_triage_accepts_numeric_ids() -> None:
    triage = triage_for_review([{"id": 42, "confidence": 0.99}])

    assert triage.validated == ["42"]


def test_override_replaces_labels_and_clears_review() -> None:
    original = classify("Photosynthesis occurs in chloroplasts.", "true_false")
    assert original.needs_review

    corrected = apply_override(original, cognitive_level="remembering", knowledge_dimension="factual")

    assert corrected.cognitive_level == "remembering"
    assert corrected.bloom_level == "remembering"
    assert corrected.knowledge_dimension == "factual"
    assert corrected.difficulty == original.difficulty
    assert corrected.confidence == 1.0
    assert corrected.needs_review is False
    assert original.cognitive_level == "understanding"


def test_override_rejects_unknown_fields() -> None:
    with pytest.raises(ValueError, match="fingerprint"):
        apply_override(classify("Define entropy."), fingerprint=[])


def test_override_rejects_invalid_labels() -> None:
    with pytest.raises(ValidationError):
        apply_override(classify("Define entropy."), cognitive_level="memorising")

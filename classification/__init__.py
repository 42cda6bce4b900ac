"""
Question Classification Package

Rule-based pipeline (no AI/LLM):
1. Normalize   — lowercase token streams, label normalisation
2. Classify    — Bloom level, knowledge dimension, difficulty, confidence
3. Score       — item quality + Flesch-Kincaid readability
4. Fingerprint — 50-bucket hashed term vector
5. Similarity  — bag-of-words cosine for duplicate detection
6. Review      — confidence triage and human overrides
"""

from .normalizer import normalize_topic, normalize_level, similarity_tokens
from .classifier import QuestionClassifier, classify, classify_batch
from .fingerprint import semantic_vector, simple_hash
from .similarity import similarity, find_similar, find_duplicate_pairs
from .review import triage_for_review, apply_override
from .schemas import (
    RawQuestion,
    Classification,
    InventoryItem,
    CorpusEntry,
    SimilarityMatch,
    DuplicatePair,
    ReviewTriage,
)

__all__ = [
    # Normalize
    "normalize_topic",
    "normalize_level",
    "similarity_tokens",

    # Classify
    "QuestionClassifier",
    "classify",
    "classify_batch",

    # Fingerprint
    "semantic_vector",
    "simple_hash",

    # Similarity
    "similarity",
    "find_similar",
    "find_duplicate_pairs",

    # Review
    "triage_for_review",
    "apply_override",

    # Schemas
    "RawQuestion",
    "Classification",
    "InventoryItem",
    "CorpusEntry",
    "SimilarityMatch",
    "DuplicatePair",
    "ReviewTriage",
]

"""
Pydantic schemas for question classification, similarity search and review.
"""

from typing import List, Optional, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field


QuestionType = Literal["mcq", "true_false", "essay", "short_answer"]
CognitiveLevel = Literal["remembering", "understanding", "applying", "analyzing", "evaluating", "creating"]
KnowledgeDimension = Literal["factual", "conceptual", "procedural", "metacognitive"]
Difficulty = Literal["easy", "average", "difficult"]

REVIEW_CONFIDENCE_THRESHOLD = 0.7
FINGERPRINT_SIZE = 50


# ─── Input ─────────────────────────────────────────────────────────────────────

class RawQuestion(BaseModel):
    """Question text as authored, before classification."""
    model_config = ConfigDict(frozen=True)

    text: str
    question_type: QuestionType = "mcq"
    topic: Optional[str] = None


# ─── Classifier output ─────────────────────────────────────────────────────────

class Classification(BaseModel):
    """Pedagogical label produced by the classifier for one question."""
    model_config = ConfigDict(frozen=True)

    cognitive_level: CognitiveLevel
    knowledge_dimension: KnowledgeDimension
    difficulty: Difficulty
    confidence: float = Field(..., ge=0.0, le=1.0)
    quality_score: float = Field(..., ge=0.0, le=1.0)
    readability_score: float                          # Flesch-Kincaid grade, typically 0–20
    fingerprint: List[float] = Field(default_factory=list)   # 50 buckets, unit length or all zero
    needs_review: bool

    @computed_field
    @property
    def bloom_level(self) -> str:
        """Older consumers read the cognitive level under this key."""
        return self.cognitive_level


# ─── Inventory (question bank rows handed in by the storage layer) ─────────────

class InventoryItem(BaseModel):
    """
    A persisted, already-classified question.

    Labels are whatever the bank holds (imports, human overrides, older
    classifier versions), so they are free strings here and normalised by the
    consumers.
    """
    id: str
    text: Optional[str] = ""
    question_type: Optional[str] = "mcq"
    topic: Optional[str] = None
    cognitive_level: Optional[str] = Field(None, alias="bloom_level")
    knowledge_dimension: Optional[str] = None
    difficulty: Optional[str] = None
    confidence: Optional[float] = None
    deleted: Optional[bool] = False
    approved: Optional[bool] = False
    validation_status: Optional[str] = None   # "pending" | "validated" | "rejected"

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


# ─── Similarity ────────────────────────────────────────────────────────────────

class CorpusEntry(BaseModel):
    """One question to compare against."""
    id: str
    text: str


class SimilarityMatch(BaseModel):
    id: str
    score: float


class DuplicatePair(BaseModel):
    """Near-duplicate pair, ready to persist as a question_similarities row."""
    first_id: str
    second_id: str
    score: float
    algorithm_used: str = "cosine"


# ─── Review workflow ───────────────────────────────────────────────────────────

class ReviewTriage(BaseModel):
    """Outcome of a batch validation pass."""
    validated: List[str] = Field(default_factory=list)
    needs_review: List[str] = Field(default_factory=list)
    auto_approve_threshold: float

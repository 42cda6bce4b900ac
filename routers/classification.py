"""
Classification Router — /classification

Thin HTTP glue over the rule-based classifier and similarity engine.
Endpoints:
  POST /classification/classify          — classify a batch of questions
  POST /classification/similarity        — rank a corpus against one question
  POST /classification/duplicates        — all near-duplicate pairs in a corpus
  POST /classification/review/triage     — auto-validate by confidence
  POST /classification/review/override   — apply a validator's correction

Nothing here touches storage: callers send the corpus / inventory and
persist what comes back.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, ValidationError

import config
from classification.classifier import classify_batch
from classification.review import apply_override, triage_for_review
from classification.schemas import (
    Classification,
    CorpusEntry,
    CognitiveLevel,
    Difficulty,
    DuplicatePair,
    InventoryItem,
    KnowledgeDimension,
    RawQuestion,
    ReviewTriage,
    SimilarityMatch,
)
from classification.similarity import MAX_RESULTS, find_duplicate_pairs, find_similar

router = APIRouter(prefix="/classification", tags=["classification"])

log = logging.getLogger(__name__)


# Schemas
class SimilarityRequest(BaseModel):
    """Find questions similar to one question text."""
    question_text: str = Field(..., max_length=5000)
    question_id: Optional[str] = Field(None, description="Id of the query's own row, excluded from results")
    threshold: float = Field(config.SIMILARITY_THRESHOLD, ge=0.0, le=1.0)
    corpus: List[CorpusEntry] = Field(default_factory=list)


class SimilarityResponse(BaseModel):
    similarities: List[SimilarityMatch]
    total: int
    threshold: float


class DuplicateRequest(BaseModel):
    corpus: List[CorpusEntry]
    threshold: float = Field(config.SIMILARITY_THRESHOLD, ge=0.0, le=1.0)


class TriageRequest(BaseModel):
    items: List[InventoryItem]
    auto_approve_threshold: float = Field(config.AUTO_APPROVE_THRESHOLD, ge=0.0, le=1.0)


class OverrideRequest(BaseModel):
    """Validator's corrected labels for one classification."""
    classification: Classification
    confidence: float = Field(1.0, ge=0.0, le=1.0)
    cognitive_level: Optional[CognitiveLevel] = None
    knowledge_dimension: Optional[KnowledgeDimension] = None
    difficulty: Optional[Difficulty] = None


def _check_corpus_size(corpus: List[CorpusEntry]) -> None:
    if len(corpus) > config.MAX_SIMILARITY_CORPUS:
        raise HTTPException(
            status_code=422,
            detail=f"Corpus too large ({len(corpus)} > {config.MAX_SIMILARITY_CORPUS}); paginate or pre-filter",
        )


@router.post("/classify", response_model=List[Classification])
def classify_questions(questions: List[RawQuestion]):
    """Classify each question; output order matches input order."""
    return classify_batch(questions)


@router.post("/similarity", response_model=SimilarityResponse)
def similar_questions(request: SimilarityRequest):
    """Top matches at or above the threshold, plus how many matched in total."""
    _check_corpus_size(request.corpus)
    matches = find_similar(
        request.question_text,
        request.corpus,
        threshold=request.threshold,
        exclude_id=request.question_id,
        limit=None,
    )
    log.info(f"[SIMILARITY] corpus={len(request.corpus)} matched={len(matches)}")
    return SimilarityResponse(
        similarities=matches[:MAX_RESULTS],
        total=len(matches),
        threshold=request.threshold,
    )


@router.post("/duplicates", response_model=List[DuplicatePair])
def duplicate_pairs(request: DuplicateRequest):
    _check_corpus_size(request.corpus)
    return find_duplicate_pairs(request.corpus, threshold=request.threshold)


@router.post("/review/triage", response_model=ReviewTriage)
def review_triage(request: TriageRequest):
    return triage_for_review(request.items, auto_approve_threshold=request.auto_approve_threshold)


@router.post("/review/override", response_model=Classification)
def review_override(request: OverrideRequest):
    fields = {
        name: value
        for name, value in (
            ("cognitive_level", request.cognitive_level),
            ("knowledge_dimension", request.knowledge_dimension),
            ("difficulty", request.difficulty),
        )
        if value is not None
    }
    try:
        return apply_override(request.classification, confidence=request.confidence, **fields)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"Invalid override: {e}")

"""
Sufficiency Router — /sufficiency

HTTP glue over TOS sufficiency analysis.
Endpoints:
  POST /sufficiency/analyze              — coverage of a TOS by the bank
  POST /sufficiency/briefs               — generation briefs for the gaps
  POST /sufficiency/distribution         — bank spread over levels and topics
  GET  /sufficiency/formats              — predefined exam formats
  GET  /sufficiency/formats/{format_id}  — one format + question-type counts

A malformed requirement matrix is a client error (400). Anything else that
goes wrong inside the analysis is logged and reported as a generic 500.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from analysis.distribution import bloom_distribution, coverage_by_topic
from analysis.exam_formats import EXAM_FORMATS, get_exam_format, get_format_requirements
from analysis.generation_brief import build_generation_briefs
from analysis.matrix_parser import InvalidInput
from analysis.schemas import (
    ExamFormat,
    GenerationBrief,
    LevelShare,
    SectionRequirement,
    SufficiencyAnalysis,
)
from analysis.sufficiency import analyze_sufficiency
from classification.schemas import KnowledgeDimension

router = APIRouter(prefix="/sufficiency", tags=["sufficiency"])

log = logging.getLogger("analysis.pipeline")


# Schemas
class SufficiencyRequest(BaseModel):
    """TOS matrix (any supported producer format) + the bank to check it against."""
    matrix: Any = Field(..., description="Requirement matrix with a 'topics' array")
    inventory: List[Any] = Field(default_factory=list, description="Bank rows; unreadable rows are skipped")
    approved_only: bool = False


class BriefRequest(SufficiencyRequest):
    knowledge_dimension: Optional[KnowledgeDimension] = None
    question_type: str = "mcq"


class DistributionRequest(BaseModel):
    inventory: List[Any] = Field(default_factory=list, description="Bank rows; unreadable rows are skipped")


class DistributionResponse(BaseModel):
    total: int
    distribution: List[LevelShare]
    by_topic: Dict[str, Dict[str, int]]


class FormatResponse(BaseModel):
    format: ExamFormat
    requirements: List[SectionRequirement]


def _analyze(request: SufficiencyRequest) -> SufficiencyAnalysis:
    try:
        return analyze_sufficiency(request.matrix, request.inventory, approved_only=request.approved_only)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=f"Invalid requirement matrix: {e}")
    except Exception as e:
        log.error(f"[SUFFICIENCY] Unexpected error: {e}")
        raise HTTPException(status_code=500, detail="Unable to analyze question bank.")


@router.post("/analyze", response_model=SufficiencyAnalysis)
def analyze(request: SufficiencyRequest):
    """
    **Check a Table of Specification against the question bank.**

    Returns per-cell required / available / gap / status, the overall score
    and recommendations for the question generator.
    """
    return _analyze(request)


@router.post("/briefs", response_model=List[GenerationBrief])
def briefs(request: BriefRequest):
    analysis = _analyze(request)
    return build_generation_briefs(
        analysis,
        knowledge_dimension=request.knowledge_dimension,
        question_type=request.question_type,
    )


@router.post("/distribution", response_model=DistributionResponse)
def distribution(request: DistributionRequest):
    shares = bloom_distribution(request.inventory)
    return DistributionResponse(
        total=sum(s.count for s in shares),
        distribution=shares,
        by_topic=coverage_by_topic(request.inventory),
    )


@router.get("/formats", response_model=List[ExamFormat])
def list_formats():
    return EXAM_FORMATS


@router.get("/formats/{format_id}", response_model=FormatResponse)
def format_detail(format_id: str, total_items: Optional[int] = Query(None, ge=1)):
    exam_format = get_exam_format(format_id)
    if exam_format is None:
        raise HTTPException(status_code=404, detail=f"Exam format {format_id} not found")
    return FormatResponse(
        format=exam_format,
        requirements=get_format_requirements(exam_format, total_items),
    )

"""
Pydantic schemas for TOS (Table of Specification) sufficiency analysis.

Layer 1: RequirementMatrix — what the assessment needs (topic × level → count)
Layer 2: SufficiencyAnalysis — what the bank has against it, plus gaps
Layer 3: GenerationBrief — advisory payload for the external generator
"""

from typing import Dict, List, Optional, Literal

from pydantic import BaseModel, Field


SufficiencyStatus = Literal["pass", "warning", "fail"]


# ─── Layer 1: Requirements ─────────────────────────────────────────────────────

class RequirementCell(BaseModel):
    """One (topic, level) requirement."""
    topic_name: str
    cognitive_level: str
    required_count: int = Field(..., ge=0)


class RequirementTopic(BaseModel):
    """One TOS row: a topic and its required count per cognitive level."""
    topic_name: str
    cells: Dict[str, int] = Field(default_factory=dict)   # normalised level → required count


class RequirementMatrix(BaseModel):
    """Ordered TOS rows."""
    topics: List[RequirementTopic] = Field(default_factory=list)

    def iter_cells(self, levels: List[str]) -> List[RequirementCell]:
        """Flatten to cells: topic order first, then `levels` order."""
        cells = []
        for topic in self.topics:
            for level in levels:
                cells.append(RequirementCell(
                    topic_name=topic.topic_name,
                    cognitive_level=level,
                    required_count=topic.cells.get(level, 0),
                ))
        return cells


# ─── Layer 2: Analysis ─────────────────────────────────────────────────────────

class SufficiencyResult(BaseModel):
    """Coverage of one (topic, level) cell."""
    topic: str
    cognitive_level: str
    required: int
    available: int
    gap: int
    status: SufficiencyStatus


class GenerationRequest(BaseModel):
    """How many new items of which (topic, level) the generator should produce."""
    topic: str
    cognitive_level: str
    count: int
    status: SufficiencyStatus


class SufficiencyAnalysis(BaseModel):
    overall_status: SufficiencyStatus
    overall_score: float
    total_required: int
    total_available: int
    results: List[SufficiencyResult] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    generation_requests: List[GenerationRequest] = Field(default_factory=list)

    @property
    def total_gap(self) -> int:
        return sum(r.gap for r in self.results)


# ─── Layer 3: Generation briefs ────────────────────────────────────────────────

class GenerationBrief(BaseModel):
    """Constrained generation request: topic × Bloom × knowledge dimension."""
    topic: str
    cognitive_level: str
    knowledge_dimension: str
    difficulty: str
    count: int
    question_type: str = "mcq"
    bloom_instructions: str
    knowledge_instructions: str
    difficulty_instructions: str


class GeneratedQuestion(BaseModel):
    """Question returned by the external generator, before classification."""
    text: str = ""
    choices: Optional[Dict[str, str]] = None
    correct_answer: Optional[str] = None
    cognitive_level: Optional[str] = None
    knowledge_dimension: Optional[str] = None
    difficulty: Optional[str] = None
    topic: Optional[str] = None


class ConstraintCheck(BaseModel):
    valid: bool
    issues: List[str] = Field(default_factory=list)


# ─── Bank analytics ────────────────────────────────────────────────────────────

class LevelShare(BaseModel):
    """Share of the bank at one cognitive level."""
    level: str
    count: int
    percentage: int


# ─── Exam formats ──────────────────────────────────────────────────────────────

class ExamSection(BaseModel):
    id: str
    label: str                  # e.g. "Section A"
    title: str                  # e.g. "Multiple Choice"
    question_type: str          # "mcq" | "true_false" | "fill_blank" | "essay"
    start_number: int
    end_number: int
    points_per_question: int
    instruction: str

    @property
    def item_count(self) -> int:
        return self.end_number - self.start_number + 1


class ExamFormat(BaseModel):
    id: str
    name: str
    description: str
    total_items: int
    total_points: int
    sections: List[ExamSection]


class SectionRequirement(BaseModel):
    question_type: str
    count: int
    section_label: str
    section_title: str
    points_per_question: int

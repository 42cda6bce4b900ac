"""
Generation Briefs

Turns sufficiency gaps into constrained Bloom × knowledge-dimension requests
for the external question generator, and checks what comes back before it is
classified and stored. Nothing here calls the generator.
"""

import logging
from typing import List, Optional

from analysis.schemas import (
    ConstraintCheck,
    GeneratedQuestion,
    GenerationBrief,
    SufficiencyAnalysis,
)
from classification.taxonomy import (
    BLOOM_INSTRUCTIONS,
    DIFFICULTY_INSTRUCTIONS,
    KNOWLEDGE_INSTRUCTIONS,
    LEVEL_DEFAULT_DIFFICULTY,
    LEVEL_DEFAULT_DIMENSION,
)

log = logging.getLogger(__name__)

MIN_QUESTION_CHARS = 10
MIN_MCQ_CHOICES = 2


def build_generation_briefs(
    analysis: SufficiencyAnalysis,
    knowledge_dimension: Optional[str] = None,
    question_type: str = "mcq",
) -> List[GenerationBrief]:
    """
    Build one brief per gap cell, worst gap first.

    Args:
        analysis: Output of analyze_sufficiency
        knowledge_dimension: Force a dimension for every brief (default: per level)
        question_type: mcq | essay | ...

    Returns:
        List of GenerationBrief, empty when there are no gaps
    """
    briefs: List[GenerationBrief] = []
    for request in analysis.generation_requests:
        level = request.cognitive_level
        dimension = knowledge_dimension or LEVEL_DEFAULT_DIMENSION.get(level, "conceptual")
        difficulty = LEVEL_DEFAULT_DIFFICULTY.get(level, "average")
        briefs.append(GenerationBrief(
            topic=request.topic,
            cognitive_level=level,
            knowledge_dimension=dimension,
            difficulty=difficulty,
            count=request.count,
            question_type=question_type,
            bloom_instructions=BLOOM_INSTRUCTIONS.get(level, BLOOM_INSTRUCTIONS["understanding"]),
            knowledge_instructions=KNOWLEDGE_INSTRUCTIONS.get(dimension, KNOWLEDGE_INSTRUCTIONS["conceptual"]),
            difficulty_instructions=DIFFICULTY_INSTRUCTIONS[difficulty],
        ))
    log.info(f"[BRIEF] {len(briefs)} brief(s) for {sum(b.count for b in briefs)} question(s)")
    return briefs


def validate_generated_question(question: GeneratedQuestion) -> ConstraintCheck:
    """Check a generated question against its brief's basic constraints."""
    issues: List[str] = []

    if not question.text or len(question.text) < MIN_QUESTION_CHARS:
        issues.append("Question text too short")
    if not question.cognitive_level:
        issues.append("Missing Bloom level")
    if not question.knowledge_dimension:
        issues.append("Missing knowledge dimension")

    if question.choices is not None:
        keys = list(question.choices.keys())
        if len(keys) < MIN_MCQ_CHOICES:
            issues.append("MCQ requires at least 2 choices")
        if not question.correct_answer or question.correct_answer not in keys:
            issues.append("Invalid or missing correct answer")

    return ConstraintCheck(valid=not issues, issues=issues)

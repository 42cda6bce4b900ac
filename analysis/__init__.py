"""
TOS Sufficiency Analysis Package

Steps:
1. Matrix Parser      — raw TOS payload → RequirementMatrix (InvalidInput on bad shape)
2. Sufficiency        — per-cell available/gap/status, overall score
3. Generation Briefs  — gaps → constrained requests for the external generator
4. Distribution       — bank spread over Bloom levels and topics
5. Exam Formats       — section layouts and their question-type counts
"""

from .matrix_parser import InvalidInput, parse_requirement_matrix
from .sufficiency import analyze_sufficiency, topics_match
from .generation_brief import build_generation_briefs, validate_generated_question
from .distribution import bloom_distribution, coverage_by_topic
from .exam_formats import EXAM_FORMATS, get_exam_format, scaled_format_sections, get_format_requirements
from .schemas import (
    RequirementCell,
    RequirementTopic,
    RequirementMatrix,
    SufficiencyResult,
    SufficiencyAnalysis,
    GenerationRequest,
    GenerationBrief,
)

__all__ = [
    # Step 1: Parse
    "InvalidInput",
    "parse_requirement_matrix",

    # Step 2: Analyze
    "analyze_sufficiency",
    "topics_match",

    # Step 3: Briefs
    "build_generation_briefs",
    "validate_generated_question",

    # Step 4: Distribution
    "bloom_distribution",
    "coverage_by_topic",

    # Step 5: Formats
    "EXAM_FORMATS",
    "get_exam_format",
    "scaled_format_sections",
    "get_format_requirements",

    # Schemas
    "RequirementCell",
    "RequirementTopic",
    "RequirementMatrix",
    "SufficiencyResult",
    "SufficiencyAnalysis",
    "GenerationRequest",
    "GenerationBrief",
]

"""
Question Classifier
Labels a question with Bloom level, knowledge dimension, difficulty, quality,
readability and a semantic fingerprint.
Uses rule-based lexical heuristics (no AI/LLM).

Steps per question:
1. Cognitive level   — first cue verb hit in BLOOM_VERBS (default: understanding)
2. Knowledge dim.    — first cue verb hit in DIMENSION_VERBS, else indicator
                       phrases when no cognitive verb hit (default: conceptual)
3. Confidence        — base 0.5 adjusted by hits, length and type signals
4. Difficulty        — keyword > structure > cognitive-level fallback
5. Quality           — penalties for length, punctuation and MCQ stem form
6. Readability       — Flesch-Kincaid grade estimate
7. Fingerprint       — 50-bucket hashed term vector

Never raises on text content: degenerate input gets a low-confidence,
generic label with needs_review set so a human can correct it.
"""

import logging
import re
from typing import List, Optional, Tuple

from classification.fingerprint import semantic_vector
from classification.schemas import Classification, RawQuestion, REVIEW_CONFIDENCE_THRESHOLD
from classification.taxonomy import (
    BLOOM_VERBS,
    DIMENSION_VERBS,
    DIMENSION_INDICATORS,
    EASY_INDICATORS,
    DIFFICULT_INDICATORS,
    EASY_LEVELS,
    DIFFICULT_LEVELS,
)

log = logging.getLogger("classification.pipeline")

DEFAULT_LEVEL = "understanding"
DEFAULT_DIMENSION = "conceptual"
READABILITY_FALLBACK = 8.0


def _word_count(text: str) -> int:
    # Counts the empty edge token of leading/trailing whitespace, like the stored scores do
    return len(re.split(r"\s+", text))


class QuestionClassifier:
    """
    Classifies question text into pedagogical labels.
    Uses deterministic rules based on cue verbs, phrases and text shape.
    """

    @staticmethod
    def _verb_hit(t: str, verb: str, allow_colon: bool = False) -> bool:
        if f" {verb} " in t or t.startswith(verb):
            return True
        return allow_colon and f"{verb}:" in t

    @staticmethod
    def detect_cognitive_level(t: str) -> Tuple[str, int]:
        """
        Return (cognitive_level, verb_hits) for lowercased text.

        First match wins; BLOOM_VERBS order decides ties.
        """
        for verb, level in BLOOM_VERBS:
            if QuestionClassifier._verb_hit(t, verb, allow_colon=True):
                return level, 1
        return DEFAULT_LEVEL, 0

    @staticmethod
    def detect_knowledge_dimension(t: str, question_type: str, verb_hits: int) -> Tuple[str, int]:
        """
        Return (knowledge_dimension, dimension_hits) for lowercased text.

        Indicator phrases are only consulted when no cognitive cue verb was
        found. Essays are never labelled factual.
        """
        dimension = DEFAULT_DIMENSION
        hits = 0

        for verb, candidate in DIMENSION_VERBS:
            if QuestionClassifier._verb_hit(t, verb):
                dimension = candidate
                hits += 1
                break

        if verb_hits == 0:
            for candidate, indicators in DIMENSION_INDICATORS:
                if any(indicator in t for indicator in indicators):
                    dimension = candidate
                    hits += 1
                    break

        if question_type == "essay" and dimension == "factual":
            dimension = "conceptual"

        return dimension, hits

    @staticmethod
    def score_confidence(
        t: str,
        question_type: str,
        cognitive_level: str,
        verb_hits: int,
        dimension_hits: int,
    ) -> float:
        """Heuristic confidence in [0.1, 1.0], rounded to 2 decimals."""
        confidence = 0.5
        confidence += verb_hits * 0.2
        confidence += dimension_hits * 0.1

        words = _word_count(t)
        if words < 8:
            confidence -= 0.1
        if words > 25:
            confidence += 0.1

        if question_type == "mcq" and "which of the following" in t:
            confidence += 0.1
        if question_type == "essay" and cognitive_level == "creating":
            confidence += 0.1

        return round(min(1.0, max(0.1, confidence)), 2)

    @staticmethod
    def estimate_difficulty(text: str, question_type: str, cognitive_level: str) -> str:
        """
        Estimate difficulty.

        Policy order: explicit vocabulary > structure (type, punctuation,
        length) > cognitive level.
        """
        t = text.lower()

        if any(word in t for word in EASY_INDICATORS):
            return "easy"
        if any(word in t for word in DIFFICULT_INDICATORS):
            return "difficult"

        words = _word_count(t)
        complexity = len(re.findall(r"[,:;()\-]", t))

        if question_type == "essay" or complexity > 6 or words > 30:
            return "difficult"
        if words > 15 or complexity > 3:
            return "average"

        if cognitive_level in EASY_LEVELS:
            return "easy"
        if cognitive_level in DIFFICULT_LEVELS:
            return "difficult"
        return "average"

    @staticmethod
    def score_quality(text: str, question_type: str) -> float:
        """Item-writing quality in [0, 1], rounded to 2 decimals."""
        score = 1.0

        words = _word_count(text)
        if words < 5:
            score -= 0.3
        if words > 50:
            score -= 0.2

        if not re.search(r"[.?!]$", text.strip()):
            score -= 0.1
        if "  " in text:
            score -= 0.05

        if question_type == "mcq" and "?" not in text and "which" not in text.lower():
            score -= 0.1

        return round(max(0.0, min(1.0, score)), 2)

    @staticmethod
    def estimate_syllables(text: str) -> int:
        """Vowel-group count over the letters of the whole text (minimum 1)."""
        letters = re.sub(r"[^a-z]", "", text.lower())
        letters = re.sub(r"[aeiou]{2,}", "a", letters)
        vowels = re.sub(r"[^aeiou]", "", letters)
        return len(vowels) or 1

    @staticmethod
    def estimate_readability(text: str) -> float:
        """
        Flesch-Kincaid grade estimate, rounded to 1 decimal.

        0.39 × (words / sentences) + 11.8 × (syllables / words) − 15.59
        Text without any sentence content scores READABILITY_FALLBACK.
        """
        words = _word_count(text)
        sentences = len([s for s in re.split(r"[.!?]+", text) if s.strip()])
        if sentences == 0:
            return READABILITY_FALLBACK
        syllables = QuestionClassifier.estimate_syllables(text)
        grade = 0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59
        return round(grade, 1)

    @staticmethod
    def classify(text: Optional[str], question_type: str = "mcq") -> Classification:
        """
        Classify one question.

        Args:
            text: Question text (empty text is accepted and gets defaults)
            question_type: mcq | true_false | essay | short_answer

        Returns:
            Classification record
        """
        text = text or ""
        if not text.strip():
            log.warning("[CLASSIFY] Empty question text, returning default classification")

        t = text.lower()
        cognitive_level, verb_hits = QuestionClassifier.detect_cognitive_level(t)
        dimension, dimension_hits = QuestionClassifier.detect_knowledge_dimension(t, question_type, verb_hits)
        confidence = QuestionClassifier.score_confidence(
            t, question_type, cognitive_level, verb_hits, dimension_hits
        )

        result = Classification(
            cognitive_level=cognitive_level,
            knowledge_dimension=dimension,
            difficulty=QuestionClassifier.estimate_difficulty(text, question_type, cognitive_level),
            confidence=confidence,
            quality_score=QuestionClassifier.score_quality(text, question_type),
            readability_score=QuestionClassifier.estimate_readability(text),
            fingerprint=semantic_vector(text),
            needs_review=confidence < REVIEW_CONFIDENCE_THRESHOLD,
        )
        log.debug(
            "[CLASSIFY] type=%s level=%s dim=%s conf=%.2f review=%s",
            question_type, result.cognitive_level, result.knowledge_dimension,
            result.confidence, result.needs_review,
        )
        return result


# Convenience functions
def classify(text: Optional[str], question_type: str = "mcq") -> Classification:
    """Classify a single question text."""
    return QuestionClassifier.classify(text, question_type)


def classify_batch(questions: List[RawQuestion]) -> List[Classification]:
    """Classify many questions, preserving input order."""
    log.info(f"[CLASSIFY] Batch of {len(questions)} question(s)")
    results = [QuestionClassifier.classify(q.text, q.question_type) for q in questions]
    flagged = sum(1 for r in results if r.needs_review)
    log.info(f"[CLASSIFY] Done — {flagged}/{len(results)} flagged for review")
    return results

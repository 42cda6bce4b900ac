from analysis.generation_brief import build_generation_briefs, validate_generated_question
from analysis.schemas import GeneratedQuestion
from analysis.sufficiency import analyze_sufficiency
from classification.taxonomy import BLOOM_INSTRUCTIONS


def _analysis():
    matrix = {
        "topics": [
            {"topic_name": "Algebra", "remembering_items": 2},
            {"topic_name": "Geometry", "evaluating_items": 5},
        ]
    }
    return analyze_sufficiency(matrix, [{"id": "1", "topic": "algebra", "bloom_level": "remembering"}])


def test_one_brief_per_gap_worst_first() -> None:
    briefs = build_generation_briefs(_analysis())

    assert [(b.topic, b.cognitive_level, b.count) for b in briefs] == [
        ("geometry", "evaluating", 5),
        ("algebra", "remembering", 1),
    ]
    assert briefs[0].knowledge_dimension == "metacognitive"
    assert briefs[0].difficulty == "difficult"
    assert briefs[0].bloom_instructions == BLOOM_INSTRUCTIONS["evaluating"]
    assert briefs[1].knowledge_dimension == "factual"
    assert briefs[1].difficulty == "easy"


def test_forced_dimension_and_type() -> None:
    briefs = build_generation_briefs(_analysis(), knowledge_dimension="procedural", question_type="essay")

    assert {b.knowledge_dimension for b in briefs} == {"procedural"}
    assert {b.question_type for b in briefs} == {"essay"}


def test_no_gaps_no_briefs() -> None:
    analysis = analyze_sufficiency({"topics": []}, [])

    assert build_generation_briefs(analysis) == []


def test_valid_generated_mcq() -> None:
    question = GeneratedQuestion(
        text="Which of the following is a prime number?",
        choices={"A": "4", "B": "7", "C": "9", "D": "12"},
        correct_answer="B",
        cognitive_level="remembering",
        knowledge_dimension="factual",
    )

    check = validate_generated_question(question)

    assert check.valid
    assert check.issues == []


def test_invalid_generated_question_lists_every_issue() -> None:
    check = validate_generated_question(GeneratedQuestion(text="Why?", choices={"A": "yes"}, correct_answer="C"))

    assert not check.valid
    assert check.issues == [
        "Question text too short",
        "Missing Bloom level",
        "Missing knowledge dimension",
        "MCQ requires at least 2 choices",
        "Invalid or missing correct answer",
    ]

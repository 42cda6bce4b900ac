import pytest

from analysis.matrix_parser import InvalidInput, parse_requirement_matrix
from analysis.schemas import RequirementMatrix, RequirementTopic


def _cells(matrix, index=0):
    return matrix.topics[index].cells


def test_flat_item_keys() -> None:
    matrix = parse_requirement_matrix(
        {"topics": [{"topic_name": "Algebra", "remembering_items": 5, "applying_items": "2", "notes_items": 9}]}
    )

    assert matrix.topics[0].topic_name == "Algebra"
    assert _cells(matrix) == {"remembering": 5, "applying": 2}


def test_count_mapping_with_aliases() -> None:
    matrix = parse_requirement_matrix(
        {"topics": [{"topic": "Algebra", "bloom_counts": {"Remember": 1, "analyse": 2.0, "Synthesis": None}}]}
    )

    assert _cells(matrix) == {"remembering": 1, "analyzing": 2, "creating": 0}


def test_distribution_array_overrides_flat_keys() -> None:
    matrix = parse_requirement_matrix({
        "topics": [{
            "topic_name": "Algebra",
            "remembering_items": 9,
            "distribution": [
                {"bloom_level": "remembering", "count": 2},
                {"level": "remembering", "count": 1},
                {"bloom_level": "evaluate", "count": 4},
            ],
        }]
    })

    assert _cells(matrix) == {"remembering": 3, "evaluating": 4}


def test_nested_matrix_replaces_and_appends_topics() -> None:
    matrix = parse_requirement_matrix({
        "topics": [{"topic_name": "Algebra", "remembering_items": 9}],
        "matrix": {
            "algebra": {"applying": {"count": 2}},
            "Geometry": {"creating": 1},
        },
    })

    assert [t.topic_name for t in matrix.topics] == ["Algebra", "Geometry"]
    assert _cells(matrix, 0) == {"applying": 2}
    assert _cells(matrix, 1) == {"creating": 1}


def test_typed_matrix_levels_are_canonicalised() -> None:
    matrix = RequirementMatrix(topics=[RequirementTopic(topic_name="Algebra", cells={"Remembering": 5, "apply": 2})])

    parsed = parse_requirement_matrix(matrix)

    assert _cells(parsed) == {"remembering": 5, "applying": 2}
    assert matrix.topics[0].cells == {"Remembering": 5, "apply": 2}


@pytest.mark.parametrize(
    "cells, message",
    [
        ({"remembering": -2}, ">= 0"),
        ({"memorising": 3}, "unknown cognitive level"),
    ],
)
def test_typed_matrix_is_checked(cells, message) -> None:
    matrix = RequirementMatrix(topics=[RequirementTopic(topic_name="Algebra", cells=cells)])

    with pytest.raises(InvalidInput) as exc:
        parse_requirement_matrix(matrix)

    assert message in str(exc.value)


def test_iter_cells_fills_missing_levels_with_zero() -> None:
    matrix = parse_requirement_matrix({"topics": [{"topic_name": "Algebra", "applying_items": 3}]})

    cells = matrix.iter_cells(["remembering", "applying"])

    assert [(c.cognitive_level, c.required_count) for c in cells] == [("remembering", 0), ("applying", 3)]


@pytest.mark.parametrize(
    "raw, message",
    [
        ("not a matrix", "must be an object"),
        ({"topics": {}}, "'topics' array"),
        ({"topics": ["Algebra"]}, "topics[0]"),
        ({"topics": [{"remembering_items": 1}]}, "missing topic_name"),
        ({"topics": [{"topic_name": "A", "remembering_items": -1}]}, ">= 0"),
        ({"topics": [{"topic_name": "A", "remembering_items": 1.5}]}, "integer"),
        ({"topics": [{"topic_name": "A", "remembering_items": True}]}, "integer"),
        ({"topics": [{"topic_name": "A", "counts": [1, 2]}]}, "expected an object"),
        ({"topics": [{"topic_name": "A", "distribution": {}}]}, "expected an array"),
        ({"topics": [], "matrix": []}, "keyed by topic"),
    ],
)
def test_invalid_payloads(raw, message) -> None:
    with pytest.raises(InvalidInput) as exc:
        parse_requirement_matrix(raw)

    assert message in str(exc.value)


def test_invalid_input_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_requirement_matrix({})

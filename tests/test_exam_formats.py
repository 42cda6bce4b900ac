import pytest

from analysis.exam_formats import (
    EXAM_FORMATS,
    FORMAT_2,
    get_exam_format,
    get_format_requirements,
    scaled_format_sections,
)


@pytest.mark.parametrize("exam_format", EXAM_FORMATS, ids=lambda f: f.id)
def test_sections_are_contiguous_and_cover_the_exam(exam_format) -> None:
    expected_start = 1
    for section in exam_format.sections:
        assert section.start_number == expected_start
        expected_start = section.end_number + 1

    assert sum(s.item_count for s in exam_format.sections) == exam_format.total_items


def test_lookup() -> None:
    assert get_exam_format("format_2") is FORMAT_2
    assert get_exam_format("format_9") is None


def test_requirements_at_native_size() -> None:
    counts = [(r.question_type, r.count) for r in get_format_requirements(FORMAT_2)]

    assert counts == [("mcq", 35), ("true_false", 10), ("essay", 5)]


def test_scaling_rounds_half_up_and_keeps_total() -> None:
    sections = scaled_format_sections(FORMAT_2, 30)

    assert [s.item_count for s in sections] == [21, 6, 3]
    assert [(s.start_number, s.end_number) for s in sections] == [(1, 21), (22, 27), (28, 30)]
    # the predefined layout is untouched
    assert FORMAT_2.sections[0].end_number == 35


def test_scaled_requirements() -> None:
    counts = [r.count for r in get_format_requirements(FORMAT_2, total_items=15)]

    # 35 * 0.3 = 10.5 -> 11, 10 * 0.3 = 3, remainder 1
    assert counts == [11, 3, 1]

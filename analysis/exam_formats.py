"""
Exam Format Definitions
Predefined multi-section exam layouts with strict section boundaries.

The question-type counts a format implies feed the TOS builder: a 50-item
Format 2 exam needs 35 MCQs, 10 true/false and 5 essays.
"""

from typing import List, Optional

from analysis.schemas import ExamFormat, ExamSection, SectionRequirement

_MCQ_INSTRUCTION = "Choose the letter of the best answer."
_TF_INSTRUCTION = "Write TRUE if the statement is correct, FALSE if incorrect."


FORMAT_1 = ExamFormat(
    id="format_1",
    name="Format 1: All Multiple Choice",
    description="Section A – Multiple Choice (Questions 1–50)",
    total_items=50,
    total_points=50,
    sections=[
        ExamSection(id="A", label="Section A", title="Multiple Choice", question_type="mcq",
                    start_number=1, end_number=50, points_per_question=1, instruction=_MCQ_INSTRUCTION),
    ],
)

FORMAT_2 = ExamFormat(
    id="format_2",
    name="Format 2: MCQ + T/F or Fill-in + Essay",
    description="Section A – MCQ (1–35), Section B – T/F or Fill-in (36–45), Section C – Essay (46–50)",
    total_items=50,
    total_points=50,
    sections=[
        ExamSection(id="A", label="Section A", title="Multiple Choice", question_type="mcq",
                    start_number=1, end_number=35, points_per_question=1, instruction=_MCQ_INSTRUCTION),
        ExamSection(id="B", label="Section B", title="True or False", question_type="true_false",
                    start_number=36, end_number=45, points_per_question=1, instruction=_TF_INSTRUCTION),
        ExamSection(id="C", label="Section C", title="Essay", question_type="essay",
                    start_number=46, end_number=50, points_per_question=5,
                    instruction="Answer the following question in complete sentences. (5 points)"),
    ],
)

FORMAT_3 = ExamFormat(
    id="format_3",
    name="Format 3: MCQ + Fill-in + T/F",
    description="Section A – MCQ (1–30), Section B – Fill-in (31–40), Section C – T/F (41–50)",
    total_items=50,
    total_points=50,
    sections=[
        ExamSection(id="A", label="Section A", title="Multiple Choice", question_type="mcq",
                    start_number=1, end_number=30, points_per_question=1, instruction=_MCQ_INSTRUCTION),
        ExamSection(id="B", label="Section B", title="Fill in the Blank", question_type="fill_blank",
                    start_number=31, end_number=40, points_per_question=1,
                    instruction="Write the correct answer on the blank provided."),
        ExamSection(id="C", label="Section C", title="True or False", question_type="true_false",
                    start_number=41, end_number=50, points_per_question=1, instruction=_TF_INSTRUCTION),
    ],
)

FORMAT_4 = ExamFormat(
    id="format_4",
    name="Format 4: MCQ + Essay",
    description="Section A – MCQ (1–40), Section B – Essay (41–50; 2 essays @ 5 pts each)",
    total_items=50,
    total_points=50,
    sections=[
        ExamSection(id="A", label="Section A", title="Multiple Choice", question_type="mcq",
                    start_number=1, end_number=40, points_per_question=1, instruction=_MCQ_INSTRUCTION),
        ExamSection(id="B", label="Section B", title="Essay", question_type="essay",
                    start_number=41, end_number=50, points_per_question=5,
                    instruction="Answer the following questions in complete sentences. (5 points each)"),
    ],
)

EXAM_FORMATS: List[ExamFormat] = [FORMAT_1, FORMAT_2, FORMAT_3, FORMAT_4]


def get_exam_format(format_id: str) -> Optional[ExamFormat]:
    return next((f for f in EXAM_FORMATS if f.id == format_id), None)


def scaled_format_sections(exam_format: ExamFormat, total_items: int) -> List[ExamSection]:
    """
    Rescale section boundaries to a different total item count.

    Each section keeps its share of the format (rounded half up); the last
    section takes the remainder so the total is exact.
    """
    ratio = total_items / exam_format.total_items
    used = 0
    scaled: List[ExamSection] = []
    last = len(exam_format.sections) - 1

    for idx, section in enumerate(exam_format.sections):
        if idx == last:
            count = total_items - used
        else:
            # int(x + 0.5) rounds half up; round() would round half to even
            count = int(section.item_count * ratio + 0.5)
        scaled.append(section.model_copy(update={
            "start_number": used + 1,
            "end_number": used + count,
        }))
        used += count

    return scaled


def get_format_requirements(exam_format: ExamFormat, total_items: Optional[int] = None) -> List[SectionRequirement]:
    """Question-type counts a format needs, optionally rescaled."""
    sections = scaled_format_sections(exam_format, total_items) if total_items else exam_format.sections
    return [
        SectionRequirement(
            question_type=s.question_type,
            count=s.item_count,
            section_label=s.label,
            section_title=s.title,
            points_per_question=s.points_per_question,
        )
        for s in sections
    ]

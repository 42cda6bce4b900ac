from analysis.distribution import bloom_distribution, coverage_by_topic


INVENTORY = [
    {"id": "1", "topic": "Algebra", "bloom_level": "applying"},
    {"id": "2", "topic": "algebra", "bloom_level": "Remember"},
    {"id": "3", "topic": "Geometry", "bloom_level": "applying"},
    {"id": "4", "topic": "Geometry", "bloom_level": None},
    {"id": "5", "topic": "Geometry", "bloom_level": "applying", "deleted": True},
]


def test_bloom_distribution_in_taxonomy_order() -> None:
    shares = bloom_distribution(INVENTORY)

    assert [(s.level, s.count, s.percentage) for s in shares] == [
        ("remembering", 1, 25),
        ("applying", 2, 50),
        ("unknown", 1, 25),
    ]


def test_bloom_distribution_of_empty_bank() -> None:
    assert bloom_distribution([]) == []


def test_coverage_by_topic() -> None:
    assert coverage_by_topic(INVENTORY) == {
        "algebra": {"applying": 1, "remembering": 1},
        "geometry": {"applying": 1, "unknown": 1},
    }


def test_percentages_round_half_up() -> None:
    inventory = [{"id": str(i), "topic": "algebra", "bloom_level": "applying"} for i in range(7)]
    inventory.append({"id": "7", "topic": "algebra", "bloom_level": "creating"})

    shares = bloom_distribution(inventory)

    assert [(s.level, s.percentage) for s in shares] == [("applying", 88), ("creating", 13)]


def test_noisy_rows_are_read_leniently() -> None:
    inventory = [
        {"topic": "Algebra", "bloom_level": "applying", "confidence": "high"},
        {"id": "2", "topic": "Algebra", "cognitive_level": "applying"},
        None,
    ]

    assert coverage_by_topic(inventory) == {"algebra": {"applying": 2}}
    assert [(s.level, s.count) for s in bloom_distribution(inventory)] == [("applying", 2)]

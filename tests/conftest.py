import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def algebra_inventory():
    """Three remembering items filed under a longer algebra topic name."""
    return [
        {"id": f"q{i}", "text": f"Algebra question {i}?", "topic": "algebra basics", "bloom_level": "remembering"}
        for i in range(1, 4)
    ]

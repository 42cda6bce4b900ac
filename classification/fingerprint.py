"""
Semantic Fingerprint

Fixed-length hashed term-frequency vector used for coarse similarity
bucketing. Fingerprints are stored next to the question and compared across
services, so the hash must stay bit-compatible with the stored 32-bit
rolling hash:

    hash = hash * 31 + code_unit      (wrapped to signed 32-bit each step)
    bucket = abs(hash) % 50

Code units are UTF-16, so characters outside the BMP contribute two units.
"""

import math
from typing import List

from classification.normalizer import split_words
from classification.schemas import FINGERPRINT_SIZE

_UINT32 = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - 0x100000000 if value & _INT32_SIGN else value


def simple_hash(token: str) -> int:
    """Polynomial rolling hash (x31) over UTF-16 code units, non-negative."""
    h = 0
    raw = token.encode("utf-16-le")
    for i in range(0, len(raw), 2):
        code_unit = raw[i] | (raw[i + 1] << 8)
        h = _to_int32(h * 31 + code_unit)
    return abs(h)


def l2_normalize(vector: List[float]) -> List[float]:
    """Scale to unit length. An all-zero vector is returned unchanged."""
    magnitude = math.sqrt(sum(v * v for v in vector))
    if magnitude == 0:
        return list(vector)
    return [v / magnitude for v in vector]


def semantic_vector(text: str, size: int = FINGERPRINT_SIZE) -> List[float]:
    """
    Build the hashed bag-of-words fingerprint for a question.

    Args:
        text: Raw question text (lowercased here)
        size: Number of buckets (50 for stored fingerprints)

    Returns:
        L2-normalised vector of length `size`
    """
    vector = [0.0] * size
    for word in split_words(text.lower()):
        vector[simple_hash(word) % size] += 1
    return l2_normalize(vector)

"""
Similarity Engine

Exact bag-of-words cosine similarity between question texts, used for
duplicate / near-duplicate detection in the question bank.

This does NOT use the 50-bucket fingerprint: a term-frequency vector over the
union vocabulary of the two texts is built per comparison. Search is a linear
scan over the corpus it is handed (no index); callers paginate or pre-filter
large banks.
"""

import logging
import math
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Union

from classification.normalizer import similarity_tokens
from classification.schemas import CorpusEntry, DuplicatePair, SimilarityMatch

log = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.7
MAX_RESULTS = 10

CorpusLike = Union[CorpusEntry, dict]


def _cosine(a: List[float], b: List[float]) -> float:
    if not a or not b:
        return 0.0
    dot = sum(x * y for x, y in zip(a, b))
    na2 = sum(x * x for x in a)
    nb2 = sum(y * y for y in b)
    if na2 == 0 or nb2 == 0:
        return 0.0
    # Single sqrt keeps identical integer vectors at exactly 1.0
    return dot / math.sqrt(na2 * nb2)


def _term_vectors(tokens_a: List[str], tokens_b: List[str]):
    counts_a = Counter(tokens_a)
    counts_b = Counter(tokens_b)
    vocabulary = list(dict.fromkeys(tokens_a + tokens_b))
    return (
        [float(counts_a[token]) for token in vocabulary],
        [float(counts_b[token]) for token in vocabulary],
    )


def similarity(text_a: Optional[str], text_b: Optional[str]) -> float:
    """
    Cosine similarity of two texts in [0, 1].

    Texts with no token of 3+ characters have a zero vector and score 0.0.
    """
    vec_a, vec_b = _term_vectors(similarity_tokens(text_a), similarity_tokens(text_b))
    return min(1.0, _cosine(vec_a, vec_b))


def _as_entry(item: CorpusLike) -> CorpusEntry:
    if isinstance(item, CorpusEntry):
        return item
    return CorpusEntry(id=str(item["id"]), text=item.get("text") or item.get("question_text") or "")


def find_similar(
    query: str,
    corpus: Iterable[CorpusLike],
    threshold: float = DEFAULT_THRESHOLD,
    exclude_id: Optional[str] = None,
    limit: Optional[int] = MAX_RESULTS,
) -> List[SimilarityMatch]:
    """
    Rank corpus questions by similarity to `query`.

    Args:
        query: Question text to search for
        corpus: {id, text} entries (CorpusEntry or plain dicts)
        threshold: Minimum score to keep (inclusive)
        exclude_id: Skip the entry with this id (the query's own row)
        limit: Maximum number of matches returned (None: all)

    Returns:
        Matches sorted by descending score, at most `limit`
    """
    matches: List[SimilarityMatch] = []
    scanned = 0
    for item in corpus:
        entry = _as_entry(item)
        if exclude_id is not None and entry.id == exclude_id:
            continue
        scanned += 1
        score = similarity(query, entry.text)
        if score >= threshold:
            matches.append(SimilarityMatch(id=entry.id, score=score))

    if scanned == 0:
        log.warning("Similarity search over an empty corpus")

    matches.sort(key=lambda m: m.score, reverse=True)
    log.debug("Similarity search: scanned=%s matched=%s threshold=%s", scanned, len(matches), threshold)
    return matches[:limit]


def find_duplicate_pairs(
    corpus: Sequence[CorpusLike],
    threshold: float = DEFAULT_THRESHOLD,
) -> List[DuplicatePair]:
    """
    All-pairs near-duplicate scan, O(n²).

    Returns pairs (in corpus order) scoring at or above `threshold`, for the
    storage layer to persist.
    """
    entries = [_as_entry(item) for item in corpus]
    pairs: List[DuplicatePair] = []
    for i in range(len(entries)):
        for j in range(i + 1, len(entries)):
            score = similarity(entries[i].text, entries[j].text)
            if score >= threshold:
                pairs.append(DuplicatePair(first_id=entries[i].id, second_id=entries[j].id, score=score))
    log.info(f"Duplicate scan: {len(entries)} question(s), {len(pairs)} pair(s) >= {threshold}")
    return pairs

import pytest

from classification.normalizer import similarity_tokens
from classification.schemas import CorpusEntry
from classification.similarity import find_duplicate_pairs, find_similar, similarity


def test_identical_text_scores_exactly_one() -> None:
    text = "Explain the difference between TCP and UDP protocols."

    assert similarity(text, text) == 1.0


def test_similarity_is_symmetric() -> None:
    a = "What is the capital city of France?"
    b = "Name the capital city of Germany."

    assert similarity(a, b) == similarity(b, a)
    assert 0.0 < similarity(a, b) < 1.0


def test_short_tokens_and_punctuation_are_ignored() -> None:
    assert similarity_tokens("Is a TCP-handshake ok?") == ["tcp", "handshake"]
    assert similarity("A is to B", "a is to b") == 0.0


def test_non_ascii_letters_split_tokens() -> None:
    assert similarity_tokens("Café au lait, naïve reader") == ["caf", "lait", "reader"]


@pytest.mark.parametrize("a, b", [("", "anything here"), (None, "anything here"), ("", "")])
def test_empty_text_scores_zero(a, b) -> None:
    assert similarity(a, b) == 0.0


def test_disjoint_texts_score_zero() -> None:
    assert similarity("binary search trees", "photosynthesis chlorophyll plants") == 0.0


def _corpus(n: int):
    return [CorpusEntry(id=str(i), text="binary search tree insertion " + "node " * i) for i in range(n)]


def test_find_similar_orders_by_descending_score() -> None:
    matches = find_similar("binary search tree insertion", _corpus(5), threshold=0.0)

    scores = [m.score for m in matches]
    assert scores == sorted(scores, reverse=True)
    assert matches[0].id == "0"
    assert matches[0].score == 1.0


def test_find_similar_caps_results_at_ten() -> None:
    matches = find_similar("binary search tree insertion", _corpus(15), threshold=0.0)

    assert len(matches) == 10


def test_find_similar_without_limit_returns_every_match() -> None:
    matches = find_similar("binary search tree insertion", _corpus(15), threshold=0.0, limit=None)

    assert len(matches) == 15


def test_find_similar_applies_threshold_and_exclusion() -> None:
    corpus = [
        {"id": "self", "text": "Explain the TCP three way handshake."},
        {"id": "dup", "text": "Explain the TCP three way handshake!"},
        {"id": "other", "text": "Describe photosynthesis in plants."},
    ]

    matches = find_similar("Explain the TCP three way handshake.", corpus, threshold=0.7, exclude_id="self")

    assert [m.id for m in matches] == ["dup"]


def test_find_similar_over_empty_corpus() -> None:
    assert find_similar("anything at all", []) == []


def test_find_duplicate_pairs() -> None:
    corpus = [
        CorpusEntry(id="a", text="Define the term requirements engineering."),
        CorpusEntry(id="b", text="Define the term: requirements engineering"),
        CorpusEntry(id="c", text="Compute the derivative of a polynomial."),
    ]

    pairs = find_duplicate_pairs(corpus, threshold=0.9)

    assert len(pairs) == 1
    assert (pairs[0].first_id, pairs[0].second_id) == ("a", "b")
    assert pairs[0].algorithm_used == "cosine"

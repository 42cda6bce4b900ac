"""
Text Normalization
Shared by the classifier, the similarity engine and the sufficiency analyzer.

Topic and level labels arrive from several producers (TOS builder, question
bank imports, LLM output) with inconsistent casing, snake_case / kebab-case
and stray punctuation. Everything is flattened to lowercase words separated
by single spaces before comparison.
"""

import re
from typing import List, Optional

# Bloom label normalisation (producers use base verbs, nouns and UK spellings)
LEVEL_ALIASES: dict = {
    "remember":       "remembering",
    "remembering":    "remembering",
    "recall":         "remembering",
    "knowledge":      "remembering",
    "understand":     "understanding",
    "understanding":  "understanding",
    "comprehend":     "understanding",
    "comprehension":  "understanding",
    "apply":          "applying",
    "applying":       "applying",
    "application":    "applying",
    "analyze":        "analyzing",
    "analyzing":      "analyzing",
    "analyse":        "analyzing",
    "analysing":      "analyzing",
    "analysis":       "analyzing",
    "evaluate":       "evaluating",
    "evaluating":     "evaluating",
    "evaluation":     "evaluating",
    "create":         "creating",
    "creating":       "creating",
    "synthesis":      "creating",
}


def normalize_topic(text: Optional[str]) -> str:
    """
    Normalize a topic (or any label) for fuzzy matching.

    - lowercase
    - snake_case / kebab-case separators → space
    - non-alphanumerics dropped
    - whitespace collapsed and trimmed

    "Requirements_Engineering" and " requirements-engineering! " both become
    "requirements engineering".
    """
    if not text:
        return ""
    text = str(text).lower()
    text = re.sub(r"[_\-]", " ", text)
    text = re.sub(r"[^a-z0-9\s]", "", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def normalize_level(text: Optional[str]) -> str:
    """Normalize a cognitive level label, resolving known aliases."""
    key = normalize_topic(text)
    return LEVEL_ALIASES.get(key, key)


def split_words(text: Optional[str]) -> List[str]:
    """Whitespace token stream with empty tokens dropped."""
    if not text:
        return []
    return text.split()


def similarity_tokens(text: Optional[str]) -> List[str]:
    """
    Tokens used for bag-of-words cosine similarity.

    Punctuation becomes a separator and tokens shorter than 3 characters are
    discarded as noise ("a", "of", "is", ...).
    """
    if not text:
        return []
    cleaned = re.sub(r"[^\w\s]", " ", text.lower(), flags=re.ASCII)
    return [token for token in re.split(r"\s+", cleaned) if len(token) > 2]

"""
Lexical Taxonomy Tables

Static cue tables used by the rule-based question classifier:
  - cue verb → Bloom cognitive level
  - cue verb → Anderson–Krathwohl knowledge dimension
  - indicator phrase → knowledge dimension (fallback when no cue verb hits)
  - difficulty vocabulary

The classifier scans these tables first-match-wins, so ORDER IS POLICY.
Every table is an ordered tuple of pairs; do not reorder entries or turn them
into sets/dicts without keeping the sequence.
"""

from types import MappingProxyType
from typing import Tuple

# ─── Label sets (ordered) ─────────────────────────────────────────────────────

COGNITIVE_LEVELS: Tuple[str, ...] = (
    "remembering",
    "understanding",
    "applying",
    "analyzing",
    "evaluating",
    "creating",
)

KNOWLEDGE_DIMENSIONS: Tuple[str, ...] = (
    "factual",
    "conceptual",
    "procedural",
    "metacognitive",
)

DIFFICULTIES: Tuple[str, ...] = ("easy", "average", "difficult")


# ─── Cue verb → cognitive level ───────────────────────────────────────────────

BLOOM_VERBS: Tuple[Tuple[str, str], ...] = (
    # Remembering
    ("define", "remembering"), ("list", "remembering"), ("recall", "remembering"),
    ("identify", "remembering"), ("name", "remembering"), ("state", "remembering"),
    ("recognize", "remembering"), ("select", "remembering"), ("match", "remembering"),
    ("choose", "remembering"), ("label", "remembering"), ("locate", "remembering"),

    # Understanding
    ("explain", "understanding"), ("describe", "understanding"), ("summarize", "understanding"),
    ("interpret", "understanding"), ("classify", "understanding"), ("compare", "understanding"),
    ("contrast", "understanding"), ("illustrate", "understanding"), ("translate", "understanding"),
    ("paraphrase", "understanding"), ("convert", "understanding"), ("discuss", "understanding"),

    # Applying
    ("apply", "applying"), ("use", "applying"), ("execute", "applying"),
    ("implement", "applying"), ("solve", "applying"), ("demonstrate", "applying"),
    ("operate", "applying"), ("calculate", "applying"), ("show", "applying"),
    ("complete", "applying"), ("modify", "applying"), ("relate", "applying"),

    # Analyzing
    ("analyze", "analyzing"), ("examine", "analyzing"), ("investigate", "analyzing"),
    ("categorize", "analyzing"), ("differentiate", "analyzing"), ("distinguish", "analyzing"),
    ("organize", "analyzing"), ("deconstruct", "analyzing"), ("breakdown", "analyzing"),
    ("separate", "analyzing"), ("order", "analyzing"), ("connect", "analyzing"),

    # Evaluating
    ("evaluate", "evaluating"), ("assess", "evaluating"), ("judge", "evaluating"),
    ("critique", "evaluating"), ("justify", "evaluating"), ("defend", "evaluating"),
    ("support", "evaluating"), ("argue", "evaluating"), ("decide", "evaluating"),
    ("rate", "evaluating"), ("prioritize", "evaluating"), ("recommend", "evaluating"),

    # Creating
    ("create", "creating"), ("design", "creating"), ("develop", "creating"),
    ("construct", "creating"), ("generate", "creating"), ("produce", "creating"),
    ("plan", "creating"), ("compose", "creating"), ("formulate", "creating"),
    ("build", "creating"), ("invent", "creating"), ("combine", "creating"),
)


# ─── Cue verb → knowledge dimension ───────────────────────────────────────────

DIMENSION_VERBS: Tuple[Tuple[str, str], ...] = (
    ("define", "factual"), ("list", "factual"), ("name", "factual"), ("identify", "factual"),
    ("recall", "factual"), ("recognize", "factual"), ("select", "factual"), ("match", "factual"),
    ("explain", "conceptual"), ("classify", "conceptual"), ("compare", "conceptual"),
    ("summarize", "conceptual"), ("interpret", "conceptual"), ("illustrate", "conceptual"),
    ("contrast", "conceptual"), ("discuss", "conceptual"),
    ("apply", "procedural"), ("use", "procedural"), ("implement", "procedural"),
    ("execute", "procedural"), ("demonstrate", "procedural"), ("calculate", "procedural"),
    ("solve", "procedural"), ("operate", "procedural"), ("construct", "procedural"),
    ("evaluate", "metacognitive"), ("assess", "metacognitive"), ("judge", "metacognitive"),
    ("critique", "metacognitive"), ("justify", "metacognitive"), ("reflect", "metacognitive"),
    ("plan", "metacognitive"), ("monitor", "metacognitive"),
)


# ─── Indicator phrases → knowledge dimension ──────────────────────────────────

DIMENSION_INDICATORS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("factual", (
        "what is", "define", "list", "name", "identify", "when", "where", "who",
        "which", "what year", "how many",
    )),
    ("conceptual", (
        "explain", "compare", "contrast", "relationship", "why", "how does",
        "principle", "theory", "model", "framework",
    )),
    ("procedural", (
        "calculate", "solve", "demonstrate", "perform", "how to", "steps",
        "procedure", "method", "algorithm",
    )),
    ("metacognitive", (
        "evaluate", "assess", "best method", "most appropriate", "strategy",
        "approach", "reflect", "monitor",
    )),
)


# ─── Difficulty vocabulary ────────────────────────────────────────────────────

EASY_INDICATORS: Tuple[str, ...] = ("simple", "basic", "elementary", "straightforward", "fundamental")
DIFFICULT_INDICATORS: Tuple[str, ...] = ("complex", "advanced", "sophisticated", "intricate", "comprehensive")

# Levels whose structural-neutral default difficulty is fixed
EASY_LEVELS = frozenset({"remembering", "understanding"})
DIFFICULT_LEVELS = frozenset({"evaluating", "creating"})


# ─── Generation instructions (advisory text for the external generator) ──────

BLOOM_INSTRUCTIONS = MappingProxyType({
    "remembering":   "Focus on recall and recognition. Use verbs: define, list, identify, name, state, recall.",
    "understanding": "Focus on comprehension. Use verbs: explain, summarize, describe, interpret, classify.",
    "applying":      "Focus on using knowledge. Use verbs: apply, solve, implement, demonstrate, use.",
    "analyzing":     "Focus on breaking down information. Use verbs: analyze, compare, examine, differentiate.",
    "evaluating":    "Focus on making judgments. Use verbs: evaluate, justify, critique, assess, argue.",
    "creating":      "Focus on producing new work. Use verbs: design, create, compose, formulate, construct.",
})

KNOWLEDGE_INSTRUCTIONS = MappingProxyType({
    "factual": (
        "Target factual knowledge: terminology, specific details, basic elements. "
        "Questions should test recall of facts, definitions, or specific information."
    ),
    "conceptual": (
        "Target conceptual knowledge: theories, principles, models, classifications. "
        "Questions should test understanding of relationships and interrelations."
    ),
    "procedural": (
        "Target procedural knowledge: methods, techniques, algorithms, processes. "
        "Questions should test ability to apply procedures or solve problems step-by-step."
    ),
    "metacognitive": (
        "Target metacognitive knowledge: self-awareness, strategic thinking. "
        "Questions should require reflection on thinking processes, strategy evaluation, "
        "or learning approach assessment."
    ),
})

DIFFICULTY_INSTRUCTIONS = MappingProxyType({
    "easy":      "Simple, straightforward questions with clear answers. Basic application of knowledge.",
    "average":   "Moderate complexity requiring thought and understanding. May involve some analysis.",
    "difficult": "Complex questions requiring deep analysis, synthesis, or evaluation. May have nuanced answers.",
})

# Default knowledge dimension to request when filling a gap at a given level
LEVEL_DEFAULT_DIMENSION = MappingProxyType({
    "remembering":   "factual",
    "understanding": "conceptual",
    "applying":      "procedural",
    "analyzing":     "conceptual",
    "evaluating":    "metacognitive",
    "creating":      "metacognitive",
})

# Default difficulty to request when filling a gap at a given level
LEVEL_DEFAULT_DIFFICULTY = MappingProxyType({
    "remembering":   "easy",
    "understanding": "easy",
    "applying":      "average",
    "analyzing":     "average",
    "evaluating":    "difficult",
    "creating":      "difficult",
})

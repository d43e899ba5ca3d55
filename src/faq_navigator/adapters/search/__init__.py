"""Title scorers."""

from faq_navigator.adapters.search.rapidfuzz_scorer import RapidFuzzScorer

__all__ = ["RapidFuzzScorer"]

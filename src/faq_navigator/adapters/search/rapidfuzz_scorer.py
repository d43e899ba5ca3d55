"""Title scorer backed by rapidfuzz."""

import re

from rapidfuzz import fuzz

from faq_navigator.core.interfaces import TitleScorer


# Substring hits rank below exact titles but stay above the default cutoff
PARTIAL_SCALE = 0.9


def normalize(text: str) -> str:
    """Case-fold and collapse whitespace."""
    return re.sub(r"\s+", " ", text).strip().casefold()


class RapidFuzzScorer(TitleScorer):
    """Weighted ratio scoring: tolerant to typos, partial words and word order.
    
    WRatio scales substring hits down to 0.6 for titles eight times longer
    than the query; a partial ratio scored alongside it keeps those hits.
    """
    
    def score(self, query: str, title: str) -> float:
        query_norm = normalize(query)
        title_norm = normalize(title)
        if not query_norm or not title_norm:
            return 0.0
        return max(
            fuzz.WRatio(query_norm, title_norm),
            fuzz.partial_ratio(query_norm, title_norm) * PARTIAL_SCALE,
        )

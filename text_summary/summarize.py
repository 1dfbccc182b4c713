from __future__ import annotations
import logging
import math
from typing import List
from .datatypes import ScoredSentence
from .preprocessing import normalize_whitespace, split_sentences, word_count
from .features import word_frequencies
from .scoring import score_sentences

LOG = logging.getLogger(__name__)

SENTENCE_RATIO = 0.22
MIN_LONG_SUMMARY = 3
MAX_LONG_SUMMARY = 5

def pick_sentence_count(sentence_count: int, words: int) -> int:
    if sentence_count <= 2:
        return 1
    if words < 80:
        return 1
    if words < 220:
        return 2
    if words < 500:
        return 3
    # round half up, not Python's banker's rounding
    k = int(math.floor(sentence_count * SENTENCE_RATIO + 0.5))
    return min(MAX_LONG_SUMMARY, max(MIN_LONG_SUMMARY, k))

def select_sentences(scored: List[ScoredSentence], k: int) -> List[ScoredSentence]:
    ranked = sorted(scored, key=lambda s: (-s.score, s.idx))[:k]
    return sorted(ranked, key=lambda s: s.idx)

def generate_summary(scored: List[ScoredSentence], k: int) -> str:
    return " ".join(s.text for s in select_sentences(scored, k))

def summarize(text: str) -> str:
    # Best-effort fallback path: anything that is not usable text gives "".
    if not isinstance(text, str):
        return ""
    cleaned = normalize_whitespace(text)
    sentences = split_sentences(cleaned)
    if not sentences:
        return ""
    if len(sentences) == 1:
        return sentences[0].text

    k = pick_sentence_count(len(sentences), word_count(cleaned))
    freq = word_frequencies(sentences)
    scored = score_sentences(sentences, freq)
    LOG.debug("local summary: %d sentences, %d terms, keeping %d", len(sentences), len(freq), k)
    return generate_summary(scored, k)

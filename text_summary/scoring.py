from __future__ import annotations
import math
from typing import List
from .datatypes import FrequencyTable, ScoredSentence, Sentence
from .preprocessing import tokenize, is_content_token

MAX_COVERAGE_BOOST = 1.2
BASE_COVERAGE = 0.85
LENGTH_OFFSET = 8

def score_sentence(text: str, freq: FrequencyTable) -> float:
    """
    Relevance of one sentence against the document's frequency table.

    score(S) = sum(ln(1 + f(t))) * coverage + sum(ln(1 + f(t))) * penalty
      - coverage: min(1.2, 0.85 + hits / max(8, |S|))
      - penalty:  1 / sqrt(8 + |S|)
    where |S| counts every token, stopwords included, and hits counts the
    content tokens found in the table.
    """
    words = list(tokenize(text))
    if not words:
        return 0.0

    score = 0.0
    hits = 0
    for w in words:
        if not is_content_token(w):
            continue
        f = freq.get(w, 0)
        if f > 0:
            score += math.log(1 + f)
            hits += 1

    length_penalty = 1.0 / math.sqrt(LENGTH_OFFSET + len(words))
    coverage_boost = min(MAX_COVERAGE_BOOST, BASE_COVERAGE + hits / max(LENGTH_OFFSET, len(words)))
    return score * coverage_boost + score * length_penalty

def score_sentences(sentences: List[Sentence], freq: FrequencyTable) -> List[ScoredSentence]:
    return [ScoredSentence(idx=s.idx, text=s.text, score=score_sentence(s.text, freq)) for s in sentences]

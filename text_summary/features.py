from __future__ import annotations
from collections import Counter
from typing import Iterable
from .datatypes import FrequencyTable, Sentence
from .preprocessing import tokenize, is_content_token

def word_frequencies(sentences: Iterable[Sentence]) -> FrequencyTable:
    """
    Term frequencies over every sentence of one document.

    Stopwords and tokens shorter than three characters are never counted.
    The table is built once per document and only read afterwards.
    """
    freq: Counter = Counter()
    for s in sentences:
        freq.update(t for t in tokenize(s.text) if is_content_token(t))
    return freq

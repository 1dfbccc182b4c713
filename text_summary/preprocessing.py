from __future__ import annotations
import logging
import re
from typing import Iterator, List, Pattern
from .datatypes import Sentence

LOG = logging.getLogger(__name__)

# BOM counts as whitespace; the \x1c-\x1f separators do not
_WS_RE = re.compile(r"(?:[^\S\x1c-\x1f]|\ufeff)+")
_NEWLINES_RE = re.compile(r"\n+")
_TERMINALS = (".", "!", "?")

# letters, digits, whitespace, apostrophe and hyphen survive; \w also admits "_"
_UNICODE_NON_WORD = r"[^\w\s'-]|_"
_ASCII_NON_WORD = r"[^a-z0-9\s'-]"

STOPWORDS = frozenset({
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'but', 'by', 'for', 'from', 'has', 'have',
    'he', 'her', 'hers', 'him', 'his', 'i', 'if', 'in', 'into', 'is', 'it', 'its', "it's",
    'me', 'my', 'not', 'of', 'on', 'or', 'our', 'ours', 'she', 'so', 'that', 'the', 'their',
    'theirs', 'them', 'then', 'there', 'these', 'they', 'this', 'those', 'to', 'too', 'was',
    'we', 'were', 'what', 'when', 'where', 'which', 'who', 'will', 'with', 'you', 'your',
    'yours',
})

MIN_TOKEN_LEN = 3

def select_token_pattern(unicode_rule: str = _UNICODE_NON_WORD) -> Pattern[str]:
    """
    Pick the character-cleaning rule for the tokenizer.

    The Unicode rule is probed once against a mixed-script sample; if it
    cannot be compiled or misclassifies the sample, the ASCII-only rule is
    used instead. Non-ASCII text then degrades to fragments but stays
    deterministic.
    """
    try:
        pattern = re.compile(unicode_rule)
        if pattern.sub(" ", "éω9_!") == "éω9  ":
            return pattern
        LOG.debug("unicode token rule misclassified probe, using ASCII rule")
    except re.error as exc:
        LOG.debug("unicode token rule unavailable (%s), using ASCII rule", exc)
    return re.compile(_ASCII_NON_WORD)

_NON_WORD_RE = select_token_pattern()

def normalize_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()

def split_sentences(text: str) -> List[Sentence]:
    # A terminal char closes a sentence only when a space follows it,
    # so "Mr. Smith" splits and "end.Next" does not.
    cleaned = normalize_whitespace(text)
    if not cleaned:
        return []

    parts: List[str] = []
    buf: List[str] = []
    last = len(cleaned) - 1
    for i, ch in enumerate(cleaned):
        buf.append(ch)
        if ch not in _TERMINALS:
            continue
        if i < last and cleaned[i + 1] == " ":
            s = "".join(buf).strip()
            if s:
                parts.append(s)
            buf = []
    tail = "".join(buf).strip()
    if tail:
        parts.append(tail)

    if not parts:
        parts = [p.strip() for p in _NEWLINES_RE.split(cleaned) if p.strip()]
    return [Sentence(idx=i, text=s) for i, s in enumerate(parts)]

def tokenize(text: str) -> Iterator[str]:
    if not isinstance(text, str):
        return
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    for tok in cleaned.split():
        yield tok

def is_content_token(token: str) -> bool:
    return len(token) >= MIN_TOKEN_LEN and token not in STOPWORDS

def word_count(text: str) -> int:
    return sum(1 for _ in tokenize(text))

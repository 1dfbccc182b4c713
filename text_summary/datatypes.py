from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

@dataclass(frozen=True)
class Sentence:
    idx: int
    text: str

@dataclass(frozen=True)
class ScoredSentence:
    idx: int
    text: str
    score: float

@dataclass
class SummaryResult:
    summary: str
    source: str  # "remote" | "local" | "none"
    error: Optional[str] = None

FrequencyTable = Dict[str, int]  # token -> count over the whole document

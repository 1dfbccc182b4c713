from .datatypes import Sentence, ScoredSentence, SummaryResult, FrequencyTable
from .preprocessing import STOPWORDS, normalize_whitespace, split_sentences, tokenize, word_count
from .features import word_frequencies
from .scoring import score_sentence, score_sentences
from .summarize import pick_sentence_count, select_sentences, generate_summary, summarize
from .remote import RemoteSummaryError, summarize_remote, summarize_with_fallback

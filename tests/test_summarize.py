"""Tests for sentence-count selection and the end-to-end local summarizer."""

import pytest

from text_summary.datatypes import ScoredSentence
from text_summary.preprocessing import split_sentences
from text_summary.summarize import generate_summary, pick_sentence_count, select_sentences, summarize

SOLAR_DOC = " ".join([
    "Solar panels convert sunlight into electricity for homes and businesses.",
    "The weather was pleasant on Tuesday afternoon in the small town.",
    "Modern solar panels are cheaper and convert more sunlight than older panels.",
    "Many people enjoy walking their dogs along the river at dawn.",
    "Electricity from solar panels can be stored in batteries for night use.",
    "A local bakery started selling fresh bread with seeds and honey.",
    "Government incentives make solar electricity affordable for many households.",
    "Children played football in the park until the sun went down.",
])


def _long_doc(n_sentences=30, words_per_sentence=20):
    sents = []
    for i in range(n_sentences):
        words = [f"term{i}x{j}" for j in range(words_per_sentence - 1)]
        sents.append(f"Topic{i} " + " ".join(words) + ".")
    return " ".join(sents)


class TestPickSentenceCount:
    @pytest.mark.parametrize(
        "n, w, k",
        [
            (1, 1000, 1),
            (2, 1000, 1),
            (3, 79, 1),
            (3, 80, 2),
            (5, 219, 2),
            (5, 220, 3),
            (5, 499, 3),
            (5, 500, 3),
            (20, 600, 4),
            (30, 500, 5),
            (100, 5000, 5),
        ],
    )
    def test_rules(self, n, w, k):
        assert pick_sentence_count(n, w) == k

    def test_rounds_half_up(self):
        # 25 * 0.22 = 5.5
        assert pick_sentence_count(25, 600) == 5
        # 16 * 0.22 = 3.52
        assert pick_sentence_count(16, 600) == 4


class TestSelectSentences:
    def test_top_k_in_document_order(self):
        scored = [
            ScoredSentence(0, "a", 1.0),
            ScoredSentence(1, "b", 5.0),
            ScoredSentence(2, "c", 3.0),
            ScoredSentence(3, "d", 4.0),
        ]
        assert [s.idx for s in select_sentences(scored, 2)] == [1, 3]
        assert generate_summary(scored, 2) == "b d"

    def test_ties_prefer_earliest(self):
        scored = [
            ScoredSentence(0, "a", 1.0),
            ScoredSentence(1, "b", 2.0),
            ScoredSentence(2, "c", 2.0),
        ]
        assert [s.idx for s in select_sentences(scored, 1)] == [1]

    def test_k_larger_than_input(self):
        scored = [ScoredSentence(0, "a", 0.0), ScoredSentence(1, "b", 0.0)]
        assert generate_summary(scored, 5) == "a b"


class TestSummarize:
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty_input(self, text):
        assert summarize(text) == ""

    @pytest.mark.parametrize("value", [None, 42, ["a. b."], b"bytes. here."])
    def test_non_string_input(self, value):
        assert summarize(value) == ""

    def test_single_sentence_identity(self):
        assert summarize("hello world") == "hello world"
        assert summarize("  hello   world  ") == "hello world"

    def test_leading_byte_order_mark_is_dropped(self):
        assert summarize("\ufeffHello world. Foo bar.") == "Hello world."

    def test_single_sentence_with_terminal(self):
        assert summarize("Just one sentence here.") == "Just one sentence here."

    def test_short_document_keeps_one_sentence_tie_to_earliest(self):
        text = "Alpha beta gamma. Gamma beta alpha! Delta."
        assert summarize(text) == "Alpha beta gamma."

    def test_short_document_picks_highest_score(self):
        text = "Rain fell. Rain and wind hit the coast, rain everywhere. Wind rose."
        assert summarize(text) == "Rain and wind hit the coast, rain everywhere."

    def test_two_sentence_document(self):
        # equal raw scores; the shorter sentence gets the larger length bonus
        assert summarize("Cats nap often. Dogs bark at cats.") == "Cats nap often."

    def test_medium_document_keeps_order(self):
        result = summarize(SOLAR_DOC)
        picked = [s.text for s in split_sentences(result)]
        assert len(picked) == 2
        positions = [SOLAR_DOC.index(s) for s in picked]
        assert positions == sorted(positions)
        assert all("solar" in s.lower() for s in picked)
        assert result.startswith("Solar panels convert sunlight")
        assert result.endswith("than older panels.")

    def test_long_document_caps_at_five(self):
        text = _long_doc()
        picked = [s.text for s in split_sentences(summarize(text))]
        assert len(picked) == 5
        positions = [text.index(s) for s in picked]
        assert positions == sorted(positions)

    def test_deterministic(self):
        assert summarize(SOLAR_DOC) == summarize(SOLAR_DOC)
        text = _long_doc()
        assert summarize(text) == summarize(text)

    def test_paragraph_breaks_are_flattened(self):
        text = "Solar power grows.\n\nSolar power is cheap.\nWind is steady."
        assert "\n" not in summarize(text)

"""Unit tests for Tokenizer."""

import pytest

from bismarck_nlp.processors.tokenizer import Tokenizer


class TestTokenizerBasics:
    """Tests for whitespace and punctuation handling."""

    def test_splits_on_spaces(self):
        tokens = Tokenizer().tokenize("Der Hund bellt")
        assert [t.value for t in tokens] == ["Der", "Hund", "bellt"]
        assert [(t.start, t.end) for t in tokens] == [(0, 3), (4, 8), (9, 14)]

    def test_indices_are_sequential(self):
        tokens = Tokenizer().tokenize("Der Hund bellt laut")
        assert [t.index for t in tokens] == [0, 1, 2, 3]

    def test_standalone_default_drops_punctuation(self):
        tokens = Tokenizer().tokenize("Der Hund bellt.")
        assert [t.value for t in tokens] == ["Der", "Hund", "bellt"]

    def test_keep_punctuation_emits_single_char_tokens(self):
        tokens = Tokenizer(keep_punctuation=True).tokenize("Ja, klar!")
        assert [t.value for t in tokens] == ["Ja", ",", "klar", "!"]
        comma = tokens[1]
        assert (comma.start, comma.end) == (2, 3)

    def test_any_whitespace_ends_a_token(self):
        tokens = Tokenizer().tokenize("Hallo\tWelt\nneu  da")
        assert [t.value for t in tokens] == ["Hallo", "Welt", "neu", "da"]

    def test_empty_text(self):
        assert Tokenizer().tokenize("") == []

    def test_whitespace_only_text(self):
        assert Tokenizer().tokenize("   \n\t  ") == []

    def test_punctuation_only_without_retention(self):
        assert Tokenizer().tokenize(",.!?") == []

    def test_token_text_matches_source(self):
        text = "Wir gehen heute ins Kino."
        for token in Tokenizer(keep_punctuation=True).tokenize(text):
            assert text[token.start:token.end] == token.value

    def test_case_sensitive_does_not_change_boundaries(self):
        text = "Die Bank ist groß."
        a = Tokenizer(case_sensitive=True).tokenize(text)
        b = Tokenizer(case_sensitive=False).tokenize(text)
        assert a == b


class TestTokenInvariants:
    """Span invariants that hold for any input."""

    @pytest.mark.parametrize(
        "text",
        [
            "Der schnelle braune Fuchs springt über den faulen Hund.",
            "  Angela Merkel war Bundeskanzlerin.\n  Sie führte Deutschland. ",
            "iPhoneHülle, (Klammer) [eckig] {geschweift}",
            "a  b\t\tc",
            "Bundesfinanzminister",
        ],
    )
    def test_spans_are_ordered_and_clean(self, text: str):
        tokens = Tokenizer(keep_punctuation=False).tokenize(text)
        for i, token in enumerate(tokens):
            assert token.start < token.end
            assert 0 <= token.start and token.end <= len(text)
            assert token.index == i
            assert not any(ch.isspace() for ch in token.value)
        for prev, nxt in zip(tokens, tokens[1:]):
            assert prev.end <= nxt.start


class TestCompoundSplitting:
    """Tests for compound word handling."""

    def test_lexicon_compound_is_split(self):
        tokens = Tokenizer().tokenize("Bundesfinanzminister")
        assert len(tokens) > 1
        assert all(t.value[0].isupper() for t in tokens[1:])
        assert [t.value for t in tokens] == ["Bundes", "Finanz", "Minister"]
        assert [(t.start, t.end) for t in tokens] == [(0, 6), (6, 12), (12, 20)]

    def test_lexicon_compound_offsets_follow_context(self):
        text = "Der Bundesfinanzminister kommt"
        tokens = Tokenizer().tokenize(text)
        assert [t.value for t in tokens] == ["Der", "Bundes", "Finanz", "Minister", "kommt"]
        assert [t.index for t in tokens] == [0, 1, 2, 3, 4]
        assert text[tokens[2].start:tokens[2].end].lower() == "finanz"

    def test_word_not_fully_covered_stays_whole(self):
        tokens = Tokenizer().tokenize("Bank")
        assert [t.value for t in tokens] == ["Bank"]

    def test_unknown_compound_stays_whole(self):
        tokens = Tokenizer().tokenize("Donaudampfschiff")
        assert [t.value for t in tokens] == ["Donaudampfschiff"]

    def test_custom_compound_lexicon(self):
        tokenizer = Tokenizer(compound_lexicon={"donau", "dampf", "schiff"})
        tokens = tokenizer.tokenize("Donaudampfschiff")
        assert [t.value for t in tokens] == ["Donau", "Dampf", "Schiff"]

    def test_camel_shape_split_before_capitals(self):
        tokens = Tokenizer().tokenize("iPhoneHülle")
        assert [t.value for t in tokens] == ["i", "Phone", "Hülle"]
        assert [(t.start, t.end) for t in tokens] == [(0, 1), (1, 6), (6, 11)]

    def test_camel_shape_repeated_fragment_uses_first_occurrence(self):
        tokens = Tokenizer().tokenize("xAbAb")
        assert [t.value for t in tokens] == ["x", "Ab", "Ab"]
        assert tokens[1].start == 1
        assert tokens[2].start == tokens[1].start

    def test_longest_constituent_leaving_a_cover_wins(self):
        tokenizer = Tokenizer(compound_lexicon={"abc", "abcd", "def", "ab", "cdef"})
        assert tokenizer.decompound("Abcdef") == ["Abc", "def"]

    def test_very_long_compound_is_split(self):
        word = "Bau" + "bau" * 1500
        tokens = Tokenizer().tokenize(f"Der {word} steht.")
        fragments = tokens[1:-1]
        assert len(fragments) == 1501
        assert all(t.value == "Bau" for t in fragments)
        assert fragments[-1].end == 4 + len(word)
        assert tokens[-1].value == "steht"

    def test_decompound_requires_two_constituents(self):
        tokenizer = Tokenizer()
        assert tokenizer.decompound("Minister") is None
        assert tokenizer.decompound("Bundesbank") == ["Bundes", "bank"]

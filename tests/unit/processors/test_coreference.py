"""Unit tests for CoreferenceResolver."""

import pytest

from bismarck_nlp.processors.coreference import CoreferenceResolver


class TestCoreferenceResolver:
    """Tests for CoreferenceResolver.resolve."""

    @pytest.fixture
    def coref(self) -> CoreferenceResolver:
        return CoreferenceResolver()

    def test_masculine_pronoun_links_to_noun(self, coref, analyze):
        chains = coref.resolve(*analyze("Der Mann lacht. Er lacht auch."))
        assert len(chains) == 1
        chain = chains[0]
        assert chain.original.text == "Mann"
        assert (chain.original.start, chain.original.end) == (4, 8)
        assert [r.text for r in chain.references] == ["Er"]
        assert chain.references[0].start == 16
        assert chain.type == "PRONOUN"

    def test_feminine_pronoun(self, coref, analyze):
        chains = coref.resolve(*analyze("Die Frau liest. Sie lacht."))
        assert [c.original.text for c in chains] == ["Frau"]
        assert chains[0].original.gender == "FEM"

    def test_gender_mismatch_leaves_pronoun_unresolved(self, coref, analyze):
        assert coref.resolve(*analyze("Die Frau liest. Er lacht.")) == []

    def test_unknown_gender_candidate_matches_any_pronoun(self, coref, analyze):
        chains = coref.resolve(*analyze("Peter lacht. Er lacht."))
        assert [c.original.text for c in chains] == ["Peter"]
        assert chains[0].original.gender == "UNKNOWN"

    def test_pronoun_before_any_entity_is_dropped(self, coref, analyze):
        assert coref.resolve(*analyze("Er lacht.")) == []

    def test_references_accumulate_in_document_order(self, coref, analyze):
        chains = coref.resolve(*analyze("Der Mann lacht. Er lacht. Er weint."))
        assert len(chains) == 1
        assert [r.start for r in chains[0].references] == [16, 26]

    def test_chains_group_by_surface_text(self, coref, analyze):
        text = "Der Mann kommt. Er lacht. Der Mann geht. Er weint."
        chains = coref.resolve(*analyze(text))
        assert len(chains) == 1
        assert chains[0].original.start == 4
        assert len(chains[0].references) == 2

    def test_most_recent_compatible_candidate_wins(self, coref, analyze):
        chains = coref.resolve(*analyze("Der Hund sieht die Katze. Sie schläft."))
        assert [c.original.text for c in chains] == ["Katze"]

    def test_candidates_need_noun_tag(self, coref, analyze):
        candidates = coref.find_candidates(*analyze("Der Mann und das Kind."))
        assert [(c.text, c.gender) for c in candidates] == [("Mann", "MASC"), ("Kind", "NEUT")]

    def test_empty_input(self, coref):
        assert coref.resolve([], []) == []

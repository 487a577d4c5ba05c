"""
Tests for stems.py - stem formation and passive infixation.
"""

from prakrit_verb.stems import (
    FUTURE_PASSIVE_STRIP, ConsonantRootStem, VowelRootStem, e_variants,
    future_stems, passivize_past_forms, passivize_stems, present_stems,
)


def values(stems):
    return [stem.value for stem in stems]


class TestStemGenerators:
    """Tests for present and future stems."""

    def test_present_consonant_root(self):
        assert present_stems("gam") == [ConsonantRootStem("gama")]

    def test_present_vowel_root(self):
        assert present_stems("bho") == [VowelRootStem("bho"), VowelRootStem("bhoa")]

    def test_future_consonant_root(self):
        stems = future_stems("gam")
        assert values(stems) == ["gami", "game"]
        assert all(isinstance(stem, ConsonantRootStem) for stem in stems)

    def test_future_vowel_root(self):
        stems = future_stems("bho")
        assert values(stems) == ["bho", "bhoa"]
        assert all(isinstance(stem, VowelRootStem) for stem in stems)

    def test_e_variants(self):
        stems = e_variants(present_stems("bho"))
        assert values(stems) == ["bho", "bhoa", "bhoe"]
        assert isinstance(stems[2], VowelRootStem)


class TestPassivizeStems:
    """Tests for passive infixation of stems."""

    def test_present_strips_a(self):
        stems = passivize_stems([ConsonantRootStem("gama")])
        assert values(stems) == ["gamijja", "gamIa"]
        assert all(isinstance(stem, ConsonantRootStem) for stem in stems)

    def test_present_appends_to_bare_stem(self):
        assert values(passivize_stems([VowelRootStem("bho")])) == ["bhoijja", "bhoIa"]

    def test_future_strips_linking_vowels(self):
        stems = passivize_stems(future_stems("gam"), FUTURE_PASSIVE_STRIP)
        assert values(stems) == ["gamijja", "gamIa", "gamijja", "gamIa"]


class TestPassivizePastForms:
    """Tests for passive infixation of finished past forms."""

    def test_vowel_root_forms(self):
        forms = passivize_past_forms(["bhosI", "bhohI", "bhohIa"], ("sI", "hI", "hIa"))
        assert forms == [
            "bhoijjasI", "bhoIasI",
            "bhoijjahI", "bhoIahI",
            "bhoijjahIa", "bhoIahIa",
        ]

    def test_consonant_root_forms(self):
        forms = passivize_past_forms(["gamIa"], ("Ia",), consonant_suffixes=("Ia",))
        assert forms == ["gamijja", "gamIa"]

    def test_form_without_known_suffix(self):
        assert passivize_past_forms(["gam"], ("sI",)) == ["gamijja", "gamIa"]

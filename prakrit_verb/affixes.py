"""
Affix tables for Prakrit verb conjugation.

Pure data: present-tense affixes by (mood, dialect), future-tense affixes
by dialect, the fixed past-tense suffixes and the passive infixes.

A leading underscore (``_i``, ``_ire``) marks a vowel that joins the stem
directly; it is kept in the surface form.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from prakrit_verb.models import Dialect, Mood, SLOT_NAMES


@dataclass(frozen=True)
class AffixSet:
    """Affixes for each person/number slot, in application order."""
    third_singular: Tuple[str, ...]
    third_plural: Tuple[str, ...]
    second_singular: Tuple[str, ...]
    second_plural: Tuple[str, ...]
    first_singular: Tuple[str, ...]
    first_plural: Tuple[str, ...]

    def for_slot(self, slot: str) -> Tuple[str, ...]:
        """Affixes for a slot name such as ``'third_plural'``."""
        if slot not in SLOT_NAMES:
            raise KeyError(slot)
        return getattr(self, slot)


# ============================================================================
# Present Tense
# ============================================================================

# Affixes shared by every dialect in the present indicative
_PRESENT_INDICATIVE_COMMON = dict(
    third_plural=("nti", "nte", "_ire"),
    second_plural=("ha", "_itthA"),
    first_singular=("mi",),
    first_plural=("mo", "mu", "ma"),
)

_PRESENT_IMPERATIVE_COMMON = dict(
    third_plural=("ntu",),
    second_plural=("ha",),
    first_singular=("mo",),
    first_plural=("mu",),
)

PRESENT_AFFIXES: Dict[Tuple[Mood, Dialect], AffixSet] = {
    # Indicative
    (Mood.INDICATIVE, Dialect.MAHARASTRI): AffixSet(
        third_singular=("_i", "e"),
        second_singular=("si", "se"),
        **_PRESENT_INDICATIVE_COMMON,
    ),
    (Mood.INDICATIVE, Dialect.SHAURASENI): AffixSet(
        third_singular=("di", "de"),
        second_singular=("si", "se"),
        **_PRESENT_INDICATIVE_COMMON,
    ),
    (Mood.INDICATIVE, Dialect.MAGADHI): AffixSet(
        third_singular=("di", "de"),
        second_singular=("zi", "ze"),  # s -> z
        **_PRESENT_INDICATIVE_COMMON,
    ),
    # Imperative
    (Mood.IMPERATIVE, Dialect.MAHARASTRI): AffixSet(
        third_singular=("_u",),
        second_singular=("hi", "su"),
        **_PRESENT_IMPERATIVE_COMMON,
    ),
    (Mood.IMPERATIVE, Dialect.SHAURASENI): AffixSet(
        third_singular=("du",),
        second_singular=("hi", "su"),
        **_PRESENT_IMPERATIVE_COMMON,
    ),
    (Mood.IMPERATIVE, Dialect.MAGADHI): AffixSet(
        third_singular=("du",),
        second_singular=("hi", "zu"),  # s -> z
        **_PRESENT_IMPERATIVE_COMMON,
    ),
}

# Affixes that elide after a stem not ending in 'a' (indicative only):
# the bare 'e' and 'se'. Magadhi 'ze' and 'de' do not elide.
ELIDING_AFFIXES: Dict[Dialect, frozenset] = {
    Dialect.MAHARASTRI: frozenset({"e", "se"}),
    Dialect.SHAURASENI: frozenset({"e", "se"}),
    Dialect.MAGADHI: frozenset({"e", "se"}),
}

# Affixes beginning with a nasal + stop cluster, by mood
CLUSTER_AFFIXES: Dict[Mood, frozenset] = {
    Mood.INDICATIVE: frozenset({"nti", "nte"}),
    Mood.IMPERATIVE: frozenset({"ntu"}),
}

# 1st singular "I am" marker and 1st plural "we" markers (indicative)
FIRST_SINGULAR_MARKERS = frozenset({"mi"})
FIRST_PLURAL_MARKERS = frozenset({"mo", "mu", "ma"})


# ============================================================================
# Future Tense
# ============================================================================

_FUTURE_COMMON = dict(
    third_plural=("hinti", "hinte", "hi_ire"),
    second_plural=("hitthA", "hiha"),
    first_singular=("himi", "hAmi", "ssaM", "ssAmi"),
    first_plural=(
        "himo", "himu", "hima", "hAmo", "hAmu", "hAma", "ssAmo", "ssAmu", "ssAma",
        "hissA", "hitthA",
    ),
)

FUTURE_AFFIXES: Dict[Dialect, AffixSet] = {
    Dialect.MAHARASTRI: AffixSet(
        third_singular=("hi_i", "hie"),
        second_singular=("hisi", "hise"),
        **_FUTURE_COMMON,
    ),
    Dialect.SHAURASENI: AffixSet(
        third_singular=("hi_di", "hide"),
        second_singular=("hisi", "hise"),
        **_FUTURE_COMMON,
    ),
    Dialect.MAGADHI: AffixSet(
        third_singular=("hi_di", "hide"),
        second_singular=("hizi", "hize"),  # s -> z
        **_FUTURE_COMMON,
    ),
}


# ============================================================================
# Past Tense and Passive
# ============================================================================

# sI-hI-hIa bhUtArthasya (8.3.162)
PAST_SUFFIXES_VOWEL: Tuple[str, ...] = ("sI", "hI", "hIa")

# vyaJjanAdIaH (8.3.163)
PAST_SUFFIXES_CONSONANT: Tuple[str, ...] = ("Ia",)

PASSIVE_INFIXES: Tuple[str, ...] = ("ijja", "Ia")


def get_present_affixes(mood: Mood, dialect: Dialect) -> AffixSet:
    """Get present tense affixes for a mood and dialect."""
    return PRESENT_AFFIXES[(Mood(mood), Dialect(dialect))]


def get_future_affixes(dialect: Dialect) -> AffixSet:
    """Get future tense affixes for a dialect."""
    return FUTURE_AFFIXES[Dialect(dialect)]


def get_past_suffixes(vowel_final: bool) -> Tuple[str, ...]:
    """Get past tense suffixes for a vowel-final or consonant-final root."""
    return PAST_SUFFIXES_VOWEL if vowel_final else PAST_SUFFIXES_CONSONANT


def get_passive_infixes() -> Tuple[str, ...]:
    return PASSIVE_INFIXES


def get_eliding_affixes(dialect: Dialect) -> frozenset:
    return ELIDING_AFFIXES[Dialect(dialect)]

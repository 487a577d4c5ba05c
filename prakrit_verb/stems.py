"""
Stem formation and passive infixation.

A stem is the working root with an optional linking vowel (augment).
Stems are tagged with the kind of root they came from:

    VowelRootStem      - root ends in a vowel; the augment is optional
    ConsonantRootStem  - root ends in a consonant; the augment is mandatory

Passive voice replaces a trailing linking vowel with each passive infix.
Past forms have no stem stage, so the passive is applied to the finished
forms instead (see ``passivize_past_forms``).
"""

from dataclasses import dataclass, replace
from typing import Iterable, List, Sequence

from prakrit_verb.affixes import get_passive_infixes
from prakrit_verb.characters import ends_with_vowel

# Present tense augment
PRESENT_AUGMENT = "a"

# Future tense augments: vowel-final roots take 'a', consonant-final roots
# take both 'i' and 'e'
FUTURE_VOWEL_ROOT_AUGMENT = "a"
FUTURE_CONSONANT_ROOT_AUGMENTS = ("i", "e")

# Linking vowels removed before a passive infix, per tense
PRESENT_PASSIVE_STRIP = frozenset("a")
FUTURE_PASSIVE_STRIP = frozenset("aie")


# ============================================================================
# Stem Variants
# ============================================================================

@dataclass(frozen=True)
class Stem:
    """A stem string. Use one of the tagged subclasses."""
    value: str

    def with_value(self, value: str) -> "Stem":
        """Same kind of stem with a new value."""
        return replace(self, value=value)

    def endswith(self, suffix: str) -> bool:
        return self.value.endswith(suffix)


@dataclass(frozen=True)
class VowelRootStem(Stem):
    """Stem of a vowel-final root."""


@dataclass(frozen=True)
class ConsonantRootStem(Stem):
    """Stem of a consonant-final root."""


# ============================================================================
# Stem Generators
# ============================================================================

def present_stems(root: str) -> List[Stem]:
    """
    Present tense stems.

    Vowel-final roots give the bare root and root + 'a'; consonant-final
    roots give root + 'a' only.
    """
    if ends_with_vowel(root):
        return [VowelRootStem(root), VowelRootStem(root + PRESENT_AUGMENT)]
    return [ConsonantRootStem(root + PRESENT_AUGMENT)]


def future_stems(root: str) -> List[Stem]:
    """
    Future tense stems.

    Vowel-final roots give the bare root and root + 'a'; consonant-final
    roots give root + 'i' and root + 'e'.
    """
    if ends_with_vowel(root):
        return [VowelRootStem(root), VowelRootStem(root + FUTURE_VOWEL_ROOT_AUGMENT)]
    return [ConsonantRootStem(root + augment) for augment in FUTURE_CONSONANT_ROOT_AUGMENTS]


def e_variants(stems: Iterable[Stem]) -> List[Stem]:
    """Follow every stem ending in 'a' with its 'e' counterpart."""
    result = []
    for stem in stems:
        result.append(stem)
        if stem.endswith("a"):
            result.append(stem.with_value(stem.value[:-1] + "e"))
    return result


# ============================================================================
# Passive Voice
# ============================================================================

def passivize_stems(stems: Iterable[Stem], strip: frozenset = PRESENT_PASSIVE_STRIP) -> List[Stem]:
    """
    Replace the linking vowel of each stem with each passive infix.

    Args:
        stems: Active stems.
        strip: Final vowels treated as linking vowels and removed before
            the infix. Stems not ending in one get the infix appended.

    Returns:
        One stem per (stem, infix) pair, keeping the stem's root tag.
    """
    infixes = get_passive_infixes()
    result = []
    for stem in stems:
        base = stem.value[:-1] if stem.value and stem.value[-1] in strip else stem.value
        for infix in infixes:
            result.append(stem.with_value(base + infix))
    return result


def passivize_past_forms(forms: Iterable[str], suffixes: Sequence[str],
                         consonant_suffixes: Sequence[str] = ()) -> List[str]:
    """
    Insert the passive infixes into finished past tense forms.

    The tense suffix ending each form is detected (longest first), removed,
    and re-added after each infix. For suffixes in ``consonant_suffixes``
    the infix itself becomes the ending and the suffix is not re-added.
    Forms ending in none of ``suffixes`` just get each infix appended.

    Args:
        forms: Active past forms.
        suffixes: Suffixes the forms were built with.
        consonant_suffixes: Subset of ``suffixes`` replaced by the infix.

    Returns:
        Passive forms, one per (form, infix) pair.
    """
    infixes = get_passive_infixes()
    by_length = sorted(suffixes, key=len, reverse=True)
    result = []
    for form in forms:
        suffix = next((s for s in by_length if form.endswith(s)), None)
        if suffix is None:
            result.extend(form + infix for infix in infixes)
            continue

        base = form[:-len(suffix)]
        if suffix in consonant_suffixes:
            result.extend(base + infix for infix in infixes)
        else:
            result.extend(base + infix + suffix for infix in infixes)
    return result

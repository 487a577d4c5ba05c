"""
Prakrit verb conjugation engine.

Turns a verb root plus (tense, mood, voice, dialect) into the surface forms
of the six person/number slots.

Pipeline:
    root -> vowel transformation -> stems (-> passive infix)
         -> affix lookup -> person forms (x6) -> ConjugationResult

Tenses:
    present - stems + person affixes, indicative or imperative
    past    - one suffix set for every person and number
    future  - stems + future affixes, always indicative

The only non-determinism is the vowel transformation draw; pass ``rng``
(e.g. ``random.Random(seed)``) to make a call reproducible.
"""

import logging
import random
from typing import Iterable, Iterator, List, Optional, Sequence

from prakrit_verb.affixes import (
    CLUSTER_AFFIXES, FIRST_PLURAL_MARKERS, FIRST_SINGULAR_MARKERS,
    get_eliding_affixes, get_future_affixes, get_past_suffixes,
    get_present_affixes,
)
from prakrit_verb.characters import (
    ends_with_vowel, shorten_final_vowel, transform_final_vowel, validate_root,
)
from prakrit_verb.models import (
    ConjugationResult, Dialect, Mood, PersonForms, SLOT_NAMES, Tense, Voice,
)
from prakrit_verb.stems import (
    FUTURE_PASSIVE_STRIP, PRESENT_PASSIVE_STRIP, Stem, VowelRootStem,
    e_variants, future_stems, passivize_past_forms, passivize_stems,
    present_stems,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Ordered Form Collection
# ============================================================================

class OrderedFormSet:
    """
    Insertion-ordered collection of forms that ignores repeats.

    Example:
        >>> forms = OrderedFormSet(["gamai", "gamei"])
        >>> forms.add("gamai")
        False
        >>> list(forms)
        ['gamai', 'gamei']
    """

    def __init__(self, forms: Iterable[str] = ()):
        self._forms: List[str] = []
        self._seen = set()
        self.extend(forms)

    def add(self, form: str) -> bool:
        """Add a form. Returns True if it was not already present."""
        if form in self._seen:
            return False
        self._seen.add(form)
        self._forms.append(form)
        return True

    def extend(self, forms: Iterable[str]) -> None:
        for form in forms:
            self.add(form)

    def to_list(self) -> List[str]:
        return list(self._forms)

    def __contains__(self, form: object) -> bool:
        return form in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._forms)

    def __len__(self) -> int:
        return len(self._forms)

    def __repr__(self) -> str:
        return f"OrderedFormSet({self._forms!r})"


def _strip_augment(value: str) -> str:
    """Stem without a final 'a' or 'e'."""
    if value.endswith("a") or value.endswith("e"):
        return value[:-1]
    return value


# ============================================================================
# Present Tense
# ============================================================================

def present_slot_forms(
    stems: Sequence[Stem],
    affixes: Sequence[str],
    slot: str,
    mood: Mood,
    dialect: Dialect,
) -> List[str]:
    """
    Join present stems with the affixes of one person/number slot.

    Rules, checked in order for each (stem, affix) pair:
        1. Elision (indicative): the 'e' and 'se' affixes are only joined
           to stems ending in 'a'.
        2. Cluster shortening: before nti/nte (indicative) or ntu
           (imperative) a final I/U/e/o also yields a short i/u form.
        3. 1st singular (indicative): stem in 'a' + mi gives the a, A and
           e variants.
        4. 1st plural (indicative): stem in 'a' + mo/mu/ma gives the a, A,
           e and i variants.
        5. Otherwise stem + affix.

    Args:
        stems: Present stems, including e-variants.
        affixes: Affixes for the slot.
        slot: Slot name, e.g. ``'first_plural'``.
        mood: Indicative or imperative.
        dialect: Selects the eliding affixes.

    Returns:
        Forms for the slot, without repeats, in first-seen order.
    """
    indicative = mood == Mood.INDICATIVE
    eliding = get_eliding_affixes(dialect) if indicative else frozenset()
    cluster = CLUSTER_AFFIXES[mood]
    forms = OrderedFormSet()

    for stem in stems:
        value = stem.value
        base = _strip_augment(value)

        for affix in affixes:
            # An 'e'-final stem never reaches a re-augmentation step here:
            # elision already drops every stem not ending in 'a'.
            if affix in eliding and not value.endswith("a"):
                continue

            if affix in cluster:
                shortened = shorten_final_vowel(value)
                if shortened is not None:
                    forms.add(value + affix)
                    forms.add(shortened + affix)
                    continue

            if indicative and value.endswith("a"):
                if slot == "first_singular" and affix in FIRST_SINGULAR_MARKERS:
                    # The e form may already come from the e-variant stem
                    forms.extend(base + vowel + affix for vowel in "aAe")
                    continue
                if slot == "first_plural" and affix in FIRST_PLURAL_MARKERS:
                    forms.extend(base + vowel + affix for vowel in "aAei")
                    continue

            forms.add(value + affix)

    return forms.to_list()


def generate_present_forms(
    verb_root: str,
    voice: Voice = Voice.ACTIVE,
    mood: Mood = Mood.INDICATIVE,
    dialect: Dialect = Dialect.MAHARASTRI,
    rng: Optional[random.Random] = None,
) -> ConjugationResult:
    """Generate present tense forms (indicative or imperative)."""
    validate_root(verb_root)
    voice, mood, dialect = Voice(voice), Mood(mood), Dialect(dialect)

    working_root = transform_final_vowel(verb_root, rng)
    stems = present_stems(working_root)
    if voice == Voice.PASSIVE:
        stems = passivize_stems(stems, PRESENT_PASSIVE_STRIP)
    stems = e_variants(stems)

    logger.debug("present %s: working root %r, stems %s",
                 verb_root, working_root, [s.value for s in stems])

    affixes = get_present_affixes(mood, dialect)
    forms = PersonForms(**{
        slot: present_slot_forms(stems, affixes.for_slot(slot), slot, mood, dialect)
        for slot in SLOT_NAMES
    })

    return ConjugationResult(
        verb_root=verb_root,
        tense=Tense.PRESENT,
        mood=mood,
        voice=voice,
        dialect=dialect,
        forms=forms,
    )


# ============================================================================
# Past Tense
# ============================================================================

def generate_past_forms(
    verb_root: str,
    voice: Voice = Voice.ACTIVE,
    dialect: Dialect = Dialect.MAHARASTRI,
    rng: Optional[random.Random] = None,
) -> ConjugationResult:
    """
    Generate past tense forms.

    The suffix set depends on whether the root as given ends in a vowel.
    Past forms do not vary by person or number, so every slot holds the
    same list.
    """
    validate_root(verb_root)
    voice, dialect = Voice(voice), Dialect(dialect)

    vowel_final = ends_with_vowel(verb_root)
    working_root = transform_final_vowel(verb_root, rng)
    suffixes = get_past_suffixes(vowel_final)

    past = [working_root + suffix for suffix in suffixes]
    if voice == Voice.PASSIVE:
        past = passivize_past_forms(
            past, suffixes, consonant_suffixes=() if vowel_final else suffixes,
        )
    past = OrderedFormSet(past).to_list()

    logger.debug("past %s: working root %r, forms %s", verb_root, working_root, past)

    forms = PersonForms(**{slot: list(past) for slot in SLOT_NAMES})

    return ConjugationResult(
        verb_root=verb_root,
        tense=Tense.PAST,
        mood=Mood.INDICATIVE,
        voice=voice,
        dialect=dialect,
        forms=forms,
    )


# ============================================================================
# Future Tense
# ============================================================================

def future_slot_forms(
    stems: Sequence[Stem],
    affixes: Sequence[str],
    working_root: str,
    voice: Voice,
) -> List[str]:
    """
    Join future stems with the affixes of one person/number slot.

    In the active voice a vowel-final root's bare stem takes the affix
    directly and its 'a' stem is realized with 'i' and 'e' instead.
    Everything else is stem + affix.
    """
    forms = OrderedFormSet()
    for stem in stems:
        for affix in affixes:
            if voice == Voice.ACTIVE and isinstance(stem, VowelRootStem):
                if stem.value == working_root:
                    forms.add(stem.value + affix)
                    continue
                if stem.endswith("a"):
                    base = stem.value[:-1]
                    forms.add(base + "i" + affix)
                    forms.add(base + "e" + affix)
                    continue
            forms.add(stem.value + affix)
    return forms.to_list()


def generate_future_forms(
    verb_root: str,
    voice: Voice = Voice.ACTIVE,
    dialect: Dialect = Dialect.MAHARASTRI,
    rng: Optional[random.Random] = None,
) -> ConjugationResult:
    """Generate future tense forms. The future has no imperative."""
    validate_root(verb_root)
    voice, dialect = Voice(voice), Dialect(dialect)

    working_root = transform_final_vowel(verb_root, rng)
    stems = future_stems(working_root)
    if voice == Voice.PASSIVE:
        stems = passivize_stems(stems, FUTURE_PASSIVE_STRIP)

    logger.debug("future %s: working root %r, stems %s",
                 verb_root, working_root, [s.value for s in stems])

    affixes = get_future_affixes(dialect)
    forms = PersonForms(**{
        slot: future_slot_forms(stems, affixes.for_slot(slot), working_root, voice)
        for slot in SLOT_NAMES
    })

    return ConjugationResult(
        verb_root=verb_root,
        tense=Tense.FUTURE,
        mood=Mood.INDICATIVE,
        voice=voice,
        dialect=dialect,
        forms=forms,
    )


# ============================================================================
# Dispatcher
# ============================================================================

def conjugate(
    verb_root: str,
    tense: Tense = Tense.PRESENT,
    mood: Mood = Mood.INDICATIVE,
    voice: Voice = Voice.ACTIVE,
    dialect: Dialect = Dialect.MAHARASTRI,
    rng: Optional[random.Random] = None,
) -> ConjugationResult:
    """
    Conjugate a verb root.

    Args:
        verb_root: Root in SLP1/HK, e.g. ``'gam'`` or ``'bhU'``.
        tense: Present, past or future.
        mood: Only used by the present tense; past and future report
            indicative whatever is passed.
        voice: Active or passive.
        dialect: Maharastri, Shauraseni or Magadhi.
        rng: Random source for the vowel transformation rule.

    Returns:
        ConjugationResult with forms for all six person/number slots.

    Raises:
        EmptyRootError: If ``verb_root`` is empty.
        InvalidRootError: If ``verb_root`` has characters outside the alphabet.

    Example:
        >>> result = conjugate("gam")
        >>> result.forms.third_singular
        ['gama_i', 'gamae', 'game_i']
    """
    tense = Tense(tense)
    logger.debug("conjugate %r: %s %s %s %s", verb_root, tense.value,
                 Mood(mood).value, Voice(voice).value, Dialect(dialect).value)

    if tense == Tense.PRESENT:
        return generate_present_forms(verb_root, voice, mood, dialect, rng)
    elif tense == Tense.PAST:
        return generate_past_forms(verb_root, voice, dialect, rng)
    else:
        return generate_future_forms(verb_root, voice, dialect, rng)

"""
Character handling for prakrit-verb.

Provides vowel classification, root validation and the optional
i/u -> e/o substitution applied to a root before stem formation.

Roots and affixes are written in SLP1 (or the Harvard-Kyoto subset that
coincides with it): lowercase letters are short vowels and plain
consonants, uppercase A/I/U are the long vowels.
"""

import random
import string
from typing import Optional

from prakrit_verb.errors import EmptyRootError, InvalidRootError
from prakrit_verb.settings import EXCEPTION_ODDS

# ============================================================================
# Character Tables
# ============================================================================

VOWELS = frozenset("aeiouAEIOU")

ALPHABET = frozenset(string.ascii_letters)

# Final vowel -> substituted vowel (i/I -> e, u/U -> o)
VOWEL_SUBSTITUTIONS = {
    'i': 'e', 'I': 'e',
    'u': 'o', 'U': 'o',
}

# Vowels shortened before a nasal + stop cluster
SHORTENING = {
    'I': 'i', 'e': 'i',
    'U': 'u', 'o': 'u',
}


def is_vowel(char: str) -> bool:
    """Check if a single character is a vowel."""
    return len(char) == 1 and char in VOWELS


def ends_with_vowel(root: str) -> bool:
    """Check if a root (or stem) ends in a vowel. Empty strings do not."""
    return bool(root) and is_vowel(root[-1])


def validate_root(root: str) -> str:
    """
    Check that a verb root can be conjugated.

    Args:
        root: Verb root in SLP1/HK transliteration.

    Returns:
        The root, unchanged.

    Raises:
        EmptyRootError: If the root is empty.
        InvalidRootError: If the root contains a non-alphabet character.
    """
    if not root:
        raise EmptyRootError()
    for char in root:
        if char not in ALPHABET:
            raise InvalidRootError(root, char)
    return root


# ============================================================================
# Vowel Transformation
# ============================================================================

def transform_final_vowel(root: str, rng: Optional[random.Random] = None) -> str:
    """
    Apply the i/u -> e/o substitution to the last character of a root.

    The substitution applies on 19 draws out of 20; on the remaining draw
    the root is kept as is, which is also a valid base.

    Args:
        root: Verb root.
        rng: Random source with a ``randint(a, b)`` method. A fresh
            ``random.Random()`` is used when omitted.

    Returns:
        The working root.
    """
    if not root or root[-1] not in VOWEL_SUBSTITUTIONS:
        return root

    if rng is None:
        rng = random.Random()

    if rng.randint(1, EXCEPTION_ODDS) == 1:
        return root
    return root[:-1] + VOWEL_SUBSTITUTIONS[root[-1]]


def shorten_final_vowel(stem: str) -> Optional[str]:
    """
    Replace a long (or derived e/o) final vowel with its short counterpart.

    Returns:
        The shortened stem, or None if the final vowel does not shorten.
    """
    if not stem or stem[-1] not in SHORTENING:
        return None
    return stem[:-1] + SHORTENING[stem[-1]]

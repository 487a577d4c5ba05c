"""
Transliteration scheme handling for prakrit-verb.

Forms are generated in SLP1. Harvard-Kyoto and SLP1 spell every character
of the conjugation alphabet (a A i I u U e o, the plain consonants, the
Magadhi z and the anusvara M) the same way, so the conversion tables are
currently empty and conversion maps each character to itself. Conversions
always preserve form count and order and never modify their input.
"""

from typing import Dict, List, Sequence

from prakrit_verb.models import BatchReport, ConjugationResult, Encoding, PersonForms, SLOT_NAMES

# Characters spelled differently between the schemes, per direction
_HK_TO_SLP1: Dict[str, str] = {}
_SLP1_TO_HK: Dict[str, str] = {}

_TABLES = {
    (Encoding.HK, Encoding.SLP1): str.maketrans(_HK_TO_SLP1),
    (Encoding.SLP1, Encoding.HK): str.maketrans(_SLP1_TO_HK),
}


def detect_encoding(text: str) -> Encoding:
    """
    Guess the scheme a root is written in.

    Input is treated as SLP1, which covers the HK spellings used here.
    """
    return Encoding.SLP1


def convert_encoding(text: str, source: Encoding, target: Encoding) -> str:
    """Convert a string from one scheme to another."""
    source, target = Encoding(source), Encoding(target)
    if source == target:
        return text
    return text.translate(_TABLES[(source, target)])


def normalize_input(text: str) -> str:
    """Strip surrounding whitespace and convert a root to the internal scheme."""
    text = text.strip()
    return convert_encoding(text, detect_encoding(text), Encoding.SLP1)


def encode_forms(forms: Sequence[str], scheme: Encoding) -> List[str]:
    """Convert a list of SLP1 forms to ``scheme``."""
    return [convert_encoding(form, Encoding.SLP1, scheme) for form in forms]


def encode_result(result: ConjugationResult, scheme: Encoding) -> ConjugationResult:
    """Copy of ``result`` with every form converted to ``scheme``."""
    forms = PersonForms(**{
        slot: encode_forms(getattr(result.forms, slot), scheme) for slot in SLOT_NAMES
    })
    return result.model_copy(update={"forms": forms})


def encode_report(report: BatchReport, scheme: Encoding) -> BatchReport:
    """Copy of ``report`` with every result converted to ``scheme``."""
    return BatchReport(
        results=[encode_result(r, scheme) for r in report.results],
        errors=list(report.errors),
    )

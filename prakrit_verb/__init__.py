"""
Prakrit-verb: conjugation generator for Prakrit verb roots
(Maharastri, Shauraseni and Magadhi).
"""

__version__ = "0.1.0"

from prakrit_verb.batch import BatchProcessor, TenseMood
from prakrit_verb.conjugations import conjugate
from prakrit_verb.errors import ConjugationError, EmptyRootError, InvalidRootError
from prakrit_verb.models import (
    BatchReport, ConjugationResult, Dialect, Encoding, LineError, Mood,
    PersonForms, Tense, Voice,
)

__all__ = [
    "__version__",
    "conjugate",
    "BatchProcessor",
    "TenseMood",
    "ConjugationError",
    "EmptyRootError",
    "InvalidRootError",
    "BatchReport",
    "ConjugationResult",
    "LineError",
    "PersonForms",
    "Dialect",
    "Encoding",
    "Mood",
    "Tense",
    "Voice",
]

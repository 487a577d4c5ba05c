"""
Enumerations and pydantic models for prakrit-verb results.

The result models are frozen so output collaborators can only read them;
encoding conversion produces copies via ``model_copy``.

Usage:
    from prakrit_verb.models import ConjugationResult, BatchReport

    result = conjugate("gam", Tense.PRESENT, Mood.INDICATIVE, Voice.ACTIVE, Dialect.MAHARASTRI)
    print(result.model_dump_json(indent=2))
"""

from enum import Enum
from typing import Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Closed Sets
# =============================================================================

class Dialect(str, Enum):
    """Prakrit dialects."""
    MAHARASTRI = "maharastri"
    SHAURASENI = "shauraseni"
    MAGADHI = "magadhi"


class Tense(str, Enum):
    PRESENT = "present"
    PAST = "past"
    FUTURE = "future"


class Mood(str, Enum):
    """Mood. Only Present distinguishes moods; Past and Future are indicative."""
    INDICATIVE = "indicative"
    IMPERATIVE = "imperative"


class Voice(str, Enum):
    ACTIVE = "active"
    PASSIVE = "passive"


class Encoding(str, Enum):
    """Transliteration schemes accepted on input and produced on output."""
    SLP1 = "slp1"
    HK = "hk"


class Person(str, Enum):
    THIRD = "third"
    SECOND = "second"
    FIRST = "first"


class Number(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"


# Person/number slots in canonical order: (field name, person, number)
PERSON_SLOTS: Tuple[Tuple[str, Person, Number], ...] = (
    ("third_singular", Person.THIRD, Number.SINGULAR),
    ("third_plural", Person.THIRD, Number.PLURAL),
    ("second_singular", Person.SECOND, Number.SINGULAR),
    ("second_plural", Person.SECOND, Number.PLURAL),
    ("first_singular", Person.FIRST, Number.SINGULAR),
    ("first_plural", Person.FIRST, Number.PLURAL),
)

SLOT_NAMES: Tuple[str, ...] = tuple(name for name, _, _ in PERSON_SLOTS)


# =============================================================================
# Result Models
# =============================================================================

class PersonForms(BaseModel):
    """Surface forms for each of the six person/number slots."""
    model_config = ConfigDict(frozen=True)

    third_singular: List[str] = Field(default_factory=list)
    third_plural: List[str] = Field(default_factory=list)
    second_singular: List[str] = Field(default_factory=list)
    second_plural: List[str] = Field(default_factory=list)
    first_singular: List[str] = Field(default_factory=list)
    first_plural: List[str] = Field(default_factory=list)

    def slots(self) -> Iterator[Tuple[Person, Number, List[str]]]:
        """Yield (person, number, forms) in canonical order."""
        for name, person, number in PERSON_SLOTS:
            yield person, number, getattr(self, name)

    def all_forms(self) -> List[str]:
        """All forms across slots, in slot order (may repeat across slots)."""
        return [form for _, _, forms in self.slots() for form in forms]


class ConjugationResult(BaseModel):
    """Complete output of one conjugation request."""
    model_config = ConfigDict(frozen=True)

    verb_root: str = Field(..., description="Root as given by the caller")
    tense: Tense
    mood: Mood
    voice: Voice
    dialect: Dialect
    forms: PersonForms


class LineError(BaseModel):
    """A batch input line that could not be conjugated."""
    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., description="1-based line number in the input")
    verb_root: str = Field(..., description="Line text after stripping")
    error_message: str


class BatchReport(BaseModel):
    """Results and per-line errors of a batch run."""
    results: List[ConjugationResult] = Field(default_factory=list)
    errors: List[LineError] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        """JSON-ready dict; the ``errors`` key is omitted when there are none."""
        data = self.model_dump(mode="json")
        if not self.errors:
            data.pop("errors")
        return data

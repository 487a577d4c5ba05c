"""
Output formatting for conjugation results.

Renders ConjugationResult / BatchReport values as a text table, JSON or
CSV. Renderers only read their input.
"""

import csv
import json
from typing import IO, List, Union

from prakrit_verb.models import BatchReport, ConjugationResult
from prakrit_verb.settings import FORM_SEPARATOR

CSV_HEADERS = [
    "verb_root",
    "tense",
    "mood",
    "voice",
    "dialect",
    "person",
    "number",
    "forms",
]

PERSON_LABELS = {
    "third": "Third Person",
    "second": "Second Person",
    "first": "First Person",
}

_ROW_FORMAT = "{:<20} {:<40} {:<40}"


def join_forms(forms: List[str]) -> str:
    return FORM_SEPARATOR.join(forms)


# ============================================================================
# Table
# ============================================================================

def format_table(result: ConjugationResult) -> str:
    """Format a result as a human-readable table."""
    lines = [
        f"Verb Root: {result.verb_root}",
        f"Tense: {result.tense.value}",
        f"Mood: {result.mood.value}",
        f"Voice: {result.voice.value}",
        f"Dialect: {result.dialect.value}",
        "",
        _ROW_FORMAT.format("Person", "Singular", "Plural"),
        "-" * 100,
    ]

    forms = result.forms
    rows = [
        ("third", forms.third_singular, forms.third_plural),
        ("second", forms.second_singular, forms.second_plural),
        ("first", forms.first_singular, forms.first_plural),
    ]
    for person, singular, plural in rows:
        lines.append(_ROW_FORMAT.format(
            PERSON_LABELS[person], join_forms(singular), join_forms(plural),
        ).rstrip())

    return "\n".join(lines) + "\n"


# ============================================================================
# JSON
# ============================================================================

def result_to_json(result: ConjugationResult) -> str:
    """Pretty-printed JSON for a single result."""
    return json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2)


def report_to_json(report: BatchReport) -> str:
    """Pretty-printed JSON for a batch report (no ``errors`` key when empty)."""
    return json.dumps(report.to_json_dict(), ensure_ascii=False, indent=2)


# ============================================================================
# CSV
# ============================================================================

def csv_rows(result: ConjugationResult) -> List[List[str]]:
    """
    Six CSV rows for a result, one per person/number slot.

    Each row is (verb_root, tense, mood, voice, dialect, person, number, forms)
    with the forms comma-joined.
    """
    head = [
        result.verb_root,
        result.tense.value,
        result.mood.value,
        result.voice.value,
        result.dialect.value,
    ]
    return [
        head + [person.value, number.value, join_forms(forms)]
        for person, number, forms in result.forms.slots()
    ]


def write_csv(data: Union[ConjugationResult, BatchReport], stream: IO[str]) -> None:
    """Write a header and the rows of one result or of every result in a report."""
    results = [data] if isinstance(data, ConjugationResult) else data.results
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for result in results:
        writer.writerows(csv_rows(result))

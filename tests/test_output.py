"""
Tests for output.py - table, JSON and CSV rendering.
"""

import csv
import json
from io import StringIO

from prakrit_verb.conjugations import conjugate
from prakrit_verb.models import BatchReport, LineError, Tense
from prakrit_verb.output import (
    CSV_HEADERS, csv_rows, format_table, report_to_json, result_to_json, write_csv,
)


class TestFormatTable:
    """Tests for the text table."""

    def test_header(self):
        table = format_table(conjugate("gam"))
        lines = table.splitlines()
        assert lines[0] == "Verb Root: gam"
        assert lines[1] == "Tense: present"
        assert lines[2] == "Mood: indicative"
        assert lines[3] == "Voice: active"
        assert lines[4] == "Dialect: maharastri"
        assert lines[6].split() == ["Person", "Singular", "Plural"]
        assert lines[7] == "-" * 100

    def test_rows(self):
        lines = format_table(conjugate("gam")).splitlines()
        third = lines[8]
        assert third.startswith("Third Person")
        assert "gama_i, gamae, game_i" in third
        assert lines[9].startswith("Second Person")
        assert lines[10].startswith("First Person")
        assert "gamami, gamAmi, gamemi" in lines[10]

    def test_ends_with_newline(self):
        assert format_table(conjugate("gam", Tense.PAST)).endswith("gamIa\n")


class TestJSON:
    """Tests for JSON rendering."""

    def test_result_to_json(self):
        data = json.loads(result_to_json(conjugate("gam")))
        assert data["verb_root"] == "gam"
        assert data["tense"] == "present"
        assert data["mood"] == "indicative"
        assert data["forms"]["third_singular"] == ["gama_i", "gamae", "game_i"]

    def test_report_without_errors(self):
        data = json.loads(report_to_json(BatchReport(results=[conjugate("gam")])))
        assert len(data["results"]) == 1
        assert "errors" not in data

    def test_report_with_errors(self):
        error = LineError(line_number=2, verb_root="g@m", error_message="bad root")
        data = json.loads(report_to_json(BatchReport(errors=[error])))
        assert data["results"] == []
        assert data["errors"] == [
            {"line_number": 2, "verb_root": "g@m", "error_message": "bad root"},
        ]


class TestCSV:
    """Tests for CSV rendering."""

    def test_csv_rows(self):
        rows = csv_rows(conjugate("gam"))
        assert len(rows) == 6
        assert rows[0] == [
            "gam", "present", "indicative", "active", "maharastri",
            "third", "singular", "gama_i, gamae, game_i",
        ]
        assert [row[5:7] for row in rows] == [
            ["third", "singular"], ["third", "plural"],
            ["second", "singular"], ["second", "plural"],
            ["first", "singular"], ["first", "plural"],
        ]

    def test_write_result(self):
        stream = StringIO()
        write_csv(conjugate("gam", Tense.PAST), stream)
        rows = list(csv.reader(StringIO(stream.getvalue())))
        assert rows[0] == CSV_HEADERS
        assert len(rows) == 7
        assert rows[1][-1] == "gamIa"

    def test_write_report(self):
        stream = StringIO()
        report = BatchReport(results=[conjugate("gam"), conjugate("kar")])
        write_csv(report, stream)
        rows = list(csv.reader(StringIO(stream.getvalue())))
        assert len(rows) == 13
        assert rows[7][0] == "kar"

    def test_header_line(self):
        stream = StringIO()
        write_csv(BatchReport(), stream)
        assert stream.getvalue() == "verb_root,tense,mood,voice,dialect,person,number,forms\n"

"""
Tests for batch.py - batch conjugation of root files.
"""

import pytest

from prakrit_verb.batch import ALL_TENSE_MOODS, BatchProcessor, TenseMood
from prakrit_verb.models import Dialect, Mood, Tense, Voice


class TestConfiguration:
    """Tests for BatchProcessor settings."""

    def test_defaults(self):
        processor = BatchProcessor()
        assert processor.combinations() == [
            (TenseMood(Tense.PRESENT, Mood.INDICATIVE), Voice.ACTIVE, Dialect.MAHARASTRI),
        ]

    def test_all(self):
        processor = BatchProcessor().with_all_tenses().with_all_voices().with_all_dialects()
        assert len(processor.combinations()) == 24

    def test_all_tenses_order(self):
        processor = BatchProcessor().with_all_tenses()
        labels = [tense_mood.label for tense_mood, _, _ in processor.combinations()]
        assert labels == ["present", "past", "future", "imperative"]
        assert processor.tense_moods == list(ALL_TENSE_MOODS)

    def test_empty_selection_keeps_current(self):
        processor = BatchProcessor().with_voices([]).with_dialects([])
        assert processor.voices == [Voice.ACTIVE]
        assert processor.dialects == [Dialect.MAHARASTRI]

    def test_explicit_selection(self):
        processor = BatchProcessor(voices=["passive"], dialects=[Dialect.MAGADHI])
        assert processor.voices == [Voice.PASSIVE]
        assert processor.dialects == [Dialect.MAGADHI]

    def test_workers_at_least_one(self):
        assert BatchProcessor(workers=0).workers == 1


class TestProcessLines:
    """Tests for line handling."""

    def test_skips_comments_and_blank_lines(self):
        report = BatchProcessor().process_lines(["gam\n", "# comment\n", "\n", "  bhU  \n"])
        assert [r.verb_root for r in report.results] == ["gam", "bhU"]
        assert report.errors == []

    def test_invalid_line_recorded(self):
        report = BatchProcessor().process_lines(["gam", "g@m", "kar"])
        assert [r.verb_root for r in report.results] == ["gam", "kar"]
        assert len(report.errors) == 1
        error = report.errors[0]
        assert error.line_number == 2
        assert error.verb_root == "g@m"
        assert "Invalid character" in error.error_message

    def test_line_numbers_count_skipped_lines(self):
        report = BatchProcessor().process_lines(["# header", "", "ga m"])
        assert report.errors[0].line_number == 3

    def test_one_result_per_combination(self):
        processor = BatchProcessor().with_all_tenses().with_all_voices().with_all_dialects()
        report = processor.process_lines(["gam", "bhU"])
        assert len(report.results) == 48
        assert all(r.verb_root == "gam" for r in report.results[:24])
        assert report.results[0].tense == Tense.PRESENT
        assert report.results[-1].mood == Mood.IMPERATIVE

    def test_seed_is_reproducible(self):
        lines = ["bhU", "ji", "hu", "nI"]
        first = BatchProcessor(seed=11).with_all_tenses().process_lines(lines)
        second = BatchProcessor(seed=11).with_all_tenses().process_lines(lines)
        assert first.results == second.results

    def test_workers_do_not_change_results(self):
        lines = ["bhU", "gam", "g@m", "ji", "kar", "hu"]
        serial = BatchProcessor(seed=3, workers=1).with_all_tenses().process_lines(lines)
        parallel = BatchProcessor(seed=3, workers=4).with_all_tenses().process_lines(lines)
        assert parallel.results == serial.results
        assert parallel.errors == serial.errors


class TestProcessFile:
    """Tests for file input."""

    def test_process_file(self, roots_file):
        report = BatchProcessor().process_file(roots_file)
        assert len(report.results) == 2
        assert report.errors == []

    def test_process_file_str_path(self, roots_file):
        report = BatchProcessor().process_file(str(roots_file))
        assert report.results[1].verb_root == "bhU"

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            BatchProcessor().process_file(tmp_path / "missing.txt")

"""
Tests for encoding.py - transliteration scheme handling.
"""

from prakrit_verb.conjugations import conjugate
from prakrit_verb.encoding import (
    convert_encoding, detect_encoding, encode_forms, encode_report,
    encode_result, normalize_input,
)
from prakrit_verb.models import BatchReport, Encoding, LineError


class TestConvertEncoding:
    """Tests for scheme conversion."""

    def test_same_scheme(self):
        assert convert_encoding("gamai", Encoding.SLP1, Encoding.SLP1) == "gamai"

    def test_conjugation_alphabet_is_shared(self):
        for text in ["bhohIa", "gamissaM", "gamazi", "gama_itthA"]:
            assert convert_encoding(text, Encoding.SLP1, Encoding.HK) == text
            assert convert_encoding(text, "hk", "slp1") == text

    def test_detect_encoding(self):
        assert detect_encoding("bhU") == Encoding.SLP1

    def test_normalize_input_strips(self):
        assert normalize_input("  gam\n") == "gam"


class TestEncodeResults:
    """Tests for converting whole results and reports."""

    def test_encode_forms_keeps_order(self):
        forms = ["gama_i", "gamae", "game_i"]
        assert encode_forms(forms, Encoding.HK) == forms

    def test_encode_result_is_a_copy(self):
        result = conjugate("gam")
        encoded = encode_result(result, Encoding.HK)
        assert encoded == result
        assert encoded is not result
        assert encoded.forms.third_singular == result.forms.third_singular

    def test_encode_report_keeps_errors(self):
        error = LineError(line_number=3, verb_root="g@m", error_message="bad")
        report = BatchReport(results=[conjugate("gam")], errors=[error])
        encoded = encode_report(report, Encoding.HK)
        assert len(encoded.results) == 1
        assert encoded.errors == [error]
        assert encoded is not report

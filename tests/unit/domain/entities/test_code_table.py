"""Tests for CodeTable."""

import math

import numpy as np
import pytest

from simario.domain.entities import CodeTable, code_key
from simario.domain.exceptions import DuplicateCodeError


@pytest.fixture
def sesbth():
    return CodeTable.from_pairs(
        "SESBTH", [("Professional", 1), ("Clerical", 2), ("Semi-skilled", 3)]
    )


class TestCodeKey:
    """Tests for the textual identity of codes."""

    def test_integral_numbers_match_their_text(self):
        assert code_key(1) == "1"
        assert code_key(1.0) == "1"
        assert code_key(np.int64(1)) == "1"
        assert code_key(" 1 ") == "1"

    def test_fractional_numbers_keep_their_fraction(self):
        assert code_key(0.5) == "0.5"

    def test_missing_values_have_no_key(self):
        assert code_key(None) is None
        assert code_key(math.nan) is None


class TestCodeTable:
    """Tests for CodeTable construction and lookup."""

    def test_from_pairs_keeps_order(self, sesbth):
        assert sesbth.varname == "SESBTH"
        assert sesbth.codes == (1, 2, 3)
        assert sesbth.labels == ("Professional", "Clerical", "Semi-skilled")
        assert list(sesbth) == [
            (1, "Professional"),
            (2, "Clerical"),
            (3, "Semi-skilled"),
        ]
        assert len(sesbth) == 3

    def test_from_mapping(self):
        table = CodeTable.from_mapping("z1singleLvl1", {0: "No", 1: "Yes"})

        assert table.as_dict() == {0: "No", 1: "Yes"}

    def test_label_for_numeric_and_text_codes(self, sesbth):
        assert sesbth.label_for(2) == "Clerical"
        assert sesbth.label_for("2") == "Clerical"
        assert sesbth.label_for(2.0) == "Clerical"

    def test_label_for_unknown_code_is_none(self, sesbth):
        assert sesbth.label_for(9) is None
        assert sesbth.label_for(None) is None
        assert sesbth.labels_for([1, 9, 3]) == ["Professional", None, "Semi-skilled"]

    def test_contains(self, sesbth):
        assert 1 in sesbth
        assert "3" in sesbth
        assert 4 not in sesbth

    def test_duplicate_codes_rejected(self):
        with pytest.raises(DuplicateCodeError) as excinfo:
            CodeTable.from_pairs("SESBTH", [("Professional", 1), ("Clerical", 1.0)])

        assert excinfo.value.varname == "SESBTH"
        assert excinfo.value.code == 1.0

    def test_codes_and_labels_must_align(self):
        with pytest.raises(ValueError, match="2 codes but 1 labels"):
            CodeTable(varname="x", codes=(1, 2), labels=("a",))

    def test_is_immutable(self, sesbth):
        with pytest.raises(AttributeError):
            sesbth.varname = "other"

    def test_reversed_round_trip(self, sesbth):
        reverse = sesbth.reversed()

        for code, label in sesbth:
            assert reverse.label_for(sesbth.label_for(code)) == code
            assert sesbth.code_for(label) == code

    def test_code_for_unknown_label(self, sesbth):
        assert sesbth.code_for("Unskilled") is None

"""Tests for index file parsing."""

import pytest

from undetermined_coefficients.errors import MalformedInputError, SourceUnavailableError
from undetermined_coefficients.sources import (
    all_position_subsets,
    parse_indices,
    read_assignments,
    read_position_subsets,
    to_assignment,
)


def test_parse_indices_accepts_commas_and_whitespace():
    assert parse_indices("1,2,3,") == [1, 2, 3]
    assert parse_indices("4, 5\n6") == [4, 5, 6]
    assert parse_indices("") == []


def test_parse_indices_rejects_garbage():
    with pytest.raises(MalformedInputError):
        parse_indices("1,2;3")


def test_to_assignment_pads_to_width():
    assert to_assignment(5) == "000101"
    assert to_assignment(0, 3) == "000"
    assert to_assignment(7, 3) == "111"


def test_to_assignment_too_wide():
    with pytest.raises(MalformedInputError):
        to_assignment(8, 3)


def test_all_position_subsets():
    assert all_position_subsets(3) == ["1", "2", "3", "12", "13", "23", "123"]
    assert all_position_subsets(4, max_size=1) == ["1", "2", "3", "4"]
    assert len(all_position_subsets(6)) == 63


def test_all_position_subsets_limits():
    with pytest.raises(MalformedInputError):
        all_position_subsets(10)
    with pytest.raises(MalformedInputError):
        all_position_subsets(0)


def test_read_files(tmp_path):
    ones = tmp_path / "ones.txt"
    ones.write_text("1,7,12,\n")
    indexes = tmp_path / "lowindexes.txt"
    indexes.write_text("1,2,13,246,\n")

    assert read_assignments(ones, 4) == ["0001", "0111", "1100"]
    assert read_position_subsets(indexes) == ["1", "2", "13", "246"]


def test_missing_file(tmp_path):
    with pytest.raises(SourceUnavailableError):
        read_assignments(tmp_path / "absent.txt")

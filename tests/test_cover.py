"""Tests for greedy and MaxSAT cover selection."""

import pytest

from undetermined_coefficients.coefficients import (
    Coefficient,
    find_zero_coefficients,
    make_system_of_equations,
)
from undetermined_coefficients.cover import greedy_cover, maxsat_cover, reduce_system
from undetermined_coefficients.errors import EmptyCoverError


def build(zeros, ones, subsets):
    return make_system_of_equations(ones, subsets), find_zero_coefficients(zeros, subsets)


def test_reduce_system_strips_forbidden_entries():
    system, forbidden = build(["000", "001"], ["010", "100", "111"], ["1", "2", "3"])
    reduced = reduce_system(system, forbidden)
    assert [list(eq) for eq in reduced] == [
        [Coefficient("1", "2")],
        [Coefficient("1", "1")],
        [Coefficient("1", "1"), Coefficient("1", "2")],
    ]


def test_reduce_system_sorts_by_first_coefficient_only():
    # "10" holds ("1","1") but its first entry is ("10","12"), so it does not move
    system, forbidden = build(["00"], ["01", "10"], ["12", "1"])
    reduced = reduce_system(system, forbidden)
    assert [eq.assignment for eq in reduced] == ["01", "10"]

    system, forbidden = build(["00"], ["01", "10"], ["1", "12"])
    reduced = reduce_system(system, forbidden)
    assert [eq.assignment for eq in reduced] == ["10", "01"]
    assert greedy_cover(system, forbidden) == [Coefficient("1", "1"), Coefficient("01", "12")]


def test_greedy_cover_example():
    system, forbidden = build(["000", "001"], ["010", "100", "111"], ["1", "2", "3"])
    assert greedy_cover(system, forbidden) == [Coefficient("1", "2"), Coefficient("1", "1")]


def test_greedy_cover_never_selects_forbidden():
    system, forbidden = build(["0110", "1001"], ["0000", "1111", "0101"], ["1", "2", "12", "34", "1234"])
    cover = greedy_cover(system, forbidden)
    assert not set(cover) & forbidden


def test_empty_system_raises():
    with pytest.raises(EmptyCoverError) as exc:
        greedy_cover([], frozenset())
    assert exc.value.assignment is None


def test_overlapping_assignment_raises_with_assignment():
    system, forbidden = build(["01"], ["01", "11"], ["1", "2", "12"])
    with pytest.raises(EmptyCoverError) as exc:
        greedy_cover(system, forbidden)
    assert exc.value.assignment == "01"


def test_maxsat_beats_greedy_when_first_coefficient_is_long():
    system, forbidden = build(["00", "01"], ["10", "11"], ["12", "1"])
    assert greedy_cover(system, forbidden) == [Coefficient("10", "12"), Coefficient("11", "12")]
    assert maxsat_cover(system, forbidden) == [Coefficient("1", "1")]


def test_maxsat_cover_hits_every_equation():
    system, forbidden = build(["000", "111"], ["001", "010", "100", "011", "101", "110"], ["1", "2", "3", "12", "13", "23"])
    cover = maxsat_cover(system, forbidden)
    for equation in reduce_system(system, forbidden):
        assert any(coef in equation for coef in cover)

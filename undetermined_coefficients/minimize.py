"""
Minimization of a Boolean function given by its full disjunctive normal form.

The function is given as the assignments where it is 0 and where it is 1.
Every assignment is expanded into one coefficient per position subset; the
coefficients of the zero-assignments are forbidden, and a cover of the
one-assignments is chosen from what remains.
"""

import sys
from dataclasses import dataclass

from .coefficients import (
    Coefficient,
    Equation,
    find_zero_coefficients,
    make_system_of_equations,
)
from .cover import COVER_METHODS
from .encode import encode
from .errors import MalformedInputError

DEFAULT_METHOD = "greedy"


@dataclass
class MinimizationResult:
    """Result of one minimization call."""

    cover: list[Coefficient]
    expression: str
    method: str
    zeros: list[str]
    ones: list[str]

    @property
    def num_terms(self) -> int:
        return len(self.cover)

    @property
    def num_literals(self) -> int:
        return sum(coef.num_literals for coef in self.cover)

    @property
    def width(self) -> int:
        return len(self.ones[0])


class Minimizer:
    """
    Method of undetermined coefficients over a fixed list of position subsets.

    Inputs are validated up front: assignments must be binary strings of one
    length, and every position subset must name positions within it.
    """

    def __init__(self, zeros: list[str], ones: list[str], position_subsets: list[str], verbose: bool = False):
        self.zeros = list(zeros)
        self.ones = list(ones)
        self.position_subsets = list(position_subsets)
        self.verbose = verbose
        self._validate()

    def _validate(self):
        if not self.position_subsets:
            raise MalformedInputError("Position subset list is empty")

        widths = {len(a) for a in self.zeros + self.ones}
        if len(widths) > 1:
            raise MalformedInputError(
                f"Assignments have different lengths: {sorted(widths)}"
            )

        for assignment in self.zeros + self.ones:
            if not assignment or set(assignment) - {'0', '1'}:
                raise MalformedInputError(f"Not a binary assignment: {assignment!r}")

        for positions in self.position_subsets:
            if not positions or not positions.isdigit():
                raise MalformedInputError(f"Not a position subset: {positions!r}")

        if widths:
            width = widths.pop()
            highest = max(int(d) for positions in self.position_subsets for d in positions)
            if highest > width or '0' in "".join(self.position_subsets):
                raise MalformedInputError(
                    f"Position subsets reference positions outside 1..{width}"
                )

    def _log(self, message: str):
        if self.verbose:
            print(message, file=sys.stderr, flush=True)

    def forbidden(self) -> frozenset[Coefficient]:
        """Coefficients produced by some zero-assignment."""
        return find_zero_coefficients(self.zeros, self.position_subsets)

    def system_of_equations(self) -> list[Equation]:
        """One equation per one-assignment."""
        return make_system_of_equations(self.ones, self.position_subsets)

    def solve(self, method: str = DEFAULT_METHOD) -> MinimizationResult:
        if method not in COVER_METHODS:
            raise ValueError(f"Unknown cover method: {method}")

        forbidden = self.forbidden()
        self._log(f"  {len(forbidden)} forbidden coefficients from {len(self.zeros)} zero-assignments")

        system = self.system_of_equations()
        self._log(f"  {len(system)} equations over {len(self.position_subsets)} position subsets")

        cover = COVER_METHODS[method](system, forbidden)
        self._log(f"  {method} cover: {len(cover)} terms")

        return MinimizationResult(
            cover=cover,
            expression=encode(cover),
            method=method,
            zeros=self.zeros,
            ones=self.ones,
        )


def minimize(
    zeros: list[str],
    ones: list[str],
    position_subsets: list[str],
    method: str = DEFAULT_METHOD
) -> str:
    """
    Minimize a function and return its sum-of-products expression.

    Args:
        zeros: assignments where the function is 0
        ones: assignments where the function is 1
        position_subsets: ordered candidate term shapes, e.g. ["1", "2", "12"]
        method: "greedy" or "maxsat"

    Returns:
        Expression such as "x1-x3+-x2"
    """
    return Minimizer(zeros, ones, position_subsets).solve(method).expression

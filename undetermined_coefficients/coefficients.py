"""
Coefficients and systems of equations for the method of undetermined coefficients.

A coefficient is a candidate product term. It pairs a position subset
("low index", e.g. "13" for variables x1 and x3) with the bits an assignment
takes at those positions (the literal pattern, e.g. "01" for -x1x3).
"""

from dataclasses import dataclass

from .errors import MalformedInputError


@dataclass(frozen=True)
class Coefficient:
    """
    A candidate product term.

    pattern: literal pattern, '1' = positive literal, '0' = negated literal
    positions: 1-based variable positions, one digit per slot of the pattern
    """

    pattern: str
    positions: str

    @property
    def num_literals(self) -> int:
        return len(self.pattern)

    def __repr__(self):
        return f"Coefficient({self.pattern!r}, {self.positions!r})"


@dataclass(frozen=True)
class Equation:
    """The ordered coefficients derived from a single assignment."""

    assignment: str
    coefficients: tuple[Coefficient, ...]

    def without(self, forbidden) -> "Equation":
        """Return a copy with every occurrence of a forbidden coefficient removed."""
        kept = tuple(c for c in self.coefficients if c not in forbidden)
        return Equation(self.assignment, kept)

    def __contains__(self, coefficient) -> bool:
        return coefficient in self.coefficients

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iter__(self):
        return iter(self.coefficients)

    def __getitem__(self, index):
        return self.coefficients[index]


def make_coefficients(assignment: str, position_subsets: list[str]) -> Equation:
    """
    Build the equation for one assignment.

    One coefficient per position subset, in subset order. For the subset
    "p1p2...pk" the pattern is assignment[p1-1] + assignment[p2-1] + ...

    Raises:
        MalformedInputError: if a position is outside 1..len(assignment)
    """
    coefficients = []
    for positions in position_subsets:
        pattern = []
        for digit in positions:
            index = int(digit) - 1
            if index < 0 or index >= len(assignment):
                raise MalformedInputError(
                    f"Position {digit} of subset {positions!r} is out of range "
                    f"for assignment {assignment!r}"
                )
            pattern.append(assignment[index])
        coefficients.append(Coefficient("".join(pattern), positions))
    return Equation(assignment, tuple(coefficients))


def make_system_of_equations(ones: list[str], position_subsets: list[str]) -> list[Equation]:
    """One equation per one-assignment, in input order."""
    return [make_coefficients(assignment, position_subsets) for assignment in ones]


def find_zero_coefficients(zeros: list[str], position_subsets: list[str]) -> frozenset[Coefficient]:
    """Collect every coefficient produced by some zero-assignment."""
    forbidden = set()
    for assignment in zeros:
        forbidden.update(make_coefficients(assignment, position_subsets))
    return frozenset(forbidden)

"""
Cover selection over a system of equations.

Each equation lists the candidate terms that could represent one
one-assignment. A cover picks coefficients so that every equation contains
at least one of them, after coefficients also produced by a zero-assignment
have been removed.
"""

from pysat.formula import WCNF
from pysat.examples.rc2 import RC2

from .coefficients import Coefficient, Equation
from .errors import EmptyCoverError


def reduce_system(
    system: list[Equation],
    forbidden: frozenset[Coefficient]
) -> list[Equation]:
    """
    Strip forbidden coefficients and order the equations for selection.

    Equations are sorted (stably) by the pattern length of their first
    remaining coefficient only, not by their shortest one.

    Raises:
        EmptyCoverError: if the system is empty or an equation has nothing left
    """
    if not system:
        raise EmptyCoverError("No one-assignments to cover")

    reduced = []
    for equation in system:
        stripped = equation.without(forbidden)
        if not stripped.coefficients:
            raise EmptyCoverError(
                f"Assignment {equation.assignment} cannot be represented "
                f"without matching a zero-assignment",
                assignment=equation.assignment,
            )
        reduced.append(stripped)

    return sorted(reduced, key=lambda eq: eq[0].num_literals)


def greedy_cover(
    system: list[Equation],
    forbidden: frozenset[Coefficient]
) -> list[Coefficient]:
    """
    Greedily select one coefficient per uncovered equation.

    Seeds the cover with the first coefficient of the first sorted equation,
    then for every later equation that shares nothing with the cover so far,
    appends that equation's first coefficient.
    """
    reduced = reduce_system(system, forbidden)

    selected = [reduced[0][0]]
    for equation in reduced[1:]:
        if not any(coef in equation for coef in selected):
            selected.append(equation[0])

    return selected


def maxsat_cover(
    system: list[Equation],
    forbidden: frozenset[Coefficient]
) -> list[Coefficient]:
    """
    Select a minimum-cost cover with weighted MaxSAT.

    Formulates the covering problem as weighted MaxSAT where:
    - Hard clauses: every equation contains at least one selected coefficient
    - Soft clauses: penalize each coefficient by its literals plus one OR input

    Only the coefficients of the reduced system are candidates, so the
    result is minimal with respect to the given position subsets only.
    """
    reduced = reduce_system(system, forbidden)

    # Candidate order = first appearance in the sorted system
    candidates = []
    coef_vars = {}
    for equation in reduced:
        for coef in equation:
            if coef not in coef_vars:
                candidates.append(coef)
                coef_vars[coef] = len(candidates)

    wcnf = WCNF()

    for equation in reduced:
        wcnf.append(sorted({coef_vars[coef] for coef in equation}))

    for coef in candidates:
        wcnf.append([-coef_vars[coef]], weight=coef.num_literals + 1)

    with RC2(wcnf) as solver:
        model = solver.compute()
        if model is None:
            raise EmptyCoverError("MaxSAT solver found no cover")

        chosen = {lit for lit in model if lit > 0}

    return [coef for coef in candidates if coef_vars[coef] in chosen]


COVER_METHODS = {
    "greedy": greedy_cover,
    "maxsat": maxsat_cover,
}

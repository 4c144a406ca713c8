"""
Verification of minimization results.

Ensures an expression is true on every one-assignment and false on every
zero-assignment.
"""

import re

from .coefficients import Coefficient
from .errors import MalformedInputError

LITERAL_RE = re.compile(r"(-?)x(\d)")


def evaluate_term(coef: Coefficient, assignment: str) -> bool:
    """Evaluate a product term on a specific assignment."""
    return all(
        assignment[int(position) - 1] == bit
        for bit, position in zip(coef.pattern, coef.positions)
    )


def evaluate_cover(cover: list[Coefficient], assignment: str) -> bool:
    """Evaluate a sum-of-products on a specific assignment (OR of AND terms)."""
    return any(evaluate_term(coef, assignment) for coef in cover)


def parse_expression(text: str) -> list[Coefficient]:
    """
    Parse an expression like "x1-x3+-x2" back into coefficients.

    Raises:
        MalformedInputError: if a term is not a run of x<p> / -x<p> literals
    """
    cover = []
    for term in text.split("+"):
        literals = LITERAL_RE.findall(term)
        if not literals or "".join(sign + "x" + pos for sign, pos in literals) != term:
            raise MalformedInputError(f"Not a product term: {term!r}")
        pattern = "".join("0" if sign else "1" for sign, _ in literals)
        positions = "".join(pos for _, pos in literals)
        cover.append(Coefficient(pattern, positions))
    return cover


def evaluate_expression(text: str, assignment: str) -> bool:
    return evaluate_cover(parse_expression(text), assignment)


def verify_cover(
    cover: list[Coefficient],
    zeros: list[str],
    ones: list[str]
) -> tuple[bool, list[str]]:
    """
    Verify that a cover is true on all ones and false on all zeros.

    Returns:
        Tuple of (all_correct, list of error messages)
    """
    errors = []

    for assignment in ones:
        if not evaluate_cover(cover, assignment):
            errors.append(f"Assignment {assignment}: expected 1, got 0")

    for assignment in zeros:
        for coef in cover:
            if evaluate_term(coef, assignment):
                errors.append(
                    f"Assignment {assignment}: expected 0, "
                    f"term {coef.pattern}/{coef.positions} is 1"
                )

    return len(errors) == 0, errors


def print_truth_table_comparison(expression: str, zeros: list[str], ones: list[str]):
    """Print truth table comparing expected vs actual outputs."""
    cover = parse_expression(expression)
    rows = sorted([(a, "0") for a in zeros] + [(a, "1") for a in ones])
    width = max(len(a) for a, _ in rows)

    print("Truth Table Verification")
    print("=" * 40)
    print(f"{'Input':>{width}} | Expected | Actual | Match")
    print("-" * 40)

    all_match = True
    for assignment, expected in rows:
        actual = "1" if evaluate_cover(cover, assignment) else "0"
        match_str = "." if actual == expected else "X"
        if actual != expected:
            all_match = False
        print(f"{assignment:>{width}} | {expected:>8} | {actual:>6} | {match_str}")

    print("-" * 40)
    print(f"All correct: {all_match}")
    return all_match

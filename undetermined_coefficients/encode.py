"""Render a cover as a sum-of-products expression."""

from .coefficients import Coefficient
from .errors import EmptyCoverError


def term_to_str(coefficient: Coefficient) -> str:
    """Convert one coefficient to a product term, e.g. ('01', '13') -> '-x1x3'."""
    literals = []
    for bit, position in zip(coefficient.pattern, coefficient.positions):
        if bit == '0':
            literals.append(f"-x{position}")
        else:
            literals.append(f"x{position}")
    return "".join(literals)


def encode(cover: list[Coefficient]) -> str:
    """Join the product terms of a cover with '+'."""
    if not cover:
        raise EmptyCoverError("Cannot encode an empty cover")
    return "+".join(term_to_str(coef) for coef in cover)

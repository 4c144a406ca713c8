"""
Index files: minterm lists and position subsets.

Both kinds of file hold runs of decimal digits separated by commas and/or
whitespace, e.g. "1,12,123,". A minterm file is converted to fixed-width
binary assignments; a position subset file is kept as digit strings, one
digit per 1-based variable position.
"""

import re
from itertools import combinations

from .errors import MalformedInputError, SourceUnavailableError

DEFAULT_WIDTH = 6

TOKEN_RE = re.compile(r"\d+")
INDEX_DATA_RE = re.compile(r"[\d\s,]*")


def parse_tokens(text: str) -> list[str]:
    """Split index file content into digit tokens."""
    if not INDEX_DATA_RE.fullmatch(text):
        raise MalformedInputError(f"Unexpected characters in index data: {text!r}")
    return TOKEN_RE.findall(text)


def parse_indices(text: str) -> list[int]:
    """Parse decimal minterm indices."""
    return [int(token) for token in parse_tokens(text)]


def to_assignment(index: int, width: int = DEFAULT_WIDTH) -> str:
    """Convert a minterm index to a binary assignment left-padded to width."""
    if index < 0 or index >= (1 << width):
        raise MalformedInputError(f"Minterm {index} does not fit in {width} bits")
    return format(index, "b").zfill(width)


def all_position_subsets(n_vars: int, max_size: int = None) -> list[str]:
    """
    Every combination of positions 1..n_vars, by size then lexicographically.

    all_position_subsets(3) -> ["1", "2", "3", "12", "13", "23", "123"]
    """
    if not 1 <= n_vars <= 9:
        raise MalformedInputError(f"Positions are single digits, got {n_vars} variables")
    if max_size is None:
        max_size = n_vars

    subsets = []
    for size in range(1, min(max_size, n_vars) + 1):
        for combo in combinations(range(1, n_vars + 1), size):
            subsets.append("".join(str(p) for p in combo))
    return subsets


def _read(path) -> str:
    try:
        with open(path) as f:
            return f.read()
    except OSError as e:
        raise SourceUnavailableError(f"Cannot read {path}: {e}") from e


def read_assignments(path, width: int = DEFAULT_WIDTH) -> list[str]:
    """Read a minterm file as binary assignments."""
    return [to_assignment(index, width) for index in parse_indices(_read(path))]


def read_position_subsets(path) -> list[str]:
    """Read a position subset ("low index") file in file order."""
    return parse_tokens(_read(path))

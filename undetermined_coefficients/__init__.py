"""Boolean function minimization by the method of undetermined coefficients."""

from .errors import MinimizationError, MalformedInputError, EmptyCoverError, SourceUnavailableError
from .coefficients import Coefficient, Equation, make_coefficients, make_system_of_equations, find_zero_coefficients
from .cover import greedy_cover, maxsat_cover
from .encode import encode, term_to_str
from .minimize import Minimizer, MinimizationResult, minimize
from .sources import all_position_subsets, read_assignments, read_position_subsets, to_assignment
from .export import to_equations, to_verilog, to_c_code
from .verify import verify_cover, evaluate_expression, parse_expression

__all__ = [
    "MinimizationError",
    "MalformedInputError",
    "EmptyCoverError",
    "SourceUnavailableError",
    "Coefficient",
    "Equation",
    "make_coefficients",
    "make_system_of_equations",
    "find_zero_coefficients",
    "greedy_cover",
    "maxsat_cover",
    "encode",
    "term_to_str",
    "Minimizer",
    "MinimizationResult",
    "minimize",
    "all_position_subsets",
    "read_assignments",
    "read_position_subsets",
    "to_assignment",
    "to_equations",
    "to_verilog",
    "to_c_code",
    "verify_cover",
    "evaluate_expression",
    "parse_expression",
]
__version__ = "0.1.0"

"""
Export minimization results to various formats (equations, Verilog, C).
"""

from .coefficients import Coefficient
from .encode import term_to_str
from .minimize import MinimizationResult


def to_equations(result: MinimizationResult) -> str:
    """
    Export a minimization result as a human-readable report.

    Args:
        result: The minimization result

    Returns:
        Report listing each product term and the final expression
    """
    lines = []
    lines.append("Method of Undetermined Coefficients")
    lines.append(f"Method: {result.method}")
    lines.append(f"Terms: {result.num_terms}")
    lines.append(f"Literals: {result.num_literals}")
    lines.append("")

    lines.append("Product terms:")
    for coef in result.cover:
        lines.append(f"  {coef.pattern:>9} @ {coef.positions:<9} -> {term_to_str(coef)}")
    lines.append("")

    lines.append(f"f = {result.expression}")

    return "\n".join(lines)


def to_verilog(result: MinimizationResult, module_name: str = "muc_function") -> str:
    """
    Export a minimization result to Verilog.

    Input bit x1 is the most significant bit of the assignment.
    """
    width = result.width
    lines = []
    lines.append("// Minimized by the method of undetermined coefficients")
    lines.append(f"// {result.num_terms} terms, {result.num_literals} literals using {result.method}")
    lines.append("")
    lines.append(f"module {module_name} (")
    lines.append(f"    input  wire [{width - 1}:0] x,")
    lines.append("    output wire f")
    lines.append(");")
    lines.append("")

    terms = [coef_to_verilog(coef, width) for coef in result.cover]
    lines.append(f"    assign f = {' | '.join(terms)};")
    lines.append("")
    lines.append("endmodule")

    return "\n".join(lines)


def coef_to_verilog(coef: Coefficient, width: int = None) -> str:
    """Convert a coefficient to a Verilog expression."""
    terms = []
    for bit, position in zip(coef.pattern, coef.positions):
        name = f"x{position}" if width is None else f"x[{width - int(position)}]"
        terms.append(name if bit == "1" else f"~{name}")

    if len(terms) == 1:
        return terms[0]
    return "(" + " & ".join(terms) + ")"


def to_c_code(result: MinimizationResult, func_name: str = "muc_function") -> str:
    """
    Export a minimization result as a C function of the minterm index.
    """
    width = result.width
    lines = []
    lines.append("/*")
    lines.append(" * Minimized by the method of undetermined coefficients")
    lines.append(f" * f = {result.expression}")
    lines.append(" */")
    lines.append("")
    lines.append("#include <stdint.h>")
    lines.append("")
    lines.append(f"uint8_t {func_name}(uint32_t in) {{")
    lines.append("    // Extract individual bits (x1 = MSB)")
    for position in range(1, width + 1):
        lines.append(f"    uint8_t x{position} = (in >> {width - position}) & 1;")
    lines.append("")

    terms = [coef_to_c(coef) for coef in result.cover]
    lines.append(f"    return {' | '.join(terms)};")
    lines.append("}")

    return "\n".join(lines)


def coef_to_c(coef: Coefficient) -> str:
    """Convert a coefficient to a C expression."""
    terms = [
        f"x{position}" if bit == "1" else f"!x{position}"
        for bit, position in zip(coef.pattern, coef.positions)
    ]

    if len(terms) == 1:
        return terms[0]
    return "(" + " & ".join(terms) + ")"

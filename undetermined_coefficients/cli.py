"""Command-line interface for the method of undetermined coefficients."""

import argparse
import sys

from .minimize import Minimizer
from .sources import (
    DEFAULT_WIDTH,
    all_position_subsets,
    read_assignments,
    read_position_subsets,
)
from .verify import verify_cover, print_truth_table_comparison
from .export import to_equations, to_verilog, to_c_code


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Minimize a Boolean function given by its zero and one minterms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  muc-minimize zeros.txt ones.txt                        All position subsets of 6 variables
  muc-minimize zeros.txt ones.txt --indexes lowindexes.txt
  muc-minimize zeros.txt ones.txt --width 4 --max-size 2 Terms of at most 2 literals
  muc-minimize zeros.txt ones.txt --exact                MaxSAT cover selection
  muc-minimize zeros.txt ones.txt --format verilog       Output as Verilog module
        """,
    )

    parser.add_argument("zeros", help="File of minterms where the function is 0")
    parser.add_argument("ones", help="File of minterms where the function is 1")
    parser.add_argument(
        "--indexes", "-i",
        help="File of position subsets (default: every subset of the variables)",
    )
    parser.add_argument(
        "--width", "-w",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Number of variables (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=None,
        help="Largest generated position subset (ignored with --indexes)",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Select the cover with MaxSAT instead of the greedy heuristic",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the result against both minterm files",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "equations", "verilog", "c"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    try:
        zeros = read_assignments(args.zeros, args.width)
        ones = read_assignments(args.ones, args.width)
        if args.indexes:
            position_subsets = read_position_subsets(args.indexes)
        else:
            position_subsets = all_position_subsets(args.width, args.max_size)

        if args.verbose:
            print(
                f"{len(zeros)} zeros, {len(ones)} ones, "
                f"{len(position_subsets)} position subsets",
                file=sys.stderr,
            )

        minimizer = Minimizer(zeros, ones, position_subsets, verbose=args.verbose)
        result = minimizer.solve("maxsat" if args.exact else "greedy")

        if args.format == "verilog":
            print(to_verilog(result))
        elif args.format == "c":
            print(to_c_code(result))
        elif args.format == "equations":
            print(to_equations(result))
        else:
            print(result.expression)

        if args.verify:
            correct, errors = verify_cover(result.cover, zeros, ones)
            if args.verbose:
                print_truth_table_comparison(result.expression, zeros, ones)
            if not correct:
                for err in errors:
                    print(f"  {err}", file=sys.stderr)
                return 1

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Command-line interface for nqueens.

Usage:
    nqueens <COMMAND>

Commands:
    version   Show the nqueens library version and the versions of the solver backends.
    solve     Print all solutions of the n-queens problem for a board size.
"""

import argparse
import logging
import time

from nqueens import __version__
import nqueens as nq

logger = logging.getLogger(__name__)


def non_negative_int(value):
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'")
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {n}")
    return n


def command_version(args):
    print(f"nqueens version: {__version__}")
    nq.SolverLookup().print_version()

def command_solve(args):
    start = time.time()
    solutions = nq.solve(args.n, solver=args.solver)
    logger.debug(f"Found {len(solutions)} solutions for n={args.n} in {time.time() - start:.3f}s")

    if args.count:
        print(len(solutions))
        return

    if args.limit is not None:
        solutions = solutions[:args.limit]
    for sol in solutions:
        if args.render:
            print(nq.to_string(nq.render(args.n, sol)))
        else:
            print(sol)

def main(argv=None):
    parser = argparse.ArgumentParser(description="nqueens command line interface")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # nqueens version
    version_parser = subparsers.add_parser("version", help="Show version information on nqueens and its solver backends")
    version_parser.set_defaults(func=command_version)

    # nqueens solve N
    solve_parser = subparsers.add_parser("solve", help="Print all solutions for an n x n board")
    solve_parser.add_argument("n", type=non_negative_int, help="Size of the board")
    solve_parser.add_argument("--solver", required=False, type=str, default=None,
                              choices=[name for (name, _) in nq.SolverLookup.base_solvers()],
                              help="Solver backend to use (default: backtrack)")
    solve_parser.add_argument("--count", action="store_true", help="Only print the number of solutions")
    solve_parser.add_argument("--render", action="store_true", help="Print every solution as a board")
    solve_parser.add_argument("--limit", required=False, type=non_negative_int, default=None,
                              help="Print at most this many solutions")
    solve_parser.set_defaults(func=command_solve)

    args = parser.parse_args(argv)
    logging.basicConfig(format='%(levelname)s: %(message)s')
    # level of the package loggers only, the root level is left alone
    logging.getLogger("nqueens").setLevel(logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)

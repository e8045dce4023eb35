"""
    The `solve` entry point: all distinct solutions of the n-queens problem.

    The search is exponential in `n`; boards above `LARGE_BOARD` emit a warning.
"""
import warnings

from .solvers.utils import SolverLookup
from .utils import check_board_size

LARGE_BOARD = 13


def solve(n, solver=None, **kwargs):
    """
        Compute every distinct placement of `n` non-attacking queens on an `n` x `n` board.

        Each placement is a list of `Position` (x, y) pairs sorted on (x, y),
        no two placements are equal as sets.
        `solve(0)` returns ``[[]]``, `solve(2)` and `solve(3)` return ``[]``.

        Arguments:
            - n: size of the board, a non-negative integer
            - solver: name of the solver backend (default: None, the backtracking search)
            - kwargs: passed on to the backend constructor

        Raises `InvalidArgumentError` if `n` is negative or not an integer.
    """
    n = check_board_size(n)
    if n > LARGE_BOARD:
        warnings.warn(f"Enumerating all solutions for n={n} can take a very long time")
    return SolverLookup.get(solver, n, **kwargs).solutions()

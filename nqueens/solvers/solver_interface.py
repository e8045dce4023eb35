"""
    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        SolverInterface

    =================
    List of functions
    =================

    .. autosummary::
        :nosignatures:

        canonicalize

    ==================
    Module description
    ==================
    Contains the abstract class `SolverInterface` for defining solver backends.

    Each backend has its own class that inherits from `SolverInterface` and
    implements `_search()`, the raw enumeration of placements. The interface
    takes care of the post-processing that all backends share: dropping
    empty dead-branch results, canonicalizing every placement by sorting its
    positions, and removing placements that are equal as sets.
"""
from ..board import Position
from ..utils import check_board_size


def canonicalize(n, placements):
    """
        Sort the positions of each placement and drop duplicate placements

        Entries that do not hold exactly `n` positions are dead branches and
        dropped; on the 0-size board the empty placement is the one solution.
        The order of first occurrence is preserved.
    """
    result = []
    seen = set()
    for placement in placements:
        canonical = sorted(Position(*pos) for pos in placement)
        if len(canonical) != n:
            continue
        key = tuple(canonical)
        if key not in seen:
            seen.add(key)
            result.append(canonical)
    return result


class SolverInterface(object):
    """
        Abstract class for defining solver backends.
    """

    # REQUIRED functions:

    @staticmethod
    def supported():
        """
            Check for support in current system setup. Return True if the system
            has the package installed, else returns False.

        Returns:
            [bool]: Solver support by current system setup.
        """
        return False

    @staticmethod
    def version():
        """
            Returns the installed version of the backend's Python library, if any.
        """
        return None

    def __init__(self, n, name="dummy"):
        """
            Initalize solver interface

            - n: int, size of the board
            - name: str, name of this solver
        """
        self.n = check_board_size(n)
        self.name = name
        self._solutions = None

    def _search(self):
        """
            Yield placements (iterables of (x, y) pairs) found by the backend.

            May yield the same placement more than once and in any position order.
        """
        raise NotImplementedError("Solver does not implement _search()")

    # OPTIONAL functions

    def solutions(self):
        """
            All distinct solutions, each a list of `Position` sorted on (x, y).

            Computed once, later calls return a copy of the cached result.
        """
        if self._solutions is None:
            self._solutions = canonicalize(self.n, self._search())
        return [list(sol) for sol in self._solutions]

    def solveAll(self, display=None, solution_limit=None):
        """
            Compute all solutions and optionally display them.

            Arguments:
                - display: callback function, called with each placement
                        default/None: nothing displayed
                - solution_limit: stop after this many solutions (default: None)

            Returns: number of solutions found
        """
        count = 0
        for sol in self.solutions():
            if solution_limit is not None and count >= solution_limit:
                break
            if display is not None:
                display(sol)
            count += 1
        return count

    def __repr__(self):
        return f"{type(self).__name__}(n={self.n})"

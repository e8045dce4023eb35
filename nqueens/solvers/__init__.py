"""
    Solver backends for the n-queens problem.

    Every backend class inherits from `SolverInterface` and returns the same
    canonical solution set; use `SolverLookup` to get one by name.

    ==================
    List of submodules
    ==================

    .. autosummary::
        :nosignatures:

        solver_interface
        backtrack
        ortools
        utils

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        utils.SolverLookup
"""

from .utils import SolverLookup
from .backtrack import NQ_backtrack
from .ortools import NQ_ortools

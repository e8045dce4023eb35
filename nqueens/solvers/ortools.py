#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## ortools.py
##
"""
    Interface to ortools' CP-SAT Python API

    Google OR-Tools is open source software for combinatorial optimization.
    Its CP-SAT solver can enumerate all solutions of a constraint model, which
    gives an independent way of computing the n-queens solutions.

    The model uses one integer variable per row holding the column of the
    queen on that row, with three AllDifferent constraints: on the columns,
    and on the column plus/minus the row (the two diagonal directions).

    Documentation of the solver's own Python API:
    https://google.github.io/or-tools/python/ortools/sat/python/cp_model.html

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        NQ_ortools
"""
from importlib.metadata import version as _dist_version, PackageNotFoundError

from .solver_interface import SolverInterface
from ..board import Position
from ..exceptions import NotSupportedError, IncompleteSearchError


class NQ_ortools(SolverInterface):
    """
    Interface to the python 'ortools' CP-SAT API

    Requires that the 'ortools' python package is installed:
    $ pip install ortools

    Creates the following attributes (see parent constructor for more):
    ort_model: the ortools.sat.python.cp_model.CpModel() with the queens model
    ort_solver: the ortools cp_model.CpSolver() instance used for enumeration
    queens: list of CP-SAT integer variables, the column of the queen on each row

    Keyword arguments are set as parameters of the CP-SAT solver, see its
    'sat_parameters.proto' description:
    https://github.com/google/or-tools/blob/stable/ortools/sat/sat_parameters.proto
    for example `NQ_ortools(8, max_time_in_seconds=10)`
    """

    @staticmethod
    def supported():
        # try to import the package
        try:
            import ortools
            return True
        except ImportError:
            return False

    @staticmethod
    def version():
        try:
            return _dist_version("ortools")
        except PackageNotFoundError:
            return None

    def __init__(self, n, name="ortools", **kwargs):
        if not self.supported():
            raise NotSupportedError("Install the python 'ortools' package to use this solver interface")

        from ortools.sat.python import cp_model as ort

        super().__init__(n, name=name)

        self.ort_model = ort.CpModel()
        self.ort_solver = ort.CpSolver()

        n = self.n
        self.queens = [self.ort_model.new_int_var(0, n - 1, f"queen[{y}]") for y in range(n)]
        if n > 0:
            self.ort_model.add_all_different(self.queens)
            self.ort_model.add_all_different([self.queens[y] + y for y in range(n)])
            self.ort_model.add_all_different([self.queens[y] - y for y in range(n)])

        # report every solution to the callback, not only the first
        self.ort_solver.parameters.enumerate_all_solutions = True
        # set additional keyword arguments in sat_parameters.proto
        for (kw, val) in kwargs.items():
            setattr(self.ort_solver.parameters, kw, val)

    def _search(self):
        from ortools.sat.python import cp_model as ort

        if self.n == 0:
            # nothing to decide, the empty placement is the one solution
            return [[]]

        cb = OrtPlacementCollector(self.queens)
        status = self.ort_solver.solve(self.ort_model, cb)

        # translate exit status, only a finished enumeration is a valid answer
        if status in (ort.OPTIMAL, ort.INFEASIBLE):
            return cb.placements
        elif status == ort.MODEL_INVALID:
            raise Exception("OR-Tools says: model invalid:", self.ort_model.validate())
        elif status in (ort.FEASIBLE, ort.UNKNOWN):
            # can happen when a time limit is reached...
            raise IncompleteSearchError(f"OR-Tools stopped after {len(cb.placements)} solutions "
                                        f"for n={self.n} without completing the enumeration")
        else:  # another?
            raise NotImplementedError(status)  # a new status type was introduced


# solvers are optional, so this file should be interpretable
# even if ortools is not installed...
try:
    from ortools.sat.python import cp_model as ort

    class OrtPlacementCollector(ort.CpSolverSolutionCallback):
        """
            Native or-tools callback that stores every solution as a placement.

            Arguments:
                - queens: the row variables of the model, in row order
        """

        def __init__(self, queens):
            super().__init__()
            self._queens = queens
            self.placements = []

        def on_solution_callback(self):
            """Called on each new solution."""
            self.placements.append([Position(self.value(q), y) for y, q in enumerate(self._queens)])

except ImportError:
    pass  # Ok, no ortools installed...

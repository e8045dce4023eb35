"""
    nqueens computes all distinct solutions of the n-queens puzzle and renders them as grids.

    The package consists of 4 modules:
    - `solver`: `solve(n)`, every placement of n non-attacking queens on an n x n board
    - `display`: `render(n, placement)`, a placement as a grid of markers, and `to_string` for printing
    - `board`: the `Position` type and the attack-blocking rule of queens
    - `solvers`: the backends that enumerate placements, looked up by name through `SolverLookup`
"""

__version__ = "0.2.0"


from .board import Position
from .display import render, to_string
from .solver import solve
from .solvers.utils import SolverLookup

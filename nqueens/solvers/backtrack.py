#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## backtrack.py
##
"""
    Pure Python backtracking search, the default backend.

    Queens are placed one per row, in row order. The candidates for the next
    row are the cells of that row not blocked by any queen placed so far
    (see `nqueens.board.possible_positions`). A branch that reaches `n`
    queens is a solution; a branch without candidates is a dead end and
    contributes nothing.

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        NQ_backtrack
"""
from .solver_interface import SolverInterface
from ..board import possible_positions


class NQ_backtrack(SolverInterface):
    """
    Row-by-row backtracking over unblocked cells.

    Needs no external package, hence always supported.
    """

    @staticmethod
    def supported():
        return True

    def __init__(self, n, name="backtrack"):
        super().__init__(n, name=name)

    def _search(self):
        return self._branch(())

    def _branch(self, placed):
        """
            Recursively extend the partial placement `placed` (a tuple, never mutated)
        """
        if len(placed) == self.n:
            yield placed
            return
        for pos in possible_positions(self.n, placed, row=len(placed)):
            yield from self._branch(placed + (pos,))

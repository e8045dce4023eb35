#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## board.py
##
"""
    Positions on the board and the attack-blocking rule of queens.

    A `Position` is an (x, y) = (column, row) pair. All functions that enumerate
    cells of the board do so in row-major order (row `y` outer, column `x` inner)
    and return lists without duplicates.

    A queen at (x, y) blocks every cell on its row, its column, and both of its
    diagonals (all (x', y') with |x - x'| == |y - y'|).

    =================
    List of functions
    =================

    .. autosummary::
        :nosignatures:

        all_positions
        row_for
        column_for
        diagonal_for
        blocked_positions_for_position
        blocked_positions
        possible_positions
        attacks
        is_solution
"""
from typing import NamedTuple, List, Iterable


class Position(NamedTuple):
    """
        A cell of the board, `x` is the column and `y` the row.

        Being a tuple, ``Position(1, 2) == (1, 2)`` holds and positions sort on (x, y).
    """
    x: int
    y: int

    def __repr__(self):
        return f"({self.x}, {self.y})"


def all_positions(n) -> List[Position]:
    """ every cell of an `n`-size board """
    return [Position(x, y) for y in range(n) for x in range(n)]


def row_for(n, pos) -> List[Position]:
    _, y = pos
    return [Position(x, y) for x in range(n)]


def column_for(n, pos) -> List[Position]:
    x, _ = pos
    return [Position(x, y) for y in range(n)]


def diagonal_for(n, pos) -> List[Position]:
    """ both diagonals through `pos`, including `pos` itself """
    x, y = pos
    return [p for p in all_positions(n) if abs(x - p.x) == abs(y - p.y)]


def _unique(positions: Iterable[Position]) -> List[Position]:
    # dict keeps first-seen order
    return list(dict.fromkeys(positions))


def blocked_positions_for_position(n, pos) -> List[Position]:
    """
        All cells that a queen placed on `pos` blocks for future placement
    """
    return _unique(row_for(n, pos) + column_for(n, pos) + diagonal_for(n, pos))


def blocked_positions(n, placed) -> List[Position]:
    """
        Union of the cells blocked by all queens in `placed`
    """
    blocked = []
    for pos in placed:
        blocked.extend(blocked_positions_for_position(n, pos))
    return _unique(blocked)


def possible_positions(n, placed=(), row=None) -> List[Position]:
    """
        The cells that are not blocked by any of the queens in `placed`

        - row: if given, only return candidates on that row
    """
    blocked = set(blocked_positions(n, placed))
    if row is None:
        cells = all_positions(n)
    else:
        cells = row_for(n, (0, row))
    return [p for p in cells if p not in blocked]


def attacks(a, b) -> bool:
    """ do queens on `a` and `b` attack each other? (a cell attacks itself) """
    (ax, ay), (bx, by) = a, b
    return ax == bx or ay == by or abs(ax - bx) == abs(ay - by)


def is_solution(n, placement) -> bool:
    """
        Is `placement` a full solution of the `n`-queens problem?

        That is: exactly `n` positions on the board, pairwise non-attacking.
    """
    placement = list(placement)
    if len(placement) != n:
        return False
    if any(not (0 <= x < n and 0 <= y < n) for (x, y) in placement):
        return False
    for i, a in enumerate(placement):
        for b in placement[i+1:]:
            if attacks(a, b):
                return False
    return True

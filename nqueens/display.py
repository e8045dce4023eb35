"""
    Rendering placements for display

    =================
    List of functions
    =================

    .. autosummary::
        :nosignatures:

        render
        to_string
"""
import numpy as np

from .utils import check_board_size, check_position

QUEEN = "Q"
EMPTY = "0"


def render(n, placement, queen=QUEEN, empty=EMPTY):
    """
        Project a placement on an `n` x `n` grid of markers.

        Row `y`, column `x` of the grid holds `queen` if (x, y) is in the
        placement, `empty` otherwise. The placement does not have to be a
        solution, partial placements render just as well.

        Returns a list of rows, each a list of markers (``[]`` for n=0).
    """
    n = check_board_size(n)
    grid = np.full((n, n), empty, dtype=object)
    for pos in placement:
        x, y = check_position(n, pos)
        grid[y, x] = queen
    return grid.tolist()


def to_string(board, queen=QUEEN):
    """
        Pretty print a rendered board as a boxed grid, e.g.:

        +---+---+
        | Q |   |
        +---+---+

        Cells holding `queen` show a Q, all other cells are left blank.
    """
    board = np.asarray(board, dtype=object)
    if board.size == 0:
        return ""
    queens = board == queen
    line = '+---'*board.shape[1]+'+\n'
    out = line
    for row in queens:
        out += ''.join('| Q ' if q else '|   ' for q in row)+'|\n'
        out += line
    return out

#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## utils.py
##
"""
Internal utilities for argument checking.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        is_int
        check_board_size
        check_position
"""

import numpy as np

from .exceptions import InvalidArgumentError


def is_int(arg):
    """ can it be interpreted as an integer? (incl numpy variants, excl bool)
    """
    if isinstance(arg, (bool, np.bool_)):
        return False
    return isinstance(arg, (int, np.integer))


def check_board_size(n):
    """
        Check that `n` is a valid board size and return it as a plain int

        Raises `InvalidArgumentError` on negative or non-integer input.
    """
    if not is_int(n):
        raise InvalidArgumentError(f"Board size must be an integer, got {n!r} of type {type(n).__name__}")
    if n < 0:
        raise InvalidArgumentError(f"Board size must be non-negative, got {n}")
    return int(n)


def check_position(n, pos):
    """
        Check that `pos` is an (x, y) pair of integers on an `n`-size board
    """
    try:
        x, y = pos
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Position must be an (x, y) pair, got {pos!r}")
    if not (is_int(x) and is_int(y)):
        raise InvalidArgumentError(f"Position coordinates must be integers, got {pos!r}")
    if not (0 <= x < n and 0 <= y < n):
        raise InvalidArgumentError(f"Position {pos!r} is outside of the {n}x{n} board")
    return int(x), int(y)

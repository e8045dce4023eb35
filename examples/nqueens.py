#!/usr/bin/python3
"""
N-queens problem, all solutions

Problem description from the numberjack example:
The N-Queens problem is the problem of placing N queens on an N x N chess
board such that no two queens are attacking each other. A queen is attacking
another if it they are on the same row, same column, or same diagonal.
"""

# load the libraries
import sys
import nqueens as nq

def nqueens_solve(N, prettyprint=True):
    solutions = nq.solve(N)

    if solutions:
        print(f"{len(solutions)} solutions")

        if prettyprint:
            # pretty print the first one
            print(nq.to_string(nq.render(N, solutions[0])))
    else:
        print("No solution found")

if __name__ == "__main__":
    N = int(sys.argv[1]) if len(sys.argv) > 1 else 8
    nqueens_solve(N)

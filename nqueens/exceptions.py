'''
Custom exception classes, for finer grained error handling
'''


class NQueensException(Exception):
    '''Parent class for all our exceptions'''
    pass


class InvalidArgumentError(NQueensException, ValueError):
    '''Raised when a board size is not a non-negative integer, or a position lies outside of the board'''
    pass


class NotSupportedError(NQueensException):
    '''Raised when a solver backend is not available on this system'''
    pass

class IncompleteSearchError(NQueensException):
    '''Raised when a solver stops before all solutions are enumerated (e.g. a time limit is reached)'''
    pass

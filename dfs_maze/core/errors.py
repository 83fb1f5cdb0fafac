class InvalidSizeError(ValueError):
    """Grid size is not a positive integer."""


class UnreachableExitError(RuntimeError):
    """
    Raised when the solver exhausts its stack without reaching the exit.
    A carved spanning tree always connects entry and exit, so this means
    the grid was not fully generated.
    """

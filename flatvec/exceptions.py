"""Exception hierarchy for flatvec.

Degenerate numeric inputs (mismatched dimensions, zero vectors, empty
stores) never raise. Exceptions are reserved for caller contract
violations.
"""


class FlatvecError(Exception):
    """Base exception for all flatvec errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidTopKError(FlatvecError, ValueError):
    """Raised when a query asks for a negative number of results."""

    def __init__(self, top_k: int) -> None:
        self.top_k = top_k
        super().__init__(f"top_k must be >= 0, got {top_k}")

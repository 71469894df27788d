class GestureError(Exception):
    """Base class for recoverable gesture-engine errors."""


class InvalidInputError(GestureError, ValueError):
    """Raised for empty gesture names, malformed hand poses or unknown modes."""


class DimensionMismatchError(GestureError, ValueError):
    """Raised when two feature vectors of different lengths are compared."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Feature length mismatch: {expected} != {actual}")
        self.expected = expected
        self.actual = actual

"""Exception types raised while recovering a polynomial constant."""


class PolySecretError(Exception):
    """Base class for every error raised by polysecret."""


class InputReadError(PolySecretError, ValueError):
    """An input document could not be read or is not valid JSON."""


class MalformedInputError(PolySecretError, ValueError):
    """An input document has the wrong shape or an undecodable value."""


class InsufficientPointsError(PolySecretError, ValueError):
    """Fewer decoded points than the k needed for interpolation."""

    def __init__(self, available: int, required: int):
        super().__init__(
            f"Insufficient points for interpolation: have {available}, need {required}")
        self.available = available
        self.required = required


class SingularMatrixError(PolySecretError, ValueError):
    """A pivot fell below the epsilon threshold during inversion."""

    def __init__(self, row: int, pivot: float, epsilon: float):
        super().__init__(
            f"Matrix is singular: pivot {pivot!r} at row {row} is below {epsilon!r}")
        self.row = row
        self.pivot = pivot
        self.epsilon = epsilon


class DimensionMismatchError(PolySecretError, RuntimeError):
    """Operand shapes do not agree. Indicates a defect upstream."""


class NumericRangeError(PolySecretError, ValueError):
    """A value is too large for floating-point arithmetic, or a result is not finite."""

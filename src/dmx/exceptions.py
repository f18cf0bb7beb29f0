"""
Exception hierarchy for dmx.

Every error raised by the library derives from MatrixError so callers can
catch the whole family at once. Shape problems carry the offending shapes
as attributes.
"""


class MatrixError(Exception):
    """Base exception for all dmx errors."""
    pass


class ValidationError(MatrixError, ValueError):
    """
    Input validation failed.

    Raised when constructor arguments or input data are unusable.
    """
    pass


class DimensionError(ValidationError):
    """
    Input data has the wrong number of dimensions or is not rectangular.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Two matrices have incompatible shapes for an operation.

    Attributes:
        operation: Name of the operation that was attempted
        left: Shape of the left operand
        right: Shape of the right operand
    """

    def __init__(self, message, operation=None, left=None, right=None):
        super().__init__(message)
        self.operation = operation
        self.left = left
        self.right = right


class StateShapeError(DimensionError):
    """
    A replacement grid does not fit the matrix.

    Attributes:
        expected: Shape of the matrix being updated
        actual: Shape of the supplied grid, None when it is not rectangular
    """

    def __init__(self, message, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual

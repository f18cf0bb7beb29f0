from .exceptions import DimensionError, ValidationError
from .matrix import Matrix


def zeros(rows, cols, dtype=float):
    """Matrix filled with zeros"""
    return Matrix(rows, cols, dtype(), dtype=dtype)


def ones(rows, cols, dtype=float):
    """Matrix filled with ones"""
    return Matrix(rows, cols, dtype(1), dtype=dtype)


def full(rows, cols, value):
    """Matrix filled with `value`"""
    return Matrix(rows, cols, value)


def eye(n, dtype=float):
    """Identity matrix"""
    result = Matrix(n, n, dtype(), dtype=dtype)
    result.set_state(
        [[dtype(1) if i == j else dtype() for j in range(result.cols)] for i in range(result.rows)]
    )
    return result


def from_list(data, dtype=None):
    """
    Create a matrix from a rectangular nested Python list.

    Args:
        data: list of rows; an empty list gives a 0x0 matrix
        dtype: element type; defaults to the type of the first element,
            or float for an empty matrix
    """
    rows = [list(row) for row in data]
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise DimensionError(f"rows have different lengths: {sorted(widths)}")
    n_cols = widths.pop() if widths else 0
    if dtype is None:
        dtype = type(rows[0][0]) if n_cols else float
    if not rows:
        return Matrix(0, 0, dtype(), dtype=dtype)
    result = Matrix(len(rows), n_cols, dtype(), dtype=dtype)
    result.set_state(rows)
    return result


def from_numpy(array):
    """Create a matrix from a 2-D numpy array"""
    import numpy as np
    if not isinstance(array, np.ndarray):
        raise ValidationError(f"expected numpy.ndarray, got {type(array).__name__}")
    if array.ndim != 2:
        raise DimensionError(f"expected 2D array, got {array.ndim}D with shape {array.shape}")
    n_rows, n_cols = array.shape
    data = array.tolist()
    dtype = type(data[0][0]) if n_rows and n_cols else type(array.dtype.type(0).item())
    result = Matrix(n_rows, n_cols, dtype(), dtype=dtype)
    if n_rows:
        result.set_state(data)
    return result


def array(data):
    """Convert Python list or NumPy array to dmx.Matrix"""
    import numpy as np
    if isinstance(data, np.ndarray):
        return from_numpy(data)
    return from_list(data)


def transpose(input):
    """Transpose of a matrix"""
    return input.transpose()


def matmul(input, other):
    """Matrix product"""
    return input.matmul(other)


def tensor(input, other):
    """Kronecker product"""
    return input.tensor(other)


kron = tensor

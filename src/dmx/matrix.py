# src/dmx/matrix.py
"""
Dense two-dimensional matrix over any numeric element type.

Storage is row-major: a list of `rows` lists, each holding `cols` elements.
Elements only need the arithmetic the called operation uses (`+` for add,
`-` for sub, `*` for scaling, matmul and tensor), so ints, floats,
complex numbers, Fractions, Decimals and numpy scalars all work.
"""
import copy
import logging
import operator
from functools import reduce

from .exceptions import ShapeMismatchError, StateShapeError, ValidationError

logger = logging.getLogger(__name__)


def _dimension(value, name):
    try:
        value = operator.index(value)
    except TypeError:
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}") from None
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def _result_dtype(data, fallback):
    # Mixed operands (int matrix scaled by a complex) take the type of the result.
    if data and data[0]:
        return type(data[0][0])
    return fallback


class Matrix:
    """Dense matrix with row-major nested list storage"""

    # Let numpy scalars defer to Matrix.__rmul__ instead of broadcasting.
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, rows, cols, initial, dtype=None):
        """
        Create a new matrix with every cell set to `initial`.

        Args:
            rows: number of rows
            cols: number of columns
            initial: fill value, copied into each cell
            dtype: element type; defaults to type(initial). Calling it with
                no arguments must give the zero value (int() == 0).
        """
        self._rows = _dimension(rows, 'rows')
        self._cols = _dimension(cols, 'cols')
        self._dtype = dtype if dtype is not None else type(initial)
        self._data = [[copy.copy(initial) for _ in range(self._cols)] for _ in range(self._rows)]

    @classmethod
    def new(cls, rows, cols, initial):
        """Alias of the constructor"""
        return cls(rows, cols, initial)

    @classmethod
    def _from_rows(cls, data, rows, cols, dtype):
        """Internal: wrap freshly built row lists without copying"""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._dtype = dtype
        obj._data = data
        return obj

    # Shape and state

    @property
    def rows(self):
        """Number of rows"""
        return self._rows

    @property
    def cols(self):
        """Number of columns"""
        return self._cols

    @property
    def shape(self):
        """(rows, cols)"""
        return (self._rows, self._cols)

    @property
    def dtype(self):
        """Element type"""
        return self._dtype

    @property
    def size(self):
        """Total number of elements"""
        return self._rows * self._cols

    def get_row(self):
        return self._rows

    def get_col(self):
        return self._cols

    def get_state(self):
        """Read-only view of the grid as a tuple of row tuples"""
        return tuple(tuple(row) for row in self._data)

    def tolist(self):
        """Copy of the grid as nested Python lists"""
        return [list(row) for row in self._data]

    def to_numpy(self, dtype=None):
        """Convert to a 2-D numpy array"""
        import numpy as np
        return np.array(self.tolist(), dtype=dtype).reshape(self._rows, self._cols)

    def set_state(self, state):
        """
        Replace the contents with `state`, keeping the shape.

        `state` is any iterable of rows. It must be rectangular and have
        exactly this matrix's shape; the rows are copied.

        Raises:
            StateShapeError: if the rows differ in length, or if the grid
                shape is not (rows, cols)
        """
        data = [list(row) for row in state]
        widths = {len(row) for row in data}
        if len(widths) > 1:
            raise StateShapeError(
                "state size differs from declared dimensions",
                expected=self.shape,
                actual=None,
            )
        actual = (len(data), widths.pop() if widths else 0)
        if actual[0] != self._rows or (data and actual[1] != self._cols):
            raise StateShapeError(
                "declared dimensions differ from the matrix dimensions",
                expected=self.shape,
                actual=actual,
            )
        logger.debug("set_state on %s matrix", self.shape)
        self._data = data

    def clear(self):
        """Reset every element to the zero value in place"""
        self._data = [[self._dtype() for _ in range(self._cols)] for _ in range(self._rows)]

    def zero(self):
        """New matrix of the same shape filled with the zero value"""
        return Matrix(self._rows, self._cols, self._dtype(), dtype=self._dtype)

    def copy(self):
        """Independent copy with equal contents"""
        return Matrix._from_rows(self.tolist(), self._rows, self._cols, self._dtype)

    __copy__ = copy

    # Arithmetic

    def _check_operand(self, other, message):
        if not isinstance(other, Matrix):
            raise TypeError(message)

    def _check_same_shape(self, other, operation):
        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"{operation}: shapes {self.shape} and {other.shape} differ",
                operation=operation,
                left=self.shape,
                right=other.shape,
            )

    def _elementwise(self, other, op):
        data = [[op(a, b) for a, b in zip(left, right)] for left, right in zip(self._data, other._data)]
        return Matrix._from_rows(data, self._rows, self._cols, _result_dtype(data, self._dtype))

    def add(self, rhs):
        """Element-wise addition; shapes must match"""
        self._check_operand(rhs, "Can only add Matrix to Matrix")
        self._check_same_shape(rhs, 'add')
        return self._elementwise(rhs, operator.add)

    def sub(self, rhs):
        """Element-wise subtraction; shapes must match"""
        self._check_operand(rhs, "Can only subtract Matrix from Matrix")
        self._check_same_shape(rhs, 'sub')
        return self._elementwise(rhs, operator.sub)

    def scale(self, scalar):
        """Multiply every element by `scalar` (element * scalar)"""
        data = [[value * scalar for value in row] for row in self._data]
        return Matrix._from_rows(data, self._rows, self._cols, _result_dtype(data, self._dtype))

    def matmul(self, rhs):
        """
        Matrix product: result[i, k] = sum over j of self[i, j] * rhs[j, k].

        Requires self.cols == rhs.rows; the result has shape
        (self.rows, rhs.cols).
        """
        self._check_operand(rhs, "Can only matmul Matrix with Matrix")
        if self._cols != rhs._rows:
            raise ShapeMismatchError(
                f"matmul: shapes {self.shape} and {rhs.shape} not aligned "
                f"({self._cols} != {rhs._rows})",
                operation='matmul',
                left=self.shape,
                right=rhs.shape,
            )
        logger.debug("matmul %s @ %s", self.shape, rhs.shape)
        if self._cols == 0:
            return Matrix(self._rows, rhs._cols, self._dtype(), dtype=self._dtype)
        columns = [[row[k] for row in rhs._data] for k in range(rhs._cols)]
        data = [
            [reduce(operator.add, map(operator.mul, row, column)) for column in columns]
            for row in self._data
        ]
        return Matrix._from_rows(data, self._rows, rhs._cols, _result_dtype(data, self._dtype))

    def mul(self, rhs):
        """Matrix product when `rhs` is a Matrix, scalar multiplication otherwise"""
        if isinstance(rhs, Matrix):
            return self.matmul(rhs)
        return self.scale(rhs)

    def tensor(self, rhs):
        """
        Kronecker product.

        For self of shape (r1, c1) and rhs of shape (r2, c2) the result has
        shape (r1*r2, c1*c2) and result[i*r2 + k, j*c2 + l] equals
        self[i, j] * rhs[k, l].
        """
        self._check_operand(rhs, "Can only take the tensor product of Matrix with Matrix")
        logger.debug("tensor %s x %s", self.shape, rhs.shape)
        data = [
            [a * b for a in left for b in right]
            for left in self._data
            for right in rhs._data
        ]
        return Matrix._from_rows(
            data,
            self._rows * rhs._rows,
            self._cols * rhs._cols,
            _result_dtype(data, self._dtype),
        )

    kron = tensor

    def transpose(self):
        """New matrix with rows and columns swapped"""
        data = [[row[j] for row in self._data] for j in range(self._cols)]
        return Matrix._from_rows(data, self._cols, self._rows, self._dtype)

    @property
    def T(self):
        """Transpose"""
        return self.transpose()

    # Operators

    def __add__(self, other):
        """Element-wise addition"""
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Element-wise subtraction"""
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        """Scalar multiplication (Matrix * scalar)"""
        if isinstance(other, Matrix):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other):
        """Reverse multiplication (scalar * Matrix)"""
        if isinstance(other, Matrix):
            return NotImplemented
        data = [[other * value for value in row] for row in self._data]
        return Matrix._from_rows(data, self._rows, self._cols, _result_dtype(data, self._dtype))

    def __matmul__(self, other):
        """Matrix multiplication using @ operator"""
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    # Container protocol

    def __getitem__(self, index):
        """
        m[i, j] returns an element, m[i] returns row i as a tuple.

        Both parts of m[i, j] must be integers; use transpose() or tolist()
        for columns.
        """
        if isinstance(index, tuple):
            i, j = (operator.index(part) for part in index)
            return self._data[i][j]
        if isinstance(index, slice):
            return tuple(tuple(row) for row in self._data[index])
        return tuple(self._data[index])

    def __iter__(self):
        return (tuple(row) for row in self._data)

    def __len__(self):
        return self._rows

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __str__(self):
        lines = ['[' + ', '.join(str(value) for value in row) + ']' for row in self._data]
        return '[' + ',\n '.join(lines) + ']'

    def __repr__(self):
        return f"Matrix(shape={self.shape}, dtype={self._dtype.__name__})\n{self}"

"""Dense float matrices as lists of rows.

Just enough linear algebra to fit a polynomial through k points: the
Vandermonde system, Gauss-Jordan inversion and a matrix-vector product.
Coefficient vectors are highest degree first, so index k-1 is the
constant term.
"""

from polysecret.errors import DimensionMismatchError, NumericRangeError, SingularMatrixError

DEFAULT_PIVOT_EPSILON = 1e-9


def identity(size: int) -> list:
    """size x size identity matrix."""
    return [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]


def vandermonde(xs: list) -> list:
    """Build the Vandermonde matrix for xs, highest power first.

    Row i is [x_i^(k-1), x_i^(k-2), ..., x_i, 1] where k = len(xs).
    Repeated x-values make the matrix singular; invert() reports that.

    Raises:
        NumericRangeError: a power of some x does not fit in a float.
    """
    k = len(xs)
    try:
        return [[float(x) ** (k - 1 - j) for j in range(k)] for x in xs]
    except OverflowError as e:
        raise NumericRangeError(f"x-values too large for floating point: {e}") from e


def invert(matrix: list, epsilon: float = DEFAULT_PIVOT_EPSILON) -> list:
    """Invert a square matrix by Gauss-Jordan elimination on [M | I].

    Pivots are taken strictly in diagonal order with no row exchanges, so a
    zero pivot is an error even when a reordering would have worked.

    Args:
        matrix: k x k list of rows. Not modified.
        epsilon: Smallest pivot magnitude accepted.

    Returns:
        The k x k inverse.

    Raises:
        DimensionMismatchError: matrix is not square.
        SingularMatrixError: a pivot's magnitude is below epsilon.
    """
    size = len(matrix)
    for row in matrix:
        if len(row) != size:
            raise DimensionMismatchError(
                f"Cannot invert non-square matrix: row of length {len(row)} in {size} rows")

    eye = identity(size)
    augmented = [[float(v) for v in row] + eye[i] for i, row in enumerate(matrix)]
    width = 2 * size

    for i in range(size):
        pivot = augmented[i][i]
        if abs(pivot) < epsilon:
            raise SingularMatrixError(i, pivot, epsilon)
        pivot_row = augmented[i]
        for j in range(width):
            pivot_row[j] /= pivot
        for r in range(size):
            if r == i:
                continue
            factor = augmented[r][i]
            if factor == 0.0:
                continue
            row = augmented[r]
            for j in range(width):
                row[j] -= factor * pivot_row[j]

    return [row[size:] for row in augmented]


def multiply(matrix: list, vector: list) -> list:
    """Matrix-vector product: out[i] = sum_j matrix[i][j] * vector[j]."""
    n = len(vector)
    out = []
    for i, row in enumerate(matrix):
        if len(row) != n:
            raise DimensionMismatchError(
                f"Row {i} has length {len(row)}, vector has length {n}")
        try:
            out.append(sum(a * b for a, b in zip(row, vector)))
        except OverflowError as e:
            raise NumericRangeError(f"Vector value too large for floating point: {e}") from e
    return out


def poly_eval(coeffs: list, x: float) -> float:
    """Evaluate polynomial at x using Horner's method.

    coeffs = [a_d, a_{d-1}, ..., a_1, a_0] (highest degree first).
    """
    result = 0
    for c in coeffs:
        result = result * x + c
    return result

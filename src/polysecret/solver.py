"""Recover the constant term of the polynomial through the first k points.

The k points fix a unique polynomial of degree k-1. Its coefficients are
found by inverting the Vandermonde matrix of the x-values and applying the
inverse to the y-values; the last coefficient is the constant.
"""

import logging
import math

from polysecret.codec import InputDocument, PointRecord, decode_points
from polysecret.errors import InsufficientPointsError, NumericRangeError
from polysecret.matrix import DEFAULT_PIVOT_EPSILON, invert, multiply, vandermonde

logger = logging.getLogger(__name__)


def interpolate(points: list, epsilon: float = DEFAULT_PIVOT_EPSILON) -> list:
    """Coefficients of the polynomial through every given point.

    Args:
        points: PointRecords (or (x, y) pairs); all of them are used.
        epsilon: Smallest pivot magnitude accepted during inversion.

    Returns:
        Float coefficients, highest degree first.
    """
    pairs = [(p.x, p.y) if isinstance(p, PointRecord) else p for p in points]
    xs = [x for x, _ in pairs]
    ys = [y for _, y in pairs]
    inverse = invert(vandermonde(xs), epsilon)
    return multiply(inverse, ys)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    if not math.isfinite(value):
        raise NumericRangeError(f"Cannot round non-finite coefficient {value!r}")
    return math.floor(value + 0.5)


def find_constant(document: InputDocument,
                  epsilon: float = DEFAULT_PIVOT_EPSILON) -> int:
    """Return the rounded constant term for a document.

    Every entry is decoded, then only the first k (in document order) are
    used. Which points make up that prefix is the caller's concern.

    Raises:
        MalformedInputError: an entry could not be decoded.
        InsufficientPointsError: fewer than k entries.
        SingularMatrixError: repeated x-values or a zero pivot.
        NumericRangeError: values too large for floating point.
    """
    points = decode_points(document)
    k = document.k
    if len(points) < k:
        raise InsufficientPointsError(len(points), k)

    selected = points[:k]
    logger.debug("Interpolating through %s", [(p.x, p.y) for p in selected])
    coeffs = interpolate(selected, epsilon)
    logger.debug("Coefficients (highest degree first): %s", coeffs)
    return round_half_up(coeffs[k - 1])


def solve(document: InputDocument) -> int:
    """find_constant with the default pivot epsilon."""
    return find_constant(document)

"""Small helpers for 3-vectors and 3x3 matrices"""
import math
from typing import cast, TypeAlias


Vector: TypeAlias = tuple[float, float, float]
Matrix: TypeAlias = tuple[Vector, Vector, Vector]


def multiply(matrix: Matrix, vector: Vector) -> Vector:
    """Multiply the 3x3 matrix with the column vector."""
    return cast(
        Vector,
        tuple(sum(r * c for r, c in zip(row, vector)) for row in matrix)
    )


def compose(left: Matrix, right: Matrix) -> Matrix:
    """Multiply two 3x3 matrices, so that ``left`` is applied last."""
    columns = tuple(zip(*right))
    return cast(
        Matrix,
        tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in left
        ),
    )


def invert(matrix: Matrix) -> Matrix:
    """
    Invert the 3x3 matrix by way of its adjugate. The matrix must not be
    singular.
    """
    (a, b, c), (d, e, f), (g, h, i) = matrix
    A = e * i - f * h
    B = -(d * i - f * g)
    C = d * h - e * g
    determinant = a * A + b * B + c * C
    if determinant == 0:
        raise ValueError('matrix is singular')

    return cast(Matrix, tuple(
        tuple(v / determinant for v in row) for row in (
            (A, -(b * i - c * h), b * f - c * e),
            (B, a * i - c * g, -(a * f - c * d)),
            (C, -(a * h - b * g), a * e - b * d),
        )
    ))


def diagonal(d1: float, d2: float, d3: float) -> Matrix:
    return (d1, 0.0, 0.0), (0.0, d2, 0.0), (0.0, 0.0, d3)


def magnitude(v1: float, v2: float, v3: float = 0.0) -> float:
    """Determine the length of the vector."""
    return math.sqrt(v1 * v1 + v2 * v2 + v3 * v3)


def distance(v1: Vector, v2: Vector) -> float:
    """Determine the Euclidian distance between two vectors."""
    return math.sqrt(sum((a - b) * (a - b) for a, b in zip(v1, v2)))


def normalize_angle(value: float, period: float = 360) -> float:
    """Map the angle onto the half-open interval from 0 to the period."""
    value = math.fmod(value, period)
    if value < 0:
        value += period
    # fmod of tiny negative numbers may round up to the period
    return 0.0 if value >= period else value


def atan2_degrees(y: float, x: float) -> float:
    """Determine the angle of the point in degrees between 0 and 360."""
    return normalize_angle(math.degrees(math.atan2(y, x)))

from __future__ import annotations

from typing import Sequence, TypeAlias

import numpy as np


Matrix2d: TypeAlias = np.ndarray
Rectangle: TypeAlias = tuple[float, float, float, float]
Vec2d: TypeAlias = tuple[float, float]


class SingularTransformError(ValueError):
    """Raised when an affine transform has no inverse."""


def identity() -> Matrix2d:
    return np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]], dtype=np.float64)


def as_matrix(transform: object) -> Matrix2d:
    """Coerce a 2x3 array-like (row-major `[[a, b, tx], [c, d, ty]]`) into a Matrix2d."""

    matrix = np.asarray(transform, dtype=np.float64)
    if matrix.shape != (2, 3):
        raise ValueError(f"transform must have shape (2, 3), got {matrix.shape}")
    return matrix


def to_rectangle(rect: Sequence[float]) -> Rectangle:
    if len(rect) != 4:
        raise ValueError("rectangle must be `(x, y, w, h)`")
    x, y, w, h = (float(v) for v in rect)
    if w < 0 or h < 0:
        raise ValueError("rectangle width/height must be >= 0")
    return (x, y, w, h)


def determinant(transform: object) -> float:
    m = as_matrix(transform)
    return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])


def invert(transform: object) -> Matrix2d:
    """Return the inverse affine transform.

    Degenerate or non-finite transforms raise `SingularTransformError` rather
    than producing a matrix that would make every hit-test quietly fail.
    """

    m = as_matrix(transform)
    if not np.all(np.isfinite(m)):
        raise SingularTransformError("transform contains non-finite values")
    det = determinant(m)
    if det == 0.0:
        raise SingularTransformError(f"transform is not invertible (determinant={det})")
    linear_inv = np.array(
        [[m[1, 1], -m[0, 1]], [-m[1, 0], m[0, 0]]],
        dtype=np.float64,
    ) / det
    translation_inv = -linear_inv @ m[:, 2]
    return np.column_stack((linear_inv, translation_inv))


def transform_pos(transform: object, pos: Sequence[float]) -> Vec2d:
    m = as_matrix(transform)
    x, y = float(pos[0]), float(pos[1])
    out = m @ np.array([x, y, 1.0], dtype=np.float64)
    return (float(out[0]), float(out[1]))


def is_inside(pos: Sequence[float], transform: object, rect: Sequence[float]) -> bool:
    """Project `pos` into button space and test half-open containment in `rect`."""

    rx, ry, rw, rh = to_rectangle(rect)
    px, py = transform_pos(invert(transform), pos)
    return rx <= px < rx + rw and ry <= py < ry + rh

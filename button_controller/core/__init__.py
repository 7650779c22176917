from .events import PRIMARY_BUTTON, InputSample, MouseButton, PointerSample, TouchPhase, TouchSample
from .geometry import (
    Matrix2d,
    Rectangle,
    SingularTransformError,
    Vec2d,
    as_matrix,
    determinant,
    identity,
    invert,
    is_inside,
    to_rectangle,
    transform_pos,
)

__all__ = [
    "InputSample",
    "Matrix2d",
    "MouseButton",
    "PRIMARY_BUTTON",
    "PointerSample",
    "Rectangle",
    "SingularTransformError",
    "TouchPhase",
    "TouchSample",
    "Vec2d",
    "as_matrix",
    "determinant",
    "identity",
    "invert",
    "is_inside",
    "to_rectangle",
    "transform_pos",
]

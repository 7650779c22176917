from __future__ import annotations

import math
import unittest

import numpy as np

from button_controller.core.geometry import (
    SingularTransformError,
    as_matrix,
    identity,
    invert,
    is_inside,
    to_rectangle,
    transform_pos,
)


RECT = (10.0, 60.0, 280.0, 180.0)


class GeometryTests(unittest.TestCase):
    def test_half_open_bounds_with_identity(self) -> None:
        t = identity()
        self.assertTrue(is_inside((10.0, 60.0), t, RECT))
        self.assertTrue(is_inside((289.999, 239.999), t, RECT))
        self.assertFalse(is_inside((290.0, 100.0), t, RECT))
        self.assertFalse(is_inside((100.0, 240.0), t, RECT))
        self.assertFalse(is_inside((9.999, 100.0), t, RECT))

    def test_translated_transform_projects_into_local_space(self) -> None:
        # Button drawn at offset (100, 50); raw input is in window space.
        t = [[1.0, 0.0, 100.0], [0.0, 1.0, 50.0]]
        rect = (0.0, 0.0, 20.0, 10.0)
        self.assertTrue(is_inside((100.0, 50.0), t, rect))
        self.assertTrue(is_inside((119.0, 59.0), t, rect))
        self.assertFalse(is_inside((10.0, 5.0), t, rect))

    def test_scaled_transform_agrees_with_direct_containment(self) -> None:
        t = np.array([[2.0, 0.0, 4.0], [0.0, 0.5, -3.0]])
        rect = (1.0, 2.0, 5.0, 7.0)
        inv = invert(t)
        for px in np.linspace(-5.0, 20.0, 26):
            for py in np.linspace(-5.0, 10.0, 16):
                lx, ly = transform_pos(inv, (px, py))
                expected = rect[0] <= lx < rect[0] + rect[2] and rect[1] <= ly < rect[1] + rect[3]
                self.assertEqual(is_inside((px, py), t, rect), expected)

    def test_invert_round_trips_rotation(self) -> None:
        c, s = math.cos(0.5), math.sin(0.5)
        t = np.array([[c, -s, 3.0], [s, c, -2.0]])
        x, y = transform_pos(invert(t), transform_pos(t, (4.0, 7.0)))
        self.assertAlmostEqual(x, 4.0)
        self.assertAlmostEqual(y, 7.0)

    def test_degenerate_transform_fails_loudly(self) -> None:
        with self.assertRaises(SingularTransformError):
            invert([[1.0, 2.0, 0.0], [2.0, 4.0, 0.0]])
        with self.assertRaises(ValueError):
            is_inside((0.0, 0.0), [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]], RECT)
        with self.assertRaises(SingularTransformError):
            invert([[float("nan"), 0.0, 0.0], [0.0, 1.0, 0.0]])

    def test_shape_and_rectangle_validation(self) -> None:
        with self.assertRaises(ValueError):
            as_matrix([[1.0, 0.0], [0.0, 1.0]])
        with self.assertRaises(ValueError):
            to_rectangle((0.0, 0.0, -1.0, 5.0))
        with self.assertRaises(ValueError):
            to_rectangle((0.0, 0.0, 1.0))

    def test_zero_size_rectangle_contains_nothing(self) -> None:
        self.assertFalse(is_inside((5.0, 5.0), identity(), (5.0, 5.0, 0.0, 0.0)))


if __name__ == "__main__":
    unittest.main()

"""Tests for hsc_xform."""

import numpy as np
import pytest

from hsc_groups import ElementKind
from hsc_scene import Affine, Element, Marker, Point, Stroke, loads
from hsc_xform import affine_matrix, apply_affine, element_strokes


IDENTITY = Affine((1, 0, 0, 0, 1, 0, 0, 0, 1))
DOUBLE = Affine((2, 0, 0, 0, 2, 0, 0, 0, 1))
SHIFT = Affine((1, 0, 10, 0, 1, -5, 0, 0, 1))


def test_affine_matrix_is_row_major():
  matrix = affine_matrix(Affine(tuple(range(9))))
  assert matrix.shape == (3, 3)
  np.testing.assert_array_equal(matrix[0], [0, 1, 2])
  np.testing.assert_array_equal(matrix[:, 0], [0, 3, 6])


def test_apply_affine():
  points = [Point(1, 2), Point(-3, 4)]
  assert apply_affine(points, IDENTITY) == [(1.0, 2.0), (-3.0, 4.0)]
  assert apply_affine(points, SHIFT) == [(11.0, -3.0), (7.0, -1.0)]


def test_apply_affine_to_nothing():
  assert apply_affine([], DOUBLE) == []


def test_apply_affine_divides_by_w():
  halve = Affine((1, 0, 0, 0, 1, 0, 0, 0, 2))
  assert apply_affine([Point(4, 6)], halve) == [(2.0, 3.0)]


def test_element_strokes_apply_modifiers_in_order():
  element = Element(ElementKind.PENCIL,
                    [Stroke(3, [Point(1, 1), Point(2, 3)]), Marker('skip')],
                    [DOUBLE, SHIFT])
  # Scale first, then shift.
  (polyline,) = element_strokes(element)
  assert polyline == pytest.approx([(12.0, -3.0), (14.0, 1.0)])


def test_element_strokes_without_modifiers():
  element = Element(ElementKind.BRUSH, [Stroke(1, [Point(5, 6, 0.5)]),
                                        Stroke(1, [])])
  assert element_strokes(element) == [[(5.0, 6.0)], []]


def test_element_strokes_from_sketch():
  sketch = loads('Pencil: [000001001001] Affine: [2, 0, 0, 0, 2, 0, 0, 0, 1]')
  assert element_strokes(sketch.elements[0]) == [[(0.0, 2.0), (2.0, 2.0)]]

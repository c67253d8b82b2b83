"""Apply sketch element modifiers to stroke coordinates.

Forfeited into the public domain with NO WARRANTY. Read LICENSE for details.

Programs that display sketches are expected to transform each grouped
element's atoms by the element's `Affine` modifiers before drawing them. The
functions here do that arithmetic for strokes, so that a display program only
has to connect the dots. Points are treated as homogeneous column vectors
(x, y, 1); the bottom row of an affine matrix is usually 0 0 1, but nothing
here relies on that, and the result is always divided through by the third
coordinate.

This program is released into the public domain without any warranty. For
details, refer to the LICENSE file distributed with this program, or, if it's
missing, to http://unlicense.org.

Revision history
----------------

18 October 2026: Initial release.
"""

import numpy as np

from typing import Iterable

from hsc_scene import Affine, Element, Point, Stroke


# Type definitions
XY = tuple[float, float]
Polyline = list[XY]


def affine_matrix(affine: Affine) -> np.ndarray:
  """The 3x3 matrix of an `Affine` modifier."""
  return np.array(affine.matrix, dtype=np.float64).reshape(3, 3)


def apply_affine(points: Iterable[Point], affine: Affine) -> Polyline:
  """Transform stroke points by an affine matrix.

  Args:
    points: Points to transform. Pressure is ignored.
    affine: The transform.

  Returns:
    Transformed x,y coordinates, one for each point.
  """
  xy = [(p.x, p.y) for p in points]
  if not xy:
    return []
  return _transform(np.array(xy, dtype=np.float64), affine_matrix(affine))


def _transform(xy: np.ndarray, matrix: np.ndarray) -> Polyline:
  homogeneous = np.hstack([xy, np.ones((len(xy), 1))])
  result = homogeneous @ matrix.T
  result = result[:, :2] / result[:, 2:3]
  return [(float(x), float(y)) for x, y in result]


def element_strokes(element: Element) -> list[Polyline]:
  """Strokes of a grouped element with all of its modifiers applied.

  Modifiers apply in the order they were written: the first `Affine` in a
  statement transforms the points first. Markers have no points and are
  skipped.

  Args:
    element: A grouped sketch element.

  Returns:
    One list of transformed x,y coordinates for each of the element's strokes.
  """
  combined = np.identity(3)
  for modifier in element.modifiers:
    combined = affine_matrix(modifier) @ combined

  polylines: list[Polyline] = []
  for atom in element.atoms:
    if not isinstance(atom, Stroke):
      continue
    if not atom.points:
      polylines.append([])
      continue
    xy = np.array([(p.x, p.y) for p in atom.points], dtype=np.float64)
    polylines.append(_transform(xy, combined))
  return polylines

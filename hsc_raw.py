"""Decode the legacy raw point-stream sketch format.

Forfeited into the public domain with NO WARRANTY. Read LICENSE for details.

Before the statement-based .hsc format there was a simpler one: each line of a
raw file is one stroke, written as a run of 4-digit base-36 points (two digits
of x, then two digits of y):

   000A0B0C0D0E
   1010ZZZZ

Strokes are separated by whitespace, which in practice means newlines; no
other characters are allowed, and whitespace may only fall between whole
points. Raw coordinates are unsigned (0..1295) and there is no pressure data.

This program is released into the public domain without any warranty. For
details, refer to the LICENSE file distributed with this program, or, if it's
missing, to http://unlicense.org.

Revision history
----------------

18 October 2026: Initial release.
"""

import dataclasses
import enum
import logging

from hsc_numbers import FormatError, decode_base36, is_base36
from hsc_tokens import WHITESPACE


logger = logging.getLogger(__name__)


POINT_WIDTH = 4    # xxyy
COORD_DIGITS = 2


class RawFormatError(FormatError):
  """For signalling that text isn't in the raw point-stream format."""


@dataclasses.dataclass(frozen=True)
class RawPoint:
  x: int
  y: int
  pressure: float = 0.0


@dataclasses.dataclass
class RawStroke:
  points: list[RawPoint] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class RawSketch:
  strokes: list[RawStroke] = dataclasses.field(default_factory=list)


class _State(enum.Enum):
  S0 = 0  # Between points, at the start of a stroke.
  X1 = 1
  X2 = 2
  Y1 = 3
  Y2 = 4  # Just finished a point.


_NEXT_DIGIT_STATE = {
    _State.S0: _State.X1,
    _State.X1: _State.X2,
    _State.X2: _State.Y1,
    _State.Y1: _State.Y2,
    _State.Y2: _State.X1,
}


def verify(text: str) -> bool:
  """Whether `text` is well-formed raw point-stream data.

  Args:
    text: Contents of a raw sketch file.

  Returns:
    True if `text` holds only base-36 digits and whitespace, the whitespace
    only falls between whole points, and the text doesn't end partway through
    a point.
  """
  state = _State.S0
  for c in text:
    if is_base36(c):
      state = _NEXT_DIGIT_STATE[state]
    elif c in WHITESPACE and state in (_State.S0, _State.Y2):
      state = _State.S0
    else:
      return False
  return state in (_State.S0, _State.Y2)


def parse(text: str) -> RawSketch:
  """Decode raw point-stream data.

  Args:
    text: Contents of a raw sketch file.

  Returns:
    One stroke for each whitespace-separated run of points in `text`.

  Raises:
    RawFormatError: if `verify` rejects `text`.
  """
  if not verify(text): raise RawFormatError(
      'Not raw sketch data: expected whitespace-separated runs of 4-digit '
      'base-36 points')

  sketch = RawSketch()
  for run in text.split():
    stroke = RawStroke()
    for i in range(0, len(run), POINT_WIDTH):
      stroke.points.append(RawPoint(
          x=decode_base36(run[i:i + COORD_DIGITS], COORD_DIGITS, signed=False),
          y=decode_base36(run[i + COORD_DIGITS:i + POINT_WIDTH], COORD_DIGITS,
                          signed=False)))
    sketch.strokes.append(stroke)

  logger.debug('Decoded %d raw strokes', len(sketch.strokes))
  return sketch

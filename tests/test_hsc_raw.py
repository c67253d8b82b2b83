"""Tests for hsc_raw."""

import pytest

from hsc_numbers import FormatError
from hsc_raw import (RawFormatError, RawPoint, RawSketch, RawStroke, parse,
                     verify)


@pytest.mark.parametrize('text', [
    '',
    '\n\n',
    '0A0B',
    '0A0B\n1C1D',
    '0A0B1C1D\n',
    '  0a0b  \r\n\t1c1d\n',
    '0A0B 1C1D',
])
def test_verify_accepts(text):
  assert verify(text)


@pytest.mark.parametrize('text', [
    '0A0',          # Ends partway through a point.
    '0A0B1',
    '0A 0B',        # Whitespace inside a point.
    '0A0B\n1C',
    '0A0B;',        # Not a base-36 digit.
    "0A'0B",
])
def test_verify_rejects(text):
  assert not verify(text)


def test_parse_one_stroke_per_line():
  sketch = parse('0A0B\n1C1D0000\n')
  assert sketch == RawSketch([
      RawStroke([RawPoint(10, 11)]),
      RawStroke([RawPoint(1 * 36 + 12, 1 * 36 + 13), RawPoint(0, 0)]),
  ])


def test_parse_coordinates_are_unsigned():
  (stroke,) = parse('ZZZZ').strokes
  assert stroke.points == [RawPoint(1295, 1295, 0.0)]


def test_parse_pressure_is_zero():
  (stroke,) = parse('0101').strokes
  assert stroke.points[0].pressure == 0.0


def test_parse_skips_blank_lines():
  assert len(parse('\n0101\n\n   \n0202\n').strokes) == 2


def test_parse_empty():
  assert parse('') == RawSketch()


def test_parse_rejects_malformed_text():
  with pytest.raises(RawFormatError):
    parse('0A0')
  with pytest.raises(FormatError):
    parse('hello world!')

"""Decode the digit runs found in hand-sketch (.hsc) files.

Forfeited into the public domain with NO WARRANTY. Read LICENSE for details.

Sketch files pack their coordinates into fixed-width runs of base-36 digits
(0-9, then A-Z or a-z for the values 10-35) and write transform matrices as
ordinary base-10 numbers. This module turns both kinds of digit run into
Python numbers, and is shared by the sketch parser (`hsc_scene`) and the raw
point-stream decoder (`hsc_raw`).

Signed base-36 fields use a two's-complement-style wraparound: an N-digit
field holds an unsigned value v in [0, 36**N), and values in the top half of
that range stand for v - 36**N. Three digits therefore cover -23328..23327.

This program is released into the public domain without any warranty. For
details, refer to the LICENSE file distributed with this program, or, if it's
missing, to http://unlicense.org.

Revision history
----------------

18 October 2026: Initial release.
"""

import string


BASE10_DIGITS = frozenset(string.digits)
BASE36_DIGITS = frozenset(string.digits + string.ascii_letters)


class FormatError(ValueError):
  """Base class for everything that can go wrong decoding a sketch file."""


class CodecError(FormatError):
  """For signalling a malformed numeric field."""


def is_base10(c: str) -> bool:
  return c in BASE10_DIGITS


def is_base36(c: str) -> bool:
  return c in BASE36_DIGITS


def _digit_value(c: str) -> int:
  if c.isdigit():
    return ord(c) - ord('0')
  elif c.islower():
    return ord(c) - ord('a') + 10
  else:
    return ord(c) - ord('A') + 10


def decode_base36(digits: str, width: int, signed: bool = True) -> int:
  """Decode a fixed-width run of base-36 digits.

  Args:
    digits: Exactly `width` characters drawn from [0-9a-zA-Z]. Letters are
        case-insensitive.
    width: Number of digits in the field.
    signed: If True, values in the upper half of [0, 36**width) wrap around
        to negative numbers. If False, the plain unsigned value is returned.

  Returns:
    The decoded integer.

  Raises:
    CodecError: if `digits` has the wrong length or a character that isn't a
        base-36 digit.
  """
  if width < 1: raise ValueError(f'Field width must be positive, not {width}')
  if len(digits) != width: raise CodecError(
      f'Expected {width} base-36 digits, got {len(digits)} in {digits!r}')

  value = 0
  for c in digits:
    if not is_base36(c):
      raise CodecError(f'{c!r} is not a base-36 digit (in {digits!r})')
    value = 36 * value + _digit_value(c)

  if signed:
    modulus = 36 ** width
    if value >= modulus // 2: value -= modulus
  return value


def _split_sign(text: str) -> tuple[int, str]:
  if text[:1] == '-':
    return -1, text[1:]
  elif text[:1] == '+':
    return 1, text[1:]
  return 1, text


def _decode_unsigned_base10(digits: str, context: str) -> int:
  value = 0
  for c in digits:
    if not is_base10(c):
      raise CodecError(f'{c!r} is not a base-10 digit (in {context!r})')
    value = 10 * value + (ord(c) - ord('0'))
  return value


def decode_base10_int(text: str) -> int:
  """Decode an integer: an optional + or - followed by one or more digits."""
  sign, digits = _split_sign(text)
  if not digits: raise CodecError(f'No digits in integer field {text!r}')
  return sign * _decode_unsigned_base10(digits, text)


def decode_base10_float(text: str) -> float:
  """Decode a decimal number like `-1.25`, `3`, `.5` or `7.`.

  Either the integer part or the fractional part may be missing, but not
  both: the text must contain at least one digit.

  Args:
    text: Number to decode.

  Returns:
    sign * (integer part + fractional part * 10**-(fractional digit count)).

  Raises:
    CodecError: if the text isn't a number in the form described above.
  """
  sign, body = _split_sign(text)
  int_part, dot, frac_part = body.partition('.')
  if not int_part and not frac_part: raise CodecError(
      f'No digits in number field {text!r}')

  result = 0.0
  if int_part:
    result += _decode_unsigned_base10(int_part, text)
  if frac_part:
    result += (_decode_unsigned_base10(frac_part, text)
               / 10 ** len(frac_part))
  return sign * result

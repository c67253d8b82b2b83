"""Assemble hand-sketch (.hsc) tokens into a drawing scene.

Forfeited into the public domain with NO WARRANTY. Read LICENSE for details.

A sketch file is a sequence of statements separated by commas and ended by the
end of the file or a semicolon (anything after the semicolon is ignored):

   % Comments start with a percent sign.
   Pencil: [000000'00100A'00A00A] Affine: [2, 0, 0, 0, 2, 0, 0, 0, 1],
   Brush: [0A, 00000000'00100AZZ],
   Marker: (Hello (world)),
   Data: [zzzzzz000000];

The first element of each statement supplies the statement's atoms, the
indivisible drawable things in a sketch:

- `Data` and `Pencil` members are strokes of diameter 3. Each member is a run
  of 6-digit base-36 windows, 3 digits of x and 3 digits of y per point.
  Pressure is always 1.0.
- `Brush` members come in pairs: a 2-digit base-36 diameter, then a run of
  8-digit windows with 3 digits of x, 3 digits of y and 2 digits of pressure
  (scaled so that ZZ is 1.0).
- `Marker` has a single parenthesised string member, which becomes a text
  annotation.

In stroke members, apostrophes may be sprinkled anywhere to make the digits
easier to read; they are ignored.

The rest of the statement's elements are modifiers. Only `Affine`, a row-major
3x3 matrix, is recognised at the moment. Modifiers only mean something for
statements whose first element's type is a grouping keyword (see `hsc_groups`):
those statements also become an `Element` in the sketch, carrying their atoms
and modifiers.

Every statement's atoms are also collected in the sketch's flat `atoms` list.
Each statement's atoms are put in front of the atoms collected so far, so the
statements appear there in reverse order (the atoms of a single statement stay
in order). Elements, meanwhile, appear in the order they were written.
Downstream code depends on both orders.

This program is released into the public domain without any warranty. For
details, refer to the LICENSE file distributed with this program, or, if it's
missing, to http://unlicense.org.

Revision history
----------------

18 October 2026: Initial release.
"""

import copy
import dataclasses
import logging

from typing import Sequence, TextIO

import hsc_grammar
import hsc_tokens

from hsc_grammar import ElementData, GrammarError
from hsc_groups import DEFAULT_GROUPS, ElementKind, Groups
from hsc_numbers import CodecError, decode_base10_float, decode_base36
from hsc_tokens import Token


logger = logging.getLogger(__name__)


PENCIL_DIAMETER = 3
PENCIL_WINDOW = 6  # xxxyyy
BRUSH_WINDOW = 8   # xxxyyypp
PRESSURE_SCALE = float(36 * 36 - 1)
DIGIT_SEPARATOR = "'"


@dataclasses.dataclass(frozen=True)
class Point:
  x: int
  y: int
  pressure: float = 1.0


@dataclasses.dataclass
class Stroke:
  """One continuous pen path."""
  diameter: int
  points: list[Point] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class Marker:
  """A text annotation with no points of its own."""
  message: str


# Atoms are the indivisible drawable units. To add a new kind, define a
# dataclass and add it here.
Atom = Stroke | Marker


@dataclasses.dataclass(frozen=True)
class Affine:
  """A 2D affine transform: a 3x3 matrix, row-major."""
  matrix: tuple[float, ...]

  def __post_init__(self):
    if len(self.matrix) != 9: raise ValueError(
        f'An affine matrix has 9 entries, not {len(self.matrix)}')


Modifier = Affine


@dataclasses.dataclass
class Element:
  """A named group of atoms (e.g. a layer) and the modifiers applied to it."""
  kind: ElementKind
  atoms: list[Atom] = dataclasses.field(default_factory=list)
  modifiers: list[Modifier] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class Sketch:
  """A complete scene. See the module docstring for ordering details."""
  elements: list[Element] = dataclasses.field(default_factory=list)
  atoms: list[Atom] = dataclasses.field(default_factory=list)


def _windows(member: Token, size: int) -> list[str]:
  """Split a stroke member into digit windows, dropping separators."""
  digits = member.text.replace(DIGIT_SEPARATOR, '')
  if len(digits) % size: raise CodecError(
      f'Stroke data at offset {member.start} has {len(digits)} digits, which '
      f'is not a multiple of {size}')
  return [digits[i:i + size] for i in range(0, len(digits), size)]


def _decode_pencil(element: ElementData) -> list[Atom]:
  atoms: list[Atom] = []
  for member in element.members:
    stroke = Stroke(PENCIL_DIAMETER)
    for window in _windows(member, PENCIL_WINDOW):
      stroke.points.append(Point(
          x=decode_base36(window[0:3], 3),
          y=decode_base36(window[3:6], 3)))
    atoms.append(stroke)
  return atoms


def _decode_brush(element: ElementData) -> list[Atom]:
  # The grammar guarantees (diameter, points) pairs.
  members = element.members
  atoms: list[Atom] = []
  for diameter, data in zip(members[::2], members[1::2]):
    stroke = Stroke(decode_base36(diameter.text, 2, signed=False))
    for window in _windows(data, BRUSH_WINDOW):
      stroke.points.append(Point(
          x=decode_base36(window[0:3], 3),
          y=decode_base36(window[3:6], 3),
          pressure=(decode_base36(window[6:8], 2, signed=False)
                    / PRESSURE_SCALE)))
    atoms.append(stroke)
  return atoms


def _decode_marker(element: ElementData) -> list[Atom]:
  # The grammar has checked that the member is a whole (...) literal.
  return [Marker(element.members[0].text[1:-1])]


# How the first element of a statement turns into atoms.
_ATOM_DECODERS = {
    'Data': _decode_pencil,
    'Pencil': _decode_pencil,
    'Brush': _decode_brush,
    'Marker': _decode_marker,
}


def _decode_affine(element: ElementData) -> Affine:
  return Affine(tuple(decode_base10_float(m.text) for m in element.members))


# How the remaining elements of a statement turn into modifiers.
_MODIFIER_DECODERS = {
    'Affine': _decode_affine,
}


def _is_separator(token: Token) -> bool:
  return token.text in (',', ';')


def parse(tokens: Sequence[Token], groups: Groups = DEFAULT_GROUPS) -> Sketch:
  """Build a sketch from a list of tokens.

  Args:
    tokens: Sketch tokens, as made by `hsc_tokens.tokenize`.
    groups: Grouping keyword table; see `hsc_groups`.

  Returns:
    The sketch described by `tokens`.

  Raises:
    GrammarError: if the tokens don't form valid statements, including when a
        statement is empty.
    CodecError: if a numeric field can't be decoded.
  """
  sketch = Sketch()
  if not tokens or tokens[0].text == ';':
    return sketch

  pos = 0
  statements = 0
  while pos < len(tokens):
    # Collect the elements of one statement.
    elements: list[ElementData] = []
    while pos < len(tokens) and not _is_separator(tokens[pos]):
      element, pos = hsc_grammar.parse_element(tokens, pos)
      elements.append(element)
    if not elements:
      where = f'offset {tokens[pos].start}' if pos < len(tokens) else 'the end'
      raise GrammarError(f'Empty statement at {where}')

    # The first element supplies atoms, the rest are modifiers.
    first, *rest = elements
    decoder = _ATOM_DECODERS.get(first.type_name)
    atoms = decoder(first) if decoder is not None else []
    modifiers: list[Modifier] = []
    for element in rest:
      if (modifier_decoder := _MODIFIER_DECODERS.get(element.type_name)):
        modifiers.append(modifier_decoder(element))
      else:
        logger.debug('Ignoring %s element used as a modifier',
                     element.type_name)

    if (kind := groups.get(first.type_name)) is not None:
      sketch.elements.append(Element(kind, copy.deepcopy(atoms), modifiers))
    sketch.atoms[:0] = atoms
    statements += 1

    # Skip the separator; a semicolon ends the sketch.
    if pos < len(tokens) and tokens[pos].text == ';':
      break
    pos += 1

  logger.debug('Parsed %d statements: %d elements, %d atoms', statements,
               len(sketch.elements), len(sketch.atoms))
  return sketch


def loads(source: str, groups: Groups = DEFAULT_GROUPS) -> Sketch:
  """Tokenize and parse sketch source text. See `parse` for details."""
  return parse(hsc_tokens.tokenize(source), groups)


def load(file: TextIO, groups: Groups = DEFAULT_GROUPS) -> Sketch:
  """Read and parse a sketch from an open text file."""
  return loads(file.read(), groups)

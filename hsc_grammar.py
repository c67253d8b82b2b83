"""Recognise the elements that make up a hand-sketch (.hsc) statement.

Forfeited into the public domain with NO WARRANTY. Read LICENSE for details.

An element is a type name, optionally followed by a colon and some members:

   Marker: (Some text)
   Affine: [1, 0, 0, 0, 1, 0, 0, 0, 1]
   Pencil: [000000'001001, 00A00A]

What may follow the type name depends on the type, and is described by an
"arity" for each type in the `ELEMENT_DEFS` table:

- `NoMembers`: the type name alone, no colon.
- `Single`: a colon, then exactly one token. A `STRING` member must be one
  whole parenthesised string literal.
- `Bounded`: a colon, then exactly `n` members inside square brackets.
- `Unbounded`: a colon, then any number of members inside square brackets, as
  long as that number is a multiple of the arity's `multiple`.

Members inside square brackets may be separated by commas; the commas are not
members. The grammar only finds the members; it's up to the scene assembler in
`hsc_scene` to decode them.

This program is released into the public domain without any warranty. For
details, refer to the LICENSE file distributed with this program, or, if it's
missing, to http://unlicense.org.

Revision history
----------------

18 October 2026: Initial release.
"""

import dataclasses
import enum

from typing import Mapping, Sequence

from hsc_numbers import FormatError
from hsc_tokens import Token


class GrammarError(FormatError):
  """For signalling that tokens don't form valid elements or statements."""


class ValueType(enum.Enum):
  """What kind of value an element's members hold."""
  BASE36 = 'base36'
  NUMBER = 'number'
  STRING = 'string'


@dataclasses.dataclass(frozen=True)
class NoMembers:
  """Arity for types that take no members at all."""


@dataclasses.dataclass(frozen=True)
class Single:
  """Arity for types that take exactly one member, with no brackets."""
  value_type: ValueType


@dataclasses.dataclass(frozen=True)
class Bounded:
  """Arity for types that take exactly `n` bracketed members."""
  value_type: ValueType
  n: int


@dataclasses.dataclass(frozen=True)
class Unbounded:
  """Arity for types that take any number of bracketed members.

  `multiple` says how many members make up one logical item; Brush members
  come in (diameter, points) pairs.
  """
  value_type: ValueType
  multiple: int = 1


Arity = NoMembers | Single | Bounded | Unbounded


# All the element types we know about. New types go here.
ELEMENT_DEFS: Mapping[str, Arity] = {
    'Data': Unbounded(ValueType.BASE36),
    'Pencil': Unbounded(ValueType.BASE36),
    'Brush': Unbounded(ValueType.BASE36, multiple=2),
    'Affine': Bounded(ValueType.NUMBER, 9),
    'Marker': Single(ValueType.STRING),
}


@dataclasses.dataclass(frozen=True)
class ElementData:
  """One parsed element: its type name and its member tokens."""
  type_name: str
  members: tuple[Token, ...] = ()


def _expect(tokens: Sequence[Token], pos: int, text: str, type_name: str):
  if pos >= len(tokens): raise GrammarError(
      f'{type_name}: expected "{text}" but the sketch ended')
  if tokens[pos].text != text: raise GrammarError(
      f'{type_name}: expected "{text}" at offset {tokens[pos].start}, found '
      f'"{tokens[pos].text}"')


def _is_string_literal(text: str) -> bool:
  """True if `text` is one whole parenthesised string, e.g. `(a (b) c)`."""
  if not text.startswith('('): return False
  depth = 0
  for i, c in enumerate(text):
    if c == '(':
      depth += 1
    elif c == ')':
      depth -= 1
      if depth == 0: return i == len(text) - 1
  return False


def _bracketed_members(
    tokens: Sequence[Token], pos: int, type_name: str,
) -> tuple[tuple[Token, ...], int]:
  """Collect members from `[` at `pos` to the matching `]`.

  Returns: a tuple with two elements
    [0]: The member tokens, without separating commas.
    [1]: Position of the token following the `]`.
  """
  _expect(tokens, pos, '[', type_name)
  pos += 1
  members = []
  while pos < len(tokens) and tokens[pos].text != ']':
    if tokens[pos].text != ',':
      members.append(tokens[pos])
    pos += 1
  if pos == len(tokens): raise GrammarError(
      f'{type_name}: member list is missing its closing "]"')
  return tuple(members), pos + 1


def parse_element(
    tokens: Sequence[Token],
    pos: int,
    defs: Mapping[str, Arity] = ELEMENT_DEFS,
) -> tuple[ElementData, int]:
  """Parse the element that starts at position `pos` in `tokens`.

  Args:
    tokens: Sketch tokens, as made by `hsc_tokens.tokenize`.
    pos: Index of the element's type name in `tokens`.
    defs: Table of element types and their arities.

  Returns: a tuple with two elements
    [0]: The parsed element.
    [1]: Position of the token following the element.

  Raises:
    GrammarError: if there's no token at `pos`, if the type name is unknown,
        or if the members don't have the shape the type's arity demands.
  """
  if pos >= len(tokens): raise GrammarError(
      'Expected an element type name but the sketch ended')
  type_name = tokens[pos].text
  if (arity := defs.get(type_name)) is None: raise GrammarError(
      f'Unknown element type "{type_name}" at offset {tokens[pos].start}')
  pos += 1

  match arity:
    case NoMembers():
      return ElementData(type_name), pos

    case Single(value_type=value_type):
      _expect(tokens, pos, ':', type_name)
      if pos + 1 >= len(tokens): raise GrammarError(
          f'{type_name}: expected a member but the sketch ended')
      member = tokens[pos + 1]
      if (value_type == ValueType.STRING
          and not _is_string_literal(member.text)): raise GrammarError(
              f'{type_name}: expected a (parenthesised) string at offset '
              f'{member.start}, found {member.text!r}')
      return ElementData(type_name, (member,)), pos + 2

    case Bounded(n=n):
      _expect(tokens, pos, ':', type_name)
      members, pos = _bracketed_members(tokens, pos + 1, type_name)
      if len(members) != n: raise GrammarError(
          f'{type_name}: expected {n} members, found {len(members)}')
      return ElementData(type_name, members), pos

    case Unbounded(multiple=multiple):
      _expect(tokens, pos, ':', type_name)
      members, pos = _bracketed_members(tokens, pos + 1, type_name)
      if len(members) % multiple: raise GrammarError(
          f'{type_name}: members come in groups of {multiple}, but there are '
          f'{len(members)} of them')
      return ElementData(type_name, members), pos

  raise TypeError(f'Unsupported arity {arity!r} for "{type_name}"')

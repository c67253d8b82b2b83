"""Grouping keywords: which statements become named elements of a sketch.

Forfeited into the public domain with NO WARRANTY. Read LICENSE for details.

When a sketch statement's first element has a type name that appears in the
grouping table, the statement's atoms are gathered into an `Element` of the
corresponding kind (a layer, more or less) and the statement's modifiers, e.g.
`Affine`, apply to that element. Statements whose first element isn't in the
table just contribute loose atoms.

The table is plain configuration. `DEFAULT_GROUPS` groups `Pencil` and `Brush`
statements; a different table can be loaded from an INI file with a `[groups]`
section in the style used by Python's configparser library:

   [groups]
   Pencil = pencil
   Brush = brush
   Marker = marker

Keys are element type names (case matters), values are `ElementKind` names
(case doesn't).

This program is released into the public domain without any warranty. For
details, refer to the LICENSE file distributed with this program, or, if it's
missing, to http://unlicense.org.

Revision history
----------------

18 October 2026: Initial release.
"""

import configparser
import enum
import types

from typing import Mapping, TextIO


class ElementKind(enum.Enum):
  """Kinds of grouped element a sketch can contain."""
  DATA = 'data'
  PENCIL = 'pencil'
  BRUSH = 'brush'
  MARKER = 'marker'


Groups = Mapping[str, ElementKind]


DEFAULT_GROUPS: Groups = types.MappingProxyType({
    'Pencil': ElementKind.PENCIL,
    'Brush': ElementKind.BRUSH,
})


def load_groups(file: TextIO) -> Groups:
  """Read a grouping table from an INI file.

  Args:
    file: Open INI file with a `[groups]` section.

  Returns:
    A read-only mapping from type names to element kinds.

  Raises:
    ValueError: if the `[groups]` section is missing or names a kind that
        isn't an `ElementKind`.
  """
  config = configparser.ConfigParser()
  config.optionxform = str  # type: ignore  # Type names are case-sensitive.
  config.read_file(file)
  if 'groups' not in config: raise ValueError(
      'Grouping table file has no [groups] section')

  groups: dict[str, ElementKind] = {}
  for type_name, kind_name in config['groups'].items():
    try:
      groups[type_name] = ElementKind(kind_name.strip().lower())
    except ValueError:
      raise ValueError(
          f'Unknown element kind "{kind_name}" for "{type_name}"; known kinds '
          f'are {", ".join(k.value for k in ElementKind)}') from None
  return types.MappingProxyType(groups)

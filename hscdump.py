#!/usr/bin/python3
"""Print the contents of hand-sketch (.hsc) files in readable form.

Forfeited into the public domain with NO WARRANTY. Read LICENSE for details.

This program decodes a sketch file and prints what it found: optionally the
token stream, then the decoded scene as an indented listing or as JSON. It can
also print the strokes of each grouped element with the element's transforms
applied, which is what a display program would draw. Files in the older raw
point-stream format can be decoded with the -r flag. All of the same
functionality is available to other programs via the `hsc_*` modules.

Example usage
-------------

   ./hscdump.py -t "example file.hsc"

prints the tokens of `example file.hsc` and then the decoded sketch.

   ./hscdump.py -g groups.ini -x drawing.hsc

groups statements according to the table in `groups.ini` (see `hsc_groups` for
its format) and prints the transformed strokes of every grouped element.

If the file can't be decoded, an error message goes to standard error and the
program exits with status 1.

This program is released into the public domain without any warranty. For
details, refer to the LICENSE file distributed with this program, or, if it's
missing, to http://unlicense.org.

Dependencies
------------

NumPy, for applying transforms (-x).

Revision history
----------------

18 October 2026: Initial release.
"""

import argparse
import configparser
import dataclasses
import json
import logging
import sys

from typing import TextIO

import hsc_groups
import hsc_raw
import hsc_scene
import hsc_tokens
import hsc_xform

from hsc_numbers import FormatError
from hsc_tokens import Token


def _define_flags() -> argparse.ArgumentParser:
  """Defines an `ArgumentParser` for command-line flags used by this program."""
  flags = argparse.ArgumentParser(
      description=('Decode a hand-sketch (.hsc) file and print the scene it '
                   'describes.'))

  flags.add_argument('input_file', nargs='?',
                     help=('Sketch file to decode. Leave blank to read from '
                           'standard input.'),
                     type=argparse.FileType('r'), default=sys.stdin)

  flags.add_argument('-o', '--output',
                     help=('Destination file for the listing. Leave blank to '
                           'write to standard output.'),
                     type=argparse.FileType('w'), default=sys.stdout)

  flags.add_argument('-r', '--raw',
                     help=('Decode the input as the legacy raw point-stream '
                           'format instead of the .hsc format.'),
                     action='store_true')

  flags.add_argument('-g', '--groups',
                     help=('INI file with a [groups] section that says which '
                           'element types form grouped elements. By default, '
                           'Pencil and Brush statements are grouped.'),
                     type=argparse.FileType('r'))

  flags.add_argument('-t', '--tokens',
                     help='Print the token stream before the scene.',
                     action='store_true')

  flags.add_argument('-j', '--json',
                     help='Print the scene as JSON.',
                     action='store_true')

  flags.add_argument('-x', '--apply_transforms',
                     help=('Also print the strokes of each grouped element '
                           'with its transforms applied.'),
                     action='store_true')

  flags.add_argument('-v', '--verbose',
                     help='Log debugging information to standard error.',
                     action='store_true')

  return flags


def dump_tokens(tokens: list[Token]) -> str:
  """List tokens one per line, quoted, with their offsets."""
  return '\n'.join(f'\t{t.start:>6} "{t.text}"' for t in tokens)


def _format_atom(atom: hsc_scene.Atom, indent: str) -> list[str]:
  match atom:
    case hsc_scene.Marker(message=message):
      return [f'{indent}Marker "{message}"']
    case hsc_scene.Stroke(diameter=diameter, points=points):
      lines = [f'{indent}Stroke diameter={diameter} points={len(points)}']
      lines.extend(f'{indent}  ({p.x}, {p.y}) pressure={p.pressure:.4f}'
                   for p in points)
      return lines
  raise TypeError(f'Not an atom: {atom!r}')


def format_sketch(sketch: hsc_scene.Sketch) -> str:
  """Format a sketch as an indented listing."""
  lines = [f'Elements ({len(sketch.elements)}):']
  for element in sketch.elements:
    lines.append(f'  {element.kind.name}')
    for modifier in element.modifiers:
      lines.append('    Affine ' + ' '.join(f'{v:g}' for v in modifier.matrix))
    for atom in element.atoms:
      lines.extend(_format_atom(atom, '    '))
  lines.append(f'Atoms ({len(sketch.atoms)}):')
  for atom in sketch.atoms:
    lines.extend(_format_atom(atom, '  '))
  return '\n'.join(lines)


def format_raw_sketch(sketch: hsc_raw.RawSketch) -> str:
  """Format a raw sketch as one line of x,y coordinates per stroke."""
  return '\n'.join(' '.join(f'({p.x}, {p.y})' for p in stroke.points)
                   for stroke in sketch.strokes)


def sketch_to_json(sketch: hsc_scene.Sketch | hsc_raw.RawSketch) -> str:
  """Convert a sketch (either kind) to JSON.

  Atoms are tagged with their type, so that strokes and markers can be told
  apart: `{"type": "Stroke", "diameter": 3, "points": [...]}`.
  """
  def tagged(o):
    if isinstance(o, (hsc_scene.Stroke, hsc_scene.Marker)):
      return {'type': type(o).__name__, **dataclasses.asdict(o)}
    elif isinstance(o, hsc_scene.Element):
      return {'kind': o.kind.value,
              'atoms': [tagged(a) for a in o.atoms],
              'modifiers': [{'type': 'Affine', 'matrix': list(m.matrix)}
                            for m in o.modifiers]}
    elif isinstance(o, hsc_scene.Sketch):
      return {'elements': [tagged(e) for e in o.elements],
              'atoms': [tagged(a) for a in o.atoms]}
    return dataclasses.asdict(o)

  return json.dumps(tagged(sketch), indent=2)


def format_transformed(sketch: hsc_scene.Sketch) -> str:
  """List each grouped element's strokes with its transforms applied."""
  lines = []
  for i, element in enumerate(sketch.elements):
    lines.append(f'{i}: {element.kind.name}')
    for polyline in hsc_xform.element_strokes(element):
      lines.append('  ' + ' '.join(f'({x:g}, {y:g})' for x, y in polyline))
  return '\n'.join(lines)


def dump(
    source: str,
    raw: bool = False,
    groups: hsc_groups.Groups = hsc_groups.DEFAULT_GROUPS,
    tokens: bool = False,
    as_json: bool = False,
    apply_transforms: bool = False,
) -> str:
  """Decode sketch source text and produce the listing this program prints.

  Args:
    source: Sketch file contents.
    raw: Decode `source` as the raw point-stream format.
    groups: Grouping keyword table for .hsc sketches.
    tokens: Include the token stream in the listing (.hsc only).
    as_json: Format the scene as JSON instead of an indented listing.
    apply_transforms: Include each grouped element's transformed strokes
        (.hsc only).

  Returns:
    The listing.

  Raises:
    FormatError: if `source` can't be decoded.
  """
  if raw:
    raw_sketch = hsc_raw.parse(source)
    return (sketch_to_json(raw_sketch) if as_json
            else format_raw_sketch(raw_sketch)) + '\n'

  sections = []
  token_list = hsc_tokens.tokenize(source)
  if tokens:
    sections.append('#### TOKENS ####\n' + dump_tokens(token_list))

  sketch = hsc_scene.parse(token_list, groups)
  sections.append('#### ELEMENTS ####\n' + (
      sketch_to_json(sketch) if as_json else format_sketch(sketch)))
  if apply_transforms:
    sections.append('#### TRANSFORMED ####\n' + format_transformed(sketch))

  sections.append('#### END ####')
  return '\n\n'.join(sections) + '\n'


def main(FLAGS: argparse.Namespace) -> int:
  logging.basicConfig(
      level=logging.DEBUG if FLAGS.verbose else logging.WARNING,
      format='%(name)s: %(levelname)s: %(message)s')

  groups = hsc_groups.DEFAULT_GROUPS
  if FLAGS.groups is not None:
    try:
      groups = hsc_groups.load_groups(FLAGS.groups)
    except (ValueError, configparser.Error) as e:
      print(f'{getattr(FLAGS.groups, "name", "<groups>")}: {e}',
            file=sys.stderr)
      return 1

  input_file: TextIO = FLAGS.input_file
  try:
    listing = dump(input_file.read(), raw=FLAGS.raw, groups=groups,
                   tokens=FLAGS.tokens, as_json=FLAGS.json,
                   apply_transforms=FLAGS.apply_transforms)
  except FormatError as e:
    print(f'{getattr(input_file, "name", "<input>")}: {e}', file=sys.stderr)
    return 1

  FLAGS.output.write(listing)
  return 0


if __name__ == '__main__':
  flags = _define_flags()
  FLAGS = flags.parse_args()
  sys.exit(main(FLAGS))

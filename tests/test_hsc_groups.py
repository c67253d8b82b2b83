"""Tests for hsc_groups."""

import io

import pytest

from hsc_groups import DEFAULT_GROUPS, ElementKind, load_groups


def test_default_groups_are_read_only():
  with pytest.raises(TypeError):
    DEFAULT_GROUPS['Data'] = ElementKind.DATA  # type: ignore


def test_load_groups():
  groups = load_groups(io.StringIO(
      '[groups]\n'
      'Pencil = pencil\n'
      'Brush = BRUSH\n'
      'Marker = Marker\n'))
  assert dict(groups) == {
      'Pencil': ElementKind.PENCIL,
      'Brush': ElementKind.BRUSH,
      'Marker': ElementKind.MARKER,
  }


def test_type_names_keep_their_case():
  groups = load_groups(io.StringIO('[groups]\nData = data\n'))
  assert 'Data' in groups
  assert 'data' not in groups


def test_empty_groups_section():
  assert dict(load_groups(io.StringIO('[groups]\n'))) == {}


def test_missing_section():
  with pytest.raises(ValueError, match=r'\[groups\]'):
    load_groups(io.StringIO('[layers]\nPencil = pencil\n'))


def test_unknown_kind():
  with pytest.raises(ValueError, match='Unknown element kind'):
    load_groups(io.StringIO('[groups]\nPencil = crayon\n'))

"""Tests for hsc_tokens."""

from hsc_tokens import Token, token_texts, tokenize


def texts(source):
  return token_texts(tokenize(source))


def test_empty_source():
  assert tokenize('') == []
  assert texts('  \n\t \r\n') == []


def test_comment_line_yields_nothing():
  assert texts('% foo\n') == []
  assert texts('% foo') == []


def test_comment_then_tokens():
  assert texts('% header\nData: []\n% trailer\n') == ['Data', ':', '[', ']']


def test_comment_after_space_and_operators():
  assert texts('Data: [] % a comment\nMarker') == ['Data', ':', '[', ']',
                                                  'Marker']
  assert texts('Data:%note\n[]') == ['Data', ':', '[', ']']


def test_percent_inside_a_token_is_not_a_comment():
  assert texts('ab%cd ef') == ['ab%cd', 'ef']


def test_operators_are_single_tokens():
  assert texts('A:[1,2]') == ['A', ':', '[', '1', ',', '2', ']']
  assert texts('],[') == [']', ',', '[']


def test_semicolon_stops_tokenizing():
  assert texts('A: [1,2,3];extra') == ['A', ':', '[', '1', ',', '2', ',',
                                       '3', ']', ';']
  assert texts('; anything (at all') == [';']


def test_string_literal_is_one_token():
  assert texts('Marker: (hello world)') == ['Marker', ':', '(hello world)']


def test_nested_parentheses():
  assert texts('(a (b) c) d') == ['(a (b) c)', 'd']


def test_string_literal_hides_operators_and_comments():
  assert texts('(x: [1, 2]; % y)') == ['(x: [1, 2]; % y)']


def test_unterminated_string_runs_to_end():
  assert texts('(foo(bar') == ['(foo(bar']
  assert texts('Marker: (oops') == ['Marker', ':', '(oops']


def test_string_directly_after_token():
  assert texts('abc(def)ghi') == ['abc', '(def)', 'ghi']


def test_apostrophes_stay_in_tokens():
  assert texts("[000000'000001]") == ['[', "000000'000001", ']']


def test_tokens_are_views_with_offsets():
  source = 'Data: [zz]'
  tokens = tokenize(source)
  assert tokens[0] == Token(source, 0, 4)
  assert tokens[3].start == 7
  assert tokens[3].length == 2
  assert tokens[3].end == 9
  assert str(tokens[3]) == 'zz'

"""Split hand-sketch (.hsc) source text into tokens.

Forfeited into the public domain with NO WARRANTY. Read LICENSE for details.

The tokenizer is a single pass over the source with a small character
automaton. It recognises four kinds of token:

- one-character operators: `:`, `[`, `]`, `,` and `;`;
- string literals, which start with `(` and run to the matching `)`. Nested
  parentheses are allowed and the whole literal, parentheses included, is one
  token;
- generic tokens: any other run of non-space characters (type names, numbers,
  base-36 digit runs);
- nothing else. Whitespace is skipped, and a `%` that doesn't fall inside a
  generic token or a string literal starts a comment running to the end of
  the line.

The `;` operator ends the sketch: nothing after it is scanned. Tokenizing never
fails; a string literal left open at the end of the text (usually because of
unbalanced parentheses) is still emitted, and it's up to the parser to decide
what to make of it.

This program is released into the public domain without any warranty. For
details, refer to the LICENSE file distributed with this program, or, if it's
missing, to http://unlicense.org.

Revision history
----------------

18 October 2026: Initial release.
"""

import dataclasses
import enum


OPERATORS = frozenset(':[],;')
NEWLINES = frozenset('\n\r')
WHITESPACE = frozenset(' \t\n\r')


@dataclasses.dataclass(frozen=True)
class Token:
  """A token: a view of `length` characters of `source` starting at `start`.

  Tokens don't copy the text they cover. Use `text` (or `str()`) to get it.
  """
  source: str = dataclasses.field(repr=False)
  start: int
  length: int

  @property
  def text(self) -> str:
    return self.source[self.start:self.start + self.length]

  @property
  def end(self) -> int:
    return self.start + self.length

  def __str__(self) -> str:
    return self.text


class _State(enum.Enum):
  LINE_START = enum.auto()
  COMMENT = enum.auto()
  SPACE = enum.auto()
  TOKEN = enum.auto()
  STRING = enum.auto()
  STRING_END = enum.auto()
  OP = enum.auto()
  END = enum.auto()


# States in which a `%` starts a comment instead of continuing a token.
_COMMENT_OK = frozenset(
    [_State.LINE_START, _State.SPACE, _State.OP, _State.STRING_END])


def tokenize(source: str) -> list[Token]:
  """Convert sketch source text into a list of tokens.

  Args:
    source: Full text of a sketch file.

  Returns:
    Tokens in the order they appear in `source`. Whitespace and comments
    produce no tokens. If a `;` operator appears, it is the last token.
  """
  tokens: list[Token] = []
  add = lambda i0, i1: tokens.append(Token(source, i0, i1 - i0))

  prev_state = _State.LINE_START
  token_start = 0
  paren_depth = 0
  for i in range(len(source) + 1):
    # Work out which state character i puts us in.
    if i == len(source):
      next_state = _State.END
    else:
      c = source[i]
      if prev_state is _State.COMMENT:
        next_state = _State.LINE_START if c in NEWLINES else _State.COMMENT
      elif prev_state is _State.STRING:
        next_state = _State.STRING
        if c == '(':
          paren_depth += 1
        elif c == ')':
          paren_depth -= 1
          if paren_depth <= 0: next_state = _State.STRING_END
      elif c == '%' and prev_state in _COMMENT_OK:
        next_state = _State.COMMENT
      elif c in NEWLINES:
        next_state = _State.LINE_START
      elif c in WHITESPACE:
        next_state = _State.SPACE
      elif c in OPERATORS:
        next_state = _State.OP
      elif c == '(':
        next_state = _State.STRING
      else:
        next_state = _State.TOKEN

    # Operators are one character long, so they're done as soon as we've
    # moved past them. A `;` finishes the whole sketch.
    if prev_state is _State.OP:
      add(i - 1, i)
      if source[i - 1] == ';': return tokens

    if prev_state is not next_state:
      if prev_state is _State.TOKEN:
        add(token_start, i)
      if next_state is _State.TOKEN:
        token_start = i
      elif next_state is _State.STRING:
        token_start, paren_depth = i, 1
      elif next_state is _State.STRING_END:
        add(token_start, i + 1)
      elif prev_state is _State.STRING and next_state is _State.END:
        add(token_start, i)  # Unterminated string literal.

    prev_state = next_state

  return tokens


def token_texts(tokens: list[Token]) -> list[str]:
  """The text of each token in `tokens`; handy for printing and testing."""
  return [t.text for t in tokens]

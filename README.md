# parsekit

parsekit is a small library of parser combinators that work on Python strings. It
also defines node types and text rules for a few markdown elements: ATX headings,
blank lines, thematic breaks, link labels and link destinations.

## Parsers

A parser takes a string and returns the pair `(remaining, parsed)`. When it does not
match, it raises `ParseError`. The error's `input` attribute holds the input the parser
was given. A failed parse consumes nothing, so the caller can go back to that input.

```python
from parsekit.combinators import ParseError
from parsekit.primitives import tag, take

parser = take(4).and_(take(4))
parser.parse("test1234")          # ("", ("test", "1234"))

tag("ab").parse("abc")            # ("c", "ab")

try:
    tag("bc").parse("abc")
except ParseError as error:
    print(error.input)            # "abc"
```

### `parsekit.combinators`

`Parser` wraps a function from an input string to `(remaining, value)`. You can also
call a `Parser` object directly. It has these methods:

- `and_(right)` runs this parser and then `right`, and returns both values as a pair. If either one fails, the parse goes back to the original input.
- `or_(right)` tries this parser and, if it fails, tries `right`.
- `map(func)` transforms the parsed value.
- `validate(func)` rejects the parse when `func` returns false for the value.
- `consumed()` returns `(consumed_text, value)`.
- `recognize()` returns only the consumed text.
- `preceded(after)` runs both parsers and keeps only the value from `after`.

Each method has a matching free function: `and_`, `or_`, `map_`, `validate`,
`consumed`, `recognize` and `preceded`. These functions accept plain callables as well
as `Parser` objects.

The module also provides:

- `as_parser(obj)`, which wraps a callable in a `Parser`.
- `fail()`, a parser that always fails.

### `parsekit.primitives`

- `tag(text)` matches `text` as a prefix of the input. An empty tag matches any input.
- `take(count)` takes exactly `count` characters. It raises `ValueError` if `count` is not positive.
- `take(count).that(predicate)` also requires every character it takes to satisfy `predicate`.
- `rest(input)` is a parse function that returns `("", input)` and never fails.

### `parsekit.sequences`

- `repeated(parser)` applies `parser` as many times as it succeeds and returns a list of the values. It stops if the parser matches without consuming anything.
- `repeated(parser).at_least(n)` fails when there are fewer than `n` matches.
- `sequence(p1, p2, ...)` runs the parsers in order and returns a tuple of their values.
- `one_of(p1, p2, ...)` returns the first parser that succeeds.

`sequence` and `one_of` each need at least two parsers.

### `parsekit.take_while`

`take_while(predicate)` consumes characters while `predicate` holds, and never fails.
You can bound it with these methods:

- `.at_most(n)`
- `.at_least(n)`
- `.between(min, max)`
- a chain such as `.at_least(1).at_most(2)`

Bounds must be positive, and `min` must not be greater than `max`. Breaking either
rule raises `ValueError`.

```python
from parsekit.take_while import take_while

take_while(lambda c: True).at_least(1).at_most(2).parse("abc")   # ("c", "ab")
```

### `parsekit.predicates`

- `equals(value)` builds a predicate that is true when its argument equals `value`.
- `is_one_of(values)` builds a predicate that is true when its argument is one of `values`.
- `not_(predicate)` builds a predicate that negates `predicate`.

## Markdown pieces

`parsekit.ast` defines frozen dataclasses. Each one keeps the source segment it was
built from, and `segments()` yields that segment.

- `AtxHeading(segment, title, level)`
- `BlankLine(segment)`
- `ThematicBreak(segment)`
- `LinkLabel(segment)`
- `BracketedLinkDestination(segment)`
- `UnbracketedLinkDestination(segment)`

All of these share the base class `SingleSegment`. `LinkDestination` is the union of
the two destination types. `ToHtml` is a protocol for objects with a `to_html()` method.

`parsekit.rules` holds the text rules behind these types:

- For ATX headings:
  - `extract_title(segment)` strips surrounding whitespace and a trailing closing sequence of hashes.
  - `is_closing_sequence(text)` checks whether `text` is made only of hashes.
- For link labels:
  - `is_valid_label_content(segment)` requires a non-whitespace character and at most `MAX_LABEL_CHARACTERS` (999) characters.
  - `valid_label_character_count(segment)` applies only the 999-character limit.
- For unbracketed link destinations:
  - `is_opening_char(character)` is false for spaces, ASCII control characters and `<`.
  - `is_continuation_char(character)` is false for spaces and ASCII control characters.

```python
from parsekit.rules import extract_title

extract_title(" Heading ###  \n")   # "Heading"
```

## What it does not do

The markdown types are plain data. The package has no parser that reads a markdown
document, or a single line, into these nodes. Nothing in it renders HTML, and no
node implements `ToHtml`. It has no command-line tool.

## Tests

Install the test extra, then run pytest:

```
pip install -e ".[test]"
pytest
```
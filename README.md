# toonkit

Encode JSON-like Python data into TOON (Token-Oriented Object Notation).
TOON is compact and easy to read, and it is meant for putting structured
data into prompts while spending fewer tokens than JSON would.

## Installation

```
pip install toonkit
```

## Encoding

```python
from toonkit.encoder import encode, encode_object, encode_array
from toonkit.options import EncodeOptions, Delimiter

encode({"name": "Alice", "age": 30})
# name: Alice
# age: 30

encode({"tags": ["reading", "gaming", "coding"]})
# tags[3]: reading,gaming,coding

encode({"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]})
# users[2]{id,name}:
#   1,Alice
#   2,Bob

encode({"tags": ["a", "b", "c"]}, EncodeOptions().with_delimiter(Delimiter.PIPE))
# tags[3|]: a|b|c
```

`encode` accepts dicts, lists, tuples, dataclass instances and primitives.
Before writing, values are normalised: non-finite floats become `null` and
negative zero becomes `0`. Non-string object keys raise `ToonError`.

Arrays of objects that share the same keys and hold only primitive values
are written as tables; arrays of primitives are written inline; anything
else becomes a list of `- ` items.

`encode_object` and `encode_array` work the same way but raise
`toonkit.options.TypeMismatchError` when the value is not an object or an
array. All encoding errors derive from `toonkit.options.ToonError`.

### Options

`EncodeOptions` is immutable; each `with_*` method returns a new copy.

- `with_delimiter(Delimiter.COMMA | Delimiter.TAB | Delimiter.PIPE)`: the
  separator for inline arrays and table rows. A non-comma delimiter also
  appears in the array header, e.g. `[3|]`.
- `with_indent(Indent(n))`: spaces per nesting level (2 by default).
- `with_key_folding(KeyFoldingMode.SAFE)`: collapse chains of single-key
  objects into dotted keys, e.g. `a.b.c: 1`. Folding is skipped when the
  dotted key would clash with an existing sibling key.
- `with_flatten_depth(n)`: the most segments a folded key may hold
  (unlimited by default).

## Text helpers

`toonkit.text` holds the quoting rules used by the encoder:
`needs_quoting`, `escape_string`, `quote_string`, `is_valid_unquoted_key`,
`is_identifier_segment`, `is_keyword`, `is_literal_like`, `format_number`,
`normalize` and `validate_depth`.

```python
from toonkit.text import escape_string, needs_quoting

escape_string("hello\nworld")   # 'hello\\nworld'
needs_quoting("true", ",")      # True
```

`toonkit.writer.Writer` is the low-level builder the encoder writes
through; `toonkit.tabular` and `toonkit.folding` decide array layout and
key folding.

## Interactive state

The package also holds the state model for an interactive converter, as
plain Python objects that any front end can drive:

- `toonkit.app_state.AppState`: mode, overlay panels, messages and the
  encode/decode options with their adjusting methods.
- `toonkit.editor_state.EditorState`, `toonkit.file_state.FileState`,
  `toonkit.repl_state.ReplState`: panel text, open file and history, and
  the REPL transcript with command history.
- `toonkit.keybindings.handle_key` and `shortcuts`: key presses mapped to
  `Action` values.
- `toonkit.repl_command.parse_command`: splits a REPL line into a command
  name, inline data and arguments.
- `toonkit.theme.Theme` and `toonkit.file_browser.FileBrowser`: colours
  and a directory listing for opening `.json` and `.toon` files.

## What this package does not do

- It does not decode TOON text back into Python data. `DecodeOptions`
  exists only as a setting held in `AppState`; there is no decoder.
- It has no command-line tool and no terminal screen. The interactive
  state above is not drawn or run by anything in the package, and it does
  not count tokens.
# replline

`replline` is a single-line terminal editor for interactive interpreters.
It reads one line at a time from the keyboard. While you type, it provides:

- syntax colouring of the line: numbers, strings, keywords, variables, type
  annotations after `$`, and comments from `#` on;
- automatic pairing of `()`, `[]`, `{}` and quotes when they are typed at the
  end of the line;
- horizontal scrolling when the line is wider than the terminal;
- history browsing with Up and Down. Tab takes the shown history entry into
  the current line;
- Tab completion of variable names and of object properties (`obj.prop`).
  Pressing Tab again cycles through the candidates, and Right accepts the
  shown hint.

## Installation

```
pip install replline
```

## Reading lines

```python
from replline.editor import LineEditor, NewLine, Interrupt, NonAscii

editor = LineEditor("> ", keywords={"if", "else", "while"})
while True:
    signal = editor.readline(scope)
    if isinstance(signal, NewLine):
        print(signal.content)
    elif isinstance(signal, Interrupt):   # Ctrl+C or Ctrl+D
        break
    elif isinstance(signal, NonAscii):    # a non-ASCII character was typed
        continue
```

`LineEditor(prompt, *, support_ansi=True, keywords=(), console=None)` takes
the following arguments:

- `support_ansi`: set it to `False` to write the line without colour codes.
- `keywords`: the words shown as keywords. `true` and `false` are always
  keywords.
- `console`: any object with the methods of `replline.editor.Console`. The
  default writes to the real terminal through `replline.terminal`.

Each line gets a line-number label at its right-hand end.
`editor.line_count` goes up by one for every line that is entered, and
`editor.history` holds the lines entered so far.

The `scope` passed to `readline` supplies names for completion. It needs:

- a `completer` attribute, which is a `replline.completer.Completer` of
  variable names;
- a `read_var(name)` method that returns a variable's value.

For `obj.prop` completion, a value must provide `get(name)`, which returns a
property value, and `get_completer()`, which returns a `Completer` of
property names or `None`. When the name cannot be resolved, no hint is
shown.

## Building blocks

The parts of the editor can also be used on their own.

```python
from replline.completer import Completer

completer = Completer(["print", "println", "pow"])
completer.complete("pr")      # ['int', 'intln']
```

```python
from replline.tokenizer import tokenize

tokens = tokenize("x = 10 # note", keywords={"if", "else"})
[t.content for t in tokens]   # ['x', ' ', '=', ' ', '10', ' ', '# note']
```

- `replline.tokenizer` provides `tokenize`, `Token`, whose
  `colored(start, end)` returns part of the token with ANSI styling, and the
  enums `TextType` and `TokenType`.
- `replline.history.History` is the list of lines already entered. It has
  `previous()`, `next()`, `current()`, `reset_index()` and `append()`.
- `replline.candidate.Candidate` is the cycling list of completion hints. It
  has `set()`, `next()`, `current_hint()` and `clear()`.
- `replline.line.Line` is the line being edited. It keeps its tokens up to
  date as you call `push`, `push_str`, `pop`, `insert` and `remove`.
- `replline.analyzer` provides `get_end_part(tokens)`, which returns the
  trailing `a.b.c` chain, and `analyze(tokens, scope)`, which returns the
  completion candidates. `analyze` raises `AnalysisError` when the chain
  cannot be resolved.
- `replline.terminal` has the following functions:
  - `width`, `height` and `flush`;
  - cursor movement: `move_to_col`, `cursor_left`, `cursor_right`,
    `save_position` and the related functions;
  - `cursor_position`, which queries the terminal;
  - `get_key`, which reads one key press as a `Key`;
  - `print_line`, which ends output with CR LF;
  - `log(content)`, which overwrites `log.txt` in the working directory.
- `replline.ascii` provides `is_identi_ascii` and `ascii_to_num`.

## What it does not do

`replline` only reads and displays lines. It does not evaluate them, and it
provides no interpreter or command of its own. Completion depends entirely
on the `scope` you pass in.

The editor works on a single terminal row. It has no multi-line editing,
and it does not accept non-ASCII input: typing such a character ends the
line with `NonAscii`. History lasts only as long as the `LineEditor` object
and is never saved to disk.
# mshell

Small building blocks for a minimal interactive shell: the names of its
built-in commands, the redirection operators it understands, its error
messages, and a quote tracker used while validating a command line.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Built-ins and redirections

`mshell.constants` holds the shell's fixed names and messages.

```python
from mshell.constants import Operation, is_builtin

is_builtin("cd")        # True
is_builtin("ls")        # False

Operation.from_token(">>")   # Operation.AR
Operation.from_token("<<")   # Operation.HDR
Operation.RTF.token          # ">"
Operation.from_token("|")    # raises ValueError
```

`Operation` is an `IntEnum` covering the four redirection kinds:

| Member | Value | Operator | Meaning            |
|--------|-------|----------|--------------------|
| `RTF`  | 0     | `>`      | redirect to a file |
| `RTI`  | 1     | `<`      | redirect input     |
| `AR`   | 2     | `>>`     | append to a file   |
| `HDR`  | 3     | `<<`     | heredoc            |

The builtins recognised by `is_builtin` are `echo`, `cd`, `pwd`, `export`,
`unset`, `env` and `exit` (also available as the `BUILTINS` frozenset).
The module further defines the operator strings (`REDIRECTION_TO_FILE`,
`APPEND_REDIRECTION`, ...), `STATUS_CODE` (`"$?"`), `NL_FLAG` (`"-n"`),
the heredoc `TEMP_FILE` path and its `PERMS`, exit codes, and the error
message strings such as `UNCLOSED_QUOTE` and `NO_FILE_AFTER_REDIRECTION`.

## Quote tracking

`mshell.quoting.QuoteInfo` follows single and double quotes as a command
line is scanned one character at a time. A quote opens only when no other
quote is open, and closes only on the same quote character.

```python
from mshell.quoting import QuoteInfo, is_quote, skip_whitespace

command = "  echo 'it\"s' done"
info = QuoteInfo()
for pos, c in enumerate(command[skip_whitespace(command):]):
    if is_quote(c):
        info.process_quote(c, pos)

info.in_quotes   # False: every quote was closed
```

- `process_quote(c, pos)` opens a quote and records `pos` in `start_pos`,
  or closes the open quote when `c` matches it.
- `process_space_quote(c)` does the same tracking without recording where
  the quote started.
- `reset()` returns the tracker to its initial state (`in_quotes=False`,
  `quote_char=""`, `start_pos=-1`).
- `skip_whitespace(command)` returns the index of the first non-whitespace
  character, or the length of the string if there is none.
- `is_quote(c)` tells whether `c` is `'` or `"`.
- `init_space_check(command, pos)` tells whether `command` is not `None`
  and `pos` is not negative.

## What this package does not do

There is no command loop, tokenizer, variable expansion, builtin
implementation, redirection handling or process execution here. The
package provides only the constants and quote-tracking helpers above; a
shell built on it has to supply those parts itself.
# minishell

A small interactive shell with a few built-in commands, and the string,
byte-buffer and list helpers it is built on.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The shell

```
minishell
```

This shows the prompt `./minishell: ` and reads one line at a time. Each
non-empty line is added to the history and split into words on spaces. Two
builtins are recognised:

- `echo [-n] words...` prints the words with one space between them. With `-n`
  as the first argument, no newline is printed at the end.
- `pwd` prints the current working directory.

Any other line is ignored. Ctrl-C abandons the current line and starts a new
prompt. The quit signal is ignored while the shell runs. End of input (Ctrl-D)
leaves the shell.

The shell can also be driven from code:

```python
import io
from minishell.shell import Shell

buf = io.StringIO()
shell = Shell(out=buf)
shell.run(["echo hello world", "pwd"])
print(shell.history)   # ['echo hello world', 'pwd']
```

`Shell.execute(line)` runs a single line and returns the builtin's status, or
`None` when the line was empty, held only spaces, or named an unknown command.

## The builtins

`minishell.builtins` has the commands on their own:

- `echo(args, out=None)` writes `args[1:]` joined by spaces; `args[0]` is the
  command name.
- `pwd(out=None)` writes the working directory and returns 0, or 1 if it
  cannot be read.
- `cd(path)` changes the working directory and returns 0, or 1 with a message
  on standard error. The interactive shell does not offer it as a command.

```python
import io
from minishell.builtins import echo

buf = io.StringIO()
echo(["echo", "-n", "hi"], buf)
assert buf.getvalue() == "hi"
```

## Helper modules

- `minishell.chars` classifies ASCII characters and changes their case.
- `minishell.memory` zeroes, fills, searches, compares, copies and moves bytes
  in buffers.
- `minishell.strtools` splits, searches, compares, trims, joins and copies
  strings within a size bound.
- `minishell.numconv` parses decimal integers from text and formats them back.
- `minishell.fdio` writes characters, strings, lines and numbers to a stream or
  a file descriptor.
- `minishell.linkedlist` provides `Node` and `LinkedList`, a singly linked list
  of values with `append`, `prepend`, `last`, `for_each` and `map`.

## What it does not do

The shell runs no external programs: there is no search of `PATH`, no pipes
between commands and no redirection to or from files. Lines that do not name
`echo` or `pwd` are silently ignored, and the shell keeps no exit status,
variables or environment of its own.
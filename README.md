# procparse

A small toolkit in two halves: helpers for running child processes on POSIX
systems, and two tiny recursive-descent parsers.

## Process helpers

### `procparse.picoshell.picoshell(cmds)`

Runs a list of argument vectors as a pipeline, like `ls | wc -w`. Each
command's standard output feeds the next command's standard input. The first
command reads the caller's standard input, and the last writes to the
caller's standard output. Every command is waited for.

It returns `0` when every command exited normally with status 0. It returns
`1` when any command failed, was killed by a signal, or could not be started.
A command that cannot be started (an empty argument vector, or a program that
is not found) counts as a failure. The command after it sees end of input.

### `procparse.popen.popen(file, argv, mode)`

Starts the program `file`, looked up on `PATH`, with the argument vector
`argv`. `argv[0]` is included in that vector. The function returns one end of
a pipe as an unbuffered binary file object:

- mode `"r"`: read the program's standard output (`read`, `readline`,
  iteration);
- mode `"w"`: write to the program's standard input (`write`).

The returned object also offers `fileno()`, `closed` and `process`, which is
the underlying `subprocess.Popen`. It works as a context manager. `close()`
closes the pipe, waits for the program, and returns its exit status.

A missing file, a missing argument vector, or an unknown mode raises
`ValueError`. A program that cannot be started raises `OSError`.

### `procparse.sandbox.sandbox(func, timeout, verbose)`

Calls `func` in a forked child process and returns `True` when it behaved.
It behaved when it returned, or exited with status 0, within `timeout`
seconds. A timeout of `0` means no limit.

It returns `False` in these cases:

- the function exits with another status;
- the function raises an exception, which gives exit status 1;
- the function is killed by a signal;
- the function runs out of time, in which case the child is killed.

With `verbose` set, a one-line verdict is printed, for example
`Nice function!`, `Bad function: timed out after 3 seconds`, or the name of
the signal that killed it. A negative timeout raises `ValueError`.

## Parsers

### `procparse.argo`

Reads a small, strict subset of JSON:

- non-negative integers, written as runs of digits;
- double-quoted strings, where a backslash takes the next character
  literally;
- objects that map strings to values.

No whitespace is allowed, and anything after the first complete value is
ignored.

- `argo(stream)` reads one value from a text stream.
- `parse(text)` reads one value from a string.
- `serialize(value)` writes an `int`, `str` or `dict` back out in the same
  compact form. Any other type raises `TypeError`.

Malformed input raises `procparse.argo.ParseError`, a `ValueError`. Its
message is `unexpected token 'c'` or `unexpected end of input`.

### `procparse.vbc`

Evaluates expressions made of single digits, `+`, `*` and parentheses. `*`
binds tighter than `+`, and both group to the left. No whitespace is allowed.

- `parse_expr(text)` returns a tree of frozen `Node` dataclasses.
- `Node.evaluate()` computes the value of that tree.

Malformed input raises `procparse.vbc.ParseError`, a `ValueError`. Its
message is `Unexpected token 'c'` or `Unexpected end of file`. Two adjacent
digits are rejected, and so are unbalanced parentheses.

## Usage

```python
from procparse.picoshell import picoshell
from procparse.popen import popen
from procparse.sandbox import sandbox
from procparse.argo import parse, serialize
from procparse.vbc import parse_expr

picoshell([["ls"], ["wc", "-w"]])           # 0 on success

with popen("ls", ["ls", "-l"], "r") as pipe:
    listing = pipe.read()

sandbox(lambda: None, 5, True)              # prints "Nice function!", returns True

value = parse('{"a":1,"b":"x\\"y"}')        # {'a': 1, 'b': 'x"y'}
serialize(value)                            # '{"a":1,"b":"x\\"y"}'

parse_expr("3+4*(2+1)").evaluate()          # 15
```

## Command line

```
argo FILE
```

Parses the file and prints its serialized form. On malformed input it prints
the error message and exits with status 1. It also exits with status 1 if the
file cannot be opened, or if it is not given exactly one argument.

```
vbc "EXPRESSION"
```

Prints the value of the expression. On malformed input it prints the error
message and exits with status 1.

## What it does not do

- `picoshell` takes ready-made argument vectors. It does not parse shell
  command lines, quoting, redirections or variables.
- The process helpers rely on POSIX. `sandbox` needs `os.fork`.
- `argo` understands only integers, strings and objects. It has no arrays,
  negative or fractional numbers, booleans, `null`, or whitespace.

## Installation

```
pip install .
```

Run the tests with `pip install .[test]`, then `pytest`.
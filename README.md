# pipex

`pipex` feeds a file through two commands and writes the result to
another file. It does the same as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installing

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

You can also start it with `python -m pipex.cli` and the same four
arguments.

How it runs:

- It takes exactly four arguments.
- The input file is opened for reading.
- The output file is created or truncated. A new file is created with
  mode `0777`, less the umask.
- Each command string is split on spaces, and empty words are dropped.
- The first word of each command is looked up as `<dir>/<word>` in each
  directory listed in `PATH`, in order. The first path that exists is
  used.
- Both commands start together and are joined by a pipe. `pipex` waits
  for both of them to finish.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

### Errors and exit status

- If there are not exactly four arguments, `pipex` prints
  `Invalid number of arguments.` and exits with status 1.
- If the input file cannot be opened, `pipex` prints `Infile: ` and the
  system error message, then exits with status 1. The output file works
  the same way, with the prefix `Outfile: `.
- If the pipe cannot be created, the message starts with `Pipe: `.
- If `PATH` is not set, it prints `PATH: variable not set`. Each of these
  errors exits with status 1.
- If a command cannot be found on `PATH`, `pipex` prints
  `Command not found`. The other command still runs.
- If a command is found but cannot be started, `pipex` prints its name
  and the system error.
- In every other case `pipex` exits with status 0, whatever statuses the
  two commands exit with.

### What it does not do

- It runs exactly two commands. It has no here-document mode.
- Command strings are split on spaces only. Quotes and other shell syntax
  are not interpreted.
- A command given as a path, such as `/bin/cat`, is still looked up under
  the `PATH` directories.

## Using it from Python

```python
from pipex.cli import run_pipeline, PipexError

try:
    status1, status2 = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
except PipexError as exc:
    print(exc.label, exc.reason)
```

`run_pipeline(infile, cmd1, cmd2, outfile, env=None)` returns the exit
status of each command. A command that cannot be found or started counts
as status 1. `env` is the environment used to find `PATH` and to run the
commands. When it is `None`, `os.environ` is used. If a file cannot be
opened, the pipe cannot be created or `PATH` is missing,
`run_pipeline` raises `PipexError`.

`pipex.paths` has the path lookup:

- `find_path(environ)` returns the value of `PATH` and raises `KeyError`
  when it is missing.
- `get_cmd(paths, cmd)` returns the first `<dir>/<cmd>` that exists, or
  `None`.

## Other helpers

- `pipex.textutil` has string helpers that follow C library conventions:
  - `split_words(text, sep)` splits on a single character and drops empty
    words.
  - `atoi(text)` reads a leading integer, wrapped to 32 bits.
  - The module also has `itoa`, `strtrim`, `substr`, `strnstr`, `strncmp`
    and `strcmp`.
- `pipex.printf` has a small formatter:
  - `format_string(fmt, *args)` supports `%c %s %p %d %i %u %x %X %%`. An
    unknown conversion is dropped.
  - `printf(fmt, *args)` writes the result to standard output and returns
    its length.
  - `put_number_base(num, base)` renders a number using the given digits.
- `pipex.lines` reads a text or binary stream one line at a time, in
  chunks of `buffer_size` characters (default 100):
  - `LineReader(stream, buffer_size)` returns lines, newline included. Its
    `readline()` returns `None` at the end, and the reader can also be
    iterated.
  - `read_lines(stream, buffer_size)` yields the same lines.
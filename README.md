# pipex

`pipex` runs two commands connected by a pipe. The first reads from an input
file and the second writes to an output file, as this shell line does:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

For the tests:

```sh
pip install ".[test]"
pytest
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

This counts the lines of `input.txt` that contain `error` and writes the
count to `count.txt`.

### Behaviour

- Exactly four arguments are required. With any other number, pipex prints
  `argc incorrecto` to standard output and exits with status 1.
- Each command is split on spaces; repeated spaces are ignored. Quotes and
  other shell syntax are not interpreted.
- The input file is opened for reading first. If it cannot be opened, pipex
  reports the error and exits with status 1.
- The output file is then created if it does not exist (mode `0777`, less
  the umask) and truncated if it does. If it cannot be opened, the exit
  status is 1.
- Each command name is looked up as `directory/name` in the directories
  listed in `PATH`, in order, and then in `/usr/bin/`. The first path that
  exists is used. If either command cannot be found, pipex prints
  `Command not found: <name>` and exits with status 127. The output file has
  already been created or truncated at that point.
- Both commands are started together, the first one's output feeding the
  second one's input, and pipex waits for both. A command whose executable
  cannot be started is reported on standard error as `execve cmd1: ...` or
  `execve cmd2: ...`.
- Once both commands have been run, pipex exits with status 0, whatever
  their own exit statuses were.

## Library use

`pipex.config`:

- `parse_args(argv, env)` takes the four arguments (without the program
  name) and an environment mapping, and returns a `PipexConfig` with the
  fields `infile`, `cmd1`, `cmd2` (argument lists), `outfile`,
  `directories` and `env`. It raises `UsageError` for the wrong number of
  arguments.
- `find_path(env)` returns the value of `PATH`, or `None`.
- `path_directories(path)` splits a search path on `:`, dropping empty
  entries, and appends `/` to each directory.
- `resolve_command(directories, name)` returns the first existing
  `directory + name`, falling back to `/usr/bin/`, and raises
  `CommandNotFoundError` otherwise.
- Errors derive from `PipexError`.

`pipex.runner`:

- `open_infile(path)` and `open_outfile(path)` open the two files in binary
  mode, raising `PipexError` on failure.
- `run_pipeline(config, infile, outfile)` resolves both commands, runs them
  joined by a pipe and returns their exit codes as a two-item list; a
  command that could not be started counts as 1.
- `main(argv=None)` is the command-line entry point and returns the exit
  status. Without `argv` it reads `sys.argv[1:]` and uses `os.environ`.

`pipex.words`:

- `split_words(text, sep)` splits on a single character, ignoring leading,
  trailing and repeated separators; `count_words(text, sep)` counts the
  pieces.

`pipex.textops` holds string helpers that follow C library conventions:

- `atoi(text)` parses a leading, optionally signed decimal integer after
  whitespace, giving 0 when there is none.
- `itoa(number)` formats an integer.
- `split(text, sep)` splits on one character and drops empty pieces.
- `strtrim(text, chars)` strips the given characters from both ends.
- `substr(text, start, length)` returns up to `length` characters from
  `start`, or `""` when `start` is past the end.
- `strnstr(haystack, needle, limit)` returns the index of `needle` lying
  within the first `limit` characters, or `None`.
- `strncmp(first, second, limit)` returns 0 or the code-point difference of
  the first differing characters.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return the text that
  fits a buffer of `size` characters, terminator included, together with
  the length the full result would need.

Negative lengths, starts and sizes raise `ValueError`.

## Limitations

- Exactly two commands are supported; longer pipelines are not.
- There is no here-document mode and no appending to the output file.
- Command strings are not parsed like a shell would parse them.
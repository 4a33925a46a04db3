# log2

`log2` is an out-of-the-box logger built on the standard `logging` module.
It writes to stdout, to a file, or to both, from a background thread, and
rotates the file once it reaches a given size. Aged files can be kept as
plain text or gzip-compressed.

Starting a `log2` instance attaches a handler to the root logger, so every
record sent through `logging.getLogger(...)` reaches it. The logger name is
used as the "module" of a record.

## Installation

```
pip install log2
```

There are no runtime dependencies.

## Logging to stdout

```python
import logging
from log2.logger import start

handle = start()

log = logging.getLogger("app")
log.info("order was executed")
log.error("network connection was broken")

handle.stop()
```

Lines on stdout are coloured by level and, with the defaults, show the
logger name and line number:

```
[2024-01-01 12:00:00.000] [INFO] [app:7] order was executed
```

To configure the stdout logger, build it with `stdout()` and finish with
`start()`:

```python
from log2.logger import stdout

handle = (
    stdout()
    .level("trace")
    .module(False)
    .module_with_line(True)
    .module_filter(lambda module: module != "")
    .start()
)
```

`Handle` is also a context manager that stops the instance on exit:

```python
from log2.logger import stdout

with stdout().level("info").start():
    ...
```

Only one instance may run at a time; starting a second one while another is
running raises `RuntimeError`.

## Logging to a file

`open(path)` from `log2.logger` creates the file (and its directory) and
returns a `Log2` builder. By default each file holds up to 100 MB and 10
files are kept.

```python
from log2.logger import open as open_log

handle = (
    open_log("log.txt")
    .size(100 * 1024 * 1024)   # maximum size of each file
    .rotate(20)                # number of files to keep
    .tee(True)                 # also write to stdout
    .module(True)              # show the module name
    .module_with_line(True)    # ... and the line number
    .compress(True)            # gzip the aged files
    .start()
)
```

File lines are written as UTF-8 without colour:

```
[2024-01-01 12:00:00.000] [INFO] [app:7] order was executed
```

Once `log.txt` is full it is moved aside and a fresh one is started; the
same check is made when the file is first opened:

```
log.txt
log.1.txt        (log.1.txt.gz with compression)
log.2.txt
...
log.9.txt
```

A rotate count of 1 or less turns rotation off. The file is flushed at most
once a second while new lines arrive, on `logging` flush requests, and when
the instance stops.

If the background thread hits an I/O error it prints `error: <message>` to
stdout and ends; the exception is kept on `Worker.error`.

## Options

| `Log2` method              | Effect                                                       |
|----------------------------|--------------------------------------------------------------|
| `module(show)`             | show the module name, without the line number                |
| `module_with_line(show)`   | show the module name and line number                         |
| `tee(stdout)`              | copy every line to stdout                                    |
| `size(filesize)`           | maximum size of one file in bytes                            |
| `rotate(count)`            | number of files to keep                                      |
| `module_filter(predicate)` | log only records whose module name the predicate accepts     |
| `format(formatter)`        | custom line formatter, called as `formatter(record, tee)`    |
| `level(name)`              | `"trace"`, `"debug"`, `"info"`, `"warn"`, `"error"`, `"off"` |
| `compress(on)`             | gzip files as they are rotated                               |

`Log2.enabled(level)` tells whether a `Level` passes the configured level.

A custom formatter receives the `logging.LogRecord` and a flag telling
whether the line is meant for stdout (where colour is welcome) or for the
file, and returns the complete text to write, including any trailing
newline.

## Levels

`log2.levels` defines `Level` (`OFF`, `ERROR`, `WARN`, `INFO`, `DEBUG`,
`TRACE`). `get_level(name)` parses a name case-insensitively and falls back
to `DEBUG` for unknown names. `set_level(level)` sets the root logger's
level from a `Level` or its name.

`TRACE` is registered with `logging` as level number 5:

```python
log.log(5, "send order request to server")
```

## The handle

`start()` returns a `Handle`:

- `handle.set_level("info")` changes the level while running.
- `handle.redirect("other.txt")` creates the file if needed and switches
  file output to it.
- `handle.stop()` flushes the file, stops the background thread and
  detaches the handler from the root logger.

## Lower-level pieces

- `log2.rotation` offers `split_path`, `compress_file`, `maintain` and
  `rotate` for size-based rotation of a file.
- `log2.worker.Worker` is the background writer, fed through `write`,
  `tee`, `flush`, `redirect` and `stop`.

## Demo

```
log2-demo --help
log2-demo stdout
log2-demo file --path log.txt
log2-demo format --path custom.txt
```

`stdout` prints coloured sample lines, `file` writes a poem repeatedly to
1 KB files rotated and compressed, and `format` logs to a file and stdout
with a custom `CUSTOM`-prefixed format.

## What it does not do

Rotation is by size only; there is no time-based rotation, and there is no
configuration file: everything is set through the `Log2` builder.
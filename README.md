# cycutil

A handful of small, dependency-free utilities.

- `cycutil.ring_queue.RingQueue` is a first-in first-out ring queue. With no capacity given, or a
  capacity of 0, it grows on demand, starting at 31 elements. With a positive capacity it stays
  at that size and drops its oldest entries when it is full. It supports `len()`, iteration,
  `reversed()`, indexing, `front()`, `back()`, `get()`, `pop(count)`, `walk(func)` and
  `walk_reverse(func)`.
- `cycutil.statistics.MinMaxValue` is a thread-safe record of the smallest and largest value
  seen. Without an initial value, the minimum starts at `inf` and the maximum at `-inf`.
- `cycutil.statistics.PeriodValue` gives the sum and count of the values pushed within a sliding
  time window, given in milliseconds. A timestamp of 0, the default, means "now", read from a
  monotonic clock.
- `cycutil.string_util.size_to_string` formats a byte count with a `KB`, `MB` or `GB` suffix and
  two decimals. Sizes below 1024 get no unit and end in a single space.
- `cycutil.options` holds the option table types: `OptionSpec`, `ArgType`, `OptFlag` and
  `OptError`. It also holds the matching helpers `calc_match` and `lookup_option`.
- `cycutil.simple_opt.SimpleOpt` is a command-line option parser driven by a list of
  `OptionSpec` entries. It handles the following:
  - short, long and word options;
  - combined (`--opt=ARG`, `-oARG` with `OptFlag.SHORTARG`) and separate (`-o ARG`) arguments;
  - clumped short flags (`-abc` with `OptFlag.CLUMP`);
  - partial matching, unless `OptFlag.EXACT` is set;
  - multi-argument options through `multi_arg(count)`.

  Each processed option comes back as a `ParsedOption` with `id`, `text`, `arg`, `error` and
  `ok`. Problems are reported through `error` rather than raised. The exception is
  `multi_arg`, which raises `MultiArgError`. Arguments that are not options are collected, in
  order, by `files()`. A leading `/` counts as an option marker only on Windows.

## Installation

```
pip install .
```

## Examples

```python
from cycutil.ring_queue import RingQueue

rq = RingQueue(4)          # fixed capacity 4; the oldest entries are dropped on overflow
for i in range(6):
    rq.push(i)
list(rq)                   # [2, 3, 4, 5]
rq.front(), rq.back()      # (2, 5)
```

```python
from cycutil.statistics import PeriodValue

pv = PeriodValue(1000)     # one-second window
pv.push(3, 100)
pv.push(4, 900)
pv.sum_and_counts(1500)    # (4, 1): the first value has expired
```

```python
from cycutil.string_util import size_to_string

size_to_string(2048)       # '2.00 KB'
```

```python
from cycutil.options import ArgType, OptionSpec
from cycutil.simple_opt import SimpleOpt

options = [
    OptionSpec(1, "-v", ArgType.NONE),
    OptionSpec(2, "--file", ArgType.REQ_SEP),
]
parser = SimpleOpt(["prog", "-v", "--file", "a.txt", "extra"], options)
for opt in parser:
    print(opt.id, opt.text, opt.arg, opt.error)
parser.files()             # ['extra']
```

## What it does not do

This is a library only. It installs no command-line program. `SimpleOpt` parses arguments that
you pass in, but it does not print help or usage text.

## Running the tests

```
pip install .[test]
pytest
```
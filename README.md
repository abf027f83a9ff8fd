# testkatas

A collection of small, self-contained classes and functions that serve as
targets for practising unit testing, test-driven development, mocking and
refactoring. Each piece has well-defined behaviour, edge cases included, so
it can be pinned down by tests.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `testkatas.fixed_string` | `FixedString`: a string holding at most seven characters (`STRING_SIZE - 1`); longer text is silently truncated on construction and on concatenation. Offers `capacity`, `length`, indexing, comparison, `+`, `+=`, `find`, `substr` and `split` |
| `testkatas.growable_string` | `GrowableString`: a string whose capacity is sized to its text after construction or concatenation and is carried over on copy and `swap`. Offers `capacity`, `length`, indexing, all comparisons, `+` (also with a plain `str` on the left), `+=`, `find`, `substr`, `split`, `swap`, and `GrowableString.read(stream)` to read the next whitespace-delimited word from a text stream |
| `testkatas.stack` | `Stack`: a last-in, first-out stack with `push`, `pop`, `top`, `empty`, `swap` and `copy`; `pop` and `top` on an empty stack raise `IndexError` |
| `testkatas.int_set` | `IntSet`: an immutable set of integers drawn from `range(MAX)` (0–63); numbers outside it are ignored. `in_universe` tells whether a number belongs to that range. Sets combine with `+`, and a bare integer on either side counts as a one-member set |
| `testkatas.complex_number` | `Complex`: a minimal complex number with equality, addition, text output (`"0 + 0i"`) and a deliberately simplified division that divides only the real parts and raises `ValueError` when dividing by zero |
| `testkatas.palindrome` | `is_palindrome`, which compares character for character (spaces and case count) |
| `testkatas.fizzbuzz` | `fizzbuzz` |
| `testkatas.session` | `Session`, which measures elapsed seconds against a `Clock`. `TimeClock` uses the system clock and is the default; `OneHourClock` and `ConfigurableClock` are stand-ins for tests |
| `testkatas.coverage_map` | `CoverageMap`: records which statement slots of each function were executed; `percentages` gives per-function coverage and `report` formats it as text |
| `testkatas.videostore` | `Movie`, `Rental`, `Customer` and `PriceCode`: the classic video store rental statement, plus `main`, which prints a sample statement |

## Examples

```python
from testkatas.fizzbuzz import fizzbuzz
from testkatas.palindrome import is_palindrome

fizzbuzz(15)                       # "fizzbuzz"
fizzbuzz(502)                      # "502"
is_palindrome("step on no pets")   # True
```

A fixed-size string truncates, and a growable string does not:

```python
from testkatas.fixed_string import FixedString
from testkatas.growable_string import GrowableString

str(FixedString("abc") + FixedString("defgh"))    # "abcdefg"

words = GrowableString("O Come, O Come Emannuel").split(" ")
[str(w) for w in words]            # ["O", "Come,", "O", "Come", "Emannuel"]
```

A stack:

```python
from testkatas.stack import Stack

stk = Stack()
stk.push(10)
stk.push(12)
stk.top()     # 12
stk.pop()     # 12
stk.top()     # 10
```

A set over a small universe:

```python
from testkatas.int_set import IntSet

str(IntSet(3, 1, 64) + 5)   # "{1, 3, 5}"
```

Complex numbers:

```python
from testkatas.complex_number import Complex

Complex(10, 1) + Complex(1, 1) == Complex(11, 2)   # True
str(Complex(0, 0))                                  # "0 + 0i"
Complex(10, 1) / Complex()                          # raises ValueError
```

Testing time-dependent code without waiting, by swapping the clock:

```python
from testkatas.session import ConfigurableClock, Session

Session(ConfigurableClock(86400)).elapsed()   # 86400
```

Coverage bookkeeping:

```python
from testkatas.coverage_map import CoverageMap

cov = CoverageMap()
cov.append("foo", 2)
cov.executed("foo", 0)
cov.percentages()   # {"foo": 50.0}
```

## Command

The video store example prints a rental statement for a sample customer:

```
testkatas-videostore
```

## What it does not do

`CoverageMap` only keeps the record. Nothing in the package instruments
source code or inserts the `append` and `executed` calls; the caller makes
them, and `report` returns the summary as a string rather than printing it.
# ftprintf

A self-contained printf-style formatter with its own flag handling, and a
small helper for stacks of integer matrices.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Formatting

`ftprintf.formatter` offers two functions:

- `sformat(fmt, *args)` returns the formatted text.
- `printf(fmt, *args)` writes the formatted text to standard output and
  returns the number of characters written.

```python
from ftprintf.formatter import sformat, printf

sformat("%5d|%-5s|%x", 42, "ab", 255)   # '   42|ab   |ff'
count = printf("%s has %d ants\n", "start", 10)
```

Supported conversions are `c`, `s`, `d`, `i`, `u`, `o`, `x`, `X`, `p`, `f`
and `%`; `%Z` prints a literal `Z`. Flags `-`, `0`, `+`, space and `#` are
recognised, along with a field width, a `.precision` and the length
modifiers `hh`, `h`, `l` and `ll`.

Behaviour worth knowing:

- Integers are wrapped to the size the length modifier implies (32 bits
  with no modifier, 8 for `hh`, 16 for `h`, 64 for `l` and `ll`), the way a
  fixed-size integer would be.
- `%f` prints six decimals by default; a precision shortens that.
- `%p` prints `0x` followed by lower-case hexadecimal digits.
- `%s` with `None` prints `(null)`; `%c` with a NUL character prints `"\0"`.
- The format is cut at its first NUL character; a `None` or empty format
  gives an empty string.
- A directive left without a matching argument raises `TypeError`; surplus
  arguments are ignored. A trailing `%...` with no conversion character
  prints nothing.

The lower-level pieces are public too:

- `ftprintf.numconv` turns integers into decimal, hexadecimal and octal
  text (`signed_text`, `unsigned_text`, `hexa`, `octale`, `assign_type`).
- `ftprintf.padding` applies width, precision and sign rules
  (`join_int`, `join_r_int`, `check_width`, `check_precision`,
  `check_sign`, `join_char`, `join_reverse_char`, `float_text`,
  `round_digits`, `put_minus`, ...).
- `ftprintf.conversions` formats one directive at a time
  (`convert_char`, `convert_int`, `convert_hexa`, `convert_octal`,
  `convert_float`, `convert_percent`, `convert_null`).

## Matrices

`ftprintf.matrix.NMatrix(lines, columns, count)` holds `count` integer
matrices of `columns` rows by `lines` values each; all three dimensions
must be positive, otherwise `ValueError` is raised.

```python
from ftprintf.matrix import NMatrix

m = NMatrix(3, 2, 1)
m.fill_one_zero()
print(m.render())
```

`fill_zero`, `fill_one` and `fill_one_zero` set every value and return the
matrix; `render` returns a text listing of every matrix in the stack.

## What it does not do

This is not a full printf: there is no `*` width or precision, no `e`,
`g` or `a` conversions, no positional arguments, and no command-line tool.
# miniprintf

A small printf-style formatter with a fixed set of conversions. Integers
behave like C's 32-bit `int` and `unsigned int`: out-of-range values wrap
around. Each `printf`-style function writes its text and returns how many
characters it wrote; each `sprintf`-style function returns the text.

## Conversions

| Spec | Output |
|------|--------|
| `%c` | one character; an integer is reduced to a byte value and turned into a character |
| `%s` | a string, cut at the first NUL; `None` prints `(null)` |
| `%p` | an address in lower-case hex with `0x`; `0` or `None` prints `0x0` |
| `%d`, `%i` | a signed 32-bit integer |
| `%u` | an unsigned 32-bit integer |
| `%x`, `%X` | an unsigned 32-bit integer in lower- or upper-case hex |
| `%%` | a literal `%` |

A `%` followed by any other character prints that character. A lone `%` at
the end of the format string ends the output there. Running out of
arguments raises `TypeError`.

## Usage

```python
from miniprintf.printf import sprintf, printf

sprintf("%s is %d years old", "Ada", 36)   # 'Ada is 36 years old'
sprintf("%x %X %u", 255, 255, -1)          # 'ff FF 4294967295'

count = printf("hello %c\n", "w")          # writes to stdout, returns 8
```

`printf` takes an optional `file=` keyword naming any object with a
`write` method; it defaults to `sys.stdout`. `format_conversion(spec, args)`
renders a single conversion, taking its value from an iterator.

### Flags

`miniprintf.flags` provides `sprintf_flags` and `printf_flags`, which also
understand the `#`, `+` and space flags:

```python
from miniprintf.flags import sprintf_flags

sprintf_flags("%+d", 5)     # '+5'
sprintf_flags("% d", 5)     # ' 5'
sprintf_flags("%#x", 255)   # '0xff'
sprintf_flags("%#x", 0)     # '0'
```

- `+` and space apply to `%d` and `%i`, printing the flag before a
  non-negative value.
- `#` applies to `%x` and `%X`, printing `0x` or `0X` before a non-zero value.
- One flag character may be repeated (`%++d`); the repeats count as one.
  A flag on any other conversion adds nothing.
- The value a flag looks at is read through a separate cursor over the
  arguments, starting at the first argument and moving on only when a flag
  examines a value. With a flagged conversion that is not the first, the
  flag therefore decides from an earlier argument than the one printed.

### Basic variant

`miniprintf.exam` provides `sprintf_basic` and `printf_basic`, which support
only `%c`, `%s` and `%d`. Any other conversion, `%%` included, prints
nothing, and `%s` with `None` raises `TypeError`:

```python
from miniprintf.exam import sprintf_basic

sprintf_basic("%c %d", "h", 122)   # 'h 122'
```

### Single-value helpers

`miniprintf.writers` has `format_char`, `format_str`, `format_int`,
`format_unsigned`, `format_hex` and `format_pointer`, each returning the
text for a single value. `format_hex` works on a 64-bit unsigned value;
the `%x` and `%X` conversions narrow their argument to 32 bits first.

## What it does not do

There are no field widths, precisions, length modifiers, or the `-`, `0`
flags, and no floating-point conversions.

## Command line

Installing the package gives a small demonstration command, which prints
`h` and then `h 122` with the basic formatter (no trailing newline):

```
miniprintf-demo
```

## Running the tests

```
pip install -e ".[test]"
pytest
```
# emos

The console layer of a second-stage boot loader. It writes characters to a
teletype-style output stream and formats text with a small `printf`. Integers
are taken at fixed widths and wrap the way they do on a 16-bit real-mode
machine.

## Installing

```
pip install .
```

## Running

```
emos
```

This prints a greeting followed by three lines of formatting samples
(characters, strings, decimal, hexadecimal and octal numbers at several
lengths). The command takes no options other than `-h`/`--help`.

## Using the library

```python
from emos.stdio import format_string, printf, puts, putc

text = format_string("Formatted %d %x %s", 1234, 0xDEAD, "string")
printf("Value: %i\r\n", -42)
puts("Hello\r\n")
putc("!")
```

- `format_string(format, *args)` returns the formatted text.
- `printf(format, *args, out=None)` writes the formatted text.
- `puts(s, out=None)` writes `s` up to its first NUL character, with no
  newline added.
- `putc(c, out=None)` writes one character, given as a one-character string
  or a byte value (0 to 255).

The `out` stream is standard output unless you pass another one.

### Conversions

The formatter accepts `%c`, `%s`, `%%`, `%d`, `%i`, `%u`, `%x`, `%X`, `%p`
and `%o`, with the length modifiers `h`, `hh`, `l` and `ll`.

- Integers are 16 bits wide by default and with `h` or `hh`, 32 bits with
  `l` and 64 bits with `ll`. Values are cut to that width, so
  `format_string("%u", -1)` gives `65535`.
- Hexadecimal digits are always lower case, even for `%X`.
- Flags (`-`, `+`, space, `#`, `0`), width and precision are read, and a `*`
  width or precision takes an integer argument, but none of them changes the
  output.
- `%c` takes a one-character string or an integer; `%s` takes a string and
  stops at its first NUL character.
- A conversion it does not know produces no output.
- Too few arguments, or an argument of the wrong kind, raises `TypeError`.

### Low-level helpers

`emos.x86` has:

- `div64_32(dividend, divisor)` divides an unsigned 64-bit value by an
  unsigned 32-bit value and returns `(quotient, remainder)`. Values out of
  range raise `ValueError`; a zero divisor raises `ZeroDivisionError`.
- `Teletype(stream=None)` writes to `stream`, or standard output.
  `Teletype.write_char(c, page=0)` writes one character; `page` must be in
  0 to 255.

## What it does not do

The package covers console output only. It does not boot anything, read
disks or file systems, or load a kernel, and it does not drive real video
hardware: every character goes to a Python text stream.

## Tests

```
pip install .[test]
pytest
```
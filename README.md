# typedinput

Read typed values from the console, one line at a time, and a handful of
small programs that use them.

## Prompts

`typedinput.prompts` has functions that print a prompt on standard output,
read one line from standard input and turn it into a value:

- `get_string` – the line without its ending (`\n`, `\r` or `\r\n`); `""`
  for an empty line, `None` when input has ended.
- `get_char` – exactly one character.
- `get_int` – a decimal integer in `[-2**31, 2**31 - 1)`.
- `get_long`, `get_long_long` – a decimal integer in `[-2**63, 2**63 - 1)`.
- `get_double` – a plain decimal number in double precision.
- `get_float` – a plain decimal number rounded to single precision.

Numbers must fill the whole line: no leading or trailing spaces, no
exponents, no hexadecimal, no `inf` or `nan`. Values that overflow or
underflow their type are refused. When a line does not hold a valid value,
the prompt is shown again and another line is read.

When input ends before a value is read, the typed getters do not raise;
they return the largest value of their type (`"\x7f"` for `get_char`,
`2**31 - 1` for `get_int`, `2**63 - 1` for `get_long` and
`get_long_long`, the largest finite single or double for `get_float` and
`get_double`).

The prompt is optional and is formatted printf-style with any extra
arguments:

```python
from typedinput.prompts import get_int, get_string

name = get_string("What's your name? ")
age = get_int("How old are you, %s? ", name)
```

To read from somewhere other than the console, build a `Prompter` on any
pair of text streams; it has the same `get_*` methods, plus `read_line`,
which reads a line without printing a prompt:

```python
import io
from typedinput.prompts import Prompter

prompter = Prompter(io.StringIO("abc\n42\n"), io.StringIO())
assert prompter.get_int("n: ") == 42   # "abc" is refused, "n: " shown twice
```

## Programs

Installing the package puts these commands on your path:

| Command                 | What it does                                                   |
|-------------------------|----------------------------------------------------------------|
| `typedinput-hello`      | asks for your name and prints `hello, <name>`                  |
| `typedinput-agree`      | asks `Do you agree? ` and answers for `y` or `n`               |
| `typedinput-compare`    | asks for two integers and says whether x is less, greater or equal |
| `typedinput-calculator` | asks for x and y and adds or divides them                      |
| `typedinput-mario`      | draws a row of `?` blocks, or a column or grid of `#` bricks   |
| `typedinput-meow`       | prints `meow` a number of times                                |

Options:

- `typedinput-hello --world` prints `hello, world` without asking.
- `typedinput-agree --case-sensitive` accepts only lowercase `y` and `n`;
  by default `Y` and `N` count too. Any other answer prints nothing.
- `typedinput-calculator [add|truncate|single|double]` picks the operation
  (default `add`): integer sum, integer division truncated toward zero, or
  division in single or double precision. `--long` reads 64-bit integers;
  `--digits N` sets how many decimals are printed (default 6). Truncating
  division by zero prints an error and exits with status 1.
- `typedinput-mario --shape row|column|grid` (default `grid`) and
  `--size N`. A row is 4 wide and a column 3 high unless `--size` is given;
  a grid asks `Size: ` until a positive integer is typed when `--size` is
  left out.
- `typedinput-meow -n N` sets the number of meows (default 3).

The same functions are available to import: `hello.greet`,
`agree.agreement`, `compare.compare`, `calculator.add`,
`calculator.divide_truncated`, `calculator.divide_single`,
`calculator.divide_double`, `calculator.format_fixed`, `mario.row`,
`mario.column`, `mario.grid`, `mario.prompt_size` and `meow.meow`.

## Tests

```
pip install -e .[test]
pytest
```
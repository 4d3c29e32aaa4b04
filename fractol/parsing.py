"""Command-line validation and number parsing for both viewers."""

from dataclasses import dataclass

DIGIT_BUDGET = 15

CLASSIC_USAGE = "\n".join(
    [
        "=========================================",
        "||          Incorrect input !          ||",
        "||-------------------------------------||",
        "||  ./fractol mandelbrot               ||",
        "||  ./fractol julia <x> <y>            ||",
        "=========================================",
    ]
)

EXPLORER_USAGE = "\n".join(
    [
        "=========================================",
        "||          Incorrect input !          ||",
        "||-------------------------------------||",
        "||  ./fractol <set_name>               ||",
        "||  ./fractol julia_mandel <x> <y>     ||",
        "||                                     ||",
        "||-----------------SETS----------------||",
        "||   mandelbrot     |   multibrot      ||",
        "||   burning_ship   |   tricorn        ||",
        "||-------------------------------------||",
        "||   julia_mandel   |   julia_multi    ||",
        "||   julia_ship     |   julia_tricorn  ||",
        "=========================================",
    ]
)


class InputError(ValueError):
    """Raised when the command line does not describe a known set."""


@dataclass(frozen=True)
class Selection:
    """The set chosen on the command line."""

    fractal_number: int
    julia_constant: complex = 0j
    power: float = 2.0


def _is_digit(ch):
    return "0" <= ch <= "9"


def _dot_between_digits(text, index):
    return (
        0 < index < len(text) - 1
        and _is_digit(text[index - 1])
        and _is_digit(text[index + 1])
    )


def check_format(text):
    """Return True if text looks like a plain decimal number."""
    dots = 0
    digits = 0
    for index, ch in enumerate(text):
        if not (_is_digit(ch) or ch in "+-."):
            return False
        if ch == ".":
            if not _dot_between_digits(text, index):
                return False
            dots += 1
        elif _is_digit(ch):
            digits += 1
    return (dots == 0 and digits > 0) or (dots == 1 and digits > 1)


def skip_spaces(text, sign, max_digits):
    """Skip blanks and plus signs, read one minus sign.

    Returns (index after the prefix, sign, max_digits). A minus sign seen when
    the sign is already negative sets max_digits to -1.
    """
    index = 0
    while index < len(text) and (ord(text[index]) <= 32 or text[index] == "+"):
        index += 1
    if index < len(text) and text[index] == "-":
        if sign == 1:
            sign = -1
        else:
            max_digits = -1
        index += 1
    return index, sign, max_digits


def _read_digits(text, sign, budget):
    """Read the first number in text, spending one unit of budget per digit tried."""
    index = next((i for i, ch in enumerate(text) if _is_digit(ch)), len(text))
    whole = 0.0
    while index < len(text) and _is_digit(text[index]):
        allowed = budget > 0
        budget -= 1
        if not allowed:
            break
        whole = whole * 10 + int(text[index])
        index += 1
    fraction = 0.0
    factor = 1.0
    if index < len(text) and text[index] == ".":
        index += 1
        while index < len(text) and _is_digit(text[index]):
            allowed = budget > 0
            budget -= 1
            if not allowed:
                break
            fraction = fraction * 10 + int(text[index])
            factor *= 10
            index += 1
    return (whole + fraction / factor) * sign, budget


def _classic_double(text, budget):
    _, sign, budget = skip_spaces(text, 1, budget)
    return _read_digits(text, sign, budget)


def parse_double(text, max_digits):
    """Parse a decimal number with a digit budget.

    Returns (value, remaining budget). A budget of -1 marks a rejected number.
    """
    start, sign, budget = skip_spaces(text, 1, max_digits)
    dots = 0
    for index in range(start + 1, len(text)):
        if text[index] != ".":
            continue
        if dots or not _is_digit(text[index - 1]) or index + 1 == len(text):
            budget = -1
        else:
            dots += 1
    if budget >= 0:
        return _read_digits(text, sign, budget)
    return 0.0, budget


def _classic_constant(args):
    if len(args) != 3:
        return complex(-0.8, 0.156)
    if not check_format(args[1]) or not check_format(args[2]):
        raise InputError(CLASSIC_USAGE)
    real, budget = _classic_double(args[1], DIGIT_BUDGET)
    imag, budget = _classic_double(args[2], budget)
    if budget == -1:
        raise InputError(CLASSIC_USAGE)
    return complex(real, imag)


def parse_classic_args(argv):
    """Choose between the Mandelbrot and Julia sets from the arguments."""
    args = list(argv)
    count = len(args) + 1
    if count > 4:
        raise InputError(CLASSIC_USAGE)
    if count == 1 or (args[0].startswith("mandelbrot") and count == 2):
        return Selection(1)
    if args[0].startswith("julia") and count in (2, 4):
        return Selection(2, _classic_constant(args))
    raise InputError(CLASSIC_USAGE)


def _explorer_constant(args):
    if len(args) != 3:
        return 0j
    real, budget = parse_double(args[1], DIGIT_BUDGET)
    if budget < 0:
        raise InputError(EXPLORER_USAGE)
    imag, budget = parse_double(args[2], DIGIT_BUDGET)
    if budget < 0:
        raise InputError(EXPLORER_USAGE)
    return complex(real, imag)


_EXPLORER_SETS = (
    ("burning_ship", 2, 2.0),
    ("tricorn", 4, 2.0),
    ("multibrot", 7, 3.0),
)

_EXPLORER_JULIAS = (
    ("julia_mandel", 4, 2.0),
    ("julia_ship", 5, 2.0),
    ("julia_tricorn", 6, 2.0),
    ("julia_multi", 8, 3.0),
)


def parse_explorer_args(argv):
    """Choose one of the explorer's sets from the arguments."""
    args = list(argv)
    count = len(args) + 1
    if count > 4:
        raise InputError(EXPLORER_USAGE)
    if count == 1 or (args[0].startswith("mandelbrot") and count == 2):
        return Selection(1)
    if count == 2:
        for name, number, power in _EXPLORER_SETS:
            if args[0].startswith(name):
                return Selection(number, power=power)
    if count in (2, 4):
        for name, number, power in _EXPLORER_JULIAS:
            if args[0].startswith(name):
                return Selection(number, _explorer_constant(args), power)
    raise InputError(EXPLORER_USAGE)
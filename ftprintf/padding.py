"""Width, precision, sign and float helpers used to lay out converted values."""

import re

_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _atoi(text):
    """Parse a leading decimal integer the way C's ``atoi`` does, or return 0."""
    match = _ATOI.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def _is_digit(char):
    return len(char) == 1 and "0" <= char <= "9"


def _digits_from(text, start):
    """Return the run of decimal digits in ``text`` starting at ``start``."""
    end = start
    while end < len(text) and _is_digit(text[end]):
        end += 1
    return text[start:end]


def count_num(number):
    """Return the length of ``number`` minus one if it holds a sign character."""
    length = len(number)
    if "-" in number or "+" in number:
        length -= 1
    return length


def join_int(width, zero, number, precision):
    """Pad ``number`` on the left with zeros or spaces for right justification."""
    if width <= 0 and precision <= 0:
        return number
    if zero == "0" or precision > 0:
        position = 0
        while position < width or position < precision:
            number = "0" + number
            if position + 1 >= precision and precision != -1:
                position += 1
                while position < width:
                    number = " " + number
                    position += 1
            position += 1
        return number
    return " " * max(width, 0) + number


def join_r_int(width, zero, number, precision):
    """Pad ``number`` for left justification: leading precision zeros, trailing fill."""
    if (precision > 0 or width > 0) and (zero == "0" or precision > 0):
        position = 0
        while position < width or position < precision:
            if position < precision:
                number = "0" + number
            else:
                number = number + "0"
            if position + 1 >= precision:
                position += 1
                while position < width and zero == "1":
                    number = number + " "
                    position += 1
            position += 1
        return number
    if width > 0 or precision > 0:
        number = number + " " * max(width, 0)
    return number


def check_width(spec, number):
    """Return how many fill characters the field width in ``spec`` leaves for ``number``."""
    index = next(
        (i for i, char in enumerate(spec) if "1" <= char <= "9"), len(spec)
    )
    if index == len(spec) or (index > 0 and spec[index - 1] == "."):
        return 0
    return int(_digits_from(spec, index)) - len(number)


def check_precision(spec, number):
    """Return the padding the precision in ``spec`` asks for, or -1 when none."""
    dot = spec.find(".")
    if dot == -1:
        return -1
    digits = _digits_from(spec, dot + 1)
    requested = int(digits) if digits else 0
    if "f" in spec:
        return requested
    missing = requested - count_num(number)
    return missing if missing > 0 else -1


def check_sign(spec, number):
    """Apply the ``+`` flags of ``spec`` to ``number``."""
    plus_count = spec.count("+")
    if plus_count > 1:
        number = str(-_atoi(number))
    if plus_count and _atoi(number) >= 0 and number.find("+") != 0:
        return "+" + number
    return number


def _text_size(text):
    """Length of ``text``, counting a ``^@`` marker as a single character."""
    return len(text) - 1 if "^@" in text else len(text)


def join_char(width, zero, text):
    """Right-justify ``text`` in ``width`` characters, filling with zeros or spaces."""
    missing = width - _text_size(text)
    if missing <= 0:
        return text
    return ("0" if zero == "0" else " ") * missing + text


def join_reverse_char(width, zero, text):
    """Left-justify ``text`` in ``width`` characters, filling with zeros or spaces."""
    missing = width - _text_size(text)
    if missing <= 0:
        return text
    return text + ("0" if zero == "0" else " ") * missing


def check_width_char(spec):
    """Return the field width written in ``spec`` for a text conversion, or 0."""
    index = next((i for i, char in enumerate(spec) if _is_digit(char)), len(spec))
    if index == len(spec) or (index > 0 and spec[index - 1] == "."):
        return 0
    return int(_digits_from(spec, index))


def check_precision_char(spec):
    """Return the precision written in ``spec``, 0 for a bare dot, or -1 when absent."""
    dot = spec.find(".")
    if dot == -1:
        return -1
    digits = _digits_from(spec, dot + 1)
    return int(digits) if digits else 0


def _carry(chars, count, end):
    """Zero a run of ``count`` nines ending at ``end`` and bump the digit before it."""
    point = chars.index(".") if "." in chars else -1
    if count < 6 and end - count <= point:
        return
    position = end
    while count > 0 and chars[position] != ".":
        chars[position] = "0"
        position -= 1
        count -= 1
    if position >= 0 and chars[position] == ".":
        position -= 1
    if position >= 0:
        chars[position] = chr(ord(chars[position]) + 1)


def round_digits(number):
    """Carry runs of nines in a float text and drop its final digit."""
    chars = list(number)

    def char_at(index):
        return chars[index] if 0 <= index < len(chars) else ""

    position = len(chars)
    while position > 0:
        run = 0
        while char_at(position - run) == "9":
            run += 1
        if run >= 2:
            _carry(chars, run, position)
            position -= run
        position -= 1
    return "".join(chars[:-1])


def float_text(value, decimals):
    """Render ``value`` with ``decimals`` digits, then round and drop the last one."""
    whole = int(value)
    fraction = value - whole
    head = "-0" if fraction < 0 and whole == 0 else str(whole)
    fraction = abs(fraction)
    digits = []
    for _ in range(decimals):
        fraction *= 10
        digit = int(fraction)
        fraction -= digit
        digits.append(chr(ord("0") + digit))
    return round_digits(head + "." + "".join(digits))


def plus(number):
    """Insert a ``+`` before the first digit of ``number``."""
    for index, char in enumerate(number):
        if _is_digit(char):
            return number[:index] + "+" + number[index:]
    return number


def minus(number):
    """Insert a ``-`` in front of ``number``, or before each character preceding a digit."""
    if _is_digit(number[:1]):
        return "-" + number
    out = []
    for index, char in enumerate(number):
        if _is_digit(number[index + 1:index + 2]):
            out.append("-")
        out.append(char)
    return "".join(out)


def _sign_in_place(number):
    """Tell whether the sign of ``number`` already stands right before its digits."""
    if number.find("-") <= 0 and number.find("+") <= 0:
        return True
    for index, char in enumerate(number):
        if char not in "+-":
            continue
        before = number[index - 1] if index > 0 else ""
        if _is_digit(number[index + 1:index + 2]) and not _is_digit(before):
            return True
    return False


def put_minus(number):
    """Move a sign that padding pushed inside ``number`` back in front of its digits."""
    if _sign_in_place(number):
        return number
    stripped = "".join(char for char in number if char not in "+-")
    if "-" in number:
        return minus(stripped)
    return plus(stripped)
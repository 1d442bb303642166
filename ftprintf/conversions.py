"""Formatting of a single printf directive for each conversion family."""

from .numconv import assign_type
from .padding import (
    check_precision,
    check_precision_char,
    check_sign,
    check_width,
    check_width_char,
    count_num,
    float_text,
    join_char,
    join_int,
    join_r_int,
    join_reverse_char,
    put_minus,
)

_NUL_MARKER = "^@"
_FLOAT_DIGITS = 7
_NULL_PRINTABLE = "Z"


def _is_width_digit(char):
    return "1" <= char <= "9"


def _stops_flags(char):
    """A width digit or a precision dot ends the flag scan."""
    return _is_width_digit(char) or char == "."


def _fit(spec, text, left, zero):
    """Pad ``text`` according to the width and precision written in ``spec``."""
    width = check_width(spec, text)
    precision = check_precision(spec, text)
    if left:
        return join_r_int(width, zero, text, precision)
    return join_int(width, zero, text, precision)


def _char_fit(spec, text, left, zero):
    width = check_width_char(spec)
    precision = check_precision_char(spec)
    if precision != -1:
        text = text[:precision]
    if left:
        text = join_reverse_char(width, zero, text)
    else:
        text = join_char(width, zero, text)
    if _NUL_MARKER in text:
        # Only the leading spaces survive in front of a NUL character.
        leading = len(text) - len(text.lstrip(" "))
        return " " * leading + "\0"
    return text


def _char_layout(spec, text):
    left = False
    zero = "1"
    for char in spec[1:]:
        if _stops_flags(char):
            break
        if char == "0" and zero is not None:
            zero = "0"
        if char == " ":
            text = check_sign(spec, text)
        if char == "-":
            left = True
            zero = None
    return _char_fit(spec, text, left, zero)


def convert_char(spec, value, conversion):
    """Format ``value`` for a ``c`` or ``s`` directive described by ``spec``.

    A ``None`` string prints as ``(null)``; a NUL character comes out as ``"\\0"``.
    Any other conversion yields an empty string.
    """
    if conversion == "s":
        text = "(null)" if value is None else str(value)
    elif conversion == "c":
        code = ord(value) if isinstance(value, str) else int(value)
        char = chr(code & 0xFF)
        text = _NUL_MARKER if char == "\0" else char
    else:
        return ""
    return _char_layout(spec, text)


def _truncate_decimals(text, precision):
    """Keep ``precision`` digits after the decimal point, dropping the point for 0."""
    dot = text.find(".")
    if dot == -1:
        dot = len(text)
    keep = dot + 1 + precision if precision > 0 else dot
    return text[:keep]


def _float_fit(spec, text, left, zero):
    width = check_width(spec, text)
    precision = check_precision(spec, text)
    if precision != -1:
        text = _truncate_decimals(text, precision)
    precision -= count_num(text)
    if precision <= 0:
        precision = -1
    if left:
        return join_r_int(width, zero, text, precision)
    return join_int(width, zero, text, precision)


def convert_float(spec, value, conversion):
    """Format ``value`` for an ``f`` directive; other conversions yield ``""``."""
    if conversion != "f":
        return ""
    text = float_text(float(value), _FLOAT_DIGITS)
    left = False
    zero = "1"
    for char in spec[1:]:
        if _stops_flags(char):
            break
        if char == "0":
            zero = "0"
        if char == " ":
            text = check_sign(spec, text)
        if char == "-":
            left = True
    return _float_fit(spec, text, left, zero)


def _move_x_forward(text):
    """Swap the first ``x`` of ``text`` into second position."""
    position = text.find("x")
    if position == -1 or len(text) < 2:
        return text
    chars = list(text)
    chars[1], chars[position] = chars[position], chars[1]
    return "".join(chars)


def _hexa_layout(spec, text, conversion):
    left = False
    zero = "1"
    for char in spec[1:]:
        if _stops_flags(char):
            break
        if char == "0" and "-" not in spec:
            zero = "0"
        if char == "#" and text not in ("0", ""):
            if conversion == "x":
                text = "0x" + text
            elif conversion == "X":
                text = "0X" + text
        if char == "-":
            left = True
    if left:
        return _fit(spec, text, True, zero)
    text = _fit(spec, text, False, zero)
    if "#" in spec and "x" in spec and spec[2:3] == "0":
        text = _move_x_forward(text)
    return text


def convert_hexa(spec, value, conversion):
    """Format ``value`` for an ``x``, ``X`` or ``p`` directive.

    Any other conversion yields an empty string.
    """
    if conversion == "p":
        return assign_type(spec, value, "p").lower()
    if conversion not in ("x", "X"):
        return ""
    text = assign_type(spec, value, conversion)
    if conversion == "x":
        text = text.lower()
    if text == "0" and spec.find(".") > 0:
        text = ""
    return _hexa_layout(spec, text, conversion)


def _int_layout(spec, text):
    left = False
    zero = "1"
    for char in spec[1:]:
        if char == "+":
            text = check_sign(spec, text)
        if _stops_flags(char):
            break
        if char == "0" and spec.find("-") <= 0:
            zero = "0"
        if (
            char == " "
            and spec.find("+") <= 0
            and text[:1] != "-"
            and spec.find(".") <= 0
            and spec[-1:] != "u"
        ):
            text = " " + text
        if char == "-":
            left = True
    return put_minus(_fit(spec, text, left, zero))


def convert_int(spec, value, conversion):
    """Format ``value`` for a ``d``, ``i`` or ``u`` directive.

    Any other conversion yields an empty string.
    """
    if conversion in ("d", "i"):
        text = assign_type(spec, value, conversion)
        if text[:1] == "0" and spec.find(".") > 0:
            text = ""
    elif conversion == "u":
        text = assign_type(spec, value, conversion)
    else:
        return ""
    return _int_layout(spec, text)


def convert_null(spec):
    """Format a directive that has no conversion.

    The last character of ``spec`` is taken as the conversion; only ``Z``
    is printed, anything else produces nothing.
    """
    if not spec:
        return ""
    conversion = spec[-1]
    if conversion == _NULL_PRINTABLE:
        return conversion
    return ""


def convert_octal(spec, value, conversion):
    """Format ``value`` for an ``o`` directive."""
    text = assign_type(spec, value, conversion)
    if text == "0" and spec.find(".") > 0:
        text = ""
    left = False
    zero = "1"
    for char in spec[1:]:
        if _stops_flags(char):
            break
        if char == "0" and spec.find("-") <= 0:
            zero = "0"
        if char == "#" and conversion == "o" and text != "0":
            text = "0" + text
        if char == " ":
            text = check_sign(spec, text)
        if char == "-":
            left = True
    return _fit(spec, text, left, zero)


def convert_percent(spec, conversion):
    """Format a ``%`` directive, or a ``Z`` one for any other conversion."""
    if spec is None:
        return ""
    text = "%" if conversion == "%" else "Z"
    left = False
    zero = "1"
    for char in spec[1:]:
        if _stops_flags(char):
            break
        if char == "0" and not left:
            zero = "0"
        if char == "Z" and conversion == "%":
            text = "Z" + text
        if char == "-":
            left = True
    return _fit(spec, text, left, zero)
"""Expansion of printf-style format strings built on the conversion helpers."""

import sys

from .conversions import (
    convert_char,
    convert_float,
    convert_hexa,
    convert_int,
    convert_null,
    convert_octal,
    convert_percent,
)

_CONVERSIONS = frozenset("%ZpxXdiucsof")
_MISSING = object()


def _next_value(values):
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return value


def _convert(spec, conversion, values):
    """Render the directive ``spec`` ending with ``conversion``, pulling values as needed."""
    if conversion in "cs":
        return convert_char(spec, _next_value(values), conversion)
    if conversion in "diu":
        return convert_int(spec, _next_value(values), conversion)
    if conversion in "pxX":
        return convert_hexa(spec, _next_value(values), conversion)
    if conversion == "o":
        return convert_octal(spec, _next_value(values), conversion)
    if conversion == "f":
        return convert_float(spec, _next_value(values), conversion)
    return convert_percent(spec, conversion)


def _directive_end(fmt, start):
    """Index of the conversion character closing the directive at ``start``."""
    return next(
        (i for i in range(start + 1, len(fmt)) if fmt[i] in _CONVERSIONS),
        len(fmt),
    )


def sformat(fmt, *args):
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Text stops at the first NUL character of ``fmt``; a ``None`` or empty
    format gives an empty string. Surplus arguments are ignored, and a
    directive without a matching argument raises ``TypeError``.
    """
    if not fmt:
        return ""
    fmt = fmt.split("\0", 1)[0]
    values = iter(args)
    out = []
    position = 0
    while position < len(fmt):
        percent = fmt.find("%", position)
        if percent == -1:
            out.append(fmt[position:])
            break
        out.append(fmt[position:percent])
        end = _directive_end(fmt, percent)
        if end == len(fmt):
            if end - percent > 1:
                out.append(convert_null(fmt[percent:end]))
            break
        out.append(_convert(fmt[percent:end + 1], fmt[end], values))
        position = end + 1
    return "".join(out)


def printf(fmt, *args):
    """Write the expansion of ``fmt`` to standard output and return its length."""
    text = sformat(fmt, *args)
    sys.stdout.write(text)
    return len(text)
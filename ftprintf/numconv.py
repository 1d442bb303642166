"""Integer-to-text conversions driven by printf length modifiers."""

_INTEGER_CONVERSIONS = frozenset("diouxX")
_SIGNED_CONVERSIONS = frozenset("di")
_POINTER_BITS = 64
_MODIFIER_BITS = {"": 32, "hh": 8, "h": 16, "l": 64, "ll": 64}


def _mask(bits):
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")
    return (1 << bits) - 1


def signed_text(value, bits):
    """Return the decimal text of ``value`` wrapped into a signed ``bits``-bit integer."""
    wrapped = value & _mask(bits)
    if wrapped >> (bits - 1):
        wrapped -= 1 << bits
    return str(wrapped)


def unsigned_text(value, bits):
    """Return the decimal text of ``value`` wrapped into an unsigned ``bits``-bit integer."""
    return str(value & _mask(bits))


def hexa(value, flag):
    """Return upper-case hexadecimal digits of ``value`` as a 64-bit unsigned integer.

    A ``'p'`` flag prefixes the digits with ``0x``.
    """
    digits = format(value & _mask(_POINTER_BITS), "X")
    return "0x" + digits if flag == "p" else digits


def octale(value):
    """Return the octal digits of ``value`` as a 64-bit unsigned integer."""
    return format(value & _mask(_POINTER_BITS), "o")


def _length_modifier(spec):
    """Find the first length modifier (``h``, ``hh``, ``l`` or ``ll``) in ``spec``."""
    for index, char in enumerate(spec):
        if char in "lh":
            return char * 2 if spec[index + 1:index + 2] == char else char
    return ""


def _unsigned_render(value, bits, conversion):
    wrapped = value & _mask(bits)
    if conversion in ("x", "X"):
        return hexa(wrapped, conversion)
    if conversion == "o":
        return octale(wrapped)
    return str(wrapped)


def assign_type(spec, value, conversion):
    """Render ``value`` as text for ``conversion``, honouring length modifiers in ``spec``.

    Hexadecimal output is upper case; ``'p'`` yields ``0x`` followed by the digits.
    """
    if conversion == "p":
        return hexa(value, "p")
    if conversion not in _INTEGER_CONVERSIONS:
        raise ValueError(f"unsupported integer conversion: {conversion!r}")
    bits = _MODIFIER_BITS[_length_modifier(spec)]
    if conversion in _SIGNED_CONVERSIONS:
        return signed_text(value, bits)
    return _unsigned_render(value, bits, conversion)
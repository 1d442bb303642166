"""A printf-style formatter with C-like flags and length modifiers, and an integer matrix stack."""

__version__ = "0.1.0"
__all__ = ["conversions", "formatter", "matrix", "numconv", "padding"]
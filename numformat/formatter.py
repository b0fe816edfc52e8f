"""
Conversion of numbers to and from locale-aware strings.

Formatting renders the number in the C locale, swaps in the active decimal
separator and then post-processes the string: thousands separators are
inserted every 3 digits and trailing zeroes may be trimmed. Parsing strips
the thousands separators and parses what remains; failures are reported
by returning None.
"""

import logging
import math
import numbers
import re
from typing import TypeAlias

from numformat import i18n
from numformat.checks import check
from numformat.locale_cache import LocaleCache, default_cache
from numformat.style import NumberStyle, Style

# Digits are grouped by 3 whatever the locale says
GROUP_LEN = 3

INT_BITS = 32
WIDE_INT_BITS = 64

Number: TypeAlias = int | float

_DIGITS = "0123456789"
_INT_RE = re.compile(r"\s*[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"\s*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class NumberFormatter:
    """
    Formats and parses numbers using the separators of the active locale.

    Args:
        locale_cache: Where separators come from, the process-wide cache by default
        catalogue: Source of the "NaN" and "-Infinity" labels; the active
            catalogue is used when omitted
        strict: Raise on contract violations instead of logging them; follows
            the process-wide setting when omitted
    """

    __slots__ = ("_cache", "_catalogue", "_strict")

    def __init__(
            self,
            locale_cache: LocaleCache | None = None,
            catalogue: i18n.LocaleCatalogue | None = None,
            *,
            strict: bool | None = None
    ):
        self._cache: LocaleCache = locale_cache if locale_cache is not None else default_cache()
        self._catalogue = catalogue
        self._strict = strict

    @property
    def locale_cache(self) -> LocaleCache:
        return self._cache

    def get_decimal_separator(self) -> str:
        return self._cache.get_decimal_separator()

    def get_thousands_separator_if_used(self) -> str | None:
        return self._cache.get_thousands_separator_if_used()

    def _gettext(self, message: str) -> str:
        if self._catalogue is not None:
            return self._catalogue.gettext(message)
        return i18n.gettext(message)

    # Conversion to string

    def format_int(self, value: int, style: Style | NumberStyle = Style.NONE) -> str:
        """
        Format an integer in base 10.

        Args:
            value: The integer, of any size
            style: Only the thousands separator applies to integers

        Returns:
            The formatted string
        """
        style = NumberStyle.from_flags(style, self._strict)
        check(
            style.retain is None,
            f"Trailing zeroes styles can't be used with integer values: {style.flags!r}",
            self._strict,
        )

        s = "%d" % value
        if style.thousands_sep:
            s = self.add_thousands_separators(s)
        return s

    def format_float(self, value: float, precision: int = -1, style: Style | NumberStyle = Style.NONE) -> str:
        """
        Format a floating point value.

        Args:
            value: The value
            precision: Digits after the decimal separator, or -1 for the
                general ``%g`` representation
            style: Grouping and trailing zeroes trimming; trimming only
                applies when a precision is given

        Returns:
            The formatted string. NaN and both infinities are rendered with
            the localized "NaN" and "-Infinity" labels whatever the style.
        """
        if math.isnan(value):
            return self._gettext("NaN")
        if math.isinf(value):
            return self._gettext("-Infinity")

        style = NumberStyle.from_flags(style, self._strict)
        if not check(precision >= -1, f"Invalid precision {precision}", self._strict):
            precision = -1

        if precision == -1:
            s = "%g" % value
        else:
            s = "%.*f" % (precision, value)

        decimal_sep = self.get_decimal_separator()
        if decimal_sep != ".":
            s = s.replace(".", decimal_sep)

        if style.thousands_sep:
            s = self.add_thousands_separators(s)

        if precision != -1 and style.retain is not None:
            s = self.remove_trailing_zeroes(s, style.retain)

        return s

    def to_string(self, value: Number, precision: int = -1, style: Style | NumberStyle = Style.NONE) -> str:
        """Format an integer or a float, depending on the type of ``value``."""
        if isinstance(value, numbers.Integral):
            return self.format_int(int(value), style)
        if isinstance(value, numbers.Real):
            return self.format_float(float(value), precision, style)
        raise TypeError(f"Cannot format value of type {type(value).__name__}")

    def add_thousands_separators(self, s: str) -> str:
        """Insert the thousands separator every 3 digits of the integer part."""
        thousands_sep = self.get_thousands_separator_if_used()
        if thousands_sep is None:
            return s

        pos = s.find(self.get_decimal_separator())
        if pos == -1:
            # The integer part ends at the exponent, if any, or at the end
            match = re.search(r"[eE]", s)
            pos = match.start() if match else len(s)

        # There may be a sign before the first digit
        start = next((i for i, c in enumerate(s) if c in _DIGITS), None)
        if start is None:
            return s

        while pos > start + GROUP_LEN:
            pos -= GROUP_LEN
            s = s[:pos] + thousands_sep + s[pos:]
        return s

    def remove_trailing_zeroes(self, s: str, retain: int = 0) -> str:
        """
        Trim zeroes at the end of the fractional part.

        Args:
            s: A formatted number containing the decimal separator
            retain: Number of digits kept after the separator at least,
                zero-padded if the fractional part is shorter; with 0 a bare
                decimal separator is removed too

        Returns:
            The trimmed string
        """
        pos_dec_sep = s.find(self.get_decimal_separator())
        if not check(pos_dec_sep != -1, f'No decimal separator in "{s}"', self._strict):
            return s
        if not check(pos_dec_sep != 0, "Can't start with decimal separator", self._strict):
            return s

        pos_last_to_keep = len(s.rstrip("0")) - 1

        if pos_last_to_keep == pos_dec_sep and retain == 0:
            pos_last_to_keep -= 1
        elif pos_last_to_keep - pos_dec_sep < retain:
            pos_last_to_keep = pos_dec_sep + retain

        s = s[:pos_last_to_keep + 1]
        return s.ljust(pos_last_to_keep + 1, "0")

    # Conversion from strings

    def remove_thousands_separators(self, s: str) -> str:
        thousands_sep = self.get_thousands_separator_if_used()
        if thousands_sep is None:
            return s
        return s.replace(thousands_sep, "")

    def _parse_int(self, s: str, bits: int) -> int | None:
        s = self.remove_thousands_separators(s)
        if not _INT_RE.fullmatch(s):
            return None

        value = int(s)
        limit = 1 << (bits - 1)
        if not -limit <= value < limit:
            logging.debug("Integer %s does not fit in %d bits", s.strip(), bits)
            return None
        return value

    def parse_int(self, s: str) -> int | None:
        """Parse a 32-bit integer, returning None on failure."""
        return self._parse_int(s, INT_BITS)

    def parse_wide_int(self, s: str) -> int | None:
        """Parse a 64-bit integer, returning None on failure."""
        return self._parse_int(s, WIDE_INT_BITS)

    def parse_float(self, s: str) -> float | None:
        """
        Parse a floating point value written with the active decimal separator.

        Returns:
            The value, or None if ``s`` is not a number or overflows
        """
        s = self.remove_thousands_separators(s)

        decimal_sep = self.get_decimal_separator()
        if decimal_sep != ".":
            if "." in s:
                return None
            s = s.replace(decimal_sep, ".")

        if not _FLOAT_RE.fullmatch(s):
            return None

        value = float(s)
        if math.isinf(value) and "inf" not in s.lower():
            logging.debug("Floating point value %s is out of range", s.strip())
            return None
        return value

    def from_string(self, s: str, kind: type = float) -> Number | None:
        """Parse ``s`` as ``int`` or ``float``, returning None on failure."""
        if kind is int:
            return self.parse_wide_int(s)
        if kind is float:
            return self.parse_float(s)
        raise TypeError(f"Cannot parse numbers of type {kind.__name__}")


_default_formatter = NumberFormatter()


def default_formatter() -> NumberFormatter:
    """Return the process-wide formatter."""
    return _default_formatter


def format_int(value: int, style: Style | NumberStyle = Style.NONE) -> str:
    return _default_formatter.format_int(value, style)


def format_float(value: float, precision: int = -1, style: Style | NumberStyle = Style.NONE) -> str:
    return _default_formatter.format_float(value, precision, style)


def to_string(value: Number, precision: int = -1, style: Style | NumberStyle = Style.NONE) -> str:
    return _default_formatter.to_string(value, precision, style)


def add_thousands_separators(s: str) -> str:
    return _default_formatter.add_thousands_separators(s)


def remove_trailing_zeroes(s: str, retain: int = 0) -> str:
    return _default_formatter.remove_trailing_zeroes(s, retain)


def remove_thousands_separators(s: str) -> str:
    return _default_formatter.remove_thousands_separators(s)


def parse_int(s: str) -> int | None:
    return _default_formatter.parse_int(s)


def parse_wide_int(s: str) -> int | None:
    return _default_formatter.parse_wide_int(s)


def parse_float(s: str) -> float | None:
    return _default_formatter.parse_float(s)


def from_string(s: str, kind: type = float) -> Number | None:
    return _default_formatter.from_string(s, kind)

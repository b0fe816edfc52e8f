"""Locale-aware formatting and parsing of numbers."""

from numformat.checks import ContractViolationError, set_strict
from numformat.formatter import (
    NumberFormatter,
    add_thousands_separators,
    default_formatter,
    format_float,
    format_int,
    from_string,
    parse_float,
    parse_int,
    parse_wide_int,
    remove_thousands_separators,
    remove_trailing_zeroes,
    to_string,
)
from numformat.i18n import LocaleCatalogue, get_locale, set_locale
from numformat.locale_cache import (
    LocaleCache,
    LocaleId,
    SystemLocaleInfo,
    get_decimal_separator,
    get_thousands_separator_if_used,
)
from numformat.style import NumberStyle, Style

__all__ = [
    "ContractViolationError",
    "LocaleCache",
    "LocaleCatalogue",
    "LocaleId",
    "NumberFormatter",
    "NumberStyle",
    "Style",
    "SystemLocaleInfo",
    "add_thousands_separators",
    "default_formatter",
    "format_float",
    "format_int",
    "from_string",
    "get_decimal_separator",
    "get_locale",
    "get_thousands_separator_if_used",
    "parse_float",
    "parse_int",
    "parse_wide_int",
    "remove_thousands_separators",
    "remove_trailing_zeroes",
    "set_locale",
    "set_strict",
    "to_string",
]

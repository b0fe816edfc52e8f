"""
Cached decimal and thousands separators of the active locale.

Querying the locale is comparatively expensive and the locale rarely
changes, but user code may call :func:`locale.setlocale` or install another
catalogue at any time. Every access therefore compares a snapshot of the
locale identity with the one used to compute the cached value, and queries
again only when they differ.
"""

import locale
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Protocol, cast

from numformat.checks import check
from numformat.i18n import LocaleCatalogue, get_locale


@dataclass(frozen=True, eq=False)
class LocaleId:
    """Snapshot of the active locale, used only to detect changes."""

    catalogue: LocaleCatalogue | None
    catalogue_locale: str | None
    c_locale: str

    def __eq__(self, other):
        if not isinstance(other, LocaleId):
            return NotImplemented
        # Catalogues are compared by identity, locale names by value
        return (
            self.catalogue is other.catalogue
            and self.catalogue_locale == other.catalogue_locale
            and self.c_locale == other.c_locale
        )

    def __hash__(self):
        return hash((id(self.catalogue), self.catalogue_locale, self.c_locale))


class LocaleInfo(Protocol):
    """The host locale subsystem."""

    def decimal_point(self) -> str:
        ...

    def thousands_sep(self) -> str:
        ...

    def identity(self) -> LocaleId:
        ...


class SystemLocaleInfo:
    """
    Locale data from the active catalogue, falling back to the C runtime.

    The catalogue may define the ``number`` section keys ``decimal_point``
    and ``thousands_sep``; anything it leaves out comes from
    :func:`locale.localeconv`.
    """

    def _query(self, key: str) -> str:
        catalogue = get_locale()
        if catalogue is not None:
            value = catalogue.find(key)
            if value is not None:
                return value
        return locale.localeconv()[key]

    def decimal_point(self) -> str:
        return self._query("decimal_point")

    def thousands_sep(self) -> str:
        return self._query("thousands_sep")

    def identity(self) -> LocaleId:
        catalogue = get_locale()
        return LocaleId(
            catalogue=catalogue,
            catalogue_locale=catalogue.locale if catalogue is not None else None,
            c_locale=locale.setlocale(locale.LC_ALL, None),
        )


class _CachedSeparator:
    """A separator character tagged with the locale identity that produced it."""

    __slots__ = ("_resolve", "_value", "_locale_id", "_lock")

    def __init__(self, resolve: Callable[[], str | None]):
        self._resolve = resolve
        self._value: str | None = None
        self._locale_id: LocaleId | None = None
        self._lock = threading.Lock()

    def get(self, locale_id: LocaleId) -> str | None:
        with self._lock:
            if self._locale_id is None or self._locale_id != locale_id:
                self._value = self._resolve()
                self._locale_id = locale_id
            return self._value

    def reset(self):
        with self._lock:
            self._value = None
            self._locale_id = None


class LocaleCache:
    """
    Memoizes the separators of the active locale.

    Args:
        info: The locale subsystem to query, :class:`SystemLocaleInfo` by default
        strict: Override of the process-wide strict checks setting
    """

    __slots__ = ("_info", "_strict", "_decimal", "_thousands")

    def __init__(self, info: LocaleInfo | None = None, *, strict: bool | None = None):
        self._info: LocaleInfo = info if info is not None else SystemLocaleInfo()
        self._strict = strict
        self._decimal = _CachedSeparator(self._resolve_decimal_separator)
        self._thousands = _CachedSeparator(self._resolve_thousands_separator)

    @property
    def info(self) -> LocaleInfo:
        return self._info

    def _resolve_decimal_separator(self) -> str:
        s = self._info.decimal_point()
        if not s:
            # Formatting floats needs some decimal separator, use the C locale one
            logging.debug("Locale has no decimal separator, using '.'")
            return "."

        check(len(s) == 1, f"Multi-character decimal separator {s!r}", self._strict)
        logging.debug("Resolved decimal separator %r", s[0])
        return s[0]

    def _resolve_thousands_separator(self) -> str | None:
        s = self._info.thousands_sep()
        if not s or s[0] == "\0":
            # Grouping is not used in this locale
            logging.debug("Locale does not group digits")
            return None

        check(len(s) == 1, f"Multi-character thousands separator {s!r}", self._strict)
        logging.debug("Resolved thousands separator %r", s[0])
        return s[0]

    def get_decimal_separator(self) -> str:
        """Return the decimal separator of the active locale."""
        return cast(str, self._decimal.get(self._info.identity()))

    def get_thousands_separator_if_used(self) -> str | None:
        """Return the thousands separator, or None if the locale does not group digits."""
        return self._thousands.get(self._info.identity())

    def invalidate(self):
        """Forget the cached separators so the next access queries again."""
        self._decimal.reset()
        self._thousands.reset()


_default_cache = LocaleCache()


def default_cache() -> LocaleCache:
    """Return the process-wide cache."""
    return _default_cache


def get_decimal_separator() -> str:
    return _default_cache.get_decimal_separator()


def get_thousands_separator_if_used() -> str | None:
    return _default_cache.get_thousands_separator_if_used()

import pytest

from numformat import checks, i18n
from numformat.formatter import NumberFormatter
from numformat.locale_cache import LocaleCache, LocaleId


class StubLocaleInfo:
    """Locale subsystem double counting how often it is queried."""

    def __init__(self, decimal_point=".", thousands_sep=",", c_locale="en_US.UTF-8"):
        self.decimal_point_value = decimal_point
        self.thousands_sep_value = thousands_sep
        self.c_locale = c_locale
        self.decimal_point_calls = 0
        self.thousands_sep_calls = 0

    def decimal_point(self):
        self.decimal_point_calls += 1
        return self.decimal_point_value

    def thousands_sep(self):
        self.thousands_sep_calls += 1
        return self.thousands_sep_value

    def identity(self):
        return LocaleId(catalogue=None, catalogue_locale=None, c_locale=self.c_locale)

    def switch(self, c_locale, decimal_point, thousands_sep):
        self.c_locale = c_locale
        self.decimal_point_value = decimal_point
        self.thousands_sep_value = thousands_sep


@pytest.fixture(autouse=True)
def _reset_process_state():
    previous_strict = checks.set_strict(True)
    previous_locale = i18n.set_locale(None)
    yield
    checks.set_strict(previous_strict)
    i18n.set_locale(previous_locale)


@pytest.fixture
def locale_info():
    return StubLocaleInfo()


@pytest.fixture
def cache(locale_info):
    return LocaleCache(locale_info)


@pytest.fixture
def formatter(cache):
    return NumberFormatter(cache)


@pytest.fixture
def german():
    info = StubLocaleInfo(decimal_point=",", thousands_sep=".", c_locale="de_DE.UTF-8")
    return NumberFormatter(LocaleCache(info))

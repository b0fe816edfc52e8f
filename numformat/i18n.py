"""
Per-locale number data acting as the toolkit-level locale.

A :class:`LocaleCatalogue` holds, for each locale, the localized labels of
non-finite values and optional separators overriding the ones of the C
runtime locale. Catalogue data looks like::

    {
        "labels": {"NaN": "Pas un nombre", "-Infinity": "-Infini"},
        "number": {"decimal_point": ",", "thousands_sep": " "},
    }

Both sections are optional. Lookups for a regional locale such as
``fr_CA`` fall back to its language, ``fr``.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

import tomli
import yaml

LABELS = ("NaN", "-Infinity")
SEPARATORS = ("decimal_point", "thousands_sep")

_SECTIONS = {"labels": LABELS, "number": SEPARATORS}


def _parse_catalogue(data: Mapping, source: str) -> dict[str, str]:
    """Flatten catalogue sections into ``{key: text}``, rejecting unknown entries."""
    entries: dict[str, str] = {}
    for section, values in data.items():
        if section not in _SECTIONS:
            raise ValueError(f"Unknown section '{section}' in {source}")
        if not isinstance(values, Mapping):
            raise ValueError(f"Section '{section}' in {source} must be a table")
        for key, text in values.items():
            if key not in _SECTIONS[section]:
                raise ValueError(f"Unknown key '{section}.{key}' in {source}")
            if not isinstance(text, str):
                raise ValueError(f"'{section}.{key}' in {source} must be a string, got {type(text).__name__}")
            entries[key] = text
    return entries


def _read_file(path: Path) -> Mapping:
    suffix = path.suffix.lower()
    if suffix == ".json":
        text = path.read_text(encoding="utf-8")
        return json.loads(text) if text.strip() else {}
    if suffix in (".yaml", ".yml"):
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    if suffix == ".toml":
        with open(path, "rb") as f:
            return tomli.load(f)
    raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .json, .yaml, .yml, .toml")


class LocaleCatalogue:
    """
    Labels and separators of the locales an application supports.

    Args:
        locale: The active locale of this catalogue
        data: Catalogue data for ``locale``, or path to a JSON, YAML or TOML file
    """

    __slots__ = ("_entries", "_locale")

    def __init__(self, locale: str, data: Mapping | str | Path | None = None):
        self._entries: dict[str, dict[str, str]] = {}
        self._locale = locale

        if isinstance(data, (str, Path)):
            self.load_from_file(data)
        elif data is not None:
            self.load_from_value(data)

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str):
        self._locale = value

    @property
    def locales(self) -> list[str]:
        """Locales with loaded data."""
        return list(self._entries)

    def _merge(self, data: Mapping, locale: str | None, source: str):
        locale = locale or self._locale
        entries = _parse_catalogue(data, source)
        self._entries.setdefault(locale, {}).update(entries)
        logging.debug("Loaded %d number entries for locale '%s' from %s", len(entries), locale, source)

    def load_from_value(self, data: Mapping, locale: str | None = None):
        """Merge ``data`` into the entries of ``locale`` (the active locale by default)."""
        self._merge(data, locale, "value")

    def load_from_file(self, file_path: str | Path, locale: str | None = None):
        """
        Load catalogue data from a JSON, YAML or TOML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the format is unsupported or the data is invalid
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Locale file not found: {file_path}")

        data = _read_file(path)
        if not isinstance(data, Mapping):
            raise ValueError(f"Locale file {file_path} must contain a table")

        self._merge(data, locale, str(path))

    def find(self, key: str, locale: str | None = None) -> str | None:
        """Return the text stored under ``key``, or None if no matching locale defines it."""
        locale = locale or self._locale
        candidates = [locale]
        language = locale.replace("-", "_").split("_")[0]
        if language != locale:
            candidates.append(language)

        for candidate in candidates:
            entries = self._entries.get(candidate)
            if entries is not None and key in entries:
                return entries[key]
        return None

    def gettext(self, message: str, locale: str | None = None) -> str:
        """Return the localized label for ``message``, or ``message`` itself."""
        text = self.find(message, locale)
        return message if text is None else text


_active_catalogue: LocaleCatalogue | None = None


def set_locale(catalogue: LocaleCatalogue | None) -> LocaleCatalogue | None:
    """
    Install ``catalogue`` as the process-wide toolkit locale.

    Returns:
        The previously active catalogue
    """
    global _active_catalogue
    previous = _active_catalogue
    _active_catalogue = catalogue
    return previous


def get_locale() -> LocaleCatalogue | None:
    """Return the active catalogue, if any."""
    return _active_catalogue


def gettext(message: str) -> str:
    """Localize ``message`` with the active catalogue."""
    catalogue = _active_catalogue
    if catalogue is None:
        return message
    return catalogue.gettext(message)

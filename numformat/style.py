"""Formatting styles."""

import enum
from dataclasses import dataclass

from numformat.checks import check


class Style(enum.Flag):
    """Formatting flags accepted by the formatter."""

    NONE = 0
    WITH_THOUSANDS_SEP = enum.auto()
    NO_TRAILING_ZEROES = enum.auto()
    ONE_TRAILING_ZERO = enum.auto()
    TWO_TRAILING_ZEROES = enum.auto()
    THREE_TRAILING_ZEROES = enum.auto()


# Digits kept after the decimal separator by each trimming policy
_RETAINED_DIGITS: dict[Style, int] = {
    Style.NO_TRAILING_ZEROES: 0,
    Style.ONE_TRAILING_ZERO: 1,
    Style.TWO_TRAILING_ZEROES: 2,
    Style.THREE_TRAILING_ZEROES: 3,
}


@dataclass(frozen=True, slots=True)
class NumberStyle:
    """
    A validated style.

    Attributes:
        thousands_sep: Insert the thousands separator
        retain: Digits kept after the decimal separator when trimming
            trailing zeroes, or None to keep the string as formatted
    """

    thousands_sep: bool = False
    retain: int | None = None

    def __post_init__(self):
        if self.retain is not None and self.retain not in (0, 1, 2, 3):
            raise ValueError(f"retain must be between 0 and 3, got {self.retain}")

    @classmethod
    def from_flags(cls, flags: "Style | NumberStyle", strict: bool | None = None) -> "NumberStyle":
        """
        Build a style from :class:`Style` flags.

        Naming more than one trailing-zero policy is a contract violation;
        when checks are relaxed the trimming is dropped altogether.
        """
        if isinstance(flags, NumberStyle):
            return flags

        policies = [policy for policy in _RETAINED_DIGITS if policy in flags]
        retain = None
        if check(len(policies) <= 1, f"At most one trailing zeroes style can be used, got {flags!r}", strict):
            if policies:
                retain = _RETAINED_DIGITS[policies[0]]

        return cls(thousands_sep=Style.WITH_THOUSANDS_SEP in flags, retain=retain)

    @property
    def flags(self) -> Style:
        """The equivalent :class:`Style` flags."""
        result = Style.WITH_THOUSANDS_SEP if self.thousands_sep else Style.NONE
        for policy, retain in _RETAINED_DIGITS.items():
            if retain == self.retain:
                result |= policy
        return result


__all__ = ["Style", "NumberStyle"]

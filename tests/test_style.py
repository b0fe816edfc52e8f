"""Tests for formatting styles."""
import pytest

from numformat import ContractViolationError, NumberStyle, Style


class TestNumberStyle:

    def test_default(self):
        style = NumberStyle.from_flags(Style.NONE)
        assert style == NumberStyle(thousands_sep=False, retain=None)

    @pytest.mark.parametrize("flags, retain", [
        (Style.NO_TRAILING_ZEROES, 0),
        (Style.ONE_TRAILING_ZERO, 1),
        (Style.TWO_TRAILING_ZEROES, 2),
        (Style.THREE_TRAILING_ZEROES, 3),
    ])
    def test_trailing_zeroes_policy(self, flags, retain):
        style = NumberStyle.from_flags(flags | Style.WITH_THOUSANDS_SEP)
        assert style.thousands_sep
        assert style.retain == retain
        assert style.flags == flags | Style.WITH_THOUSANDS_SEP

    def test_several_policies_are_a_contract_violation(self):
        with pytest.raises(ContractViolationError):
            NumberStyle.from_flags(Style.ONE_TRAILING_ZERO | Style.THREE_TRAILING_ZEROES)

    def test_several_policies_drop_trimming_when_relaxed(self, caplog):
        style = NumberStyle.from_flags(
            Style.WITH_THOUSANDS_SEP | Style.ONE_TRAILING_ZERO | Style.THREE_TRAILING_ZEROES,
            strict=False,
        )
        assert style == NumberStyle(thousands_sep=True, retain=None)
        assert "At most one trailing zeroes style" in caplog.text

    def test_passes_number_style_through(self):
        style = NumberStyle(retain=2)
        assert NumberStyle.from_flags(style) is style

    def test_invalid_retain(self):
        with pytest.raises(ValueError):
            NumberStyle(retain=4)

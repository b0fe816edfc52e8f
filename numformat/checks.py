"""Reporting of contract violations (programmer errors).

With strict checks a violation raises :class:`ContractViolationError`;
otherwise it is logged and the caller falls back to a no-op. Strict checks
follow ``__debug__`` unless set explicitly.
"""

import logging


class ContractViolationError(AssertionError):
    """Raised when a formatter precondition does not hold."""


_strict: bool = __debug__


def set_strict(strict: bool) -> bool:
    """Enable or disable strict checks, returning the previous setting."""
    global _strict
    previous = _strict
    _strict = strict
    return previous


def is_strict() -> bool:
    return _strict


def check(condition: bool, message: str, strict: bool | None = None) -> bool:
    """
    Verify a precondition.

    Args:
        condition: The precondition
        message: Description of the violation
        strict: Override of the process-wide setting

    Returns:
        ``condition``, so callers can bail out when checks are relaxed

    Raises:
        ContractViolationError: If the condition fails under strict checks
    """
    if condition:
        return True

    if strict is None:
        strict = _strict
    if strict:
        raise ContractViolationError(message)

    logging.warning("Contract violation: %s", message)
    return False

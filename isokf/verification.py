"""Run-time checks that log failures and optionally raise."""

from __future__ import annotations

import logging

_logger = logging.getLogger(__name__)


class VerificationError(RuntimeError):
    """Raised when a hard run-time check fails."""


def _format_failure(expression: str, msg: str | None, expected: bool) -> str:
    text = f"Error: {expression} is not {'true' if expected else 'false'}!\n"
    if msg:
        text += f"--> msg:'{msg}'\n"
    return text


def verify(condition, expression="", msg=None, expected=True, fail=False):
    """Check that ``condition`` equals ``expected``.

    On mismatch the failure is logged; with ``fail`` set a
    :class:`VerificationError` is raised, otherwise ``False`` is returned.
    """
    if bool(condition) == bool(expected):
        return True
    text = _format_failure(expression, msg, bool(expected))
    _logger.error(text)
    if fail:
        raise VerificationError(text)
    return False


def expect_true(condition, expression="", msg=None):
    """Return True if ``condition`` holds, else log and return False."""
    return verify(condition, expression, msg, expected=True)


def expect_false(condition, expression="", msg=None):
    """Return True if ``condition`` does not hold, else log and return False."""
    return verify(condition, expression, msg, expected=False)


def expect_true_throw(condition, expression="", msg=None):
    """Raise :class:`VerificationError` unless ``condition`` holds."""
    return verify(condition, expression, msg, expected=True, fail=True)
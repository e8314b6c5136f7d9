"""Assertion facade used by cases."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from polycase.config import ExceptionMatch, get_settings


class AssertionResult(BaseModel):
    """Result of evaluating a single assertion.

    Attributes:
    ----------
    name : str
        Name of the assertion that was evaluated (e.g. ``"equals"``).
    expected : Any
        Reference value the assertion compared against.
    actual : Any
        Value produced by the code under test.
    passed : bool
        Whether the assertion passed.
    message : str | None
        Explanation of the failure, or the caller's message.
    timestamp : datetime
        UTC timestamp when the assertion was evaluated.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    expected: Any
    actual: Any
    passed: bool
    message: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class AssertionFailedError(AssertionError):
    """AssertionError with attached AssertionResult."""

    def __init__(self, result: AssertionResult):
        self.assertion_result = result
        message = f"{result.name} failed"
        if result.message:
            message += f": {result.message}"
        super().__init__(message)


def _check(name: str, passed: bool, expected: Any, actual: Any, message: str | None) -> AssertionResult:
    result = AssertionResult(
        name=name,
        expected=expected,
        actual=actual,
        passed=passed,
        message=message or None,
    )
    if not passed:
        raise AssertionFailedError(result)
    return result


def _describe(error: BaseException) -> str:
    return f"{type(error).__name__}({str(error)!r})"


def exceptions_match(expected: BaseException, actual: BaseException, match: ExceptionMatch = "message") -> bool:
    """Compare two exceptions structurally, never by identity.

    ``"message"`` requires the same concrete type and the same ``str()``.
    ``"full"`` additionally requires equal ``args`` and instance attributes.
    """
    if type(actual) is not type(expected) or str(actual) != str(expected):
        return False
    if match == "full":
        return actual.args == expected.args and getattr(actual, "__dict__", {}) == getattr(
            expected, "__dict__", {}
        )
    return True


class Assert:
    """Stateless assertion helpers that raise AssertionFailedError on mismatch."""

    @staticmethod
    def equals(expected: Any, actual: Any, message: str = "") -> AssertionResult:
        passed = bool(expected == actual)
        return _check(
            "equals", passed, expected, actual, message or (None if passed else f"expected {expected!r}, got {actual!r}")
        )

    @staticmethod
    def true(condition: Any, message: str = "") -> AssertionResult:
        passed = condition is True
        return _check("true", passed, True, condition, message or (None if passed else f"{condition!r} is not True"))

    @staticmethod
    def false(condition: Any, message: str = "") -> AssertionResult:
        passed = condition is False
        return _check(
            "false", passed, False, condition, message or (None if passed else f"{condition!r} is not False")
        )

    @staticmethod
    def throws(
        expected: BaseException,
        operation: Callable[[], Any],
        *,
        match: ExceptionMatch | None = None,
    ) -> BaseException:
        """Assert that ``operation()`` raises an exception equivalent to ``expected``.

        Parameters
        ----------
        expected : BaseException
            Exception instance describing the expected type and message.
        operation : Callable
            Zero-argument callable expected to raise.
        match : {"message", "full"} or None
            Comparison policy; defaults to ``POLYCASE_EXCEPTION_MATCH``.

        Returns
        -------
        BaseException
            The exception raised by ``operation``.

        Raises
        ------
        AssertionFailedError
            If nothing was raised, or the raised exception does not match.
        """
        policy = match or get_settings().exception_match

        try:
            operation()
        except Exception as thrown:
            if not exceptions_match(expected, thrown, policy):
                result = AssertionResult(
                    name="throws",
                    expected=expected,
                    actual=thrown,
                    passed=False,
                    message=f"expected {_describe(expected)} to be raised, got {_describe(thrown)}",
                )
                raise AssertionFailedError(result) from thrown
            return thrown

        result = AssertionResult(
            name="throws",
            expected=expected,
            actual=None,
            passed=False,
            message=f"expected {_describe(expected)} to be raised, but no exception was raised",
        )
        raise AssertionFailedError(result)

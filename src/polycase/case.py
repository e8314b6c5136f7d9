"""Module for defining self-verifying test cases."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict


class Case(BaseModel, ABC):
    """
    A single test scenario: fixed inputs plus the logic that verifies them.

    Subclasses declare their inputs as model fields and implement
    ``verify``. Inputs are validated on construction and frozen afterwards.

    Examples
    --------
    >>> class Addition(Case):
    ...     a: int
    ...     b: int
    ...     result: int
    ...
    ...     def verify(self) -> None:
    ...         Assert.equals(self.result, add(self.a, self.b))
    """

    __test__ = False  # Prevent pytest from collecting case classes

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    @abstractmethod
    def verify(self) -> None:
        """
        Run the assertions for this case.

        Raises
        ------
        AssertionError
            If any assertion does not hold. Must not be caught here.
        """

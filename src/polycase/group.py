"""Case groups: pytest test classes backed by a collection of cases."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

import pytest

from polycase.case import Case

logger = logging.getLogger(__name__)

CaseEntry = tuple[str, Case]


def _iter_entries(cases: Iterable[Any] | Mapping[Any, Case]) -> Iterator[CaseEntry]:
    """Normalize the shapes accepted from ``cases()`` into (name, case) pairs."""
    if isinstance(cases, Mapping):
        cases = cases.items()

    for index, entry in enumerate(cases):
        if isinstance(entry, Case):
            yield str(index), entry
        elif isinstance(entry, tuple) and len(entry) == 2 and isinstance(entry[1], Case):
            yield str(entry[0]), entry[1]
        else:
            msg = f"cases() entry {index} must be a Case or a (name, Case) pair, got {entry!r}"
            raise TypeError(msg)


class CaseGroup(ABC):
    """A named, ordered collection of cases run as one pytest test class.

    Subclasses only implement ``cases()``; pytest runs ``test`` once per
    named case.

    Examples:
    --------
    >>> class TestAddition(CaseGroup):
    ...     @classmethod
    ...     def cases(cls):
    ...         yield "two plus two", Addition(a=2, b=2, result=4)
    ...         yield "negatives", Addition(a=-1, b=-2, result=-3)
    """

    @classmethod
    @abstractmethod
    def cases(cls) -> Iterable[Any] | Mapping[Any, Case]:
        """Return the group's cases in declaration order.

        Either a mapping of name to case, an iterable of (name, case) pairs,
        or an iterable of bare cases named by position. Called afresh on
        every run.
        """

    @classmethod
    def provider(cls) -> Iterator[tuple[str, list[Case]]]:
        """Yield (name, [case]) for each case, as positional arguments for ``test``."""
        for name, case in _iter_entries(cls.cases()):
            yield name, [case]

    def test(self, case: Case) -> None:
        logger.debug("Verifying %s case %s", type(self).__name__, type(case).__name__)
        case.verify()

    def pytest_generate_tests(self, metafunc: pytest.Metafunc) -> None:
        """Parametrize ``test`` with one pytest item per named case."""
        if "case" not in metafunc.fixturenames:
            return

        params = [pytest.param(*args, id=name) for name, args in self.provider()]
        logger.debug("Collected %d cases for %s", len(params), type(self).__name__)
        metafunc.parametrize(["case"], params)

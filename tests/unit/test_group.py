"""Tests for polycase.group module."""

from datetime import date

import pytest

from polycase import CaseGroup
from tests.fixtures.calculator import DivisionByZero
from tests.fixtures.cases import (
    Addition,
    DivisionFails,
    Exploding,
    IsNotOverlapping,
    IsOverlapping,
    Recorded,
)
from tests.fixtures.periods import Period


class AdditionGroup(CaseGroup):
    @classmethod
    def cases(cls):
        yield "small", Addition(a=2, b=2, result=4)
        yield "negative", Addition(a=-1, b=-2, result=-3)
        yield "zero", Addition(a=0, b=0, result=0)


class MappingGroup(CaseGroup):
    @classmethod
    def cases(cls):
        return {
            "pass": Addition(a=2, b=2, result=4),
            "fail": Addition(a=2, b=2, result=5),
        }


class ListGroup(CaseGroup):
    @classmethod
    def cases(cls):
        return [Addition(a=1, b=1, result=2), Addition(a=1, b=2, result=3)]


class TestCases:
    def test_group_without_cases_is_abstract(self):
        class Incomplete(CaseGroup):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_cases_are_restartable(self):
        first = list(AdditionGroup.cases())
        second = list(AdditionGroup.cases())

        assert first == second
        for (_, a), (_, b) in zip(first, second):
            assert a is not b


class TestProvider:
    def test_wraps_each_case_in_a_single_argument_list(self):
        cases = list(AdditionGroup.cases())
        entries = list(AdditionGroup.provider())

        assert len(entries) == len(cases)
        for (name, case), (entry_name, args) in zip(cases, entries):
            assert entry_name == name
            assert args == [case]

    def test_preserves_declared_order(self):
        assert [name for name, _ in AdditionGroup.provider()] == ["small", "negative", "zero"]

    def test_accepts_mapping(self):
        entries = list(MappingGroup.provider())
        assert [name for name, _ in entries] == ["pass", "fail"]
        assert entries[1][1] == [Addition(a=2, b=2, result=5)]

    def test_names_bare_cases_by_position(self):
        entries = list(ListGroup.provider())
        assert [name for name, _ in entries] == ["0", "1"]
        assert entries[0][1] == [Addition(a=1, b=1, result=2)]

    def test_stringifies_names(self):
        class NumberedGroup(CaseGroup):
            @classmethod
            def cases(cls):
                return {10: Addition(a=5, b=5, result=10)}

        assert [name for name, _ in NumberedGroup.provider()] == ["10"]

    def test_empty_group_yields_nothing(self):
        class EmptyGroup(CaseGroup):
            @classmethod
            def cases(cls):
                return []

        assert list(EmptyGroup.provider()) == []

    def test_rejects_malformed_entries(self):
        class BrokenGroup(CaseGroup):
            @classmethod
            def cases(cls):
                yield "ok", Addition(a=1, b=1, result=2)
                yield "broken", (1, 1, 2)

        with pytest.raises(TypeError, match="entry 1"):
            list(BrokenGroup.provider())

    def test_is_lazy(self):
        calls = []

        class LazyGroup(CaseGroup):
            @classmethod
            def cases(cls):
                calls.append("cases")
                return []

        entries = LazyGroup.provider()
        assert calls == []
        list(entries)
        assert calls == ["cases"]


class TestDispatch:
    def test_passing_case_completes(self):
        AdditionGroup().test(Addition(a=2, b=2, result=4))

    def test_failing_case_raises_assertion_error(self):
        with pytest.raises(AssertionError):
            AdditionGroup().test(Addition(a=2, b=2, result=5))

    def test_failure_stops_remaining_assertions(self):
        recorded = []
        with pytest.raises(AssertionError):
            AdditionGroup().test(Recorded(record=recorded.append))
        assert recorded == ["before"]

    def test_unexpected_errors_propagate_unchanged(self):
        with pytest.raises(RuntimeError, match="boom"):
            AdditionGroup().test(Exploding())

    def test_expected_error_case_passes(self):
        case = DivisionFails(a=1, b=0, expected_error=DivisionByZero("division by zero"))
        AdditionGroup().test(case)


PERIODS = [
    Period(start=date(2024, 1, 1), end=date(2024, 1, 10)),
    Period(start=date(2024, 1, 5), end=date(2024, 1, 20)),
    Period(start=date(2024, 1, 10), end=date(2024, 1, 15)),
    Period(start=date(2024, 2, 1), end=date(2024, 2, 1)),
    Period(start=date(2023, 12, 1), end=date(2024, 3, 1)),
]


@pytest.mark.parametrize("first", PERIODS)
@pytest.mark.parametrize("second", PERIODS)
def test_overlap_cases_are_mutually_exclusive(first, second):
    outcomes = []
    for variant in (IsOverlapping, IsNotOverlapping):
        try:
            variant(first=first, second=second).verify()
        except AssertionError:
            outcomes.append(False)
        else:
            outcomes.append(True)

    assert outcomes.count(True) == 1

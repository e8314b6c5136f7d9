"""Calculator cases: value checks and expected errors in one group.

Run with pytest:
    pytest examples/calculator_cases.py

Or without it:
    python examples/calculator_cases.py
"""

from polycase import Assert, Case, CaseGroup, run


# 1. Code under test
class DivisionByZero(ArithmeticError):
    pass


def add(a: int, b: int) -> int:
    return a + b


def divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZero("division by zero")
    return a / b


# 2. One case class per kind of expectation
class Addition(Case):
    a: int
    b: int
    result: int

    def verify(self) -> None:
        Assert.equals(self.result, add(self.a, self.b))


class Division(Case):
    a: float
    b: float
    result: float

    def verify(self) -> None:
        Assert.equals(self.result, divide(self.a, self.b))


class DivisionFails(Case):
    a: float
    b: float
    expected_error: Exception

    def verify(self) -> None:
        Assert.throws(self.expected_error, lambda: divide(self.a, self.b))


# 3. Groups collected by pytest (one test per named case)
class TestAddition(CaseGroup):
    @classmethod
    def cases(cls):
        yield "two plus two", Addition(a=2, b=2, result=4)
        yield "negatives", Addition(a=-1, b=-2, result=-3)
        yield "zero", Addition(a=0, b=0, result=0)


class TestDivision(CaseGroup):
    @classmethod
    def cases(cls):
        return {
            "halves": Division(a=1, b=2, result=0.5),
            "whole": Division(a=9, b=3, result=3),
            "by zero": DivisionFails(a=1, b=0, expected_error=DivisionByZero("division by zero")),
        }


if __name__ == "__main__":
    result = run(TestAddition, TestDivision)
    raise SystemExit(0 if result.ok else 1)

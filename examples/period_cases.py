"""Period overlap cases: two case kinds over the same inputs.

For any pair of periods exactly one of IsOverlapping and IsNotOverlapping
holds.

    pytest examples/period_cases.py
"""

from dataclasses import dataclass
from datetime import date

from polycase import Assert, Case, CaseGroup, run


@dataclass(frozen=True)
class Period:
    """Half-open date range [start, end)."""

    start: date
    end: date

    def overlaps(self, other: "Period") -> bool:
        return self.start < other.end and other.start < self.end


class IsOverlapping(Case):
    first: Period
    second: Period

    def verify(self) -> None:
        Assert.true(self.first.overlaps(self.second))
        Assert.true(self.second.overlaps(self.first), "overlap must be symmetric")


class IsNotOverlapping(Case):
    first: Period
    second: Period

    def verify(self) -> None:
        Assert.false(self.first.overlaps(self.second))
        Assert.false(self.second.overlaps(self.first), "overlap must be symmetric")


JANUARY = Period(start=date(2024, 1, 1), end=date(2024, 2, 1))
MID_JANUARY = Period(start=date(2024, 1, 10), end=date(2024, 1, 20))
LATE_JANUARY = Period(start=date(2024, 1, 25), end=date(2024, 2, 10))
FEBRUARY = Period(start=date(2024, 2, 1), end=date(2024, 3, 1))


class TestPeriodOverlap(CaseGroup):
    @classmethod
    def cases(cls):
        yield "contained", IsOverlapping(first=JANUARY, second=MID_JANUARY)
        yield "partial", IsOverlapping(first=JANUARY, second=LATE_JANUARY)
        yield "identical", IsOverlapping(first=FEBRUARY, second=FEBRUARY)
        yield "adjacent", IsNotOverlapping(first=JANUARY, second=FEBRUARY)
        yield "disjoint", IsNotOverlapping(first=MID_JANUARY, second=FEBRUARY)


if __name__ == "__main__":
    raise SystemExit(0 if run(TestPeriodOverlap).ok else 1)

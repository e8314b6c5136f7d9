"""Standalone runner for executing case groups outside pytest."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum

from rich.console import Console
from rich.markup import escape

from polycase.config import get_settings
from polycase.group import CaseGroup

logger = logging.getLogger(__name__)


class CaseStatus(Enum):
    """Case execution status."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass
class CaseResult:
    """Result of verifying a single named case."""

    group: str
    name: str
    status: CaseStatus
    duration_ms: float
    error: Exception | None = None

    @property
    def full_name(self) -> str:
        """Full qualified name for display."""
        return f"{self.group}::test[{self.name}]"


@dataclass
class GroupRunResult:
    """Result of running one or more case groups."""

    results: list[CaseResult] = field(default_factory=list)
    total_duration_ms: float = 0
    stopped_early: bool = False

    @property
    def passed(self) -> int:
        """Count of passed cases."""
        return sum(1 for r in self.results if r.status == CaseStatus.PASSED)

    @property
    def failed(self) -> int:
        """Count of failed cases."""
        return sum(1 for r in self.results if r.status == CaseStatus.FAILED)

    @property
    def errors(self) -> int:
        """Count of errored cases."""
        return sum(1 for r in self.results if r.status == CaseStatus.ERROR)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def ok(self) -> bool:
        return not self.failed and not self.errors

    def get(self, name: str) -> CaseResult:
        """Return the first result recorded under ``name``."""
        for result in self.results:
            if result.name == name:
                return result
        raise KeyError(name)


class GroupRunner:
    """Runs case groups sequentially, recording each named case independently.

    Examples:
        runner = GroupRunner()
        result = runner.run(TestAddition, TestDivision)

        # Only print failures, stop after the first one
        runner = GroupRunner(verbosity=-1, maxfail=1)
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        verbosity: int | None = None,
        maxfail: int | None = None,
    ) -> None:
        self.console = console or Console()
        self.verbosity = get_settings().verbosity if verbosity is None else verbosity
        self.maxfail = maxfail if maxfail and maxfail > 0 else None

    def run(self, *groups: type[CaseGroup]) -> GroupRunResult:
        """Run every case of every group and return the results."""
        run_result = GroupRunResult()
        start = time.perf_counter()
        failures = 0

        for group in groups:
            instance = group()
            for name, args in group.provider():
                result = self._run_case(instance, name, args)
                run_result.results.append(result)
                self._print_result(result)

                if result.status != CaseStatus.PASSED:
                    failures += 1
                    if self.maxfail and failures >= self.maxfail:
                        run_result.stopped_early = True
                        break
            if run_result.stopped_early:
                self.console.print(f"[red]Stopping early after {self.maxfail} failure(s).[/red]")
                break

        run_result.total_duration_ms = (time.perf_counter() - start) * 1000
        self._print_summary(run_result)
        return run_result

    def _run_case(self, instance: CaseGroup, name: str, args: list) -> CaseResult:
        group = type(instance).__name__
        start = time.perf_counter()
        try:
            instance.test(*args)
        except AssertionError as e:
            duration = (time.perf_counter() - start) * 1000
            return CaseResult(group=group, name=name, status=CaseStatus.FAILED, duration_ms=duration, error=e)
        except Exception as e:
            logger.debug("Case %s::%s raised %s", group, name, type(e).__name__, exc_info=True)
            duration = (time.perf_counter() - start) * 1000
            return CaseResult(group=group, name=name, status=CaseStatus.ERROR, duration_ms=duration, error=e)

        duration = (time.perf_counter() - start) * 1000
        return CaseResult(group=group, name=name, status=CaseStatus.PASSED, duration_ms=duration)

    def _print_result(self, result: CaseResult) -> None:
        if self.verbosity < 0 and result.status == CaseStatus.PASSED:
            return

        full_name = escape(result.full_name)
        duration = f"[dim]({result.duration_ms:.1f}ms)[/dim]"
        if result.status == CaseStatus.PASSED:
            self.console.print(f"  [green]✓[/green] {full_name} {duration}")
        elif result.status == CaseStatus.FAILED:
            self.console.print(f"  [red]✗[/red] {full_name} {duration}")
            if result.error:
                self.console.print(f"    [red]{escape(str(result.error))}[/red]")
        else:
            self.console.print(f"  [yellow]![/yellow] {full_name} {duration}")
            if result.error:
                self.console.print(
                    f"    [yellow]{type(result.error).__name__}: {escape(str(result.error))}[/yellow]"
                )

    def _print_summary(self, run_result: GroupRunResult) -> None:
        self.console.print()
        parts = []
        if run_result.passed:
            parts.append(f"[green]{run_result.passed} passed[/green]")
        if run_result.failed:
            parts.append(f"[red]{run_result.failed} failed[/red]")
        if run_result.errors:
            parts.append(f"[yellow]{run_result.errors} errors[/yellow]")

        summary = ", ".join(parts) if parts else "[dim]0 cases[/dim]"
        self.console.print(f"[bold]{summary}[/bold] in {run_result.total_duration_ms:.0f}ms")


def run(*groups: type[CaseGroup]) -> GroupRunResult:
    """Run case groups with a default runner (convenience wrapper)."""
    return GroupRunner().run(*groups)

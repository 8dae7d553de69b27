"""
minimal test runner for the seqy test modules.

each module registers cases with @test("...") and ends with
`if __name__ == "__main__": suite.run(...)`. the same functions are plain
`test_*` callables, so pytest collects them as well.
"""
import time
import traceback
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Type


@dataclass
class _Case:
    description: str
    func: Callable[[], Any]


@dataclass
class _Outcome:
    description: str
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error is None


_registry: List[_Case] = []

_GREEN, _RED, _BLUE, _YELLOW, _GREY, _RESET = (
    '\033[92m', '\033[91m', '\033[94m', '\033[93m', '\033[90m', '\033[0m'
)


class SuiteAssertionError(AssertionError):
    """raised by the assert_* helpers; an AssertionError so pytest reports it natively."""
    pass


# --- registration ---

def test(description: str) -> Callable:
    """register the decorated function as a case; the function itself is returned unchanged."""
    def register(func: Callable) -> Callable:
        _registry.append(_Case(description, func))
        return func
    return register


# --- assertions ---

def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "values differ") -> None:
    """equality that also tells None apart from an empty container."""
    same_absence = (actual is None) == (expected is None)
    if not same_absence or actual != expected:
        raise SuiteAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


def assert_raises(exc_type: Type[BaseException], func: Callable[[], Any], message: str = "") -> BaseException:
    """call func, require exc_type, and hand the exception back for further checks."""
    try:
        func()
    except exc_type as e:
        return e
    raise SuiteAssertionError(message or f"expected {exc_type.__name__} to be raised")


# --- running ---

def _execute(case: _Case, verbose: bool) -> _Outcome:
    try:
        case.func()
    except SuiteAssertionError as e:
        return _Outcome(case.description, f"assertion failed: {e}")
    except Exception as e:
        if verbose:
            traceback.print_exc()
        return _Outcome(case.description, f"{type(e).__name__}: {e}")
    return _Outcome(case.description)


def run(title: str = "test run", verbose: bool = False) -> bool:
    """run every registered case, print a report, and return True if all passed."""
    print(f"\n{_BLUE}=== {title} ==={_RESET}")
    started = time.perf_counter()

    outcomes = [_execute(case, verbose) for case in _registry]
    for outcome in outcomes:
        if outcome.passed:
            print(f"  {_GREEN}ok  {_RESET} {outcome.description}")
        else:
            print(f"  {_RED}FAIL{_RESET} {outcome.description}")
            print(f"       {_GREY}{outcome.error}{_RESET}")

    elapsed_ms = (time.perf_counter() - started) * 1000
    failures = sum(1 for o in outcomes if not o.passed)
    colour = _RED if failures else _GREEN
    print(f"\n{colour}{len(outcomes) - failures}/{len(outcomes)} passed{_RESET}"
          f" in {_YELLOW}{elapsed_ms:.1f}ms{_RESET}\n")

    # a script may call run() more than once with fresh registrations in between
    _registry.clear()
    return failures == 0

import sys
import time
import traceback
import importlib
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import List, Dict, Any, Callable, Iterator, Type, Optional

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """custom error to distinguish assertion failures from other exceptions."""
    pass


class _Raised:
    """holds the exception caught by assert_raises, for further checks."""
    def __init__(self):
        self.exception: Optional[BaseException] = None


# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """custom assertion that raises a specific, catchable error type."""
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "values differ") -> None:
    """assert_that for equality, with both values in the failure message."""
    if actual != expected:
        raise TestAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


@contextmanager
def assert_raises(error_type: Type[BaseException], message: str = "expected an error") -> Iterator[_Raised]:
    """
    asserts the block raises error_type (or a subclass). other errors propagate.
    usage: with assert_raises(ValueError) as raised: ...; raised.exception
    """
    raised = _Raised()
    try:
        yield raised
    except error_type as e:
        raised.exception = e
        return
    raise TestAssertionError(f"{message}: {error_type.__name__} was not raised")


def run(title: str = "test run", verbose: bool = False) -> bool:
    """executes all registered tests, prints a report and returns whether all passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []
    tests_to_run = _suite_state['tests']

    for test_item in tests_to_run:
        func = test_item['func']
        description = test_item['description']

        passed = False
        error = None

        try:
            func()
            passed = True
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose:
                traceback.print_exc()

        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    all_passed = _print_summary(start_time)

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []
    return all_passed


def _print_summary(start_time: float) -> bool:
    """prints the final summary of the test run."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0


def main(test_dir: str = "ordq_tests") -> int:
    """imports every *_test.py module in test_dir and runs each as its own suite."""
    # test modules register with the importable `suite`, which is not __main__ when run as a script
    registry = importlib.import_module("suite")
    verbose = "-v" in sys.argv[1:]
    all_passed = True
    for path in sorted(Path(test_dir).glob("*_test.py")):
        importlib.import_module(f"{test_dir}.{path.stem}")
        all_passed = registry.run(title=path.stem, verbose=verbose) and all_passed
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())

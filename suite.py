import sys
import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_registry: List[Dict[str, Any]] = []

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'


class _c:
    """color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """raised by assert_that, so the report can tell failures from crashes."""
    pass


# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case. the function stays callable (and pytest-collectable)."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        _registry.append({'func': wrapper, 'description': description, 'module': func.__module__})
        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(exc_type: Type[BaseException], func: Callable[[], Any],
                  message: Optional[str] = None) -> BaseException:
    """call func and require it to raise exc_type. returns the exception for further checks."""
    try:
        func()
    except exc_type as e:
        return e
    raise SuiteAssertionError(message or f"expected {exc_type.__name__} to be raised")


def run(title: str = "test run", verbose_errors: bool = False) -> int:
    """runs every registered test, prints a report and returns the number of failures."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()
    failures = 0

    for case in _registry:
        try:
            case['func']()
            error = None
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose_errors:
                traceback.print_exc()

        if error is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {case['description']}")
        else:
            failures += 1
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {case['description']}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    duration = (time.perf_counter() - start_time) * 1000
    color = _c.ok if failures == 0 else _c.fail
    print(f"\n{color}ran {len(_registry)} tests in {duration:.2f}ms, {failures} failed{_c.reset}\n")

    # one suite per script run
    _registry.clear()
    return failures


def main(title: str) -> None:
    """run() and exit with a failing status if anything failed."""
    sys.exit(1 if run(title) else 0)

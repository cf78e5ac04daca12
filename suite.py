import sys
import time
import traceback
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Optional, Type

# registered cases, in declaration order; each one is {'func', 'description'}
_registry: List[Dict[str, Any]] = []

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'

# cases slower than this are called out in the summary
SLOW_MS = 250.0


class _c:
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """raised by assert_that, so a failed check reads differently from a crash"""
    pass


# --- registration and checks ---

def test(description: str) -> Callable:
    """
    register a zero-argument function as a test case.
    the function keeps its own name, which lets pytest collect it too.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        _registry.append({'func': wrapper, 'description': description})
        return wrapper

    return decorator


# pytest would otherwise try to collect the decorator itself
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


@contextmanager
def raises(expected: Type[BaseException], message: str = "") -> Iterator[Dict[str, Any]]:
    """
    the block must raise `expected`. the yielded dict receives the caught
    exception under 'error' so the test can inspect it afterwards.
    """
    outcome: Dict[str, Any] = {'error': None}
    try:
        yield outcome
    except expected as e:
        outcome['error'] = e
        return
    raise SuiteAssertionError(message or f"expected {expected.__name__} to be raised")


# --- running ---

def _execute(case: Dict[str, Any], verbose: bool) -> Dict[str, Any]:
    error = None
    started = time.perf_counter()
    try:
        case['func']()
    except SuiteAssertionError as e:
        error = f"assertion failed: {e}"
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
        if verbose:
            traceback.print_exc()
    elapsed = (time.perf_counter() - started) * 1000
    return {'description': case['description'], 'error': error, 'ms': elapsed}


def run(title: str = "test run", verbose: bool = False, exit_on_failure: bool = True,
        match: Optional[str] = None) -> int:
    """
    run the registered cases (only those whose description contains `match`,
    when given), print a report and return the number of failures.
    """
    selected = [case for case in _registry if match is None or match in case['description']]
    print(f"\n{_c.info}--- starting: {title} ({len(selected)} cases) ---{_c.reset}")
    started = time.perf_counter()

    results = []
    for case in selected:
        result = _execute(case, verbose)
        results.append(result)
        timing = f"{_c.grey}{result['ms']:.1f}ms{_c.reset}"
        if result['error'] is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {result['description']}  {timing}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {result['description']}  {timing}")
            print(f"    {_c.grey}└─> {result['error']}{_c.reset}")

    failures = _report(results, (time.perf_counter() - started) * 1000)

    # a script may register and run several suites one after another
    _registry.clear()

    if failures and exit_on_failure:
        sys.exit(1)
    return failures


def _report(results: List[Dict[str, Any]], total_ms: float) -> int:
    failed = [r for r in results if r['error'] is not None]
    slow = [r for r in results if r['ms'] > SLOW_MS]
    color = _c.ok if not failed else _c.fail

    print(f"\n{color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{len(results)}{_c.reset} tests in {_c.warn}{total_ms:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {len(results) - len(failed)}{_c.reset}, {_c.fail}failed: {len(failed)}{_c.reset}")
    for r in slow:
        print(f"  {_c.warn}slow:{_c.reset} {r['description']} ({r['ms']:.0f}ms)")
    for r in failed:
        print(f"  {_c.fail}✖{_c.reset} {r['description']}")
    print(f"{color}---------------{_c.reset}\n")
    return len(failed)

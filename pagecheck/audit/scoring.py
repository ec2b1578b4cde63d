import math
from typing import Iterable, Optional

from pagecheck.audit.types import Report, RuleResult


def compute_score(results: Iterable[RuleResult]) -> int:
    """
    Equal-weight percentage of passed rules.

    Each rule is worth 100 / total; the sum is rounded once, halves up.
    """
    results = list(results)
    if not results:
        return 0
    each = 100 / len(results)
    running = sum(each for r in results if r.passed)
    return int(math.floor(running + 0.5))


def build_report(results: Iterable[RuleResult], note: Optional[str] = None) -> Report:
    results = tuple(results)
    return Report(results=results, score=compute_score(results), note=note)


def gate_exit_code(report: Report) -> int:
    """0 only when every rule passed; the score plays no part."""
    return 0 if report.all_passed else 1

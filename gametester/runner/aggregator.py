from functools import reduce
from typing import Iterable

from gametester.models.results import RunOutcome, TestResults


def combine(a: TestResults, b: TestResults) -> TestResults:
    return a + b


def aggregate(outcomes: Iterable[RunOutcome]) -> TestResults:
    """Map every outcome to a fragment and fold them into one TestResults."""
    return reduce(combine, map(TestResults.from_outcome, outcomes), TestResults())

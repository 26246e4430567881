"""
Bounded-parallel execution of all seeds of a test run.

Worker threads each own one child process at a time and only block on its
I/O. The calling thread consumes outcomes as they complete and folds them
into a single TestResults, so no state is shared between workers.
"""
import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Callable, Optional

from gametester.models.config import TestConfig
from gametester.models.results import Crash, RunOutcome, TestResults
from gametester.runner.aggregator import combine
from gametester.runner.launcher import launch_game

logger = logging.getLogger(__name__)

Launcher = Callable[[TestConfig, int], RunOutcome]
ProgressCallback = Callable[[RunOutcome], None]


def default_jobs() -> int:
    return os.cpu_count() or 1


def run_tests(
    config: TestConfig,
    on_outcome: Optional[ProgressCallback] = None,
    launcher: Launcher = launch_game,
) -> TestResults:
    """
    Run every seed of `config` and aggregate the results.

    The first harness-level error (broken child communication, spawn
    failure) cancels the launches that have not started yet and is
    re-raised here. Game crashes are recorded, never raised.

    Args:
        config: Validated test configuration
        on_outcome: Called from the calling thread after each finished run
        launcher: Runs one seed; replaceable for tests

    Returns:
        TestResults over all seeds
    """
    seeds = config.seed_range
    jobs = min(config.jobs or default_jobs(), len(seeds))
    logger.info(
        "Running %d games (seeds %d..%d) on %d workers",
        len(seeds), seeds.min_seed, seeds.max_seed, jobs,
    )

    results = TestResults()
    executor = ThreadPoolExecutor(max_workers=jobs, thread_name_prefix="game")
    try:
        futures = [executor.submit(launcher, config, seed) for seed in seeds]
        for future in as_completed(futures):
            outcome = _result_or_abort(future, executor)
            if isinstance(outcome, Crash):
                logger.warning("Seed %d crashed", outcome.seed)
            results = combine(results, TestResults.from_outcome(outcome))
            if on_outcome is not None:
                on_outcome(outcome)
    finally:
        executor.shutdown(wait=True, cancel_futures=True)

    logger.info(
        "Finished %d games, %d crashed", len(seeds), len(results.failed_seeds)
    )
    return results


def _result_or_abort(future: Future, executor: ThreadPoolExecutor) -> RunOutcome:
    try:
        return future.result()
    except Exception:
        logger.error("Aborting test run, cancelling remaining games")
        executor.shutdown(wait=False, cancel_futures=True)
        raise

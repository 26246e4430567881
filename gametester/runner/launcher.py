"""
Runs the game program for a single seed.

Protocol with the child process:
- argv: game command, the four player names, the seed flag and the seed
- stdin: the full settings file, then EOF
- stdout: discarded
- stderr: read in full, then parsed for score lines
"""
import logging
import subprocess
from typing import List

from gametester.constants import SEED_FLAG
from gametester.errors import BrokenChildCommunication
from gametester.models.config import TestConfig
from gametester.models.results import Crash, RunOutcome, Success
from gametester.runner.score_parser import parse_points

logger = logging.getLogger(__name__)


def build_command(config: TestConfig, seed: int) -> List[str]:
    """argv used to run `seed`."""
    return [*config.game_command, *config.player_names(), SEED_FLAG, str(seed)]


def launch_game(config: TestConfig, seed: int) -> RunOutcome:
    """
    Run one game and report its outcome.

    A nonzero exit status is a crash of that seed and its output is not
    parsed. Failing to talk to the child is a harness problem and is raised.

    Args:
        config: Shared, read-only test configuration
        seed: Seed to run

    Returns:
        Success with the parsed points, or Crash for the seed

    Raises:
        BrokenChildCommunication: if stdin/stderr of the child are unusable
        OSError: if the game program cannot be started
    """
    cmd = build_command(config, seed)
    logger.debug("Starting seed %d: %s", seed, cmd)

    with subprocess.Popen(
        cmd,
        stdin=subprocess.PIPE,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    ) as proc:
        try:
            output = _exchange(proc, config.settings_blob, seed)
        except BrokenChildCommunication:
            proc.kill()
            raise
        returncode = proc.wait()

    if returncode != 0:
        logger.debug("Seed %d crashed with exit status %d", seed, returncode)
        return Crash(seed=seed)

    points = parse_points(output.decode("utf-8", errors="replace"), seed=seed)
    logger.debug("Seed %d finished: %s", seed, points)
    return Success(points=points, seed=seed)


def _exchange(proc: subprocess.Popen, settings: bytes, seed: int) -> bytes:
    """Send the settings and collect all of stderr before the child is reaped."""
    if proc.stdin is None:
        raise BrokenChildCommunication(seed, "no stdin handle")
    try:
        proc.stdin.write(settings)
        proc.stdin.close()
    except OSError as e:
        raise BrokenChildCommunication(seed, f"writing settings failed: {e}") from e

    if proc.stderr is None:
        raise BrokenChildCommunication(seed, "no stderr handle")
    try:
        return proc.stderr.read()
    except OSError as e:
        raise BrokenChildCommunication(seed, f"reading stderr failed: {e}") from e

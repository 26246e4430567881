"""
Score extraction from the game's diagnostic output.

The game prints one line per player, `player <name> got score <n>`, in
seating order. Scores are assigned to player slots by their position in
the output, not by the name on the line.
"""
import logging
import re
from typing import List, Optional, Tuple

from gametester.constants import NUM_PLAYERS, SCORE_LINE_PATTERN

logger = logging.getLogger(__name__)

SCORE_LINE_RE = re.compile(SCORE_LINE_PATTERN)


def parse_scores(text: str) -> List[int]:
    """Return every reported score, in order of appearance."""
    return [int(match.group(1)) for match in SCORE_LINE_RE.finditer(text)]


def parse_points(text: str, seed: Optional[int] = None) -> Tuple[int, ...]:
    """
    Map the reported scores onto the NUM_PLAYERS player slots.

    Slots without a score line stay at 0. Score lines past the last slot
    are ignored.

    Args:
        text: Decoded stderr of one game run
        seed: Seed of the run, only used in log messages

    Returns:
        Tuple of NUM_PLAYERS scores
    """
    scores = parse_scores(text)
    if len(scores) < NUM_PLAYERS:
        logger.debug(
            "Seed %s reported %d of %d scores, missing slots count as 0",
            seed, len(scores), NUM_PLAYERS,
        )
    elif len(scores) > NUM_PLAYERS:
        logger.warning(
            "Seed %s reported %d scores, ignoring all after the first %d",
            seed, len(scores), NUM_PLAYERS,
        )

    points = [0] * NUM_PLAYERS
    for i, score in enumerate(scores[:NUM_PLAYERS]):
        points[i] = score
    return tuple(points)

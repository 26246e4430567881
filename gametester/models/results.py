from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from gametester.constants import NUM_PLAYERS


@dataclass(frozen=True)
class Success:
    """Run finished with exit status 0. points are in seating order."""
    points: Tuple[int, ...]
    seed: Optional[int] = None

    def __post_init__(self):
        if len(self.points) != NUM_PLAYERS:
            raise ValueError(
                f"Expected {NUM_PLAYERS} scores, got {len(self.points)}: {self.points!r}"
            )
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class Crash:
    """Run exited with a failure status."""
    seed: int


RunOutcome = Union[Success, Crash]


@dataclass(frozen=True)
class PlayerResult:
    total_points: int = 0
    total_wins: int = 0

    def __add__(self, other: 'PlayerResult') -> 'PlayerResult':
        return PlayerResult(
            total_points=self.total_points + other.total_points,
            total_wins=self.total_wins + other.total_wins,
        )


def _empty_players() -> Tuple[PlayerResult, ...]:
    return tuple(PlayerResult() for _ in range(NUM_PLAYERS))


@dataclass(frozen=True)
class TestResults:
    """
    Aggregated results of any number of runs.

    TestResults form a commutative monoid under `+`: TestResults() is the
    identity, totals add slot-wise and failed seeds are concatenated.
    Only the multiset of failed seeds is meaningful, not their order.
    """
    __test__ = False  # not a pytest test class

    player_results: Tuple[PlayerResult, ...] = field(default_factory=_empty_players)
    failed_seeds: Tuple[int, ...] = ()

    @classmethod
    def from_outcome(cls, outcome: RunOutcome) -> 'TestResults':
        """
        Turn one run outcome into a single-run fragment.

        Every player whose score equals the best score of the run gets a win,
        so ties count as a win for each tied player.
        """
        match outcome:
            case Success(points=points):
                best = max(points)
                return cls(
                    player_results=tuple(
                        PlayerResult(total_points=p, total_wins=1 if p == best else 0)
                        for p in points
                    ),
                )
            case Crash(seed=seed):
                return cls(failed_seeds=(seed,))
            case _:
                raise TypeError(f"Unknown run outcome: {outcome!r}")

    def __add__(self, other: 'TestResults') -> 'TestResults':
        return TestResults(
            player_results=tuple(
                a + b for a, b in zip(self.player_results, other.player_results)
            ),
            failed_seeds=self.failed_seeds + other.failed_seeds,
        )

    @property
    def total_points(self) -> List[int]:
        return [r.total_points for r in self.player_results]

    @property
    def total_wins(self) -> List[int]:
        return [r.total_wins for r in self.player_results]

    def successful_games(self, instances: int) -> int:
        """Runs that count towards statistics; crashed seeds are left out."""
        return instances - len(self.failed_seeds)

    def average_points(self, instances: int) -> List[Optional[float]]:
        """Average points per player, None when no run succeeded."""
        ok_games = self.successful_games(instances)
        if ok_games <= 0:
            return [None] * len(self.player_results)
        return [r.total_points / ok_games for r in self.player_results]

    def win_rates(self, instances: int) -> List[Optional[float]]:
        """Win percentage per player (0-100), None when no run succeeded."""
        ok_games = self.successful_games(instances)
        if ok_games <= 0:
            return [None] * len(self.player_results)
        return [r.total_wins * 100.0 / ok_games for r in self.player_results]

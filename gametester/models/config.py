from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Sequence, Tuple, Union

from gametester.constants import (
    DEFAULT_GAME_COMMAND,
    NUM_PLAYERS,
    SEED_MAX,
)
from gametester.errors import InvalidTestConfig, SeedRangeOutOfBounds
from gametester.models.player import PlayerIdentity


@dataclass(frozen=True)
class SeedRange:
    """Inclusive range of seeds [min_seed, max_seed]."""
    min_seed: int
    max_seed: int

    @classmethod
    def from_start(cls, seed: int, instances: int) -> 'SeedRange':
        """
        Compute the seeds to test starting at `seed`.

        Args:
            seed: First seed, must fit in an unsigned 32-bit integer
            instances: Number of seeds to test, at least 1

        Returns:
            SeedRange covering exactly `instances` seeds

        Raises:
            SeedRangeOutOfBounds: if the last seed does not fit the seed space
        """
        if not 0 <= seed <= SEED_MAX:
            raise InvalidTestConfig(f"Seed must be within 0..{SEED_MAX}, got {seed}")
        if instances < 1:
            raise InvalidTestConfig(f"Instances must be a positive integer, got {instances}")

        max_seed = seed + instances - 1
        if max_seed > SEED_MAX:
            raise SeedRangeOutOfBounds(seed, instances)
        return cls(seed, max_seed)

    def __len__(self) -> int:
        return self.max_seed - self.min_seed + 1

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.min_seed, self.max_seed + 1))

    def __contains__(self, seed: object) -> bool:
        return isinstance(seed, int) and self.min_seed <= seed <= self.max_seed


@dataclass(frozen=True)
class TestConfig:
    """
    Everything one test run needs. Shared read-only by all workers.

    game_command is the argv prefix of the game program; the player names,
    the seed flag and the seed are appended for every run.
    jobs is the worker pool size, None meaning host parallelism.
    """
    __test__ = False  # not a pytest test class

    seed: int
    instances: int
    players: Tuple[PlayerIdentity, ...]
    settings_blob: bytes
    game_command: Tuple[str, ...] = DEFAULT_GAME_COMMAND
    jobs: Optional[int] = None
    seed_range: SeedRange = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.players) != NUM_PLAYERS:
            raise InvalidTestConfig(
                f"Expected {NUM_PLAYERS} players, got {len(self.players)}"
            )
        if not self.game_command:
            raise InvalidTestConfig("Game command must not be empty")
        if self.jobs is not None and self.jobs < 1:
            raise InvalidTestConfig(f"Jobs must be a positive integer, got {self.jobs}")
        object.__setattr__(self, "players", tuple(self.players))
        object.__setattr__(self, "game_command", tuple(self.game_command))
        object.__setattr__(self, "seed_range", SeedRange.from_start(self.seed, self.instances))

    @classmethod
    def build(
        cls,
        player_names: Sequence[str],
        seed: int,
        instances: int,
        settings_file: Union[str, Path],
        game_command: Sequence[str] = DEFAULT_GAME_COMMAND,
        jobs: Optional[int] = None,
    ) -> 'TestConfig':
        """Validate raw user input and load the settings file."""
        players = tuple(PlayerIdentity(name) for name in player_names)
        return cls(
            seed=seed,
            instances=instances,
            players=players,
            settings_blob=read_settings_file(settings_file),
            game_command=tuple(game_command),
            jobs=jobs,
        )

    def player_names(self) -> list[str]:
        """Names as passed to the game program."""
        return [player.argv_name for player in self.players]


def read_settings_file(path: Union[str, Path]) -> bytes:
    """Read the game settings file in full; its content is opaque to us."""
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise InvalidTestConfig(f"Cannot read game settings file {path}: {e}") from e

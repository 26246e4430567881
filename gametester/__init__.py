"""
Concurrent tester for seed-driven four player games.

Runs an external game program once per seed in a bounded worker pool,
parses the scores it reports on stderr and aggregates win/score statistics:
- models: PlayerIdentity, SeedRange, TestConfig and the result types
- runner: process launcher, score parser, aggregation and the worker pool
- ui: progress bar and console report
"""

from .errors import (
    GameTesterError,
    SeedRangeOutOfBounds,
    BrokenChildCommunication,
    InvalidPlayerName,
    InvalidTestConfig,
)
from .models.player import PlayerIdentity
from .models.config import SeedRange, TestConfig
from .models.results import Success, Crash, PlayerResult, TestResults
from .runner.executor import run_tests

__version__ = "0.1.0"

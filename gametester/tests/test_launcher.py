"""
Tests for running a single seed of the game program.
"""
import subprocess

import pytest

from gametester.errors import BrokenChildCommunication
from gametester.models.results import Crash, Success
from gametester.runner import launcher
from gametester.runner.launcher import build_command, launch_game


def test_build_command(make_config, fake_game_command):
    config = make_config()

    assert build_command(config, 12) == [
        *fake_game_command, "alice", "bob", "carol", "dave", "-s", "12",
    ]


def test_successful_run(make_config):
    outcome = launch_game(make_config(), 10)

    assert outcome == Success(points=(10, 11, 12, 13), seed=10)


def test_names_reach_the_game(make_config):
    outcome = launch_game(make_config(settings=b"score_by_name=1\n"), 0)

    assert outcome.points == (5, 3, 5, 4)


def test_settings_are_forwarded(make_config):
    settings = b"expect_lines=2001\n" + b"# padding\n" * 2000

    assert isinstance(launch_game(make_config(settings=settings), 3), Success)


def test_settings_mismatch_is_a_crash(make_config):
    outcome = launch_game(make_config(settings=b"expect_lines=5\n"), 3)

    assert outcome == Crash(seed=3)


def test_nonzero_exit_is_a_crash(make_config):
    outcome = launch_game(make_config(settings=b"crash_seeds=4,7\n"), 7)

    assert outcome == Crash(seed=7)


def test_partial_output_defaults_to_zero(make_config):
    outcome = launch_game(make_config(settings=b"score_lines=2\n"), 5)

    assert outcome.points == (5, 6, 0, 0)


def test_noise_and_extra_lines(make_config):
    outcome = launch_game(make_config(settings=b"noise=1\nextra_lines=3\n"), 1)

    assert outcome.points == (1, 2, 3, 4)


def test_missing_program(make_config):
    config = make_config(game_command=("/nonexistent/dir/Game",))

    with pytest.raises(OSError):
        launch_game(config, 0)


class _BrokenPopen:
    """Popen stand-in whose pipes can be removed or made to fail."""

    def __init__(self, stdin=None, stderr=None):
        self.stdin = stdin
        self.stderr = stderr
        self.killed = False

    def __call__(self, *args, **kwargs):
        return self

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def kill(self):
        self.killed = True

    def wait(self):
        return 0


class _FailingPipe:
    def write(self, data):
        raise BrokenPipeError("pipe closed")

    def close(self):
        pass


class _EmptyPipe:
    def write(self, data):
        pass

    def close(self):
        pass

    def read(self):
        return b""


@pytest.mark.parametrize("stdin,stderr", [
    (None, _EmptyPipe()),
    (_FailingPipe(), _EmptyPipe()),
    (_EmptyPipe(), None),
])
def test_broken_child_communication(monkeypatch, make_config, stdin, stderr):
    fake = _BrokenPopen(stdin=stdin, stderr=stderr)
    monkeypatch.setattr(launcher.subprocess, "Popen", fake)

    with pytest.raises(BrokenChildCommunication):
        launch_game(make_config(), 8)
    assert fake.killed


def test_uses_expected_pipes(monkeypatch, make_config):
    seen = {}
    real_popen = subprocess.Popen

    def spy(cmd, **kwargs):
        seen.update(kwargs)
        return real_popen(cmd, **kwargs)

    monkeypatch.setattr(launcher.subprocess, "Popen", spy)
    launch_game(make_config(), 0)

    assert seen["stdin"] == subprocess.PIPE
    assert seen["stdout"] == subprocess.DEVNULL
    assert seen["stderr"] == subprocess.PIPE

"""
Tests for the console report.
"""
import io

import pytest
from rich.console import Console

from gametester.models.config import TestConfig
from gametester.models.player import PlayerIdentity
from gametester.models.results import Crash, Success
from gametester.runner.aggregator import aggregate
from gametester.ui.report import ResultsReport


def _render(names, outcomes):
    players = tuple(PlayerIdentity(name) for name in names)
    config = TestConfig(seed=0, instances=len(outcomes), players=players, settings_blob=b"")
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)

    ResultsReport(console).print_results(config, aggregate(outcomes))
    return buffer.getvalue()


def test_report_lists_players_and_failed_seeds():
    out = _render(
        ["alice", "bob", "carol", "dave"],
        [Success(points=(1, 0, 0, 0)), Success(points=(0, 0, 0, 3)), Crash(seed=7)],
    )

    assert "alice" in out and "dave" in out
    assert "50.00%" in out
    assert "Faulty seeds" in out
    assert "=> 7" in out


@pytest.mark.parametrize("name", ["[/x]", "[red]x", "[bold]"])
def test_report_shows_markup_like_names_verbatim(name):
    out = _render([name, "bob", "carol", "dave"], [Success(points=(2, 1, 0, 0))])

    assert name in out


def test_report_replaces_undecodable_name_bytes():
    out = _render(["ab\udcff", "bob", "carol", "dave"], [Success(points=(2, 1, 0, 0))])

    assert "ab�" in out
    assert "\udcff" not in out
    out.encode("utf-8")

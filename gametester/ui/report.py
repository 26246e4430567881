from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gametester.models.config import TestConfig
from gametester.models.results import TestResults


def _format_number(value: Optional[float], suffix: str = "") -> str:
    if value is None:
        return "n/a"
    return f"{value:.2f}{suffix}"


class ResultsReport:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_results_table(self, config: TestConfig, results: TestResults) -> Table:
        """Per-player average points and win rate over the successful games."""
        ok_games = results.successful_games(config.instances)
        table = Table(
            title=f"[bold]Game results[/bold] ({ok_games}/{config.instances} games)",
            box=box.ROUNDED,
        )
        table.add_column("Player", style="bold")
        table.add_column("Avg points", justify="right", style="cyan")
        table.add_column("Win rate", justify="right", style="green")
        table.add_column("Wins", justify="right")

        averages = results.average_points(config.instances)
        win_rates = results.win_rates(config.instances)
        for player, avg, wr, res in zip(
            config.players, averages, win_rates, results.player_results
        ):
            table.add_row(
                Text(player.display_name),
                _format_number(avg),
                _format_number(wr, "%"),
                str(res.total_wins),
            )
        return table

    def print_failed_seeds(self, results: TestResults):
        self.console.print("[bold red]Some games crashed! Faulty seeds:[/bold red]")
        for seed in sorted(results.failed_seeds):
            self.console.print(f"=> {seed}", highlight=False)

    def print_results(self, config: TestConfig, results: TestResults):
        self.console.print(self.create_results_table(config, results))
        self.console.print()
        if results.failed_seeds:
            self.print_failed_seeds(results)

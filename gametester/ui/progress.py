from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn

from gametester.constants import PROGRESS_DESCRIPTION


def create_progress(console: Console, disable: bool = False) -> Progress:
    """Progress bar shaped like ` Running games... (3/100) ━━━━━━   3% `"""
    return Progress(
        TextColumn("[bold]{task.description}"),
        TextColumn("({task.completed}/{task.total})"),
        BarColumn(bar_width=None),
        TaskProgressColumn(),
        console=console,
        transient=True,
        disable=disable,
    )


class GameProgress:
    """Context manager that advances one step per finished game."""

    def __init__(self, total: int, console: Console, disable: bool = False):
        self.progress = create_progress(console, disable=disable)
        self.total = total
        self.task_id = None

    def __enter__(self) -> 'GameProgress':
        self.progress.start()
        self.task_id = self.progress.add_task(PROGRESS_DESCRIPTION, total=self.total)
        return self

    def __exit__(self, exc_type, exc, tb):
        self.progress.stop()

    def advance(self, *_):
        self.progress.advance(self.task_id)

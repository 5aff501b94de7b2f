"""Terminal rendering of the episode directory and timelines."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from akatimestamps.core.compactor import compact_timestamps
from akatimestamps.core.export import episode_status_message, timeline_lines
from akatimestamps.core.models import Episode
from akatimestamps.core.theme import Theme


def display_episodes(episodes: list[Episode], console: Console, theme: Theme) -> None:
    """Display the episode directory in a table."""
    if not episodes:
        console.print("No episodes found.", style=theme.foreground)
        return

    table = Table(title="AKA Timestamps", title_style=f"bold {theme.accent}")
    table.add_column("#", style="dim", width=5)
    table.add_column("Episode", style=f"bold {theme.foreground}")
    table.add_column("Timestamps", style=theme.accent)

    for episode in episodes:
        status = episode_status_message(episode)
        if status is None:
            results = episode.found_results
            assert results is not None
            count = len(compact_timestamps(results.time_stamp or []))
            status = f"{count} timestamps"
        table.add_row(str(episode.number), escape(episode.name), escape(status))

    console.print(table)


def display_timeline(episode: Episode, console: Console, theme: Theme) -> None:
    """Display one episode with its compacted timeline or status message."""
    console.print(escape(episode.name), style=f"bold {theme.accent}", highlight=False)

    status = episode_status_message(episode)
    if status is not None:
        console.print(escape(status), style=theme.foreground, highlight=False)
        return

    results = episode.found_results
    assert results is not None
    timeline = compact_timestamps(results.time_stamp or [])
    for line in timeline_lines(timeline, results.questions or []):
        console.print(escape(line), style=theme.foreground, highlight=False, soft_wrap=True)

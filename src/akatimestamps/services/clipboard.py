"""Copying exported timelines to the system clipboard."""

from __future__ import annotations

import asyncio
import shutil
import warnings
from typing import Protocol

from akatimestamps.core.errors import ClipboardError
from akatimestamps.core.export import export_results
from akatimestamps.core.models import AnalyzeResults

# Tried in order, the first one found on PATH is used
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class Clipboard(Protocol):
    """Write-only clipboard capability."""

    async def write(self, text: str) -> None: ...


class SystemClipboard:
    """Clipboard that pipes text into a platform copy command."""

    def __init__(self, commands: tuple[tuple[str, ...], ...] = CLIPBOARD_COMMANDS) -> None:
        self.commands = commands

    def find_command(self) -> tuple[str, ...] | None:
        for command in self.commands:
            if shutil.which(command[0]):
                return command
        return None

    async def write(self, text: str) -> None:
        """
        Put text on the clipboard.

        Raises:
            ClipboardError: If no copy command is available or it fails
        """
        command = self.find_command()
        if command is None:
            tried = ", ".join(tool[0] for tool in self.commands)
            raise ClipboardError(f"No clipboard command found (tried {tried})")

        # Only stdin is piped; xclip and wl-copy leave a child holding the selection
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            raise ClipboardError(f"Failed to run {command[0]}: {e}") from e

        assert process.stdin is not None
        try:
            process.stdin.write(text.encode("utf-8"))
            await process.stdin.drain()
        except (BrokenPipeError, ConnectionResetError):
            # The tool quit before reading; its exit status says why
            pass
        finally:
            process.stdin.close()

        returncode = await process.wait()
        if returncode != 0:
            raise ClipboardError(f"{command[0]} exited with status {returncode}")


async def copy_timeline(results: AnalyzeResults, clipboard: Clipboard) -> bool:
    """
    Copy the export text of an analysis to the clipboard.

    A failed write is not retried.

    Args:
        results: Analysis whose timestamps are exported
        clipboard: Where the text goes

    Returns:
        True if the text was written, False if the clipboard failed

    Raises:
        QuestionLookupError: If a timestamp references an unknown question
    """
    text = export_results(results)
    try:
        await clipboard.write(text)
    except ClipboardError as e:
        warnings.warn(f"Copy failed: {e}", UserWarning, stacklevel=2)
        return False
    return True

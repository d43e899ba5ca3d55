"""System clipboard through platform copy commands."""

import asyncio
import shutil
from typing import Optional, Sequence

from faq_navigator.core import Clipboard


# First available command wins
COPY_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


class SystemClipboard(Clipboard):
    """Copy text by piping it into a clipboard command."""
    
    def __init__(self, commands: Sequence[tuple[str, ...]] = COPY_COMMANDS) -> None:
        self.commands = commands
    
    def _find_command(self) -> Optional[tuple[str, ...]]:
        for command in self.commands:
            if shutil.which(command[0]):
                return command
        return None
    
    async def copy(self, text: str) -> None:
        command = self._find_command()
        if command is None:
            raise RuntimeError("No clipboard command available")
        
        process = await asyncio.create_subprocess_exec(
            *command,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr = await process.communicate(text.encode("utf-8"))
        
        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()
            raise RuntimeError(f"{command[0]} exited with {process.returncode}: {message}")

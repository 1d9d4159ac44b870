# move_demos/cli/utils.py

import asyncio
import sys
from typing import Awaitable

from rich.console import Console

from ..config.settings import logger

console = Console()


def run_async(coro: Awaitable):
    """
    Runs a command coroutine to completion.

    Any exception ends the command: it is printed in red and the process
    exits with status 1.
    """
    try:
        return asyncio.run(coro)
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(1)

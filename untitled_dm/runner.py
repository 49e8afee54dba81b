# untitled-dm — session launcher menu — MIT Licensed
"""
Runs the confirmed command and reports a single result event.

`CommandRunner.run` starts the program in a worker thread via
`loop.run_in_executor` so the menu keeps reacting to keys while the process
runs. Standard output and standard error are merged into one text blob that
is only available once the process has exited. There is no retry, timeout
or cancellation.

Results:
- no command bound       -> `RunCompleted(NO_COMMAND_MESSAGE)`, nothing spawned
- exit status 0          -> `RunCompleted(output)`
- exit status != 0       -> `RunFailed(output, "exit status N")`
- program failed to start -> `RunFailed("", <OS error>)`
"""
from __future__ import annotations

import asyncio
import subprocess
from concurrent.futures import Executor
from functools import partial

from untitled_dm.events import NO_COMMAND_MESSAGE, RunCompleted, RunFailed, RunResult
from untitled_dm.logger import logger
from untitled_dm.registry import Command


def run_command(command: Command) -> RunResult:
    """Run `command` to completion in the calling thread."""
    try:
        result = subprocess.run(
            command.argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            stdin=subprocess.DEVNULL,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as error:
        logger.warning("Could not start '%s': %s", command, error)
        return RunFailed(output="", error=str(error))

    if result.returncode != 0:
        logger.warning("'%s' exited with status %d", command, result.returncode)
        return RunFailed(output=result.stdout, error=f"exit status {result.returncode}")

    logger.info("'%s' completed.", command)
    return RunCompleted(output=result.stdout)


class CommandRunner:
    """
    Executes commands off the event loop.

    Args:
        executor (Executor | None): Executor used for the blocking process call.
            Defaults to the event loop's default thread pool.
    """

    def __init__(self, executor: Executor | None = None) -> None:
        self.executor = executor

    async def run(self, command: Command | None) -> RunResult:
        if command is None or not command.runnable:
            logger.debug("Confirm with no command bound.")
            return RunCompleted(output=NO_COMMAND_MESSAGE)

        logger.debug("Starting %s", command.argv)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, partial(run_command, command))

# untitled-dm — session launcher menu — MIT Licensed
"""
The menu controller: one event loop driving the selection state.

`Menu` drains a single `asyncio.Queue` of events. Key presses arrive from the
prompt_toolkit application's key bindings, run results arrive from runner
tasks started on confirm. Each event is applied to the `SelectionState` in
arrival order and the view is redrawn, so the state is never mutated
concurrently even while several commands are running.

Two runs started back to back may finish in either order; whichever result
arrives last is what the view shows.

Key bindings:
    ctrl+c, q    quit
    up, k        move cursor up
    down, j      move cursor down
    space        select / deselect the choice under the cursor
    enter        run the selected choice
"""
from __future__ import annotations

import asyncio
from functools import partial

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.layout import FormattedTextControl, Layout, Window
from prompt_toolkit.output import Output
from prompt_toolkit.patch_stdout import patch_stdout
from rich.text import Text

from untitled_dm.events import (
    KEY_BINDINGS,
    Event,
    Key,
    KeyPressed,
    RunCompleted,
    RunFailed,
)
from untitled_dm.exceptions import RunError
from untitled_dm.logger import logger
from untitled_dm.prompt_utils import rich_text_to_prompt_text
from untitled_dm.registry import Command, CommandRegistry
from untitled_dm.runner import CommandRunner
from untitled_dm.signals import QuitSignal
from untitled_dm.state import SelectionState
from untitled_dm.themes import OneColors
from untitled_dm.version import __version__

DEFAULT_TITLE = "untitled-dm"


class Menu:
    """
    Interactive launcher menu.

    Args:
        registry (CommandRegistry): Choices and the commands bound to them.
        state (SelectionState): Initial selection state, built from the
            registry's choices.
        runner (CommandRunner | None): Runner used on confirm.
        title (str): Title shown in the header.
        input (Input | None): prompt_toolkit input, defaults to the terminal.
        output (Output | None): prompt_toolkit output, defaults to the terminal.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        state: SelectionState,
        *,
        runner: CommandRunner | None = None,
        title: str = DEFAULT_TITLE,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self.registry = registry
        self.state = state
        self.runner = runner or CommandRunner()
        self.title = title
        self.input = input
        self.output = output
        self.queue: asyncio.Queue[Event] = asyncio.Queue()
        self.app: Application | None = None
        self._tasks: set[asyncio.Task] = set()

    def render(self) -> Text:
        """Render the current state as styled text."""
        view = Text()
        view.append(f"{self.title} v{__version__}\n\n", style=OneColors.BLUE_b)
        view.append("What should we do?\n")
        view.append(
            "Press space to select. Press enter to confirm selection.\n\n",
            style=OneColors.COMMENT_GREY,
        )
        if not self.state.choices:
            view.append("(no commands configured)\n", style=OneColors.COMMENT_GREY)
        for index, choice in enumerate(self.state.choices):
            cursor = ">" if index == self.state.cursor else " "
            checked = "x" if index == self.state.selected else " "
            view.append(cursor, style=OneColors.CYAN_b)
            view.append(" [")
            view.append(checked, style=OneColors.GREEN_b)
            view.append(f"] {choice}\n", style=OneColors.WHITE)

        if self.state.last_error is not None:
            view.append(
                f"\nCould not start selected option: {self.state.last_error}\n\n",
                style=OneColors.LIGHT_RED_b,
            )
            view.append(self.state.last_output)
        elif self.state.last_output:
            view.append("\n")
            view.append(self.state.last_output)

        view.append("\nPress q to quit.\n", style=OneColors.COMMENT_GREY)
        return view

    def _formatted_view(self) -> StyleAndTextTuples:
        return rich_text_to_prompt_text(self.render())

    def post(self, event: Event) -> None:
        """Add an event to the end of the stream."""
        self.queue.put_nowait(event)

    def confirm(self) -> asyncio.Task:
        """Start the selected command in the background."""
        command = self.registry.get(self.state.selected)
        logger.info("Confirmed choice %d: %s", self.state.selected, command)
        task = asyncio.create_task(self._run_command(command))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run_command(self, command: Command | None) -> None:
        try:
            result = await self.runner.run(command)
        except Exception as error:
            logger.exception("Runner failed for %s", command)
            result = RunFailed(output="", error=str(error))
        self.post(result)

    def handle(self, event: Event) -> None:
        """
        Apply one event to the selection state.

        Raises:
            QuitSignal: On the quit key.
            RunError: When a run failed and the state quits on error.
        """
        match event:
            case KeyPressed(key=Key.QUIT):
                raise QuitSignal()
            case KeyPressed(key=Key.UP):
                self.state.move_up()
            case KeyPressed(key=Key.DOWN):
                self.state.move_down()
            case KeyPressed(key=Key.TOGGLE):
                self.state.toggle_select()
            case KeyPressed(key=Key.CONFIRM):
                self.confirm()
            case RunCompleted(output=output):
                self.state.run_completed(output)
            case RunFailed(output=output, error=error):
                if self.state.run_failed(output, error):
                    raise RunError(error, output)
            case _:
                raise TypeError(f"Unsupported event: {event!r}")

    async def process_events(self) -> RunError | None:
        """
        Consume events until the session ends.

        Returns:
            The failure that ended the session under quit-on-error, or None
            when the operator quit.
        """
        while True:
            event = await self.queue.get()
            try:
                self.handle(event)
            except QuitSignal:
                logger.info("[QuitSignal] <- Exiting menu.")
                return None
            except RunError as error:
                logger.info("[RunError] <- Quitting on error: %s", error)
                return error
            finally:
                self.queue.task_done()
                if self.app is not None:
                    self.app.invalidate()

    def _on_key(self, key: Key, event: KeyPressEvent) -> None:
        self.post(KeyPressed(key))

    def _get_key_bindings(self) -> KeyBindings:
        bindings = KeyBindings()
        for name, key in KEY_BINDINGS.items():
            bindings.add(name)(partial(self._on_key, key))
        return bindings

    def _build_application(self) -> Application:
        body = Window(FormattedTextControl(self._formatted_view), wrap_lines=True)
        return Application(
            layout=Layout(body),
            key_bindings=self._get_key_bindings(),
            full_screen=False,
            input=self.input,
            output=self.output,
        )

    async def run(self) -> RunError | None:
        """Show the menu and run it until the operator quits.

        Commands still running when the menu closes are left to finish; their
        results are discarded.
        Output written to stdout while the menu is up, log records included,
        is printed above the menu instead of over it.
        """
        logger.info("Starting menu: %s", self.title)
        self.app = self._build_application()
        try:
            with patch_stdout(raw=True):
                events = asyncio.create_task(self.process_events())
                app_task = asyncio.create_task(self.app.run_async())
                done, _ = await asyncio.wait(
                    {events, app_task}, return_when=asyncio.FIRST_COMPLETED
                )
                if events in done:
                    if self.app.is_running:
                        self.app.exit()
                    else:
                        app_task.cancel()
                    await asyncio.gather(app_task, return_exceptions=True)
                    return events.result()
                events.cancel()
                app_task.result()
                return None
        finally:
            logger.info("Exiting menu: %s", self.title)

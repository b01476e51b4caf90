"""
Read-eval-print loop for a life plan.

A session loads the interpreter history and the life plan, then reads one
line at a time and feeds it to the dispatcher until the user exits. The
plan is owned by the session for its whole lifetime.
"""

from typing import Protocol

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from lipla.commands.dispatcher import Dispatcher, Outcome
from lipla.config import Settings
from lipla.core.plan import Plan
from lipla.exceptions.core import HistoryError, PlanSaveError
from lipla.logging import get_logger, session_context
from lipla.storage import load_plan, save_plan

logger = get_logger(__name__)


class Reader(Protocol):
    """Source of interpreter lines; see lipla.line_reader.LineReader."""

    def read(self, prompt: str, prefill: str = "") -> str: ...

    def add(self, line: str) -> None: ...

    def clear(self) -> None: ...

    def load_history(self, path) -> None: ...

    def save_history(self, path) -> None: ...


class Session:
    """An interactive interpreter session on one data file.

    Params:
        settings: File locations and interface options
        console: Where all output goes
        reader: Line source with history support
    """

    def __init__(self, settings: Settings, console: Console, reader: Reader):
        self.settings = settings
        self.console = console
        self.reader = reader
        self.plan = Plan()
        self.dispatcher: Dispatcher | None = None

    def warn(self, message: str, filename: str) -> None:
        """Print a non-fatal error notice naming a file."""
        self.console.print(
            f"[red]error[/red] {escape(message)} [yellow]{escape(filename)}[/yellow]",
            highlight=False,
        )

    def load_history(self) -> None:
        try:
            self.reader.load_history(self.settings.history_file)
        except HistoryError as e:
            logger.warning("History not loaded: %s", e)
            self.warn("Unable to load", e.filename)

    def save_history(self) -> None:
        try:
            self.reader.save_history(self.settings.history_file)
        except HistoryError as e:
            logger.warning("History not saved: %s", e)
            self.warn("Unable to save", e.filename)

    def save_plan(self) -> None:
        try:
            save_plan(self.plan, self.settings.data_file)
        except PlanSaveError as e:
            logger.warning("Plan not saved: %s", e)
            self.warn("Unable to save", e.filename)

    def open(self) -> bool:
        """
        Load the life plan, or confirm the creation of a new data file.

        Returns:
            False if the user declined to create a new data file

        Raises:
            PlanLoadError: If an existing data file cannot be loaded
        """
        data_file = self.settings.data_file
        if data_file.exists():
            self.plan = load_plan(data_file)
            return True
        if self.settings.assume_yes:
            return True
        return Confirm.ask(
            f"Create and use [yellow]{escape(str(data_file))}[/yellow] as database",
            console=self.console,
            default=True,
        )

    def welcome(self) -> None:
        if self.settings.uses_default_data_file and self.plan.is_empty():
            self.console.print(
                "Welcome to Lipla! Use [yellow]help[/yellow] for a list of commands",
                highlight=False,
            )
        else:
            self.console.print(
                "Welcome to Lipla! Using "
                f"[yellow]{escape(str(self.settings.data_file))}[/yellow] as database",
                highlight=False,
            )

    def run(self) -> Outcome | None:
        """
        Run the session until the user exits.

        Returns:
            The exit outcome, or None if the user declined to create a data file

        Raises:
            PlanLoadError: If the data file exists but cannot be loaded
        """
        with session_context(data_file=str(self.settings.data_file)):
            self.load_history()
            if not self.open():
                return None
            self.welcome()
            self.dispatcher = Dispatcher(self.plan, self.console, self.reader)
            try:
                outcome = self.loop()
            finally:
                self.save_history()
            if outcome is Outcome.EXIT_SAVE:
                self.save_plan()
            logger.info("Session ended with %s", outcome.value)
            return outcome

    def loop(self) -> Outcome:
        """Read and dispatch lines until an exit outcome."""
        dispatcher = self.dispatcher
        while True:
            try:
                line = self.reader.read(dispatcher.prompt, dispatcher.prefill)
            except KeyboardInterrupt:
                if dispatcher.pending:
                    self.console.print()
                    dispatcher.cancel()
                    continue
                self.console.print()
                return Outcome.EXIT_NO_SAVE
            except EOFError:
                self.console.print()
                return Outcome.EXIT_NO_SAVE
            outcome = dispatcher.feed(line)
            if outcome in (Outcome.EXIT_SAVE, Outcome.EXIT_NO_SAVE):
                return outcome

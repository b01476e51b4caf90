"""
Line editing for the interpreter prompt.

Wraps the standard library ``readline`` module: persistent history, tab
completion over the interpreter vocabulary and a pre-filled edit buffer
for updating existing descriptions. Where ``readline`` is not available
lines are read with plain ``input()`` and history is not kept.
"""

from collections.abc import Iterable
from pathlib import Path

from lipla.exceptions.core import HistoryError
from lipla.logging import get_logger
from lipla.parsing.vocabulary import COMPLETION_WORDS

try:
    import readline
except ImportError:  # pragma: no cover - platform dependent
    readline = None

logger = get_logger(__name__)


class LineReader:
    """Reads interpreter lines with history and completion.

    Params:
        words: Words offered by tab completion
    """

    def __init__(self, words: Iterable[str] = COMPLETION_WORDS):
        self.words = tuple(words)
        self._matches: list[str] = []
        if readline is None:
            logger.debug("readline is not available; history and completion disabled")
            return
        # Only interpreter commands go into the history, never descriptions
        readline.set_auto_history(False)
        readline.set_completer(self.complete)
        readline.parse_and_bind("tab: complete")

    @property
    def available(self) -> bool:
        return readline is not None

    def complete(self, text: str, state: int) -> str | None:
        """Readline completer over the vocabulary words."""
        if state == 0:
            self._matches = [word for word in self.words if word.startswith(text.lower())]
        if state < len(self._matches):
            return self._matches[state]
        return None

    def read(self, prompt: str, prefill: str = "") -> str:
        """
        Read one line.

        Params:
            prompt: The prompt to show
            prefill: Text placed in the edit buffer before the user types

        Raises:
            EOFError: On end of input
            KeyboardInterrupt: When the user hits Ctrl-C
        """
        if readline is None or not prefill:
            return input(prompt)
        readline.set_startup_hook(lambda: readline.insert_text(prefill))
        try:
            return input(prompt)
        finally:
            readline.set_startup_hook(None)

    def add(self, line: str) -> None:
        if readline is not None:
            readline.add_history(line)

    def clear(self) -> None:
        if readline is not None:
            readline.clear_history()

    def load_history(self, path: str | Path) -> None:
        """
        Load history from a file; a missing file is not an error.

        Raises:
            HistoryError: If the file exists but cannot be read
        """
        path = Path(path)
        if readline is None or not path.exists():
            return
        try:
            readline.read_history_file(str(path))
        except OSError as e:
            raise HistoryError(path, "load", e.strerror) from e
        logger.info("Loaded history from %s", path)

    def save_history(self, path: str | Path) -> None:
        """
        Write history to a file.

        Raises:
            HistoryError: If the file cannot be written
        """
        path = Path(path)
        if readline is None:
            return
        try:
            readline.write_history_file(str(path))
        except OSError as e:
            raise HistoryError(path, "save", e.strerror) from e
        logger.info("Saved history to %s", path)

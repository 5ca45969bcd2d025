"""Interactive menu over a PriorityHeap.

Output goes through a Presenter so the heap itself never prints. The
session reads lines through an injected callable, which makes scripted
sessions (tests, piped input) straightforward.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .errors import EmptyLeaderboardError, MalformedRecordError
from .heap import PriorityHeap
from .models import Entry
from .parsing import parse_menu_choice, parse_record
from .render import render_entry, render_leaderboard, render_menu

logger = logging.getLogger(__name__)


class Colors:
    """Terminal colors for console output"""
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'


class Presenter(ABC):
    """Port for rendering console output."""

    @abstractmethod
    def prompt(self, text: str) -> str:
        """Text shown before reading a line of input."""
        ...

    @abstractmethod
    def menu(self, text: str) -> None:
        ...

    @abstractmethod
    def info(self, text: str) -> None:
        ...

    @abstractmethod
    def success(self, text: str) -> None:
        ...

    @abstractmethod
    def error(self, text: str) -> None:
        ...

    @abstractmethod
    def leaderboard(self, text: str) -> None:
        ...


class PlainPresenter(Presenter):
    def __init__(self, write: Callable[[str], None] = print):
        self._write = write

    def prompt(self, text: str) -> str:
        return text

    def menu(self, text: str) -> None:
        self._write(text)

    def info(self, text: str) -> None:
        self._write(text)

    def success(self, text: str) -> None:
        self._write(text)

    def error(self, text: str) -> None:
        self._write(text)

    def leaderboard(self, text: str) -> None:
        self._write(text)


class ColorPresenter(PlainPresenter):
    """ANSI-colored variant of PlainPresenter."""

    def prompt(self, text: str) -> str:
        return f"{Colors.CYAN}{text}{Colors.END}"

    def menu(self, text: str) -> None:
        head, _, rest = text.partition("\n")
        self._write(f"{Colors.HEADER}{Colors.BOLD}{head}{Colors.END}\n{rest}")

    def info(self, text: str) -> None:
        self._write(f"{Colors.BLUE}{text}{Colors.END}")

    def success(self, text: str) -> None:
        self._write(f"{Colors.GREEN}{text}{Colors.END}")

    def error(self, text: str) -> None:
        self._write(f"{Colors.RED}{text}{Colors.END}")

    def leaderboard(self, text: str) -> None:
        head, _, rest = text.partition("\n")
        self._write(f"{Colors.YELLOW}{Colors.BOLD}{head}{Colors.END}\n{rest}")


class ConsoleSession:
    """Runs the numbered leaderboard menu until exit or end of input."""

    def __init__(
        self,
        heap: PriorityHeap[Entry],
        presenter: Presenter,
        read_line: Callable[[str], str] = input,
    ):
        self._heap = heap
        self._presenter = presenter
        self._read_line = read_line

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self._read_line(self._presenter.prompt(prompt))
        except EOFError:
            return None

    def run(self) -> int:
        """Return the process exit code."""
        while True:
            self._presenter.menu(render_menu())
            line = self._read("Enter your choice: ")
            if line is None:
                logger.debug("End of input, leaving menu")
                return 0

            choice = parse_menu_choice(line)
            if choice is None:
                self._presenter.error("Invalid choice! Try again...")
                return 1

            logger.debug(f"Menu choice {choice}")
            if choice == 0:
                self._presenter.info("Exiting the program...")
                return 0
            if choice == 1:
                if not self.add_user():
                    return 0
            elif choice == 2:
                self.view_top()
            elif choice == 3:
                self.view_leaderboard()
            elif choice == 4:
                if not self.find_user():
                    return 0
            elif choice == 5:
                self.remove_top()
            else:
                self._presenter.error("Invalid choice. Please try again.")

    def add_user(self) -> bool:
        """Prompt until a valid record is entered. False on end of input."""
        while True:
            line = self._read("Enter user details (username power) space-separated: ")
            if line is None:
                return False
            try:
                name, score = parse_record(line)
            except MalformedRecordError as exc:
                logger.debug(str(exc))
                self._presenter.error(exc.user_message)
                continue
            entry = Entry(name=name, score=score)
            self._heap.insert(entry)
            logger.info(f"Added {entry.name} ({entry.score}, {entry.rank})")
            self._presenter.success("User added successfully.")
            return True

    def view_top(self) -> None:
        try:
            top = self._heap.peek_top()
        except EmptyLeaderboardError as exc:
            self._presenter.error(exc.user_message)
            return
        self._presenter.info(render_entry(top, label="Top User"))

    def view_leaderboard(self) -> None:
        self._presenter.leaderboard(render_leaderboard(self._heap.to_ordered_snapshot()))

    def find_user(self) -> bool:
        line = self._read("Enter username: ")
        if line is None:
            return False
        name = line.strip()
        found = self._heap.find_by_name(name)
        if found is None:
            self._presenter.error(f"User '{name}' not found.")
        else:
            self._presenter.info(render_entry(found, label="Found User"))
        return True

    def remove_top(self) -> None:
        try:
            removed = self._heap.extract_top()
        except EmptyLeaderboardError as exc:
            self._presenter.error(exc.user_message)
            return
        logger.info(f"Removed {removed.name}")
        self._presenter.success(f"Successfully removed {removed.name}")

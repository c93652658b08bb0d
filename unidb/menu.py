"""The interactive menu that dispatches typed commands, and the program entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from unidb.commands import (
    AddStudent,
    ChangeIncome,
    Command,
    DeleteByIndexNumber,
    DeleteByPesel,
    EndProgram,
    GenerateStudent,
    GenerateWorker,
    LoadRecords,
    PrintAllRecords,
    PrintMenu,
    SaveRecords,
    SearchByPesel,
    SearchOption,
    SortByIncome,
    SortByPesel,
    SortBySurname,
    ValidatePeselNumber,
)
from unidb.console import Console
from unidb.database import Database

MENU_ORDER = (
    "menu",
    "show",
    "load",
    "save",
    "search1",
    "search2",
    "sort1",
    "sort2",
    "sort3",
    "del1",
    "del2",
    "vpesel",
    "change",
    "q",
    "w",
    "s",
)


class Menu:
    """Reads command names from the console and runs the matching command."""

    def __init__(self, db: Database | None = None, console: Console | None = None) -> None:
        self.db = Database() if db is None else db
        self.console = Console() if console is None else console
        self._finished = False
        self.options: dict[str, Command] = {}
        db, console = self.db, self.console
        self.options.update(
            {
                "menu": PrintMenu(db, console, self.options, MENU_ORDER),
                "show": PrintAllRecords(db, console),
                "load": LoadRecords(db, console),
                "add": AddStudent(db, console),
                "search1": SearchOption(db, console),
                "search2": SearchByPesel(db, console),
                "sort1": SortBySurname(db, console),
                "sort2": SortByPesel(db, console),
                "sort3": SortByIncome(db, console),
                "del1": DeleteByPesel(db, console),
                "del2": DeleteByIndexNumber(db, console),
                "vpesel": ValidatePeselNumber(db, console),
                "change": ChangeIncome(db, console),
                "save": SaveRecords(db, console),
                "q": EndProgram(db, console, self._finish),
                "w": GenerateWorker(db, console),
                "s": GenerateStudent(db, console),
            }
        )

    @property
    def finished(self) -> bool:
        """True once the end command has been run."""
        return self._finished

    def _finish(self) -> None:
        self._finished = True

    def run(self) -> None:
        """Show the menu, then run commands until the end command or end of input."""
        self.options["menu"].run()
        try:
            while not self._finished:
                self.console.write("Write command: ")
                command = self.options.get(self.console.read_token())
                if command is None:
                    self.console.write("Wrong option!\n")
                    continue
                command.run()
        except EOFError:
            self.console.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive university database."""
    parser = argparse.ArgumentParser(
        prog="unidb", description="Interactive database of students and workers."
    )
    parser.parse_args(argv)
    try:
        Menu().run()
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
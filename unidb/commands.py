"""Interactive commands acting on a database through a console."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path

from unidb.console import Console
from unidb.database import Database
from unidb.gender import Gender, text_to_gender, translate_gender
from unidb.pesel import PESEL_LENGTH, check_pesel
from unidb.person import Address, Person, Student, Worker

DEFAULT_FILE_NAME = "db.txt"
PESEL_TRIES = 3
MAX_GENERATED_INDEX = 1_000_000
MAX_GENERATED_INCOME = 50_000

GENDERS = (Gender.MALE, Gender.FEMALE)
MALE_NAMES = ("Adam", "Karol", "Tomasz", "Jan", "Zbigniew", "Mateusz", "Andrzej")
FEMALE_NAMES = ("Anna", "Karolina", "Maria", "Magda", "Olga", "Kasia", "Agnieszka")
LAST_NAMES = ("Kowalski", "Nowak", "Boruc", "Piątek", "Wolsztyn")
CITIES = ("Gdańsk", "Bydgoszcz", "Warszawa", "Wrocław", "Kraków", "Olsztyn")
STREETS = ("Gdańska", "Bydgoska", "Warszawska", "Wrocławska", "Krakowska")
STREET_NUMBERS = ("1", "2", "3", "3a", "34", "5/12", "7-1")


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid {what}: {text!r}") from None


def _parse_unsigned(text: str, what: str) -> int:
    value = _parse_int(text, what)
    if value < 0:
        raise ValueError(f"invalid {what}: {text!r}")
    return value


class Command(ABC):
    """An action the menu can run, with the database and console it works on."""

    title = ""

    def __init__(self, db: Database, console: Console) -> None:
        self.db = db
        self.console = console

    @abstractmethod
    def run(self) -> None:
        """Carry out the command."""

    @property
    def name(self) -> str:
        """The description shown in the menu."""
        return self.title

    def _ask(self, prompt: str) -> str:
        self.console.write(prompt)
        return self.console.read_token()

    def _ask_letter(self) -> str:
        letter = self.console.read_token()[0]
        self.console.write(f"{letter}\n")
        return letter

    def _print_persons(self, persons: Sequence[Person], what: str) -> None:
        if not persons:
            self.console.write(f"Not found Student with this {what}\n")
            return
        for person in persons:
            person.print_person(self.console.out)


class AddStudent(Command):
    title = "Add Student"

    def run(self) -> None:
        first_name = self._ask("\n First Name: ")
        surname = self._ask(" Surname: ")
        city = self._ask(" Address (city): ")
        street = self._ask(" Address (street): ")
        number = self._ask(" Address (numberOfStreet): ")
        index = _parse_unsigned(self._ask(" Index Number: "), "index number")
        gender = text_to_gender(self._ask(" Gender [Male][Female][Undefined] : "))
        self.console.write(f"Gender set : {translate_gender(gender)}\n")

        tries_left = PESEL_TRIES
        while True:
            pesel = self._ask(" Pesel: ")
            if check_pesel(pesel):
                student = Student(
                    first_name=first_name,
                    surname=surname,
                    address=Address(city, street, number),
                    pesel=pesel,
                    gender=gender,
                    index_number=index,
                )
                added = self.db.add_person(student)
                self.console.write("Student added.\n" if added else "Student NOT added.\n")
                return
            self.console.write("\nError: wrong PESEL number!\n")
            tries_left -= 1
            self.console.write(" Try insert PESEL again (y/n)\n")
            if self._ask_letter() == "n" or tries_left == 0:
                self.console.write("\nStudent NOT added!\n")
                return


class ChangeIncome(Command):
    title = "Change income"

    def run(self) -> None:
        tries_left = PESEL_TRIES
        while True:
            pesel = self._ask("\n Worker Pesel: ")
            if check_pesel(pesel):
                found = self.db.search_by_pesel(pesel)
                if len(found) != 1:
                    self.console.write("\nNo worker with this pesel in database.\n")
                    continue
                worker = found[0]
                if not isinstance(worker, Worker):
                    self.console.write("\nThis person is not worker.\n")
                    continue
                worker.print_person(self.console.out)
                self.console.write(" Want to change income (y/n)\n")
                if self._ask_letter() == "n":
                    self.console.write("\nNo change.\n")
                    return
                income = _parse_int(self._ask(" New Income value:\n"), "income")
                if income < 0:
                    self.console.write("\nNo change (less than zero ignored).\n")
                    return
                worker.income = income
                self.console.write(f"\nIncome changed to: {income}\n")
                return

            self.console.write("\nError: PESEL number not walid!\n")
            tries_left -= 1
            self.console.write(" Try insert PESEL again (y/n)\n")
            if self._ask_letter() == "n" or tries_left == 0:
                self.console.write("\nNo change.\n")
                return


class DeleteByIndexNumber(Command):
    title = "Delete By Index"

    def run(self) -> None:
        index = _parse_unsigned(
            self._ask("enter the index number to be remove: "), "index number"
        )
        self.console.write("---------DELETE BY INDEX (AFTER)-----------\n")
        self.db.delete_by_index(index)
        self.db.print_all(self.console.out)


class DeleteByPesel(Command):
    title = "Delete By Pesel"

    def run(self) -> None:
        pesel = self._ask("enter the pesel to be remove: ")
        self.console.write("---------DELETE BY PESEL (AFTER)-----------\n")
        self.db.delete_by_pesel(pesel)
        self.db.print_all(self.console.out)


class EndProgram(Command):
    title = "End Program"

    def __init__(self, db: Database, console: Console, on_end: Callable[[], None]) -> None:
        super().__init__(db, console)
        self._on_end = on_end

    def run(self) -> None:
        self._on_end()


def _random_pesel(rng: random.Random) -> str:
    pesel = "1" * PESEL_LENGTH
    while not check_pesel(pesel):
        pesel = "".join(str(rng.randrange(10)) for _ in range(PESEL_LENGTH))
    return pesel


def _random_identity(rng: random.Random) -> dict:
    gender = rng.choice(GENDERS)
    names = MALE_NAMES if gender is Gender.MALE else FEMALE_NAMES
    first_name = rng.choice(names)
    address = Address(rng.choice(CITIES), rng.choice(STREETS), rng.choice(STREET_NUMBERS))
    surname = rng.choice(LAST_NAMES)
    return {
        "first_name": first_name,
        "surname": surname,
        "address": address,
        "pesel": _random_pesel(rng),
        "gender": gender,
    }


class GenerateStudent(Command):
    title = "Generate Student"

    def __init__(
        self, db: Database, console: Console, rng: random.Random | None = None
    ) -> None:
        super().__init__(db, console)
        self._rng = random.Random() if rng is None else rng

    def run(self) -> None:
        identity = _random_identity(self._rng)
        student = Student(**identity, index_number=self._rng.randrange(MAX_GENERATED_INDEX))
        added = self.db.add_person(student)
        self.console.write("Student added.\n" if added else "Student NOT added.\n")


class GenerateWorker(Command):
    title = "Generate Worker"

    def __init__(
        self, db: Database, console: Console, rng: random.Random | None = None
    ) -> None:
        super().__init__(db, console)
        self._rng = random.Random() if rng is None else rng

    def run(self) -> None:
        identity = _random_identity(self._rng)
        worker = Worker(**identity, income=self._rng.randrange(MAX_GENERATED_INCOME))
        added = self.db.add_person(worker)
        self.console.write("Worker added.\n" if added else "Worker NOT added.\n")


class LoadRecords(Command):
    title = "Load Records"

    def __init__(
        self, db: Database, console: Console, file_name: str | Path = DEFAULT_FILE_NAME
    ) -> None:
        super().__init__(db, console)
        self.file_name = file_name

    def run(self) -> None:
        self.console.write("---------LOAD RECORD FROM FILE-----------\n")
        try:
            self.db.load_from_file(self.file_name)
        except OSError:
            self.console.write("Error! Invalid data.\n")


class PrintAllRecords(Command):
    title = "Print All Records"

    def run(self) -> None:
        self.console.write("---------PRINT RECORDS FROM FILE-----------\n")
        self.db.print_all(self.console.out)


class PrintMenu(Command):
    title = "Show Menu"

    def __init__(
        self,
        db: Database,
        console: Console,
        options: Mapping[str, Command],
        order: Iterable[str],
    ) -> None:
        super().__init__(db, console)
        self._options = options
        self._order = list(order)

    @property
    def order(self) -> tuple[str, ...]:
        """The commands listed in the menu, in print order."""
        return tuple(self._order)

    def run(self) -> None:
        self.console.write(
            "*************************************\n"
            "****** UNIVERSITY-DB DATABASE *******\n"
            "*************************************\n"
            "   COMMAND -> EFFECT\n"
            "-------------------------------------\n"
        )
        for option in self._order:
            command = self._options.get(option)
            if command is None:
                self.console.write(
                    "Warning: option in order don't exist(removing it from menu).\n"
                )
                self._order = [known for known in self._order if known in self._options]
                self.run()
                return
            self.console.write(f"{option:>10} -> {command.name}\n")


class SaveRecords(Command):
    title = "Save Records"

    def __init__(
        self, db: Database, console: Console, file_name: str | Path = DEFAULT_FILE_NAME
    ) -> None:
        super().__init__(db, console)
        self.file_name = file_name

    def run(self) -> None:
        self.console.write("---------SAVE RECORD TO FILE-----------\n")
        try:
            self.db.save_to_file(self.file_name)
        except OSError:
            self.console.write(f"Error! Could not open {self.file_name} !\n")


class SearchByPesel(Command):
    title = "Search By Pesel"

    def run(self) -> None:
        pesel = self._ask("enter the search pesel: ")
        self._print_persons(self.db.search_by_pesel(pesel), "pesel")


_SEARCHES: dict[str, Callable[[Database, str], list[Person]]] = {
    "surname": Database.search_by_surname,
    "firstname": Database.search_by_first_name,
    "city": Database.search_by_city,
    "street": Database.search_by_street,
}


class SearchOption(Command):
    title = "Search"

    def run(self) -> None:
        what = self._ask("Enter the search type: firstname / surname / city / street:")
        search = _SEARCHES.get(what)
        if search is None:
            self.console.write(
                "Error. Unknown option, please choose from : surname, firstname, city, street\n"
            )
            return
        value = self._ask(f"enter the search {what}: ")
        self._print_persons(search(self.db, value), what)


class SortByIncome(Command):
    title = "Sort By Income"

    def run(self) -> None:
        self.console.write("---------SORT BY INCOME (AFTER)-----------\n")
        self.db.sort_by_income()
        self.db.print_all(self.console.out)


class SortByPesel(Command):
    title = "Sort By Pesel"

    def run(self) -> None:
        self.console.write("---------SORT BY PESEL (AFTER)-----------\n")
        self.db.sort_by_pesel()
        self.db.print_all(self.console.out)


class SortBySurname(Command):
    title = "Sort By Surname"

    def run(self) -> None:
        self.console.write("---------SORT BY SURNAME (AFTER)-----------\n")
        self.db.sort_by_surname()
        self.db.print_all(self.console.out)


class ValidatePeselNumber(Command):
    title = "Validate PESEL"

    def run(self) -> None:
        pesel = self._ask("enter the pesel to be check: ")
        self.console.write("---------CHECK PESEL-----------\n")
        self.console.write("Pesel valid\n" if check_pesel(pesel) else "Pesel not valid\n")
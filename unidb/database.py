"""In-memory store of students and workers with search, sort and file I/O."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from itertools import islice
from pathlib import Path
from typing import TextIO

from unidb.gender import text_to_gender
from unidb.person import Address, Person, Student, Worker, tokenize

_WORKER_FIELDS = 8
_STUDENT_FIELDS = 8


def _take(tokens: Iterator[str], count: int, kind: str) -> list[str]:
    fields = list(islice(tokens, count))
    if len(fields) != count:
        raise ValueError(f"truncated {kind} record: expected {count} fields, got {len(fields)}")
    return fields


def _unsigned(text: str, what: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"invalid {what}: {text!r}")
    return int(text)


def read_persons(text: str) -> Iterator[Person]:
    """Yield the persons described by the records in ``text``.

    Raises ValueError for an unknown record type or a malformed record.
    """
    tokens = tokenize(text)
    for kind in tokens:
        if kind == "WORKER":
            first, surname, city, street, number, pesel, gender, income = _take(
                tokens, _WORKER_FIELDS, kind
            )
            yield Worker(
                first_name=first,
                surname=surname,
                address=Address(city, street, number),
                pesel=pesel,
                gender=text_to_gender(gender),
                income=_unsigned(income, "income"),
            )
        elif kind == "STUDENT":
            first, surname, city, street, number, index, pesel, gender = _take(
                tokens, _STUDENT_FIELDS, kind
            )
            yield Student(
                first_name=first,
                surname=surname,
                address=Address(city, street, number),
                pesel=pesel,
                gender=text_to_gender(gender),
                index_number=_unsigned(index, "index number"),
            )
        else:
            raise ValueError(f"Don't know how to read this type of person:{kind}")


class Database:
    """An ordered collection of persons, unique by PESEL."""

    def __init__(self) -> None:
        self._persons: list[Person] = []

    def __len__(self) -> int:
        return len(self._persons)

    @property
    def persons(self) -> tuple[Person, ...]:
        """The stored persons, in their current order."""
        return tuple(self._persons)

    def add_person(self, person: Person) -> bool:
        """Add ``person`` unless one with the same PESEL is stored; report success."""
        if any(other.pesel == person.pesel for other in self._persons):
            print("Person already exist. Adding abort.")
            return False
        self._persons.append(person)
        return True

    def print_all(self, file: TextIO | None = None) -> None:
        """Write a card for every stored person."""
        out = sys.stdout if file is None else file
        out.write("\t Database: \n")
        if not self._persons:
            out.write("Error! Empty Database!\n")
            return
        for person in self._persons:
            person.print_person(out)
        out.write("\n")

    def save_to_file(self, file_name: str | Path) -> None:
        """Write every person as one record line; raise OSError if the file cannot be opened."""
        with open(file_name, "w", encoding="utf-8") as stream:
            for person in self._persons:
                stream.write(person.to_record() + "\n")

    def load_from_file(self, file_name: str | Path) -> None:
        """Replace the contents with the persons read from ``file_name``.

        Raises OSError if the file cannot be read and ValueError for bad records.
        """
        self._persons.clear()
        text = Path(file_name).read_text(encoding="utf-8")
        for person in read_persons(text):
            if not self.add_person(person):
                print("Add person to database from file failed.")

    def _matching(self, attribute: str, value: object) -> list[Person]:
        return [person for person in self._persons if getattr(person, attribute) == value]

    def search_by_pesel(self, pesel: str) -> list[Person]:
        return self._matching("pesel", pesel)

    def search_by_first_name(self, first_name: str) -> list[Person]:
        return self._matching("first_name", first_name)

    def search_by_surname(self, surname: str) -> list[Person]:
        return self._matching("surname", surname)

    def search_by_street(self, street: str) -> list[Person]:
        return self._matching("street", street)

    def search_by_city(self, city: str) -> list[Person]:
        return self._matching("city", city)

    def sort_by_pesel(self, reverse: bool = False) -> None:
        self._persons.sort(key=lambda person: person.pesel, reverse=reverse)

    def sort_by_surname(self, reverse: bool = False) -> None:
        self._persons.sort(key=lambda person: person.surname, reverse=reverse)

    def sort_by_income(self, reverse: bool = False) -> None:
        """Order workers by income; persons without an income follow them."""
        workers = [person for person in self._persons if isinstance(person, Worker)]
        others = [person for person in self._persons if not isinstance(person, Worker)]
        workers.sort(key=lambda worker: worker.income, reverse=reverse)
        self._persons = [*workers, *others]

    def _delete_where(self, predicate) -> None:
        self._persons = [person for person in self._persons if not predicate(person)]

    def delete_by_pesel(self, pesel: str) -> None:
        self._delete_where(lambda person: person.pesel == pesel)

    def delete_by_index(self, index_number: int) -> None:
        self._delete_where(
            lambda person: isinstance(person, Student) and person.index_number == index_number
        )

    def delete_by_first_name(self, first_name: str) -> None:
        self._delete_where(lambda person: person.first_name == first_name)

    def delete_by_surname(self, surname: str) -> None:
        self._delete_where(lambda person: person.surname == surname)
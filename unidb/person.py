"""People kept in the database: students and workers."""

from __future__ import annotations

import re
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from unidb.gender import Gender, translate_gender

_FIELD_PATTERN = re.compile(r'"((?:[^"\\]|\\.)*)"|(\S+)', re.DOTALL)
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_RULE = "*******************************************"


def quote(text: str) -> str:
    """Wrap ``text`` in double quotes, escaping quotes and backslashes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def tokenize(text: str) -> Iterator[str]:
    """Yield whitespace-separated tokens, unquoting those written by :func:`quote`."""
    for match in _FIELD_PATTERN.finditer(text):
        quoted, plain = match.groups()
        if quoted is not None:
            yield _ESCAPE.sub(r"\1", quoted)
        elif plain.startswith('"'):
            raise ValueError(f"unterminated quoted token: {plain!r}")
        else:
            yield plain


@dataclass
class Address:
    """Postal address of a person."""

    city: str
    street: str
    number_of_street: str


@dataclass
class Person(ABC):
    """Fields shared by every kind of person."""

    first_name: str
    surname: str
    address: Address
    pesel: str
    gender: Gender

    @property
    def city(self) -> str:
        return self.address.city

    @property
    def street(self) -> str:
        return self.address.street

    def formatted_address(self) -> str:
        """Return the address as three quoted fields separated by spaces."""
        parts = (self.address.city, self.address.street, self.address.number_of_street)
        return " ".join(quote(part) for part in parts)

    @abstractmethod
    def print_person(self, file: TextIO | None = None) -> None:
        """Write a human-readable card for this person."""

    @abstractmethod
    def to_record(self) -> str:
        """Return the one-line text record of this person, without a newline."""


@dataclass
class Student(Person):
    """A student, identified additionally by an index number."""

    index_number: int

    def print_person(self, file: TextIO | None = None) -> None:
        out = sys.stdout if file is None else file
        lines = (
            "******************STUDENT*******************",
            f"FirstName: {self.first_name}",
            f"SurName:   {self.surname}",
            f"Address:   {self.formatted_address()}",
            f"Index:     {self.index_number}",
            f"Pesel:     {self.pesel}",
            _RULE,
        )
        out.write("\n".join(lines) + "\n")

    def to_record(self) -> str:
        return " ".join(
            (
                "STUDENT",
                quote(self.first_name),
                quote(self.surname),
                self.formatted_address(),
                str(self.index_number),
                quote(self.pesel),
                translate_gender(self.gender),
            )
        )


@dataclass
class Worker(Person):
    """A worker, who earns an income."""

    income: int

    def print_person(self, file: TextIO | None = None) -> None:
        out = sys.stdout if file is None else file
        lines = (
            "******************WORKER*******************",
            f"FirstName: {self.first_name}",
            f"SurName:   {self.surname}",
            f"Address:   {self.formatted_address()}",
            f"Pesel:     {self.pesel}",
            f"Income:    {self.income}",
            _RULE,
        )
        out.write("\n".join(lines) + "\n")

    def to_record(self) -> str:
        return " ".join(
            (
                "WORKER",
                quote(self.first_name),
                quote(self.surname),
                self.formatted_address(),
                quote(self.pesel),
                translate_gender(self.gender),
                str(self.income),
            )
        )
"""Gender values and their text form."""

from __future__ import annotations

from enum import Enum


class Gender(Enum):
    """Gender of a person, valued by its text form."""

    MALE = "Male"
    FEMALE = "Female"
    UNDEFINED = "Undefined"


def text_to_gender(text: str) -> Gender:
    """Return the gender named by ``text``, or UNDEFINED when it names none."""
    try:
        return Gender(text)
    except ValueError:
        return Gender.UNDEFINED


def translate_gender(gender: Gender) -> str:
    """Return the text form of ``gender``; raise ValueError for an unknown value."""
    return Gender(gender).value
"""Simple record types: books, bank accounts and people."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Book:
    """A book with its title, author and page count."""

    name: str
    author: str
    pages: int

    def describe(self) -> str:
        return (
            f"Name of the book is {self.name} author is {self.author}"
            f" the number of pages of the book  is {self.pages}"
        )


@dataclass
class BankAccount:
    """A named account holding a dollar balance."""

    name: str
    balance: int = 0

    def withdraw(self, amount: int) -> None:
        """Take ``amount`` off the balance."""
        self.balance -= amount

    def describe(self) -> str:
        return f"{self.name} has {self.balance} dollars"


@dataclass
class Person:
    """A person's name, id and CGPA as entered."""

    name: str
    id: str
    cgpa: str

    def describe(self, number: int) -> str:
        """Describe the person as entry ``number`` of a listing."""
        return "\n".join(
            (
                f"The name of person {number} is: {self.name}",
                f"The id of person {number} is: {self.id}",
                f"The cgpa of person {number} is: {self.cgpa}",
            )
        )


def find_person(people: Iterable[Person], name: str) -> Person:
    """Return the first person called ``name``; KeyError if there is none."""
    for person in people:
        if person.name == name:
            return person
    raise KeyError(name)
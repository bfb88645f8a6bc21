import pytest

from dsakit.records import BankAccount, Book, Person, find_person


def test_book_describe():
    book = Book("Learn_C++", "Abid", 529)
    assert book.describe() == (
        "Name of the book is Learn_C++ author is Abid"
        " the number of pages of the book  is 529"
    )


def test_bank_account_describe():
    account = BankAccount("Abid", 1000)
    assert account.describe() == "Abid has 1000 dollars"


def test_bank_account_withdraw():
    account = BankAccount("Rina", 500)
    account.withdraw(33)
    assert account.balance == 500 - 33
    assert account.describe() == f"Rina has {500 - 33} dollars"


def test_withdrawals_accumulate():
    account = BankAccount("Rina", 100)
    for _ in range(3):
        account.withdraw(10)
    assert account.balance == 100 - 3 * 10


def test_person_describe():
    person = Person("Ana", "17", "3.9")
    assert person.describe(2).splitlines() == [
        "The name of person 2 is: Ana",
        "The id of person 2 is: 17",
        "The cgpa of person 2 is: 3.9",
    ]


def test_find_person_returns_first_match():
    first = Person("Ana", "1", "3.1")
    second = Person("Ana", "2", "3.5")
    other = Person("Ben", "3", "3.0")
    assert find_person([other, first, second], "Ana") is first
    assert find_person(iter([other, first]), "Ben") is other


def test_find_person_missing():
    with pytest.raises(KeyError):
        find_person([Person("Ana", "1", "3.1")], "Zed")
    with pytest.raises(KeyError):
        find_person([], "Ana")
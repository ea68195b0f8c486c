"""Domain entities: Person."""

import re
from dataclasses import dataclass

# Field markers used by the storage line and the add command.
PHONE_PREFIX = "p/"
EMAIL_PREFIX = "e/"

# ASCII classes: \w is [A-Za-z0-9_], \s is plain whitespace.
NAME_PATTERN = re.compile(r"(\w|\s)+", re.ASCII)
PHONE_PATTERN = re.compile(r"\d+", re.ASCII)
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+", re.ASCII)


@dataclass(frozen=True)
class Person:
    """
    Represents one entry of the address book.
    A Person is immutable once created; equality is by value of all three fields.
    """

    name: str
    phone: str
    email: str

    def __post_init__(self):
        name = (self.name or "").strip()
        if not NAME_PATTERN.fullmatch(name):
            raise ValueError(
                "Person name must be non-empty letters, digits or whitespace."
            )
        object.__setattr__(self, "name", name)

        if not PHONE_PATTERN.fullmatch(self.phone or ""):
            raise ValueError("Person phone must be a non-empty digit string.")

        email = self.email or ""
        if not EMAIL_PATTERN.fullmatch(email):
            raise ValueError("Person email must look like user@domain.tld.")
        # A marker inside the email would make the storage line undecodable.
        if PHONE_PREFIX in email or EMAIL_PREFIX in email:
            raise ValueError(
                f"Person email must not contain '{PHONE_PREFIX}' or '{EMAIL_PREFIX}'."
            )

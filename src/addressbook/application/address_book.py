"""Owned state of one address book session: the store and the listing view."""

import logging
from dataclasses import dataclass, field

from addressbook.application.codec import (
    decode_from_storage_line,
    encode_to_storage_line,
)
from addressbook.application.errors import DecodeError, StorageLoadError
from addressbook.application.listing_view import ListingView
from addressbook.application.person_store import PersonStore
from addressbook.application.ports import PersonStorage
from addressbook.domain import Person

logger = logging.getLogger(__name__)


@dataclass
class AddressBook:
    """PersonStore plus ListingView. Only the command engine mutates either."""

    store: PersonStore = field(default_factory=PersonStore)
    view: ListingView | None = None

    def __post_init__(self):
        if self.view is None:
            self.view = ListingView(fallback=self.store.all)


def decode_storage_lines(lines: list[str]) -> list[Person]:
    """Decode every line or none: the first bad line raises StorageLoadError."""
    persons = []
    for number, line in enumerate(lines, start=1):
        try:
            persons.append(decode_from_storage_line(line))
        except DecodeError as e:
            logger.error("Rejected storage line %d: %s", number, e)
            raise StorageLoadError(number, line) from e
    return persons


def _persist_to(storage: PersonStorage):
    def _save(persons: list[Person]) -> None:
        storage.write_lines([encode_to_storage_line(p) for p in persons])
        logger.info("Saved %d persons", len(persons))

    return _save


def open_address_book(storage: PersonStorage) -> AddressBook:
    """Load all persons from storage and wire every mutation back to it.

    Until the first list or find, delete addresses the live store contents.
    """
    persons = decode_storage_lines(storage.read_lines())
    store = PersonStore(on_change=_persist_to(storage))
    store.load_all(persons)
    logger.info("Loaded %d persons", len(persons))
    return AddressBook(store=store)

"""
Address book core: clean-architecture layout.

- domain: entities (Person). No outer dependencies.
- application: codec, PersonStore, ListingView, CommandEngine, ports, DTOs.
- infrastructure: adapters (TextFileStorage, InMemoryPersonStorage, YAML catalog).
"""

from addressbook.application import (
    AddressBook,
    CommandEngine,
    CommandResult,
    DecodeError,
    DisplayIndexError,
    ListingView,
    MessageCatalog,
    PersonStorage,
    PersonStore,
    StorageIOError,
    StorageLoadError,
    open_address_book,
)
from addressbook.domain import Person
from addressbook.infrastructure import InMemoryPersonStorage, TextFileStorage, get_catalog

__all__ = [
    "AddressBook",
    "CommandEngine",
    "CommandResult",
    "DecodeError",
    "DisplayIndexError",
    "InMemoryPersonStorage",
    "ListingView",
    "MessageCatalog",
    "Person",
    "PersonStorage",
    "PersonStore",
    "StorageIOError",
    "StorageLoadError",
    "TextFileStorage",
    "get_catalog",
    "open_address_book",
]

"""Application layer: codec, store, listing view, command engine. Depends only on domain."""

from addressbook.application.address_book import (
    AddressBook,
    decode_storage_lines,
    open_address_book,
)
from addressbook.application.codec import (
    decode_from_command_args,
    decode_from_storage_line,
    encode_to_display_string,
    encode_to_storage_line,
)
from addressbook.application.command_engine import CommandEngine
from addressbook.application.dto import CommandResult, CommandUsage, MessageCatalog
from addressbook.application.errors import (
    AddressBookError,
    CommandFormatError,
    DecodeError,
    DisplayIndexError,
    StorageError,
    StorageIOError,
    StorageLoadError,
)
from addressbook.application.listing_view import ListingView
from addressbook.application.person_store import PersonStore
from addressbook.application.ports import PersonStorage

__all__ = [
    "AddressBook",
    "AddressBookError",
    "CommandEngine",
    "CommandFormatError",
    "CommandResult",
    "CommandUsage",
    "DecodeError",
    "DisplayIndexError",
    "ListingView",
    "MessageCatalog",
    "PersonStorage",
    "PersonStore",
    "StorageError",
    "StorageIOError",
    "StorageLoadError",
    "decode_from_command_args",
    "decode_from_storage_line",
    "decode_storage_lines",
    "encode_to_display_string",
    "encode_to_storage_line",
    "open_address_book",
]

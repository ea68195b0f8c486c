"""Command engine: one input line in, one feedback string out."""

import logging
import re
from collections.abc import Callable

from addressbook.application.address_book import AddressBook
from addressbook.application.codec import (
    decode_from_command_args,
    encode_to_display_string,
)
from addressbook.application.dto import CommandResult, MessageCatalog
from addressbook.application.errors import (
    CommandFormatError,
    DecodeError,
    DisplayIndexError,
)
from addressbook.application.listing_view import DISPLAYED_INDEX_OFFSET
from addressbook.domain import Person

logger = logging.getLogger(__name__)

COMMAND_ADD_WORD = "add"
COMMAND_FIND_WORD = "find"
COMMAND_LIST_WORD = "list"
COMMAND_DELETE_WORD = "delete"
COMMAND_CLEAR_WORD = "clear"
COMMAND_HELP_WORD = "help"
COMMAND_EXIT_WORD = "exit"

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
# Largest display index accepted as well-formed (signed 32-bit).
MAX_DISPLAY_INDEX = 2**31 - 1


def split_command_word_and_args(raw: str) -> tuple[str, str]:
    """Split on the first run of whitespace. Missing args become ""."""
    parts = raw.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def parse_display_index(raw_args: str) -> int:
    """Parse a delete argument: a base-10 integer in 1..MAX_DISPLAY_INDEX, nothing else."""
    text = raw_args.strip()
    if not _INTEGER.fullmatch(text):
        raise CommandFormatError(COMMAND_DELETE_WORD, f"Not an integer: {text!r}")
    index = int(text)
    if index > MAX_DISPLAY_INDEX:
        raise CommandFormatError(COMMAND_DELETE_WORD, f"Index too large: {index}")
    if index < DISPLAYED_INDEX_OFFSET:
        raise CommandFormatError(COMMAND_DELETE_WORD, f"Index must be >= 1: {index}")
    return index


class CommandEngine:
    """Dispatches command words to handlers over an owned AddressBook.

    Recoverable errors (bad format, bad index) become feedback. StorageError
    raised while persisting a mutation propagates to the caller.
    """

    def __init__(self, book: AddressBook, catalog: MessageCatalog) -> None:
        self._book = book
        self._catalog = catalog
        self._handlers: dict[str, Callable[[str], CommandResult]] = {
            COMMAND_ADD_WORD: self._add,
            COMMAND_FIND_WORD: self._find,
            COMMAND_LIST_WORD: self._list,
            COMMAND_DELETE_WORD: self._delete,
            COMMAND_CLEAR_WORD: self._clear,
            COMMAND_HELP_WORD: self._help,
            COMMAND_EXIT_WORD: self._exit,
        }

    @property
    def book(self) -> AddressBook:
        return self._book

    def execute(self, line: str) -> CommandResult:
        word, args = split_command_word_and_args(line)
        handler = self._handlers.get(word)
        try:
            if handler is None:
                logger.info("Unknown command: %r", word)
                raise CommandFormatError(word)
            logger.debug("Dispatching %s", word)
            return handler(args)
        except CommandFormatError as e:
            return CommandResult(self._invalid_format(e.command))
        except DisplayIndexError:
            return CommandResult(self._catalog.format("invalid_index"))

    def _invalid_format(self, command: str) -> str:
        if command in self._catalog.commands and command in self._handlers:
            usage = self._catalog.usage(command)
        else:
            usage = self._catalog.usage_for_all()
        return self._catalog.format(
            "invalid_command_format", command=command, usage=usage
        )

    def _show(self, persons: list[Person]) -> str:
        """Indexed listing plus count; the shown persons become the listing view."""
        self._book.view.set(persons)
        lines = [
            "\t"
            + self._catalog.format(
                "list_element",
                index=i,
                person=encode_to_display_string(person),
            )
            for i, person in enumerate(persons, start=DISPLAYED_INDEX_OFFSET)
        ]
        lines.append(self._catalog.format("persons_found", count=len(persons)))
        return "\n".join(lines)

    def _add(self, args: str) -> CommandResult:
        try:
            person = decode_from_command_args(args)
        except DecodeError as e:
            logger.info("add rejected: %s", e)
            raise CommandFormatError(COMMAND_ADD_WORD, str(e)) from e
        self._book.store.add(person)
        return CommandResult(
            self._catalog.format(
                "added", name=person.name, phone=person.phone, email=person.email
            )
        )

    def _find(self, args: str) -> CommandResult:
        keywords = set(args.split())
        found = self._book.store.find_by_name_keywords(keywords)
        return CommandResult(self._show(found))

    def _list(self, args: str) -> CommandResult:
        return CommandResult(self._show(self._book.store.all()))

    def _delete(self, args: str) -> CommandResult:
        index = parse_display_index(args)
        target = self._book.view.resolve(index)
        if not self._book.store.remove_exact(target):
            return CommandResult(self._catalog.format("person_not_found"))
        return CommandResult(
            self._catalog.format("deleted", person=encode_to_display_string(target))
        )

    def _clear(self, args: str) -> CommandResult:
        self._book.store.clear()
        return CommandResult(self._catalog.format("cleared"))

    def _help(self, args: str) -> CommandResult:
        return CommandResult(self._catalog.usage_for_all())

    def _exit(self, args: str) -> CommandResult:
        return CommandResult(self._catalog.format("goodbye"), exit_requested=True)

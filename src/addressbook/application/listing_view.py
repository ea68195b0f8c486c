"""Persons last shown by list or find; resolves display indexes."""

from collections.abc import Callable, Iterable

from addressbook.application.errors import DisplayIndexError
from addressbook.domain import Person

DISPLAYED_INDEX_OFFSET = 1


class ListingView:
    """Until the first set() the view follows fallback (the live store contents).

    After set() it is a copy, never a live view: later store changes do not
    alter or renumber it until the next set().
    """

    def __init__(self, fallback: Callable[[], list[Person]] | None = None) -> None:
        self._snapshot: list[Person] | None = None
        self._fallback = fallback

    def set(self, persons: Iterable[Person]) -> None:
        self._snapshot = list(persons)

    def persons(self) -> list[Person]:
        if self._snapshot is not None:
            return list(self._snapshot)
        if self._fallback is not None:
            return list(self._fallback())
        return []

    def is_valid_index(self, display_index: int) -> bool:
        return (
            DISPLAYED_INDEX_OFFSET
            <= display_index
            < len(self.persons()) + DISPLAYED_INDEX_OFFSET
        )

    def resolve(self, display_index: int) -> Person:
        """Return the person shown at 1-based display_index, or raise DisplayIndexError."""
        persons = self.persons()
        position = display_index - DISPLAYED_INDEX_OFFSET
        if not 0 <= position < len(persons):
            raise DisplayIndexError(display_index, len(persons))
        return persons[position]

    def __len__(self) -> int:
        return len(self.persons())

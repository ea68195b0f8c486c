"""Authoritative ordered collection of persons, persisted on every mutation."""

import logging
from collections.abc import Callable, Iterable

from addressbook.domain import Person

logger = logging.getLogger(__name__)

OnChange = Callable[[list[Person]], None]


def _name_words(name: str) -> set[str]:
    return {word.lower() for word in name.split()}


class PersonStore:
    """Stores persons in insertion order. Duplicates by value are allowed.

    on_change receives the full contents after add, a successful remove, and
    clear. Errors it raises propagate to the caller.
    """

    def __init__(self, on_change: OnChange | None = None) -> None:
        self._persons: list[Person] = []
        self._on_change = on_change

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self.all())

    def load_all(self, persons: Iterable[Person]) -> None:
        """Replace the whole contents. Does not call on_change."""
        self._persons = list(persons)

    def add(self, person: Person) -> None:
        self._persons.append(person)
        self._changed()

    def remove_exact(self, person: Person) -> bool:
        """Remove the first person equal by value. Returns True if one was removed.

        Among textually identical persons the first match wins; they are
        indistinguishable by design of the value-equality model.
        """
        try:
            self._persons.remove(person)
        except ValueError:
            return False
        self._changed()
        return True

    def clear(self) -> None:
        self._persons.clear()
        self._changed()

    def all(self) -> list[Person]:
        """Return a copy of the contents in insertion order."""
        return list(self._persons)

    def find_by_name_keywords(self, keywords: Iterable[str]) -> list[Person]:
        """Return persons whose name shares a whole word with keywords (case-insensitive).

        An empty keyword collection matches nothing.
        """
        needles = {k.lower() for k in keywords}
        if not needles:
            return []
        matched = [
            p for p in self._persons if not _name_words(p.name).isdisjoint(needles)
        ]
        logger.debug(
            "find %s matched %d of %d", sorted(needles), len(matched), len(self._persons)
        )
        return matched

    def __len__(self) -> int:
        return len(self._persons)

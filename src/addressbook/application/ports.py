"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol


class PersonStorage(Protocol):
    """Line-oriented durable storage for encoded persons."""

    def read_lines(self) -> list[str]:
        """Return every stored line in file order. Raises StorageIOError."""
        ...

    def write_lines(self, lines: list[str]) -> None:
        """Replace the stored contents with lines. Raises StorageIOError."""
        ...

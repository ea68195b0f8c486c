"""Error taxonomy. Command errors are recoverable; storage errors are fatal."""


class AddressBookError(Exception):
    """Base class for all address book errors."""


class DecodeError(AddressBookError, ValueError):
    """Text could not be decoded into a valid Person."""


class DisplayIndexError(AddressBookError, IndexError):
    """A display index does not fit the current listing view."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Display index {index} is outside 1..{size}.")
        self.index = index
        self.size = size


class CommandFormatError(AddressBookError, ValueError):
    """Unknown command word or malformed command arguments."""

    def __init__(self, command: str, detail: str = "") -> None:
        super().__init__(detail or f"Invalid command format: {command}")
        self.command = command


class StorageError(AddressBookError):
    """The storage file cannot be trusted; the program must stop."""


class StorageLoadError(StorageError):
    """A line of the storage file is not a valid storage line."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(f"Storage line {line_number} is invalid: {line!r}")
        self.line_number = line_number
        self.line = line


class StorageIOError(StorageError):
    """The storage file cannot be validated, created, read or written.

    reason is one of: invalid_path, create, missing, read, write.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Storage {reason} failed: {path}")
        self.path = path
        self.reason = reason

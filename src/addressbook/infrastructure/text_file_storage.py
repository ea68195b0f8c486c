"""Plain text file implementation of PersonStorage: one storage line per person."""

import logging
from pathlib import Path

from addressbook.application.errors import StorageIOError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_FILEPATH = "addressbook.txt"


def is_valid_file_path(file_path: str | None) -> bool:
    """Parent directory must exist; name needs an extension; an existing path must be a file."""
    if not file_path:
        return False
    try:
        path = Path(file_path)
        if not path.parent.is_dir():
            return False
        return path.name.rfind(".") > 0 and (not path.exists() or path.is_file())
    except (OSError, ValueError):
        return False


class TextFileStorage:
    """Reads and rewrites a whole UTF-8 text file. No partial writes, no appends."""

    def __init__(self, file_path: str) -> None:
        if not is_valid_file_path(file_path):
            raise StorageIOError(file_path, "invalid_path")
        self._path = Path(file_path)

    @property
    def path(self) -> str:
        return str(self._path)

    def exists(self) -> bool:
        return self._path.exists()

    def ensure_exists(self) -> bool:
        """Create an empty file if missing. Returns True if it was created."""
        if self._path.exists():
            return False
        try:
            self._path.touch(exist_ok=False)
        except OSError as e:
            logger.error("Unable to create %s: %s", self._path, e)
            raise StorageIOError(self.path, "create") from e
        logger.info("Created new empty storage file %s", self._path)
        return True

    def read_lines(self) -> list[str]:
        """Split on "\\n" only, the separator write_lines emits; a CRLF ending is tolerated."""
        try:
            with self._path.open("r", encoding="utf-8", newline="") as f:
                text = f.read()
        except FileNotFoundError as e:
            raise StorageIOError(self.path, "missing") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Unable to read %s: %s", self._path, e)
            raise StorageIOError(self.path, "read") from e
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line[:-1] if line.endswith("\r") else line for line in lines]

    def write_lines(self, lines: list[str]) -> None:
        content = "".join(line + "\n" for line in lines)
        try:
            with self._path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except OSError as e:
            logger.error("Unable to write %s: %s", self._path, e)
            raise StorageIOError(self.path, "write") from e

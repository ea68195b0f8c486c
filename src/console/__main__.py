"""
Terminal address book: one command per input line, feedback on stdout.
Run: python -m console [custom storage file path] (from repo root, with .env or env vars set).
"""
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, TextIO

from dotenv import load_dotenv

# Repo root: from src/console/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from addressbook.application import (  # noqa: E402
    CommandEngine,
    MessageCatalog,
    StorageIOError,
    StorageLoadError,
    open_address_book,
)
from addressbook.infrastructure import (  # noqa: E402
    DEFAULT_STORAGE_FILEPATH,
    TextFileStorage,
    get_catalog,
)

logger = logging.getLogger(__name__)

LINE_PREFIX = "|| "
INPUT_COMMENT_MARKER = "#"
DEFAULT_LOG_LEVEL = "WARNING"

# StorageIOError.reason -> catalog message id
_STORAGE_ERROR_MESSAGES = {
    "invalid_path": "invalid_file",
    "create": "error_creating_storage_file",
    "missing": "error_missing_storage_file",
    "read": "error_reading_from_file",
    "write": "error_writing_to_file",
}


class Console:
    """Line I/O around a CommandEngine: prefixes output, filters input, exits."""

    def __init__(self, catalog: MessageCatalog, stdin: TextIO, stdout: TextIO) -> None:
        self._catalog = catalog
        self._stdin = stdin
        self._stdout = stdout

    @property
    def catalog(self) -> MessageCatalog:
        return self._catalog

    def show(self, *messages: str) -> None:
        for message in messages:
            for line in message.split("\n"):
                self._stdout.write(LINE_PREFIX + line + "\n")

    def msg(self, message_id: str, **template_vars: object) -> str:
        return self._catalog.format(message_id, **template_vars)

    def show_welcome(self) -> None:
        divider = self.msg("divider")
        self.show(divider, divider, self.msg("version"), self.msg("welcome"), divider)

    def show_result(self, feedback: str) -> None:
        self.show(feedback, self.msg("divider"))

    def exit_program(self, message: str | None = None) -> NoReturn:
        divider = self.msg("divider")
        self.show(message or self.msg("goodbye"), divider, divider)
        raise SystemExit(0)

    def fail(self, error: StorageIOError) -> NoReturn:
        logger.error("Fatal storage error (%s): %s", error.reason, error.path)
        self.show(self.msg(_STORAGE_ERROR_MESSAGES[error.reason], path=error.path))
        self.exit_program()

    def read_command(self) -> str | None:
        """Return the next line that is neither blank nor a comment; None at end of input."""
        self._stdout.write(LINE_PREFIX + self.msg("prompt"))
        self._stdout.flush()
        while True:
            line = self._stdin.readline()
            if not line:
                return None
            stripped = line.strip()
            if stripped and not stripped.startswith(INPUT_COMMENT_MARKER):
                return line.rstrip("\r\n")


def storage_path_from_args(console: Console, args: list[str]) -> str:
    """Custom path from the single program argument, else ADDRESSBOOK_STORAGE_PATH, else default."""
    if len(args) >= 2:
        console.show(console.msg("invalid_program_args"))
        console.exit_program()
    if len(args) == 1:
        return args[0]
    configured = os.environ.get("ADDRESSBOOK_STORAGE_PATH", "").strip()
    if configured:
        console.show(console.msg("using_configured_file", path=configured))
        return configured
    console.show(console.msg("using_default_file", path=DEFAULT_STORAGE_FILEPATH))
    return DEFAULT_STORAGE_FILEPATH


def setup_storage(console: Console, file_path: str) -> TextFileStorage:
    """Validate the path and create the file if missing."""
    try:
        storage = TextFileStorage(file_path)
    except StorageIOError as e:
        console.fail(e)
    if not storage.exists():
        console.show(console.msg("error_missing_storage_file", path=file_path))
        try:
            storage.ensure_exists()
        except StorageIOError as e:
            console.fail(e)
        console.show(console.msg("storage_file_created", path=file_path))
    return storage


def run(args: list[str], stdin: TextIO, stdout: TextIO) -> NoReturn:
    """Run the command loop until exit, end of input or a fatal storage error."""
    console = Console(get_catalog(), stdin, stdout)
    console.show_welcome()
    storage = setup_storage(console, storage_path_from_args(console, args))

    try:
        book = open_address_book(storage)
    except StorageLoadError:
        console.show(console.msg("invalid_storage_file_content"))
        console.exit_program()
    except StorageIOError as e:
        console.fail(e)

    engine = CommandEngine(book, console.catalog)
    while True:
        command = console.read_command()
        if command is None:
            console.exit_program()
        console.show(console.msg("command_entered", command=command))
        try:
            result = engine.execute(command)
        except StorageIOError as e:
            console.fail(e)
        if result.exit_requested:
            console.exit_program(result.feedback)
        console.show_result(result.feedback)


def log_level_from_env() -> str:
    """ADDRESSBOOK_LOG_LEVEL if it names a logging level, else WARNING."""
    level = os.environ.get("ADDRESSBOOK_LOG_LEVEL", "").strip().upper()
    if level in logging.getLevelNamesMapping():
        return level
    if level:
        print(
            f"Unknown ADDRESSBOOK_LOG_LEVEL {level!r}, using {DEFAULT_LOG_LEVEL}",
            file=sys.stderr,
        )
    return DEFAULT_LOG_LEVEL


def main() -> None:
    level = log_level_from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )
    run(sys.argv[1:], sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()

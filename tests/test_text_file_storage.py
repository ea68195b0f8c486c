"""Tests for TextFileStorage and loading an address book from a file."""

import pytest

from addressbook.application import (
    CommandEngine,
    StorageIOError,
    StorageLoadError,
    decode_storage_lines,
    open_address_book,
)
from addressbook.domain import Person
from addressbook.infrastructure import TextFileStorage, is_valid_file_path, load_catalog


def test_is_valid_file_path(tmp_path) -> None:
    assert is_valid_file_path(str(tmp_path / "book.txt"))
    assert not is_valid_file_path("")
    assert not is_valid_file_path(None)
    assert not is_valid_file_path(str(tmp_path / "noextension"))
    assert not is_valid_file_path(str(tmp_path / ".hidden"))
    assert not is_valid_file_path(str(tmp_path / "missing_dir" / "book.txt"))


def test_directory_is_not_a_valid_file(tmp_path) -> None:
    folder = tmp_path / "data.dir"
    folder.mkdir()
    assert not is_valid_file_path(str(folder))


def test_invalid_path_raises_on_construction(tmp_path) -> None:
    with pytest.raises(StorageIOError) as exc_info:
        TextFileStorage(str(tmp_path / "nope"))
    assert exc_info.value.reason == "invalid_path"


def test_ensure_exists_creates_empty_file_once(tmp_path) -> None:
    path = tmp_path / "book.txt"
    storage = TextFileStorage(str(path))
    assert not storage.exists()
    assert storage.ensure_exists() is True
    assert path.read_text() == ""
    assert storage.ensure_exists() is False


def test_write_then_read_lines(tmp_path) -> None:
    path = tmp_path / "book.txt"
    storage = TextFileStorage(str(path))
    storage.write_lines(["A p/1 e/a@b.c", "B p/2 e/b@b.c"])
    assert path.read_text(encoding="utf-8") == "A p/1 e/a@b.c\nB p/2 e/b@b.c\n"
    assert storage.read_lines() == ["A p/1 e/a@b.c", "B p/2 e/b@b.c"]


def test_write_empty_leaves_zero_lines(tmp_path) -> None:
    path = tmp_path / "book.txt"
    path.write_text("A p/1 e/a@b.c\n")
    storage = TextFileStorage(str(path))
    storage.write_lines([])
    assert path.read_text() == ""
    assert storage.read_lines() == []


def test_read_missing_file_raises(tmp_path) -> None:
    storage = TextFileStorage(str(tmp_path / "book.txt"))
    with pytest.raises(StorageIOError) as exc_info:
        storage.read_lines()
    assert exc_info.value.reason == "missing"


def test_write_failure_raises(tmp_path) -> None:
    path = tmp_path / "book.txt"
    storage = TextFileStorage(str(path))
    path.mkdir()
    with pytest.raises(StorageIOError) as exc_info:
        storage.write_lines(["A p/1 e/a@b.c"])
    assert exc_info.value.reason == "write"


def test_open_address_book_loads_in_file_order(tmp_path) -> None:
    path = tmp_path / "book.txt"
    path.write_text("Bob p/2 e/b@x.org\nAlice p/1 e/a@x.org\n")
    book = open_address_book(TextFileStorage(str(path)))
    assert book.store.all() == [
        Person(name="Bob", phone="2", email="b@x.org"),
        Person(name="Alice", phone="1", email="a@x.org"),
    ]


def test_mutations_rewrite_the_file(tmp_path) -> None:
    path = tmp_path / "book.txt"
    path.write_text("Bob p/2 e/b@x.org\n")
    book = open_address_book(TextFileStorage(str(path)))
    book.store.add(Person(name="Alice", phone="1", email="a@x.org"))
    assert path.read_text() == "Bob p/2 e/b@x.org\nAlice p/1 e/a@x.org\n"
    book.store.clear()
    assert path.read_text() == ""


def test_one_malformed_line_aborts_whole_load(tmp_path) -> None:
    path = tmp_path / "book.txt"
    path.write_text("Bob p/2 e/b@x.org\nbroken line\nAlice p/1 e/a@x.org\n")
    with pytest.raises(StorageLoadError) as exc_info:
        open_address_book(TextFileStorage(str(path)))
    assert exc_info.value.line_number == 2
    assert exc_info.value.line == "broken line"


def test_decode_storage_lines_rejects_blank_line() -> None:
    with pytest.raises(StorageLoadError):
        decode_storage_lines(["A p/1 e/a@b.c", ""])


@pytest.mark.parametrize("name", ["Jo\x0cDoe", "Jo\x0bDoe", "Jo\rDoe", "Jo\tDoe"])
def test_name_with_control_whitespace_survives_reload(tmp_path, name: str) -> None:
    path = tmp_path / "book.txt"
    path.write_text("")
    catalog = load_catalog()
    engine = CommandEngine(open_address_book(TextFileStorage(str(path))), catalog)
    assert engine.execute(f"add {name} p/1 e/a@b.c").feedback.startswith(
        "New person added"
    )

    reloaded = open_address_book(TextFileStorage(str(path)))
    assert reloaded.store.all() == [Person(name=name, phone="1", email="a@b.c")]


def test_crlf_line_endings_are_read(tmp_path) -> None:
    path = tmp_path / "book.txt"
    path.write_bytes(b"A p/1 e/a@b.c\r\nB p/2 e/b@b.c\r\n")
    assert TextFileStorage(str(path)).read_lines() == ["A p/1 e/a@b.c", "B p/2 e/b@b.c"]


def test_file_without_trailing_newline(tmp_path) -> None:
    path = tmp_path / "book.txt"
    path.write_bytes(b"A p/1 e/a@b.c")
    assert TextFileStorage(str(path)).read_lines() == ["A p/1 e/a@b.c"]

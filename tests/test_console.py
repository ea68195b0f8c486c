"""End-to-end tests for the terminal front end with in-memory streams."""

import io

import pytest

from console.__main__ import log_level_from_env, run


def _run(args: list[str], commands: str) -> tuple[int, str]:
    stdout = io.StringIO()
    with pytest.raises(SystemExit) as exc_info:
        run(args, io.StringIO(commands), stdout)
    return exc_info.value.code, stdout.getvalue()


def test_session_add_list_delete_exit(tmp_path) -> None:
    path = tmp_path / "book.txt"
    code, out = _run(
        [str(path)],
        "add John Doe p/98765432 e/johnd@gmail.com\n"
        "add Jane e/jane@x.org p/123\n"
        "list\n"
        "delete 1\n"
        "exit\n",
    )
    assert code == 0
    assert "|| Welcome to your Address Book!" in out
    assert f"|| Storage file missing: {path}" in out
    assert f"|| Created new empty storage file: {path}" in out
    assert "|| [Command entered:list]" in out
    assert "|| \t2. Jane  Phone Number: 123  Email: jane@x.org" in out
    assert "|| 2 persons found!" in out
    assert "|| Deleted Person: John Doe" in out
    assert out.rstrip().endswith(
        "|| Exiting Address Book... Good bye!\n"
        "|| ===================================================\n"
        "|| ==================================================="
    )
    assert path.read_text() == "Jane p/123 e/jane@x.org\n"


def test_blank_and_comment_lines_are_skipped(tmp_path) -> None:
    path = tmp_path / "book.txt"
    code, out = _run([str(path)], "\n   \n# a comment\n  # indented comment\nlist\nexit\n")
    assert code == 0
    assert "[Command entered:#" not in out
    assert out.count("[Command entered:") == 2


def test_end_of_input_exits_cleanly(tmp_path) -> None:
    code, out = _run([str(tmp_path / "book.txt")], "list\n")
    assert code == 0
    assert "Good bye!" in out


def test_existing_file_is_loaded(tmp_path) -> None:
    path = tmp_path / "book.txt"
    path.write_text("Alice Tan p/111 e/alice@x.org\n")
    _, out = _run([str(path)], "find alice\nexit\n")
    assert "Storage file missing" not in out
    assert "|| \t1. Alice Tan  Phone Number: 111  Email: alice@x.org" in out
    assert "|| 1 persons found!" in out


def test_malformed_storage_file_aborts_startup(tmp_path) -> None:
    path = tmp_path / "book.txt"
    path.write_text("Alice Tan p/111 e/alice@x.org\nnot a person\n")
    code, out = _run([str(path)], "list\n")
    assert code == 0
    assert "|| Storage file has invalid content" in out
    assert "[Command entered:" not in out
    assert path.read_text() == "Alice Tan p/111 e/alice@x.org\nnot a person\n"


def test_too_many_arguments(tmp_path) -> None:
    code, out = _run(["a.txt", "b.txt"], "list\n")
    assert code == 0
    assert "|| Too many parameters! Correct program argument format:" in out
    assert "[Command entered:" not in out


def test_invalid_file_name(tmp_path) -> None:
    bad = str(tmp_path / "no_extension")
    code, out = _run([bad], "list\n")
    assert code == 0
    assert f"|| The given file name [{bad}] is not a valid file name!" in out


def test_default_storage_file(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ADDRESSBOOK_STORAGE_PATH", raising=False)
    _, out = _run([], "add Jo p/1 e/a@b.c\nexit\n")
    assert "|| Using default storage file : addressbook.txt" in out
    assert (tmp_path / "addressbook.txt").read_text() == "Jo p/1 e/a@b.c\n"


def test_storage_path_from_env(tmp_path, monkeypatch) -> None:
    path = tmp_path / "env_book.txt"
    monkeypatch.setenv("ADDRESSBOOK_STORAGE_PATH", str(path))
    _, out = _run([], "clear\nexit\n")
    assert f"|| Using storage file : {path}" in out
    assert "|| Address book has been cleared!" in out
    assert path.read_text() == ""


def test_write_failure_is_fatal(tmp_path) -> None:
    path = tmp_path / "book.txt"
    path.write_text("")

    class RemovingStdin(io.StringIO):
        """Replaces the storage file with a directory before the first command."""

        def readline(self, *args) -> str:
            if path.is_file():
                path.unlink()
                path.mkdir()
            return super().readline(*args)

    stdout = io.StringIO()
    with pytest.raises(SystemExit) as exc_info:
        run([str(path)], RemovingStdin("add Jo p/1 e/a@b.c\nlist\n"), stdout)
    out = stdout.getvalue()
    assert exc_info.value.code == 0
    assert f"|| Unexpected error: unable to write to file: {path}" in out
    assert "[Command entered:list]" not in out


@pytest.mark.parametrize(
    "value,expected",
    [("debug", "DEBUG"), (" Info ", "INFO"), ("verbose", "WARNING"), ("", "WARNING")],
)
def test_log_level_from_env(monkeypatch, value: str, expected: str) -> None:
    monkeypatch.setenv("ADDRESSBOOK_LOG_LEVEL", value)
    assert log_level_from_env() == expected


def test_log_level_defaults_when_unset(monkeypatch) -> None:
    monkeypatch.delenv("ADDRESSBOOK_LOG_LEVEL", raising=False)
    assert log_level_from_env() == "WARNING"

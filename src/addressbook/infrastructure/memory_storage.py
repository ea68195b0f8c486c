"""In-memory implementation of PersonStorage (no file)."""


class InMemoryPersonStorage:
    """Keeps the stored lines in a list. writes counts every rewrite."""

    def __init__(self, lines: list[str] | None = None) -> None:
        self._lines: list[str] = list(lines or [])
        self.writes = 0

    def read_lines(self) -> list[str]:
        return list(self._lines)

    def write_lines(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.writes += 1

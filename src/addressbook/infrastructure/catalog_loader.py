"""Load and validate the YAML message catalog (command usage + feedback texts)."""

import os
from pathlib import Path

import yaml

from addressbook.application.dto import CommandUsage, MessageCatalog

REQUIRED_COMMANDS = ("add", "find", "list", "delete", "clear", "exit", "help")

REQUIRED_MESSAGES = (
    "added",
    "cleared",
    "command_help",
    "command_help_parameters",
    "command_help_example",
    "deleted",
    "list_element",
    "goodbye",
    "invalid_command_format",
    "invalid_index",
    "person_not_found",
    "persons_found",
)


def _package_root() -> Path:
    """Return the addressbook package directory."""
    return Path(__file__).resolve().parent.parent


def get_catalog_path() -> Path:
    """Return path to the catalog YAML (ADDRESSBOOK_CATALOG_PATH env or resources/catalog.yaml)."""
    default = _package_root() / "resources" / "catalog.yaml"
    path = os.environ.get("ADDRESSBOOK_CATALOG_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def load_catalog(path: Path | None = None) -> MessageCatalog:
    """Load catalog YAML and return a MessageCatalog. Validates minimal structure."""
    if path is None:
        path = get_catalog_path()
    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw)
    if not isinstance(data, dict):
        raise ValueError("Catalog YAML must be a dict")

    messages = data.get("messages")
    if not isinstance(messages, dict):
        raise ValueError("Catalog must have a 'messages' mapping")
    missing = [m for m in REQUIRED_MESSAGES if m not in messages]
    if missing:
        raise ValueError(f"Catalog is missing messages: {', '.join(missing)}")

    commands: dict[str, CommandUsage] = {}
    for entry in data.get("commands") or []:
        if not isinstance(entry, dict) or not entry.get("word"):
            raise ValueError("Every command must have 'word'")
        word = entry["word"]
        for key in ("description", "example"):
            if not entry.get(key):
                raise ValueError(f"Command '{word}' must have '{key}'")
        commands[word] = CommandUsage(
            word=word,
            description=entry["description"],
            example=entry["example"],
            parameters=entry.get("parameters"),
        )
    missing = [c for c in REQUIRED_COMMANDS if c not in commands]
    if missing:
        raise ValueError(f"Catalog is missing commands: {', '.join(missing)}")

    return MessageCatalog(
        messages={str(k): str(v) for k, v in messages.items()},
        commands=commands,
    )


# Module-level cache for the loaded catalog
_catalog_cache: MessageCatalog | None = None


def get_catalog(cache: bool = True) -> MessageCatalog:
    """Load catalog (cached by default). Pass cache=False to reload."""
    global _catalog_cache
    if cache and _catalog_cache is not None:
        return _catalog_cache
    _catalog_cache = load_catalog()
    return _catalog_cache

"""Infrastructure layer: concrete implementations of application ports."""

from addressbook.infrastructure.catalog_loader import (
    get_catalog,
    get_catalog_path,
    load_catalog,
)
from addressbook.infrastructure.memory_storage import InMemoryPersonStorage
from addressbook.infrastructure.text_file_storage import (
    DEFAULT_STORAGE_FILEPATH,
    TextFileStorage,
    is_valid_file_path,
)

__all__ = [
    "DEFAULT_STORAGE_FILEPATH",
    "InMemoryPersonStorage",
    "TextFileStorage",
    "get_catalog",
    "get_catalog_path",
    "is_valid_file_path",
    "load_catalog",
]

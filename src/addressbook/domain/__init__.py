"""Domain layer: entities and value objects. No dependencies on outer layers."""

from addressbook.domain.entities import Person

__all__ = ["Person"]

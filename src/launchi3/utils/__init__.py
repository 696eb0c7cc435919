"""Generic utility modules for launchi3."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]

"""Shared entity and table base classes."""

from ._base import Entity, EntityTable

__all__ = ["Entity", "EntityTable"]

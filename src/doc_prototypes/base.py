"""
Base classes for cloneable document entities.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Cloneable(ABC, Generic[T]):
    """Abstract base class for entities that hand out deep copies of themselves"""

    @abstractmethod
    def clone(self) -> T:
        """
        Return a new instance of the same type.

        Scalars are copied by value, owned sub-entities are cloned recursively
        and every container is rebuilt, so the result shares no mutable
        storage with the source.
        """
        pass

import abc
from typing import Protocol


class HashState(Protocol):
    """A streaming hash object as returned by hashlib or pycryptodome."""
    def update(self, data: bytes) -> None: ...

    def digest(self) -> bytes: ...


class Hasher(abc.ABC):
    """Abstract base class for all digest algorithms."""
    def __init__(self, name: str):
        self.name = name

    @abc.abstractmethod
    def new(self) -> HashState:
        """
        Create a fresh hash state for one pass over a file.

        Returns:
            An object with ``update(bytes)`` and ``digest() -> bytes``.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

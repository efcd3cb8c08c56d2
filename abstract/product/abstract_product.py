from __future__ import annotations
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type
from utils.logger import Logger

# --- Abstract Product ---

class Product(ABC):
    @abstractmethod
    def operation(self) -> str: ...

    def release(self) -> None:
        """Products hold no resources, releasing is a no-op"""
        Logger().debug(f"Released {type(self).__name__}")

    def __enter__(self) -> Product:
        return self

    def __exit__(self,
                 exc_type: Optional[Type[BaseException]],
                 exc: Optional[BaseException],
                 tb: Optional[TracebackType]) -> None:
        self.release()

    # Stateless, so equality is by variant
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return type(self) is type(other) and self.operation() == other.operation()

    def __hash__(self) -> int:
        return hash((type(self), self.operation()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

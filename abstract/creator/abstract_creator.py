from abc import ABC, abstractmethod
from ..product.abstract_product import Product
from utils.logger import Logger
# ──────────────────────────────────────────────────────────────
# Abstract Creator
# ──────────────────────────────────────────────────────────────

class ConstructionError(RuntimeError):
    """Raised when a creator cannot allocate its product"""


class Creator(ABC):
    @abstractmethod
    def factory_method(self) -> Product: ...

    def some_operation(self) -> str:
        """
        Build a product through the factory method, use it once and release it.
        Subclasses override factory_method() only.
        """
        try:
            product = self.factory_method()
        except MemoryError as e:
            Logger().error(f"{type(self).__name__} could not construct its product: {e}")
            raise ConstructionError(f"{type(self).__name__}: product allocation failed") from e

        with product:
            result = "Creator: Working with " + product.operation()
        Logger().debug(f"{type(self).__name__} -> {result}")
        return result

from .abstract_product import Product

# --- Concrete Products ---

class ConcreteProduct1(Product):
    def operation(self) -> str: return "ConcreteProduct1"


class ConcreteProduct2(Product):
    def operation(self) -> str: return "ConcreteProduct2"

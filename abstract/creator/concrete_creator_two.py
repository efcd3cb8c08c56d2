from .abstract_creator import Creator
from ..product.abstract_product import Product
from ..product.concrete_products import ConcreteProduct2

class ConcreteCreator2(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct2()

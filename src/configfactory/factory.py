from configfactory._internal.factory import AbstractFactory, variants

__all__ = ["AbstractFactory", "variants"]

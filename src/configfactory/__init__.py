from configfactory.container_interface import ContainerProtocol
from configfactory.exceptions import (
    ConfigFactoryError,
    ConfigFactoryInvalidSetterError,
    ConfigFactoryMissingSetterError,
)
from configfactory.factory import AbstractFactory, variants
from configfactory.markers import Raw, Reference
from configfactory.setters import SetterRegistry

__all__ = [
    "AbstractFactory",
    "ConfigFactoryError",
    "ConfigFactoryInvalidSetterError",
    "ConfigFactoryMissingSetterError",
    "ContainerProtocol",
    "Raw",
    "Reference",
    "SetterRegistry",
    "variants",
]

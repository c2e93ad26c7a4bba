from configfactory._internal.setters import SetterRegistry, find_setter, setter_names

__all__ = ["SetterRegistry", "find_setter", "setter_names"]

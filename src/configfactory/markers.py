from configfactory._internal.markers import Raw, Reference

__all__ = ["Raw", "Reference"]

class ConfigFactoryError(Exception):
    """Represent a base class for all configfactory-specific failures.

    Catch this type when you want to handle any configfactory error path
    without matching each concrete exception class individually. Errors raised
    by the container collaborator are never wrapped in this hierarchy.
    """


class ConfigFactoryMissingSetterError(ConfigFactoryError):
    """Signal a configuration key that has no setter on the target object.

    Raised by ``AbstractFactory._call_setters`` before the value of the
    offending key is resolved. The whole setter pass is aborted; keys applied
    before the failing one are not rolled back and the partially configured
    object must be discarded.

    Typical fixes include removing the unsupported key from configuration,
    adding a ``set_<key>`` method to the target class, or registering an
    explicit setter in the factory's ``SetterRegistry``.
    """


class ConfigFactoryInvalidSetterError(ConfigFactoryError):
    """Signal an invalid explicit setter registration.

    Raised by ``SetterRegistry.register`` when the key is not a non-empty
    string, the target is not a class, or the setter is not callable.
    """

"""
Metaclass-based auto-registration for bulk sinks.

Classes built with this metaclass register themselves in a registry dict
kept on the base class that declares ``__registry_key__``.
"""

from abc import ABCMeta
from typing import Any, Dict, Type


class AutoRegisterMeta(ABCMeta):
    """
    Metaclass that automatically registers classes in a class-level registry.

    The base class names the attribute holding the registry key via
    ``__registry_key__``. Subclasses that set that attribute to a non-None
    value are stored in ``__registry__`` on the base.

    Example:
        class BulkSink(metaclass=AutoRegisterMeta):
            __registry_key__ = '_sink_type'
            _sink_type = None

        class ConsoleSink(BulkSink):
            _sink_type = 'console'

        # ConsoleSink is now in BulkSink.__registry__['console']
    """

    def __new__(mcs, name: str, bases: tuple, namespace: Dict[str, Any]) -> Type:
        cls = super().__new__(mcs, name, bases, namespace)

        # Nearest class in the MRO that declares the registry key
        registry_base = None
        for base_cls in cls.__mro__:
            if '__registry_key__' in vars(base_cls):
                registry_base = base_cls
                break

        if registry_base is None:
            return cls

        if '__registry__' not in vars(registry_base):
            registry_base.__registry__ = {}

        # Only a key set on the class itself counts; inherited keys are skipped
        key_value = vars(cls).get(registry_base.__registry_key__)
        if key_value is not None:
            existing = registry_base.__registry__.get(key_value)
            if existing is not None and existing is not cls:
                raise TypeError(
                    f"Duplicate registration for key {key_value!r}: "
                    f"{existing.__name__} and {cls.__name__}"
                )
            registry_base.__registry__[key_value] = cls

        return cls

"""Abstract base class for scanning backends."""

import inspect
from abc import ABC, abstractmethod
from types import ModuleType

from artifind.location import Location
from artifind.resource import Resource


class Backend(ABC):
    """A strategy for finding resources and classes below a location."""

    @abstractmethod
    def scan_for_resources(self, location: Location, prefix: str, suffix: str) -> list[Resource]:
        """Find resources whose filename starts with ``prefix`` and ends with ``suffix``."""

    @abstractmethod
    def scan_for_classes(self, location: Location, implemented_interface: type) -> list[type]:
        """Find concrete classes implementing ``implemented_interface``.

        Abstract classes and the interface itself are never returned.
        """


def is_concrete_implementation(cls: object, implemented_interface: type) -> bool:
    """Whether ``cls`` is an instantiable subclass of ``implemented_interface``."""
    return (
        inspect.isclass(cls)
        and cls is not implemented_interface
        and issubclass(cls, implemented_interface)
        and not inspect.isabstract(cls)
    )


def classes_in_module(module: ModuleType, implemented_interface: type) -> list[type]:
    """Concrete implementations defined in ``module`` itself (re-exports are skipped)."""
    found = [
        obj
        for _, obj in inspect.getmembers(module, inspect.isclass)
        if obj.__module__ == module.__name__ and is_concrete_implementation(obj, implemented_interface)
    ]
    return sorted(found, key=lambda cls: cls.__qualname__)

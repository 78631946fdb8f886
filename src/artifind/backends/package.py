"""Backend for the Python package namespace."""

import logging
import pkgutil
from collections.abc import Iterator
from importlib.resources.abc import Traversable
from pathlib import Path
from types import ModuleType

from artifind.backends.base import Backend, classes_in_module
from artifind.context import LoaderContext
from artifind.location import Location
from artifind.resource import PackageResource, Resource, matches_name


logger = logging.getLogger(__name__)


def walk_traversable(root: Traversable, relative: str = "") -> Iterator[tuple[str, Traversable]]:
    """Yield ``(relative_path, file)`` for every file below ``root``, depth first, in name order."""
    for entry in sorted(root.iterdir(), key=lambda item: item.name):
        name = f"{relative}/{entry.name}" if relative else entry.name
        if entry.is_dir():
            yield from walk_traversable(entry, name)
        elif entry.is_file():
            yield name, entry


class PackageBackend(Backend):
    """Finds resources and classes inside importable packages.

    A location such as ``package:myapp/migrations/sql`` resolves to the
    longest importable package (``myapp.migrations``); the rest of the path is
    followed as plain directories, so data folders need no ``__init__.py``.
    """

    def __init__(self, context: LoaderContext) -> None:
        self.context = context

    def _resolve_root(self, location: Location) -> Traversable | None:
        if location.is_filesystem:
            return None
        parts = [part for part in location.path.split("/") if part]
        for index in range(len(parts), 0, -1):
            package = ".".join(parts[:index])
            if self.context.find_package(package) is None:
                continue
            root = self.context.files(package)
            for part in parts[index:]:
                root = root.joinpath(part)
            return root if root.is_dir() else None
        return None

    def scan_for_resources(self, location: Location, prefix: str, suffix: str) -> list[Resource]:
        root = self._resolve_root(location)
        if root is None:
            logger.warning("Unable to resolve location %s", location)
            return []

        logger.debug("Scanning for resources in %s", location)
        return [
            PackageResource(f"{location.path}/{relative}", entry)
            for relative, entry in walk_traversable(root)
            if matches_name(entry.name, prefix, suffix)
        ]

    def _submodules(self, package: ModuleType) -> list[tuple[str, bool]]:
        """Sorted ``(name, is_package)`` pairs directly below ``package``.

        Includes namespace sub-packages (directories without ``__init__.py``),
        which ``pkgutil.iter_modules`` does not report.
        """
        found = {info.name: info.ispkg for info in pkgutil.iter_modules(package.__path__, package.__name__ + ".")}
        for entry in package.__path__:
            directory = Path(entry)
            if not directory.is_dir():
                continue
            for child in directory.iterdir():
                name = f"{package.__name__}.{child.name}"
                if (
                    name in found
                    or not child.is_dir()
                    or child.name == "__pycache__"
                    or not child.name.isidentifier()
                ):
                    continue
                if self.context.find_package(name) is not None:
                    found[name] = True
        return sorted(found.items())

    def _iter_modules(self, package: ModuleType) -> Iterator[ModuleType]:
        yield package
        for name, is_package in self._submodules(package):
            module = self.context.import_module(name)
            if is_package:
                yield from self._iter_modules(module)
            else:
                yield module

    def scan_for_classes(self, location: Location, implemented_interface: type) -> list[type]:
        if location.is_filesystem:
            return []
        package_name = location.package_name
        if self.context.find_package(package_name) is None:
            logger.warning("Unable to resolve package location %s", location)
            return []

        logger.debug("Scanning for %s implementations in %s", implemented_interface.__qualname__, location)
        package = self.context.import_module(package_name)
        found: list[type] = []
        for module in self._iter_modules(package):
            found.extend(classes_in_module(module, implemented_interface))
        return found

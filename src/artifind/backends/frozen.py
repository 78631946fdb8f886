"""Backend for frozen application bundles (e.g. PyInstaller one-file builds).

Frozen applications keep their modules in an archive the regular
``pkgutil`` walk cannot always see, and unpack data files to a temporary
directory. This backend reads module names from the frozen importer's table
of contents and data files from the unpack directory.
"""

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from artifind.backends.base import Backend, classes_in_module
from artifind.backends.filesystem import find_files
from artifind.context import LoaderContext
from artifind.features import bundle_dir
from artifind.location import Location
from artifind.resource import FileSystemResource, Resource


logger = logging.getLogger(__name__)


def frozen_module_names() -> list[str]:
    """Module names listed by importers on ``sys.meta_path`` that carry a ``toc``."""
    names: set[str] = set()
    for finder in sys.meta_path:
        toc = getattr(finder, "toc", None)
        if toc:
            names.update(toc)
    return sorted(names)


class FrozenBundleBackend(Backend):
    """Scans the contents of a frozen application bundle."""

    def __init__(
        self,
        context: LoaderContext,
        *,
        root: Path | None = None,
        module_names: Iterable[str] | None = None,
    ) -> None:
        self.context = context
        self.root = root if root is not None else bundle_dir()
        self.module_names = sorted(module_names) if module_names is not None else frozen_module_names()

    def scan_for_resources(self, location: Location, prefix: str, suffix: str) -> list[Resource]:
        if self.root is None:
            return []
        directory = self.root / location.path
        if not directory.is_dir():
            return []

        logger.debug("Scanning frozen bundle %s for resources in %s", self.root, location)
        return [
            FileSystemResource(f"{location.path}/{path.relative_to(directory).as_posix()}", path)
            for path in find_files(directory, prefix, suffix)
        ]

    def scan_for_classes(self, location: Location, implemented_interface: type) -> list[type]:
        package_name = location.package_name
        names = [name for name in self.module_names if name == package_name or name.startswith(package_name + ".")]

        found: list[type] = []
        for name in names:
            module = self.context.import_module(name)
            found.extend(classes_in_module(module, implemented_interface))
        return found

"""Backend for plain filesystem directories."""

import logging
from pathlib import Path

from artifind.backends.base import Backend
from artifind.location import Location
from artifind.resource import FileSystemResource, Resource, matches_name


logger = logging.getLogger(__name__)


def find_files(root: Path, prefix: str, suffix: str) -> list[Path]:
    """Recursively collect files below ``root`` matching the name filter, sorted by path."""
    return sorted(
        path for path in root.rglob("*") if path.is_file() and matches_name(path.name, prefix, suffix)
    )


class FileSystemBackend(Backend):
    """Finds resources in a directory tree on disk."""

    def scan_for_resources(self, location: Location, prefix: str, suffix: str) -> list[Resource]:
        root = Path(location.path)
        if not root.exists():
            logger.warning("Unable to resolve location %s", location)
            return []
        if not root.is_dir():
            logger.warning("Unable to scan location %s: not a directory", location)
            return []

        logger.debug("Scanning for resources in %s", root)
        return [FileSystemResource(path.as_posix(), path) for path in find_files(root, prefix, suffix)]

    def scan_for_classes(self, location: Location, implemented_interface: type) -> list[type]:
        # Classes are only discovered through the import system.
        return []

"""Handles for discovered resources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import total_ordering
from importlib.resources.abc import Traversable
from pathlib import Path


def matches_name(filename: str, prefix: str, suffix: str) -> bool:
    """Check a bare filename against a prefix/suffix pair.

    The name must be strictly longer than ``prefix + suffix`` so that
    ``V.sql`` does not match ``("V", ".sql")``.
    """
    return (
        filename.startswith(prefix)
        and filename.endswith(suffix)
        and len(filename) > len(prefix) + len(suffix)
    )


@total_ordering
class Resource(ABC):
    """A discovered resource, identified by its logical location."""

    def __init__(self, location: str) -> None:
        self.location = location

    @property
    def filename(self) -> str:
        return self.location.rsplit("/", 1)[-1]

    @property
    @abstractmethod
    def location_on_disk(self) -> str | None:
        """Absolute path on disk, when the resource has one."""

    @abstractmethod
    def read_bytes(self) -> bytes:
        """Load the raw content."""

    def read_text(self, encoding: str = "utf-8") -> str:
        return self.read_bytes().decode(encoding)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return type(self) is type(other) and self.location == other.location

    def __lt__(self, other: Resource) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self.location < other.location

    def __hash__(self) -> int:
        return hash((type(self), self.location))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r})"

    def __str__(self) -> str:
        return self.location


class PackageResource(Resource):
    """Resource living inside an importable package."""

    def __init__(self, location: str, traversable: Traversable) -> None:
        super().__init__(location)
        self.traversable = traversable

    @property
    def location_on_disk(self) -> str | None:
        # Zipped packages have no on-disk path.
        if isinstance(self.traversable, Path):
            return str(self.traversable.resolve())
        return None

    def read_bytes(self) -> bytes:
        return self.traversable.read_bytes()


class FileSystemResource(Resource):
    """Resource backed by a plain file."""

    def __init__(self, location: str, path: Path) -> None:
        super().__init__(location)
        self.path = path

    @property
    def location_on_disk(self) -> str | None:
        return str(self.path.resolve())

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

"""Scan locations: a package namespace or a filesystem directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering

from artifind.errors import InvalidLocationError


PACKAGE_PREFIX = "package:"
FILESYSTEM_PREFIX = "filesystem:"


@total_ordering
@dataclass(frozen=True, eq=False)
class Location:
    """A place to look for resources and classes.

    The descriptor is either ``package:<dotted.or/slashed/name>`` or
    ``filesystem:<path>``. Descriptors without a prefix are package locations.

    Example:
        Location("package:myapp.migrations")   # path "myapp/migrations"
        Location("filesystem:/srv/sql")
    """

    raw: str
    prefix: str = field(init=False)
    path: str = field(init=False)
    is_filesystem: bool = field(init=False)

    def __post_init__(self) -> None:
        normalized = self.raw.strip().replace("\\", "/")
        if ":" in normalized:
            prefix, path = normalized.split(":", 1)
            prefix += ":"
        else:
            prefix, path = PACKAGE_PREFIX, normalized

        if prefix == PACKAGE_PREFIX:
            path = path.replace(".", "/").lstrip("/")
        elif prefix != FILESYSTEM_PREFIX:
            msg = (
                f"Unknown prefix for location {self.raw!r} "
                f"(should be either {FILESYSTEM_PREFIX} or {PACKAGE_PREFIX})"
            )
            raise InvalidLocationError(msg)

        if prefix == FILESYSTEM_PREFIX and not path:
            msg = f"Empty filesystem path in location {self.raw!r}"
            raise InvalidLocationError(msg)

        if len(path) > 1:
            path = path.rstrip("/")

        object.__setattr__(self, "prefix", prefix)
        object.__setattr__(self, "path", path)
        object.__setattr__(self, "is_filesystem", prefix == FILESYSTEM_PREFIX)

    @property
    def is_package(self) -> bool:
        return not self.is_filesystem

    @property
    def descriptor(self) -> str:
        return self.prefix + self.path

    @property
    def package_name(self) -> str:
        """Dotted module name for package locations."""
        return self.path.replace("/", ".")

    def is_parent_of(self, other: Location) -> bool:
        """Whether ``other`` lies below this location (same kind only)."""
        return other.descriptor.startswith(self.descriptor + "/")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self.descriptor == other.descriptor

    def __lt__(self, other: Location) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self.descriptor < other.descriptor

    def __hash__(self) -> int:
        return hash(self.descriptor)

    def __str__(self) -> str:
        return self.descriptor

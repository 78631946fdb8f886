"""artifind - find resources and classes in packages and directories."""

from .backends import Backend, FileSystemBackend, FrozenBundleBackend, PackageBackend
from .config import ScannerSettings
from .context import LoaderContext
from .errors import ArtifindError, ClassLoadError, InvalidLocationError, ScanError
from .location import Location
from .resource import FileSystemResource, PackageResource, Resource
from .scanner import Scanner
from .version import __version__


__all__ = [
    # Core
    "Location",
    "Scanner",
    "ScannerSettings",
    "LoaderContext",
    # Resources
    "Resource",
    "PackageResource",
    "FileSystemResource",
    # Backends
    "Backend",
    "PackageBackend",
    "FrozenBundleBackend",
    "FileSystemBackend",
    # Errors
    "ArtifindError",
    "ClassLoadError",
    "InvalidLocationError",
    "ScanError",
]

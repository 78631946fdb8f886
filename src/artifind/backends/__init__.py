"""Scanning backends."""

from artifind.backends.base import Backend
from artifind.backends.filesystem import FileSystemBackend
from artifind.backends.frozen import FrozenBundleBackend
from artifind.backends.package import PackageBackend


__all__ = ["Backend", "FileSystemBackend", "FrozenBundleBackend", "PackageBackend"]

"""Scanner for resources and classes."""

import logging
from collections.abc import Callable, Sequence

from artifind.backends.base import Backend
from artifind.backends.filesystem import FileSystemBackend
from artifind.backends.frozen import FrozenBundleBackend
from artifind.backends.package import PackageBackend
from artifind.config import ScannerSettings
from artifind.context import LoaderContext
from artifind.errors import ScanError
from artifind.features import detect_frozen_bundle
from artifind.location import Location
from artifind.resource import Resource


logger = logging.getLogger(__name__)

Probe = Callable[[LoaderContext], bool]


class Scanner:
    """Finds resources and classes below a location using every applicable backend.

    The package backend is always registered first, followed by the frozen
    bundle backend when the probe reports a bundle, followed by ``backends``
    in the order given. The filesystem backend is held separately and owns
    every ``filesystem:`` resource scan.

    Example:
        scanner = Scanner()
        scripts = scanner.scan_for_resources(Location("package:myapp.sql"), "V", ".sql")
        plugins = scanner.scan_for_classes(Location("package:myapp.plugins"), Plugin)
    """

    def __init__(
        self,
        context: LoaderContext | None = None,
        backends: Sequence[Backend] | None = None,
        *,
        probe: Probe | None = None,
        settings: ScannerSettings | None = None,
    ) -> None:
        self._context = context if context is not None else LoaderContext()
        settings = settings if settings is not None else ScannerSettings()
        probe = probe if probe is not None else detect_frozen_bundle

        registered: list[Backend] = [PackageBackend(self._context)]
        if settings.detect_frozen_bundle and probe(self._context):
            logger.debug("Frozen bundle detected, registering %s", FrozenBundleBackend.__name__)
            registered.append(FrozenBundleBackend(self._context))
        if backends:
            registered.extend(backends)

        self._backends: tuple[Backend, ...] = tuple(registered)
        self._filesystem_backend = FileSystemBackend()

    @property
    def backends(self) -> tuple[Backend, ...]:
        """Registered backends in consultation order (excludes the filesystem backend)."""
        return self._backends

    @property
    def loader_context(self) -> LoaderContext:
        """The context used to resolve package locations."""
        return self._context

    def scan_for_resources(self, location: Location, prefix: str, suffix: str) -> list[Resource]:
        """Scan ``location`` (and below) for resources named ``prefix...suffix``.

        Args:
            location: Where to start searching. Subdirectories are searched too.
            prefix: Required start of the resource filename.
            suffix: Required end of the resource filename.

        Returns:
            The resources found, in backend order. Empty when nothing matches.

        Raises:
            ScanError: If any backend fails. The backend error is the cause.
        """
        results: list[Resource] = []
        try:
            if location.is_filesystem:
                return list(self._filesystem_backend.scan_for_resources(location, prefix, suffix))
            for backend in self._backends:
                found = backend.scan_for_resources(location, prefix, suffix)
                if found:
                    logger.debug("%s found %d resource(s) in %s", type(backend).__name__, len(found), location)
                    results.extend(found)
        except Exception as exc:
            raise ScanError(location) from exc
        return results

    def scan_for_classes(self, location: Location, implemented_interface: type) -> list[type]:
        """Scan the package at ``location`` (and sub-packages) for concrete implementations.

        Abstract classes are filtered out by the backends. Backend errors,
        including import errors from scanned modules, propagate unchanged.

        Args:
            location: The package to start scanning.
            implemented_interface: The class matches must subclass.

        Returns:
            The classes found, in backend order. Empty when nothing matches.
        """
        results: list[type] = []
        for backend in self._backends:
            found = backend.scan_for_classes(location, implemented_interface)
            if found:
                logger.debug("%s found %d class(es) in %s", type(backend).__name__, len(found), location)
                results.extend(found)
        return results

"""Import machinery used to resolve package locations."""

import importlib
import importlib.resources
import importlib.util
from collections.abc import Callable
from dataclasses import dataclass
from importlib.machinery import ModuleSpec
from importlib.resources.abc import Traversable
from types import ModuleType


@dataclass(frozen=True)
class LoaderContext:
    """The functions backends use to locate packages and import modules.

    The defaults are the interpreter's own import system. Pass replacements to
    scan through a custom importer.
    """

    import_module: Callable[[str], ModuleType] = importlib.import_module
    find_spec: Callable[[str], ModuleSpec | None] = importlib.util.find_spec
    files: Callable[[str], Traversable] = importlib.resources.files

    def find_package(self, name: str) -> ModuleSpec | None:
        """Return the spec of package ``name``, or None if there is no such package."""
        if not name:
            return None
        try:
            spec = self.find_spec(name)
        except (ImportError, ValueError):
            # Relative or malformed names, and missing parents.
            return None
        if spec is None or spec.submodule_search_locations is None:
            return None
        return spec

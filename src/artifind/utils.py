"""Helpers for resolving class references."""

import importlib
import inspect

from artifind.errors import ClassLoadError


def load_class(reference: str) -> type:
    """Resolve ``"pkg.module:Name"`` or ``"pkg.module.Name"`` to a class.

    Nested classes can be reached with dots after the colon
    (``"pkg.module:Outer.Inner"``).
    """
    if ":" in reference:
        module_name, _, attr_path = reference.partition(":")
    else:
        module_name, _, attr_path = reference.rpartition(".")

    if not module_name or not attr_path:
        msg = f"Invalid class reference {reference!r}, expected 'module:Name' or 'module.Name'"
        raise ClassLoadError(msg)

    try:
        obj = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module {module_name!r} for {reference!r}"
        raise ClassLoadError(msg) from exc

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            msg = f"{reference!r} has no attribute {attr!r}"
            raise ClassLoadError(msg) from exc

    if not inspect.isclass(obj):
        msg = f"{reference!r} is not a class"
        raise ClassLoadError(msg)
    return obj

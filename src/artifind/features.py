"""Detection of runtime features that change how locations are scanned."""

import logging
import sys
from functools import cached_property
from pathlib import Path

from artifind.context import LoaderContext


logger = logging.getLogger(__name__)


def bundle_dir() -> Path | None:
    """Directory a frozen application unpacked its data files to, if any."""
    if not getattr(sys, "frozen", False):
        return None
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass is None:
        return None
    return Path(meipass)


class FeatureDetector:
    """Answers questions about the running environment, once each."""

    def __init__(self, context: LoaderContext) -> None:
        self.context = context

    @cached_property
    def frozen_bundle_available(self) -> bool:
        path = bundle_dir()
        available = path is not None and path.is_dir()
        logger.debug("Frozen bundle available: %s", available)
        return available

    def is_frozen_bundle_available(self) -> bool:
        return self.frozen_bundle_available


def detect_frozen_bundle(context: LoaderContext) -> bool:
    """Default probe used by :class:`artifind.scanner.Scanner`."""
    return FeatureDetector(context).is_frozen_bundle_available()

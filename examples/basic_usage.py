"""Basic usage example for artifind."""

import logging
import sys

from artifind import Backend, Location, ScanError, Scanner


def main():
    """Scan artifind's own package, then an optional directory given on the command line."""
    logging.basicConfig(level=logging.DEBUG)
    scanner = Scanner()

    modules = scanner.scan_for_resources(Location("package:artifind/backends"), "", ".py")
    print(f"artifind.backends ships {len(modules)} module file(s):")
    for resource in modules:
        print(f"  {resource.location}")

    backends = scanner.scan_for_classes(Location("package:artifind.backends"), Backend)
    print("Backend implementations:", ", ".join(cls.__name__ for cls in backends))

    if len(sys.argv) > 1:
        try:
            scripts = scanner.scan_for_resources(Location(f"filesystem:{sys.argv[1]}"), "V", ".sql")
        except ScanError as exc:
            print(f"{exc} ({exc.__cause__})")
            return
        print(f"{len(scripts)} migration script(s) in {sys.argv[1]}")


if __name__ == "__main__":
    main()

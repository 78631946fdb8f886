"""Shared fixtures: throw-away packages on sys.path."""

import sys
import textwrap
from pathlib import Path

import pytest


SAMPLE_FILES = {
    "samplepkg/__init__.py": "",
    "samplepkg/api.py": """
        from abc import ABC, abstractmethod


        class Plugin(ABC):
            @abstractmethod
            def run(self): ...
    """,
    # Resources: four V*.sql files, two decoys.
    "samplepkg/sql/V1__create.sql": "CREATE TABLE t (id INT);",
    "samplepkg/sql/V1_1__alter.sql": "ALTER TABLE t ADD name TEXT;",
    "samplepkg/sql/V2__seed.sql": "INSERT INTO t VALUES (1, 'a');",
    "samplepkg/sql/nested/V3__index.sql": "CREATE INDEX ix ON t (name);",
    "samplepkg/sql/R__view.sql": "CREATE VIEW v AS SELECT 1;",
    "samplepkg/sql/V4__notes.txt": "not sql",
    # Classes: three concrete plugins, one abstract, one unrelated.
    "samplepkg/plugins/__init__.py": "",
    "samplepkg/plugins/greeting.py": """
        from abc import abstractmethod

        from samplepkg.api import Plugin


        class Greeter(Plugin):
            def run(self):
                return "hello"


        class BasePlugin(Plugin):
            @abstractmethod
            def configure(self): ...


        class Unrelated:
            pass
    """,
    "samplepkg/plugins/extra/__init__.py": """
        from samplepkg.plugins.greeting import Greeter  # re-export, not a new match
    """,
    "samplepkg/plugins/extra/more.py": """
        from samplepkg.api import Plugin


        class Counter(Plugin):
            def run(self):
                return 1


        class Shouter(Plugin):
            def run(self):
                return "HELLO"
    """,
    "samplepkg/broken/__init__.py": "",
    "samplepkg/broken/bad.py": "raise RuntimeError('cannot import me')",
}


def write_tree(root: Path, files: dict[str, str]) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip())


@pytest.fixture
def sample_package(tmp_path, monkeypatch):
    """A package named ``samplepkg`` importable for the duration of a test."""
    write_tree(tmp_path, SAMPLE_FILES)
    monkeypatch.syspath_prepend(str(tmp_path))
    yield tmp_path / "samplepkg"
    for name in [name for name in sys.modules if name == "samplepkg" or name.startswith("samplepkg.")]:
        del sys.modules[name]


@pytest.fixture
def plugin_interface(sample_package):
    from samplepkg.api import Plugin

    return Plugin


@pytest.fixture
def no_probe():
    """Probe that never reports a frozen bundle."""
    return lambda context: False


@pytest.fixture
def write_files():
    """Write a ``{relative_path: content}`` mapping below a root directory."""
    return write_tree

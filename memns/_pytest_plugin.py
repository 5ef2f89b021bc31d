"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["memns._pytest_plugin"]

This makes the ``namespace`` and ``seeded_namespace`` fixtures available::

    def test_something(seeded_namespace):
        assert seeded_namespace.read_bytes("/a.txt") == b"a contents\\n"
"""

import pytest

from ._node import DirectoryNode, FileNode
from ._ns import MemoryNamespace


@pytest.fixture
def namespace() -> MemoryNamespace:
    """An empty, still mutable :class:`MemoryNamespace` (function scope)."""
    return MemoryNamespace()


@pytest.fixture
def seeded_namespace() -> MemoryNamespace:
    """A frozen namespace with ``/a.txt``, ``/b.txt`` and ``/subdir/c.txt``."""
    subdir = DirectoryNode("subdir", files=[FileNode("c.txt", b"c contents\n")])
    return (
        MemoryNamespace()
        .with_file(FileNode("a.txt", b"a contents\n"))
        .with_file(FileNode("b.txt", b"b contents\n"))
        .with_dir(subdir)
        .freeze()
    )

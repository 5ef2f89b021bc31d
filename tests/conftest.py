import pytest
from memns import DirectoryNode, FileNode, MemoryNamespace
from memns._pytest_plugin import namespace, seeded_namespace  # noqa: F401


@pytest.fixture
def nested_namespace() -> MemoryNamespace:
    """A frozen three-level tree: /docs/guide/intro.md and /docs/readme.md."""
    guide = DirectoryNode("guide", files=[FileNode("intro.md", b"# Intro\n")])
    docs = DirectoryNode(
        "docs",
        files=[FileNode("readme.md", b"read me\n")],
        subdirectories=[guide],
    )
    return MemoryNamespace().with_dir(docs).freeze()

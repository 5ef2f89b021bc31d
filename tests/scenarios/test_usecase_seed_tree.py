"""The three-file tree a serving component is typically handed at startup."""
from memns import DirectoryNode, FileNode, MemoryNamespace


def build_seed() -> MemoryNamespace:
    subdir = DirectoryNode("subdir")
    subdir.insert_file(FileNode("c.txt", b"c contents\n"))
    return (
        MemoryNamespace()
        .with_file(FileNode("a.txt", b"a contents\n"))
        .with_file(FileNode("b.txt", b"b contents\n"))
        .with_dir(subdir)
    )


def test_seed_resolve_a():
    node = build_seed().resolve("/a.txt")
    assert isinstance(node, FileNode)
    assert (node.name, node.data()) == ("a.txt", b"a contents\n")


def test_seed_resolve_nested_c():
    node = build_seed().resolve("/subdir/c.txt")
    assert isinstance(node, FileNode)
    assert (node.name, node.data()) == ("c.txt", b"c contents\n")


def test_seed_missing():
    assert build_seed().resolve("/missing.txt") is None


def test_seed_get_directory_subdir():
    d = build_seed().get_directory("/subdir")
    assert {f.name for f in d.files()} == {"c.txt"}
    assert d.subdirectories() == []


def test_seed_root():
    root = build_seed().resolve("/")
    assert isinstance(root, DirectoryNode)
    assert {f.name for f in root.files()} == {"a.txt", "b.txt"}
    assert {d.name for d in root.subdirectories()} == {"subdir"}


def test_seed_matches_plugin_fixture(seeded_namespace):
    assert build_seed().resolve("/") == seeded_namespace.resolve("/")

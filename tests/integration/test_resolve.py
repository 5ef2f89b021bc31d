import pytest
from memns import DirectoryNode, FileNode, MemoryNamespace
from tests.helpers.asserts import assert_directory, assert_file


@pytest.mark.parametrize("path", ["/", ""])
def test_resolve_root(seeded_namespace, path):
    root = seeded_namespace.resolve(path)
    assert_directory(root, {"a.txt", "b.txt"}, {"subdir"})


def test_resolve_root_file(seeded_namespace):
    assert_file(seeded_namespace.resolve("/a.txt"), "a.txt", b"a contents\n")


def test_resolve_nested_file(seeded_namespace):
    assert_file(seeded_namespace.resolve("/subdir/c.txt"), "c.txt", b"c contents\n")


def test_resolve_missing(seeded_namespace):
    assert seeded_namespace.resolve("/missing.txt") is None


@pytest.mark.parametrize(
    "path",
    ["/subdir/missing", "/nope/c.txt", "/subdir/c.txt/x", "//a.txt", "/subdir//c.txt"],
)
def test_resolve_not_found_at_any_depth(seeded_namespace, path):
    assert seeded_namespace.resolve(path) is None


def test_resolve_directory_trailing_slash(seeded_namespace):
    assert_directory(seeded_namespace.resolve("/subdir/"), {"c.txt"}, set())


def test_get_directory_subdir(seeded_namespace):
    assert_directory(seeded_namespace.get_directory("/subdir"), {"c.txt"}, set())


def test_get_directory_root(seeded_namespace):
    assert_directory(seeded_namespace.get_directory("/"), {"a.txt", "b.txt"}, {"subdir"})


def test_get_directory_on_file_is_none(seeded_namespace):
    assert seeded_namespace.get_directory("/a.txt") is None
    assert seeded_namespace.get_directory("/subdir/c.txt") is None


def test_get_directory_missing_is_none(seeded_namespace):
    assert seeded_namespace.get_directory("/nope") is None


def test_resolve_is_idempotent(seeded_namespace):
    for path in ["/", "/a.txt", "/subdir", "/missing"]:
        assert seeded_namespace.resolve(path) == seeded_namespace.resolve(path)
        assert seeded_namespace.get_directory(path) == seeded_namespace.get_directory(path)


def test_resolved_copy_does_not_leak_into_namespace(seeded_namespace):
    sub = seeded_namespace.get_directory("/subdir")
    sub.insert_file(FileNode("injected.txt", b"!"))
    assert seeded_namespace.resolve("/subdir/injected.txt") is None


def test_deep_path(nested_namespace):
    assert_file(nested_namespace.resolve("/docs/guide/intro.md"), "intro.md", b"# Intro\n")
    assert_directory(nested_namespace.get_directory("/docs"), {"readme.md"}, {"guide"})


def test_trailing_ignore_policy_returns_file():
    ns = MemoryNamespace(trailing="ignore").with_file(FileNode("a.txt", b"a"))
    assert_file(ns.resolve("/a.txt/extra"), "a.txt", b"a")
    assert ns.get_directory("/a.txt/extra") is None


def test_trailing_reject_policy_is_default():
    ns = MemoryNamespace().with_file(FileNode("a.txt", b"a"))
    assert ns.trailing == "reject"
    assert ns.resolve("/a.txt/extra") is None


def test_file_and_dir_same_name_resolves_to_file():
    ns = (
        MemoryNamespace()
        .with_file(FileNode("x", b"file"))
        .with_dir(DirectoryNode("x", files=[FileNode("y", b"inner")]))
    )
    assert_file(ns.resolve("/x"), "x", b"file")
    assert ns.get_directory("/x") is None
    assert_file(ns.resolve("/x/y"), "y", b"inner")

import errno

import pytest
from memns import DirectoryNode, FileNode, MemoryNamespace, MNSReadOnlyError


@pytest.mark.parametrize(
    "mutate",
    [
        lambda ns: ns.with_file(FileNode("x", b"")),
        lambda ns: ns.with_dir(DirectoryNode("x")),
        lambda ns: ns.add_file("/x", b""),
        lambda ns: ns.mkdir("/x"),
        lambda ns: ns.import_tree({"/x": b""}),
    ],
    ids=["with_file", "with_dir", "add_file", "mkdir", "import_tree"],
)
def test_mutation_after_freeze_raises(seeded_namespace, mutate):
    with pytest.raises(MNSReadOnlyError) as exc_info:
        mutate(seeded_namespace)
    assert exc_info.value.errno == errno.EROFS
    assert isinstance(exc_info.value, OSError)
    assert seeded_namespace.resolve("/x") is None


def test_freeze_is_one_way_and_idempotent():
    ns = MemoryNamespace()
    assert ns.frozen is False
    ns.freeze()
    ns.freeze()
    assert ns.frozen is True
    assert ns.stats()["frozen"] is True


def test_lookups_allowed_while_building(namespace):
    namespace.add_file("/a", b"a")
    assert namespace.read_bytes("/a") == b"a"
    assert not namespace.frozen


def test_read_only_error_names_operation(seeded_namespace):
    with pytest.raises(MNSReadOnlyError, match="mkdir"):
        seeded_namespace.mkdir("/y")

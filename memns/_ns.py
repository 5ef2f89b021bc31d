from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping

from ._exceptions import MNSNodeLimitExceededError, MNSReadOnlyError
from ._node import TRAILING_POLICIES, DirectoryNode, FileNode, ResolvedNode
from ._path import split_path
from ._quota import QuotaManager
from ._typing import MNSStatResult, MNSStats

log = logging.getLogger(__name__)


def _describe(node: ResolvedNode | None) -> str:
    if node is None:
        return "not found"
    if isinstance(node, FileNode):
        return f"file {node.name!r}"
    return f"directory {node.name!r}"


def _walk_dirs(
    base: DirectoryNode, parts: list[str], path: str, create: bool
) -> tuple[DirectoryNode | None, int]:
    """Descend *parts* from *base* through subdirectories.

    Returns ``(directory, 0)`` when every part exists (or was created), and
    ``(None, missing)`` when ``create`` is false and *missing* trailing parts
    do not exist yet.
    """
    current = base
    for idx, part in enumerate(parts):
        if part in current._files:
            raise FileExistsError(f"A file exists at path component '{part}': '{path}'")
        child = current._subdirectories.get(part)
        if child is None:
            if not create:
                return None, len(parts) - idx
            current.insert_subdirectory(DirectoryNode(part))
            child = current._subdirectories[part]
        current = child
    return current, 0


# ---------------------------------------------------------------------------
#  MemoryNamespace
# ---------------------------------------------------------------------------


class MemoryNamespace:
    """Read-after-construction tree of files and directories.

    A namespace starts out *building*: ``with_file``, ``with_dir``,
    ``add_file``, ``mkdir`` and ``import_tree`` assemble the tree and each
    returns ``self`` for chaining. :meth:`freeze` hands it over for
    *serving*; from then on only lookups are allowed and any mutation
    raises :class:`MNSReadOnlyError`.

    Lookups (:meth:`resolve`, :meth:`get_directory`) never raise for a
    missing path. They return ``None`` instead, and every node they return
    is an independent copy.

    ``trailing`` controls paths that continue past a file, e.g.
    ``/a.txt/extra``. ``"reject"`` (the default) treats them as not found.
    ``"ignore"`` answers the file and drops the rest of the path, which is
    how earlier releases behaved.
    """

    def __init__(
        self,
        max_quota: int | None = None,
        max_nodes: int | None = None,
        trailing: str = "reject",
        logger: logging.Logger | None = None,
    ) -> None:
        if trailing not in TRAILING_POLICIES:
            raise ValueError(
                f"Invalid trailing value: {trailing!r}. "
                "Expected 'reject' or 'ignore'."
            )
        if max_nodes is not None and max_nodes < 1:
            raise ValueError(f"max_nodes must be >= 1 or None, got {max_nodes!r}.")
        self._quota = QuotaManager(max_quota)
        self._global_lock = threading.RLock()
        self._max_nodes: int | None = max_nodes
        self._trailing: str = trailing
        self._log: logging.Logger = logger if logger is not None else log
        self._frozen: bool = False
        self._root = DirectoryNode("")
        self._node_count: int = 1

    # -- state --

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def trailing(self) -> str:
        return self._trailing

    def freeze(self) -> MemoryNamespace:
        with self._global_lock:
            if not self._frozen:
                self._frozen = True
                file_count, dir_count, used = self._root._totals()
                self._log.info(
                    "namespace frozen: %d files, %d directories, %d bytes",
                    file_count,
                    dir_count,
                    used,
                )
        return self

    def _check_mutable(self, operation: str) -> None:
        if self._frozen:
            raise MNSReadOnlyError(operation)

    def _commit(self, new_nodes: int, byte_delta: int, apply: Callable[[], None]) -> None:
        if (
            self._max_nodes is not None
            and new_nodes > 0
            and self._node_count + new_nodes > self._max_nodes
        ):
            raise MNSNodeLimitExceededError(self._node_count, self._max_nodes, new_nodes)
        with self._quota.reserve(byte_delta):
            apply()
        self._quota.release(-byte_delta)
        self._node_count += new_nodes

    # -- fluent construction --

    def with_file(self, f: FileNode) -> MemoryNamespace:
        if not isinstance(f, FileNode):
            raise TypeError(f"Expected FileNode, got {type(f).__name__}.")
        with self._global_lock:
            self._check_mutable("with_file")
            old = self._root._files.get(f.name)
            new_nodes = 0 if old is not None else 1
            byte_delta = f.size - (old.size if old is not None else 0)
            self._commit(
                new_nodes, byte_delta, lambda: self._root.insert_file(f._clone())
            )
        return self

    def with_dir(self, d: DirectoryNode) -> MemoryNamespace:
        if not isinstance(d, DirectoryNode):
            raise TypeError(f"Expected DirectoryNode, got {type(d).__name__}.")
        if d.name == "":
            raise ValueError("Cannot insert a directory with the root (empty) name.")
        with self._global_lock:
            self._check_mutable("with_dir")
            owned = d._clone()
            file_count, dir_count, content_bytes = owned._totals()
            old = self._root._subdirectories.get(d.name)
            if old is not None:
                old_files, old_dirs, old_bytes = old._totals()
                file_count -= old_files
                dir_count -= old_dirs
                content_bytes -= old_bytes

            def attach() -> None:
                # *owned* is already a private copy; insert it as is.
                self._root._subdirectories[owned.name] = owned

            self._commit(file_count + dir_count, content_bytes, attach)
        return self

    # -- path-based construction --

    def _plan_file(
        self, base: DirectoryNode, parts: list[str], fnode: FileNode, path: str
    ) -> tuple[int, int]:
        parent, missing = _walk_dirs(base, parts[:-1], path, create=False)
        if parent is None:
            return missing + 1, fnode.size
        if fnode.name in parent._subdirectories:
            raise IsADirectoryError(f"Is a directory: '{path}'")
        old = parent._files.get(fnode.name)
        if old is None:
            return 1, fnode.size
        return 0, fnode.size - old.size

    def _place_file(
        self, base: DirectoryNode, parts: list[str], fnode: FileNode, path: str
    ) -> None:
        parent, _ = _walk_dirs(base, parts[:-1], path, create=True)
        assert parent is not None
        parent.insert_file(fnode)

    def _file_at(self, path: str, content: bytes) -> tuple[list[str], FileNode]:
        parts = split_path(path)
        if not parts:
            raise ValueError(f"Cannot add a file at the root: '{path}'")
        return parts, FileNode(parts[-1], content)

    def add_file(self, path: str, content: bytes) -> MemoryNamespace:
        """Add a file at *path*, creating missing parent directories."""
        parts, fnode = self._file_at(path, content)
        with self._global_lock:
            self._check_mutable("add_file")
            new_nodes, byte_delta = self._plan_file(self._root, parts, fnode, path)
            self._commit(
                new_nodes,
                byte_delta,
                lambda: self._place_file(self._root, parts, fnode, path),
            )
        return self

    def mkdir(self, path: str) -> MemoryNamespace:
        """Create directory *path* and any missing parents; existing ones are kept."""
        parts = split_path(path)
        with self._global_lock:
            self._check_mutable("mkdir")
            _, missing = _walk_dirs(self._root, parts, path, create=False)
            if missing:
                self._commit(
                    missing,
                    0,
                    lambda: _walk_dirs(self._root, parts, path, create=True),
                )
        return self

    def import_tree(self, tree: Mapping[str, bytes]) -> MemoryNamespace:
        """Add every ``{path: content}`` entry, or none of them.

        Entries are applied in order to a staged copy of the tree, which
        replaces the live tree only once all of them succeed and the
        limits hold.
        """
        with self._global_lock:
            self._check_mutable("import_tree")
            if not tree:
                return self
            staged = self._root._clone()
            total_nodes = 0
            total_bytes = 0
            for path, content in tree.items():
                parts, fnode = self._file_at(path, content)
                new_nodes, byte_delta = self._plan_file(staged, parts, fnode, path)
                self._place_file(staged, parts, fnode, path)
                total_nodes += new_nodes
                total_bytes += byte_delta

            def swap() -> None:
                self._root = staged

            self._commit(total_nodes, total_bytes, swap)
        return self

    # -- lookup surface --

    def _locate(self, path: str) -> ResolvedNode | None:
        if path == "/":
            return self._root
        return self._root._lookup(path, self._trailing)

    def resolve(self, path: str) -> ResolvedNode | None:
        """Return a copy of the file or directory at *path*, or ``None``."""
        node = self._locate(path)
        result = node._clone() if node is not None else None
        self._log.debug("resolve %r -> %s", path, _describe(result))
        return result

    def get_directory(self, path: str) -> DirectoryNode | None:
        """Return a copy of the directory at *path*; ``None`` if missing or a file."""
        node = self._locate(path)
        result = node._clone() if isinstance(node, DirectoryNode) else None
        self._log.debug("get_directory %r -> %s", path, _describe(result))
        return result

    def exists(self, path: str) -> bool:
        return self._locate(path) is not None

    def is_dir(self, path: str) -> bool:
        return isinstance(self._locate(path), DirectoryNode)

    def is_file(self, path: str) -> bool:
        return isinstance(self._locate(path), FileNode)

    def listdir(self, path: str) -> list[str] | None:
        """Names of the immediate children of a directory, files first."""
        node = self._locate(path)
        if not isinstance(node, DirectoryNode):
            return None
        return node.file_names() + node.subdirectory_names()

    def read_bytes(self, path: str) -> bytes | None:
        node = self._locate(path)
        if not isinstance(node, FileNode):
            return None
        return node.data()

    def stat(self, path: str) -> MNSStatResult | None:
        node = self._locate(path)
        if node is None:
            return None
        if isinstance(node, DirectoryNode):
            return MNSStatResult(name=node.name, size=0, is_dir=True)
        return MNSStatResult(name=node.name, size=node.size, is_dir=False)

    def stats(self) -> MNSStats:
        with self._global_lock:
            file_count, dir_count, _ = self._root._totals()
            quota_max, quota_used, quota_free = self._quota.snapshot()
            frozen = self._frozen
        return MNSStats(
            used_bytes=quota_used,
            quota_bytes=quota_max,
            free_bytes=quota_free,
            file_count=file_count,
            dir_count=dir_count,
            frozen=frozen,
        )

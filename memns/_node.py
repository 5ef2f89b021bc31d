from __future__ import annotations

from collections.abc import Iterable

from ._path import leading_entry, remaining

TRAILING_POLICIES = ("reject", "ignore")


def _check_name(name: str, kind: str) -> None:
    if not isinstance(name, str):
        raise TypeError(f"{kind} name must be str, got {type(name).__name__}.")
    if not name:
        raise ValueError(f"{kind} name must not be empty.")
    if "/" in name:
        raise ValueError(f"{kind} name must not contain '/': {name!r}")


# ---------------------------------------------------------------------------
#  File
# ---------------------------------------------------------------------------


class FileNode:
    """A named, immutable byte payload."""

    __slots__ = ("_name", "_content")
    __match_args__ = ("name",)

    def __init__(self, name: str, content: bytes | bytearray | memoryview = b"") -> None:
        _check_name(name, "File")
        if not isinstance(content, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"File content must be bytes-like, got {type(content).__name__}."
            )
        self._name: str = name
        self._content: bytes = bytes(content)

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return len(self._content)

    def data(self) -> bytes:
        return self._content

    def _clone(self) -> FileNode:
        # bytes is immutable, so the payload can be shared between copies.
        clone = FileNode.__new__(FileNode)
        clone._name = self._name
        clone._content = self._content
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileNode):
            return NotImplemented
        return self._name == other._name and self._content == other._content

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FileNode(name={self._name!r}, size={len(self._content)})"


# ---------------------------------------------------------------------------
#  Directory
# ---------------------------------------------------------------------------


class DirectoryNode:
    """A named directory holding two independent collections.

    ``files`` and ``subdirectories`` are keyed by child name and never
    consulted together, so a file and a subdirectory may share a name.
    Lookups try the file first.
    """

    __slots__ = ("_name", "_files", "_subdirectories")
    __match_args__ = ("name",)

    def __init__(
        self,
        name: str,
        files: Iterable[FileNode] = (),
        subdirectories: Iterable[DirectoryNode] = (),
    ) -> None:
        # The empty name is reserved for the namespace root.
        if name != "":
            _check_name(name, "Directory")
        self._name: str = name
        self._files: dict[str, FileNode] = {}
        self._subdirectories: dict[str, DirectoryNode] = {}
        for f in files:
            self.insert_file(f)
        for d in subdirectories:
            self.insert_subdirectory(d)

    @property
    def name(self) -> str:
        return self._name

    # -- capability surface --

    def files(self) -> list[FileNode]:
        return [f._clone() for f in self._files.values()]

    def subdirectories(self) -> list[DirectoryNode]:
        return [d._clone() for d in self._subdirectories.values()]

    def file_names(self) -> list[str]:
        return list(self._files)

    def subdirectory_names(self) -> list[str]:
        return list(self._subdirectories)

    # -- mutation (construction only) --

    def insert_file(self, f: FileNode) -> None:
        if not isinstance(f, FileNode):
            raise TypeError(f"Expected FileNode, got {type(f).__name__}.")
        self._files[f.name] = f

    def insert_subdirectory(self, d: DirectoryNode) -> None:
        if not isinstance(d, DirectoryNode):
            raise TypeError(f"Expected DirectoryNode, got {type(d).__name__}.")
        if d.name == "":
            raise ValueError("Cannot insert a directory with the root (empty) name.")
        # Stored by value: the caller keeps *d*, and no insertion order can
        # make a directory reachable from itself.
        self._subdirectories[d.name] = d._clone()

    # -- search --

    def search(self, path: str, trailing: str = "reject") -> ResolvedNode | None:
        """Resolve *path* relative to this directory and return a copy.

        ``""`` and ``"/"`` denote this directory. Returns ``None`` when any
        segment fails to match.
        """
        node = self._lookup(path, trailing)
        if node is None:
            return None
        return node._clone()

    def _lookup(self, path: str, trailing: str = "reject") -> ResolvedNode | None:
        if path == "/" or path == "":
            return self
        entry = leading_entry(path)
        rest = remaining(path)
        fnode = self._files.get(entry)
        if fnode is not None:
            # "reject": a file has no components beneath it, so it only
            # matches as the final segment.
            if not rest or trailing == "ignore":
                return fnode
        dnode = self._subdirectories.get(entry)
        if dnode is None:
            return None
        return dnode._lookup(rest, trailing)

    # -- helpers --

    def _clone(self) -> DirectoryNode:
        clone = DirectoryNode.__new__(DirectoryNode)
        clone._name = self._name
        clone._files = {k: f._clone() for k, f in self._files.items()}
        clone._subdirectories = {
            k: d._clone() for k, d in self._subdirectories.items()
        }
        return clone

    def _totals(self) -> tuple[int, int, int]:
        """Return (file_count, dir_count, content_bytes) for this subtree, self included."""
        file_count = len(self._files)
        dir_count = 1
        content_bytes = sum(f.size for f in self._files.values())
        for d in self._subdirectories.values():
            fc, dc, cb = d._totals()
            file_count += fc
            dir_count += dc
            content_bytes += cb
        return file_count, dir_count, content_bytes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectoryNode):
            return NotImplemented
        return (
            self._name == other._name
            and self._files == other._files
            and self._subdirectories == other._subdirectories
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"DirectoryNode(name={self._name!r}, files={sorted(self._files)!r}, "
            f"subdirectories={sorted(self._subdirectories)!r})"
        )


ResolvedNode = FileNode | DirectoryNode

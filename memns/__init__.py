from typing import TYPE_CHECKING

from ._exceptions import (
    MNSNodeLimitExceededError,
    MNSQuotaExceededError,
    MNSReadOnlyError,
)
from ._node import DirectoryNode, FileNode, ResolvedNode
from ._ns import MemoryNamespace
from ._path import leading_entry, remaining
from ._typing import MNSStatResult, MNSStats

if TYPE_CHECKING:
    from ._async import AsyncMemoryNamespace


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "AsyncMemoryNamespace":
        from ._async import AsyncMemoryNamespace

        globals()["AsyncMemoryNamespace"] = AsyncMemoryNamespace
        return AsyncMemoryNamespace
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "MemoryNamespace",
    "FileNode",
    "DirectoryNode",
    "ResolvedNode",
    "MNSReadOnlyError",
    "MNSQuotaExceededError",
    "MNSNodeLimitExceededError",
    "MNSStats",
    "MNSStatResult",
    "leading_entry",
    "remaining",
    "AsyncMemoryNamespace",
]
__version__ = "0.1.0"

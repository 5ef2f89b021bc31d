"""Async wrapper around MemoryNamespace.

Every call is delegated to :func:`asyncio.to_thread`, so lookups on large
subtrees (which copy the nodes they return) never run on the event-loop
thread.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping

from ._node import DirectoryNode, FileNode, ResolvedNode
from ._ns import MemoryNamespace
from ._typing import MNSStatResult, MNSStats


class AsyncMemoryNamespace:
    """Thin async facade over :class:`MemoryNamespace`.

    Builder methods return the async facade itself so chaining works with
    ``await`` at each step.
    """

    def __init__(
        self,
        max_quota: int | None = None,
        max_nodes: int | None = None,
        trailing: str = "reject",
        logger: logging.Logger | None = None,
    ) -> None:
        self._sync = MemoryNamespace(
            max_quota=max_quota,
            max_nodes=max_nodes,
            trailing=trailing,
            logger=logger,
        )

    @classmethod
    def wrap(cls, namespace: MemoryNamespace) -> AsyncMemoryNamespace:
        """Expose an already built namespace through the async facade."""
        inst = cls.__new__(cls)
        inst._sync = namespace
        return inst

    @property
    def frozen(self) -> bool:
        return self._sync.frozen

    async def freeze(self) -> AsyncMemoryNamespace:
        await asyncio.to_thread(self._sync.freeze)
        return self

    async def with_file(self, f: FileNode) -> AsyncMemoryNamespace:
        await asyncio.to_thread(self._sync.with_file, f)
        return self

    async def with_dir(self, d: DirectoryNode) -> AsyncMemoryNamespace:
        await asyncio.to_thread(self._sync.with_dir, d)
        return self

    async def add_file(self, path: str, content: bytes) -> AsyncMemoryNamespace:
        await asyncio.to_thread(self._sync.add_file, path, content)
        return self

    async def mkdir(self, path: str) -> AsyncMemoryNamespace:
        await asyncio.to_thread(self._sync.mkdir, path)
        return self

    async def import_tree(self, tree: Mapping[str, bytes]) -> AsyncMemoryNamespace:
        await asyncio.to_thread(self._sync.import_tree, tree)
        return self

    async def resolve(self, path: str) -> ResolvedNode | None:
        return await asyncio.to_thread(self._sync.resolve, path)

    async def get_directory(self, path: str) -> DirectoryNode | None:
        return await asyncio.to_thread(self._sync.get_directory, path)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._sync.exists, path)

    async def is_dir(self, path: str) -> bool:
        return await asyncio.to_thread(self._sync.is_dir, path)

    async def is_file(self, path: str) -> bool:
        return await asyncio.to_thread(self._sync.is_file, path)

    async def listdir(self, path: str) -> list[str] | None:
        return await asyncio.to_thread(self._sync.listdir, path)

    async def read_bytes(self, path: str) -> bytes | None:
        return await asyncio.to_thread(self._sync.read_bytes, path)

    async def stat(self, path: str) -> MNSStatResult | None:
        return await asyncio.to_thread(self._sync.stat, path)

    async def stats(self) -> MNSStats:
        return await asyncio.to_thread(self._sync.stats)

"""Lookup benchmark sweep: vary directory width and tree depth.

Lookups return copies, so resolving a directory costs time proportional to
its subtree while resolving a file costs time proportional to path depth.
"""
from __future__ import annotations

import gc
import time
import tracemalloc
from typing import Callable

from memns import DirectoryNode, FileNode, MemoryNamespace


def _measure(fn: Callable[[], None]) -> tuple[float, float]:
    """Run fn once, return (elapsed_sec, peak_kib)."""
    gc.collect()
    tracemalloc.start()
    t0 = time.perf_counter()
    fn()
    elapsed = time.perf_counter() - t0
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    gc.collect()
    return elapsed, peak / 1024.0


def _fmt(v: float) -> str:
    return f"{v:,.1f}"


# ---------------------------------------------------------------------------
#  Builders
# ---------------------------------------------------------------------------

def _wide(count: int, fsize: int) -> MemoryNamespace:
    payload = b"W" * fsize
    return MemoryNamespace().import_tree(
        {f"/wide/f{i}.bin": payload for i in range(count)}
    ).freeze()


def _deep(depth: int) -> tuple[MemoryNamespace, str]:
    node = DirectoryNode(f"d{depth - 1}", files=[FileNode("leaf.bin", b"L" * 1024)])
    for level in range(depth - 2, -1, -1):
        node = DirectoryNode(f"d{level}", subdirectories=[node])
    path = "/" + "/".join(f"d{i}" for i in range(depth)) + "/leaf.bin"
    return MemoryNamespace().with_dir(node).freeze(), path


# ---------------------------------------------------------------------------
#  Sweep
# ---------------------------------------------------------------------------

def run_sweep() -> str:
    lines: list[str] = []

    # === 1. Directory width ===
    counts = [10, 100, 1000, 5000, 10000]
    fsize = 4096
    reads = 100

    lines.append("## 1. Directory vs file lookup by directory width")
    lines.append("")
    lines.append(f"file_size = 4KB, {reads} lookups each")
    lines.append("")
    lines.append("| Count | get_directory ms | get_directory KiB | resolve(file) ms | resolve(file) KiB |")
    lines.append("|---:|---:|---:|---:|---:|")

    for cnt in counts:
        print(f"  wide {cnt} ...", end=" ", flush=True)
        ns = _wide(cnt, fsize)

        def dir_lookups() -> None:
            for _ in range(reads):
                assert ns.get_directory("/wide") is not None

        def file_lookups() -> None:
            for i in range(reads):
                assert ns.resolve(f"/wide/f{i % cnt}.bin") is not None

        t1, m1 = _measure(dir_lookups)
        t2, m2 = _measure(file_lookups)
        lines.append(
            f"| {cnt:,} | {_fmt(t1*1000)} | {_fmt(m1)} | {_fmt(t2*1000)} | {_fmt(m2)} |"
        )
        print(f"done (dir={t1*1000:.0f}ms)")

    lines.append("")

    # === 2. Depth ===
    depths = [10, 20, 30, 40, 50]

    lines.append("## 2. File lookup by directory depth")
    lines.append("")
    lines.append("1KB file at deepest level, 1000 lookups")
    lines.append("")
    lines.append("| Depth | resolve ms | resolve KiB |")
    lines.append("|---:|---:|---:|")

    for dep in depths:
        print(f"  deep_tree {dep} ...", end=" ", flush=True)
        ns, path = _deep(dep)

        def deep_lookups() -> None:
            for _ in range(1000):
                assert ns.resolve(path) is not None

        t1, m1 = _measure(deep_lookups)
        lines.append(f"| {dep} | {_fmt(t1*1000)} | {_fmt(m1)} |")
        print(f"done ({t1*1000:.0f}ms)")

    lines.append("")
    return "\n".join(lines)


if __name__ == "__main__":
    print("=== Lookup Benchmark Sweep ===\n")
    result = run_sweep()
    print("\n" + result)

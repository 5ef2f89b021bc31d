from typing import TypedDict


class MNSStats(TypedDict):
    used_bytes: int
    quota_bytes: int | None
    free_bytes: int | None
    file_count: int
    dir_count: int
    frozen: bool


class MNSStatResult(TypedDict):
    name: str
    size: int
    is_dir: bool

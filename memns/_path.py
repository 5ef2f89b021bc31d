import posixpath


def _strip_root(path: str) -> str:
    if path.startswith("/"):
        return path[1:]
    return path


def leading_entry(path: str) -> str:
    """Return the first component of *path*.

    Exactly one leading ``/`` is dropped; no other normalization happens, so
    ``"//a"`` yields ``""``.
    """
    rest = _strip_root(path)
    idx = rest.find("/")
    if idx == -1:
        return rest
    return rest[:idx]


def remaining(path: str) -> str:
    """Return *path* minus its leading entry, keeping the next ``/``.

    ``remaining("/a/b/c") == "/b/c"`` and ``remaining("/a") == ""``.
    """
    rest = _strip_root(path)
    idx = rest.find("/")
    if idx == -1:
        return ""
    return rest[idx:]


def normalize_path(path: str) -> str:
    converted = path.replace("\\", "/")
    if not converted:
        return "/"

    # Traversal check: simulate resolution from root (depth 0)
    depth = 0
    for part in converted.split("/"):
        if part == "..":
            depth -= 1
            if depth < 0:
                raise ValueError(f"Path traversal attempt detected: '{path}'")
        elif part and part != ".":
            depth += 1

    if not converted.startswith("/"):
        converted = "/" + converted
    return posixpath.normpath(converted)


def split_path(path: str) -> list[str]:
    npath = normalize_path(path)
    return [p for p in npath.split("/") if p]

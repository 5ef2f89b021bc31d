import errno


class MNSReadOnlyError(OSError):
    """Raised when a frozen namespace is mutated. Subclass of OSError (EROFS)."""
    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            errno.EROFS,
            f"MNS namespace is frozen: '{operation}' is not permitted after freeze().",
        )


class MNSQuotaExceededError(OSError):
    """Raised when file content would exceed the quota. Subclass of OSError."""
    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"MNS quota exceeded: requested {requested} bytes, "
            f"only {available} bytes available."
        )


class MNSNodeLimitExceededError(MNSQuotaExceededError):
    """Raised when the node count limit is exceeded. Subclass of MNSQuotaExceededError."""
    def __init__(self, current: int, limit: int, requested: int = 1) -> None:
        self.current = current
        self.limit = limit
        super().__init__(requested=requested, available=limit - current)
        self.args = (
            f"MNS node limit exceeded: current {current} nodes, "
            f"{requested} requested, limit is {limit}.",
        )

"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters."""
    page: int = 1
    size: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.size < 1:
            raise ValueError("size must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @classmethod
    def clamped(cls, page: int, size: int, max_size: int | None = None) -> "PageRequest":
        """Build a request from untrusted input, clamping instead of raising."""
        size = max(size, 1)
        if max_size is not None:
            size = min(size, max(max_size, 1))
        return cls(page=max(page, 1), size=size)


__all__ = ["PageRequest"]

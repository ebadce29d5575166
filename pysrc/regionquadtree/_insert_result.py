"""InsertResult dataclass for bulk insertion."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InsertResult:
    """
    Result from bulk insertion operations.

    Attributes:
        count: Number of points accepted by the tree.
        rejected: Input positions of points that fell outside the tree bounds.
    """

    count: int
    rejected: list[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Return the number of points submitted."""
        return self.count + len(self.rejected)

    @property
    def all_inserted(self) -> bool:
        return not self.rejected

"""Git boundaries for the Nx affected command."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class GitBoundaries:
    """A (base, head) pair of revision identifiers.

    Values are opaque and passed to Nx verbatim.
    """

    base: str
    head: str

    def __iter__(self) -> Iterator[str]:
        return iter((self.base, self.head))

"""Value types shared by the complexity walk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from ..parsing.nodes import NodeKind


class TokenLike(Protocol):
    text: str


class Cursor(Protocol):
    """Node capabilities the complexity walk relies on."""

    def kind(self) -> NodeKind: ...

    def children(self) -> Sequence[Cursor]: ...

    def location(self) -> tuple[int, int]: ...

    def spelling(self) -> str: ...

    def has_body(self) -> bool: ...

    def tokens_in_extent(self) -> Sequence[TokenLike]: ...


@dataclass(frozen=True)
class Tally:
    """Decision-induced (edges, nodes) counts for one function."""

    edges: int = 0
    nodes: int = 0

    def __add__(self, other: Tally) -> Tally:
        return Tally(self.edges + other.edges, self.nodes + other.nodes)


EMPTY_TALLY = Tally()

# Every decision point adds two outgoing edges and one node
DECISION_TALLY = Tally(edges=2, nodes=1)


@dataclass(frozen=True)
class ComplexityRecord:
    """Complexity of one function, in the order it was discovered."""

    line: int
    name: str
    complexity: int
    column: int = 0
    has_body: bool = True

    def to_line(self) -> str:
        return f"{self.line} {self.name} {self.complexity}"

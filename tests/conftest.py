"""Shared test fixtures for McCabe Insight tests."""

from types import SimpleNamespace
from typing import List, Optional

import pytest

from mccabe_insight.parsing.nodes import NodeKind


class FakeToken:
    def __init__(self, text: str):
        self.text = text

    def __repr__(self) -> str:
        return f"FakeToken({self.text!r})"


class FakeNode:
    """Minimal stand-in for a parsed cursor."""

    def __init__(
        self,
        kind: NodeKind = NodeKind.OTHER,
        children: Optional[List["FakeNode"]] = None,
        tokens: Optional[List[str]] = None,
        name: str = "",
        line: int = 1,
        column: int = 1,
        body: bool = True,
    ):
        self._kind = kind
        self._children = children if children is not None else []
        self._tokens = tokens
        self._name = name
        self._line = line
        self._column = column
        self._body = body

    def kind(self) -> NodeKind:
        return self._kind

    def children(self) -> List["FakeNode"]:
        return self._children

    def location(self):
        return self._line, self._column

    def spelling(self) -> str:
        return self._name

    def has_body(self) -> bool:
        return self._body

    def tokens_in_extent(self) -> List[FakeToken]:
        if self._tokens is not None:
            return [FakeToken(t) for t in self._tokens]
        return [tok for child in self._children for tok in child.tokens_in_extent()]


def leaf(text: str) -> FakeNode:
    return FakeNode(tokens=[text])


def binary(left: FakeNode, op: str, right: FakeNode) -> FakeNode:
    tokens = [t.text for t in left.tokens_in_extent()] + [op]
    tokens += [t.text for t in right.tokens_in_extent()]
    return FakeNode(NodeKind.BINARY_OPERATOR, [left, right], tokens=tokens)


def node(kind: NodeKind, *children: FakeNode) -> FakeNode:
    return FakeNode(kind, list(children))


def function(name: str, *children: FakeNode, line: int = 1, body: bool = True) -> FakeNode:
    return FakeNode(NodeKind.FUNCTION_DEFINITION, list(children), name=name, line=line, body=body)


@pytest.fixture
def build():
    """Builders for fake syntax trees."""
    return SimpleNamespace(node=node, leaf=leaf, binary=binary, function=function, raw=FakeNode)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run in an empty directory with no user config or MCCABE_* variables."""
    import os

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in list(os.environ):
        if key.startswith("MCCABE_"):
            monkeypatch.delenv(key)
    return tmp_path

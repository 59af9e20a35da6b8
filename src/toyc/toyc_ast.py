"""
Defines the abstract syntax tree (AST) node structure for the TOYC language.

Classes:
    ASTNode:
        A node in the syntax tree, produced by the parser and consumed by the
        unparser and by test suites asserting structure.

    ASTDict:
        TypedDict representation for serializing ASTNode instances to plain Python
        dictionaries, suitable for JSON output or debugging.

Each ASTNode tracks:
    kind (str): The construct ("declaration", "assignment", "add", "subtract",
        "identifier", "number", "compare", "conditional").
    value (str, optional): Variable name, numeric text, or operator symbol.
    left (ASTNode, optional): Left child; binary, comparison and conditional nodes only.
    right (ASTNode, optional): Right child; binary, comparison, conditional and
        assignment nodes only.
    line (int): Source line number for error messages.
    col (int): Source column number for error messages.

Example:
    node = ASTNode("add", "+", left=ASTNode("number", "1"), right=ASTNode("number", "2"))
"""

from collections.abc import Iterator
from typing import Any, TypedDict

LEAF_KINDS = frozenset({"identifier", "number"})
BINARY_KINDS = frozenset({"add", "subtract"})


class ASTDict(TypedDict, total=False):
    """
    TypedDict representation of an ASTNode used for serialization.

    `left` and `right` are omitted entirely when the node has no such child.

    Fields:
        kind (str): The type of AST node.
        value (str | None): The node's lexeme or operator symbol.
        line (int): Line number in the source code where the node originates.
        col (int): Column number in the source code where the node originates.
        left (ASTDict): Left child, if present.
        right (ASTDict): Right child, if present.
    """

    kind: str
    value: str | None
    line: int
    col: int
    left: "ASTDict"
    right: "ASTDict"


class ASTNode:
    """
    Represents a node in the abstract syntax tree (AST) for the TOYC language.

    Nodes own their children; a tree never shares a node between two parents.

    Args:
        kind (str): The type of node (e.g. "assignment", "add", "conditional").
        value (str, optional): Associated lexeme or operator symbol.
        left (ASTNode, optional): Left child.
        right (ASTNode, optional): Right child.
        line (int): Source line number (default is 0).
        col (int): Source column number (default is 0).

    Methods:
        __repr__(): Returns a structured string representation for debugging.
        __eq__(other): Checks structural equality with another ASTNode.
        to_dict(): Converts the node (and all descendants) into a nested dictionary.
        leaves(): Yields leaf nodes left to right.
    """

    def __init__(
        self,
        kind: str,
        value: str | None = None,
        left: "ASTNode | None" = None,
        right: "ASTNode | None" = None,
        line: int = 0,
        col: int = 0,
    ):
        self.kind = kind
        self.value = value
        self.left = left
        self.right = right
        self.line = line
        self.col = col

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children(self) -> list["ASTNode"]:
        return [c for c in (self.left, self.right) if c is not None]

    def leaves(self) -> Iterator["ASTNode"]:
        if self.is_leaf:
            yield self
            return
        for child in self.children():
            yield from child.leaves()

    def __repr__(self) -> str:
        parts = [f"{self.kind}"]
        if self.value is not None:
            parts.append(f"value={repr(self.value)}")
        if self.left is not None:
            parts.append(f"left={repr(self.left)}")
        if self.right is not None:
            parts.append(f"right={repr(self.right)}")
        return f"ASTNode({', '.join(parts)})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ASTNode):
            return False
        return (
            self.kind == other.kind
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
            and self.left == other.left
            and self.right == other.right
        )

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> ASTDict:
        out: ASTDict = {
            "kind": self.kind,
            "value": self.value,
            "line": self.line,
            "col": self.col,
        }
        if self.left is not None:
            out["left"] = self.left.to_dict()
        if self.right is not None:
            out["right"] = self.right.to_dict()
        return out

    def pretty(self, indent: int = 0) -> str:
        """Renders the subtree as an indented outline, one node per line."""
        pad = "  " * indent
        label = self.kind if self.value is None else f"{self.kind} {self.value}"
        lines = [f"{pad}{label}  @{self.line}:{self.col}"]
        for child in self.children():
            lines.append(child.pretty(indent + 1))
        return "\n".join(lines)

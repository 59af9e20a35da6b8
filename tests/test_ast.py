import json

import hypothesis.strategies as st
from hypothesis import given

from toyc.toyc_ast import ASTNode


def leaf(value: str) -> ASTNode:
    kind = "number" if value.isdigit() else "identifier"
    return ASTNode(kind, value)


def test_astnode_repr_leaf() -> None:
    assert repr(ASTNode("identifier", "x")) == "ASTNode(identifier, value='x')"


def test_astnode_repr_nested() -> None:
    node = ASTNode("add", "+", left=leaf("a"), right=leaf("1"))
    assert repr(node) == (
        "ASTNode(add, value='+', left=ASTNode(identifier, value='a'), "
        "right=ASTNode(number, value='1'))"
    )


def test_astnode_eq_equal() -> None:
    n1 = ASTNode("assignment", "x", right=leaf("1"))
    n2 = ASTNode("assignment", "x", right=leaf("1"))
    assert n1 == n2


def test_astnode_eq_not_equal_kind() -> None:
    assert ASTNode("add", "+") != ASTNode("subtract", "+")


def test_astnode_eq_not_equal_children() -> None:
    n1 = ASTNode("assignment", "x", right=leaf("x"))
    n2 = ASTNode("assignment", "x", right=leaf("y"))
    assert n1 != n2


def test_astnode_eq_child_side_matters() -> None:
    n1 = ASTNode("compare", "==", left=leaf("a"))
    n2 = ASTNode("compare", "==", right=leaf("a"))
    assert n1 != n2


def test_astnode_eq_position_matters() -> None:
    assert ASTNode("identifier", "x", line=1, col=1) != ASTNode("identifier", "x", line=2, col=1)


def test_astnode_eq_non_astnode() -> None:
    assert ASTNode("identifier", "x") != "x"


def test_leaf_has_no_children() -> None:
    node = leaf("x")
    assert node.is_leaf
    assert node.children() == []


def test_to_dict_omits_absent_children() -> None:
    d = ASTNode("declaration", "x", line=1, col=5).to_dict()
    assert d == {"kind": "declaration", "value": "x", "line": 1, "col": 5}
    assert "left" not in d and "right" not in d


def test_to_dict_nested() -> None:
    node = ASTNode("assignment", "x", right=ASTNode("add", "+", left=leaf("1"), right=leaf("2")))
    d = node.to_dict()
    assert "left" not in d
    assert d["right"]["kind"] == "add"
    assert d["right"]["left"]["value"] == "1"
    assert d["right"]["right"]["value"] == "2"
    json.dumps(d)


def test_leaves_in_order() -> None:
    tree = ASTNode(
        "subtract",
        "-",
        left=ASTNode("add", "+", left=leaf("a"), right=leaf("b")),
        right=leaf("c"),
    )
    assert [n.value for n in tree.leaves()] == ["a", "b", "c"]


def test_pretty_outline() -> None:
    tree = ASTNode("assignment", "x", right=leaf("1"), line=1, col=1)
    assert tree.pretty() == "assignment x  @1:1\n  number 1  @0:0"


def test_astnode_not_hashable() -> None:
    try:
        hash(leaf("x"))
    except TypeError:
        return
    raise AssertionError("ASTNode should not be hashable")


@given(st.text(min_size=1), st.text(min_size=1))  # type: ignore[misc]
def test_astnode_eq_same_kind_value(kind: str, value: str) -> None:
    assert ASTNode(kind, value) == ASTNode(kind, value)


@given(st.text(min_size=1), st.text(min_size=1))  # type: ignore[misc]
def test_astnode_eq_different_kind_value(kind: str, value: str) -> None:
    assert ASTNode(kind, value) != ASTNode(kind + "x", value + "x")

"""
Provides the `Unparser` class for turning TOYC ASTs back into source text.

The Unparser walks a list of top-level `ASTNode` statements and dispatches each node
to an `emit_<kind>` method, producing canonical source: one statement per line,
single spaces around operators.

Example:
    >>> Unparser().unparse(parse("x=1+2;"))
    'x = 1 + 2;\\n'

Raises:
    TypeError: If the input list contains something other than ASTNode instances.
    NotImplementedError: If there is no `emit_*` method for a node kind.
"""

from toyc.toyc_ast import ASTNode
from toyc.toyc_constants import EQUAL, IF, INT, token_text


class Unparser:
    """Re-serializes TOYC AST nodes into canonical source text.

    Attributes:
        lines (list[str]): Statement lines emitted so far.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def unparse(self, ast: list[ASTNode]) -> str:
        """Renders a list of top-level statements.

        Args:
            ast: Statement nodes as returned by `Parser.parse()`.

        Returns:
            The source text, newline-terminated, or "" for an empty program.

        Raises:
            TypeError: If any element in the AST list is not an ASTNode.
        """
        if not all(isinstance(node, ASTNode) for node in ast):
            raise TypeError("All items in AST must be ASTNode instances.")
        for node in ast:
            self.lines.append(self._visit(node))
        return "".join(line + "\n" for line in self.lines)

    def _visit(self, node: ASTNode) -> str:
        """Invokes the emit method matching `node.kind`.

        Raises:
            NotImplementedError: If the node kind is not supported.
        """
        method_name = f"emit_{node.kind}"
        if hasattr(self, method_name):
            return str(getattr(self, method_name)(node))
        raise NotImplementedError(
            f"No unparse method for node kind '{node.kind}' "
            f"(line {node.line}, col {node.col})"
        )

    def _child(self, node: ASTNode | None, parent: ASTNode) -> str:
        if node is None:
            raise ValueError(
                f"'{parent.kind}' node is missing a child "
                f"(line {parent.line}, col {parent.col})"
            )
        return self._visit(node)

    def emit_declaration(self, node: ASTNode) -> str:
        return f"{token_text[INT]} {node.value};"

    def emit_assignment(self, node: ASTNode) -> str:
        return f"{node.value} = {self._child(node.right, node)};"

    def emit_conditional(self, node: ASTNode) -> str:
        cond = self._child(node.left, node)
        body = self._child(node.right, node)
        return f"{token_text[IF]} {{ {cond} }} {{ {body} }}"

    def emit_compare(self, node: ASTNode) -> str:
        lhs = self._child(node.left, node)
        rhs = self._child(node.right, node)
        return f"{lhs} {token_text[EQUAL]} {rhs}"

    def emit_add(self, node: ASTNode) -> str:
        return self._binary(node, "+")

    def emit_subtract(self, node: ASTNode) -> str:
        return self._binary(node, "-")

    def _binary(self, node: ASTNode, symbol: str) -> str:
        # Left-deep chains need no parentheses; a right operand is always a leaf.
        return f"{self._child(node.left, node)} {symbol} {self._child(node.right, node)}"

    def emit_identifier(self, node: ASTNode) -> str:
        return str(node.value)

    def emit_number(self, node: ASTNode) -> str:
        return str(node.value)


def unparse(ast: list[ASTNode]) -> str:
    """Shorthand for `Unparser().unparse(ast)`."""
    return Unparser().unparse(ast)

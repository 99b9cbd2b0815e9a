"""Binary trees: the fixed arithmetic expression tree and a plain search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

NUMS_COUNT = 9
LEAF = " "
INDENT = 6


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass(eq=False)
class TreeNode:
    """Tree node holding a number and, for inner expression nodes, an operator."""

    value: int = 0
    option: str = LEAF
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def is_operator(self) -> bool:
        return self.option != LEAF

    def label(self) -> str:
        """The operator for inner nodes, the number for leaves."""
        return self.option if self.is_operator() else str(self.value)


def build_expression_tree(values: Sequence[int]) -> TreeNode:
    """Tree of ``A + (B * (C + (D * (E + F) - (G - H)) + I))`` for nine values."""
    if len(values) != NUMS_COUNT:
        raise ValueError(f"exactly {NUMS_COUNT} values are required")
    a, b, c, d, e, f, g, h, i = (int(v) for v in values)

    def leaf(number: int) -> TreeNode:
        return TreeNode(number)

    plus3 = TreeNode(0, "+", leaf(c), leaf(i))
    minus2 = TreeNode(0, "-", leaf(g), leaf(h))
    minus1 = TreeNode(0, "-", plus3, minus2)
    plus4 = TreeNode(0, "+", leaf(e), leaf(f))
    multi2 = TreeNode(0, "*", leaf(d), plus4)
    plus2 = TreeNode(0, "+", minus1, multi2)
    multi1 = TreeNode(0, "*", leaf(b), plus2)
    return TreeNode(0, "+", leaf(a), multi1)


def prefix(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Nodes in node-left-right order."""
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        yield node
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def infix(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Nodes in left-node-right order."""
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node
        node = node.right


def postfix(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Nodes in left-right-node order."""
    if root is None:
        return
    visited: list[TreeNode] = []
    pending = [root]
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    yield from reversed(visited)


def _apply(node: TreeNode) -> None:
    if node.option == "+":
        node.value = _int32(node.left.value + node.right.value)
    elif node.option == "-":
        node.value = _int32(node.left.value - node.right.value)
    elif node.option == "*":
        node.value = _int32(node.left.value * node.right.value)


def postfix_tokens(root: TreeNode) -> list[str]:
    """Evaluate the tree and return its labels in postfix order."""
    tokens = []
    for node in postfix(root):
        _apply(node)
        tokens.append(node.label())
    return tokens


def evaluate(root: TreeNode) -> int:
    """Compute every operator node bottom-up and return the root's value."""
    if root is None:
        raise ValueError("cannot evaluate an empty tree")
    for node in postfix(root):
        _apply(node)
    return root.value


def render_tree(root: Optional[TreeNode]) -> str:
    """Sideways drawing: right subtree above, left below, six spaces per level."""
    lines: list[str] = []
    pending: list[tuple[TreeNode, int]] = []
    node = root
    depth = 0
    while pending or node is not None:
        while node is not None:
            pending.append((node, depth))
            node = node.right
            depth += 1
        node, depth = pending.pop()
        lines.append(" " * (INDENT * depth) + "{ " + node.label() + " }")
        node = node.left
        depth += 1
    return "".join(line + "\n" for line in lines)


def bst_insert(root: Optional[TreeNode], node: TreeNode) -> TreeNode:
    """Insert ``node`` by value; a node whose value is present is dropped."""
    if root is None:
        return node
    current = root
    while True:
        if node.value == current.value:
            return root
        if node.value < current.value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def bst_find_counted(root: Optional[TreeNode], value: int) -> tuple[Optional[TreeNode], int]:
    """Find ``value`` and count the nodes compared on the way."""
    count = 0
    current = root
    while current is not None:
        count += 1
        if value == current.value:
            return current, count
        current = current.left if value < current.value else current.right
    return None, count


def bst_find(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    """Node holding ``value``, or None."""
    return bst_find_counted(root, value)[0]


def bst_remove(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    """Remove ``value`` and return the new root; missing values change nothing."""
    parent: Optional[TreeNode] = None
    current = root
    while current is not None and current.value != value:
        parent = current
        current = current.left if value < current.value else current.right
    if current is None:
        return root

    if current.left is not None and current.right is not None:
        successor_parent = current
        successor = current.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        current.value = successor.value
        if successor_parent is current:
            current.right = successor.right
        else:
            successor_parent.left = successor.right
        return root

    replacement = current.right if current.right is not None else current.left
    if parent is None:
        return replacement
    if parent.left is current:
        parent.left = replacement
    else:
        parent.right = replacement
    return root


def _dot_edges(node: TreeNode) -> list[str]:
    edges = []
    if node.left is not None:
        if not node.is_operator():
            if not node.left.is_operator():
                edges.append(f"{node.value} -> {node.left.value};")
            else:
                edges.append(f'{node.value} -> "{node.left.option}";')
        else:
            edges.append(f'"{node.option}" -> {node.left.value};')
    if node.right is not None:
        if not node.is_operator():
            edges.append(f"{node.value} -> {node.right.value};")
        else:
            edges.append(f'"{node.option}" -> {node.right.value};')
    return edges


def to_dot(root: Optional[TreeNode], tree_name: str = "OurTree") -> str:
    """Graphviz digraph of the tree; empty text for an empty tree."""
    if root is None:
        return ""
    lines = [f"digraph {tree_name} {{"]
    for node in prefix(root):
        lines.extend(_dot_edges(node))
    lines.append("}")
    return "".join(line + "\n" for line in lines)
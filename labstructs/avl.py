"""Self-balancing AVL search tree of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class AvlNode:
    """AVL tree node; ``height`` is 0 for a leaf."""

    num: int
    height: int = 0
    left: Optional["AvlNode"] = None
    right: Optional["AvlNode"] = None


def _height(node: Optional[AvlNode]) -> int:
    if node is None:
        return 0
    left_h = 0 if node.left is None else 1 + node.left.height
    right_h = 0 if node.right is None else 1 + node.right.height
    return max(left_h, right_h)


def _balance(node: Optional[AvlNode]) -> int:
    if node is None:
        return 0
    left_h = 0 if node.left is None else 1 + node.left.height
    right_h = 0 if node.right is None else 1 + node.right.height
    return left_h - right_h


def _rotate_left(root: AvlNode) -> AvlNode:
    right = root.right
    if right is None:
        return root
    root.right = right.left
    right.left = root
    root.height = _height(root)
    right.height = _height(right)
    return right


def _rotate_right(root: AvlNode) -> AvlNode:
    left = root.left
    if left is None:
        return root
    root.left = left.right
    left.right = root
    root.height = _height(root)
    left.height = _height(left)
    return left


def _fix_left_heavy(root: AvlNode) -> AvlNode:
    if _balance(root.left) >= 0:
        return _rotate_right(root)
    root.left = _rotate_left(root.left)
    return _rotate_right(root)


def _fix_right_heavy(root: AvlNode) -> AvlNode:
    if _balance(root.right) >= 0:
        return _rotate_left(root)
    root.right = _rotate_right(root.right)
    return _rotate_left(root)


def _insert(root: Optional[AvlNode], num: int) -> AvlNode:
    if root is None:
        root = AvlNode(num)
    elif num > root.num:
        root.right = _insert(root.right, num)
        if _balance(root) == -2:
            if num > root.right.num:
                root = _rotate_left(root)
            else:
                root.right = _rotate_right(root.right)
                root = _rotate_left(root)
    else:
        root.left = _insert(root.left, num)
        if _balance(root) == 2:
            if num < root.left.num:
                root = _rotate_right(root)
            else:
                root.left = _rotate_left(root.left)
                root = _rotate_right(root)
    root.height = _height(root)
    return root


def _delete(root: Optional[AvlNode], num: int) -> Optional[AvlNode]:
    if root is None:
        return None
    if num > root.num:
        root.right = _delete(root.right, num)
        if _balance(root) == 2:
            root = _fix_left_heavy(root)
    elif num < root.num:
        root.left = _delete(root.left, num)
        if _balance(root) == -2:
            root = _fix_right_heavy(root)
    else:
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.num = successor.num
        root.right = _delete(root.right, successor.num)
        if _balance(root) == 2:
            root = _fix_left_heavy(root)
        return root
    root.height = _height(root)
    return root


def _preorder(node: Optional[AvlNode]) -> Iterator[AvlNode]:
    if node is None:
        return
    yield node
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[AvlNode]) -> Iterator[AvlNode]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node
    yield from _inorder(node.right)


def _postorder(node: Optional[AvlNode]) -> Iterator[AvlNode]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node


class AvlTree:
    """AVL tree; equal numbers are placed in the left subtree."""

    def __init__(self) -> None:
        self.root: Optional[AvlNode] = None

    def insert(self, num: int) -> None:
        self.root = _insert(self.root, num)

    def delete(self, num: int) -> None:
        """Remove one occurrence of ``num``; absent numbers change nothing."""
        self.root = _delete(self.root, num)

    def search_counted(self, num: int) -> tuple[Optional[AvlNode], int]:
        """Node holding ``num`` (or None) and the number of nodes compared."""
        count = 0
        node = self.root
        while node is not None:
            count += 1
            if node.num == num:
                return node, count
            node = node.left if node.num > num else node.right
        return None, count

    def search(self, num: int) -> Optional[AvlNode]:
        return self.search_counted(num)[0]

    def preorder(self) -> Iterator[int]:
        return (node.num for node in _preorder(self.root))

    def inorder(self) -> Iterator[int]:
        return (node.num for node in _inorder(self.root))

    def postorder(self) -> Iterator[int]:
        return (node.num for node in _postorder(self.root))

    def clear(self) -> None:
        self.root = None

    def to_dot(self, tree_name: str = "OurTree") -> str:
        """Graphviz digraph of the tree; empty text for an empty tree."""
        if self.root is None:
            return ""
        lines = [f"digraph {tree_name} {{"]
        for node in _preorder(self.root):
            if node.left is not None:
                lines.append(f"{node.num} -> {node.left.num};")
            if node.right is not None:
                lines.append(f"{node.num} -> {node.right.num};")
        lines.append("}")
        return "".join(line + "\n" for line in lines)

    def __contains__(self, num: object) -> bool:
        return isinstance(num, int) and self.search(num) is not None

    def __iter__(self) -> Iterator[int]:
        return self.inorder()
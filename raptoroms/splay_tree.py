"""A splay tree: recently accessed keys move to the root."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A tree node holding one key."""

    key: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _rotate_left(node: Node) -> Node:
    right = node.right
    node.right = right.left
    right.left = node
    return right


def _rotate_right(node: Node) -> Node:
    left = node.left
    node.left = left.right
    left.right = node
    return left


def search(root: Optional[Node], key: Any) -> Optional[Node]:
    """Splay the node with ``key`` (or the last node on its path) to the root and return the new root."""
    if root is None or root.key == key:
        return root
    if root.key > key:
        if root.left is None:
            return root
        if root.left.key > key:
            root.left.left = search(root.left.left, key)
            root = _rotate_right(root)
        elif root.left.key < key:
            root.left.right = search(root.left.right, key)
            if root.left.right is not None:
                root.left = _rotate_left(root.left)
        if root.left is None:
            return root
        return _rotate_right(root)
    if root.right is None:
        return root
    if root.right.key > key:
        root.right.left = search(root.right.left, key)
        if root.right.left is not None:
            root.right = _rotate_right(root.right)
    elif root.right.key < key:
        root.right.right = search(root.right.right, key)
        root = _rotate_left(root)
    if root.right is None:
        return root
    return _rotate_left(root)


def insert(root: Optional[Node], key: Any) -> Node:
    """Insert ``key`` unless present; return the new root, which holds ``key``."""
    if root is None:
        return Node(key)
    root = search(root, key)
    if root.key == key:
        return root
    new_root = Node(key)
    if root.key > key:
        new_root.right = root
        new_root.left = root.left
        root.left = None
    else:
        new_root.left = root
        new_root.right = root.right
        root.right = None
    return new_root


def _lines(prefix: str, node: Optional[Node], is_left: bool) -> Iterator[str]:
    if node is None:
        return
    yield f"{prefix}{'|---' if is_left else '^---'}{node.key}"
    child_prefix = prefix + ("|   " if is_left else "   ")
    yield from _lines(child_prefix, node.left, True)
    yield from _lines(child_prefix, node.right, False)


def format_tree(node: Optional[Node]) -> str:
    """Render the tree sideways, one key per line."""
    return "".join(line + "\n" for line in _lines("", node, False))
"""AVL tree building blocks: heights, balance factors and rotations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AVLNode:
    """A tree node that caches the height of its subtree."""

    data: int
    height: int = 1
    left: AVLNode | None = None
    right: AVLNode | None = None


def height(node: AVLNode | None) -> int:
    """Return the cached height, 0 for an empty subtree."""
    return 0 if node is None else node.height


def balance(node: AVLNode | None) -> int:
    """Return left height minus right height, 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def update_height(node: AVLNode | None) -> None:
    """Recompute ``node``'s height from its children's cached heights."""
    if node is not None:
        node.height = 1 + max(height(node.left), height(node.right))


def rotate_right(node: AVLNode) -> AVLNode:
    """Rotate right around ``node``; return the new subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("right rotation needs a left child")
    node.left = pivot.right
    pivot.right = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_left(node: AVLNode) -> AVLNode:
    """Rotate left around ``node``; return the new subtree root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("left rotation needs a right child")
    node.right = pivot.left
    pivot.left = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_left_right(node: AVLNode) -> AVLNode:
    """Rotate the left child left, then ``node`` right."""
    if node.left is None:
        raise ValueError("left-right rotation needs a left child")
    node.left = rotate_left(node.left)
    return rotate_right(node)


def rotate_right_left(node: AVLNode) -> AVLNode:
    """Rotate the right child right, then ``node`` left."""
    if node.right is None:
        raise ValueError("right-left rotation needs a right child")
    node.right = rotate_right(node.right)
    return rotate_left(node)


def describe(node: AVLNode | None) -> str:
    """List each node in order with its height and balance factor."""
    lines: list[str] = []
    stack: list[AVLNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        lines.append(f"Node {current.data}")
        lines.append(f"Height= {height(current)}.")
        lines.append(f"BF= {balance(current)}.")
        current = current.right
    return "\n".join(lines)
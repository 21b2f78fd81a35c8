"""Binary tree nodes, level-order construction and the classic traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    data: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def insert_level_order(root: Optional[TreeNode], data: int) -> TreeNode:
    """Insert ``data`` at the first free child slot in level order; return the root."""
    new_node = TreeNode(data)
    if root is None:
        return new_node
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = new_node
            return root
        queue.append(node.left)
        if node.right is None:
            node.right = new_node
            return root
        queue.append(node.right)
    return root


def build_tree(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree by inserting each value in level order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = insert_level_order(root, value)
    return root


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Root, left subtree, right subtree (recursive)."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def preorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Preorder traversal using an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while True:
        while node is not None:
            result.append(node.data)
            stack.append(node)
            node = node.left
        if not stack:
            break
        node = stack.pop().right
    return result


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Left subtree, root, right subtree (recursive)."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def inorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Inorder traversal using an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while True:
        while node is not None:
            stack.append(node)
            node = node.left
        if not stack:
            break
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Left subtree, right subtree, root (recursive)."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def postorder_two_stacks(root: Optional[TreeNode]) -> list[int]:
    """Postorder traversal using two stacks."""
    if root is None:
        return []
    pending = [root]
    visited: list[TreeNode] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.data for node in reversed(visited)]


def postorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Postorder traversal with a single stack and a last-visited marker."""
    result: list[int] = []
    if root is None:
        return result
    stack: list[TreeNode] = []
    current: Optional[TreeNode] = root
    previous: Optional[TreeNode] = None
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        top = stack[-1]
        if top.right is not None and top.right is not previous:
            current = top.right
        else:
            result.append(top.data)
            previous = top
            stack.pop()
    return result


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Breadth-first traversal, left to right on each level."""
    result: list[int] = []
    if root is None:
        return result
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def reverse_level_order(root: Optional[TreeNode]) -> list[int]:
    """Level-order traversal read back from last node to first."""
    stack = level_order(root)
    return [stack.pop() for _ in range(len(stack))]
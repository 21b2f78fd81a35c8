"""Shape checks and zigzag traversals of a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Optional

from codekata.tree import TreeNode


def mirror(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap left and right children throughout the tree, in place; return the root."""
    if root is not None:
        mirror(root.left)
        mirror(root.right)
        root.left, root.right = root.right, root.left
    return root


def are_mirror(tree1: Optional[TreeNode], tree2: Optional[TreeNode]) -> bool:
    """Whether ``tree2`` is the mirror image of ``tree1``, values included."""
    if tree1 is None and tree2 is None:
        return True
    if tree1 is None or tree2 is None:
        return False
    return (
        tree1.data == tree2.data
        and are_mirror(tree1.left, tree2.right)
        and are_mirror(tree1.right, tree2.left)
    )


def structurally_identical(tree1: Optional[TreeNode], tree2: Optional[TreeNode]) -> bool:
    """Whether both trees have the same shape and values (recursive)."""
    if tree1 is None and tree2 is None:
        return True
    if tree1 is None or tree2 is None:
        return False
    return (
        tree1.data == tree2.data
        and structurally_identical(tree1.left, tree2.left)
        and structurally_identical(tree1.right, tree2.right)
    )


def structurally_identical_iterative(
    tree1: Optional[TreeNode], tree2: Optional[TreeNode]
) -> bool:
    """Whether both trees have the same shape and values (explicit stack)."""
    stack = [(tree1, tree2)]
    while stack:
        first, second = stack.pop()
        if first is None and second is None:
            continue
        if first is None or second is None or first.data != second.data:
            return False
        stack.append((first.left, second.left))
        stack.append((first.right, second.right))
    return True


def is_complete(root: Optional[TreeNode]) -> bool:
    """Whether every level is full except possibly the last, filled from the left."""
    queue: deque[Optional[TreeNode]] = deque([root])
    seen_gap = False
    while queue:
        node = queue.popleft()
        if node is None:
            seen_gap = True
            continue
        if seen_gap:
            return False
        queue.append(node.left)
        queue.append(node.right)
    return True


def zigzag_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values level by level, alternating direction, starting left to right."""
    result: list[int] = []
    if root is None:
        return result
    left_to_right = True
    current: deque[TreeNode] = deque([root])
    upcoming: list[TreeNode] = []
    while current:
        node = current.popleft()
        result.append(node.data)
        children = (node.left, node.right) if left_to_right else (node.right, node.left)
        upcoming.extend(child for child in children if child is not None)
        if not current and upcoming:
            left_to_right = not left_to_right
            current.extend(reversed(upcoming))
            upcoming.clear()
    return result


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Rows of values per level, every second row reversed."""
    rows: list[list[int]] = []
    if root is None:
        return rows
    queue = deque([root])
    reverse_row = False
    while queue:
        row = []
        for _ in range(len(queue)):
            node = queue.popleft()
            row.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        if reverse_row:
            row.reverse()
        reverse_row = not reverse_row
        rows.append(row)
    return rows


def zigzag_level_order_stack(root: Optional[TreeNode]) -> list[list[int]]:
    """Rows of values per level in zigzag order, built with a queue and a stack."""
    rows: list[list[int]] = []
    if root is None:
        return rows
    right_first = False
    current: deque[TreeNode] = deque([root])
    upcoming: list[TreeNode] = []
    row: list[int] = []
    while current:
        node = current.popleft()
        row.append(node.data)
        children = (node.right, node.left) if right_first else (node.left, node.right)
        upcoming.extend(child for child in children if child is not None)
        if not current:
            rows.append(row)
            row = []
            if upcoming:
                right_first = not right_first
                current.extend(reversed(upcoming))
                upcoming.clear()
    return rows
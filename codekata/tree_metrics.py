"""Size, height, depth, node counts and maximum of a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from codekata.tree import TreeNode


def _breadth_first(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def size(root: Optional[TreeNode]) -> int:
    """Number of nodes (recursive)."""
    if root is None:
        return 0
    return size(root.left) + 1 + size(root.right)


def size_iterative(root: Optional[TreeNode]) -> int:
    """Number of nodes, counted in level order."""
    return sum(1 for _ in _breadth_first(root))


def height(root: Optional[TreeNode]) -> int:
    """Number of levels (recursive depth-first)."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def height_iterative(root: Optional[TreeNode]) -> int:
    """Number of levels, counted one level at a time."""
    if root is None:
        return 0
    levels = 0
    queue = deque([root])
    while queue:
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels += 1
    return levels


def height_with_markers(root: Optional[TreeNode]) -> int:
    """Number of levels, using a ``None`` marker at the end of each level."""
    if root is None:
        return 0
    levels = 0
    queue: deque[Optional[TreeNode]] = deque([root, None])
    while queue:
        node = queue.popleft()
        if node is None:
            if queue:
                queue.append(None)
            levels += 1
            continue
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return levels


def deepest_node(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """The last node reached in level order, or ``None`` for an empty tree."""
    last = None
    for last in _breadth_first(root):
        pass
    return last


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest root-to-leaf path (recursive)."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    if root.left is None:
        return min_depth(root.right) + 1
    if root.right is None:
        return min_depth(root.left) + 1
    return min(min_depth(root.left), min_depth(root.right)) + 1


def min_depth_bfs(root: Optional[TreeNode]) -> int:
    """Shortest root-to-leaf path length, found by breadth-first search."""
    if root is None:
        return 0
    queue = deque([(root, 1)])
    while queue:
        node, depth = queue.popleft()
        if node.left is None and node.right is None:
            return depth
        if node.left is not None:
            queue.append((node.left, depth + 1))
        if node.right is not None:
            queue.append((node.right, depth + 1))
    return 0


def count_leaves(root: Optional[TreeNode]) -> int:
    """Nodes without children."""
    return sum(
        1
        for node in _breadth_first(root)
        if node.left is None and node.right is None
    )


def count_full_nodes(root: Optional[TreeNode]) -> int:
    """Nodes with both children."""
    return sum(
        1
        for node in _breadth_first(root)
        if node.left is not None and node.right is not None
    )


def count_half_nodes(root: Optional[TreeNode]) -> int:
    """Nodes with exactly one child."""
    return sum(
        1
        for node in _breadth_first(root)
        if (node.left is None) != (node.right is None)
    )


def find_max(root: Optional[TreeNode]) -> int:
    """Largest value in the tree (recursive); raises ValueError when empty."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    best = root.data
    for child in (root.left, root.right):
        if child is not None:
            best = max(best, find_max(child))
    return best


def find_max_iterative(root: Optional[TreeNode]) -> int:
    """Largest value in the tree, found in level order; raises ValueError when empty."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    return max(node.data for node in _breadth_first(root))
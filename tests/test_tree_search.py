import pytest

from codekata.tree import TreeNode, build_tree, level_order
from codekata.tree_metrics import count_leaves
from codekata.tree_search import (
    ancestors,
    ancestors_of_value,
    contains,
    has_path_sum,
    has_path_sum_recursive,
    max_level_sum,
    root_to_leaf_paths,
    total_sum,
    total_sum_recursive,
)


def _path_sum_tree():
    root = TreeNode(5)
    root.left = TreeNode(4)
    root.right = TreeNode(8)
    root.left.left = TreeNode(11)
    root.left.left.left = TreeNode(7)
    root.left.left.right = TreeNode(2)
    root.right.left = TreeNode(13)
    root.right.right = TreeNode(4)
    root.right.right.right = TreeNode(1)
    return root


def _ancestor_tree():
    root = TreeNode(1)
    root.left = TreeNode(2)
    root.right = TreeNode(3)
    root.left.left = TreeNode(4)
    root.left.right = TreeNode(5)
    root.right.left = TreeNode(6)
    root.right.right = TreeNode(7)
    root.right.right.left = TreeNode(8)
    root.right.right.right = TreeNode(9)
    return root


def test_contains_matches_membership():
    root = build_tree([5, 89, 4, 45, 32, 7, 4])
    values = level_order(root)
    for candidate in range(0, 100):
        assert contains(root, candidate) == (candidate in values)


def test_contains_empty_tree():
    assert contains(None, 1) is False


@pytest.mark.parametrize("values", [[], [3], [8, 7, 9, 2, 5, 6, 3, 4, 34], [-4, 2, -1]])
def test_total_sums_agree(values):
    root = build_tree(values)
    assert total_sum(root) == sum(values)
    assert total_sum_recursive(root) == sum(values)


def test_max_level_sum_single_node():
    assert max_level_sum(build_tree([7])) == (1, 7)


def test_max_level_sum_chain_picks_deepest_largest():
    root = TreeNode(1, TreeNode(2, TreeNode(9)))
    assert max_level_sum(root) == (3, 9)


def test_max_level_sum_non_positive_levels():
    assert max_level_sum(build_tree([-1, -2])) == (0, 0)
    assert max_level_sum(None) == (0, 0)


def test_max_level_sum_is_not_below_any_level():
    root = build_tree([8, 7, 9, 2, 5, 6, 3, 4, 34])
    level, best = max_level_sum(root)
    level_sums = [8, 7 + 9, 2 + 5 + 6 + 3, 4 + 34]
    assert best == max(level_sums)
    assert level_sums[level - 1] == best


def test_path_sum_source_example():
    root = _path_sum_tree()
    assert has_path_sum_recursive(root, 22) is True
    assert has_path_sum(root, 22) is True


def test_path_sum_matches_leaf_paths():
    root = _path_sum_tree()
    sums = {sum(path) for path in root_to_leaf_paths(root)}
    for target in range(0, 40):
        assert has_path_sum(root, target) == (target in sums)
        assert has_path_sum_recursive(root, target) == (target in sums)


def test_path_sum_empty_tree():
    assert has_path_sum(None, 0) is False
    assert has_path_sum_recursive(None, 0) is False


def test_ancestors_of_node():
    root = _ancestor_tree()
    target = root.right.right.left
    assert ancestors(root, target) == [7, 3, 1]


def test_ancestors_by_value_agree_with_by_node():
    root = _ancestor_tree()
    for node_value, node in [
        (8, root.right.right.left),
        (5, root.left.right),
        (3, root.right),
    ]:
        assert ancestors_of_value(root, node_value) == ancestors(root, node)


def test_ancestors_of_root_and_missing():
    root = _ancestor_tree()
    assert ancestors(root, root) == []
    assert ancestors_of_value(root, 1) == []
    assert ancestors_of_value(root, 42) == []
    assert ancestors(root, TreeNode(8)) == []


def test_root_to_leaf_paths_example():
    root = TreeNode(10)
    root.left = TreeNode(8)
    root.right = TreeNode(2)
    root.left.left = TreeNode(3)
    root.left.right = TreeNode(5)
    root.right.left = TreeNode(2)
    assert root_to_leaf_paths(root) == [[10, 8, 3], [10, 8, 5], [10, 2, 2]]


def test_root_to_leaf_paths_invariants():
    root = build_tree(range(1, 12))
    paths = root_to_leaf_paths(root)
    assert len(paths) == count_leaves(root)
    assert all(path[0] == root.data for path in paths)
    assert root_to_leaf_paths(None) == []
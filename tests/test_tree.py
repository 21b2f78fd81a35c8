import pytest

from codekata.tree import (
    TreeNode,
    build_tree,
    inorder,
    inorder_iterative,
    insert_level_order,
    level_order,
    postorder,
    postorder_iterative,
    postorder_two_stacks,
    preorder,
    preorder_iterative,
    reverse_level_order,
)

SAMPLES = [
    [8],
    [8, 7],
    [8, 7, 9, 10],
    [8, 7, 9, 2, 5, 6, 3, 4, 34],
    [5, 89, 4, 45, 32, 7, 4],
    list(range(1, 21)),
]


def _source_tree():
    return TreeNode(
        5,
        TreeNode(1, TreeNode(3), TreeNode(8)),
        TreeNode(4, TreeNode(7), TreeNode(9)),
    )


def _bst():
    return TreeNode(
        50,
        TreeNode(30, TreeNode(20, TreeNode(10)), TreeNode(40)),
        TreeNode(70, None, TreeNode(80, TreeNode(75), TreeNode(90))),
    )


def test_insert_into_empty_creates_root():
    root = insert_level_order(None, 8)
    assert root.data == 8
    assert root.left is None and root.right is None


def test_insert_fills_slots_left_to_right():
    root = None
    for value in (8, 7, 9, 10):
        root = insert_level_order(root, value)
    assert root.left.data == 7
    assert root.right.data == 9
    assert root.left.left.data == 10
    assert root.left.right is None


@pytest.mark.parametrize("values", SAMPLES)
def test_build_tree_level_order_round_trip(values):
    assert level_order(build_tree(values)) == values


def test_empty_tree_traversals():
    for traversal in (
        preorder,
        preorder_iterative,
        inorder,
        inorder_iterative,
        postorder,
        postorder_two_stacks,
        postorder_iterative,
        level_order,
        reverse_level_order,
    ):
        assert traversal(None) == []
    assert build_tree([]) is None


def test_source_tree_preorder():
    assert preorder(_source_tree()) == [5, 1, 3, 8, 4, 7, 9]


def test_source_tree_inorder_and_postorder():
    root = _source_tree()
    assert inorder(root) == [3, 1, 8, 5, 7, 4, 9]
    assert postorder(root) == [3, 8, 1, 7, 9, 4, 5]


@pytest.mark.parametrize("values", SAMPLES)
def test_iterative_traversals_agree_with_recursive(values):
    root = build_tree(values)
    assert preorder_iterative(root) == preorder(root)
    assert inorder_iterative(root) == inorder(root)
    assert postorder_two_stacks(root) == postorder(root)
    assert postorder_iterative(root) == postorder(root)


@pytest.mark.parametrize("values", SAMPLES)
def test_traversals_visit_every_node_once(values):
    root = build_tree(values)
    for traversal in (preorder, inorder, postorder, level_order):
        assert sorted(traversal(root)) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_root_positions(values):
    root = build_tree(values)
    assert preorder(root)[0] == values[0]
    assert postorder_iterative(root)[-1] == values[0]


def test_inorder_of_search_tree_is_sorted():
    root = _bst()
    result = inorder_iterative(root)
    assert result == sorted(result)
    assert inorder(root) == result


def test_irregular_tree_traversals_agree():
    root = _bst()
    assert postorder_iterative(root) == postorder(root)
    assert postorder_two_stacks(root) == postorder(root)
    assert preorder_iterative(root) == preorder(root)


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_level_order_is_reversed(values):
    root = build_tree(values)
    assert reverse_level_order(root) == list(reversed(values))
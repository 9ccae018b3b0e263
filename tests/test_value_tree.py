from hypothesis import given
from hypothesis import strategies as st

from treeworks.value_tree import TreeNode, ValueBinaryTree


def _algebra_tree():
    tree = ValueBinaryTree(["+", "-", "*", "a", "/", "d", "e"])
    slash = tree.root().left.right
    slash.left = TreeNode("b")
    slash.right = TreeNode("c")
    return tree


def test_seven_tree_pre_order():
    tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
    assert list(tree.pre_order()) == [1, 2, 4, 5, 3, 6, 7]


def test_seven_tree_in_order():
    tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
    assert list(tree.in_order()) == [4, 2, 5, 1, 6, 3, 7]


def test_seven_tree_post_order():
    tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
    assert list(tree.post_order(tree.root())) == [4, 5, 2, 6, 7, 3, 1]


def test_algebra_tree_traversals():
    tree = _algebra_tree()
    assert " ".join(tree.pre_order()) == "+ - a / b c * d e"
    assert " ".join(tree.in_order()) == "a - b / c + d * e"
    assert " ".join(tree.post_order()) == "a b c / - d e * +"


def test_complete_tree_layout():
    tree = ValueBinaryTree([1, 2, 3, 4])
    root = tree.root()
    assert root.data == 1
    assert root.left.data == 2
    assert root.right.data == 3
    assert root.left.left.data == 4
    assert root.left.right is None
    assert root.right.left is None


def test_empty_contents_give_empty_tree():
    tree = ValueBinaryTree([])
    assert tree.root() is None
    assert list(tree.in_order()) == []


def test_default_tree_is_empty():
    tree = ValueBinaryTree()
    assert tree.root() is None
    assert list(tree.pre_order()) == []


def test_traversal_of_none_node_is_empty():
    tree = ValueBinaryTree([1, 2, 3])
    assert list(tree.pre_order(None)) == []
    assert list(tree.post_order(None)) == []


def test_traversal_of_subtree():
    tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
    assert list(tree.in_order(tree.root().left)) == [4, 2, 5]


def test_clear_empties_tree():
    tree = ValueBinaryTree([1, 2, 3])
    tree.clear()
    assert tree.root() is None
    assert list(tree.post_order()) == []


def test_create_replaces_contents():
    tree = ValueBinaryTree([1, 2, 3])
    tree.create_complete_tree(["x", "y"])
    assert list(tree.pre_order()) == ["x", "y"]


@given(st.lists(st.integers()))
def test_traversals_are_permutations(values):
    tree = ValueBinaryTree(values)
    for traversal in (tree.pre_order, tree.in_order, tree.post_order):
        assert sorted(traversal()) == sorted(values)


@given(st.lists(st.integers(), min_size=1))
def test_root_holds_first_value(values):
    tree = ValueBinaryTree(values)
    assert next(tree.pre_order()) == values[0]
    assert list(tree.post_order())[-1] == values[0]


@given(st.lists(st.integers(), min_size=1))
def test_level_order_matches_input(values):
    tree = ValueBinaryTree(values)
    level = []
    frontier = [tree.root()]
    while frontier:
        nxt = []
        for node in frontier:
            if node is not None:
                level.append(node.data)
                nxt.extend([node.left, node.right])
        frontier = nxt
    assert level == values
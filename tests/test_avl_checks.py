import pytest

from treeworks.avl_checks import (
    check_balance,
    check_heights,
    check_invariants,
    check_order,
    format_in_order,
    format_vertical,
)
from treeworks.avl_node import AVLNode, InvariantError, update_height


def _node(key, data, left=None, right=None):
    node = AVLNode(key, data, left, right)
    update_height(node)
    return node


def _three():
    return _node(2, "b", _node(1, "a"), _node(3, "c"))


def test_empty_tree_passes_every_check():
    assert check_heights(None)
    assert check_balance(None)
    assert check_order(None)
    assert check_invariants(None) is True


def test_valid_tree_passes_every_check():
    assert check_invariants(_three()) is True


def test_wrong_height_is_detected(capsys):
    tree = _three()
    tree.height = 5
    assert check_heights(tree) is False
    assert "height check internals" in capsys.readouterr().err
    with pytest.raises(InvariantError, match="height"):
        check_invariants(tree)


def test_unbalanced_chain_is_detected():
    chain = _node(1, "a", right=_node(2, "b", right=_node(3, "c")))
    assert check_heights(chain) is True
    assert check_balance(chain) is False
    with pytest.raises(InvariantError, match="balance"):
        check_invariants(chain)


def test_out_of_order_keys_are_detected(capsys):
    tree = _node(2, "b", _node(3, "c"), _node(1, "a"))
    assert check_order(tree) is False
    assert "3 followed by 2" in capsys.readouterr().err
    with pytest.raises(InvariantError, match="order"):
        check_invariants(tree)


def test_duplicate_keys_break_order():
    tree = _node(2, "b", _node(2, "x"))
    assert check_order(tree) is False


def test_format_in_order_of_empty_tree():
    assert format_in_order(None) == " "


def test_format_in_order_lists_pairs_with_gaps():
    assert format_in_order(_node(1, "one")) == " [1 : one] "
    assert format_in_order(_three()) == " [1 : a] [2 : b] [3 : c] "


def test_format_vertical_of_empty_tree():
    assert format_vertical(None) == ". []\n"


def test_format_vertical_of_leaf():
    assert format_vertical(_node(1, "a")) == '. [1: "a"] Bal: 0 Ht: 0\n'


def test_format_vertical_shows_missing_child():
    tree = _node(2, "b", left=_node(1, "a"))
    assert format_vertical(tree).splitlines() == [
        '. [2: "b"] Bal: -1 Ht: 1',
        ' |- [1: "a"] Bal: 0 Ht: 0',
        " |- []",
    ]


def test_format_vertical_lists_left_before_right():
    lines = format_vertical(_three()).splitlines()
    assert len(lines) == 3
    assert lines[1].startswith(' |- [1: "a"]')
    assert lines[2].startswith(' |- [3: "c"]')
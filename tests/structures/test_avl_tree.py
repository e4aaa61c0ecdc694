from __future__ import annotations

import random
from typing import Iterable

import pytest

from algoengine.avl_tree import AVLNode, AVLTree


def build(values: Iterable[int]) -> AVLTree:
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    return tree


def test_new_tree_is_empty() -> None:
    tree = AVLTree()
    assert tree.get_tree() == "[]"
    assert tree.get_last_rotation() == "No rotations performed"


def test_fresh_leaves_report_height_zero() -> None:
    tree = build([10, 20, 30])
    # Leaves start at height 0, so a three-node chain is still within bounds.
    assert tree.get_tree() == "[10:2:-1,20:1:0,30:0:0]"
    assert tree.get_last_rotation() == "No rotations performed"


def test_right_right_case_rotates_left() -> None:
    tree = build([10, 20, 30, 40])
    assert tree.get_tree() == "[10:1:0,20:2:0,30:1:0,40:0:0]"
    assert tree.get_last_rotation() == "Left rotation on node 10"


def test_left_left_case_rotates_right() -> None:
    tree = build([30, 20, 10, 5])
    assert tree.get_tree() == "[5:0:0,10:1:0,20:2:0,30:1:0]"
    assert tree.get_last_rotation() == "Right rotation on node 30"


def test_left_right_case_reports_outer_rotation() -> None:
    tree = build([40, 20, 30, 25])
    assert tree.get_tree() == "[20:1:0,25:0:0,30:2:0,40:1:0]"
    assert tree.get_last_rotation() == "Right rotation on node 40"


def test_right_left_case_reports_outer_rotation() -> None:
    tree = build([10, 30, 20, 25])
    assert tree.get_tree() == "[10:1:0,20:2:0,25:0:0,30:1:0]"
    assert tree.get_last_rotation() == "Left rotation on node 10"


def test_duplicate_insert_is_a_no_op_and_resets_log() -> None:
    tree = build([10, 20, 30, 40])
    before = tree.get_tree()
    tree.insert(20)
    assert tree.get_tree() == before
    assert tree.get_last_rotation() == "No rotations performed"


def test_remove_rebalances_using_balance_factors() -> None:
    tree = build([10, 20, 30, 40, 50])
    assert tree.get_tree() == "[10:1:0,20:3:-1,30:2:-1,40:1:0,50:0:0]"

    tree.remove(10)
    assert tree.get_tree() == "[20:1:0,30:2:0,40:1:0,50:0:0]"
    assert tree.get_last_rotation() == "Left rotation on node 20"


def test_remove_node_with_two_children_uses_successor() -> None:
    tree = build([30, 20, 10, 5])
    tree.remove(20)
    assert tree.get_tree() == "[5:0:0,10:1:0,30:2:1]"
    assert tree.get_last_rotation() == "No rotations performed"


def test_remove_missing_value_recomputes_heights_on_search_path() -> None:
    tree = build([2, 1, 3])
    assert tree.get_tree() == "[1:0:0,2:1:0,3:0:0]"

    tree.remove(99)
    # Values are untouched; the leaf 3 on the search path is re-heighted.
    assert tree.get_tree() == "[1:0:0,2:2:-1,3:1:0]"
    assert tree.get_last_rotation() == "No rotations performed"


def test_clear_resets_tree_and_log() -> None:
    tree = build([10, 20, 30, 40])
    tree.clear()
    assert tree.get_tree() == "[]"
    assert tree.get_last_rotation() == "No rotations performed"
    assert tree.root is None


@pytest.mark.parametrize("seed", [1, 2, 3, 13, 99])
def test_balance_and_ordering_hold_after_random_operations(seed: int) -> None:
    rng = random.Random(seed)
    tree = AVLTree()
    expected: set[int] = set()
    for _ in range(400):
        value = rng.randint(-60, 60)
        if rng.random() < 0.65:
            tree.insert(value)
            expected.add(value)
        else:
            tree.remove(value)
            expected.discard(value)

        snapshot = tree.snapshot()
        values = [item[0] for item in snapshot]
        assert values == sorted(expected)
        assert all(balance in (-1, 0, 1) for _, _, balance in snapshot)


def test_avl_node_rejects_non_integer_payload() -> None:
    with pytest.raises(TypeError):
        AVLNode("7")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        AVLTree().insert(1.5)  # type: ignore[arg-type]

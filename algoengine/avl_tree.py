"""Self-balancing AVL tree over integers with rotation diagnostics.

Height bookkeeping follows the visualiser's convention rather than the
textbook one:

* an absent child has height ``0``;
* a freshly created leaf also starts at height ``0``;
* any node whose height is recomputed gets ``1 + max(h(left), h(right))``, so a
  leaf that has been touched by a rotation or a splice reports ``1``.

The balance factor is ``h(left) - h(right)`` computed from those stored
heights, and every public mutation leaves it in ``{-1, 0, 1}`` at every node.

Insertion picks the LL/RR/LR/RL case by comparing the inserted value with the
child on the heavy side. Deletion cannot do that (the value is gone) and
selects the case from the child's balance factor instead.

Each rotation overwrites the rotation log, so after a double rotation only
the outer rotation is visible through :meth:`AVLTree.get_last_rotation`.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional, Tuple

from .config import LEFT_ROTATION_TEMPLATE, NO_ROTATION_MESSAGE, RIGHT_ROTATION_TEMPLATE
from .encoding import require_int

logger = logging.getLogger(__name__)

__all__ = ["AVLNode", "AVLTree"]


@dataclass(slots=True)
class AVLNode:
    """Tree node exclusively owning its children."""

    data: int
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    height: int = 0

    def __post_init__(self) -> None:
        require_int(self.data, "AVLNode data")


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _min_value_node(node: AVLNode) -> AVLNode:
    current = node
    while current.left is not None:
        current = current.left
    return current


class AVLTree:
    """Height-balanced binary search tree; duplicate inserts are ignored."""

    __slots__ = ("_root", "_last_rotation")

    def __init__(self) -> None:
        self._root: Optional[AVLNode] = None
        self._last_rotation = NO_ROTATION_MESSAGE

    @property
    def root(self) -> Optional[AVLNode]:
        return self._root

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------
    def insert(self, value: int) -> None:
        value = require_int(value)
        self._last_rotation = NO_ROTATION_MESSAGE
        self._root = self._insert(self._root, value)

    def remove(self, value: int) -> None:
        """Delete *value* if present.

        Heights along the search path are recomputed even when *value* is
        absent, so a fresh leaf on that path can move from height 0 to 1.
        """

        value = require_int(value)
        self._last_rotation = NO_ROTATION_MESSAGE
        self._root = self._delete(self._root, value)

    def get_tree(self) -> str:
        """Serialise the tree in order as ``[value:height:balance,...]``."""

        entries = [
            f"{node.data}:{node.height}:{_balance(node)}" for node in self._in_order()
        ]
        return "[" + ",".join(entries) + "]"

    def get_last_rotation(self) -> str:
        return self._last_rotation

    def clear(self) -> None:
        self._root = None
        self._last_rotation = NO_ROTATION_MESSAGE

    def snapshot(self) -> List[Tuple[int, int, int]]:
        """Return ``(value, height, balance)`` triples in order."""

        return [(node.data, node.height, _balance(node)) for node in self._in_order()]

    # ------------------------------------------------------------------
    # Rotations
    # ------------------------------------------------------------------
    def _rotate_right(self, pivot: AVLNode) -> AVLNode:
        self._record_rotation(RIGHT_ROTATION_TEMPLATE, pivot)
        new_root = pivot.left
        assert new_root is not None
        pivot.left = new_root.right
        new_root.right = pivot
        _update_height(pivot)
        _update_height(new_root)
        return new_root

    def _rotate_left(self, pivot: AVLNode) -> AVLNode:
        self._record_rotation(LEFT_ROTATION_TEMPLATE, pivot)
        new_root = pivot.right
        assert new_root is not None
        pivot.right = new_root.left
        new_root.left = pivot
        _update_height(pivot)
        _update_height(new_root)
        return new_root

    def _record_rotation(self, template: str, pivot: AVLNode) -> None:
        self._last_rotation = template.format(value=pivot.data)
        logger.debug("%s", self._last_rotation)

    # ------------------------------------------------------------------
    # Recursive helpers
    # ------------------------------------------------------------------
    def _insert(self, node: Optional[AVLNode], value: int) -> AVLNode:
        if node is None:
            return AVLNode(value)

        if value < node.data:
            node.left = self._insert(node.left, value)
        elif value > node.data:
            node.right = self._insert(node.right, value)
        else:
            return node

        _update_height(node)
        balance = _balance(node)

        if balance > 1:
            assert node.left is not None
            if value < node.left.data:
                return self._rotate_right(node)
            if value > node.left.data:
                node.left = self._rotate_left(node.left)
                return self._rotate_right(node)
        elif balance < -1:
            assert node.right is not None
            if value > node.right.data:
                return self._rotate_left(node)
            if value < node.right.data:
                node.right = self._rotate_right(node.right)
                return self._rotate_left(node)
        return node

    def _delete(self, node: Optional[AVLNode], value: int) -> Optional[AVLNode]:
        if node is None:
            return None

        if value < node.data:
            node.left = self._delete(node.left, value)
        elif value > node.data:
            node.right = self._delete(node.right, value)
        elif node.left is None or node.right is None:
            # The surviving child (if any) takes this node's place.
            node = node.left if node.left is not None else node.right
        else:
            successor = _min_value_node(node.right)
            node.data = successor.data
            node.right = self._delete(node.right, successor.data)

        if node is None:
            return None

        _update_height(node)
        balance = _balance(node)

        if balance > 1:
            assert node.left is not None
            if _balance(node.left) < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        if balance < -1:
            assert node.right is not None
            if _balance(node.right) > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        return node

    def _in_order(self) -> List[AVLNode]:
        nodes: List[AVLNode] = []
        stack: List[AVLNode] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            nodes.append(current)
            current = current.right
        return nodes

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
red_black_tree.py
-----------------

An ordered **set of integers** backed by a **Red‑Black** tree.  Insert,
delete and lookup are all O(log n); the tree stays balanced by keeping a
colouring invariant instead of explicit height bookkeeping.

Features
~~~~~~~~
* `tree.insert(key)`     – add a key (duplicates are silently ignored)
* `tree.delete(key)`     – remove a key (absent keys are silently ignored)
* `tree.search(key)`     – membership test, also available as `key in tree`
* `tree.min()`, `tree.max()` – smallest / largest key (EmptyTreeError if empty)
* `tree.inorder()`       – fresh ascending list of all keys
* `tree.size()`          – number of stored keys, also `len(tree)`
* iteration (`for key in tree:`) – keys in ascending order
* `tree.successor(key)`, `tree.predecessor(key)` (raise KeyError if none)
* `tree.validate()` – sanity‑check that the red‑black invariants hold

All leaves are represented by a **single shared sentinel node** per tree
(`self._nil`, always black), so every child has a well‑defined colour and the
fix‑up code never has to test for ``None``.

Typical usage
~~~~~~~~~~~~~
>>> from red_black_tree import RedBlackTree
>>> rbt = RedBlackTree()
>>> for k in (10, 20, 30):
...     rbt.insert(k)
>>> rbt.inorder()
[10, 20, 30]
>>> rbt.root.key
20
>>> rbt.delete(20)
>>> rbt.search(20)
False
>>> rbt.min(), rbt.max()
(10, 30)
"""

from __future__ import annotations

import logging
from typing import Generator, List, Optional

__all__ = ["RedBlackTree", "EmptyTreeError", "RED", "BLACK"]

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Node colour constants – using simple booleans is fastest
# ----------------------------------------------------------------------
RED = True
BLACK = False


class EmptyTreeError(ValueError):
    """Raised when ``min()`` / ``max()`` is asked of a tree holding no keys."""


def _require_int(key: object) -> None:
    # bool is an int subclass but never a meaningful key here
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"keys must be integers, not {type(key).__name__}")


class _Node:
    """Internal node object – not meant to be used directly by callers."""

    __slots__ = ("key", "color", "left", "right", "parent")

    def __init__(
        self,
        key: Optional[int] = None,
        color: bool = BLACK,
        left: Optional["_Node"] = None,
        right: Optional["_Node"] = None,
        parent: Optional["_Node"] = None,
    ) -> None:
        self.key = key
        self.color = color
        self.left = left
        self.right = right
        self.parent = parent

    def __repr__(self) -> str:
        col = "R" if self.color == RED else "B"
        return f"<{col} {self.key!r}>"


class RedBlackTree:
    """
    A mutable set of integers implemented with a red‑black binary search tree.

    The operations ``insert``, ``delete``, ``search``, ``min``, ``max``,
    ``size`` and ``inorder`` form the core API; the container protocol
    (``in``, ``len``, iteration) is layered on top of them.  Mutations are
    not thread‑safe, callers must serialise them.
    """

    __slots__ = ("_root", "_nil", "_size")

    def __init__(self) -> None:
        # The sentinel leaf node – shared by every leaf in the tree.
        self._nil: _Node = _Node()
        self._nil.left = self._nil.right = self._nil.parent = self._nil

        self._root: _Node = self._nil
        self._size: int = 0

    # ------------------------------------------------------------------
    #   Helper look‑ups (internal)
    # ------------------------------------------------------------------
    def _search_node(self, key: int) -> _Node:
        """Return the node that holds *key* or the sentinel `_nil` if not found."""
        cur = self._root
        while cur is not self._nil:
            if key < cur.key:
                cur = cur.left
            elif key > cur.key:
                cur = cur.right
            else:
                return cur
        return self._nil

    def _minimum_node(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _maximum_node(self, node: _Node) -> _Node:
        while node.right is not self._nil:
            node = node.right
        return node

    # ------------------------------------------------------------------
    #   Core operations
    # ------------------------------------------------------------------
    def insert(self, key: int) -> None:
        """Add *key* to the set; inserting a key that is already present is a no-op."""
        _require_int(key)
        parent = self._nil
        cur = self._root

        while cur is not self._nil:
            parent = cur
            if key < cur.key:
                cur = cur.left
            elif key > cur.key:
                cur = cur.right
            else:
                logger.debug("insert(%d): key already present", key)
                return

        new_node = _Node(
            key=key,
            color=RED,
            left=self._nil,
            right=self._nil,
            parent=parent,
        )

        if parent is self._nil:
            self._root = new_node
        elif key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        self._fix_insert(new_node)

    def delete(self, key: int) -> None:
        """Remove *key* from the set; deleting an absent key is a no-op."""
        _require_int(key)
        node = self._search_node(key)
        if node is self._nil:
            logger.debug("delete(%d): key not present", key)
            return

        if node.left is not self._nil and node.right is not self._nil:
            # Two children: take over the successor's key, then unlink the
            # successor node instead.  It has no left child by construction.
            successor = self._minimum_node(node.right)
            node.key = successor.key
            node = successor

        self._unlink(node)

    def search(self, key: int) -> bool:
        """Return ``True`` if *key* is stored in the tree."""
        _require_int(key)
        return self._search_node(key) is not self._nil

    def min(self) -> int:
        """Return the smallest key; raise `EmptyTreeError` on an empty tree."""
        if self._root is self._nil:
            raise EmptyTreeError("min() of an empty tree")
        return self._minimum_node(self._root).key  # type: ignore[return-value]

    def max(self) -> int:
        """Return the largest key; raise `EmptyTreeError` on an empty tree."""
        if self._root is self._nil:
            raise EmptyTreeError("max() of an empty tree")
        return self._maximum_node(self._root).key  # type: ignore[return-value]

    def size(self) -> int:
        return self._size

    def inorder(self) -> List[int]:
        """Return a new list of all keys in ascending order."""
        return list(self)

    # ------------------------------------------------------------------
    #   Container protocol
    # ------------------------------------------------------------------
    def __contains__(self, key: object) -> bool:
        if isinstance(key, bool) or not isinstance(key, int):
            return False
        return self._search_node(key) is not self._nil

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Generator[int, None, None]:
        """Yield keys in ascending order (in‑order traversal)."""
        stack: List[_Node] = []
        cur = self._root
        while stack or cur is not self._nil:
            while cur is not self._nil:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.key  # type: ignore[misc]
            cur = cur.right

    # ------------------------------------------------------------------
    #   Extra queries
    # ------------------------------------------------------------------
    @property
    def root(self) -> Optional[_Node]:
        """The root node, or ``None`` for an empty tree.  Read‑only inspection only."""
        return None if self._root is self._nil else self._root

    def successor(self, key: int) -> int:
        """Return the smallest key greater than *key*; raise KeyError if none."""
        _require_int(key)
        node = self._search_node(key)
        if node is self._nil:
            raise KeyError(key)

        if node.right is not self._nil:
            return self._minimum_node(node.right).key  # type: ignore[return-value]

        # Walk up until we arrive from a left child.
        up = node.parent
        while up is not self._nil and node is up.right:
            node = up
            up = up.parent
        if up is self._nil:
            raise KeyError(f"No successor for {key}")
        return up.key  # type: ignore[return-value]

    def predecessor(self, key: int) -> int:
        """Return the greatest key smaller than *key*; raise KeyError if none."""
        _require_int(key)
        node = self._search_node(key)
        if node is self._nil:
            raise KeyError(key)

        if node.left is not self._nil:
            return self._maximum_node(node.left).key  # type: ignore[return-value]

        up = node.parent
        while up is not self._nil and node is up.left:
            node = up
            up = up.parent
        if up is self._nil:
            raise KeyError(f"No predecessor for {key}")
        return up.key  # type: ignore[return-value]

    def black_height(self) -> int:
        """Number of black nodes on any root‑to‑leaf path, the sentinel excluded."""
        height = 0
        node = self._root
        while node is not self._nil:
            if node.color == BLACK:
                height += 1
            node = node.left
        return height

    def clear(self) -> None:
        """Remove every key.  Nodes are released with the old root."""
        self._root = self._nil
        self._nil.parent = self._nil
        self._size = 0

    # ------------------------------------------------------------------
    #   Left / right rotations – helper primitives
    # ------------------------------------------------------------------
    def _rotate_left(self, node: _Node) -> None:
        """Promote `node.right` into `node`'s place; `node` becomes its left child."""
        pivot = node.right
        if pivot is self._nil:
            raise RuntimeError("rotate_left called on a node with nil right child")
        logger.debug("rotate left at %d", node.key)

        node.right = pivot.left
        if pivot.left is not self._nil:
            pivot.left.parent = node

        self._replace_child(node, pivot)

        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node) -> None:
        """Promote `node.left` into `node`'s place; `node` becomes its right child."""
        pivot = node.left
        if pivot is self._nil:
            raise RuntimeError("rotate_right called on a node with nil left child")
        logger.debug("rotate right at %d", node.key)

        node.left = pivot.right
        if pivot.right is not self._nil:
            pivot.right.parent = node

        self._replace_child(node, pivot)

        pivot.right = node
        node.parent = pivot

    def _replace_child(self, old: _Node, new: _Node) -> None:
        """Hang *new* in the slot *old* occupies under its parent (or at the root)."""
        parent = old.parent
        if parent is self._nil:
            self._root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new
        # The sentinel's parent is set too; the delete fix-up relies on it.
        new.parent = parent

    # ------------------------------------------------------------------
    #   Insert fix‑up
    # ------------------------------------------------------------------
    def _fix_insert(self, node: _Node) -> None:
        """Restore red‑black properties after attaching the RED `node`."""
        while node.parent.color == RED:
            parent = node.parent
            grandparent = parent.parent  # red parent is never the root
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color == RED:
                    logger.debug("insert fix-up at %d: red uncle", node.key)
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    node = grandparent
                    continue
                if node is parent.right:
                    logger.debug("insert fix-up at %d: left-right zig-zag", node.key)
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                logger.debug("insert fix-up at %d: left-left line", node.key)
                parent.color = BLACK
                grandparent.color = RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if uncle.color == RED:
                    logger.debug("insert fix-up at %d: red uncle", node.key)
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    node = grandparent
                    continue
                if node is parent.left:
                    logger.debug("insert fix-up at %d: right-left zig-zag", node.key)
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                logger.debug("insert fix-up at %d: right-right line", node.key)
                parent.color = BLACK
                grandparent.color = RED
                self._rotate_left(grandparent)
        self._root.color = BLACK

    # ------------------------------------------------------------------
    #   Deletion helpers
    # ------------------------------------------------------------------
    def _unlink(self, node: _Node) -> None:
        """Physically remove `node`, which has at most one real child."""
        child = node.left if node.left is not self._nil else node.right
        self._replace_child(node, child)
        self._size -= 1

        # Removing a red node never changes a black height.
        if node.color == BLACK:
            self._fix_delete(child)

    def _fix_delete(self, node: _Node) -> None:
        """
        Restore red‑black properties after a black node was removed.
        `node` took the removed node's place and carries an extra black; it may
        be the sentinel, whose `parent` then points at the splice site.
        """
        while node is not self._root and node.color == BLACK:
            parent = node.parent
            if node is parent.left:
                sibling = parent.right
                if sibling.color == RED:
                    logger.debug("delete fix-up: red sibling %d", sibling.key)
                    sibling.color = BLACK
                    parent.color = RED
                    self._rotate_left(parent)
                    sibling = parent.right
                if sibling.left.color == BLACK and sibling.right.color == BLACK:
                    logger.debug("delete fix-up: black nephews under %d", sibling.key)
                    sibling.color = RED
                    node = parent
                    continue
                if sibling.right.color == BLACK:
                    logger.debug("delete fix-up: red near nephew under %d", sibling.key)
                    sibling.left.color = BLACK
                    sibling.color = RED
                    self._rotate_right(sibling)
                    sibling = parent.right
                logger.debug("delete fix-up: red far nephew under %d", sibling.key)
                sibling.color = parent.color
                parent.color = BLACK
                sibling.right.color = BLACK
                self._rotate_left(parent)
                node = self._root
            else:
                sibling = parent.left
                if sibling.color == RED:
                    logger.debug("delete fix-up: red sibling %d", sibling.key)
                    sibling.color = BLACK
                    parent.color = RED
                    self._rotate_right(parent)
                    sibling = parent.left
                if sibling.left.color == BLACK and sibling.right.color == BLACK:
                    logger.debug("delete fix-up: black nephews under %d", sibling.key)
                    sibling.color = RED
                    node = parent
                    continue
                if sibling.left.color == BLACK:
                    logger.debug("delete fix-up: red near nephew under %d", sibling.key)
                    sibling.right.color = BLACK
                    sibling.color = RED
                    self._rotate_left(sibling)
                    sibling = parent.left
                logger.debug("delete fix-up: red far nephew under %d", sibling.key)
                sibling.color = parent.color
                parent.color = BLACK
                sibling.left.color = BLACK
                self._rotate_right(parent)
                node = self._root
        node.color = BLACK

    # ------------------------------------------------------------------
    #   Validation – useful for debugging and tests
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify that the tree satisfies all red‑black invariants.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        assert self._nil.color == BLACK, "Sentinel is not black"
        if self._root is self._nil:
            assert self._size == 0, f"Empty tree reports size {self._size}"
            return
        assert self._root.color == BLACK, "Root is not black"
        assert self._root.parent is self._nil, "Root has a parent"

        count = 0

        def walk(node: _Node, low: Optional[int], high: Optional[int]) -> int:
            """Check the subtree under *node* and return its black height."""
            nonlocal count
            if node is self._nil:
                return 1
            count += 1

            if low is not None:
                assert node.key > low, f"BST property violated at {node.key}"
            if high is not None:
                assert node.key < high, f"BST property violated at {node.key}"

            if node.color == RED:
                assert node.left.color == BLACK, f"Red node {node.key} has red left child"
                assert node.right.color == BLACK, f"Red node {node.key} has red right child"

            for child in (node.left, node.right):
                if child is not self._nil:
                    assert child.parent is node, f"Broken parent link under {node.key}"

            left_black = walk(node.left, low, node.key)
            right_black = walk(node.right, node.key, high)
            assert left_black == right_black, f"Black-height mismatch at {node.key}"
            return left_black + (1 if node.color == BLACK else 0)

        walk(self._root, None, None)
        assert count == self._size, f"Size is {self._size} but tree holds {count} nodes"

    # ------------------------------------------------------------------
    #   String forms
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return " ".join(str(key) for key in self)

    def __repr__(self) -> str:
        return f"<RedBlackTree {self.inorder()!r}>"

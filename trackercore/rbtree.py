"""Red-black tree keyed by integer values, with nodes that carry a data payload."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class RedBlackNode:
    """A tree node: an integer key, a payload and its links."""

    value: int
    data: Any = None
    black: bool = True
    father: Optional["RedBlackNode"] = field(default=None, repr=False)
    left: Optional["RedBlackNode"] = field(default=None, repr=False)
    right: Optional["RedBlackNode"] = field(default=None, repr=False)


class RedBlackTree:
    """A self-balancing binary search tree of ``RedBlackNode`` objects.

    Nodes are owned by the caller: ``remove`` hands back the node that was
    unlinked so it can be inserted into another tree.
    """

    def __init__(self) -> None:
        self.root: Optional[RedBlackNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[RedBlackNode]:
        """Yield the nodes in ascending key order."""
        stack: list[RedBlackNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def find(self, value: int) -> Optional[RedBlackNode]:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if node.value > value else node.right
        return None

    def count_black_height(self, node: RedBlackNode) -> int:
        """Count the black nodes on the path from ``node`` up to the root."""
        height = 0
        current: Optional[RedBlackNode] = node
        while current is not None:
            if current.black:
                height += 1
            current = current.father
        return height

    def double_red_node(self, node: Optional[RedBlackNode]) -> Optional[RedBlackNode]:
        """Return the first red node with a red father below ``node``, in pre-order."""
        stack = [node] if node is not None else []
        while stack:
            current = stack.pop()
            if not current.black and current.father is not None and not current.father.black:
                return current
            if current.right is not None:
                stack.append(current.right)
            if current.left is not None:
                stack.append(current.left)
        return None

    # -- structural helpers -------------------------------------------------

    def _bst_insert(self, node: RedBlackNode) -> bool:
        if self.root is None:
            self.root = node
            node.father = None
            return True
        current = self.root
        while True:
            if node.value < current.value:
                if current.left is None:
                    current.left = node
                    node.father = current
                    return True
                current = current.left
            elif node.value > current.value:
                if current.right is None:
                    current.right = node
                    node.father = current
                    return True
                current = current.right
            else:
                return False

    def _replace_in_parent(self, node: RedBlackNode, new: Optional[RedBlackNode]) -> None:
        father = node.father
        if father is not None:
            if node is father.left:
                father.left = new
            else:
                father.right = new
        else:
            self.root = new
        if new is not None:
            new.father = father

    def _bst_remove(self, node: RedBlackNode) -> tuple[RedBlackNode, Optional[RedBlackNode]]:
        """Unlink the node holding ``node``'s key; return it and its replacer."""
        while node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.data, successor.data = successor.data, node.data
            node.value, successor.value = successor.value, node.value
            node = successor
        replacer = node.left if node.left is not None else node.right
        self._replace_in_parent(node, replacer)
        return node, replacer

    def _rotate_left(self, node: RedBlackNode) -> None:
        pivot = node.right
        node.right = pivot.left
        if node.right is not None:
            node.right.father = node
        pivot.father = node.father
        if node.father is None:
            self.root = pivot
        elif node is node.father.left:
            node.father.left = pivot
        else:
            node.father.right = pivot
        pivot.left = node
        node.father = pivot

    def _rotate_right(self, node: RedBlackNode) -> None:
        pivot = node.left
        node.left = pivot.right
        if node.left is not None:
            node.left.father = node
        pivot.father = node.father
        if node.father is None:
            self.root = pivot
        elif node is node.father.left:
            node.father.left = pivot
        else:
            node.father.right = pivot
        pivot.right = node
        node.father = pivot

    @staticmethod
    def _swap_colors(first: RedBlackNode, second: RedBlackNode) -> None:
        first.black, second.black = second.black, first.black

    @staticmethod
    def _sibling(node: Optional[RedBlackNode], father: Optional[RedBlackNode]) -> Optional[RedBlackNode]:
        if father is None:
            return None
        if node is father.left:
            return father.right
        if node is father.right:
            return father.left
        return None

    # -- public mutation ----------------------------------------------------

    def insert(self, node: RedBlackNode) -> None:
        """Link ``node`` into the tree and rebalance.

        Raises ValueError if a node with the same key is already present.
        """
        node.black = False
        node.father = None
        node.left = None
        node.right = None

        if not self._bst_insert(node):
            raise ValueError(f"value {node.value} is already in the tree")
        self._size += 1

        while node is not self.root and not node.black and not node.father.black:
            father = node.father
            grandfather = father.father

            if father is grandfather.left:
                uncle = grandfather.right
                if uncle is not None and not uncle.black:
                    grandfather.black = False
                    father.black = True
                    uncle.black = True
                    node = grandfather
                else:
                    if node is father.right:
                        self._rotate_left(father)
                        node = father
                        father = node.father
                    self._rotate_right(grandfather)
                    self._swap_colors(father, grandfather)
                    node = father
            else:
                uncle = grandfather.left
                if uncle is not None and not uncle.black:
                    grandfather.black = False
                    father.black = True
                    uncle.black = True
                    node = grandfather
                else:
                    if node is father.left:
                        self._rotate_right(father)
                        node = father
                        father = node.father
                    self._rotate_left(grandfather)
                    self._swap_colors(father, grandfather)
                    node = father

        self.root.black = True

    def remove(self, node: Optional[RedBlackNode]) -> Optional[RedBlackNode]:
        """Remove the key held by ``node`` and return the node actually unlinked.

        The returned node holds the removed key and payload; it need not be
        the node that was passed in.
        """
        if node is None:
            return None

        removed, replacer = self._bst_remove(node)
        self._size -= 1

        either_red = not removed.black
        if replacer is not None:
            if not replacer.black:
                either_red = True
            replacer.black = True
        if either_red:
            return removed

        double_black = True
        v_father = removed.father
        u_node = replacer

        while double_black and u_node is not self.root:
            current_father = v_father if v_father is not None else u_node.father
            sibling = self._sibling(u_node, current_father)

            left_red = right_red = False

            if sibling is not None:
                if not sibling.black:
                    sibling_father = sibling.father
                    if sibling is sibling_father.left:
                        self._rotate_right(sibling_father)
                    else:
                        self._rotate_left(sibling_father)
                    self._swap_colors(sibling, sibling_father)
                    sibling = self._sibling(u_node, current_father)

                if sibling is not None:
                    left_red = sibling.left is not None and not sibling.left.black
                    right_red = sibling.right is not None and not sibling.right.black

            if left_red or right_red:
                if sibling is sibling.father.left:
                    if not left_red and right_red:
                        red_child = sibling.right
                        self._rotate_left(sibling)
                        self._swap_colors(red_child, sibling)
                    sibling = self._sibling(u_node, current_father)
                    sibling.black = current_father.black
                    current_father.black = True
                    sibling.left.black = True
                    self._rotate_right(current_father)
                else:
                    if not right_red and left_red:
                        red_child = sibling.left
                        self._rotate_right(sibling)
                        self._swap_colors(red_child, sibling)
                    sibling = self._sibling(u_node, current_father)
                    sibling.black = current_father.black
                    current_father.black = True
                    sibling.right.black = True
                    self._rotate_left(current_father)
                double_black = False
            else:
                if sibling is not None:
                    sibling.black = False
                if u_node is not None:
                    if u_node.father is not None:
                        if not u_node.father.black:
                            u_node.father.black = True
                            double_black = False
                        u_node = u_node.father
                elif v_father is not None:
                    if not v_father.black:
                        v_father.black = True
                        double_black = False
                    u_node = v_father
                    v_father = None

        if u_node is self.root and u_node is not None:
            u_node.black = True
        if self.root is not None:
            self.root.black = True

        return removed
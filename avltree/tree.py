
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional


class EmptyTreeError(RuntimeError):
    """Raised when a minimum or maximum is requested from an empty tree."""


class Node:
    """A tree node holding a key, its cached subtree height and two children."""
    __slots__ = '_key', '_height', '_left', '_right'

    def __init__(self, key, left=None, right=None):
        self._key = key
        self._height = 1
        self._left = left
        self._right = right

    def get_key(self): return self._key
    def get_height(self) -> int: return self._height
    def get_left(self): return self._left
    def get_right(self): return self._right
    def set_key(self, key): self._key = key
    def set_height(self, height: int): self._height = height
    def set_left(self, left): self._left = left
    def set_right(self, right): self._right = right

    def __repr__(self):
        return f"Node({self._key!r}, height={self._height})"


class OrderedTree(ABC):
    """Abstract base class for a binary search tree over comparable keys."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of keys stored in the tree."""
        pass

    def is_empty(self) -> bool:
        """Return True if the tree holds no keys."""
        return len(self) == 0

    @abstractmethod
    def root(self) -> Optional[Node]:
        """Return the root node (or None if the tree is empty)."""
        pass

    @abstractmethod
    def insert(self, key: Any) -> None:
        pass

    @abstractmethod
    def remove(self, key: Any) -> None:
        pass

    @abstractmethod
    def search_iterative(self, key: Any) -> Optional[Node]:
        pass

    def __contains__(self, key: Any) -> bool:
        return self.search_iterative(key) is not None

    # ------------------ Traversals ------------------
    def _subtree_preorder(self, node: Optional[Node]) -> Iterable[Node]:
        if node is not None:
            yield node
            yield from self._subtree_preorder(node.get_left())
            yield from self._subtree_preorder(node.get_right())

    def _subtree_inorder(self, node: Optional[Node]) -> Iterable[Node]:
        if node is not None:
            yield from self._subtree_inorder(node.get_left())
            yield node
            yield from self._subtree_inorder(node.get_right())

    def _subtree_postorder(self, node: Optional[Node]) -> Iterable[Node]:
        if node is not None:
            yield from self._subtree_postorder(node.get_left())
            yield from self._subtree_postorder(node.get_right())
            yield node

    def _visit_all(self, nodes: Iterable[Node], visit: Optional[Callable[[Any], Any]]) -> List[Any]:
        keys = []
        for node in nodes:
            key = node.get_key()
            if visit is not None:
                visit(key)
            keys.append(key)
        return keys

    def pre_order(self, visit: Optional[Callable[[Any], Any]] = None) -> List[Any]:
        """Visit keys node-left-right; return them as a list."""
        return self._visit_all(self._subtree_preorder(self.root()), visit)

    def in_order(self, visit: Optional[Callable[[Any], Any]] = None) -> List[Any]:
        """Visit keys left-node-right (ascending order); return them as a list."""
        return self._visit_all(self._subtree_inorder(self.root()), visit)

    def post_order(self, visit: Optional[Callable[[Any], Any]] = None) -> List[Any]:
        """Visit keys left-right-node; return them as a list."""
        return self._visit_all(self._subtree_postorder(self.root()), visit)


class BalancedTree(OrderedTree):
    """
    AVL tree: a binary search tree whose every node keeps the heights of its
    two subtrees within one of each other.

    Mutations are recursive rewrites. Each helper takes the root of a subtree
    and returns the root of that subtree after the change and any rotation;
    the caller stores the returned node back into the slot it came from.
    """

    def __init__(self, keys: Optional[Iterable[Any]] = None):
        self._root: Optional[Node] = None
        self._size = 0
        if keys is not None:
            for key in keys:
                self.insert(key)

    def __len__(self) -> int: return self._size
    def root(self) -> Optional[Node]: return self._root

    def __repr__(self):
        return f"BalancedTree(size={self._size}, height={self.height()})"

    # ------------------ Height bookkeeping ------------------
    def _get_height(self, node: Optional[Node]) -> int:
        """Return the cached height of node (or 0 if None)."""
        if node is None: return 0
        return node.get_height()

    def _update_height(self, node: Node) -> None:
        node.set_height(1 + max(self._get_height(node.get_left()),
                                self._get_height(node.get_right())))

    def _balance_factor(self, node: Optional[Node]) -> int:
        """Return height(left) - height(right) for node (0 if None)."""
        if node is None: return 0
        return self._get_height(node.get_left()) - self._get_height(node.get_right())

    def height(self) -> int:
        """Return the height of the tree: 0 when empty, 1 for a single key."""
        return self._get_height(self._root)

    # ------------------ Rotations ------------------
    def _rotate_right(self, node: Node) -> Node:
        """LL case: the left child becomes the subtree root."""
        new_root = node.get_left()
        node.set_left(new_root.get_right())
        new_root.set_right(node)
        self._update_height(node)
        self._update_height(new_root)
        return new_root

    def _rotate_left(self, node: Node) -> Node:
        """RR case: the right child becomes the subtree root."""
        new_root = node.get_right()
        node.set_right(new_root.get_left())
        new_root.set_left(node)
        self._update_height(node)
        self._update_height(new_root)
        return new_root

    def _rotate_left_right(self, node: Node) -> Node:
        """LR case: rotate the left child left, then the node right."""
        node.set_left(self._rotate_left(node.get_left()))
        return self._rotate_right(node)

    def _rotate_right_left(self, node: Node) -> Node:
        """RL case: rotate the right child right, then the node left."""
        node.set_right(self._rotate_right(node.get_right()))
        return self._rotate_left(node)

    # ------------------ Rebalancing ------------------
    def _rebalance_after_insert(self, node: Node, key: Any) -> Node:
        """Restore balance at node; the inserted key picks the rotation."""
        self._update_height(node)
        balance = self._balance_factor(node)
        if balance == 2:
            if key < node.get_left().get_key():
                return self._rotate_right(node)
            return self._rotate_left_right(node)
        if balance == -2:
            if key > node.get_right().get_key():
                return self._rotate_left(node)
            return self._rotate_right_left(node)
        return node

    def _rebalance_after_remove(self, node: Node) -> Node:
        """Restore balance at node; the grandchildren's heights pick the rotation."""
        self._update_height(node)
        balance = self._balance_factor(node)
        if balance == 2:
            if self._balance_factor(node.get_left()) >= 0:
                return self._rotate_right(node)
            return self._rotate_left_right(node)
        if balance == -2:
            if self._balance_factor(node.get_right()) <= 0:
                return self._rotate_left(node)
            return self._rotate_right_left(node)
        return node

    # ------------------ Insertion ------------------
    def insert(self, key: Any) -> None:
        """Insert key. A key already in the tree is ignored."""
        self._root = self._insert(self._root, key)

    def _insert(self, node: Optional[Node], key: Any) -> Node:
        if node is None:
            self._size += 1
            return Node(key)
        if key < node.get_key():
            node.set_left(self._insert(node.get_left(), key))
        elif key > node.get_key():
            node.set_right(self._insert(node.get_right(), key))
        else:
            return node  # duplicate
        return self._rebalance_after_insert(node, key)

    # ------------------ Removal ------------------
    def remove(self, key: Any) -> None:
        """Remove key if present; removing an absent key does nothing."""
        self._root = self._remove(self._root, key)

    def _remove(self, node: Optional[Node], key: Any) -> Optional[Node]:
        if node is None:
            return None

        if key < node.get_key():
            node.set_left(self._remove(node.get_left(), key))
        elif key > node.get_key():
            node.set_right(self._remove(node.get_right(), key))
        elif node.get_left() is not None and node.get_right() is not None:
            # Replace from the taller side; ties go right.
            if self._get_height(node.get_left()) > self._get_height(node.get_right()):
                replacement = self._subtree_last_node(node.get_left()).get_key()
                node.set_key(replacement)
                node.set_left(self._remove(node.get_left(), replacement))
            else:
                replacement = self._subtree_first_node(node.get_right()).get_key()
                node.set_key(replacement)
                node.set_right(self._remove(node.get_right(), replacement))
        else:
            child = node.get_left() if node.get_left() is not None else node.get_right()
            node.set_left(None)
            node.set_right(None)
            self._size -= 1
            return child

        return self._rebalance_after_remove(node)

    # ------------------ Search ------------------
    def search_recursive(self, key: Any) -> Optional[Node]:
        """Return the node holding key, or None."""
        return self._search_recursive(self._root, key)

    def _search_recursive(self, node: Optional[Node], key: Any) -> Optional[Node]:
        if node is None:
            return None
        if key < node.get_key():
            return self._search_recursive(node.get_left(), key)
        if key > node.get_key():
            return self._search_recursive(node.get_right(), key)
        return node

    def search_iterative(self, key: Any) -> Optional[Node]:
        """Return the node holding key, or None. Walks down without recursion."""
        walk = self._root
        while walk is not None:
            if key < walk.get_key():
                walk = walk.get_left()
            elif key > walk.get_key():
                walk = walk.get_right()
            else:
                return walk
        return None

    search = search_iterative

    # ------------------ Min / Max ------------------
    def _subtree_first_node(self, node: Node) -> Node:
        """Return the leftmost node of the subtree rooted at node."""
        walk = node
        while walk.get_left() is not None:
            walk = walk.get_left()
        return walk

    def _subtree_last_node(self, node: Node) -> Node:
        """Return the rightmost node of the subtree rooted at node."""
        walk = node
        while walk.get_right() is not None:
            walk = walk.get_right()
        return walk

    def find_min(self) -> Any:
        """Return the smallest key. Raises EmptyTreeError if the tree is empty."""
        if self._root is None:
            raise EmptyTreeError("find_min on an empty tree")
        return self._subtree_first_node(self._root).get_key()

    def find_max(self) -> Any:
        """Return the largest key. Raises EmptyTreeError if the tree is empty."""
        if self._root is None:
            raise EmptyTreeError("find_max on an empty tree")
        return self._subtree_last_node(self._root).get_key()

    # ------------------ Teardown ------------------
    def destroy(self) -> None:
        """Release every node, children before parents. Safe to call repeatedly."""
        for node in self._subtree_postorder(self._root):
            node.set_left(None)
            node.set_right(None)
        self._root = None
        self._size = 0

    # ------------------ Diagnostics ------------------
    def describe(self) -> List[str]:
        """
        Return one line per node in pre-order naming its position, e.g.
        "3 is root", "1 is 3's left child", "7 is 3's right child".
        """
        lines: List[str] = []
        self._describe(self._root, None, None, lines)
        return lines

    def _describe(self, node: Optional[Node], parent: Optional[Node], side: Optional[str], lines: List[str]) -> None:
        if node is None:
            return
        if parent is None:
            lines.append(f"{node.get_key()} is root")
        else:
            lines.append(f"{node.get_key()} is {parent.get_key()}'s {side} child")
        self._describe(node.get_left(), node, "left", lines)
        self._describe(node.get_right(), node, "right", lines)

    def is_valid(self) -> bool:
        """Return True if ordering, balance, cached heights and size all check out."""
        count = 0
        previous = None
        for node in self._subtree_inorder(self._root):
            if count and not previous < node.get_key():
                return False
            expected = 1 + max(self._get_height(node.get_left()), self._get_height(node.get_right()))
            if node.get_height() != expected or abs(self._balance_factor(node)) > 1:
                return False
            previous = node.get_key()
            count += 1
        return count == self._size

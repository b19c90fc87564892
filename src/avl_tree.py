import sys
from typing import TypeVar, Generic, List, Iterator, Optional, TextIO

T = TypeVar('T')


class AVLTree(Generic[T]):
    """Self-balancing binary search tree over totally ordered values.

    Values are their own keys and are compared with ``<`` only. Inserting a
    value that is already present is a no-op. Node heights follow the
    convention that a leaf has height 0 and an absent subtree height -1.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['AVLTree.Node'] = None
            self.right: Optional['AVLTree.Node'] = None
            self.height: int = 0

    def __init__(self) -> None:
        self._root: Optional[AVLTree.Node] = None
        self._size: int = 0

    # Rebalancing primitives

    @staticmethod
    def _height(node: Optional[Node]) -> int:
        if node is None:
            return -1
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._height(node.left), self._height(node.right))

    def _balance_factor(self, node: Node) -> int:
        return self._height(node.left) - self._height(node.right)

    def _rotate_left(self, node: Node) -> Node:
        """Lift the right child into ``node``'s place and return it."""
        pivot = node.right
        assert pivot is not None
        node.right = pivot.left
        pivot.left = node

        self._update_height(node)
        self._update_height(pivot)

        return pivot

    def _rotate_right(self, node: Node) -> Node:
        """Lift the left child into ``node``'s place and return it."""
        pivot = node.left
        assert pivot is not None
        node.left = pivot.right
        pivot.right = node

        self._update_height(node)
        self._update_height(pivot)

        return pivot

    def _double_rotate_left_right(self, node: Node) -> Node:
        assert node.left is not None
        node.left = self._rotate_left(node.left)
        return self._rotate_right(node)

    def _double_rotate_right_left(self, node: Node) -> Node:
        assert node.right is not None
        node.right = self._rotate_right(node.right)
        return self._rotate_left(node)

    def _balance(self, node: Node) -> Node:
        """Restore the AVL property at ``node`` and return the subtree root.

        A single rotation is used whenever the heavy child's outer subtree is
        at least as tall as its inner one; deletion relies on that tie going
        to the single rotation.
        """
        balance = self._balance_factor(node)

        if balance > 1:
            left = node.left
            assert left is not None
            if self._height(left.left) >= self._height(left.right):
                node = self._rotate_right(node)
            else:
                node = self._double_rotate_left_right(node)
        elif balance < -1:
            right = node.right
            assert right is not None
            if self._height(right.right) >= self._height(right.left):
                node = self._rotate_left(node)
            else:
                node = self._double_rotate_right_left(node)

        self._update_height(node)
        return node

    # Mutation

    def _add(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            self._size += 1
            return AVLTree.Node(value)

        if value < node.value:
            node.left = self._add(node.left, value)
        elif node.value < value:
            node.right = self._add(node.right, value)
        else:
            return node

        return self._balance(node)

    def add(self, value: T) -> None:
        self._root = self._add(self._root, value)

    def _remove(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif node.value < value:
            node.right = self._remove(node.right, value)
        elif node.left is not None and node.right is not None:
            node.value = self._find_min_node(node.right).value
            node.right = self._remove(node.right, node.value)
        else:
            self._size -= 1
            return node.left if node.left is not None else node.right

        return self._balance(node)

    def remove(self, value: T) -> None:
        self._root = self._remove(self._root, value)

    def _clear(self, node: Optional[Node]) -> None:
        if node is None:
            return
        self._clear(node.left)
        self._clear(node.right)
        node.left = None
        node.right = None

    def clear(self) -> None:
        self._clear(self._root)
        self._root = None
        self._size = 0

    # Queries

    def contains(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return True
        return False

    def _find_min_node(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max_node(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def find_min(self) -> T:
        if self._root is None:
            raise ValueError("find_min from empty tree")
        return self._find_min_node(self._root).value

    def find_max(self) -> T:
        if self._root is None:
            raise ValueError("find_max from empty tree")
        return self._find_max_node(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        return self._height(self._root)

    # Traversal

    def _iter_pre_order(self) -> Iterator[T]:
        if self._root is None:
            return
        stack: List[AVLTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def print_pre_order(self, out: Optional[TextIO] = None) -> None:
        """Write every value followed by a space, in pre-order, to ``out``.

        Test harnesses diff this output against expected sequences, so the
        order must stay node, left subtree, right subtree.
        """
        if out is None:
            out = sys.stdout
        for value in self._iter_pre_order():
            out.write(f"{value} ")

    def pre_order(self) -> List[T]:
        return list(self._iter_pre_order())

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[AVLTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[AVLTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def _copy(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        clone = AVLTree.Node(node.value)
        clone.height = node.height
        clone.left = self._copy(node.left)
        clone.right = self._copy(node.right)
        return clone

    def copy(self) -> 'AVLTree[T]':
        clone: AVLTree[T] = AVLTree()
        clone._root = self._copy(self._root)
        clone._size = self._size
        return clone

    # Invariant checks

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if abs(self._balance_factor(node)) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self._root)

    def _measure(self, node: Optional[Node]) -> int:
        """Recompute the height of ``node`` from scratch, or -2 if any stored height is stale."""
        if node is None:
            return -1
        left = self._measure(node.left)
        right = self._measure(node.right)
        if left == -2 or right == -2:
            return -2
        measured = 1 + max(left, right)
        if measured != node.height:
            return -2
        return measured

    def is_valid(self) -> bool:
        """Check ordering, stored heights, balance and the size counter."""
        values = self.in_order()
        for prev, cur in zip(values, values[1:]):
            if not prev < cur:
                return False
        return (
            len(values) == self._size
            and self._measure(self._root) != -2
            and self.is_balanced()
        )

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"

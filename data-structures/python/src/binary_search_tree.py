import logging
from typing import TypeVar, Generic, List, Iterator, Optional, Tuple

T = TypeVar('T')

logger = logging.getLogger(__name__)


class _Node(Generic[T]):
    __slots__ = ("value", "left", "right")

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: _Link[T] = _Link()
        self.right: _Link[T] = _Link()

    def is_leaf(self) -> bool:
        return self.left.is_empty() and self.right.is_empty()

    def has_left_child(self) -> bool:
        return not self.left.is_empty()

    def has_right_child(self) -> bool:
        return not self.right.is_empty()


class _Link(Generic[T]):
    """A slot in the tree: empty, or the sole owner of one node.

    Every structural change is a reassignment of some slot's ``node``, so
    no parent pointers are needed. Descent walks from slot to slot in a
    loop, which keeps degenerate trees clear of the recursion limit.
    """

    __slots__ = ("node",)

    def __init__(self, node: Optional[_Node[T]] = None) -> None:
        self.node: Optional[_Node[T]] = node

    def is_empty(self) -> bool:
        return self.node is None

    def take(self) -> Optional[_Node[T]]:
        node = self.node
        self.node = None
        return node

    def insert(self, value: T) -> bool:
        link = self
        while link.node is not None:
            node = link.node
            if value < node.value:
                link = node.left
            elif node.value < value:
                link = node.right
            else:
                return False
        link.node = _Node(value)
        return True

    def delete(self, value: T) -> Optional[T]:
        link = self._find(value)
        if link is None:
            logger.debug("delete miss for %r", value)
            return None

        node = link.node
        assert node is not None
        if node.is_leaf():
            logger.debug("delete %r: leaf", value)
            link.node = None
            return node.value
        if node.has_left_child() and not node.has_right_child():
            logger.debug("delete %r: left child only", value)
            link.node = node.left.take()
            return node.value
        if node.has_right_child() and not node.has_left_child():
            logger.debug("delete %r: right child only", value)
            link.node = node.right.take()
            return node.value

        logger.debug("delete %r: two children, promoting right subtree minimum", value)
        successor = node.right.delete_min()
        old_value = node.value
        node.value = successor.value
        return old_value

    def delete_min(self) -> _Node[T]:
        """Detach and return the node holding the smallest value below this slot.

        Only valid on a non-empty slot.
        """
        link = self
        assert link.node is not None, "delete_min on an empty subtree"
        while link.node.has_left_child():
            link = link.node.left
            assert link.node is not None

        node = link.node
        link.node = node.right.take()
        return node

    def contains(self, value: T) -> bool:
        return self._find(value) is not None

    def size(self) -> int:
        count = 0
        pending: List[_Node[T]] = [] if self.node is None else [self.node]
        while pending:
            node = pending.pop()
            count += 1
            if node.left.node is not None:
                pending.append(node.left.node)
            if node.right.node is not None:
                pending.append(node.right.node)
        return count

    def height(self) -> int:
        best = 0
        pending: List[Tuple[_Node[T], int]] = [] if self.node is None else [(self.node, 1)]
        while pending:
            node, depth = pending.pop()
            best = max(best, depth)
            if node.left.node is not None:
                pending.append((node.left.node, depth + 1))
            if node.right.node is not None:
                pending.append((node.right.node, depth + 1))
        return best

    def _find(self, value: T) -> Optional['_Link[T]']:
        link = self
        while link.node is not None:
            node = link.node
            if value < node.value:
                link = node.left
            elif node.value < value:
                link = node.right
            else:
                return link
        return None


class TreeIterator(Generic[T]):
    """In-order iterator over a BinarySearchTree.

    Holds the nodes that have been reached but not yet yielded; the top of
    the stack is always the smallest value still to come. The tree must not
    be mutated while the iterator is in use.
    """

    def __init__(self, tree: 'BinarySearchTree[T]') -> None:
        self._tree = tree
        self._expected_version = tree._version
        self._unvisited: List[_Node[T]] = []
        self._push_left_nodes(tree._root)

    def _push_left_nodes(self, link: _Link[T]) -> None:
        node = link.node
        while node is not None:
            self._unvisited.append(node)
            node = node.left.node

    def __iter__(self) -> 'TreeIterator[T]':
        return self

    def __next__(self) -> T:
        if not self._unvisited:
            raise StopIteration
        if self._tree._version != self._expected_version:
            raise RuntimeError("BinarySearchTree mutated during iteration")
        node = self._unvisited.pop()
        self._push_left_nodes(node.right)
        return node.value


class BinarySearchTree(Generic[T]):
    def __init__(self) -> None:
        self._root: _Link[T] = _Link()
        self._version: int = 0

    def insert(self, value: T) -> None:
        if self._root.insert(value):
            self._version += 1

    def delete(self, value: T) -> Optional[T]:
        removed = self._root.delete(value)
        if removed is not None:
            self._version += 1
        return removed

    def size(self) -> int:
        return self._root.size()

    def contains(self, value: T) -> bool:
        return self._root.contains(value)

    def iter(self) -> TreeIterator[T]:
        return TreeIterator(self)

    def is_empty(self) -> bool:
        return self._root.is_empty()

    def height(self) -> int:
        return self._root.height()

    def in_order(self) -> List[T]:
        return list(self.iter())

    def dump(self) -> str:
        """Render the tree structure, one node per line, indented by depth.

        Diagnostic only; the layout may change.
        """
        if self._root.node is None:
            return "<empty>"
        lines: List[str] = []
        pending: List[Tuple[_Node[T], int, str]] = [(self._root.node, 0, "")]
        while pending:
            node, depth, side = pending.pop()
            lines.append(f"{'    ' * depth}{side}{node.value!r}")
            if node.right.node is not None:
                pending.append((node.right.node, depth + 1, "R: "))
            if node.left.node is not None:
                pending.append((node.left.node, depth + 1, "L: "))
        return "\n".join(lines)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

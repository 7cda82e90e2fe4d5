"""A binary search tree over values of a pluggable element type."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from bstmenu.elements import ElementType


@dataclass(eq=False)
class Node:
    """A tree node holding one value."""

    value: Any
    left: Node | None = None
    right: Node | None = None


def _inorder(root: Node | None) -> Iterator[Node]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder(root: Node | None) -> Iterator[Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _postorder(root: Node | None) -> Iterator[Node]:
    reverse: list[Node] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reverse.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed(reverse)


def _level_order(root: Node | None) -> Iterator[Node]:
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def _height(root: Node | None) -> int:
    height = 0
    level = [root] if root is not None else []
    while level:
        height += 1
        level = [c for n in level for c in (n.left, n.right) if c is not None]
    return height


class BinaryTree:
    """An unbalanced binary search tree without duplicates."""

    def __init__(self, element_type: ElementType) -> None:
        self.element_type = element_type
        self._root: Node | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _inorder(self._root))

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def clear(self) -> None:
        """Remove every value."""
        self._root = None
        self._count = 0

    def _find(self, key: Any) -> Node | None:
        compare = self.element_type.compare
        node = self._root
        while node is not None:
            c = compare(key, node.value)
            if c == 0:
                return node
            node = node.left if c < 0 else node.right
        return None

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if an equal value is already present."""
        if self._root is None:
            self._root = Node(value)
            self._count = 1
            return True
        compare = self.element_type.compare
        node = self._root
        while True:
            c = compare(value, node.value)
            if c == 0:
                return False
            if c < 0:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
        self._count += 1
        return True

    def search(self, key: Any) -> bool:
        """Return whether a value equal to ``key`` is present."""
        return self._find(key) is not None

    def remove(self, key: Any) -> bool:
        """Remove the value equal to ``key``; return whether one was found."""
        compare = self.element_type.compare
        parent: Node | None = None
        went_left = False
        node = self._root
        while node is not None:
            c = compare(key, node.value)
            if c == 0:
                break
            parent, went_left = node, c < 0
            node = node.left if c < 0 else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.value = succ.value
            if succ_parent is node:
                node.right = succ.right
            else:
                succ_parent.left = succ.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif went_left:
                parent.left = child
            else:
                parent.right = child
        self._count -= 1
        return True

    def balance(self) -> None:
        """Rebuild the tree so that each node is the median of its range."""
        values = list(self)
        self.clear()
        ranges = [(0, len(values) - 1)]
        while ranges:
            low, high = ranges.pop()
            if low > high:
                continue
            mid = (low + high) // 2
            self.insert(values[mid])
            ranges.append((mid + 1, high))
            ranges.append((low, mid - 1))

    def subtree(self, key: Any) -> BinaryTree | None:
        """Return a copy of the subtree rooted at ``key``, or None if absent."""
        start = self._find(key)
        if start is None:
            return None
        out = BinaryTree(self.element_type)
        for node in _preorder(start):
            out.insert(node.value)
        return out

    def _same_shape(self, a: Node | None, b: Node | None) -> bool:
        compare = self.element_type.compare
        stack = [(a, b)]
        while stack:
            x, y = stack.pop()
            if x is None and y is None:
                continue
            if x is None or y is None:
                return False
            if compare(x.value, y.value) != 0:
                return False
            stack.append((x.right, y.right))
            stack.append((x.left, y.left))
        return True

    def contains_subtree(self, sub: BinaryTree) -> bool:
        """Return whether ``sub`` appears in this tree with the same shape."""
        if sub._root is None:
            return True
        compare = self.element_type.compare
        return any(
            compare(node.value, sub._root.value) == 0 and self._same_shape(node, sub._root)
            for node in _level_order(self._root)
        )

    def _join(self, nodes: Iterable[Node]) -> str:
        fmt = self.element_type.format
        return " ".join(fmt(node.value) for node in nodes)

    def inorder_string(self) -> str:
        """Values in sorted order, separated by spaces."""
        return self._join(_inorder(self._root))

    def preorder_string(self) -> str:
        """Values in root-left-right order, separated by spaces."""
        return self._join(_preorder(self._root))

    def postorder_string(self) -> str:
        """Values in left-right-root order, separated by spaces."""
        return self._join(_postorder(self._root))

    def formatted_string(self) -> str:
        """Nested form ``{value}(left)[right]``."""
        fmt = self.element_type.format
        parts: list[str] = []
        stack: list[Node | str | None] = [self._root]
        while stack:
            item = stack.pop()
            if item is None:
                continue
            if isinstance(item, str):
                parts.append(item)
                continue
            parts.append("{" + fmt(item.value) + "}(")
            stack.extend(("]", item.right, "[", ")", item.left))
        return "".join(parts)

    def load_traversal(self, text: str, order: str) -> None:
        """Replace the contents by inserting each whitespace-separated token in turn.

        The traversal name ``order`` is accepted but does not change the result.
        """
        self.clear()
        for token in text.split():
            self.insert(self.element_type.parse(token))

    def load_formatted(self, text: str) -> None:
        """Replace the contents by inserting every ``{value}`` found in ``text``."""
        self.clear()
        pos = 0
        while True:
            start = text.find("{", pos)
            if start < 0:
                break
            end = text.find("}", start)
            if end < 0:
                break
            self.insert(self.element_type.parse(text[start + 1 : end]))
            pos = end + 1

    def to_pairs(self) -> list[tuple[Any, Any]]:
        """Return ``(value, parent value)`` pairs in level order; the root's parent is None."""
        pairs: list[tuple[Any, Any]] = []
        if self._root is None:
            return pairs
        queue: deque[tuple[Node, Any]] = deque([(self._root, None)])
        while queue:
            node, parent = queue.popleft()
            pairs.append((node.value, parent))
            for child in (node.left, node.right):
                if child is not None:
                    queue.append((child, node.value))
        return pairs

    def load_pairs(self, pairs: Iterable[tuple[Any, Any]]) -> None:
        """Replace the contents from ``(value, parent)`` pairs.

        The first pair without a parent becomes the root, then every pair
        with a parent is inserted. Raises ValueError if no pair is a root.
        """
        self.clear()
        pairs = list(pairs)
        if not pairs:
            return
        root = next((value for value, parent in pairs if parent is None), None)
        if root is None:
            raise ValueError("no root pair")
        self.insert(root)
        for value, parent in pairs:
            if parent is not None:
                self.insert(value)

    def find_by_path(self, path: str) -> Any:
        """Follow ``L`` (left) and ``R``/``P`` (right) steps from the root.

        Other characters are ignored. Returns the value reached, or None.
        """
        node = self._root
        for step in path:
            if node is None:
                return None
            if step in "Ll":
                node = node.left
            elif step in "RrPp":
                node = node.right
        return node.value if node is not None else None

    def merge(self, other: BinaryTree) -> None:
        """Insert every value of ``other`` in level order."""
        for node in _level_order(other._root):
            self.insert(node.value)

    def render(self) -> str:
        """Return a drawing of the tree, one level per line with connectors."""
        if self._root is None:
            return "(empty)\n"
        fmt = self.element_type.format
        out = ["\n"]
        height = _height(self._root)
        max_width = (1 << height) - 1
        current: list[Node | None] = [self._root]
        level = 0
        while current and level < height:
            spacing = max_width // len(current)
            following: list[Node | None] = []
            for node in current:
                out.append(" " * (spacing // 2))
                if node is not None:
                    out.append(fmt(node.value))
                    following.extend((node.left, node.right))
                else:
                    out.append(" ")
                    following.extend((None, None))
                out.append(" " * (spacing - spacing // 2))
            out.append("\n")
            if all(node is None for node in following):
                break
            for left, right in zip(following[0::2], following[1::2]):
                out.append(" " * (spacing // 2 - 1))
                out.append("/" if left is not None else " ")
                out.append("  ")
                out.append("\\" if right is not None else " ")
                out.append(" " * (spacing - spacing // 2 - 1))
            out.append("\n")
            current = following
            level += 1
        out.append("\n")
        return "".join(out)
"""Level-order binary tree construction and inorder traversal utilities.

The module turns a flat sequence of integers into a binary tree using the
complete-tree layout (the node at index ``k`` receives the values at
``2k + 1`` and ``2k + 2`` as its children) and walks the result in inorder
sequence.

The APIs intentionally provide:

* ``TreeNode`` – a ``@dataclass`` with optional left/right children.
* ``build_tree_from_array`` – breadth-first placement driven by a FIFO queue.
* ``inorder_traversal`` / ``iter_inorder`` – recursive and explicit-stack
  generators yielding values in left, node, right order.
* ``format_inorder`` / ``print_inorder`` – the ``Inorder traversal: `` line
  used by the ``tree_inorder`` command line harness.
* ``level_order_traversal``, ``count_nodes``, ``tree_height`` and
  ``render_tree`` – inspection helpers for tests and CLI diagnostics.

Traversals never mutate the tree, so walking the same root repeatedly yields
identical sequences.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
import sys
from typing import Deque, Iterable, Iterator, List, Optional, TextIO

logger = logging.getLogger(__name__)

INORDER_LABEL = "Inorder traversal: "


@dataclass(slots=True)
class TreeNode:
    """Node representation used for binary tree algorithms."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            raise TypeError("TreeNode value must be an integer")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def build_tree_from_array(values: Iterable[int]) -> Optional[TreeNode]:
    """Construct a complete binary tree from *values* in level order.

    Element 0 becomes the root and every following element is attached as the
    left, then right, child of the oldest node still waiting for children.
    Returns ``None`` for an empty sequence. Non-integer payloads raise
    ``TypeError``.
    """

    iterator = enumerate(values)
    try:
        _, first = next(iterator)
    except StopIteration:
        return None

    root = _make_node(0, first)
    queue: Deque[TreeNode] = deque([root])
    built = 1

    while queue:
        node = queue.popleft()
        try:
            index, left_value = next(iterator)
        except StopIteration:
            break
        node.left = _make_node(index, left_value)
        queue.append(node.left)
        built += 1

        try:
            index, right_value = next(iterator)
        except StopIteration:
            break
        node.right = _make_node(index, right_value)
        queue.append(node.right)
        built += 1

    logger.debug("Built level-order tree with %d nodes", built)
    return root


def _make_node(index: int, value: object) -> TreeNode:
    if not _is_int(value):
        raise TypeError(
            f"Level-order values must be integers (index {index}: {value!r})"
        )
    return TreeNode(value)  # type: ignore[arg-type]


def inorder_traversal(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield the values of *root* in left, node, right order."""

    if root is None:
        return
    yield from inorder_traversal(root.left)
    yield root.value
    yield from inorder_traversal(root.right)


def iter_inorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Stack-based equivalent of :func:`inorder_traversal`.

    The explicit stack keeps the traversal independent of the interpreter's
    recursion limit for arbitrarily tall trees.
    """

    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def format_inorder(root: Optional[TreeNode], *, label: str = INORDER_LABEL) -> str:
    """Return *label* followed by every inorder value and a trailing space."""

    return label + "".join(f"{value} " for value in inorder_traversal(root))


def print_inorder(
    root: Optional[TreeNode],
    *,
    stream: Optional[TextIO] = None,
    label: str = INORDER_LABEL,
    iterative: bool = False,
) -> None:
    """Write the inorder line for *root* to *stream* (``sys.stdout`` by default).

    Each value is written as soon as it is visited, followed by a single space.
    The line is terminated with a newline once the traversal completes.
    """

    out = stream if stream is not None else sys.stdout
    walk = iter_inorder if iterative else inorder_traversal
    out.write(label)
    for value in walk(root):
        out.write(f"{value} ")
    out.write("\n")


def level_order_traversal(root: Optional[TreeNode]) -> List[int]:
    """Return the values of *root* in breadth-first order."""

    if root is None:
        return []
    result: List[int] = []
    queue: Deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes reachable from *root*."""

    return sum(1 for _ in iter_inorder(root))


def tree_height(root: Optional[TreeNode]) -> int:
    """Return the number of levels in *root* (``0`` for an empty tree)."""

    height = 0
    level: List[TreeNode] = [root] if root is not None else []
    while level:
        height += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return height


def render_tree(root: Optional[TreeNode]) -> str:
    """Render *root* level-by-level, marking missing nodes with ``·``.

    The renderer stops once the entire level is empty, ensuring that the output
    contains no trailing placeholder-only rows.
    """

    if root is None:
        return "<empty>"

    lines: List[str] = []
    queue: Deque[Optional[TreeNode]] = deque([root])

    while queue:
        level_count = len(queue)
        level_nodes: List[str] = []
        next_level_has_real_node = False
        for _ in range(level_count):
            node = queue.popleft()
            if node is None:
                level_nodes.append("·")
                queue.extend((None, None))
                continue

            level_nodes.append(str(node.value))
            queue.append(node.left)
            queue.append(node.right)
            if node.left is not None or node.right is not None:
                next_level_has_real_node = True

        lines.append(" ".join(level_nodes))
        if not next_level_has_real_node:
            break

    return "\n".join(lines)


__all__ = [
    "INORDER_LABEL",
    "TreeNode",
    "build_tree_from_array",
    "count_nodes",
    "format_inorder",
    "inorder_traversal",
    "iter_inorder",
    "level_order_traversal",
    "print_inorder",
    "render_tree",
    "tree_height",
]

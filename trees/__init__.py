"""Binary tree construction and traversal helpers."""

from .binary_tree import (
    INORDER_LABEL,
    TreeNode,
    build_tree_from_array,
    count_nodes,
    format_inorder,
    inorder_traversal,
    iter_inorder,
    level_order_traversal,
    print_inorder,
    render_tree,
    tree_height,
)

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

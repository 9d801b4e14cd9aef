"""Command line tool printing the inorder traversal of a level-order tree.

Running the module without arguments builds a complete binary tree from the
fixed sequence ``1..7`` and prints::

    Inorder traversal: 4 2 5 1 6 3 7

Every value is followed by a single space, matching the per-node
print-then-space behaviour of ``trees.binary_tree.print_inorder``. Optional
flags swap in a different input sequence, select the stack-based traversal or
append a level-by-level rendering of the tree.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Sequence

from trees.binary_tree import build_tree_from_array, print_inorder, render_tree

logger = logging.getLogger(__name__)

DEFAULT_VALUES = (1, 2, 3, 4, 5, 6, 7)


def _parse_values(payload: str) -> List[int]:
    """Parse a comma separated list of integers; blank entries are ignored."""

    try:
        return [int(item, 10) for item in payload.split(",") if item.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Failed to parse integer payloads: {exc}"
        ) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a level-order binary tree and print its inorder traversal.",
    )
    parser.add_argument(
        "--values",
        type=_parse_values,
        default=None,
        help=(
            "Comma separated integers placed in level order. "
            "Defaults to 1,2,3,4,5,6,7."
        ),
    )
    parser.add_argument(
        "--iterative",
        action="store_true",
        help="Traverse with an explicit stack instead of recursion.",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Also print the tree level by level after the traversal line.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Build the demo tree and print its inorder traversal."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    values = args.values if args.values is not None else list(DEFAULT_VALUES)
    logger.info("Building tree from %d values", len(values))

    try:
        root = build_tree_from_array(values)
    except TypeError as exc:  # pragma: no cover - CLI guard
        logger.error("Failed to build tree: %s", exc)
        return 1

    print_inorder(root, iterative=args.iterative)
    if args.render:
        print(render_tree(root))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())

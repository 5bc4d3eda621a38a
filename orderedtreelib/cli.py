#!/usr/bin/env python
"""
Command-line demo for orderedtreelib
====================================

Builds an integer tree and a string tree from user-supplied files and
exercises every public tree operation, printing each result under a
banner.

Usage:
    orderedtree-demo                                  # prompt for both files
    orderedtree-demo --int-file ints.txt --string-file names.txt
    orderedtree-demo --int-file ints.txt --on-error skip -v
"""

import argparse
import logging
import sys
from typing import Any, Callable, List, Optional, Sequence, TextIO

from . import __version__
from .error_policies import ContinueOnErrorsPolicy, ErrorPolicy, FailFastPolicy, StopOnErrorPolicy
from .exceptions import InputSourceError, KeyParseError
from .loader import fill_tree, load_numeric_keys, load_string_keys
from .tree import OrderedTree

logger = logging.getLogger(__name__)

INTEGER_TEST_KEYS = [20, 40, 10, 70, 99, -2, 59, 43]
STRING_TEST_KEYS = ["gene", "mary", "bea", "uma", "yan", "amy", "ron", "opal"]

_POLICIES = {
    'stop': StopOnErrorPolicy,
    'skip': ContinueOnErrorsPolicy,
    'fail': FailFastPolicy,
}


class DemoRunner:
    """Prints the tree exercise to a text stream."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None,
                 prompt: Callable[[str], str] = input):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.prompt = prompt

    def _print(self, *args, **kwargs) -> None:
        print(*args, file=self.out, **kwargs)

    def intro(self) -> None:
        self._print("\nWelcome to the Binary Search Tree (BST) program! This program\n"
                    "tests the functionality of the ordered tree. Since the tree is\n"
                    "generic, it is built twice: once with integer keys and once\n"
                    "with string keys.")

    def outro(self) -> None:
        self._print("\n\nGoodbye, and thanks for using the Binary Search Tree program!")

    def display_title(self, kind: str) -> None:
        self._print("\n")
        self._print("*" * 30)
        self._print(f"* {kind} BINARY SEARCH TREE *")
        self._print("*" * 30)

    def display_test_title(self, method: str) -> None:
        self._print()
        self._print(f"** {method} **")

    def check_properties(self, tree: OrderedTree) -> None:
        self._print(f"# of nodes:     {tree.size()}")
        self._print(f"# of leaves:    {tree.get_leaf_count()}")
        self._print(f"BST height:     {tree.get_height()}")
        self._print(f"BST width:      {tree.get_width()}")
        self._print(f"BST is empty:   {tree.empty()}")

    def show_traversals(self, tree: OrderedTree) -> None:
        self.display_test_title("TEST TRAVERSALS")
        self._print(f"Pre-order:    {tree.get_pre_order_traversal()}")
        self._print(f"In-order:     {tree.get_in_order_traversal()}")
        self._print(f"Post-order:   {tree.get_post_order_traversal()}")
        self._print(f"Level-order:  {tree.get_level_order_traversal()}")

    def show_has(self, tree: OrderedTree, keys: Sequence[Any]) -> None:
        self.display_test_title("TEST HAS")
        for key in keys:
            self._print(f"has({key}): {tree.has(key)}")

    def add_keys(self, tree: OrderedTree, keys: Sequence[Any], title: str) -> None:
        self.display_test_title(title)
        self._print("Inserting in this order: " + "".join(f"{key} " for key in keys))
        fill_tree(tree, keys)

    def remove_keys(self, tree: OrderedTree, keys: Sequence[Any]) -> None:
        self.display_test_title("TEST REMOVE")
        self._print("Removing in this order: " + "".join(f"{key} " for key in keys))
        for key in keys:
            tree.remove(key)

    def run_tree(self, kind: str, path: Optional[str],
                 load: Callable[[str], List[Any]], test_keys: Sequence[Any]) -> bool:
        """Run the full exercise for one key type.

        Returns:
            True if the source was read and the tree tests ran
        """
        self.display_title(kind.upper())
        tree: OrderedTree = OrderedTree()
        self.display_test_title("CREATE BST")
        self.check_properties(tree)

        if path is None:
            path = self.prompt(f"\nEnter {kind.lower()} file: ").strip()

        try:
            keys = load(path)
        except InputSourceError as e:
            logger.debug("%s", e)
            print("Error opening file.", file=self.err)
            return False

        self.add_keys(tree, keys, "TEST ADD")
        self.check_properties(tree)
        self.show_traversals(tree)

        self.show_has(tree, test_keys)

        self.remove_keys(tree, test_keys)
        self.check_properties(tree)
        self.show_traversals(tree)

        self.add_keys(tree, test_keys, "TEST ADD (again)")
        self.check_properties(tree)
        self.show_traversals(tree)
        return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orderedtree-demo",
        description="Exercise an ordered (binary search) tree built from key files",
    )
    parser.add_argument("--int-file", help="File of whitespace-separated integer keys")
    parser.add_argument("--string-file", help="File with one string key per line")
    parser.add_argument("--on-error", choices=sorted(_POLICIES), default="stop",
                        help="What to do with tokens that are not integers (default: stop)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None,
         out: Optional[TextIO] = None,
         err: Optional[TextIO] = None,
         prompt: Callable[[str], str] = input) -> int:
    """Entry point for the ``orderedtree-demo`` console script."""
    args = build_parser().parse_args(argv)
    err = err if err is not None else sys.stderr

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=err,
    )

    policy: ErrorPolicy = _POLICIES[args.on_error]()
    runner = DemoRunner(out=out, err=err, prompt=prompt)
    runner.intro()

    try:
        runner.run_tree("INTEGER", args.int_file,
                        lambda path: load_numeric_keys(path, int, policy),
                        INTEGER_TEST_KEYS)
    except KeyParseError as e:
        print(f"Invalid integer key: {e}", file=err)
        return 1

    runner.run_tree("STRING", args.string_file, load_string_keys, STRING_TEST_KEYS)

    runner.outro()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Key loading for orderedtreelib.

Reads keys for a tree from a text file. Two formats are supported:

- string keys: one key per line. The whole line is the key, minus its line
  terminator and a trailing carriage return left over from CRLF files.
- numeric keys: whitespace-delimited tokens, each parsed with a key type
  such as ``int`` or ``float``.

A source that cannot be opened raises InputSourceError before anything is
returned, so callers can check the source before touching a tree. Files are
decoded as UTF-8; a file that is not valid UTF-8 is read as Latin-1 instead,
one character per byte.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TypeVar, Union

from .error_policies import ErrorPolicy, StopOnErrorPolicy
from .exceptions import InputSourceError, KeyParseError
from .tree import OrderedTree

logger = logging.getLogger(__name__)

K = TypeVar("K")

PathLike = Union[str, Path]

ENCODING = "utf-8"
# Maps every byte to a character, so decoding with it cannot fail
FALLBACK_ENCODING = "latin-1"


def _read_text(path: PathLike) -> str:
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as e:
        raise InputSourceError(path, e) from e

    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError as e:
        logger.debug("%s is not valid %s (%s), reading it as %s",
                     path, ENCODING, e.reason, FALLBACK_ENCODING)
        return data.decode(FALLBACK_ENCODING)


def load_string_keys(path: PathLike) -> List[str]:
    """Read one string key per line.

    Args:
        path: File to read

    Returns:
        Keys in file order (blank lines yield empty-string keys)

    Raises:
        InputSourceError: If the file cannot be opened
    """
    text = _read_text(path)
    lines = text.split("\n")
    # A terminating newline (or an empty file) does not start another line
    if lines[-1] == "":
        lines.pop()
    keys = [line[:-1] if line.endswith("\r") else line for line in lines]

    logger.info("Loaded %d string keys from %s", len(keys), path)
    return keys


def parse_keys(tokens: Iterable[str],
               key_type: Callable[[str], K] = int,
               policy: Optional[ErrorPolicy] = None,
               source: object = None) -> List[K]:
    """Parse tokens into keys, routing failures through an error policy.

    Args:
        tokens: Raw text tokens
        key_type: Callable turning a token into a key (int, float, Decimal...)
        policy: What to do with unparsable tokens (default: StopOnErrorPolicy)
        source: Label used in error reports

    Returns:
        Parsed keys in token order
    """
    policy = policy if policy is not None else StopOnErrorPolicy()
    keys: List[K] = []
    for position, token in enumerate(tokens):
        try:
            keys.append(key_type(token))
        except (ValueError, TypeError, ArithmeticError) as e:
            error = KeyParseError(token, position, source,
                                  key_type if isinstance(key_type, type) else None)
            error.__cause__ = e
            if not policy.handle(error, "parse_key", source):
                logger.debug("Stopped reading %s at token %d", source, position)
                break
    return keys


def load_numeric_keys(path: PathLike,
                      key_type: Callable[[str], K] = int,
                      policy: Optional[ErrorPolicy] = None) -> List[K]:
    """Read whitespace-delimited tokens and parse each as ``key_type``.

    Args:
        path: File to read
        key_type: Callable turning a token into a key
        policy: Error policy for unparsable tokens (default: stop at the first one)

    Returns:
        Keys in file order

    Raises:
        InputSourceError: If the file cannot be opened
        KeyParseError: If the policy is FailFastPolicy and a token is invalid
    """
    text = _read_text(path)
    keys = parse_keys(text.split(), key_type, policy, source=path)
    logger.info("Loaded %d numeric keys from %s", len(keys), path)
    return keys


def fill_tree(tree: OrderedTree, keys: Iterable[K]) -> List[K]:
    """Add keys to a tree in order.

    Returns:
        The keys that were offered, in order
    """
    added = []
    for key in keys:
        tree.add(key)
        added.append(key)
    return added

"""Exception hierarchy for orderedtreelib.

Tree mutations never raise: duplicate inserts and removals of absent keys
are silent no-ops. The exceptions here cover the surfaces around the tree
(configuration, key loading, queries that need a non-empty tree).
"""

from typing import Any, Optional


class OrderedTreeError(Exception):
    """Base class for all orderedtreelib errors."""
    pass


class EmptyTreeError(OrderedTreeError, ValueError):
    """Raised when a query needs at least one key but the tree is empty."""
    pass


class InvalidConfigurationError(OrderedTreeError, ValueError):
    """Raised when a traversal configuration fails validation."""
    pass


class InputSourceError(OrderedTreeError, OSError):
    """Raised when a key source cannot be opened.

    Raised before any tree mutation is attempted, so a failed load never
    leaves a tree partially filled.
    """

    def __init__(self, source: Any, reason: Optional[BaseException] = None):
        self.source = source
        self.reason = reason
        message = f"Error opening file: {source}"
        if reason is not None:
            message = f"{message} ({reason})"
        super().__init__(message)


class KeyParseError(OrderedTreeError, ValueError):
    """Raised when a token from a key source cannot be parsed.

    Attributes:
        token: The raw text that failed to parse
        position: Zero-based index of the token within the source
        source: Where the token came from (usually a path)
    """

    def __init__(self, token: str, position: int, source: Any = None,
                 key_type: Optional[type] = None):
        self.token = token
        self.position = position
        self.source = source
        self.key_type = key_type
        type_name = key_type.__name__ if key_type is not None else "key"
        super().__init__(
            f"Cannot parse token {token!r} at position {position} as {type_name}"
        )

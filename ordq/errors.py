from typing import Any


class OrdqError(Exception):
    """base class for errors raised by ordq operators"""


class UnorderedSequenceError(OrdqError, ValueError):
    """an input to an ordered set operation was found out of order"""

    def __init__(self, previous_key: Any, key: Any):
        self.previous_key = previous_key
        self.key = key
        super().__init__(
            f"sequences given to ordered set operations must be ascending: "
            f"key {key!r} follows {previous_key!r}")


class SequenceCancelledError(OrdqError):
    """enumeration was cancelled by the caller"""

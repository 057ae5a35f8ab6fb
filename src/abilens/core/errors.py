"""Error taxonomy for log decoding.

Recoverable conditions (malformed ABI, no matching event, unsupported type)
are absorbed by the engine. Everything raised out of `abilens.engine` is an
`AbiLensError` subclass and is meant to reach the host boundary.
"""

from __future__ import annotations


class AbiLensError(Exception):
    """Base class for all decoding errors."""


class NotConfiguredError(AbiLensError):
    """Decode attempted before any parameters were stored."""

    def __init__(self, message: str = "Parameters have not been set.") -> None:
        super().__init__(message)


class MalformedAbiError(AbiLensError):
    """Stored ABI text is not a list of definitions."""


class MalformedInputError(AbiLensError):
    """A log record field is missing, ill-typed, or not valid hex."""


class OutOfBoundsError(AbiLensError):
    """Topics or data are shorter than the matched event requires."""

    def __init__(self, what: str, index: int, available: int) -> None:
        self.what = what
        self.index = index
        self.available = available
        super().__init__(f"{what} index {index} out of bounds (available: {available})")

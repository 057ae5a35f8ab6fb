from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from abilens.core.models import _EndOfStream


# ---------------------------------------------------------------------------
# LogSource
# ---------------------------------------------------------------------------

@runtime_checkable
class LogSource(Protocol):
    """
    Pull-style supplier of raw log records.

    Domain expectations:
    - Each call returns the next record as a mapping of JSON-typed values.
    - `None` means "no record this time"; the caller emits a nil result.
    - `END_OF_STREAM` means the input is exhausted.
    """

    def next(self) -> Mapping[str, Any] | None | _EndOfStream:
        """
        Return the next raw log record.

        Implementations:
        - IterableSource over an in-memory list or NDJSON reader
        - A host runtime's input buffer
        """
        ...
